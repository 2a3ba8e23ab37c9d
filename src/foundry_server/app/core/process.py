"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Synchronous execution of external commands.
"""

import logging
import subprocess
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

LOGGER = logging.getLogger(__name__)


#####################################################
# Exceptions
#####################################################
class LaunchFailure(Exception):
    """The command could not be started (missing binary, permission denied, ...)"""

    def __init__(self, command: str, args: Sequence[str]):
        self.command = command
        self.command_args = list(args)
        super().__init__(f"Failed to execute command: {command} {self.command_args}")


#####################################################
# Results
#####################################################
class CommandResult(BaseModel):
    """Captured outcome of a finished command."""

    model_config = ConfigDict(frozen=True)

    command: str
    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """True when the command exited with status 0."""
        return self.returncode == 0


#####################################################
# Execution
#####################################################
def execute(command: str, args: Sequence[str] = ()) -> CommandResult:
    """Run a command to completion and return its exit status and output.

    Output is decoded as UTF-8; undecodable bytes become U+FFFD.
    Raises LaunchFailure only when the process cannot be started.
    """
    LOGGER.debug("Running command: %s %s", command, list(args))
    try:
        proc = subprocess.run(
            [command, *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except (OSError, ValueError) as ex:
        raise LaunchFailure(command, args) from ex

    return CommandResult(
        command=command,
        args=list(args),
        returncode=proc.returncode,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
    )


def run_command(command: str, args: Sequence[str] = ()) -> str:
    """Run a system command and return its stdout.

    A non-zero exit is logged and otherwise ignored; use execute() when the
    exit status matters.
    """
    result = execute(command, args)
    if not result.ok:
        LOGGER.debug(
            "Command failed with status code %i: %s",
            result.returncode,
            result.stderr.strip(),
        )
    return result.stdout
