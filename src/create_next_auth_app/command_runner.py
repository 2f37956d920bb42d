"""CommandRunner: strategy pattern for running external tools.

CommandRunner spawns real processes; DryRunCommandRunner only reports what
would be run. Both return a CommandResult and leave exit-status policy to
the caller.
"""

import subprocess
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from create_next_auth_app.errors import ExternalProcessFailure
from create_next_auth_app.invocations import Invocation, RunMode


@dataclass
class CapturedOutput:
    """Captured stdout and stderr from a process run in CAPTURE mode."""
    stdout: str = ""
    stderr: str = ""


@dataclass
class CommandResult:
    returncode: int
    output: CapturedOutput = field(default_factory=CapturedOutput)

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


class CommandRunner:
    """Runs invocations as child processes.

    In INHERIT mode the child shares the terminal so the user sees the
    tool's own progress output.
    """

    def run(self, invocation: Invocation) -> CommandResult:
        capture = invocation.mode is RunMode.CAPTURE
        try:
            result = subprocess.run(
                invocation.argv(),
                capture_output=capture,
                text=capture,
            )
        except OSError as e:
            raise ExternalProcessFailure(invocation, None, reason=e) from e

        if not capture:
            return CommandResult(returncode=result.returncode)
        return CommandResult(
            returncode=result.returncode,
            output=CapturedOutput(stdout=result.stdout, stderr=result.stderr),
        )


class DryRunCommandRunner:
    """Prints each command instead of running it."""

    def __init__(self, output: Optional[TextIO] = None):
        self._output = output or sys.stdout

    def run(self, invocation: Invocation) -> CommandResult:
        print(f"Would run: {invocation.command_line()}", file=self._output)
        return CommandResult(returncode=0)
