"""Errors raised by the scaffold pipeline.

Every failure aborts the pipeline and is reported once by the CLI.
"""


class ScaffoldError(Exception):
    """Base class for all scaffold failures."""


class MissingArgument(ScaffoldError):
    """A required argument was absent or empty."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Please provide {name}")


class ExternalProcessFailure(ScaffoldError):
    """An external tool exited non-zero or could not be started."""

    def __init__(self, invocation, returncode, reason=None):
        self.invocation = invocation
        self.returncode = returncode
        self.reason = reason
        super().__init__(self._describe())

    def _describe(self):
        command = self.invocation.command_line()
        if self.returncode is None:
            return f"Could not run '{command}': {self.reason}"
        return f"Command '{command}' exited with status {self.returncode}"


class FileSystemFailure(ScaffoldError):
    """Writing a generated file or creating its directory failed."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")
