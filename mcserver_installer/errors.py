from __future__ import annotations


class InstallerError(RuntimeError):
    """Base class for failures that end an installer run."""


class PreconditionError(InstallerError):
    """The host cannot run the installer (not root, missing tooling)."""


class UserAborted(InstallerError):
    """The operator declined to continue. Not a failure."""


class InputRetriesExhausted(InstallerError):
    pass


class CommandError(InstallerError):
    def __init__(self, message: str, *, argv: list[str] | None = None, returncode: int | None = None):
        super().__init__(message)
        self.argv = list(argv or [])
        self.returncode = returncode


class CommandTimeout(CommandError):
    pass


class DownloadError(InstallerError):
    pass


class ConfigError(InstallerError):
    pass
