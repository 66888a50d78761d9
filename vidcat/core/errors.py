"""Exception hierarchy for the concat pipeline.

Every error is terminal: nothing in vidcat retries. A non-zero exit of the
external tool is not an error, it comes back as a failed ``ConcatResult``.
"""


class VidcatError(Exception):
    """Base error."""


class FolderNotFoundError(VidcatError):
    """The directory to scan does not exist."""


class AccessDeniedError(VidcatError):
    """The directory to scan exists but cannot be listed."""


class CreateOutputError(VidcatError):
    """The manifest file could not be created."""


class WriteFileError(VidcatError):
    """The manifest file could not be fully written."""


class CommandError(VidcatError):
    """The external tool could not be spawned (missing or not executable)."""
