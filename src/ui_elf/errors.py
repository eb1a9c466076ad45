"""User-facing errors raised outside the scan core."""


class UIElfError(Exception):
    """Base class for errors reported to the user by the CLI."""


class DirectoryNotFoundError(UIElfError):
    """Directory to scan does not exist."""

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"directory not found: {directory}")


class OutputWriteError(UIElfError):
    """JSON results could not be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"failed to write JSON file {path}: {reason}")


__all__ = ["DirectoryNotFoundError", "OutputWriteError", "UIElfError"]
