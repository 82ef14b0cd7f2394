"""Custom exceptions for tag reading errors."""


class MetadataError(Exception):
    """Base class for all tag reading errors."""

    pass


class UnreadableTagError(MetadataError):
    """Tag container present but corrupt, or file could not be opened."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Unreadable tags in {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
