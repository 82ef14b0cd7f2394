"""Custom exceptions for filesystem operations."""


class MoveError(Exception):
    """Base class for all move errors."""

    pass


class DestinationConflictError(MoveError):
    """Destination already exists at move time."""

    pass


class CrossDeviceMoveError(MoveError):
    """Copy step of a cross-volume move failed; the source was kept."""

    pass


class VerificationError(CrossDeviceMoveError):
    """Copied file does not match the source."""

    pass


class InputRootError(Exception):
    """Input root is missing or unreadable; the run cannot start."""

    pass
