"""Exceptions raised by handmotion."""


class HandMovementError(Exception):
    """Base class for handmotion errors."""


class InvalidInput(HandMovementError, ValueError):
    """Frame does not satisfy the input contract.

    Raised when the landmark list is missing, empty, malformed or too short
    to contain the landmarks the classifier reads, and when a serialized
    frame record lacks required fields. The classifier state is left exactly
    as it was before the failing call.
    """


__all__ = ["HandMovementError", "InvalidInput"]
