"""
Exception types for slice composition.
"""


class SliceError(Exception):
    """Base class for all slicekit errors."""
    pass


class SliceConfigError(SliceError, ValueError):
    """Raised when a slice configuration cannot be turned into a bundle."""
    pass


class PayloadShapeError(SliceError, TypeError):
    """Raised when the default merge updater receives a payload it cannot merge."""
    pass


class StateShapeError(SliceError, TypeError):
    """Raised when a record updater is applied to a state that is not record-shaped."""
    pass


class ActionLogError(SliceError):
    """Raised when action log operations fail."""
    pass
