class InvalidLevelError(ValueError):
    """Raised when level geometry is malformed (empty rectangle, bad radius)."""


class ResetNotAllowed(RuntimeError):
    """Raised when a respawn is requested while the player is still alive."""
