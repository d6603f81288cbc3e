class InvariantViolation(Exception):
    """Raised when content would be persisted in an invalid state."""
