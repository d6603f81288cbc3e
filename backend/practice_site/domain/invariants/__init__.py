from .exceptions import InvariantViolation

__all__ = ["InvariantViolation"]
