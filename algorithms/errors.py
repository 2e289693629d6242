"""Shared validation helpers for the outcome calculators."""
import math


class InvalidInput(ValueError):
    """Raised when an algorithm parameter violates its documented constraint."""


def require_positive_int(value, name: str) -> int:
    """Return *value* if it is an integer >= 1, otherwise raise InvalidInput."""
    # bool is an int subclass; True must not pass as a qubit count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidInput(f"{name} must be >= 1, got {value}")
    return value


def require_bitstring(bits, length: int, name: str) -> str:
    """Return *bits* if it is a string of exactly *length* '0'/'1' characters."""
    if not isinstance(bits, str):
        raise InvalidInput(f"{name} must be a bit-string, got {bits!r}")
    if len(bits) != length:
        raise InvalidInput(
            f"{name} '{bits}' has {len(bits)} bits, expected {length}"
        )
    if not set(bits) <= {"0", "1"}:
        raise InvalidInput(f"{name} '{bits}' may only contain '0' and '1'")
    return bits


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties toward +inf (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(x + 0.5)
