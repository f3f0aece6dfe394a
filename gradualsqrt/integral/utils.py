"""General utilities, such as exception classes."""

# gradualsqrt-specific exceptions

class GradualSqrtError(Exception):
    """Base gradualsqrt error."""

class DomainError(GradualSqrtError):
    """Value outside the domain of a generator, such as a negative input
    or a seed that does not fit in the root type.
    """

class WidthError(GradualSqrtError):
    """Pairing of input and root types that violates the sizing contract."""


# Useful things

def bitmask(n: int) -> int:
    """Produces a bitmask of n 1s if n is positive, or n 0s if n is negative."""
    if n >= 0:
        return (1 << n) - 1
    else:
        return -1 << -n
