"""Integer square roots computed from scratch with GMP as a backend,
and the bracket formulas that the gradual generators maintain incrementally.

The brackets here are the inclusive ranges [lo, hi] of inputs for which
a given root is the correct answer. The generators never call these
functions in their inner loops; they are the reference the incremental
updates are checked against.
"""


import gmpy2 as gmp

from .ops import RM


# reference roots

def isqrt_floor(n):
    """Largest s such that s*s <= n."""
    if n < 0:
        raise ValueError('isqrt of negative value {}'.format(repr(n)))
    return int(gmp.isqrt(n))

def isqrt_closest(n):
    """The s minimizing |n - s*s|. The last input that still rounds
    down to s is s*s + s.
    """
    if n < 0:
        raise ValueError('isqrt of negative value {}'.format(repr(n)))
    s, r = gmp.isqrt_rem(n)
    # n - s*s > s means n is past the midpoint s*s + s
    if r > s:
        return int(s) + 1
    else:
        return int(s)

def isqrt(rm, n):
    if rm == RM.FLOOR:
        return isqrt_floor(n)
    elif rm == RM.CLOSEST:
        return isqrt_closest(n)
    else:
        raise ValueError('unsupported rounding mode {}'.format(repr(rm)))


# brackets

def floor_bracket(s):
    lo = s * s
    # (s + 1)^2 - 1
    return lo, lo + s + s

def closest_bracket(s):
    sq = s * s
    if s == 0:
        return 0, sq + s
    else:
        return sq - s + 1, sq + s

def bracket(rm, s):
    """Inclusive range (lo, hi) of inputs whose root is s under rm."""
    if rm == RM.FLOOR:
        return floor_bracket(s)
    elif rm == RM.CLOSEST:
        return closest_bracket(s)
    else:
        raise ValueError('unsupported rounding mode {}'.format(repr(rm)))

def covers(rm, s, n):
    lo, hi = bracket(rm, s)
    return lo <= n <= hi


# correctness predicates

def is_floor_isqrt(n, s):
    return s >= 0 and s * s <= n and (s + 1) * (s + 1) > n

def is_closest_isqrt(n, s):
    if s < 0:
        return False
    d = abs(n - s * s)
    if s > 0 and d > abs(n - (s - 1) * (s - 1)):
        return False
    return d <= abs(n - (s + 1) * (s + 1))

def is_isqrt(rm, n, s):
    if rm == RM.FLOOR:
        return is_floor_isqrt(n, s)
    elif rm == RM.CLOSEST:
        return is_closest_isqrt(n, s)
    else:
        raise ValueError('unsupported rounding mode {}'.format(repr(rm)))
