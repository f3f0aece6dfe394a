"""Gradual floor integer square roots.

Each generator remembers its last root s together with the range of
inputs s is good for, [s^2, (s+1)^2 - 1]. A new input inside that range
costs one or two comparisons; an input outside it walks s up or down one
step at a time, moving the range by 2s + 1 each step, so the cost of a
call is proportional to how far the root moved.

For example, if the last input was 133, then the root is 11 and it is
good up to 143. An input of 136 returns 11 again; an input of 145 adds
2*12 + 1 to 143 to get 168, and 12 is the root.
"""

import logging

from ..integral.ops import RM, DIR
from ..integral import intmath
from .evalctx import isqrt_ctx


logger = logging.getLogger(__name__)


class Changing(object):
    """Floor isqrt of a sequence that may move in either direction.

    >>> to_isqrt = Changing(0)
    >>> list(map(to_isqrt, [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 9, 8, 7, 6, 5, 4, 3, 2, 1, 0]))
    [0, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 2, 2, 2, 2, 2, 1, 1, 1, 0]
    """

    def __init__(self, init=0, ctx=None):
        if ctx is None:
            ctx = isqrt_ctx(rm=RM.FLOOR, direction=DIR.CHANGING)
        self._ctx = ctx
        self.reset(init)

    def reset(self, init):
        """Start over from a new root, e.g. after a known jump in the input."""
        s = self._ctx.check_seed(init)
        lo, hi = intmath.floor_bracket(s)
        self._sqrt = s
        self._lo = lo
        self._hi = self._ctx.saturate_hi(s, hi)
        logger.debug('floor changing: seeded at %d, bracket [%d, %d]', s, self._lo, self._hi)

    @property
    def ctx(self):
        return self._ctx

    @property
    def sqrt(self):
        return self._sqrt

    @property
    def lo(self):
        return self._lo

    @property
    def hi(self):
        return self._hi

    def step(self, n):
        n = self._ctx.check_input(n)
        if n > self._hi:
            sqrt, hi = self._sqrt, self._hi
            while n > hi:
                sqrt += 1
                lo = hi + 1
                hi = self._ctx.saturate_hi(sqrt, lo + sqrt + sqrt)
            logger.debug('floor changing: %d -> %d for %d', self._sqrt, sqrt, n)
            self._sqrt, self._lo, self._hi = sqrt, lo, hi
        elif n < self._lo:
            # lo(0) == 0 and n >= 0, so this never walks below 0
            sqrt, lo = self._sqrt, self._lo
            while n < lo:
                sqrt -= 1
                hi = lo - 1
                lo = hi - sqrt - sqrt
            logger.debug('floor changing: %d -> %d for %d', self._sqrt, sqrt, n)
            self._sqrt, self._lo, self._hi = sqrt, lo, hi
        return self._sqrt

    __call__ = step

    def __repr__(self):
        return '{}(sqrt={}, lo={}, hi={}, ctx={})'.format(
            type(self).__name__, repr(self._sqrt), repr(self._lo), repr(self._hi), repr(self._ctx))


class Ascending(object):
    """Floor isqrt of a sequence that only grows. A smaller input than the
    last one is not detected: the previous root is returned again.

    >>> to_isqrt = Ascending(0)
    >>> list(map(to_isqrt, range(10)))
    [0, 1, 1, 1, 2, 2, 2, 2, 2, 3]
    """

    def __init__(self, init=0, ctx=None):
        if ctx is None:
            ctx = isqrt_ctx(rm=RM.FLOOR, direction=DIR.ASCENDING)
        self._ctx = ctx
        self.reset(init)

    def reset(self, init):
        s = self._ctx.check_seed(init)
        # (s + 1)^2 - 1
        self._sqrt = s
        self._hi = self._ctx.saturate_hi(s, self._ctx.num.saturating_mul(s, s + 2))
        logger.debug('floor ascending: seeded at %d, up to %d', s, self._hi)

    @property
    def ctx(self):
        return self._ctx

    @property
    def sqrt(self):
        return self._sqrt

    @property
    def hi(self):
        return self._hi

    def step(self, n):
        n = self._ctx.check_input(n)
        if n > self._hi:
            sqrt, hi = self._sqrt, self._hi
            while n > hi:
                sqrt += 1
                hi = self._ctx.saturate_hi(sqrt, hi + sqrt + sqrt + 1)
            logger.debug('floor ascending: %d -> %d for %d', self._sqrt, sqrt, n)
            self._sqrt, self._hi = sqrt, hi
        return self._sqrt

    __call__ = step

    def __repr__(self):
        return '{}(sqrt={}, hi={}, ctx={})'.format(
            type(self).__name__, repr(self._sqrt), repr(self._hi), repr(self._ctx))


class Descending(object):
    """Floor isqrt of a sequence that only shrinks. A larger input than the
    last one is not detected: the previous root is returned again.

    >>> to_isqrt = Descending(5)
    >>> list(map(to_isqrt, range(9, -1, -1)))
    [3, 2, 2, 2, 2, 2, 1, 1, 1, 0]
    """

    def __init__(self, init=0, ctx=None):
        if ctx is None:
            ctx = isqrt_ctx(rm=RM.FLOOR, direction=DIR.DESCENDING)
        self._ctx = ctx
        self.reset(init)

    def reset(self, init):
        s = self._ctx.check_seed(init)
        self._sqrt = s
        self._lo = s * s
        logger.debug('floor descending: seeded at %d, down to %d', s, self._lo)

    @property
    def ctx(self):
        return self._ctx

    @property
    def sqrt(self):
        return self._sqrt

    @property
    def lo(self):
        return self._lo

    def step(self, n):
        n = self._ctx.check_input(n)
        if n < self._lo:
            sqrt, lo = self._sqrt, self._lo
            while n < lo:
                sqrt -= 1
                lo -= sqrt + sqrt + 1
            logger.debug('floor descending: %d -> %d for %d', self._sqrt, sqrt, n)
            self._sqrt, self._lo = sqrt, lo
        return self._sqrt

    __call__ = step

    def __repr__(self):
        return '{}(sqrt={}, lo={}, ctx={})'.format(
            type(self).__name__, repr(self._sqrt), repr(self._lo), repr(self._ctx))
