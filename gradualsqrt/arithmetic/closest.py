"""Gradual closest integer square roots.

Same scheme as the floor generators, but the root returned for n is the
s that minimizes |n - s^2|, so s is good for [s^2 - s + 1, s^2 + s]:

     s   lo   hi
     0    0    0
     1    1    2
     2    3    6
     3    7   12
     4   13   20

Going up, the new range starts just past the old hi and is 2s wide;
going down, the new range ends just before the old lo. The range for 0
is special, since s^2 - s + 1 would give 1 rather than 0.
"""

import logging

from ..integral.ops import RM, DIR
from ..integral import intmath
from .evalctx import isqrt_ctx


logger = logging.getLogger(__name__)


class Changing(object):
    """Closest isqrt of a sequence that may move in either direction.

    >>> to_isqrt = Changing(0)
    >>> list(map(to_isqrt, [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 6, 5, 4, 3, 2, 1, 0]))
    [0, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 2, 2, 2, 2, 1, 1, 0]
    """

    def __init__(self, init=0, ctx=None):
        if ctx is None:
            ctx = isqrt_ctx(rm=RM.CLOSEST, direction=DIR.CHANGING)
        self._ctx = ctx
        self.reset(init)

    def reset(self, init):
        """Start over from a new root, e.g. after a known jump in the input."""
        s = self._ctx.check_seed(init)
        lo, hi = intmath.closest_bracket(s)
        self._sqrt = s
        self._lo = lo
        self._hi = self._ctx.saturate_hi(s, hi)
        logger.debug('closest changing: seeded at %d, bracket [%d, %d]', s, self._lo, self._hi)

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
                hi = self._ctx.saturate_hi(sqrt, hi + sqrt + sqrt)
            logger.debug('closest changing: %d -> %d for %d', self._sqrt, sqrt, n)
            self._sqrt, self._lo, self._hi = sqrt, lo, hi
        elif n < self._lo:
            sqrt, lo = self._sqrt, self._lo
            while n < lo:
                sqrt -= 1
                hi = lo - 1
                if sqrt == 0:
                    lo = 0
                else:
                    lo = hi - sqrt - sqrt + 1
            logger.debug('closest changing: %d -> %d for %d', self._sqrt, sqrt, n)
            self._sqrt, self._lo, self._hi = sqrt, lo, hi
        return self._sqrt

    __call__ = step

    def __repr__(self):
        return '{}(sqrt={}, lo={}, hi={}, ctx={})'.format(
            type(self).__name__, repr(self._sqrt), repr(self._lo), repr(self._hi), repr(self._ctx))


class Ascending(object):
    """Closest isqrt of a sequence that only grows. A smaller input than the
    last one is not detected: the previous root is returned again.

    Scaling the inputs improves resolution; isqrt(1024*n) is 32 times
    sqrt(n), to the nearest integer:

    >>> to_isqrt = Ascending(0)
    >>> [to_isqrt(1024 * n) for n in range(17)]
    [0, 32, 45, 55, 64, 72, 78, 85, 91, 96, 101, 106, 111, 115, 120, 124, 128]
    """

    def __init__(self, init=0, ctx=None):
        if ctx is None:
            ctx = isqrt_ctx(rm=RM.CLOSEST, direction=DIR.ASCENDING)
        self._ctx = ctx
        self.reset(init)

    def reset(self, init):
        s = self._ctx.check_seed(init)
        self._sqrt = s
        self._hi = self._ctx.saturate_hi(s, self._ctx.num.saturating_mul(s, s + 1))
        logger.debug('closest ascending: seeded at %d, up to %d', s, self._hi)

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
                hi = self._ctx.saturate_hi(sqrt, hi + sqrt + sqrt)
            logger.debug('closest ascending: %d -> %d for %d', self._sqrt, sqrt, n)
            self._sqrt, self._hi = sqrt, hi
        return self._sqrt

    __call__ = step

    def __repr__(self):
        return '{}(sqrt={}, hi={}, ctx={})'.format(
            type(self).__name__, repr(self._sqrt), repr(self._hi), repr(self._ctx))


class Descending(object):
    """Closest isqrt of a sequence that only shrinks. A larger input than the
    last one is not detected: the previous root is returned again.

    >>> to_isqrt = Descending(5)
    >>> list(map(to_isqrt, range(16, -1, -1)))
    [4, 4, 4, 4, 3, 3, 3, 3, 3, 3, 2, 2, 2, 2, 1, 1, 0]
    """

    def __init__(self, init=0, ctx=None):
        if ctx is None:
            ctx = isqrt_ctx(rm=RM.CLOSEST, direction=DIR.DESCENDING)
        self._ctx = ctx
        self.reset(init)

    def reset(self, init):
        s = self._ctx.check_seed(init)
        self._sqrt = s
        self._lo, _ = intmath.closest_bracket(s)
        logger.debug('closest descending: seeded at %d, down to %d', s, self._lo)

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
                if sqrt == 0:
                    lo = 0
                else:
                    lo -= sqrt + sqrt
            logger.debug('closest descending: %d -> %d for %d', self._sqrt, sqrt, n)
            self._sqrt, self._lo = sqrt, lo
        return self._sqrt

    __call__ = step

    def __repr__(self):
        return '{}(sqrt={}, lo={}, ctx={})'.format(
            type(self).__name__, repr(self._sqrt), repr(self._lo), repr(self._ctx))
