"""Construction of gradual isqrt generators.

A generator is a callable object: give it one input at a time and it
returns the integer square root, doing work proportional only to how far
the root moved since the last call. Pick the generator with the least
freedom that fits your data; a sequence known to be sorted can use the
ascending or descending generators, which each do a single comparison
when the root does not change.

If the input is known to have jumped (after a reset, say), either call
reset() on the generator or make a new one with a good initial root.
"""

import logging

from ..integral.ops import RM, DIR
from .evalctx import IsqrtCtx, isqrt_ctx
from . import floor, closest


logger = logging.getLogger(__name__)


generators = {
    (RM.FLOOR, DIR.CHANGING): floor.Changing,
    (RM.FLOOR, DIR.ASCENDING): floor.Ascending,
    (RM.FLOOR, DIR.DESCENDING): floor.Descending,
    (RM.CLOSEST, DIR.CHANGING): closest.Changing,
    (RM.CLOSEST, DIR.ASCENDING): closest.Ascending,
    (RM.CLOSEST, DIR.DESCENDING): closest.Descending,
}


def make_generator(init=0, ctx=None, num=None, sqrt=None, rm=None, direction=None):
    """Return a generator seeded with the root init.

    The context decides the input and root types, the rounding rule and
    the traversal; num, sqrt, rm and direction override it. With neither,
    the result is a floor generator over uint16 inputs with uint8 roots
    that accepts inputs in either direction.
    """
    if ctx is None:
        ctx = isqrt_ctx()
    elif not isinstance(ctx, IsqrtCtx):
        raise TypeError('expected an IsqrtCtx, got {}'.format(repr(ctx)))

    # overrides keep the caller's other properties
    overrides = {}
    if num is not None:
        overrides['num'] = num
    if sqrt is not None:
        overrides['sqrt'] = sqrt
    if rm is not None:
        overrides['round'] = rm
    if direction is not None:
        overrides['direction'] = direction
    if overrides:
        ctx = ctx.let(props=overrides)

    cls = generators[(ctx.rm, ctx.direction)]
    logger.debug('making %s.%s from %r in %r', cls.__module__, cls.__name__, init, ctx)
    return cls(init, ctx=ctx)


def changing_from(init=0, num='u16', sqrt='u8', rm=RM.FLOOR):
    """Generator for inputs that may rise and fall."""
    return make_generator(init, ctx=isqrt_ctx(num=num, sqrt=sqrt, rm=rm, direction=DIR.CHANGING))

def ascending_from(init=0, num='u16', sqrt='u8', rm=RM.FLOOR):
    """Generator for non-decreasing inputs."""
    return make_generator(init, ctx=isqrt_ctx(num=num, sqrt=sqrt, rm=rm, direction=DIR.ASCENDING))

def descending_from(init=0, num='u16', sqrt='u8', rm=RM.FLOOR):
    """Generator for non-increasing inputs."""
    return make_generator(init, ctx=isqrt_ctx(num=num, sqrt=sqrt, rm=rm, direction=DIR.DESCENDING))
