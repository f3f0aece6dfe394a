"""Evaluation contexts: the integer types a generator computes in,
and the rounding and traversal rules it follows.
"""

import operator

import numpy

from ..integral.utils import DomainError, WidthError, bitmask
from ..integral.ops import RM, DIR
from ..integral import intmath


uint8_synonyms = {'u8', 'uint8', 'uint8_t', 'unsigned char', 'byte'}
uint16_synonyms = {'u16', 'uint16', 'uint16_t', 'unsigned short', 'ushort'}
uint32_synonyms = {'u32', 'uint32', 'uint32_t', 'unsigned int', 'uint'}
uint64_synonyms = {'u64', 'uint64', 'uint64_t', 'unsigned long', 'ulong'}

int8_synonyms = {'i8', 'int8', 'int8_t', 'char'}
int16_synonyms = {'i16', 'int16', 'int16_t', 'short'}
int32_synonyms = {'i32', 'int32', 'int32_t', 'int'}
int64_synonyms = {'i64', 'int64', 'int64_t', 'long'}

floor_synonyms = {'floor', 'rtn', 'down', 'truncate', 'trunc', 'rounddown'}
closest_synonyms = {'closest', 'nearest', 'round', 'roundclosest', 'roundnearest'}

changing_synonyms = {'changing', 'gradual', 'both', 'bidirectional'}
ascending_synonyms = {'ascending', 'asc', 'increasing', 'up'}
descending_synonyms = {'descending', 'desc', 'decreasing'}


int_dtypes = {}
int_dtypes.update((k, numpy.uint8) for k in uint8_synonyms)
int_dtypes.update((k, numpy.uint16) for k in uint16_synonyms)
int_dtypes.update((k, numpy.uint32) for k in uint32_synonyms)
int_dtypes.update((k, numpy.uint64) for k in uint64_synonyms)
int_dtypes.update((k, numpy.int8) for k in int8_synonyms)
int_dtypes.update((k, numpy.int16) for k in int16_synonyms)
int_dtypes.update((k, numpy.int32) for k in int32_synonyms)
int_dtypes.update((k, numpy.int64) for k in int64_synonyms)

isqrt_rm = {}
isqrt_rm.update((k, RM.FLOOR) for k in floor_synonyms)
isqrt_rm.update((k, RM.CLOSEST) for k in closest_synonyms)

isqrt_dir = {}
isqrt_dir.update((k, DIR.CHANGING) for k in changing_synonyms)
isqrt_dir.update((k, DIR.ASCENDING) for k in ascending_synonyms)
isqrt_dir.update((k, DIR.DESCENDING) for k in descending_synonyms)


class IntType(object):
    """A bounded integer type, standing in for the fixed-width machine
    integers that values and roots are stored in.

    Arithmetic is done on plain Python ints; the type only knows its
    bounds, so that overflow can be detected and saturated instead of
    silently growing past what the type could hold.
    """

    def __init__(self, nbits, signed=False, name=None):
        if nbits < 1:
            raise ValueError('integer type must have at least 1 bit, got {}'.format(repr(nbits)))
        self.nbits = nbits
        self.signed = signed
        if signed:
            self.min = -(1 << (nbits - 1))
            self.max = bitmask(nbits - 1)
        else:
            self.min = 0
            self.max = bitmask(nbits)
        if name is None:
            self.name = '{}int{:d}'.format('' if signed else 'u', nbits)
        else:
            self.name = name

    def __repr__(self):
        return '{}(nbits={}, signed={}, name={})'.format(
            type(self).__name__, repr(self.nbits), repr(self.signed), repr(self.name))

    def __str__(self):
        return self.name

    def contains(self, x):
        return self.min <= x <= self.max

    def converts_into(self, other):
        """True if every value of this type can be represented in other."""
        return other.min <= self.min and self.max <= other.max

    def saturate(self, x):
        if x > self.max:
            return self.max
        elif x < self.min:
            return self.min
        else:
            return x

    def saturating_mul(self, a, b):
        return self.saturate(a * b)


used_types = {}
def int_type(spec):
    """Resolve spec into a (cached) IntType.

    Accepts an IntType, a numpy integer dtype or scalar type,
    a type name such as 'u16', 'uint16_t' or 'unsigned short',
    or a custom width as a tuple ('uint', 24) or ('int', 12).
    """
    if isinstance(spec, IntType):
        return spec

    if isinstance(spec, tuple):
        try:
            kind, nbits = spec
            kind = str(kind).lower()
            nbits = int(nbits)
        except Exception:
            raise ValueError('unsupported integer type {}'.format(repr(spec)))
        if kind not in {'int', 'uint'}:
            raise ValueError('unsupported integer type {}'.format(repr(spec)))
        signed = kind == 'int'
        name = None
    else:
        if isinstance(spec, str):
            try:
                spec = int_dtypes[spec.strip().lower()]
            except KeyError:
                # these should all be custom exceptions
                raise ValueError('unsupported integer type {}'.format(repr(spec)))
        try:
            dtype = numpy.dtype(spec)
            info = numpy.iinfo(dtype)
        except (TypeError, ValueError):
            raise ValueError('unsupported integer type {}'.format(repr(spec)))
        nbits = info.bits
        signed = info.min < 0
        name = dtype.name

    try:
        return used_types[(nbits, signed)]
    except KeyError:
        t = IntType(nbits, signed=signed, name=name)
        used_types[(nbits, signed)] = t
        return t


def rounding_mode(rm):
    if isinstance(rm, RM):
        return rm
    elif isinstance(rm, int):
        return RM(rm)
    try:
        return isqrt_rm[str(rm).strip().lower()]
    except KeyError:
        raise ValueError('unsupported isqrt rounding mode {}'.format(repr(rm)))

def traversal(direction):
    if isinstance(direction, DIR):
        return direction
    elif isinstance(direction, int):
        return DIR(direction)
    try:
        return isqrt_dir[str(direction).strip().lower()]
    except KeyError:
        raise ValueError('unsupported isqrt direction {}'.format(repr(direction)))


class IsqrtCtx(object):
    """Context for gradual integer square roots.

    Holds the input type (num), the root type (sqrt), the rounding rule
    and the traversal the generator is allowed to assume. Properties can
    be given as a dictionary of strings, as in
    props={'num': 'u32', 'sqrt': 'u16', 'round': 'closest'},
    and keyword arguments override properties.

    The type pairing is checked here, once: every root must convert into
    the input type, and the root type must hold the floor root of the
    largest input. For unsigned types that means the root type is at least
    half as wide; signed types need one bit more (int16 inputs take int9
    roots). Then s*s + 2*s only ever exceeds the input type at the very
    top of its range, where the generators saturate, and a closest root
    is capped one short only when it would be sqrt.max + 1.
    """

    num = int_type(numpy.uint16)
    sqrt = int_type(numpy.uint8)
    rm = RM.FLOOR
    direction = DIR.CHANGING

    def __init__(self, props=None, num=None, sqrt=None, rm=None, direction=None):
        self.props = {}
        if props:
            self._update_props(props)

        # arguments are allowed to override properties
        if num is not None:
            self.num = int_type(num)
        if sqrt is not None:
            self.sqrt = int_type(sqrt)
        if rm is not None:
            self.rm = rounding_mode(rm)
        if direction is not None:
            self.direction = traversal(direction)

        self._check_widths()

    def _update_props(self, props):
        if 'num' in props:
            self.num = int_type(props['num'])
        if 'sqrt' in props:
            self.sqrt = int_type(props['sqrt'])
        if 'round' in props:
            self.rm = rounding_mode(props['round'])
        if 'direction' in props:
            self.direction = traversal(props['direction'])

        self.props.update(props)

    def _check_widths(self):
        if not self.sqrt.converts_into(self.num):
            raise WidthError('root type {} does not convert into input type {}'
                             .format(self.sqrt, self.num))
        if self.sqrt.max < intmath.isqrt_floor(self.num.max):
            raise WidthError('root type {} cannot hold {}, the floor root of the largest {}'
                             .format(self.sqrt, intmath.isqrt_floor(self.num.max), self.num))

    @property
    def nmin(self):
        """Smallest input a generator accepts."""
        return max(0, self.num.min)

    @property
    def nmax(self):
        """Largest input a generator accepts."""
        return self.num.max

    @property
    def smax(self):
        """Largest root a generator can return."""
        return self.sqrt.max

    def check_seed(self, init):
        """An initial root, as an int, if the root type can hold it."""
        s = operator.index(init)
        if s < 0 or s > self.sqrt.max:
            raise DomainError('initial root {} is not a non-negative {}'.format(repr(init), self.sqrt))
        return s

    def check_input(self, n):
        n = operator.index(n)
        if n < self.nmin or n > self.nmax:
            raise DomainError('input {} is outside [{}, {}] for {}'
                              .format(repr(n), self.nmin, self.nmax, self.num))
        return n

    def saturate_hi(self, s, hi):
        """Clamp the upper end of a bracket to the input type. Once the root
        is as large as its type allows, it answers for every larger input.
        """
        if s >= self.sqrt.max or hi > self.nmax:
            return self.nmax
        else:
            return hi

    def let(self, props=None):
        """Create a new context, updated with any provided properties."""
        cls = type(self)
        newctx = cls.__new__(cls)
        newctx.num = self.num
        newctx.sqrt = self.sqrt
        newctx.rm = self.rm
        newctx.direction = self.direction

        if props:
            newctx.props = self.props.copy()
            newctx._update_props(props)
            newctx._check_widths()
        else:
            # share the dictionary
            newctx.props = self.props

        return newctx

    def __repr__(self):
        args = []
        if len(self.props) > 0:
            args.append('props=' + repr(self.props))
        args += ['num=' + str(self.num), 'sqrt=' + str(self.sqrt),
                 'rm=' + repr(self.rm), 'direction=' + repr(self.direction)]
        return '{}({})'.format(type(self).__name__, ', '.join(args))


used_ctxs = {}
def isqrt_ctx(num=numpy.uint16, sqrt=numpy.uint8, rm=RM.FLOOR, direction=DIR.CHANGING):
    num = int_type(num)
    sqrt = int_type(sqrt)
    rm = rounding_mode(rm)
    direction = traversal(direction)
    try:
        return used_ctxs[(num.nbits, num.signed, sqrt.nbits, sqrt.signed, rm, direction)]
    except KeyError:
        ctx = IsqrtCtx(num=num, sqrt=sqrt, rm=rm, direction=direction)
        used_ctxs[(num.nbits, num.signed, sqrt.nbits, sqrt.signed, rm, direction)] = ctx
        return ctx
