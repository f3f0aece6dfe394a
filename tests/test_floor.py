from hypothesis import (
    given,
    strategies as st,
)
import pytest

from gradualsqrt.arithmetic import floor
from gradualsqrt.arithmetic.evalctx import isqrt_ctx
from gradualsqrt.integral import intmath
from gradualsqrt.integral.ops import RM, DIR
from gradualsqrt.integral.utils import DomainError, WidthError


def ctx(num='u16', sqrt='u8'):
    return isqrt_ctx(num=num, sqrt=sqrt, rm=RM.FLOOR)


u16 = st.integers(min_value=0, max_value=65535)


@pytest.mark.parametrize(
    "num,sqrt",
    (('u16', 'u8'), ('u16', 'u16'), ('u32', 'u16'), ('i16', ('int', 9))),
)
def test_ascending_first_roots(num, sqrt):
    to_isqrt = floor.Ascending(0, ctx=ctx(num, sqrt))
    result = [to_isqrt(n) for n in range(17)]
    assert result == [
        # 0  1  2  3  4  5  6  7  8  9 10 11 12 13 14 15 16     n
          0, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 3, 4
    ]


@pytest.mark.parametrize(
    "scale,expected",
    (
        (64, [0, 8, 11, 13, 16, 17, 19, 21, 22, 24]),
        (256, [0, 16, 22, 27, 32, 35, 39, 42, 45, 48]),
        (1024, [0, 32, 45, 55, 64, 71, 78, 84, 90, 96]),
        (4096, [0, 64, 90, 110, 128, 143, 156, 169, 181, 192]),
    ),
)
def test_scaled_ascending(scale, expected):
    to_isqrt = floor.Ascending(0, ctx=ctx('u32', 'u16'))
    assert [to_isqrt(scale * n) for n in range(10)] == expected


def test_descending_from_five():
    to_isqrt = floor.Descending(5)
    result = list(map(to_isqrt, range(16, -1, -1)))
    assert result == [
        # 16 15 14 13 12 11 10  9  8  7  6  5  4  3  2  1  0     n
           4, 3, 3, 3, 3, 3, 3, 3, 2, 2, 2, 2, 2, 1, 1, 1, 0
    ]


def test_changing_up_and_down():
    to_isqrt = floor.Changing(0)
    result = list(map(to_isqrt, list(range(10)) + list(range(9, -1, -1))))
    assert result == [0, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 2, 2, 2, 2, 2, 1, 1, 1, 0]


def test_entire_ascending_range():
    to_isqrt = floor.Ascending(0, ctx=ctx())
    for n in range(65535):
        s = to_isqrt(n)
        assert s * s <= n
        assert (s + 1) * (s + 1) > n


def test_entire_changing_range_both_ways():
    to_isqrt = floor.Changing(0, ctx=ctx())
    for n in range(65536):
        assert intmath.is_floor_isqrt(n, to_isqrt(n))
    for n in range(65535, -1, -1):
        assert intmath.is_floor_isqrt(n, to_isqrt(n))
    assert to_isqrt.sqrt == 0


def test_entire_descending_range():
    to_isqrt = floor.Descending(255, ctx=ctx())
    for n in range(65535, -1, -1):
        assert intmath.is_floor_isqrt(n, to_isqrt(n))


def test_changing_down_to_zero():
    to_isqrt = floor.Changing(3)
    assert (to_isqrt.lo, to_isqrt.hi) == (9, 15)
    assert to_isqrt(0) == 0
    assert (to_isqrt.lo, to_isqrt.hi) == (0, 0)
    assert to_isqrt(0) == 0
    assert to_isqrt(1) == 1
    assert to_isqrt(0) == 0


def test_descending_down_to_zero():
    to_isqrt = floor.Descending(12)
    assert to_isqrt(0) == 0
    assert to_isqrt.lo == 0
    assert to_isqrt(0) == 0


@given(st.lists(u16, max_size=64))
def test_changing_matches_reference(values):
    to_isqrt = floor.Changing(0, ctx=ctx())
    assert [to_isqrt(n) for n in values] == [intmath.isqrt_floor(n) for n in values]


@given(st.integers(min_value=0, max_value=255), st.lists(u16, max_size=64))
def test_changing_bracket_tracks_root(init, values):
    to_isqrt = floor.Changing(init, ctx=ctx())
    for n in values:
        s = to_isqrt(n)
        assert (to_isqrt.lo, to_isqrt.hi) == intmath.floor_bracket(s)


@given(st.integers(min_value=0, max_value=255), u16)
def test_repeated_input_is_idempotent(init, n):
    to_isqrt = floor.Changing(init, ctx=ctx())
    s = to_isqrt(n)
    state = (to_isqrt.sqrt, to_isqrt.lo, to_isqrt.hi)
    assert to_isqrt(n) == s
    assert (to_isqrt.sqrt, to_isqrt.lo, to_isqrt.hi) == state


@given(st.lists(u16, max_size=64))
def test_ascending_is_monotonic(values):
    values.sort()
    to_isqrt = floor.Ascending(0, ctx=ctx())
    result = [to_isqrt(n) for n in values]
    assert result == sorted(result)
    assert result == [intmath.isqrt_floor(n) for n in values]


@given(st.lists(u16, max_size=64))
def test_descending_mirrors_ascending(values):
    values.sort()
    up = floor.Ascending(0, ctx=ctx())
    down = floor.Descending(255, ctx=ctx())
    rising = [up(n) for n in values]
    falling = [down(n) for n in reversed(values)]
    assert falling == rising[::-1]


def test_ascending_returns_stale_root_when_input_falls():
    to_isqrt = floor.Ascending(0)
    assert to_isqrt(100) == 10
    assert to_isqrt(4) == 10
    assert to_isqrt(121) == 11


def test_descending_returns_stale_root_when_input_rises():
    to_isqrt = floor.Descending(10)
    assert to_isqrt(16) == 4
    assert to_isqrt(100) == 4
    assert to_isqrt(3) == 1


def test_saturates_at_top_of_signed_range():
    # isqrt(32767) is 181; int9 roots go up to 255
    for cls in (floor.Changing, floor.Ascending):
        to_isqrt = cls(0, ctx=ctx('i16', ('int', 9)))
        assert to_isqrt(16383) == 127
        assert to_isqrt(32767) == 181
        assert to_isqrt.hi == 32767


@pytest.mark.parametrize("num,sqrt", (('i16', 'i8'), ('i32', 'i16')))
def test_rejects_signed_root_type_too_narrow(num, sqrt):
    # isqrt of the largest input (181, 46340) does not fit in the root type
    with pytest.raises(WidthError):
        ctx(num, sqrt)


def test_entire_signed_range():
    to_isqrt = floor.Changing(0, ctx=ctx('i16', ('int', 9)))
    for n in range(32768):
        assert to_isqrt(n) == intmath.isqrt_floor(n)
    for n in range(32767, -1, -1):
        assert to_isqrt(n) == intmath.isqrt_floor(n)


def test_top_of_range():
    to_isqrt = floor.Changing(0)
    assert to_isqrt(65535) == 255
    assert to_isqrt.hi == 65535
    assert to_isqrt(65024) == 254
    to_isqrt = floor.Changing(255)
    assert (to_isqrt.lo, to_isqrt.hi) == (65025, 65535)


def test_reset():
    to_isqrt = floor.Changing(0)
    assert to_isqrt(50) == 7
    to_isqrt.reset(200)
    assert to_isqrt.sqrt == 200
    assert (to_isqrt.lo, to_isqrt.hi) == (40000, 40400)
    assert to_isqrt(40401) == 201


@pytest.mark.parametrize("cls", [floor.Changing, floor.Ascending, floor.Descending])
def test_rejects_out_of_range(cls):
    with pytest.raises(DomainError):
        cls(256)
    with pytest.raises(DomainError):
        cls(-1)
    to_isqrt = cls(0)
    with pytest.raises(DomainError):
        to_isqrt(-1)
    with pytest.raises(DomainError):
        to_isqrt(65536)
    with pytest.raises(TypeError):
        to_isqrt(2.0)
    assert to_isqrt.sqrt == 0


def test_default_contexts():
    assert floor.Changing().ctx.direction == DIR.CHANGING
    assert floor.Ascending().ctx.direction == DIR.ASCENDING
    assert floor.Descending().ctx.direction == DIR.DESCENDING
    assert floor.Changing().ctx.rm == RM.FLOOR


def test_repr_shows_state():
    to_isqrt = floor.Changing(2)
    assert repr(to_isqrt).startswith('Changing(sqrt=2, lo=4, hi=8, ')
