import pytest

from dsakit.bitset import BitSet, BitSet8, BitSet16, BitSet32, BitSet64


@pytest.mark.parametrize(
    "start, idx, expected",
    [
        (0b00000000, 0, 0b00000001),
        (0b00000001, 0, 0b00000001),
        (0b00000000, 255, 0b00000000),
        (0b00000000, 7, 0b10000000),
    ],
)
def test_bitset8_set(start, idx, expected):
    b = BitSet8(start)
    b.set(idx)
    assert b == BitSet8(expected)


@pytest.mark.parametrize(
    "start, idx, expected",
    [
        (0b01000000, 0, 0b01000000),
        (0b00000001, 0, 0b00000000),
        (0b00000000, 255, 0b00000000),
        (0b10000001, 7, 0b00000001),
    ],
)
def test_bitset8_unset(start, idx, expected):
    b = BitSet8(start)
    b.unset(idx)
    assert b == BitSet8(expected)


@pytest.mark.parametrize(
    "start, idx, expected",
    [
        (0b01000000, 0, False),
        (0b00000001, 0, True),
        (0b00000000, 255, False),
        (0b10000001, 7, True),
    ],
)
def test_bitset8_get(start, idx, expected):
    assert BitSet8(start).get(idx) is expected


@pytest.mark.parametrize("cls, width", [(BitSet16, 16), (BitSet32, 32), (BitSet64, 64)])
def test_wider_sets_top_bit(cls, width):
    b = cls()
    b.set(width - 1)
    assert int(b) == 1 << (width - 1)
    assert b.get(width - 1) is True
    b.set(width)
    assert int(b) == 1 << (width - 1)
    b.unset(width - 1)
    assert int(b) == 0


def test_equality_with_int_and_across_types():
    assert BitSet8(5) == 5
    assert not (BitSet8(5) == BitSet16(5))


def test_value_must_fit_width():
    with pytest.raises(ValueError):
        BitSet8(256)
    with pytest.raises(ValueError):
        BitSet8(-1)


def test_index_out_of_range():
    with pytest.raises(ValueError):
        BitSet8().set(256)
    with pytest.raises(ValueError):
        BitSet8().get(-1)


def test_base_class_requires_width():
    with pytest.raises(TypeError):
        BitSet(0)