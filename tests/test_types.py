from enum import IntEnum

import pytest

from beacnmic.types import (
    RGB,
    BeacnValueError,
    MakeUpGain,
    PackedEnumKey,
    Percent,
    Ranged,
    TimeFrame,
    ValueKind,
    WireEnum,
    decode,
    decode_bool,
    encode,
    encode_bool,
)


class Upper(IntEnum):
    FIRST = 0
    SECOND = 1


class Lower(IntEnum):
    ALPHA = 1
    BETA = 5


class Colour(WireEnum):
    RED = 0
    GREEN = 2


class Narrow(Ranged):
    MINIMUM = -0.1
    MAXIMUM = 10.0


class Counter(Ranged):
    KIND = ValueKind.I32
    MINIMUM = -10
    MAXIMUM = 10


@pytest.mark.parametrize(
    "kind, value",
    [
        (ValueKind.BOOL, True),
        (ValueKind.BOOL, False),
        (ValueKind.U32, 123456),
        (ValueKind.I32, -98765),
        (ValueKind.F32, 0.5),
        (ValueKind.F32, -27.0),
    ],
)
def test_round_trip(kind, value):
    data = encode(kind, value)
    assert len(data) == 4
    assert decode(kind, data) == value


def test_u32_little_endian():
    assert encode(ValueKind.U32, 1) == b"\x01\x00\x00\x00"


def test_bool_encoding_matches_u32():
    assert encode_bool(True) == encode(ValueKind.U32, 1)
    assert encode_bool(False) == encode(ValueKind.U32, 0)


def test_decode_bool_rejects_other_values():
    with pytest.raises(BeacnValueError):
        decode_bool(encode(ValueKind.U32, 2))


def test_u8_reads_last_byte():
    assert decode(ValueKind.U8, bytes([0, 0, 0, 7])) == 7


def test_i8_reads_last_byte_signed():
    assert decode(ValueKind.I8, bytes([0, 0, 0, 0xFF])) == -1


def test_i8_encodes_as_i32():
    assert encode(ValueKind.I8, -5) == encode(ValueKind.I32, -5)


def test_encode_out_of_kind_range():
    with pytest.raises(BeacnValueError):
        encode(ValueKind.U32, -1)
    with pytest.raises(BeacnValueError):
        encode(ValueKind.U8, 256)


def test_decode_wrong_size():
    with pytest.raises(BeacnValueError):
        decode(ValueKind.U32, b"\x00\x00")


def test_rgb_wire_order_drops_alpha():
    colour = RGB(red=10, green=20, blue=30, alpha=40)
    assert colour.to_beacn() == bytes([30, 20, 10, 0])


def test_rgb_round_trip():
    colour = RGB(red=1, green=2, blue=3)
    assert RGB.from_beacn(colour.to_beacn()) == colour


def test_rgb_reads_alpha():
    assert RGB.from_beacn(bytes([3, 2, 1, 9])) == RGB(red=1, green=2, blue=3, alpha=9)


def test_packed_key_round_trip():
    key = PackedEnumKey(Upper.SECOND, Lower.BETA)
    encoded = key.to_encoded()
    assert encoded >> 4 == Upper.SECOND
    assert encoded & 0x0F == Lower.BETA
    assert PackedEnumKey.from_encoded(encoded, Upper, Lower) == key


def test_packed_key_unknown():
    with pytest.raises(BeacnValueError):
        PackedEnumKey.from_encoded(0x03, Upper, Lower)


def test_ranged_round_trip():
    value = TimeFrame(250.0)
    assert TimeFrame.from_beacn(value.to_beacn()) == value


def test_ranged_write_out_of_range():
    with pytest.raises(BeacnValueError):
        TimeFrame(0.5).to_beacn()
    with pytest.raises(BeacnValueError):
        Percent(100.5).to_beacn()


def test_ranged_read_out_of_range():
    with pytest.raises(BeacnValueError):
        MakeUpGain.from_beacn(encode(ValueKind.F32, 13.0))


def test_ranged_bounds_inclusive():
    assert Percent.from_beacn(Percent(100.0).to_beacn()) == Percent(100.0)
    assert Percent.from_beacn(Percent(0.0).to_beacn()) == Percent(0.0)


def test_ranged_f32_bound_compared_at_f32_precision():
    decoded = Narrow.from_beacn(encode(ValueKind.F32, -0.1))
    assert decoded.value == pytest.approx(-0.1)


def test_ranged_integer_kind():
    data = Counter(-10).to_beacn()
    assert decode(ValueKind.I32, data) == -10
    assert data == encode(ValueKind.I32, -10)
    assert Counter.from_beacn(data) == Counter(-10)
    with pytest.raises(BeacnValueError):
        Counter(11).to_beacn()


def test_ranged_distinct_types_not_equal():
    assert not (Percent(5.0) == MakeUpGain(5.0))


def test_wire_enum_round_trip():
    assert Colour.from_beacn(Colour.GREEN.to_beacn()) is Colour.GREEN
    assert Colour.GREEN.to_beacn() == encode(ValueKind.U32, 2)


def test_wire_enum_unknown():
    with pytest.raises(BeacnValueError):
        Colour.from_beacn(encode(ValueKind.U32, 1))