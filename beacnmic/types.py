"""Wire encodings for values exchanged with the device."""

import operator
import struct
import sys
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar

BEACN_VALUE_SIZE = 4

_F32 = struct.Struct("<f")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_F32_MAX = 3.4028234663852886e38


class BeacnValueError(ValueError):
    """A value cannot be encoded to, or decoded from, the wire."""


class ValueKind(Enum):
    """The primitive type a four byte value carries."""

    BOOL = "bool"
    U8 = "u8"
    U32 = "u32"
    I8 = "i8"
    I32 = "i32"
    F32 = "f32"


_INT_BOUNDS = {
    ValueKind.U8: (0, 0xFF),
    ValueKind.U32: (0, 0xFFFFFFFF),
    ValueKind.I8: (-0x80, 0x7F),
    ValueKind.I32: (-0x80000000, 0x7FFFFFFF),
}


def _to_f32(value: float) -> float:
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except (struct.error, OverflowError, TypeError) as exc:
        raise BeacnValueError(f"{value!r} is not a valid f32") from exc


def _to_int(kind: ValueKind, value) -> int:
    try:
        number = operator.index(value)
    except TypeError as exc:
        raise BeacnValueError(f"{value!r} is not an integer") from exc
    low, high = _INT_BOUNDS[kind]
    if not low <= number <= high:
        raise BeacnValueError(f"{number} does not fit in {kind.value}")
    return number


def _coerce(kind: ValueKind, value):
    if kind is ValueKind.BOOL:
        return bool(value)
    if kind is ValueKind.F32:
        return _to_f32(value)
    return _to_int(kind, value)


def _kind_bounds(kind: ValueKind):
    if kind is ValueKind.F32:
        return -_F32_MAX, _F32_MAX
    if kind is ValueKind.BOOL:
        return False, True
    return _INT_BOUNDS[kind]


def _check_size(data) -> bytes:
    data = bytes(data)
    if len(data) != BEACN_VALUE_SIZE:
        raise BeacnValueError(f"expected {BEACN_VALUE_SIZE} bytes, got {len(data)}")
    return data


def encode_bool(value: bool) -> bytes:
    """Encode a boolean as a little endian u32."""
    return _U32.pack(1 if value else 0)


def decode_bool(data) -> bool:
    """Decode a boolean; anything but 0 or 1 is an error."""
    raw = _U32.unpack(_check_size(data))[0]
    if raw not in (0, 1):
        raise BeacnValueError(f"incorrect boolean received: {raw}")
    return raw == 1


def encode(kind: ValueKind, value) -> bytes:
    """Encode a primitive value into its four byte wire form."""
    if kind is ValueKind.BOOL:
        return encode_bool(value)
    if kind is ValueKind.F32:
        return _F32.pack(_to_f32(value))
    number = _to_int(kind, value)
    if kind in (ValueKind.U8, ValueKind.U32):
        return _U32.pack(number)
    return _I32.pack(number)


def decode(kind: ValueKind, data):
    """Decode a primitive value from its four byte wire form."""
    data = _check_size(data)
    if kind is ValueKind.BOOL:
        return decode_bool(data)
    if kind is ValueKind.U8:
        return data[3]
    if kind is ValueKind.I8:
        return int.from_bytes(data[3:4], sys.byteorder, signed=True)
    if kind is ValueKind.U32:
        return _U32.unpack(data)[0]
    if kind is ValueKind.I32:
        return _I32.unpack(data)[0]
    return _F32.unpack(data)[0]


@dataclass(frozen=True)
class RGB:
    """A colour, sent to the device as blue, green, red and a zero byte."""

    red: int
    green: int
    blue: int
    alpha: int = 0

    def to_beacn(self) -> bytes:
        try:
            return bytes([self.blue, self.green, self.red, 0])
        except (ValueError, TypeError) as exc:
            raise BeacnValueError(f"invalid colour {self!r}") from exc

    @classmethod
    def from_beacn(cls, data) -> "RGB":
        data = _check_size(data)
        return cls(red=data[2], green=data[1], blue=data[0], alpha=data[3])


@dataclass(frozen=True)
class PackedEnumKey:
    """Two small enums packed into the high and low nibbles of one byte."""

    upper: IntEnum
    lower: IntEnum

    @classmethod
    def from_encoded(cls, encoded: int, upper_type, lower_type) -> "PackedEnumKey":
        upper_raw = (encoded & 0xF0) >> 4
        lower_raw = encoded & 0x0F
        upper = next((m for m in upper_type if int(m) == upper_raw), None)
        lower = next((m for m in lower_type if int(m) == lower_raw), None)
        if upper is None or lower is None:
            raise BeacnValueError(f"cannot unpack key byte {encoded:#04x}")
        return cls(upper, lower)

    def to_encoded(self) -> int:
        return ((int(self.upper) << 4) | (int(self.lower) & 0x0F)) & 0xFF


@dataclass(frozen=True)
class Ranged:
    """A value whose range is checked whenever it is written or read."""

    value: float
    KIND: ClassVar[ValueKind] = ValueKind.F32
    MINIMUM: ClassVar[float | None] = None
    MAXIMUM: ClassVar[float | None] = None

    @classmethod
    def _bounds(cls):
        low, high = _kind_bounds(cls.KIND)
        if cls.MINIMUM is not None:
            low = _coerce(cls.KIND, cls.MINIMUM)
        if cls.MAXIMUM is not None:
            high = _coerce(cls.KIND, cls.MAXIMUM)
        return low, high

    @classmethod
    def _check(cls, inner, action: str) -> None:
        low, high = cls._bounds()
        if not low <= inner <= high:
            raise BeacnValueError(
                f"{cls.__name__}: {action} value {inner!r} outside range {low!r}..={high!r}"
            )

    def to_beacn(self) -> bytes:
        inner = _coerce(self.KIND, self.value)
        self._check(inner, "attempted to write")
        return encode(self.KIND, inner)

    @classmethod
    def from_beacn(cls, data):
        inner = decode(cls.KIND, data)
        cls._check(inner, "received")
        return cls(inner)


class WireEnum(IntEnum):
    """An enumeration sent over the wire as a little endian u32."""

    @classmethod
    def _wire_kind(cls) -> ValueKind:
        return ValueKind.U32

    def to_beacn(self) -> bytes:
        return encode(self._wire_kind(), int(self))

    @classmethod
    def from_beacn(cls, data):
        raw = decode(cls._wire_kind(), data)
        for member in cls:
            if member.value == raw:
                return member
        raise BeacnValueError(f"{cls.__name__}: unknown value {raw!r}")


class TimeFrame(Ranged):
    """Attack and release times."""

    MINIMUM = 1.0
    MAXIMUM = 2000.0


class MakeUpGain(Ranged):
    """Make-up gain in dB."""

    MINIMUM = 0.0
    MAXIMUM = 12.0


class Percent(Ranged):
    """A percentage."""

    MINIMUM = 0.0
    MAXIMUM = 100.0