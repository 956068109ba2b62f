"""Equaliser parameters, kept per mode and per band."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, SubMessage
from beacnmic.types import BeacnValueError, PackedEnumKey, Ranged, WireEnum


class EqualiserParam(IntEnum):
    """Equaliser parameters, valued by their low key nibble."""

    MODE = 0x00
    TYPE = 0x01
    GAIN = 0x02
    FREQUENCY = 0x03
    Q = 0x04
    ENABLED = 0x05


class EQMode(WireEnum):
    SIMPLE = 0x00
    ADVANCED = 0x01


class EQBand(IntEnum):
    BAND_1 = 0x00
    BAND_2 = 0x01
    BAND_3 = 0x02
    BAND_4 = 0x03
    BAND_5 = 0x04
    BAND_6 = 0x05
    BAND_7 = 0x06
    BAND_8 = 0x08


class EQBandType(WireEnum):
    NOT_SET = 0x00
    LOW_PASS_FILTER = 0x01
    HIGH_PASS_FILTER = 0x02
    NOTCH_FILTER = 0x03
    BELL_BAND = 0x04
    LOW_SHELF = 0x05
    HIGH_SHELF = 0x06


class EQGain(Ranged):
    MINIMUM = -12.0
    MAXIMUM = 12.0


class EQFrequency(Ranged):
    MINIMUM = 20.0
    MAXIMUM = 20000.0


class EQQ(Ranged):
    MINIMUM = -0.1
    MAXIMUM = 10.0


_VALUE_TYPES = {
    EqualiserParam.MODE: EQMode,
    EqualiserParam.TYPE: EQBandType,
    EqualiserParam.GAIN: EQGain,
    EqualiserParam.FREQUENCY: EQFrequency,
    EqualiserParam.Q: EQQ,
    EqualiserParam.ENABLED: bool,
}

_PACKED_PARAMS = [param for param in EqualiserParam if param is not EqualiserParam.MODE]

_FETCH_ORDER = (
    EqualiserParam.TYPE,
    EqualiserParam.GAIN,
    EqualiserParam.FREQUENCY,
    EqualiserParam.Q,
    EqualiserParam.ENABLED,
)

_MODE_KEY = b"\x00\x00"


@dataclass(frozen=True)
class Equaliser(SubMessage):
    """An equaliser getter (no value) or setter.

    Every parameter except MODE belongs to one mode and one band.
    """

    MESSAGE: ClassVar[BeacnMessage] = BeacnMessage.EQUALISER

    param: EqualiserParam
    mode: EQMode | None = None
    band: EQBand | None = None
    value: Any = None

    def __post_init__(self) -> None:
        if self.param is EqualiserParam.MODE:
            if self.mode is not None or self.band is not None:
                raise TypeError("Equaliser MODE takes neither a mode nor a band")
        else:
            if not isinstance(self.mode, EQMode):
                raise TypeError(f"Equaliser {self.param.name} requires an EQMode")
            if not isinstance(self.band, EQBand):
                raise TypeError(f"Equaliser {self.param.name} requires an EQBand")
        self._check_value_type(
            f"Equaliser {self.param.name}", self.value, _VALUE_TYPES[self.param]
        )

    def to_beacn_key(self) -> bytes:
        if self.param is EqualiserParam.MODE:
            return _MODE_KEY
        return bytes([PackedEnumKey(self.band, self.param).to_encoded(), int(self.mode)])

    def to_beacn_value(self) -> bytes:
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "Equaliser":
        key = cls._key_bytes(key)
        if key == _MODE_KEY:
            return cls(EqualiserParam.MODE, value=EQMode.from_beacn(value))
        try:
            mode = EQMode(key[1])
        except ValueError as exc:
            raise BeacnValueError(f"unknown equaliser mode: {key[1]}") from exc
        packed = PackedEnumKey.from_encoded(key[0], EQBand, _PACKED_PARAMS)
        param = packed.lower
        return cls(param, mode, packed.upper, cls._decode_value(_VALUE_TYPES[param], value))

    @classmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["Equaliser"]:
        messages = [cls(EqualiserParam.MODE)]
        for mode in EQMode:
            for band in EQBand:
                messages.extend(cls(param, mode, band) for param in _FETCH_ORDER)
        return messages