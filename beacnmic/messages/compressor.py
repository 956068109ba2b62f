"""Compressor parameters, kept separately for the simple and advanced modes."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, SubMessage
from beacnmic.types import MakeUpGain, PackedEnumKey, Ranged, TimeFrame, WireEnum


class CompressorParam(IntEnum):
    """Compressor parameters, valued by their low key nibble."""

    MODE = 0x00
    ATTACK = 0x01
    RELEASE = 0x02
    THRESHOLD = 0x03
    MAKEUP_GAIN = 0x05
    RATIO = 0x06
    ENABLED = 0x07


class CompressorMode(WireEnum):
    SIMPLE = 0x00
    ADVANCED = 0x01


class CompressorThreshold(Ranged):
    MINIMUM = -50.0
    MAXIMUM = 0.0


class CompressorRatio(Ranged):
    MINIMUM = 1.0
    MAXIMUM = 16.0


# Parameters held per mode, in fetch order, with the type of their value.
_PER_MODE = {
    CompressorParam.ATTACK: TimeFrame,
    CompressorParam.RELEASE: TimeFrame,
    CompressorParam.THRESHOLD: CompressorThreshold,
    CompressorParam.RATIO: CompressorRatio,
    CompressorParam.MAKEUP_GAIN: MakeUpGain,
    CompressorParam.ENABLED: bool,
}


@dataclass(frozen=True)
class Compressor(SubMessage):
    """A compressor getter (no value) or setter.

    Every parameter except MODE belongs to one compressor mode.
    """

    MESSAGE: ClassVar[BeacnMessage] = BeacnMessage.COMPRESSOR

    param: CompressorParam
    mode: CompressorMode | None = None
    value: Any = None

    def __post_init__(self) -> None:
        label = f"Compressor {self.param.name}"
        if self.param is CompressorParam.MODE:
            if self.mode is not None:
                raise TypeError(f"{label} does not take a mode")
            expected = CompressorMode
        else:
            if not isinstance(self.mode, CompressorMode):
                raise TypeError(f"{label} requires a CompressorMode")
            expected = _PER_MODE[self.param]
        self._check_value_type(label, self.value, expected)

    def to_beacn_key(self) -> bytes:
        if self.mode is None:
            return bytes(2)
        return bytes((PackedEnumKey(self.mode, self.param).to_encoded(), 0))

    def to_beacn_value(self) -> bytes:
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "Compressor":
        key = cls._key_bytes(key)
        if not any(key):
            return cls(CompressorParam.MODE, value=CompressorMode.from_beacn(value))
        packed = PackedEnumKey.from_encoded(key[0], CompressorMode, list(_PER_MODE))
        param = packed.lower
        return cls(param, packed.upper, cls._decode_value(_PER_MODE[param], value))

    @classmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["Compressor"]:
        per_mode = (cls(param, mode) for mode in CompressorMode for param in _PER_MODE)
        return [cls(CompressorParam.MODE), *per_mode]