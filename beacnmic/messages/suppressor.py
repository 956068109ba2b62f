"""Noise suppressor parameters."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, SubMessage
from beacnmic.types import BeacnValueError, Percent, Ranged, WireEnum


class SuppressorParam(IntEnum):
    """Suppressor parameters, valued by their key byte."""

    ENABLED = 0x00
    AMOUNT = 0x02
    STYLE = 0x04
    SENSITIVITY = 0x05
    ADAPT_TIME = 0x08


class SuppressorStyle(WireEnum):
    OFF = 0x00
    ADAPTIVE = 0x01
    SNAPSHOT = 0x02


class SuppressorSensitivity(Ranged):
    MINIMUM = -120.0
    MAXIMUM = -60.0


class SuppressorAdaptTime(Ranged):
    """Adaption time, in milliseconds."""

    MINIMUM = 100.0
    MAXIMUM = 5000.0


_VALUE_TYPES = {
    SuppressorParam.ENABLED: bool,
    SuppressorParam.AMOUNT: Percent,
    SuppressorParam.STYLE: SuppressorStyle,
    SuppressorParam.SENSITIVITY: SuppressorSensitivity,
    SuppressorParam.ADAPT_TIME: SuppressorAdaptTime,
}

_FETCH_ORDER = (
    SuppressorParam.ENABLED,
    SuppressorParam.AMOUNT,
    SuppressorParam.STYLE,
    SuppressorParam.SENSITIVITY,
    SuppressorParam.ADAPT_TIME,
)


@dataclass(frozen=True)
class Suppressor(SubMessage):
    """A suppressor getter (no value) or setter."""

    MESSAGE: ClassVar[BeacnMessage] = BeacnMessage.SUPPRESSOR

    param: SuppressorParam
    value: Any = None

    def __post_init__(self) -> None:
        self._check_value_type(
            f"Suppressor {self.param.name}", self.value, _VALUE_TYPES[self.param]
        )

    def to_beacn_key(self) -> bytes:
        return bytes([int(self.param), 0x00])

    def to_beacn_value(self) -> bytes:
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "Suppressor":
        key = cls._key_bytes(key)
        try:
            param = SuppressorParam(key[0])
        except ValueError as exc:
            raise BeacnValueError(f"unexpected suppressor key: {key[0]}") from exc
        return cls(param, cls._decode_value(_VALUE_TYPES[param], value))

    @classmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["Suppressor"]:
        return [cls(param) for param in _FETCH_ORDER]