"""Lighting parameters."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, SubMessage
from beacnmic.types import RGB, BeacnValueError, Ranged, ValueKind, WireEnum


class LightingParam(IntEnum):
    """Lighting parameters, valued by their key byte."""

    MODE = 0x00
    COLOUR_1 = 0x01
    COLOUR_2 = 0x02
    SPEED = 0x04
    BRIGHTNESS = 0x05
    METER_SOURCE = 0x06
    METER_SENSITIVITY = 0x07
    MUTE_MODE = 0x08
    MUTE_COLOUR = 0x09
    SUSPEND_MODE = 0x0B
    SUSPEND_BRIGHTNESS = 0x0C


class LightingMode(WireEnum):
    SOLID = 0x00
    SPECTRUM = 0x01
    GRADIENT = 0x02
    REACTIVE_RING = 0x05
    REACTIVE_METER_UP = 0x06
    REACTIVE_METER_DOWN = 0x07
    SPARKLE_RANDOM = 0x0A
    SPARKLE_METER = 0x0B


class LightingMuteMode(WireEnum):
    NOTHING = 0x00
    SOLID = 0x01
    OFF = 0x02


class LightingSuspendMode(WireEnum):
    NOTHING = 0x00
    OFF = 0x01
    BRIGHTNESS = 0x02


class LightingMeterSource(WireEnum):
    MICROPHONE = 0x00
    HEADPHONES = 0x01


class LightingSpeed(Ranged):
    KIND = ValueKind.I32
    MINIMUM = -10
    MAXIMUM = 10


class LightingBrightness(Ranged):
    KIND = ValueKind.I32
    MINIMUM = 0
    MAXIMUM = 100


class LightingMeterSensitivity(Ranged):
    MINIMUM = 0.0
    MAXIMUM = 10.0


class LightingSuspendBrightness(Ranged):
    KIND = ValueKind.U32
    MINIMUM = 0
    MAXIMUM = 10


_VALUE_TYPES = {
    LightingParam.MODE: LightingMode,
    LightingParam.COLOUR_1: RGB,
    LightingParam.COLOUR_2: RGB,
    LightingParam.SPEED: LightingSpeed,
    LightingParam.BRIGHTNESS: LightingBrightness,
    LightingParam.METER_SOURCE: LightingMeterSource,
    LightingParam.METER_SENSITIVITY: LightingMeterSensitivity,
    LightingParam.MUTE_MODE: LightingMuteMode,
    LightingParam.MUTE_COLOUR: RGB,
    LightingParam.SUSPEND_MODE: LightingSuspendMode,
    LightingParam.SUSPEND_BRIGHTNESS: LightingSuspendBrightness,
}


@dataclass(frozen=True)
class Lighting(SubMessage):
    """A lighting getter (no value) or setter."""

    MESSAGE: ClassVar[BeacnMessage] = BeacnMessage.LIGHTING

    param: LightingParam
    value: Any = None

    def __post_init__(self) -> None:
        self._check_value_type(
            f"Lighting {self.param.name}", self.value, _VALUE_TYPES[self.param]
        )

    def to_beacn_key(self) -> bytes:
        return bytes([int(self.param), 0x00])

    def to_beacn_value(self) -> bytes:
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "Lighting":
        key = cls._key_bytes(key)
        try:
            param = LightingParam(key[0])
        except ValueError as exc:
            raise BeacnValueError(f"unexpected lighting key: {key[0]}") from exc
        return cls(param, cls._decode_value(_VALUE_TYPES[param], value))

    @classmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["Lighting"]:
        return [cls(param) for param in LightingParam]