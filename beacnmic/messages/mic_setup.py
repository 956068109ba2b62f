"""Microphone input setup parameters."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, DeviceMessageType, SubMessage
from beacnmic.types import BeacnValueError, Ranged, ValueKind


class MicSetupParam(Enum):
    """Input parameters; the gain shares a key byte between devices."""

    MIC_GAIN = "mic_gain"
    STUDIO_MIC_GAIN = "studio_mic_gain"
    STUDIO_PHANTOM_POWER = "studio_phantom_power"


class MicGain(Ranged):
    KIND = ValueKind.U32
    MINIMUM = 3
    MAXIMUM = 20


class StudioMicGain(Ranged):
    KIND = ValueKind.U32
    MINIMUM = 0
    MAXIMUM = 69


_KEYS = {
    MicSetupParam.MIC_GAIN: 0x00,
    MicSetupParam.STUDIO_MIC_GAIN: 0x00,
    MicSetupParam.STUDIO_PHANTOM_POWER: 0x02,
}

_VALUE_TYPES = {
    MicSetupParam.MIC_GAIN: MicGain,
    MicSetupParam.STUDIO_MIC_GAIN: StudioMicGain,
    MicSetupParam.STUDIO_PHANTOM_POWER: bool,
}

_DEVICE_MESSAGE_TYPES = {
    MicSetupParam.MIC_GAIN: DeviceMessageType.BEACN_MIC,
    MicSetupParam.STUDIO_MIC_GAIN: DeviceMessageType.BEACN_STUDIO,
    MicSetupParam.STUDIO_PHANTOM_POWER: DeviceMessageType.BEACN_STUDIO,
}

_GAIN_PARAMS = {
    DeviceType.BEACN_MIC: MicSetupParam.MIC_GAIN,
    DeviceType.BEACN_STUDIO: MicSetupParam.STUDIO_MIC_GAIN,
}

_FETCH = {
    DeviceType.BEACN_MIC: (MicSetupParam.MIC_GAIN,),
    DeviceType.BEACN_STUDIO: (
        MicSetupParam.STUDIO_MIC_GAIN,
        MicSetupParam.STUDIO_PHANTOM_POWER,
    ),
}


@dataclass(frozen=True)
class MicSetup(SubMessage):
    """A mic setup getter (no value) or setter."""

    MESSAGE: ClassVar[BeacnMessage] = BeacnMessage.MIC_SETUP

    param: MicSetupParam
    value: Any = None

    def __post_init__(self) -> None:
        self._check_value_type(
            f"MicSetup {self.param.name}", self.value, _VALUE_TYPES[self.param]
        )

    def device_message_type(self) -> DeviceMessageType:
        return _DEVICE_MESSAGE_TYPES[self.param]

    def to_beacn_key(self) -> bytes:
        return bytes([_KEYS[self.param], 0x00])

    def to_beacn_value(self) -> bytes:
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "MicSetup":
        key = cls._key_bytes(key)
        if key[0] == 0x00:
            param = _GAIN_PARAMS[device_type]
        elif key[0] == 0x02:
            param = MicSetupParam.STUDIO_PHANTOM_POWER
        else:
            raise BeacnValueError(f"unknown mic setup key: {key[0]}")
        return cls(param, cls._decode_value(_VALUE_TYPES[param], value))

    @classmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["MicSetup"]:
        return [cls(param) for param in _FETCH[device_type]]