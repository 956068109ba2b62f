"""Headphone output parameters, some of them specific to one device."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, DeviceMessageType, SubMessage
from beacnmic.types import BeacnValueError, Ranged, WireEnum


class HeadphonesParam(Enum):
    """Headphone parameters; two of them share a key byte on different devices."""

    HEADPHONE_LEVEL = "headphone_level"
    MIC_MONITOR = "mic_monitor"
    STUDIO_MIC_MONITOR = "studio_mic_monitor"
    MIC_CHANNELS_LINKED = "mic_channels_linked"
    STUDIO_CHANNELS_LINKED = "studio_channels_linked"
    MIC_OUTPUT_GAIN = "mic_output_gain"
    HEADPHONE_TYPE = "headphone_type"
    FX_ENABLED = "fx_enabled"
    STUDIO_DRIVERLESS = "studio_driverless"


class HeadphoneTypes(WireEnum):
    LINE_LEVEL = 0x00
    NORMAL_POWER = 0x01
    HIGH_IMPEDANCE = 0x02
    IN_EAR_MONITORS = 0x03


class HPLevel(Ranged):
    MINIMUM = -70.0
    MAXIMUM = -0.0


class HPMicMonitorLevel(Ranged):
    MINIMUM = -100.0
    MAXIMUM = 6.0


class HPMicOutputGain(Ranged):
    MINIMUM = 0.0
    MAXIMUM = 12.0


_KEYS = {
    HeadphonesParam.HEADPHONE_LEVEL: 0x04,
    HeadphonesParam.MIC_MONITOR: 0x06,
    HeadphonesParam.STUDIO_MIC_MONITOR: 0x07,
    HeadphonesParam.MIC_CHANNELS_LINKED: 0x07,
    HeadphonesParam.STUDIO_CHANNELS_LINKED: 0x08,
    HeadphonesParam.MIC_OUTPUT_GAIN: 0x10,
    HeadphonesParam.HEADPHONE_TYPE: 0x11,
    HeadphonesParam.FX_ENABLED: 0x12,
    HeadphonesParam.STUDIO_DRIVERLESS: 0x14,
}

_VALUE_TYPES = {
    HeadphonesParam.HEADPHONE_LEVEL: HPLevel,
    HeadphonesParam.MIC_MONITOR: HPMicMonitorLevel,
    HeadphonesParam.STUDIO_MIC_MONITOR: HPMicMonitorLevel,
    HeadphonesParam.MIC_CHANNELS_LINKED: bool,
    HeadphonesParam.STUDIO_CHANNELS_LINKED: bool,
    HeadphonesParam.MIC_OUTPUT_GAIN: HPMicOutputGain,
    HeadphonesParam.HEADPHONE_TYPE: HeadphoneTypes,
    HeadphonesParam.FX_ENABLED: bool,
    HeadphonesParam.STUDIO_DRIVERLESS: bool,
}

_DEVICE_MESSAGE_TYPES = {
    HeadphonesParam.MIC_MONITOR: DeviceMessageType.BEACN_MIC,
    HeadphonesParam.MIC_CHANNELS_LINKED: DeviceMessageType.BEACN_MIC,
    HeadphonesParam.STUDIO_MIC_MONITOR: DeviceMessageType.BEACN_STUDIO,
    HeadphonesParam.STUDIO_CHANNELS_LINKED: DeviceMessageType.BEACN_STUDIO,
    HeadphonesParam.STUDIO_DRIVERLESS: DeviceMessageType.BEACN_STUDIO,
}

_SHARED_KEY = 0x07
_SHARED_KEY_PARAMS = {
    DeviceType.BEACN_MIC: HeadphonesParam.MIC_CHANNELS_LINKED,
    DeviceType.BEACN_STUDIO: HeadphonesParam.STUDIO_MIC_MONITOR,
}

_BY_KEY = {
    key: param for param, key in _KEYS.items() if key != _SHARED_KEY
}

_COMMON_FETCH = (
    HeadphonesParam.HEADPHONE_LEVEL,
    HeadphonesParam.MIC_OUTPUT_GAIN,
    HeadphonesParam.HEADPHONE_TYPE,
    HeadphonesParam.FX_ENABLED,
)

_DEVICE_FETCH = {
    DeviceType.BEACN_MIC: (
        HeadphonesParam.MIC_MONITOR,
        HeadphonesParam.MIC_CHANNELS_LINKED,
    ),
    DeviceType.BEACN_STUDIO: (
        HeadphonesParam.STUDIO_MIC_MONITOR,
        HeadphonesParam.STUDIO_CHANNELS_LINKED,
        HeadphonesParam.STUDIO_DRIVERLESS,
    ),
}


@dataclass(frozen=True)
class Headphones(SubMessage):
    """A headphones getter (no value) or setter."""

    MESSAGE: ClassVar[BeacnMessage] = BeacnMessage.HEADPHONES

    param: HeadphonesParam
    value: Any = None

    def __post_init__(self) -> None:
        self._check_value_type(
            f"Headphones {self.param.name}", self.value, _VALUE_TYPES[self.param]
        )

    def device_message_type(self) -> DeviceMessageType:
        return _DEVICE_MESSAGE_TYPES.get(self.param, DeviceMessageType.COMMON)

    def to_beacn_key(self) -> bytes:
        return bytes([_KEYS[self.param], 0x00])

    def to_beacn_value(self) -> bytes:
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "Headphones":
        key = cls._key_bytes(key)
        if key[0] == _SHARED_KEY:
            param = _SHARED_KEY_PARAMS[device_type]
        else:
            param = _BY_KEY.get(key[0])
            if param is None:
                raise BeacnValueError(f"unexpected headphones key: {key[0]}")
        return cls(param, cls._decode_value(_VALUE_TYPES[param], value))

    @classmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["Headphones"]:
        params = _COMMON_FETCH + _DEVICE_FETCH[device_type]
        return [cls(param) for param in params]