"""Expander parameters, kept separately for the simple and advanced modes."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, SubMessage
from beacnmic.types import PackedEnumKey, Ranged, TimeFrame, WireEnum


class ExpanderParam(IntEnum):
    """Expander parameters, valued by their low key nibble."""

    MODE = 0x00
    ATTACK = 0x01
    RELEASE = 0x02
    THRESHOLD = 0x03
    RATIO = 0x04
    ENABLED = 0x05


class ExpanderMode(WireEnum):
    SIMPLE = 0x00
    ADVANCED = 0x01


class ExpanderRatio(Ranged):
    MINIMUM = 1.0
    MAXIMUM = 10.0


class ExpanderThreshold(Ranged):
    MINIMUM = -90.0
    MAXIMUM = 0.0


_VALUE_TYPES = {
    ExpanderParam.MODE: ExpanderMode,
    ExpanderParam.ATTACK: TimeFrame,
    ExpanderParam.RELEASE: TimeFrame,
    ExpanderParam.THRESHOLD: ExpanderThreshold,
    ExpanderParam.RATIO: ExpanderRatio,
    ExpanderParam.ENABLED: bool,
}

_PACKED_PARAMS = [param for param in ExpanderParam if param is not ExpanderParam.MODE]

_FETCH_ORDER = (
    ExpanderParam.THRESHOLD,
    ExpanderParam.RATIO,
    ExpanderParam.ENABLED,
    ExpanderParam.ATTACK,
    ExpanderParam.RELEASE,
)

_MODE_KEY = b"\x00\x00"


@dataclass(frozen=True)
class Expander(SubMessage):
    """An expander getter (no value) or setter.

    Every parameter except MODE belongs to one expander mode.
    """

    MESSAGE: ClassVar[BeacnMessage] = BeacnMessage.EXPANDER

    param: ExpanderParam
    mode: ExpanderMode | None = None
    value: Any = None

    def __post_init__(self) -> None:
        if self.param is ExpanderParam.MODE:
            if self.mode is not None:
                raise TypeError("Expander MODE does not take a mode")
        elif not isinstance(self.mode, ExpanderMode):
            raise TypeError(f"Expander {self.param.name} requires an ExpanderMode")
        self._check_value_type(
            f"Expander {self.param.name}", self.value, _VALUE_TYPES[self.param]
        )

    def to_beacn_key(self) -> bytes:
        if self.param is ExpanderParam.MODE:
            return _MODE_KEY
        return bytes([PackedEnumKey(self.mode, self.param).to_encoded(), 0x00])

    def to_beacn_value(self) -> bytes:
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "Expander":
        key = cls._key_bytes(key)
        if key == _MODE_KEY:
            return cls(ExpanderParam.MODE, value=ExpanderMode.from_beacn(value))
        packed = PackedEnumKey.from_encoded(key[0], ExpanderMode, _PACKED_PARAMS)
        param = packed.lower
        return cls(param, packed.upper, cls._decode_value(_VALUE_TYPES[param], value))

    @classmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["Expander"]:
        messages = [cls(ExpanderParam.MODE)]
        for mode in ExpanderMode:
            messages.extend(cls(param, mode) for param in _FETCH_ORDER)
        return messages