"""Headphone equaliser parameters, one set per tone band."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, SubMessage
from beacnmic.types import PackedEnumKey, Ranged


class HPEQParam(IntEnum):
    """Headphone equaliser parameters, valued by their low key nibble."""

    AMOUNT = 0x02
    ENABLED = 0x05


class HPEQType(IntEnum):
    BASS = 0x00
    MIDS = 0x01
    TREBLE = 0x02


class HPEQValue(Ranged):
    MINIMUM = -12.0
    MAXIMUM = 12.0


_VALUE_TYPES = {
    HPEQParam.AMOUNT: HPEQValue,
    HPEQParam.ENABLED: bool,
}

_FETCH_ORDER = (HPEQParam.ENABLED, HPEQParam.AMOUNT)


@dataclass(frozen=True)
class HeadphoneEQ(SubMessage):
    """A headphone equaliser getter (no value) or setter for one tone band."""

    MESSAGE: ClassVar[BeacnMessage] = BeacnMessage.HEADPHONE_EQ

    param: HPEQParam
    eq_type: HPEQType
    value: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.eq_type, HPEQType):
            raise TypeError(f"HeadphoneEQ {self.param.name} requires an HPEQType")
        self._check_value_type(
            f"HeadphoneEQ {self.param.name}", self.value, _VALUE_TYPES[self.param]
        )

    def to_beacn_key(self) -> bytes:
        return bytes([PackedEnumKey(self.eq_type, self.param).to_encoded(), 0x00])

    def to_beacn_value(self) -> bytes:
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "HeadphoneEQ":
        key = cls._key_bytes(key)
        packed = PackedEnumKey.from_encoded(key[0], HPEQType, HPEQParam)
        param = packed.lower
        return cls(param, packed.upper, cls._decode_value(_VALUE_TYPES[param], value))

    @classmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["HeadphoneEQ"]:
        return [cls(param, eq_type) for eq_type in HPEQType for param in _FETCH_ORDER]