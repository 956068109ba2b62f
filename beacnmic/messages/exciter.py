"""Exciter parameters."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, SubMessage
from beacnmic.types import BeacnValueError, Percent, Ranged


class ExciterParam(IntEnum):
    """Exciter parameters, valued by their key byte and listed in fetch order."""

    AMOUNT = 0x01
    FREQUENCY = 0x02
    ENABLED = 0x03


class ExciterFreq(Ranged):
    MINIMUM = 0.0
    MAXIMUM = 5000.0


_VALUE_TYPES = {
    ExciterParam.AMOUNT: Percent,
    ExciterParam.FREQUENCY: ExciterFreq,
    ExciterParam.ENABLED: bool,
}

_BY_KEY = {int(param): param for param in ExciterParam}


@dataclass(frozen=True)
class Exciter(SubMessage):
    """An exciter getter (no value) or setter."""

    MESSAGE: ClassVar[BeacnMessage] = BeacnMessage.EXCITER

    param: ExciterParam
    value: Any = None

    def __post_init__(self) -> None:
        name = f"Exciter {self.param.name}"
        self._check_value_type(name, self.value, _VALUE_TYPES[self.param])

    def to_beacn_key(self) -> bytes:
        return int(self.param).to_bytes(1, "little") + b"\x00"

    def to_beacn_value(self) -> bytes:
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "Exciter":
        first = cls._key_bytes(key)[0]
        param = _BY_KEY.get(first)
        if param is None:
            raise BeacnValueError(f"unexpected exciter key: {first}")
        return cls(param, cls._decode_value(_VALUE_TYPES[param], value))

    @classmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["Exciter"]:
        return [cls(param) for param in ExciterParam]