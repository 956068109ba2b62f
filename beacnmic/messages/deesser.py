"""De-esser parameters."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, SubMessage
from beacnmic.types import BeacnValueError, Percent


class DeEsserParam(IntEnum):
    """De-esser parameters, valued by their key byte and listed in fetch order."""

    AMOUNT = 0x03
    ENABLED = 0x04


_VALUE_TYPES = {DeEsserParam.AMOUNT: Percent, DeEsserParam.ENABLED: bool}


@dataclass(frozen=True)
class DeEsser(SubMessage):
    """A de-esser getter (no value) or setter."""

    MESSAGE: ClassVar[BeacnMessage] = BeacnMessage.DE_ESSER

    param: DeEsserParam
    value: Any = None

    def __post_init__(self) -> None:
        expected = _VALUE_TYPES[self.param]
        self._check_value_type(f"DeEsser {self.param.name}", self.value, expected)

    def to_beacn_key(self) -> bytes:
        return bytes((self.param, 0))

    def to_beacn_value(self) -> bytes:
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "DeEsser":
        code = cls._key_bytes(key)[0]
        if code not in _VALUE_TYPES:
            raise BeacnValueError(f"unexpected de-esser key: {code}")
        param = DeEsserParam(code)
        return cls(param, cls._decode_value(_VALUE_TYPES[param], value))

    @classmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["DeEsser"]:
        return list(map(cls, DeEsserParam))