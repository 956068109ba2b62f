"""Subwoofer effect parameters."""

import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, SubMessage
from beacnmic.types import BeacnValueError, Percent, Ranged, ValueKind


class SubwooferParam(IntEnum):
    """Subwoofer parameters, valued by their key byte."""

    MAKEUP_GAIN = 0x04
    RATIO = 0x05
    MIX = 0x0B
    ENABLED = 0x0C
    AMOUNT = 0x0E


class SubwooferMakeupGain(Ranged):
    MINIMUM = 2.0
    MAXIMUM = 11.0


class SubwooferRatio(Ranged):
    MINIMUM = 0.0
    MAXIMUM = 12.0


class SubwooferAmount(Ranged):
    KIND = ValueKind.I32
    MINIMUM = 0
    MAXIMUM = 10


_VALUE_TYPES = {
    SubwooferParam.MAKEUP_GAIN: SubwooferMakeupGain,
    SubwooferParam.RATIO: SubwooferRatio,
    SubwooferParam.MIX: Percent,
    SubwooferParam.ENABLED: bool,
    SubwooferParam.AMOUNT: SubwooferAmount,
}

_FETCH_ORDER = (
    SubwooferParam.ENABLED,
    SubwooferParam.RATIO,
    SubwooferParam.AMOUNT,
    SubwooferParam.MAKEUP_GAIN,
    SubwooferParam.MIX,
)

_MAX_AMOUNT_INPUT = 12


@dataclass(frozen=True)
class Subwoofer(SubMessage):
    """A subwoofer getter (no value) or setter."""

    MESSAGE: ClassVar[BeacnMessage] = BeacnMessage.SUBWOOFER

    param: SubwooferParam
    value: Any = None

    def __post_init__(self) -> None:
        self._check_value_type(
            f"Subwoofer {self.param.name}", self.value, _VALUE_TYPES[self.param]
        )

    def to_beacn_key(self) -> bytes:
        return bytes([int(self.param), 0x00])

    def to_beacn_value(self) -> bytes:
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "Subwoofer":
        key = cls._key_bytes(key)
        try:
            param = SubwooferParam(key[0])
        except ValueError as exc:
            raise BeacnValueError(f"unexpected subwoofer key: {key[0]}") from exc
        return cls(param, cls._decode_value(_VALUE_TYPES[param], value))

    @classmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["Subwoofer"]:
        return [cls(param) for param in _FETCH_ORDER]

    @staticmethod
    def amount_messages(amount: int) -> list["Subwoofer"]:
        """The setters that apply an overall subwoofer amount."""
        amount = operator.index(amount)
        if not 0 <= amount <= _MAX_AMOUNT_INPUT:
            raise BeacnValueError(f"subwoofer amount {amount} out of range")
        gain = 2 if amount < 6 else amount + 1
        ratio = 12 - amount
        mix = amount * 10
        return [
            Subwoofer(SubwooferParam.AMOUNT, SubwooferAmount(amount)),
            Subwoofer(SubwooferParam.MIX, Percent(float(mix))),
            Subwoofer(SubwooferParam.RATIO, SubwooferRatio(float(ratio))),
            Subwoofer(SubwooferParam.MAKEUP_GAIN, SubwooferMakeupGain(float(gain))),
        ]