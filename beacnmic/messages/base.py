"""Shared behaviour of the per-effect message families."""

from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from typing import Any, ClassVar

from beacnmic.manager import DeviceType
from beacnmic.types import BeacnValueError, decode_bool, encode_bool

KEY_SIZE = 2


class DeviceMessageType(Enum):
    """Which devices a message may be sent to."""

    COMMON = "common"
    BEACN_MIC = "beacn_mic"
    BEACN_STUDIO = "beacn_studio"


class BeacnMessage(IntEnum):
    """The first key byte, selecting the message family."""

    HEADPHONES = 0x00
    LIGHTING = 0x01
    EQUALISER = 0x02
    HEADPHONE_EQ = 0x03
    BASS_ENHANCEMENT = 0x04
    COMPRESSOR = 0x05
    DE_ESSER = 0x06
    EXCITER = 0x07
    EXPANDER = 0x08
    SUPPRESSOR = 0x09
    MIC_SETUP = 0x0A
    SUBWOOFER = 0x0B


class SubMessage(ABC):
    """One family of parameters; a message without a value is a getter."""

    MESSAGE: ClassVar[BeacnMessage]
    value: Any = None

    def device_message_type(self) -> DeviceMessageType:
        """The devices this message is valid for."""
        return DeviceMessageType.COMMON

    def is_getter(self) -> bool:
        """Whether this message only asks for the current value."""
        return self.value is None

    @abstractmethod
    def to_beacn_key(self) -> bytes:
        """The two key bytes that follow the family byte."""

    @abstractmethod
    def to_beacn_value(self) -> bytes:
        """The four value bytes of a setter."""

    @classmethod
    @abstractmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "SubMessage":
        """Build a setter from key and value bytes read from the device."""

    @classmethod
    @abstractmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["SubMessage"]:
        """Every getter needed to read this family's full state."""

    def _encode_value(self) -> bytes:
        if self.value is None:
            raise BeacnValueError(
                f"{type(self).__name__}: attempted to set a value on a getter"
            )
        if isinstance(self.value, bool):
            return encode_bool(self.value)
        return self.value.to_beacn()

    @staticmethod
    def _decode_value(value_type, data):
        if value_type is bool:
            return decode_bool(data)
        return value_type.from_beacn(data)

    @staticmethod
    def _key_bytes(key) -> bytes:
        key = bytes(key)
        if len(key) != KEY_SIZE:
            raise BeacnValueError(f"expected {KEY_SIZE} key bytes, got {len(key)}")
        return key

    @staticmethod
    def _check_value_type(owner: str, value, expected) -> None:
        if value is not None and not isinstance(value, expected):
            name = getattr(expected, "__name__", str(expected))
            raise TypeError(f"{owner} expects a {name}, got {value!r}")