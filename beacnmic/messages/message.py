"""Framing of whole messages: family byte, key bytes and value."""

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, SubMessage
from beacnmic.messages.bass_enhancement import BassEnhancement
from beacnmic.messages.compressor import Compressor
from beacnmic.messages.deesser import DeEsser
from beacnmic.messages.equaliser import Equaliser
from beacnmic.messages.exciter import Exciter
from beacnmic.messages.expander import Expander
from beacnmic.messages.headphone_equaliser import HeadphoneEQ
from beacnmic.messages.headphones import Headphones
from beacnmic.messages.lighting import Lighting
from beacnmic.messages.mic_setup import MicSetup
from beacnmic.messages.subwoofer import Subwoofer
from beacnmic.messages.suppressor import Suppressor
from beacnmic.types import BeacnValueError

MESSAGE_SIZE = 8

_FETCH_FAMILIES = (
    BassEnhancement,
    Compressor,
    DeEsser,
    Equaliser,
    Exciter,
    Expander,
    HeadphoneEQ,
    Headphones,
    Lighting,
    MicSetup,
    Subwoofer,
    Suppressor,
)

_FAMILIES = {family.MESSAGE: family for family in _FETCH_FAMILIES}


def to_beacn_key(message: SubMessage) -> bytes:
    """The three key bytes: family byte followed by the family's key."""
    return bytes([int(message.MESSAGE)]) + message.to_beacn_key()


def to_beacn_value(message: SubMessage) -> bytes:
    """The four value bytes of a setter."""
    return message.to_beacn_value()


def from_beacn_message(data, device_type: DeviceType) -> SubMessage:
    """Decode an eight byte parameter report from the device."""
    data = bytes(data)
    if len(data) != MESSAGE_SIZE:
        raise BeacnValueError(f"expected {MESSAGE_SIZE} bytes, got {len(data)}")
    try:
        family = _FAMILIES[BeacnMessage(data[0])]
    except ValueError as exc:
        raise BeacnValueError(f"unknown message family: {data[0]}") from exc
    return family.from_beacn(data[1:3], data[4:8], device_type)


def generate_fetch_messages(device_type: DeviceType) -> list[SubMessage]:
    """Every getter needed to read the full state of a device."""
    return [
        message
        for family in _FETCH_FAMILIES
        for message in family.fetch_messages(device_type)
    ]