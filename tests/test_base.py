from dataclasses import dataclass

import pytest

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, DeviceMessageType, SubMessage
from beacnmic.types import BeacnValueError, Percent, encode_bool


@dataclass(frozen=True)
class _Toggle(SubMessage):
    MESSAGE = BeacnMessage.DE_ESSER
    value: object = None

    def to_beacn_key(self):
        return bytes([0x04, 0x00])

    def to_beacn_value(self):
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type):
        cls._key_bytes(key)
        return cls(cls._decode_value(bool, value))

    @classmethod
    def fetch_messages(cls, device_type):
        return [cls()]


@pytest.mark.parametrize("value, expected", [(None, True), (True, False)])
def test_getter_and_setter(value, expected):
    assert SubMessage.is_getter(_Toggle(value)) is expected


def test_default_device_message_type_is_common():
    assert SubMessage.device_message_type(_Toggle(False)) is DeviceMessageType.COMMON


@pytest.mark.parametrize("flag", [True, False])
def test_bool_round_trip(flag):
    data = _Toggle(flag).to_beacn_value()
    assert data == encode_bool(flag)
    assert _Toggle.from_beacn(b"\x04\x00", data, DeviceType.BEACN_MIC) == _Toggle(flag)


def test_ranged_value_is_encoded():
    assert _Toggle(Percent(50.0)).to_beacn_value() == Percent(50.0).to_beacn()


@pytest.mark.parametrize(
    "value, family",
    [(0x0B, BeacnMessage.SUBWOOFER), (0x04, BeacnMessage.BASS_ENHANCEMENT)],
)
def test_message_family_lookup(value, family):
    assert BeacnMessage(value) is family
    assert len(BeacnMessage) == 12


@pytest.mark.parametrize(
    "error, action",
    [
        (TypeError, SubMessage),
        (BeacnValueError, lambda: SubMessage._encode_value(_Toggle())),
        (
            BeacnValueError,
            lambda: _Toggle.from_beacn(b"\x04", encode_bool(True), DeviceType.BEACN_MIC),
        ),
        (TypeError, lambda: SubMessage._check_value_type("Thing", 3, bool)),
    ],
    ids=["abstract", "getter-value", "short-key", "wrong-type"],
)
def test_errors(error, action):
    with pytest.raises(error):
        action()