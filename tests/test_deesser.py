import struct

import pytest

from beacnmic.manager import DeviceType
from beacnmic.messages.deesser import DeEsser, DeEsserParam
from beacnmic.types import BeacnValueError, Percent


@pytest.mark.parametrize(
    "param, key",
    [(DeEsserParam.AMOUNT, b"\x03\x00"), (DeEsserParam.ENABLED, b"\x04\x00")],
)
def test_keys_match_wire_layout(param, key):
    assert DeEsser(param).to_beacn_key() == key


@pytest.mark.parametrize(
    "flag, data", [(True, b"\x01\x00\x00\x00"), (False, b"\x00\x00\x00\x00")]
)
def test_enabled_value_encoding(flag, data):
    assert DeEsser(DeEsserParam.ENABLED, flag).to_beacn_value() == data


@pytest.mark.parametrize(
    "message",
    [
        DeEsser(DeEsserParam.AMOUNT, Percent(42.5)),
        DeEsser(DeEsserParam.AMOUNT, Percent(0.0)),
        DeEsser(DeEsserParam.ENABLED, True),
        DeEsser(DeEsserParam.ENABLED, False),
    ],
)
def test_round_trip(message):
    decoded = DeEsser.from_beacn(
        message.to_beacn_key(), message.to_beacn_value(), DeviceType.BEACN_MIC
    )
    assert decoded == message


@pytest.mark.parametrize("device_type", list(DeviceType))
def test_fetch_messages(device_type):
    messages = DeEsser.fetch_messages(device_type)
    assert messages == [DeEsser(DeEsserParam.AMOUNT), DeEsser(DeEsserParam.ENABLED)]
    assert all(m.is_getter() for m in messages)


@pytest.mark.parametrize(
    "error, action",
    [
        (BeacnValueError, lambda: DeEsser(DeEsserParam.AMOUNT).to_beacn_value()),
        (BeacnValueError, lambda: DeEsser(DeEsserParam.AMOUNT, Percent(101.0)).to_beacn_value()),
        (
            BeacnValueError,
            lambda: DeEsser.from_beacn(b"\x03\x00", struct.pack("<f", 150.0), DeviceType.BEACN_MIC),
        ),
        (
            BeacnValueError,
            lambda: DeEsser.from_beacn(b"\x01\x00", bytes(4), DeviceType.BEACN_MIC),
        ),
        (
            BeacnValueError,
            lambda: DeEsser.from_beacn(b"\x04\x00", b"\x02\x00\x00\x00", DeviceType.BEACN_MIC),
        ),
        (TypeError, lambda: DeEsser(DeEsserParam.AMOUNT, True)),
    ],
    ids=["getter-value", "write-range", "read-range", "unknown-key", "bad-bool", "wrong-type"],
)
def test_rejected(error, action):
    with pytest.raises(error):
        action()