import pytest

from beacnmic.manager import DeviceType
from beacnmic.messages.suppressor import (
    Suppressor,
    SuppressorAdaptTime,
    SuppressorParam,
    SuppressorSensitivity,
    SuppressorStyle,
)
from beacnmic.types import BeacnValueError, Percent, ValueKind, encode, encode_bool


def test_keys_follow_param_values():
    for param in SuppressorParam:
        assert Suppressor(param).to_beacn_key() == bytes([int(param), 0x00])


def test_adapt_time_key_byte():
    assert Suppressor(SuppressorParam.ADAPT_TIME).to_beacn_key() == b"\x08\x00"


@pytest.mark.parametrize(
    "message",
    [
        Suppressor(SuppressorParam.ENABLED, True),
        Suppressor(SuppressorParam.ENABLED, False),
        Suppressor(SuppressorParam.AMOUNT, Percent(50.0)),
        Suppressor(SuppressorParam.STYLE, SuppressorStyle.SNAPSHOT),
        Suppressor(SuppressorParam.SENSITIVITY, SuppressorSensitivity(-90.0)),
        Suppressor(SuppressorParam.ADAPT_TIME, SuppressorAdaptTime(1000.0)),
    ],
)
def test_round_trip(message):
    decoded = Suppressor.from_beacn(
        message.to_beacn_key(), message.to_beacn_value(), DeviceType.BEACN_MIC
    )
    assert decoded == message


def test_enabled_value_bytes():
    message = Suppressor(SuppressorParam.ENABLED, True)
    assert message.to_beacn_value() == encode_bool(True)


def test_getter_cannot_be_encoded():
    with pytest.raises(BeacnValueError):
        Suppressor(SuppressorParam.AMOUNT).to_beacn_value()


def test_sensitivity_out_of_range():
    with pytest.raises(BeacnValueError):
        Suppressor(SuppressorParam.SENSITIVITY, SuppressorSensitivity(-50.0)).to_beacn_value()


def test_adapt_time_out_of_range_on_read():
    with pytest.raises(BeacnValueError):
        Suppressor.from_beacn(
            b"\x08\x00", encode(ValueKind.F32, 50.0), DeviceType.BEACN_MIC
        )


def test_unknown_style_rejected():
    with pytest.raises(BeacnValueError):
        Suppressor.from_beacn(b"\x04\x00", encode(ValueKind.U32, 5), DeviceType.BEACN_MIC)


def test_unknown_key_rejected():
    with pytest.raises(BeacnValueError):
        Suppressor.from_beacn(b"\x01\x00", encode_bool(True), DeviceType.BEACN_MIC)


def test_wrong_value_type_rejected():
    with pytest.raises(TypeError):
        Suppressor(SuppressorParam.AMOUNT, True)


def test_fetch_messages_order():
    messages = Suppressor.fetch_messages(DeviceType.BEACN_STUDIO)
    assert [m.param for m in messages] == [
        SuppressorParam.ENABLED,
        SuppressorParam.AMOUNT,
        SuppressorParam.STYLE,
        SuppressorParam.SENSITIVITY,
        SuppressorParam.ADAPT_TIME,
    ]
    assert all(m.is_getter() for m in messages)