import itertools
import struct

import pytest

from beacnmic.manager import DeviceType
from beacnmic.messages.equaliser import (
    EQBand,
    EQBandType,
    EQFrequency,
    EQGain,
    EQMode,
    EQQ,
    Equaliser,
    EqualiserParam,
)
from beacnmic.types import BeacnValueError

_SAMPLES = {
    EqualiserParam.TYPE: EQBandType.BELL_BAND,
    EqualiserParam.GAIN: EQGain(-6.0),
    EqualiserParam.FREQUENCY: EQFrequency(1000.0),
    EqualiserParam.Q: EQQ(0.5),
    EqualiserParam.ENABLED: True,
}

_PARAM_FOR = {
    EQGain: EqualiserParam.GAIN,
    EQFrequency: EqualiserParam.FREQUENCY,
    EQQ: EqualiserParam.Q,
}


def _round_trip(message, device_type=DeviceType.BEACN_MIC):
    return Equaliser.from_beacn(message.to_beacn_key(), message.to_beacn_value(), device_type)


def _decode(key, data):
    return Equaliser.from_beacn(key, data, DeviceType.BEACN_MIC)


def _band_key(param, band):
    return Equaliser(param, EQMode.SIMPLE, band).to_beacn_key()


@pytest.mark.parametrize(
    "message, key",
    [
        (Equaliser(EqualiserParam.MODE), b"\x00\x00"),
        (Equaliser(EqualiserParam.GAIN, EQMode.ADVANCED, EQBand.BAND_8), b"\x82\x01"),
    ],
)
def test_key_layout(message, key):
    assert message.to_beacn_key() == key


def test_mode_value_encoding():
    message = Equaliser(EqualiserParam.MODE, value=EQMode.ADVANCED)
    assert message.to_beacn_value() == b"\x01\x00\x00\x00"


def test_mode_round_trip():
    message = Equaliser(EqualiserParam.MODE, value=EQMode.SIMPLE)
    assert _round_trip(message) == message


@pytest.mark.parametrize(
    "param,mode,band",
    list(itertools.product(_SAMPLES, EQMode, EQBand)),
)
def test_round_trip_every_combination(param, mode, band):
    message = Equaliser(param, mode, band, _SAMPLES[param])
    assert _round_trip(message, DeviceType.BEACN_STUDIO) == message


def test_fetch_messages_cover_every_combination_once():
    messages = Equaliser.fetch_messages(DeviceType.BEACN_MIC)
    assert messages[0] == Equaliser(EqualiserParam.MODE)
    rest = [(m.param, m.mode, m.band) for m in messages[1:]]
    assert len(rest) == len(set(rest))
    assert set(rest) == set(itertools.product(_SAMPLES, EQMode, EQBand))


def test_fetch_messages_order_within_band():
    first_band = Equaliser.fetch_messages(DeviceType.BEACN_MIC)[1:6]
    assert [m.param for m in first_band] == list(_SAMPLES)
    assert all(m.mode is EQMode.SIMPLE and m.band is EQBand.BAND_1 for m in first_band)


def test_fetch_keys_are_distinct():
    keys = [m.to_beacn_key() for m in Equaliser.fetch_messages(DeviceType.BEACN_MIC)]
    assert len(keys) == len(set(keys))


@pytest.mark.parametrize(
    "value",
    [EQGain(12.5), EQFrequency(19.0), EQQ(-0.2), EQQ(10.5)],
)
def test_out_of_range_write_rejected(value):
    message = Equaliser(_PARAM_FOR[type(value)], EQMode.SIMPLE, EQBand.BAND_2, value)
    with pytest.raises(BeacnValueError):
        message.to_beacn_value()


@pytest.mark.parametrize(
    "error, action",
    [
        (
            BeacnValueError,
            lambda: Equaliser(EqualiserParam.Q, EQMode.SIMPLE, EQBand.BAND_1).to_beacn_value(),
        ),
        (
            BeacnValueError,
            lambda: _decode(
                _band_key(EqualiserParam.FREQUENCY, EQBand.BAND_3), struct.pack("<f", 30000.0)
            ),
        ),
        (
            BeacnValueError,
            lambda: _decode(_band_key(EqualiserParam.TYPE, EQBand.BAND_1), b"\x07\x00\x00\x00"),
        ),
        (BeacnValueError, lambda: _decode(b"\x01\x02", bytes(4))),
        (BeacnValueError, lambda: _decode(b"\x71\x00", bytes(4))),
        (BeacnValueError, lambda: _decode(b"\x00\x00", b"\x05\x00\x00\x00")),
        (TypeError, lambda: Equaliser(EqualiserParam.GAIN, EQMode.SIMPLE)),
        (TypeError, lambda: Equaliser(EqualiserParam.MODE, EQMode.SIMPLE)),
        (
            TypeError,
            lambda: Equaliser(EqualiserParam.GAIN, EQMode.SIMPLE, EQBand.BAND_1, EQQ(1.0)),
        ),
    ],
    ids=[
        "getter-value",
        "read-range",
        "unknown-band-type",
        "unknown-mode-byte",
        "unknown-band",
        "unknown-mode-value",
        "missing-band",
        "mode-with-mode",
        "wrong-type",
    ],
)
def test_rejected(error, action):
    with pytest.raises(error):
        action()