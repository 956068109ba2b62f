"""Bass enhancement parameters and presets."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar, NamedTuple

from beacnmic.manager import DeviceType
from beacnmic.messages.base import BeacnMessage, SubMessage
from beacnmic.types import (
    BeacnValueError,
    MakeUpGain,
    Percent,
    Ranged,
    TimeFrame,
    ValueKind,
    WireEnum,
)


class BassParam(IntEnum):
    """Bass enhancement parameters, valued by their key byte."""

    ATTACK = 0x00
    RELEASE = 0x01
    THRESHOLD = 0x02
    KNEE = 0x03
    MAKEUP_GAIN = 0x04
    RATIO = 0x05
    CUTOFF = 0x06
    Q = 0x07
    LOWER_CUTOFF = 0x08
    LOWER_Q = 0x09
    DRIVE = 0x0A
    MIX = 0x0B
    ENABLED = 0x0C
    PRESET = 0x0D
    AMOUNT = 0x0E


class BassPreset(WireEnum):
    """Bass enhancement preset, sent as an f32."""

    PRESET_1 = 0x00
    PRESET_2 = 0x01
    PRESET_3 = 0x02
    PRESET_4 = 0x03

    @classmethod
    def _wire_kind(cls) -> ValueKind:
        return ValueKind.F32


class BassDrive(Ranged):
    MINIMUM = 0.0
    MAXIMUM = 32.0


class BassAmount(Ranged):
    MINIMUM = 0.0
    MAXIMUM = 10.0


class BassThreshold(Ranged):
    MINIMUM = -50.0
    MAXIMUM = 0.0


class BassKnee(Ranged):
    MINIMUM = 0.0
    MAXIMUM = 5.0


class BassRatio(Ranged):
    MINIMUM = 0.0
    MAXIMUM = 16.0


class BassCutoff(Ranged):
    MINIMUM = 0.0
    MAXIMUM = 160.0


class BassQ(Ranged):
    MINIMUM = 0.0
    MAXIMUM = 16.0


_VALUE_TYPES = {
    BassParam.ATTACK: TimeFrame,
    BassParam.RELEASE: TimeFrame,
    BassParam.THRESHOLD: BassThreshold,
    BassParam.KNEE: BassKnee,
    BassParam.MAKEUP_GAIN: MakeUpGain,
    BassParam.RATIO: BassRatio,
    BassParam.CUTOFF: BassCutoff,
    BassParam.Q: BassQ,
    BassParam.LOWER_CUTOFF: BassCutoff,
    BassParam.LOWER_Q: BassQ,
    BassParam.DRIVE: BassDrive,
    BassParam.MIX: Percent,
    BassParam.ENABLED: bool,
    BassParam.PRESET: BassPreset,
    BassParam.AMOUNT: BassAmount,
}

_FETCH_ORDER = (
    BassParam.DRIVE,
    BassParam.MIX,
    BassParam.ENABLED,
    BassParam.PRESET,
    BassParam.AMOUNT,
    BassParam.ATTACK,
    BassParam.RELEASE,
    BassParam.THRESHOLD,
    BassParam.KNEE,
    BassParam.MAKEUP_GAIN,
    BassParam.RATIO,
    BassParam.CUTOFF,
    BassParam.Q,
    BassParam.LOWER_CUTOFF,
    BassParam.LOWER_Q,
)


class _PresetValues(NamedTuple):
    threshold: float
    knee: float
    makeup_gain: float
    ratio: float
    cutoff: float
    q: float
    lower_cutoff: float
    lower_q: float


_PRESETS = {
    BassPreset.PRESET_1: _PresetValues(-27.0, 2.0, 6.0, 8.0, 102.0, 0.7, 10.0, 0.2),
    BassPreset.PRESET_2: _PresetValues(-21.0, 2.0, 8.0, 5.5, 105.0, 0.9, 40.0, 0.2),
    BassPreset.PRESET_3: _PresetValues(0.0, 3.0, 0.0, 16.0, 160.0, 0.8, 30.0, 0.7),
    BassPreset.PRESET_4: _PresetValues(-30.0, 3.0, 0.0, 8.0, 150.0, 0.7, 30.0, 0.7),
}


@dataclass(frozen=True)
class BassEnhancement(SubMessage):
    """A bass enhancement getter (no value) or setter."""

    MESSAGE: ClassVar[BeacnMessage] = BeacnMessage.BASS_ENHANCEMENT

    param: BassParam
    value: Any = None

    def __post_init__(self) -> None:
        self._check_value_type(
            f"BassEnhancement {self.param.name}", self.value, _VALUE_TYPES[self.param]
        )

    def to_beacn_key(self) -> bytes:
        return bytes([int(self.param), 0x00])

    def to_beacn_value(self) -> bytes:
        return self._encode_value()

    @classmethod
    def from_beacn(cls, key, value, device_type: DeviceType) -> "BassEnhancement":
        key = cls._key_bytes(key)
        try:
            param = BassParam(key[0])
        except ValueError as exc:
            raise BeacnValueError(f"unexpected bass enhancement key: {key[0]}") from exc
        return cls(param, cls._decode_value(_VALUE_TYPES[param], value))

    @classmethod
    def fetch_messages(cls, device_type: DeviceType) -> list["BassEnhancement"]:
        return [cls(param) for param in _FETCH_ORDER]

    @staticmethod
    def preset_messages(preset: BassPreset) -> list["BassEnhancement"]:
        """The setters that load one of the stock presets."""
        values = _PRESETS[BassPreset(preset)]
        return [
            BassEnhancement(BassParam.PRESET, BassPreset(preset)),
            BassEnhancement(BassParam.ATTACK, TimeFrame(10.0)),
            BassEnhancement(BassParam.RELEASE, TimeFrame(250.0)),
            BassEnhancement(BassParam.THRESHOLD, BassThreshold(values.threshold)),
            BassEnhancement(BassParam.KNEE, BassKnee(values.knee)),
            BassEnhancement(BassParam.MAKEUP_GAIN, MakeUpGain(values.makeup_gain)),
            BassEnhancement(BassParam.RATIO, BassRatio(values.ratio)),
            BassEnhancement(BassParam.CUTOFF, BassCutoff(values.cutoff)),
            BassEnhancement(BassParam.Q, BassQ(values.q)),
            BassEnhancement(BassParam.LOWER_CUTOFF, BassCutoff(values.lower_cutoff)),
            BassEnhancement(BassParam.LOWER_Q, BassQ(values.lower_q)),
        ]

    @staticmethod
    def amount_messages(amount: float) -> list["BassEnhancement"]:
        """The setters that apply an overall enhancement amount."""
        return [
            BassEnhancement(BassParam.AMOUNT, BassAmount(amount)),
            BassEnhancement(BassParam.DRIVE, BassDrive(3.2 * amount)),
            BassEnhancement(BassParam.MIX, Percent(amount * 10.0)),
        ]