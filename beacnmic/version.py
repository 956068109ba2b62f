"""Firmware version numbers."""

import re
from dataclasses import dataclass

_PART = re.compile(r"\+?[0-9]+")
_U32_MAX = 0xFFFFFFFF


def _parse_part(text: str) -> int | None:
    if not _PART.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


@dataclass(frozen=True, order=True, repr=False)
class VersionNumber:
    """A four part version number, ordered part by part."""

    major: int = 0
    minor: int = 0
    patch: int = 0
    build: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}.{self.build}"

    def __repr__(self) -> str:
        return str(self)

    @classmethod
    def from_string(cls, text: str) -> "VersionNumber":
        """Parse a dotted version; missing or malformed parts become 0."""
        parts = [_parse_part(part) for part in text.split(".")[:4]]
        values = [part if part is not None else 0 for part in parts]
        values.extend([0] * (4 - len(values)))
        return cls(*values)

    @classmethod
    def from_packed(cls, value: int) -> "VersionNumber":
        """Unpack the 32-bit version word reported by the device."""
        value &= _U32_MAX
        return cls(
            value >> 0x1C,
            (value >> 0x18) & 0xF,
            (value >> 0x10) & 0xFF,
            value & 0xFFFF,
        )