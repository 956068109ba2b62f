"""Talking to an attached device over its bulk endpoints."""

import logging
import struct
from abc import ABC, abstractmethod

from beacnmic.manager import DeviceLocation, DeviceType, device_type_for_product
from beacnmic.messages.base import DeviceMessageType, SubMessage
from beacnmic.messages.message import from_beacn_message, to_beacn_key, to_beacn_value
from beacnmic.version import VersionNumber

logger = logging.getLogger(__name__)

ENDPOINT_OUT = 0x03
ENDPOINT_IN = 0x83

SETUP_TIMEOUT = 2.0
LOOKUP_TIMEOUT = 3.0
SET_TIMEOUT = 0.2

_INFO_RESPONSE_SIZE = 512
_RESPONSE_SIZE = 8
_LOOKUP_COMMAND = 0xA3
_VALUE_COMMAND = 0xA4
_U32 = struct.Struct("<I")


class DeviceError(Exception):
    """The device refused a command or answered unexpectedly."""


class Transport(ABC):
    """Bulk transfers to and from an opened, claimed device interface."""

    @abstractmethod
    def write(self, endpoint: int, data: bytes, timeout: float) -> None:
        """Send data to an OUT endpoint."""

    @abstractmethod
    def read(self, endpoint: int, size: int, timeout: float) -> bytes:
        """Read up to size bytes from an IN endpoint."""


def parse_device_info(data) -> tuple[VersionNumber, str]:
    """Extract the firmware version and serial from the info response."""
    data = bytes(data)
    if len(data) < 8:
        raise DeviceError("device info response is too short")
    version = VersionNumber.from_packed(_U32.unpack_from(data, 4)[0])
    serial_bytes = data[8:].split(b"\x00", 1)[0]
    return version, serial_bytes.decode("utf-8", errors="replace")


class BeacnDevice:
    """An opened Mic or Studio."""

    def __init__(
        self,
        transport: Transport,
        location: DeviceLocation,
        device_type: DeviceType,
        serial: str,
        firmware_version: VersionNumber,
    ) -> None:
        self.transport = transport
        self.location = location
        self.device_type = device_type
        self.serial = serial
        self.firmware_version = firmware_version

    @classmethod
    def open(
        cls, transport: Transport, location: DeviceLocation, product_id: int
    ) -> "BeacnDevice":
        """Initialise the device and read its version and serial."""
        device_type = device_type_for_product(product_id)
        if device_type is None:
            raise DeviceError("Device is not a Mic or Studio")

        transport.write(ENDPOINT_OUT, bytes([0x00, 0x00, 0x00, 0xA0]), SETUP_TIMEOUT)
        transport.write(ENDPOINT_OUT, bytes([0x00, 0x00, 0x00, 0xA1]), SETUP_TIMEOUT)
        response = transport.read(ENDPOINT_IN, _INFO_RESPONSE_SIZE, SETUP_TIMEOUT)
        version, serial = parse_device_info(response)

        logger.debug(
            "Loaded device, location: %s, serial: %s, version: %s",
            location,
            serial,
            version,
        )
        return cls(transport, location, device_type, serial, version)

    def is_command_valid(self, message: SubMessage) -> bool:
        """Whether the message may be sent to this kind of device."""
        target = message.device_message_type()
        if target is DeviceMessageType.COMMON:
            return True
        if target is DeviceMessageType.BEACN_MIC:
            return self.device_type is DeviceType.BEACN_MIC
        return self.device_type is DeviceType.BEACN_STUDIO

    def _require_valid(self, message: SubMessage) -> None:
        if not self.is_command_valid(message):
            logger.warning("Command sent not valid for this device: %r", message)
            raise DeviceError("Command is not valid for this device")

    def fetch_value(self, message: SubMessage) -> SubMessage:
        """Read the current value of the parameter the message names."""
        self._require_valid(message)
        response = self._param_lookup(to_beacn_key(message))
        return from_beacn_message(response, self.device_type)

    def set_value(self, message: SubMessage) -> SubMessage:
        """Write a setter's value and return what the device now reports."""
        self._require_valid(message)
        response = self._param_set(to_beacn_key(message), to_beacn_value(message))
        return from_beacn_message(response, self.device_type)

    def _param_lookup(self, key: bytes) -> bytes:
        request = bytes(key) + bytes([_LOOKUP_COMMAND])
        self.transport.write(ENDPOINT_OUT, request, LOOKUP_TIMEOUT)
        raw = self.transport.read(ENDPOINT_IN, _RESPONSE_SIZE, LOOKUP_TIMEOUT)
        response = bytes(raw[:_RESPONSE_SIZE]).ljust(_RESPONSE_SIZE, b"\x00")
        if response[0:2] != request[0:2] or response[3] != _VALUE_COMMAND:
            raise DeviceError("Invalid Response Received")
        return response

    def _param_set(self, key: bytes, value: bytes) -> bytes:
        request = bytes(key) + bytes([_VALUE_COMMAND]) + bytes(value)
        self.transport.write(ENDPOINT_OUT, request, SET_TIMEOUT)
        response = self._param_lookup(key)
        if request[4:8] != response[4:8]:
            logger.warning(
                "Value set: %s does not match value on device: %s",
                list(request[4:8]),
                list(response[4:8]),
            )
            raise DeviceError("Value was not changed on the device!")
        return response