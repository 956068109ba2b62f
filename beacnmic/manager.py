"""Discovery and hot plug tracking of attached devices."""

import logging
import queue
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)

VENDOR_BEACN = 0x33AE
PID_BEACN_MIC = 0x0001
PID_BEACN_STUDIO = 0x0003


class DeviceType(Enum):
    """The kinds of supported device."""

    BEACN_MIC = "beacn_mic"
    BEACN_STUDIO = "beacn_studio"


@dataclass(frozen=True)
class DeviceLocation:
    """Where a device sits on the USB bus."""

    bus_number: int
    address: int

    def __str__(self) -> str:
        return f"{self.bus_number}.{self.address}"


@dataclass(frozen=True)
class UsbDeviceInfo:
    """What enumeration reports about one USB device."""

    bus_number: int
    address: int
    vendor_id: int
    product_id: int

    @property
    def location(self) -> DeviceLocation:
        return DeviceLocation(self.bus_number, self.address)


@dataclass(frozen=True)
class DeviceAttached:
    location: DeviceLocation
    device_type: DeviceType


@dataclass(frozen=True)
class DeviceRemoved:
    location: DeviceLocation


@dataclass(frozen=True)
class ThreadStopped:
    pass


HotPlugMessage = Union[DeviceAttached, DeviceRemoved, ThreadStopped]


class HotPlugThreadManagement(Enum):
    """Requests sent to the hot plug thread."""

    QUIT = "quit"


def device_type_for_product(product_id: int) -> DeviceType | None:
    """Map a product id to a device type, or None if it is not supported."""
    if product_id == PID_BEACN_MIC:
        return DeviceType.BEACN_MIC
    if product_id == PID_BEACN_STUDIO:
        return DeviceType.BEACN_STUDIO
    return None


def _is_supported(info: UsbDeviceInfo) -> DeviceType | None:
    if info.vendor_id != VENDOR_BEACN:
        return None
    return device_type_for_product(info.product_id)


class DeviceManager:
    """Tracks known devices and reports changes to a queue."""

    def __init__(self, sender: queue.Queue) -> None:
        self.sender = sender
        self.known_devices: list[DeviceLocation] = []

    def thread_stopped(self) -> None:
        self.sender.put(ThreadStopped())

    def device_connected(self, location: DeviceLocation, device_type: DeviceType) -> None:
        if location in self.known_devices:
            logger.warning("Received 'Arrived' message for already present device!")
            return
        logger.debug("Device connected at %s", location)
        self.known_devices.append(location)
        self.sender.put(DeviceAttached(location, device_type))

    def device_removed(self, location: DeviceLocation) -> None:
        logger.debug("Device removed from %s", location)
        self.known_devices = [known for known in self.known_devices if known != location]
        self.sender.put(DeviceRemoved(location))

    def device_arrived(self, info: UsbDeviceInfo) -> None:
        device_type = _is_supported(info)
        if device_type is not None:
            logger.debug("Found %s", device_type.name)
            self.device_connected(info.location, device_type)

    def device_left(self, info: UsbDeviceInfo) -> None:
        if _is_supported(info) is not None:
            self.device_removed(info.location)

    def poll(self, devices: Iterable[UsbDeviceInfo]) -> None:
        """Compare a fresh enumeration with the known devices."""
        present = []
        for info in devices:
            device_type = _is_supported(info)
            if device_type is None:
                continue
            present.append(info.location)
            if info.location not in self.known_devices:
                self.device_connected(info.location, device_type)

        for location in list(self.known_devices):
            if location not in present:
                self.device_removed(location)


def _locations(devices: Iterable[UsbDeviceInfo], product_id: int) -> list[DeviceLocation]:
    return [
        info.location
        for info in devices
        if info.vendor_id == VENDOR_BEACN and info.product_id == product_id
    ]


def get_beacn_mic_devices(devices: Iterable[UsbDeviceInfo]) -> list[DeviceLocation]:
    """Locations of every Mic among the given devices."""
    return _locations(devices, PID_BEACN_MIC)


def get_beacn_studio_devices(devices: Iterable[UsbDeviceInfo]) -> list[DeviceLocation]:
    """Locations of every Studio among the given devices."""
    return _locations(devices, PID_BEACN_STUDIO)


def should_stop(receiver: queue.Queue) -> bool:
    """Whether the management queue asks the thread to finish.

    A None on the queue means the other side has gone away.
    """
    try:
        message = receiver.get_nowait()
    except queue.Empty:
        return False
    if message is None:
        logger.error("Receiver has disconnected, terminating hot plug thread")
        return True
    return message is HotPlugThreadManagement.QUIT


def spawn_hotplug_handler(
    sender: queue.Queue,
    receiver: queue.Queue,
    enumerate_devices: Callable[[], Iterable[UsbDeviceInfo]],
    interval: float = 0.5,
) -> threading.Thread:
    """Start a thread that polls for devices until told to quit."""
    logger.debug("Spawning hot plug handler")
    manager = DeviceManager(sender)

    def run() -> None:
        while not should_stop(receiver):
            try:
                devices = list(enumerate_devices())
            except OSError as exc:
                logger.warning("Device enumeration failed: %s", exc)
                devices = []
            manager.poll(devices)
            time.sleep(interval)
        manager.thread_stopped()

    thread = threading.Thread(target=run, name="beacn-hotplug", daemon=True)
    thread.start()
    return thread