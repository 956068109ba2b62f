# beacnmic

A pure Python library for configuring Beacn Mic and Beacn Studio audio devices.
It has no dependencies outside the standard library.

It covers three things:

- **Messages** (`beacnmic.messages`): typed getter and setter messages for every
  DSP block and device setting. Each message knows its 3-byte parameter key and
  its 4-byte wire value, and checks value ranges when it is encoded or decoded.
- **Device protocol** (`beacnmic.device`): `BeacnDevice` runs the setup
  handshake, reads the firmware version and serial, and fetches and sets
  parameters over any object that implements the `Transport` interface.
- **Hot plug tracking** (`beacnmic.manager`): `DeviceManager` and
  `spawn_hotplug_handler` follow devices as they appear and disappear, and
  report events to a `queue.Queue`.

## Installation

```
pip install beacnmic
```

## Messages

Each family is a frozen dataclass with a `param` field and, for setters, a
`value`. A message without a value is a getter (`is_getter()` returns `True`).

| Module | Class | Parameter enum |
| --- | --- | --- |
| `beacnmic.messages.bass_enhancement` | `BassEnhancement` | `BassParam` |
| `beacnmic.messages.compressor` | `Compressor` | `CompressorParam` |
| `beacnmic.messages.deesser` | `DeEsser` | `DeEsserParam` |
| `beacnmic.messages.equaliser` | `Equaliser` | `EqualiserParam` |
| `beacnmic.messages.exciter` | `Exciter` | `ExciterParam` |
| `beacnmic.messages.expander` | `Expander` | `ExpanderParam` |
| `beacnmic.messages.headphone_equaliser` | `HeadphoneEQ` | `HPEQParam` |
| `beacnmic.messages.headphones` | `Headphones` | `HeadphonesParam` |
| `beacnmic.messages.lighting` | `Lighting` | `LightingParam` |
| `beacnmic.messages.mic_setup` | `MicSetup` | `MicSetupParam` |
| `beacnmic.messages.subwoofer` | `Subwoofer` | `SubwooferParam` |
| `beacnmic.messages.suppressor` | `Suppressor` | `SuppressorParam` |

Compressor and expander parameters other than `MODE` take a mode; equaliser
parameters other than `MODE` take a mode and a band; headphone EQ messages take
an `HPEQType`. Values are range-checked types such as `TimeFrame`, `Percent`,
`EQGain` or `LightingBrightness`, wire enums such as `LightingMode`, `RGB`
colours, or plain `bool`. A value of the wrong type raises `TypeError`.

```python
from beacnmic.manager import DeviceType
from beacnmic.messages.compressor import Compressor, CompressorMode, CompressorParam
from beacnmic.messages.message import (
    from_beacn_message,
    generate_fetch_messages,
    to_beacn_key,
    to_beacn_value,
)
from beacnmic.types import TimeFrame

setter = Compressor(CompressorParam.ATTACK, CompressorMode.SIMPLE, TimeFrame(10.0))
to_beacn_key(setter)    # b"\x05\x01\x00"
to_beacn_value(setter)  # four little endian f32 bytes

# Every getter needed to read a device's full state
getters = generate_fetch_messages(DeviceType.BEACN_MIC)

# Decode an 8-byte parameter report from the device
message = from_beacn_message(response_bytes, DeviceType.BEACN_MIC)
```

Some helpers build lists of setters:

- `BassEnhancement.preset_messages(preset)` loads one of the four `BassPreset`s.
- `BassEnhancement.amount_messages(amount)` sets amount, drive and mix.
- `Subwoofer.amount_messages(amount)` sets amount, mix, ratio and make-up gain.

Encoding a getter, encoding a value outside its range, or decoding bytes that
do not fit the expected type or range raises `beacnmic.types.BeacnValueError`
(a `ValueError`).

### Wire types

`beacnmic.types` holds the building blocks: `encode(kind, value)` and
`decode(kind, data)` for each `ValueKind` (`BOOL`, `U8`, `U32`, `I8`, `I32`,
`F32`), `encode_bool` and `decode_bool`, `RGB`, `PackedEnumKey` for two enums
packed into one key byte, and the `Ranged` and `WireEnum` base classes.

## Talking to a device

`BeacnDevice` does not open USB devices itself. Give it a `Transport`: a
subclass implementing `write(endpoint, data, timeout)` and
`read(endpoint, size, timeout)` for an interface that is already opened and
claimed on your chosen USB backend.

```python
from beacnmic.device import BeacnDevice
from beacnmic.manager import DeviceLocation

device = BeacnDevice.open(transport, DeviceLocation(1, 4), product_id)
print(device.serial, device.firmware_version, device.device_type)

current = device.fetch_value(getter)
device.set_value(setter)
```

`open` raises `DeviceError` if the product id is not a Mic or Studio.
`fetch_value` and `set_value` raise `DeviceError` if the message is not valid
for the device type, if the response header is wrong, or if the value read back
after a set differs from the one written. `parse_device_info(data)` extracts the
firmware version and serial from the raw setup response.

## Hot plug tracking

`UsbDeviceInfo` describes one enumerated USB device (bus, address, vendor and
product id). `get_beacn_mic_devices(devices)` and
`get_beacn_studio_devices(devices)` pick out the matching `DeviceLocation`s.

`spawn_hotplug_handler(sender, receiver, enumerate_devices, interval=0.5)`
starts a daemon thread that calls `enumerate_devices()` every `interval`
seconds and puts `DeviceAttached`, `DeviceRemoved` and finally `ThreadStopped`
events on `sender`. Put `HotPlugThreadManagement.QUIT` (or `None`) on
`receiver` to stop it.

```python
import queue
from beacnmic.manager import HotPlugThreadManagement, spawn_hotplug_handler

events, control = queue.Queue(), queue.Queue()
thread = spawn_hotplug_handler(events, control, list_usb_devices)
...
control.put(HotPlugThreadManagement.QUIT)
thread.join()
```

## What this package does not do

It contains no USB backend: it cannot enumerate the bus, open devices or
receive operating-system hot plug notifications on its own. You supply the
`Transport` and the `enumerate_devices` callable. It has no command-line tool.

## Versions

`VersionNumber.from_string("1.2.3.4")` parses dotted version strings; missing
or malformed parts become 0. `VersionNumber.from_packed(value)` unpacks the
32-bit firmware version word. Versions compare by major, minor, patch and build.

## Running the tests

```
pip install -e ".[test]"
pytest
```