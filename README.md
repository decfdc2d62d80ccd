# pulsewire

Pure-Python building blocks for the PulseAudio native protocol: the tagged
binary encoding of packet payloads, the command and error codes, and
readers for the records the server sends about modules, the server itself,
sinks, sources and cards. It has no dependencies outside the standard
library.

## Installation

```
pip install pulsewire
```

## Modules

- `pulsewire.wire`: `Tag`, `PacketWriter`, `PacketReader`, `ProtocolError`.
- `pulsewire.commands`: `Command`, `PulseAudioError`, `error_message`.
- `pulsewire.types`: `SampleSpec`, `FormatInfo`, `Profile`, `Port`,
  `read_cvolume`, `read_channel_map`.
- `pulsewire.entities`: `Module`, `Server`, `SinkPort`, `Sink`, `Source`,
  `Card`.

## Writing payloads

`PacketWriter` appends tagged values in big-endian order. `getvalue()`
returns the bytes written so far.

```python
from pulsewire.wire import PacketWriter

writer = PacketWriter()
writer.put_tagged_u32(0xFFFFFFFF)
writer.put_string("my_sink")
writer.put_cvolume([0x8000, 0x8000])
payload = writer.getvalue()
```

The writer has these methods:

- `put_tag`
- `put_u8`
- `put_u32`
- `put_tagged_u32`
- `put_string`
- `put_null_string`
- `put_arbitrary`
- `put_bool`
- `put_proplist`
- `put_cvolume`

Behaviour to be aware of:

- `put_proplist` leaves out entries whose value is empty.
- Strings that contain NUL raise `ValueError`.
- Values out of range raise `ValueError`.
- A cvolume with more than 255 channels raises `ValueError`.

## Reading payloads and records

`PacketReader` reads the same values back. Its `remaining()` method tells how
many bytes are left, so a list reply can be read record by record.

Each record class has a `read(reader)` class method:

- `Module`
- `Server`
- `Sink`
- `Source`
- `SinkPort`
- `Card`
- `SampleSpec`
- `FormatInfo`
- `Profile`

```python
from pulsewire.entities import Module
from pulsewire.wire import PacketReader, PacketWriter

writer = PacketWriter()
writer.put_tagged_u32(3)
writer.put_string("module-null-sink")
writer.put_string("sink_name=scratch")
writer.put_tagged_u32(0)
writer.put_proplist({"module.description": "Null sink"})

reader = PacketReader(writer.getvalue())
modules = []
while reader.remaining() > 0:
    modules.append(Module.read(reader))

print(modules[0].name, modules[0].argument, modules[0].proplist)
```

Reading rules:

- A null string (tag `N`) reads as an empty string.
- Strings are limited to 1024 bytes.
- A proplist value must agree with both of its declared lengths.
- Wrong tags, truncated data and over-long strings all raise
  `ProtocolError`.

`Sink` and `Source` carry the same fields. These include:

- `sample_spec`
- `channel_map`
- `cvolume`
- `muted`
- `latency`
- `proplist`
- `base_volume`
- `state`
- `ports`
- `active_port_name`
- `formats`

A `Card` maps profile names to `Profile` objects. Its `active_profile` and
the `profiles` of each `Port` refer to those same objects, or are `None` for
names the card does not list. Each port's `card` attribute points back to
its card.

## Commands and errors

`Command` is an `IntEnum` of the protocol's command codes, for example
`Command.GET_SINK_INFO_LIST` (22). `error_message(code)` gives the text for
a server error code, for example `error_message(5)` returns
`"No such entity"`. Codes it does not know give `"Unknown error code"`.

`PulseAudioError(cmd, code)` is an exception that keeps `cmd` and `code`.
Its message reads `PulseAudio error: <cmd> -> <text>`.

## What this package does not do

The package does not connect to a PulseAudio server. It does not open the
socket, frame packets, authenticate with a cookie or match replies to
requests. It also has no calls that change volume, mute state, card
profiles, modules or the default sink. It encodes and decodes payloads only.
Sending and receiving them is left to the caller.