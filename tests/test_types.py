import struct

import pytest

from pulsewire.types import (
    FormatInfo,
    Port,
    Profile,
    SampleSpec,
    read_channel_map,
    read_cvolume,
)
from pulsewire.wire import PacketReader, PacketWriter, ProtocolError, Tag


def _write_profile(writer, profile):
    writer.put_string(profile.name)
    writer.put_string(profile.description)
    writer.put_tagged_u32(profile.n_sinks)
    writer.put_tagged_u32(profile.n_sources)
    writer.put_tagged_u32(profile.priority)
    writer.put_tagged_u32(profile.available)


def test_sample_spec_round_trip():
    writer = PacketWriter()
    writer.put_tag(Tag.SAMPLE_SPEC)
    writer.put_u8(3)
    writer.put_u8(2)
    writer.put_u32(44100)
    reader = PacketReader(writer.getvalue())
    assert SampleSpec.read(reader) == SampleSpec(format=3, channels=2, rate=44100)
    assert reader.remaining() == 0


def test_sample_spec_wrong_tag():
    writer = PacketWriter()
    writer.put_tagged_u32(44100)
    with pytest.raises(ProtocolError):
        SampleSpec.read(PacketReader(writer.getvalue()))


def test_cvolume_round_trip():
    volumes = [0x8000, 0xFFFF, 0]
    writer = PacketWriter()
    writer.put_cvolume(volumes)
    reader = PacketReader(writer.getvalue())
    assert read_cvolume(reader) == volumes
    assert reader.remaining() == 0


def test_empty_cvolume_round_trip():
    writer = PacketWriter()
    writer.put_cvolume([])
    assert read_cvolume(PacketReader(writer.getvalue())) == []


def test_channel_map_round_trip():
    positions = bytes([1, 2])
    writer = PacketWriter()
    writer.put_tag(Tag.CHANNEL_MAP)
    writer.put_u8(len(positions))
    for position in positions:
        writer.put_u8(position)
    reader = PacketReader(writer.getvalue())
    assert read_channel_map(reader) == positions
    assert reader.remaining() == 0


def test_channel_map_truncated():
    data = bytes([Tag.CHANNEL_MAP, 4, 1])
    with pytest.raises(ProtocolError):
        read_channel_map(PacketReader(data))


def test_format_info_round_trip():
    props = {"format.rate": "48000"}
    writer = PacketWriter()
    writer.put_tag(Tag.FORMAT_INFO)
    writer.put_tag(Tag.UINT8)
    writer.put_u8(1)
    writer.put_proplist(props)
    reader = PacketReader(writer.getvalue())
    assert FormatInfo.read(reader) == FormatInfo(encoding=1, proplist=props)
    assert reader.remaining() == 0


def test_format_info_requires_u8_tag():
    writer = PacketWriter()
    writer.put_tag(Tag.FORMAT_INFO)
    writer.put_tagged_u32(1)
    with pytest.raises(ProtocolError):
        FormatInfo.read(PacketReader(writer.getvalue()))


def test_profile_round_trip():
    profile = Profile("output:analog-stereo", "Analog Stereo Output", 1, 0, 6500, 2)
    writer = PacketWriter()
    _write_profile(writer, profile)
    reader = PacketReader(writer.getvalue())
    assert Profile.read(reader) == profile
    assert reader.remaining() == 0


def _port_bytes(names, latency):
    writer = PacketWriter()
    writer.put_string("analog-output-speaker")
    writer.put_string("Speakers")
    writer.put_tagged_u32(10000)
    writer.put_tagged_u32(2)
    writer.put_tag(Tag.UINT8)
    writer.put_u8(1)
    writer.put_proplist({"port.type": "speaker"})
    writer.put_tagged_u32(len(names))
    for name in names:
        writer.put_string(name)
    return writer.getvalue() + bytes([Tag.INT64]) + struct.pack(">q", latency)


def test_port_round_trip_resolves_profiles():
    known = Profile("output:analog-stereo", "Analog Stereo Output", 1, 0, 6500, 2)
    reader = PacketReader(_port_bytes([known.name, "missing"], -250))
    port = Port.read(reader, {known.name: known})
    assert port.name == "analog-output-speaker"
    assert port.description == "Speakers"
    assert port.priority == 10000
    assert port.available == 2
    assert port.direction == 1
    assert port.proplist == {"port.type": "speaker"}
    assert port.profiles == [known, None]
    assert port.profiles[0] is known
    assert port.latency_offset == -250
    assert reader.remaining() == 0


def test_port_truncated():
    data = _port_bytes([], 0)[:-4]
    with pytest.raises(ProtocolError):
        Port.read(PacketReader(data), {})