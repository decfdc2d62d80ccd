"""Small value types shared by the entity records of the protocol."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from .wire import PacketReader, Tag

__all__ = [
    "SampleSpec",
    "FormatInfo",
    "Profile",
    "Port",
    "read_cvolume",
    "read_channel_map",
]


def read_cvolume(reader: PacketReader) -> list[int]:
    """Read a per-channel volume list."""
    reader.expect_tag(Tag.CVOLUME)
    count = reader.read_byte()
    return [reader.read_u32() for _ in range(count)]


def read_channel_map(reader: PacketReader) -> bytes:
    """Read a channel map as one position byte per channel."""
    reader.expect_tag(Tag.CHANNEL_MAP)
    count = reader.read_byte()
    return reader.read_bytes(count)


@dataclass
class SampleSpec:
    format: int
    channels: int
    rate: int

    @classmethod
    def read(cls, reader: PacketReader) -> "SampleSpec":
        reader.expect_tag(Tag.SAMPLE_SPEC)
        fmt = reader.read_byte()
        channels = reader.read_byte()
        rate = reader.read_u32()
        return cls(format=fmt, channels=channels, rate=rate)


@dataclass
class FormatInfo:
    encoding: int
    proplist: dict[str, str] = field(default_factory=dict)

    @classmethod
    def read(cls, reader: PacketReader) -> "FormatInfo":
        reader.expect_tag(Tag.FORMAT_INFO)
        encoding = reader.read_tagged_u8()
        proplist = reader.read_proplist()
        return cls(encoding=encoding, proplist=proplist)


@dataclass
class Profile:
    name: str
    description: str
    n_sinks: int
    n_sources: int
    priority: int
    available: int

    @classmethod
    def read(cls, reader: PacketReader) -> "Profile":
        return cls(
            name=reader.read_string(),
            description=reader.read_string(),
            n_sinks=reader.read_tagged_u32(),
            n_sources=reader.read_tagged_u32(),
            priority=reader.read_tagged_u32(),
            available=reader.read_tagged_u32(),
        )


@dataclass
class Port:
    """A card port; its profiles refer to the owning card's profiles."""

    name: str
    description: str
    priority: int
    available: int
    direction: int
    proplist: dict[str, str] = field(default_factory=dict)
    profiles: list[Optional[Profile]] = field(default_factory=list)
    latency_offset: int = 0
    card: Any = field(default=None, repr=False, compare=False)

    @classmethod
    def read(cls, reader: PacketReader, profiles: Mapping[str, Profile]) -> "Port":
        """Read a port; profile names not in ``profiles`` resolve to None."""
        name = reader.read_string()
        description = reader.read_string()
        priority = reader.read_tagged_u32()
        available = reader.read_tagged_u32()
        direction = reader.read_tagged_u8()
        proplist = reader.read_proplist()
        profile_count = reader.read_tagged_u32()
        port_profiles = [profiles.get(reader.read_string()) for _ in range(profile_count)]
        latency_offset = reader.read_tagged_i64()
        return cls(
            name=name,
            description=description,
            priority=priority,
            available=available,
            direction=direction,
            proplist=proplist,
            profiles=port_profiles,
            latency_offset=latency_offset,
        )