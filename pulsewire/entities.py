"""Records the server reports about modules, the server itself, sinks, sources and cards."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .types import FormatInfo, Port, Profile, SampleSpec, read_channel_map, read_cvolume
from .wire import PacketReader, Tag

__all__ = ["Module", "Server", "SinkPort", "Sink", "Source", "Card"]


@dataclass
class Module:
    """A loaded server module."""

    index: int
    name: str
    argument: str
    n_used: int
    proplist: dict[str, str] = field(default_factory=dict)

    @classmethod
    def read(cls, reader: PacketReader) -> "Module":
        return cls(
            index=reader.read_tagged_u32(),
            name=reader.read_string(),
            argument=reader.read_string(),
            n_used=reader.read_tagged_u32(),
            proplist=reader.read_proplist(),
        )


@dataclass
class Server:
    """General information about the server."""

    package_name: str
    package_version: str
    user: str
    hostname: str
    sample_spec: SampleSpec
    default_sink: str
    default_source: str
    cookie: int
    channel_map: bytes

    @classmethod
    def read(cls, reader: PacketReader) -> "Server":
        return cls(
            package_name=reader.read_string(),
            package_version=reader.read_string(),
            user=reader.read_string(),
            hostname=reader.read_string(),
            sample_spec=SampleSpec.read(reader),
            default_sink=reader.read_string(),
            default_source=reader.read_string(),
            cookie=reader.read_tagged_u32(),
            channel_map=read_channel_map(reader),
        )


@dataclass
class SinkPort:
    """An input or output connector on a sink or source."""

    name: str
    description: str
    priority: int
    available: int

    @classmethod
    def read(cls, reader: PacketReader) -> "SinkPort":
        return cls(
            name=reader.read_string(),
            description=reader.read_string(),
            priority=reader.read_tagged_u32(),
            available=reader.read_tagged_u32(),
        )


def _read_device_fields(reader: PacketReader) -> dict[str, Any]:
    """Read the record layout shared by sinks and sources."""
    values: dict[str, Any] = {
        "index": reader.read_tagged_u32(),
        "name": reader.read_string(),
        "description": reader.read_string(),
        "sample_spec": SampleSpec.read(reader),
        "channel_map": read_channel_map(reader),
        "module_index": reader.read_tagged_u32(),
        "cvolume": read_cvolume(reader),
        "muted": reader.read_bool(),
        "monitor_source_index": reader.read_tagged_u32(),
        "monitor_source_name": reader.read_string(),
        "latency": reader.read_usec(),
        "driver": reader.read_string(),
        "flags": reader.read_tagged_u32(),
        "proplist": reader.read_proplist(),
        "requested_latency": reader.read_usec(),
        "base_volume": reader.read_volume(),
        "state": reader.read_tagged_u32(),
        "n_volume_steps": reader.read_tagged_u32(),
        "card_index": reader.read_tagged_u32(),
    }
    port_count = reader.read_tagged_u32()
    values["ports"] = [SinkPort.read(reader) for _ in range(port_count)]
    if port_count == 0:
        reader.expect_tag(Tag.STRING_NULL)
        values["active_port_name"] = ""
    else:
        values["active_port_name"] = reader.read_string()
    format_count = reader.read_tagged_u8()
    values["formats"] = [FormatInfo.read(reader) for _ in range(format_count)]
    return values


@dataclass
class _Device:
    index: int
    name: str
    description: str
    sample_spec: SampleSpec
    channel_map: bytes
    module_index: int
    cvolume: list[int]
    muted: bool
    monitor_source_index: int
    monitor_source_name: str
    latency: int
    driver: str
    flags: int
    proplist: dict[str, str]
    requested_latency: int
    base_volume: int
    state: int
    n_volume_steps: int
    card_index: int
    ports: list[SinkPort] = field(default_factory=list)
    active_port_name: str = ""
    formats: list[FormatInfo] = field(default_factory=list)


@dataclass
class Sink(_Device):
    """An output device."""

    @classmethod
    def read(cls, reader: PacketReader) -> "Sink":
        return cls(**_read_device_fields(reader))


@dataclass
class Source(_Device):
    """An input device, such as a microphone or a sink monitor."""

    @classmethod
    def read(cls, reader: PacketReader) -> "Source":
        return cls(**_read_device_fields(reader))


@dataclass
class Card:
    """A sound card with its profiles and ports."""

    index: int
    name: str
    module: int
    driver: str
    profiles: dict[str, Profile] = field(default_factory=dict)
    active_profile: Optional[Profile] = None
    proplist: dict[str, str] = field(default_factory=dict)
    ports: list[Port] = field(default_factory=list)

    @classmethod
    def read(cls, reader: PacketReader) -> "Card":
        index = reader.read_tagged_u32()
        name = reader.read_string()
        module = reader.read_tagged_u32()
        driver = reader.read_string()
        profile_count = reader.read_tagged_u32()
        profiles: dict[str, Profile] = {}
        for _ in range(profile_count):
            profile = Profile.read(reader)
            profiles[profile.name] = profile
        active_name = reader.read_string()
        proplist = reader.read_proplist()
        port_count = reader.read_tagged_u32()
        card = cls(
            index=index,
            name=name,
            module=module,
            driver=driver,
            profiles=profiles,
            active_profile=profiles.get(active_name),
            proplist=proplist,
        )
        for _ in range(port_count):
            port = Port.read(reader, profiles)
            port.card = card
            card.ports.append(port)
        return card