"""Encoding and decoding of PulseAudio native protocol payloads and records."""

__version__ = "0.1.0"
__all__ = ["commands", "entities", "types", "wire"]