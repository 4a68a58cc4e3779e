"""Composite key encoding utilities."""

from .codec import DEFAULT_SEPARATOR, PathCodec, decode, encode


__all__ = ["DEFAULT_SEPARATOR", "PathCodec", "decode", "encode"]
