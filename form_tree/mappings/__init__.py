"""Mapping facades over flat form records."""

from .record import FormRecord


__all__ = ["FormRecord"]
