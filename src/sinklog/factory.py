"""
Sink factory.

Maps a case-insensitive type tag plus an optional parameter string onto a
sink instance. New variants can be added with :func:`register_sink_type`.
"""

from __future__ import annotations

from typing import Callable

from .exceptions import SinkConstructionError, UnsupportedSinkTypeError
from .sinks import BaseSink, ConsoleSink, FileSink

SinkBuilder = Callable[[str | None], BaseSink]


def _build_console(params: str | None) -> BaseSink:
    return ConsoleSink()


def _build_file(params: str | None) -> BaseSink:
    if not params:
        raise SinkConstructionError(sink_type="file", target=params, reason="a file path is required")
    return FileSink(params)


_BUILDERS: dict[str, SinkBuilder] = {
    "console": _build_console,
    "file": _build_file,
}


def _normalize(type_tag: str) -> str:
    return type_tag.strip().lower()


def register_sink_type(type_tag: str, builder: SinkBuilder) -> None:
    """Register (or replace) the builder used for ``type_tag``."""
    tag = _normalize(type_tag)
    if not tag:
        raise ValueError("Sink type tag must not be empty")
    _BUILDERS[tag] = builder


def available_sink_types() -> list[str]:
    return sorted(_BUILDERS)


def create_sink(type_tag: str, params: str | None = None) -> BaseSink:
    """
    Create a sink from its type tag.

    Args:
        type_tag: Sink variant (``console``, ``file``, or a registered tag)
        params: Variant-specific parameter, e.g. the path for ``file``

    Raises:
        UnsupportedSinkTypeError: No variant is registered for ``type_tag``
        SinkConstructionError: The variant could not acquire its resource
    """
    builder = _BUILDERS.get(_normalize(type_tag))
    if builder is None:
        raise UnsupportedSinkTypeError(type_tag=type_tag, known=available_sink_types())
    return builder(params)
