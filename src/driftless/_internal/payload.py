"""Payload helpers shared by Option, Result and Task.

Copies guard side-effect callbacks against aliasing; msgspec turns payloads
into JSON-compatible builtins by encoding to JSON and decoding it back.
"""

from __future__ import annotations

import copy
import threading
from typing import Any

import msgspec

from driftless._config import get_config

__all__ = ['clone_payload', 'clones_enabled', 'to_json_value']

# Encoders are not thread-safe, decoders are.
_local = threading.local()
_decoder = msgspec.json.Decoder()


def clone_payload[V](value: V) -> V:
    """Deep-copy a payload."""
    return copy.deepcopy(value)


def clones_enabled() -> bool:
    """Whether side-effect callbacks should receive clones."""
    return get_config().clone_payloads


def _enc_hook(obj: Any) -> Any:
    if isinstance(obj, BaseException):
        return {'type': type(obj).__name__, 'message': str(obj)}
    raise TypeError(f'Objects of type {type(obj).__name__} are not supported')


def _encoder() -> msgspec.json.Encoder:
    encoder = getattr(_local, 'encoder', None)
    if encoder is None:
        encoder = msgspec.json.Encoder(enc_hook=_enc_hook)
        _local.encoder = encoder
    return encoder


def to_json_value(value: Any) -> Any:
    """Convert a payload to JSON-compatible builtins.

    Exceptions become ``{'type': ..., 'message': ...}`` mappings. Tuples and
    sets come back as lists. Dataclasses and msgspec structs come back as
    dicts.

    Raises:
        TypeError: If the payload holds an unsupported type.
    """
    return _decoder.decode(_encoder().encode(value))
