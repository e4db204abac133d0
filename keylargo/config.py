"""Environment-driven settings for the capture harness."""

from __future__ import annotations

import codecs
import dataclasses
import os
import typing as typ

from .errors import ConfigurationError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

ENV_ENCODING = "KEYLARGO_ENCODING"
ENV_ENCODING_ERRORS = "KEYLARGO_ENCODING_ERRORS"
ENV_CHUNK_SIZE = "KEYLARGO_CHUNK_SIZE"

DEFAULT_ENCODING = "utf-8"
DEFAULT_ENCODING_ERRORS = "surrogateescape"
DEFAULT_CHUNK_SIZE = 65536

ERROR_UNKNOWN_ENCODING = "{name}={value!r} is not a known text encoding."
ERROR_UNKNOWN_HANDLER = "{name}={value!r} is not a registered codec error handler."
ERROR_BAD_CHUNK_SIZE = "{name}={value!r} must be a positive integer."


@dataclasses.dataclass(frozen=True, slots=True)
class CaptureConfig:
    """Describe how captured output is encoded and drained."""

    encoding: str = DEFAULT_ENCODING
    errors: str = DEFAULT_ENCODING_ERRORS
    chunk_size: int = DEFAULT_CHUNK_SIZE


def load_capture_config(env: cabc.Mapping[str, str] | None = None) -> CaptureConfig:
    """Build a CaptureConfig from environment variables.

    Unset or blank variables fall back to the defaults.

    Args:
        env: Mapping to read instead of ``os.environ``.

    Returns:
        The validated capture configuration.

    Raises:
        ConfigurationError: If a variable names an unknown codec or error
            handler, or the chunk size is not a positive integer.

    """
    source = os.environ if env is None else env
    encoding = _read(source, ENV_ENCODING) or DEFAULT_ENCODING
    errors = _read(source, ENV_ENCODING_ERRORS) or DEFAULT_ENCODING_ERRORS
    chunk_raw = _read(source, ENV_CHUNK_SIZE)

    try:
        codecs.lookup(encoding)
    except LookupError as error:
        raise ConfigurationError(
            ERROR_UNKNOWN_ENCODING.format(name=ENV_ENCODING, value=encoding)
        ) from error
    try:
        codecs.lookup_error(errors)
    except LookupError as error:
        raise ConfigurationError(
            ERROR_UNKNOWN_HANDLER.format(name=ENV_ENCODING_ERRORS, value=errors)
        ) from error

    return CaptureConfig(
        encoding=encoding,
        errors=errors,
        chunk_size=_parse_chunk_size(chunk_raw),
    )


def _read(source: cabc.Mapping[str, str], name: str) -> str:
    return (source.get(name) or "").strip()


def _parse_chunk_size(value: str) -> int:
    if not value:
        return DEFAULT_CHUNK_SIZE
    try:
        size = int(value)
    except ValueError as error:
        raise ConfigurationError(
            ERROR_BAD_CHUNK_SIZE.format(name=ENV_CHUNK_SIZE, value=value)
        ) from error
    if size <= 0:
        raise ConfigurationError(
            ERROR_BAD_CHUNK_SIZE.format(name=ENV_CHUNK_SIZE, value=value)
        )
    return size
