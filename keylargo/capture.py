"""Standard output capture around an in-process command execution.

The harness swaps ``sys.stdout`` for a text stream backed by an OS pipe while
the command runs. A background thread drains the pipe as the command writes,
so output larger than the kernel's pipe buffer cannot stall the writer. Once
the command returns, the writer is closed, the original stream is restored,
and the drained bytes are decoded and handed back together with the
command's outcome.
"""

from __future__ import annotations

import contextlib
import dataclasses
import logging
import os
import threading
import typing as typ

from .config import CaptureConfig

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_logger = logging.getLogger(__name__)

Outcome = BaseException | None


@dataclasses.dataclass(frozen=True, slots=True)
class CapturedRun:
    """Text written to stdout during one execution and the value it returned."""

    output: str
    outcome: Outcome


class _PipeDrainer:
    """Accumulate everything readable from a pipe until end-of-stream."""

    def __init__(self, fd: int, chunk_size: int) -> None:
        self._fd = fd
        self._chunk_size = chunk_size
        self._buffer = bytearray()
        self._error: OSError | None = None
        self._thread = threading.Thread(
            target=self._drain,
            name="keylargo-stdout-drainer",
            daemon=True,
        )

    def start(self) -> None:
        self._thread.start()

    def _drain(self) -> None:
        try:
            while chunk := os.read(self._fd, self._chunk_size):
                self._buffer.extend(chunk)
        except OSError as error:
            self._error = error
        finally:
            os.close(self._fd)

    def join(self) -> bytes:
        """Wait for end-of-stream and return the accumulated bytes."""
        self._thread.join()
        if self._error is not None:
            raise self._error
        return bytes(self._buffer)


def capture_stdout(
    thunk: cabc.Callable[[], Outcome],
    config: CaptureConfig | None = None,
) -> CapturedRun:
    """Run ``thunk`` with stdout redirected and return what it wrote.

    Parameters
    ----------
    thunk : Callable[[], BaseException | None]
        Zero-argument callable that executes the command and returns its
        outcome. It runs synchronously on the calling thread.
    config : CaptureConfig, optional
        Encoding and drain settings. Defaults to UTF-8 with
        ``surrogateescape``, which keeps undecodable bytes intact.

    Returns
    -------
    CapturedRun
        The decoded output and the outcome returned by ``thunk``.

    The original ``sys.stdout`` is restored and the drainer joined on every
    exit path. If ``thunk`` raises, the exception propagates after cleanup.

    """
    settings = config or CaptureConfig()
    read_fd, write_fd = os.pipe()
    writer: typ.IO[str] | None = None
    try:
        writer = open(  # noqa: SIM115 - closed explicitly to signal end-of-stream
            write_fd,
            "w",
            encoding=settings.encoding,
            errors=settings.errors,
            newline="\n",
        )
        drainer = _PipeDrainer(read_fd, settings.chunk_size)
        drainer.start()
    except BaseException:
        # A failed open() closes write_fd itself; the reader has no owner yet.
        if writer is not None:
            writer.close()
        os.close(read_fd)
        raise

    try:
        with contextlib.redirect_stdout(writer):
            try:
                outcome = thunk()
            finally:
                writer.close()
    finally:
        if not writer.closed:
            writer.close()
        payload = drainer.join()

    _logger.debug("Captured %d bytes of stdout", len(payload))
    return CapturedRun(
        output=payload.decode(settings.encoding, settings.errors),
        outcome=outcome,
    )
