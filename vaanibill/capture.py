"""Transcript sources: producers of finalized utterance text."""

from __future__ import annotations

import asyncio
import logging
import sys
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterable
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from .config import VaanibillConfig

logger = logging.getLogger(__name__)


class TranscriptSource(ABC):
    """A capture session that emits finalized transcripts.

    The owner calls ``stop()`` to end the session; transcripts already
    yielded are still processed by the consumer.
    """

    def __init__(self) -> None:
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self) -> None:
        if not self._stopped:
            logger.debug("Stopping %s", type(self).__name__)
        self._stopped = True

    @abstractmethod
    def _next(self) -> AsyncIterator[str]:
        ...

    async def transcripts(self) -> AsyncIterator[str]:
        """Yield finalized, non-blank transcripts until stopped or exhausted."""
        async for text in self._next():
            if self._stopped:
                break
            text = text.strip()
            if text:
                yield text


class StaticTranscriptSource(TranscriptSource):
    """Replays a fixed sequence of transcripts."""

    def __init__(self, lines: Iterable[str]) -> None:
        super().__init__()
        self._lines = list(lines)

    async def _next(self) -> AsyncIterator[str]:
        for line in self._lines:
            yield line


class StreamTranscriptSource(TranscriptSource):
    """Reads one finalized transcript per line from a text stream.

    ``stop()`` is checked before each read; a read already waiting in the
    worker thread returns only at the next line or EOF, and that line is
    then discarded.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self._stream = stream if stream is not None else sys.stdin

    async def _next(self) -> AsyncIterator[str]:
        while not self._stopped:
            line = await asyncio.to_thread(self._stream.readline)
            if not line:
                break
            yield line


def create_source(
    config: VaanibillConfig, stream: TextIO | None = None
) -> TranscriptSource:
    """Create a transcript source based on configuration."""
    source_name = config.capture.source

    match source_name:
        case "stdin":
            return StreamTranscriptSource(stream)
        case "static":
            return StaticTranscriptSource(config.capture.lines)
        case _:
            raise ValueError(
                f"Unknown transcript source: {source_name!r} "
                f"(choose stdin or static)"
            )
