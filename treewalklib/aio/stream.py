"""Producer/consumer stream for the async walker.

One producer task runs the traversal and pushes descriptors into a
bounded ``asyncio.Queue``. The consumer pulls at its own pace; when the
queue is full the producer suspends until the consumer drains it.

Consumers must drain the stream or close it (``aclose()`` or
``async with``) to release the producer task.
"""

import asyncio
import contextlib
from typing import AsyncIterator, Awaitable, Callable, Optional

from .._common.entry import EntryDescriptor


_END = object()


class _ProducerFailure:
    """Queue item carrying an exception raised inside the producer."""

    __slots__ = ('error',)

    def __init__(self, error: BaseException):
        self.error = error


class EntryStream:
    """Async iterator over descriptors produced by a background task.

    Args:
        producer: Async iterator of descriptors (the traversal)
        buffer_size: Queue capacity; 1 keeps the producer at most one
            descriptor ahead of the consumer
        on_close: Awaited once the producer stops, however it stops

    Must be created while an event loop is running.
    """

    def __init__(
        self,
        producer: AsyncIterator[EntryDescriptor],
        buffer_size: int = 1,
        on_close: Optional[Callable[[], Awaitable[None]]] = None
    ):
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be >= 1, got {buffer_size}")
        self.buffer_size = buffer_size
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=buffer_size)
        self._finished = False
        self._on_close = on_close
        self._task = asyncio.create_task(self._produce(producer))

    async def _produce(self, producer: AsyncIterator[EntryDescriptor]) -> None:
        final = _END
        try:
            async for entry in producer:
                await self._queue.put(entry)
        except Exception as e:
            # Delivered to the consumer after anything already queued
            final = _ProducerFailure(e)
        finally:
            if hasattr(producer, 'aclose'):
                await producer.aclose()
            await self._release()
        await self._queue.put(final)

    async def _release(self) -> None:
        """Run the close hook exactly once."""
        if self._on_close is None:
            return
        on_close, self._on_close = self._on_close, None
        await on_close()

    @property
    def done(self) -> bool:
        """True once the producer has stopped (exhausted, failed or cancelled)."""
        return self._task.done()

    def __aiter__(self) -> 'EntryStream':
        return self

    async def _next_item(self):
        if not self._queue.empty():
            return self._queue.get_nowait()

        # Wait on the producer too, so a cancelled producer ends the stream
        getter = asyncio.ensure_future(self._queue.get())
        try:
            await asyncio.wait({getter, self._task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            if not getter.done():
                getter.cancel()
        if getter.done() and not getter.cancelled():
            return getter.result()
        if not self._queue.empty():
            return self._queue.get_nowait()
        # Producer stopped without signalling the end
        return _END

    async def __anext__(self) -> EntryDescriptor:
        if self._finished:
            raise StopAsyncIteration

        item = await self._next_item()
        if item is _END:
            self._finished = True
            raise StopAsyncIteration
        if isinstance(item, _ProducerFailure):
            self._finished = True
            raise item.error
        return item

    async def aclose(self) -> None:
        """Stop the producer and release its resources."""
        self._finished = True
        if not self._task.done():
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
        # A producer cancelled before its first step never reaches its cleanup
        await self._release()

    async def __aenter__(self) -> 'EntryStream':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def __repr__(self) -> str:
        state = "done" if self.done else "running"
        return f"EntryStream(buffer_size={self.buffer_size}, {state})"
