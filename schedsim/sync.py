"""Semaphore-based synchronisation: a bounded producer/consumer buffer and dining philosophers."""

from __future__ import annotations

import threading
import time
from typing import Callable, Generic, Sequence, TypeVar

_T = TypeVar("_T")

MAX_PHILOSOPHERS = 5

Emit = Callable[[str], object]


class BoundedBuffer(Generic[_T]):
    """A fixed-size circular buffer guarded by two counting semaphores and a lock.

    ``put`` blocks while the buffer is full and ``get`` blocks while it is
    empty. The optional ``on_put`` and ``on_get`` callbacks run while the lock
    is held, so whatever they record stays in step with the buffer contents.
    """

    def __init__(
        self,
        size: int = 5,
        on_put: Callable[[_T], object] | None = None,
        on_get: Callable[[_T], object] | None = None,
    ) -> None:
        if size <= 0:
            raise ValueError("buffer size must be positive")
        self._slots: list[_T | None] = [None] * size
        self._in = 0
        self._out = 0
        self._count = 0
        self._empty = threading.Semaphore(size)
        self._full = threading.Semaphore(0)
        self._lock = threading.Lock()
        self._on_put = on_put
        self._on_get = on_get

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        with self._lock:
            return self._count

    def put(self, item: _T) -> None:
        """Store ``item``, waiting for a free slot if necessary."""
        self._empty.acquire()
        with self._lock:
            self._slots[self._in] = item
            self._in = (self._in + 1) % len(self._slots)
            self._count += 1
            if self._on_put is not None:
                self._on_put(item)
        self._full.release()

    def get(self) -> _T:
        """Remove and return the oldest item, waiting for one if necessary."""
        self._full.acquire()
        with self._lock:
            item = self._slots[self._out]
            self._slots[self._out] = None
            self._out = (self._out + 1) % len(self._slots)
            self._count -= 1
            if self._on_get is not None:
                self._on_get(item)
        self._empty.release()
        return item  # type: ignore[return-value]


def producer_consumer(
    count: int = 10,
    buffer_size: int = 5,
    delay: float = 1.0,
    emit: Emit = print,
) -> list[int]:
    """Run one producer and one consumer thread over a bounded buffer.

    The producer makes the items 0 .. count-1, pausing ``delay`` seconds after
    each; the consumer takes the same number of items. Returns the items in
    the order they were consumed.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if delay < 0:
        raise ValueError("delay must not be negative")

    buffer: BoundedBuffer[int] = BoundedBuffer(
        buffer_size,
        on_put=lambda item: emit(f"Producer produced: {item}"),
        on_get=lambda item: emit(f"Consumer consumed: {item}"),
    )
    consumed: list[int] = []

    def produce() -> None:
        for item in range(count):
            buffer.put(item)
            time.sleep(delay)

    def consume() -> None:
        for _ in range(count):
            consumed.append(buffer.get())
            time.sleep(delay)

    threads = [threading.Thread(target=produce), threading.Thread(target=consume)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return consumed


def dine_one_at_a_time(
    total: int,
    hungry: Sequence[int],
    eat_time: float = 1.0,
    emit: Emit = print,
) -> list[int]:
    """Let the hungry philosophers eat one after another.

    ``total`` philosophers sit at the table (2 to 5); ``hungry`` lists the
    positions, counted from 1, of those who want to eat. Each one eats in its
    own thread, holding a global lock and both neighbouring chopsticks, and is
    joined before the next starts. Returns the positions in eating order.
    """
    if not 2 <= total <= MAX_PHILOSOPHERS:
        raise ValueError(f"number of philosophers must be between 2 and {MAX_PHILOSOPHERS}")
    positions = [int(p) for p in hungry]
    if len(positions) > MAX_PHILOSOPHERS:
        raise ValueError(f"at most {MAX_PHILOSOPHERS} philosophers can be hungry")
    for position in positions:
        if not 1 <= position <= total:
            raise ValueError(f"philosopher position {position} is not between 1 and {total}")
    if eat_time < 0:
        raise ValueError("eating time must not be negative")

    mutex = threading.Semaphore(1)
    chopsticks = [threading.Semaphore(1) for _ in range(total)]
    eaten: list[int] = []

    def philosopher(index: int) -> None:
        emit(f"P {index + 1} is waiting")
        with mutex:
            with chopsticks[index], chopsticks[(index + 1) % total]:
                emit(f"P {index + 1} is granted to eat")
                time.sleep(eat_time)
                emit(f"P {index + 1} has finished eating")
                eaten.append(index + 1)

    emit("Allow one philosopher to eat at any time")
    for position in positions:
        for waiting in positions:
            emit(f"P {waiting} is waiting")
        thread = threading.Thread(target=philosopher, args=(position - 1,))
        thread.start()
        thread.join()
    return eaten