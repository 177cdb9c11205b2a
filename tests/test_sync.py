import threading
from itertools import accumulate

import pytest

from schedsim.sync import BoundedBuffer, dine_one_at_a_time, producer_consumer


def test_buffer_is_first_in_first_out():
    buffer = BoundedBuffer(3)
    for item in ("a", "b", "c"):
        buffer.put(item)
    assert [buffer.get() for _ in range(3)] == ["a", "b", "c"]


def test_buffer_wraps_around():
    buffer = BoundedBuffer(2)
    seen = []
    for item in range(7):
        buffer.put(item)
        seen.append(buffer.get())
    assert seen == list(range(7))
    assert len(buffer) == 0


def test_buffer_length_tracks_contents():
    buffer = BoundedBuffer(4)
    buffer.put(1)
    buffer.put(2)
    assert len(buffer) == 2
    buffer.get()
    assert len(buffer) == 1
    assert buffer.capacity == 4


def test_put_blocks_while_full():
    buffer = BoundedBuffer(1)
    buffer.put(1)
    stored = threading.Event()

    def second_put():
        buffer.put(2)
        stored.set()

    thread = threading.Thread(target=second_put)
    thread.start()
    assert not stored.wait(0.1)
    assert buffer.get() == 1
    assert stored.wait(2)
    thread.join()
    assert buffer.get() == 2


def test_callbacks_see_items():
    puts, gets = [], []
    buffer = BoundedBuffer(2, on_put=puts.append, on_get=gets.append)
    buffer.put("x")
    buffer.put("y")
    buffer.get()
    assert puts == ["x", "y"]
    assert gets == ["x"]


@pytest.mark.parametrize("size", [0, -1])
def test_buffer_rejects_bad_size(size):
    with pytest.raises(ValueError):
        BoundedBuffer(size)


def test_producer_consumer_consumes_in_order():
    lines = []
    consumed = producer_consumer(count=10, buffer_size=5, delay=0, emit=lines.append)
    assert consumed == list(range(10))
    assert len(lines) == 20


def test_producer_consumer_messages_and_bound():
    lines = []
    producer_consumer(count=12, buffer_size=3, delay=0, emit=lines.append)
    assert len(lines) == 24
    produced_before_consumed = [
        lines.index(f"Producer produced: {item}")
        < lines.index(f"Consumer consumed: {item}")
        for item in range(12)
    ]
    assert produced_before_consumed == [True] * 12
    levels = list(
        accumulate(1 if line.startswith("Producer") else -1 for line in lines)
    )
    assert len(levels) == 24
    assert min(levels) >= 0
    assert max(levels) <= 3
    assert levels[-1] == 0


def test_producer_consumer_zero_items():
    lines = []
    assert producer_consumer(count=0, buffer_size=5, delay=0, emit=lines.append) == []
    assert lines == []


def test_producer_consumer_rejects_negative_count():
    with pytest.raises(ValueError):
        producer_consumer(count=-1, buffer_size=5, delay=0, emit=print)


def test_dine_single_hungry_philosopher_messages():
    lines = []
    order = dine_one_at_a_time(5, [2], eat_time=0, emit=lines.append)
    assert order == [2]
    assert lines == [
        "Allow one philosopher to eat at any time",
        "P 2 is waiting",
        "P 2 is waiting",
        "P 2 is granted to eat",
        "P 2 has finished eating",
    ]


def test_dine_eats_in_given_order_one_at_a_time():
    lines = []
    order = dine_one_at_a_time(5, [3, 1, 5], eat_time=0, emit=lines.append)
    assert order == [3, 1, 5]
    eating = [line for line in lines if "granted" in line or "finished" in line]
    assert eating == [
        "P 3 is granted to eat",
        "P 3 has finished eating",
        "P 1 is granted to eat",
        "P 1 has finished eating",
        "P 5 is granted to eat",
        "P 5 has finished eating",
    ]


def test_dine_last_seat_uses_first_chopstick():
    lines = []
    assert dine_one_at_a_time(2, [2, 1], eat_time=0, emit=lines.append) == [2, 1]


@pytest.mark.parametrize("total", [0, 1, 6])
def test_dine_rejects_bad_table_size(total):
    with pytest.raises(ValueError):
        dine_one_at_a_time(total, [1], eat_time=0, emit=print)


@pytest.mark.parametrize("hungry", [[0], [4], [1, 1, 1, 1, 1, 1]])
def test_dine_rejects_bad_hungry_list(hungry):
    with pytest.raises(ValueError):
        dine_one_at_a_time(3, hungry, eat_time=0, emit=print)