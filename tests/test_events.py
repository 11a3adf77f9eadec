import pytest

from muikit.events import Event, EventQueue, EventType, ResizeInfo


def test_pop_on_empty_queue_returns_none_event():
    queue = EventQueue()
    assert queue.pop().type is EventType.NONE
    assert queue.pop().resize is None


def test_pending_tracks_contents():
    queue = EventQueue()
    assert queue.pending() is False
    queue.push(Event(EventType.QUIT))
    assert queue.pending() is True
    queue.pop()
    assert queue.pending() is False


def test_newest_event_is_popped_first():
    queue = EventQueue()
    queue.push(Event(EventType.QUIT))
    resize = ResizeInfo(320, 240, 640, 480)
    queue.push(Event(EventType.RESIZE, resize))
    first = queue.pop()
    assert first.type is EventType.RESIZE
    assert first.resize == resize
    assert queue.pop().type is EventType.QUIT


def test_full_queue_discards_oldest():
    queue = EventQueue()
    for i in range(40):
        queue.push(Event(EventType.RESIZE, ResizeInfo(i, 0, 0, 0)))
    assert len(queue) == 32
    widths = []
    while queue.pending():
        widths.append(queue.pop().resize.pre_width)
    assert widths == list(range(39, 7, -1))


def test_len_counts_events():
    queue = EventQueue(capacity=4)
    for _ in range(3):
        queue.push(Event(EventType.QUIT))
    assert len(queue) == 3
    queue.pop()
    assert len(queue) == 2


def test_custom_capacity_is_respected():
    queue = EventQueue(capacity=2)
    queue.push(Event(EventType.KEYPRESS))
    queue.push(Event(EventType.KEYRELEASE))
    queue.push(Event(EventType.MOUSEPRESS))
    assert [queue.pop().type for _ in range(3)] == [
        EventType.MOUSEPRESS,
        EventType.KEYRELEASE,
        EventType.NONE,
    ]


def test_invalid_capacity_rejected():
    with pytest.raises(ValueError):
        EventQueue(capacity=0)