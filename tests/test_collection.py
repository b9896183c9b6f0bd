from tideflow.collection import Array


def test_get_in_and_out_of_bounds():
    items = Array(["Item 1", "Item 2"])
    assert items.get(0) == "Item 1"
    assert items.get(1) == "Item 2"
    assert items.get(2) is None
    assert items.get(-1) is None


def test_len_and_is_empty():
    items = Array([1, 2, 3])
    assert len(items) == 3
    assert not items.is_empty()
    assert Array([]).is_empty()


def test_remove_notifies_and_shifts():
    numbers = Array([1, 2, 3, 4, 5])
    calls = []
    guard = numbers.add_watcher(calls.append)
    numbers.remove(1)
    assert numbers.get(1) == 3
    assert len(numbers) == 4
    assert calls == [None]
    guard.release()


def test_remove_out_of_bounds_is_ignored():
    numbers = Array([1])
    calls = []
    guard = numbers.add_watcher(calls.append)
    numbers.remove(5)
    assert len(numbers) == 1
    assert calls == []
    guard.release()


def test_push_and_clear_notify():
    items = Array()
    calls = []
    guard = items.add_watcher(calls.append)
    items.push("a")
    assert items.get(0) == "a"
    items.clear()
    assert items.is_empty()
    assert len(calls) == 2
    guard.release()


def test_released_guard_stops_notifications():
    items = Array([1])
    calls = []
    guard = items.add_watcher(calls.append)
    guard.release()
    items.push(2)
    assert calls == []


def test_initial_items_are_copied():
    source = [1, 2]
    items = Array(source)
    source.append(3)
    assert len(items) == 2