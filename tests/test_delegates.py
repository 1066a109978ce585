import pytest

from enginecore.delegates import (
    Delegate,
    DelegateHandle,
    MulticastDelegate,
    UnboundDelegateError,
)


def test_created_handles_are_valid_and_unique():
    first = DelegateHandle.create()
    second = DelegateHandle.create()
    assert first.is_valid()
    assert second.is_valid()
    assert not (first == second)


def test_default_handle_is_invalid():
    assert not DelegateHandle().is_valid()


def test_invalidate_clears_handle():
    handle = DelegateHandle.create()
    handle.invalidate()
    assert not handle.is_valid()
    assert handle == DelegateHandle()


def test_delegate_execute_returns_result():
    delegate = Delegate()
    delegate.bind(lambda a, b: a + b)
    assert delegate.is_bound()
    assert delegate.execute(2, 3) == 5


def test_delegate_bound_arguments_come_first():
    delegate = Delegate()
    delegate.bind(lambda prefix, text: prefix + text, "pre-")
    assert delegate.execute("fix") == "pre-fix"


def test_unbound_delegate_execute_raises():
    delegate = Delegate()
    with pytest.raises(UnboundDelegateError):
        delegate.execute()


def test_execute_if_bound_reports_whether_called():
    calls = []
    delegate = Delegate()
    assert delegate.execute_if_bound(1) is False
    delegate.bind(calls.append)
    assert delegate.execute_if_bound(7) is True
    assert calls == [7]


def test_unbind_clears_delegate():
    delegate = Delegate()
    delegate.bind(lambda: None)
    delegate.unbind()
    assert not delegate.is_bound()
    assert delegate.execute_if_bound() is False


def test_broadcast_calls_every_callback_in_order():
    calls = []
    multicast = MulticastDelegate()
    multicast.add(lambda: calls.append("a"))
    multicast.add(lambda: calls.append("b"))
    multicast.broadcast()
    assert calls == ["a", "b"]


def test_broadcast_passes_arguments():
    seen = []
    multicast = MulticastDelegate()
    multicast.add(lambda tag, value: seen.append((tag, value)), "x")
    multicast.broadcast(3)
    assert seen == [("x", 3)]


def test_remove_stops_callback():
    calls = []
    multicast = MulticastDelegate()
    handle = multicast.add(lambda: calls.append(1))
    assert multicast.remove(handle) is True
    multicast.broadcast()
    assert calls == []
    assert len(multicast) == 0


def test_remove_invalid_handle_returns_false():
    multicast = MulticastDelegate()
    multicast.add(lambda: None)
    assert multicast.remove(DelegateHandle()) is False
    assert len(multicast) == 1


def test_remove_unknown_valid_handle_returns_true():
    multicast = MulticastDelegate()
    assert multicast.remove(DelegateHandle.create()) is True


def test_broadcast_uses_snapshot_of_callbacks():
    calls = []
    multicast = MulticastDelegate()

    def adder():
        calls.append("first")
        multicast.add(lambda: calls.append("late"))

    multicast.add(adder)
    multicast.broadcast()
    assert calls == ["first"]
    assert len(multicast) == 2