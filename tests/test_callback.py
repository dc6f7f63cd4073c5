import pytest

from garagemqtt.callback import Callback


def test_unattached_call_returns_none():
    cb = Callback()
    assert cb.attached() is False
    assert cb(5) is None


def test_attached_function_is_invoked():
    seen = []
    cb = Callback()
    cb.attach(lambda value: seen.append(value) or len(seen))
    assert cb.attached() is True
    assert cb("x") == 1
    assert seen == ["x"]


def test_bound_method():
    class Wrapper:
        def __init__(self):
            self.values = []

        def handler(self, value):
            self.values.append(value)
            return value

    wrapped = Wrapper()
    cb = Callback()
    cb.attach(wrapped.handler)
    assert cb(True) is True
    assert wrapped.values == [True]


def test_attach_replaces_previous():
    cb = Callback()
    cb.attach(lambda v: "first")
    cb.attach(lambda v: "second")
    assert cb(None) == "second"


def test_detach():
    cb = Callback()
    cb.attach(lambda v: v)
    cb.detach()
    assert cb.attached() is False
    assert cb(3) is None


def test_attach_rejects_non_callable():
    cb = Callback()
    with pytest.raises(TypeError):
        cb.attach(42)
    assert cb.attached() is False