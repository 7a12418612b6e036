import copy

import pytest

from pockets.messenger import Messenger, Receiver


class Recorder(Receiver):
    def __init__(self, on_receive=None):
        super().__init__()
        self.messages = []
        self.on_receive = on_receive

    def receive(self, message):
        self.messages.append(message)
        if self.on_receive is not None:
            self.on_receive(message)


def test_receiver_is_abstract():
    with pytest.raises(TypeError):
        Receiver()


def test_deliver_reaches_all_receivers():
    messenger = Messenger()
    a, b = Recorder(), Recorder()
    messenger.append_receiver(a)
    messenger.append_receiver(b)
    messenger.deliver("change")
    assert a.messages == ["change"]
    assert b.messages == ["change"]
    assert a.messengers == (messenger,)


def test_remove_receiver_stops_delivery():
    messenger = Messenger()
    a = Recorder()
    messenger.append_receiver(a)
    messenger.remove_receiver(a)
    messenger.deliver(1)
    assert a.messages == []
    assert a.messengers == ()
    assert messenger.receivers == ()


def test_removal_during_delivery_is_deferred():
    messenger = Messenger()
    b = Recorder()
    a = Recorder(on_receive=lambda m: messenger.remove_receiver(b))
    messenger.append_receiver(a)
    messenger.append_receiver(b)
    messenger.deliver("first")
    assert b.messages == ["first"]
    assert messenger.receivers == (a,)
    messenger.deliver("second")
    assert b.messages == ["first"]


def test_append_during_delivery_waits_for_next():
    messenger = Messenger()
    late = Recorder()
    added = []

    def add_once(message):
        if not added:
            added.append(True)
            messenger.append_receiver(late)

    messenger.append_receiver(Recorder(on_receive=add_once))
    messenger.deliver("one")
    assert late.messages == []
    messenger.deliver("two")
    assert late.messages == ["two"]


def test_detach_removes_from_all_messengers():
    m1, m2 = Messenger(), Messenger()
    r = Recorder()
    m1.append_receiver(r)
    m2.append_receiver(r)
    r.detach()
    m1.deliver("x")
    m2.deliver("y")
    assert r.messages == []
    assert m1.receivers == () and m2.receivers == ()


def test_detach_during_delivery_skips_receiver():
    messenger = Messenger()
    b = Recorder()
    a = Recorder(on_receive=lambda m: b.detach())
    messenger.append_receiver(a)
    messenger.append_receiver(b)
    messenger.deliver("msg")
    assert b.messages == []
    assert messenger.receivers == (a,)


def test_close_unregisters_from_receivers():
    r = Recorder()
    with Messenger() as messenger:
        messenger.append_receiver(r)
        assert r.messengers == (messenger,)
    assert r.messengers == ()
    assert messenger.receivers == ()


def test_copy_from_replicates_receivers():
    source, target = Messenger(), Messenger()
    old, a, b = Recorder(), Recorder(), Recorder()
    target.append_receiver(old)
    source.append_receiver(a)
    source.append_receiver(b)
    target.copy_from(source)
    assert target.receivers == (a, b)
    assert old.messengers == ()
    target.deliver("hello")
    assert a.messages == ["hello"] and b.messages == ["hello"]
    assert set(map(id, a.messengers)) == {id(source), id(target)}


def test_copy_module_uses_copy_from():
    source = Messenger()
    r = Recorder()
    source.append_receiver(r)
    clone = copy.copy(source)
    assert clone is not source
    assert clone.receivers == (r,)


def test_exception_in_receiver_resets_delivery_state():
    messenger = Messenger()

    def boom(message):
        raise RuntimeError("fail")

    r = Recorder(on_receive=boom)
    messenger.append_receiver(r)
    with pytest.raises(RuntimeError):
        messenger.deliver("x")
    messenger.remove_receiver(r)
    assert messenger.receivers == ()