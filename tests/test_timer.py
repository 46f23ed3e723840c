import pytest
import trio

from basic_fixture import *

from bcc.lib.timer import RetryTimer


def test_timer_fires_after_delay():
    calls = []

    async def callback(value):
        calls.append((trio.current_time(), value))

    async def main():
        async with trio.open_nursery() as nursery:
            timer = RetryTimer(nursery)
            handle = timer.start(5, callback, "x")
            await trio.sleep(4.9)
            assert calls == []
            assert handle.pending
            await trio.sleep(0.2)
            assert handle.fired
            assert not handle.pending
        return handle

    handle = run_trio(main)
    assert len(calls) == 1
    assert calls[0][1] == "x"
    assert calls[0][0] == pytest.approx(5)
    assert handle.done


def test_cancelled_timer_never_fires():
    calls = []

    async def callback():
        calls.append(1)

    async def main():
        async with trio.open_nursery() as nursery:
            handle = RetryTimer(nursery).start(5, callback)
            await trio.sleep(1)
            handle.cancel()
        return handle

    handle = run_trio(main)
    assert calls == []
    assert handle.cancelled
    assert not handle.fired


def test_unattached_timer():
    async def callback():
        pass

    with pytest.raises(RuntimeError):
        RetryTimer().start(1, callback)


def test_negative_delay_fires_immediately():
    calls = []

    async def callback():
        calls.append(trio.current_time())

    async def main():
        async with trio.open_nursery() as nursery:
            RetryTimer(nursery).start(-1, callback)

    run_trio(main)
    assert calls == [0]
