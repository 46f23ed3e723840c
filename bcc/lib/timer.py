import trio

from typing import Awaitable, Callable, Optional


class TimerHandle:
    def __init__(self, delay: float) -> None:
        self.delay = delay
        self.cancel_scope = trio.CancelScope()
        self.fired = False
        self.done = False

    @property
    def cancelled(self) -> bool:
        return self.cancel_scope.cancel_called

    @property
    def pending(self) -> bool:
        return not self.done and not self.cancelled

    def cancel(self) -> None:
        self.cancel_scope.cancel()

    async def run(self, async_fn: Callable[..., Awaitable], *args) -> None:
        try:
            with self.cancel_scope:
                await trio.sleep(max(self.delay, 0))
                self.fired = True
                await async_fn(*args)
        finally:
            self.done = True


class RetryTimer:
    """
    One-shot delayed calls inside a trio nursery, each behind its own cancel scope
    """
    def __init__(self, nursery: Optional[trio.Nursery] = None) -> None:
        self.nursery = nursery

    def attach(self, nursery: trio.Nursery) -> None:
        self.nursery = nursery

    def start(self, delay: float, async_fn: Callable[..., Awaitable], *args) -> TimerHandle:
        if self.nursery is None:
            raise RuntimeError("RetryTimer is not attached to a nursery")
        handle = TimerHandle(delay)
        self.nursery.start_soon(handle.run, async_fn, *args)
        return handle
