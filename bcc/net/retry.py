from typing import TYPE_CHECKING, Awaitable, Callable, Optional

from bcc.lib.state import ConnectionState, RetryPolicy
from bcc.lib.timer import RetryTimer, TimerHandle
from bcc.net.errors import ErrorLike, troubleshoot

if TYPE_CHECKING:
    from bcc.lib.logger import BCCLogger

ConnectFn = Callable[[], Awaitable[None]]


class RetryController:
    def __init__(
        self,
        state: ConnectionState,
        policy: RetryPolicy,
        logger: "BCCLogger",
        timer: RetryTimer,
        terminate: Callable[[int], None]
    ) -> None:
        self.state = state
        self.policy = policy
        self.logger = logger
        self.timer = timer
        self.terminate = terminate
        self.pending: Optional[TimerHandle] = None

    def schedule_reconnect(self, connect_fn: ConnectFn) -> Optional[TimerHandle]:
        """Close / disconnect path"""
        return self.__schedule(connect_fn, None, error=False)

    def handle_retry(self, connect_fn: ConnectFn, err: ErrorLike = None) -> Optional[TimerHandle]:
        """Error path, exhausting it exits with 1 and prints tips for the last error"""
        return self.__schedule(connect_fn, err, error=True)

    def cancel(self) -> None:
        if self.pending is not None and self.pending.pending:
            self.logger.debug("Cancel pending reconnect", "BCC")
            self.pending.cancel()

    def __schedule(self, connect_fn: ConnectFn, err: ErrorLike, error: bool) -> Optional[TimerHandle]:
        if self.state.is_shutting_down:
            return None
        if self.state.is_reconnecting:
            return None
        if self.state.is_max_retries_reached(self.policy):
            if error:
                self.logger.error("Max retries reached. Exiting.")
                if err is not None:
                    troubleshoot(err, self.logger)
                self.terminate(1)
            else:
                self.logger.info("Max reconnection attempts reached. Exiting.")
                self.terminate(0)
            return None

        self.state.is_reconnecting = True
        retry_count = self.state.increment_retry()
        delay = f"{self.policy.delay:g}"
        if error:
            self.logger.error(f"Retrying connection ({retry_count}/{self.policy.max_retries}) in {delay} seconds...")
        else:
            self.logger.info(f"Reconnecting ({retry_count}/{self.policy.max_retries}) in {delay} seconds...")
        self.pending = self.timer.start(self.policy.delay, self.__fire, connect_fn)
        return self.pending

    async def __fire(self, connect_fn: ConnectFn) -> None:
        # shutdown may have happened while waiting
        if self.state.is_shutting_down:
            return
        self.state.is_reconnecting = False
        self.state.is_connecting = False
        await connect_fn()
