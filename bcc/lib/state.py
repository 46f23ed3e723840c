from typing import NamedTuple


class RetryPolicy(NamedTuple):
    max_retries: int = 10
    delay_ms: int = 5000

    @property
    def delay(self) -> float:
        return self.delay_ms / 1000


class ConnectionState:

    def __init__(self) -> None:
        self.retry_count = 0
        self.is_connecting = False
        self.is_authenticating = False
        self.is_reconnecting = False
        self.is_shutting_down = False
        self.is_first_attempt = True

    def __repr__(self):
        return (
            f"ConnectionState(retry_count={self.retry_count}, connecting={self.is_connecting}, "
            f"authenticating={self.is_authenticating}, reconnecting={self.is_reconnecting}, "
            f"shutting_down={self.is_shutting_down}, first_attempt={self.is_first_attempt})"
        )

    def increment_retry(self) -> int:
        self.retry_count += 1
        self.is_first_attempt = False
        return self.retry_count

    def on_join(self) -> None:
        self.retry_count = 0
        self.is_first_attempt = False
        self.is_connecting = False
        self.is_authenticating = False
        self.is_reconnecting = False

    def is_max_retries_reached(self, policy: RetryPolicy) -> bool:
        return self.retry_count >= policy.max_retries
