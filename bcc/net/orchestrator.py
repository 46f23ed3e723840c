import json
import os
import signal
import trio

from functools import wraps
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping, Optional

from bcc.lib.state import ConnectionState, RetryPolicy
from bcc.lib.timer import RetryTimer
from bcc.net.errors import is_auth_error, is_network_error, show_auth_tips
from bcc.net.ping import ServerInfo, ping_server
from bcc.net.retry import RetryController
from bcc.net.session import Session, SessionFactory, build_client_options
from bcc.resources.formatter import format_text, translate_disconnect

if TYPE_CHECKING:
    from bcc.lib.config import Config
    from bcc.lib.logger import BCCLogger

Probe = Callable[[str, int, "BCCLogger"], Awaitable[Optional[ServerInfo]]]


class SessionOrchestrator:
    def __init__(
        self,
        config: "Config",
        logger: "BCCLogger",
        session_factory: SessionFactory,
        state: Optional[ConnectionState] = None,
        policy: Optional[RetryPolicy] = None,
        probe: Probe = ping_server,
        force_exit: Callable[[int], Any] = os._exit
    ) -> None:
        self.config = config
        self.logger = logger
        self.session_factory = session_factory
        self.state = state if state is not None else ConnectionState()
        self.policy = policy if policy is not None else config.retry_policy
        self.probe = probe
        self.force_exit = force_exit
        self.timer = RetryTimer()
        self.retry = RetryController(self.state, self.policy, logger, self.timer, self.terminate)
        self.session: Optional[Session] = None
        self.exit_code: Optional[int] = None
        self.nursery: Optional[trio.Nursery] = None
        self.token: Optional[trio.lowlevel.TrioToken] = None

    def attach(self, nursery: trio.Nursery) -> None:
        self.nursery = nursery
        self.timer.attach(nursery)
        self.token = trio.lowlevel.current_trio_token()

    async def run(self) -> int:
        async with trio.open_nursery() as nursery:
            self.attach(nursery)
            nursery.start_soon(self.watch_signals)
            await self.connect()
        return self.exit_code if self.exit_code is not None else 0

    def terminate(self, code: int) -> None:
        if self.exit_code is None:
            self.exit_code = code
        self.logger.debug(f"Terminate with exit code {self.exit_code}", "BCC")
        if self.nursery is not None:
            self.nursery.cancel_scope.cancel()

    def threadsafe(self, handler: Callable[..., None]) -> Callable[..., None]:
        """
        Protocol libraries may fire callbacks from their own threads, run those on the trio thread
        """
        @wraps(handler)
        def wrapper(*args):
            try:
                trio.lowlevel.current_task()
            except RuntimeError:
                pass
            else:
                return handler(*args)
            try:
                return trio.from_thread.run_sync(handler, *args, trio_token=self.token)
            except trio.RunFinishedError:
                # the loop is gone, nobody is left to handle it
                self.logger.debug(f"Dropped late {handler.__name__} event", "BCC")
                return None

        return wrapper

    async def connect(self) -> None:
        if self.state.is_shutting_down or self.state.is_connecting:
            return
        self.state.is_connecting = True

        if self.state.is_first_attempt:
            await self.probe(self.config.host, self.config.port, self.logger)
            # a signal may arrive while the probe is running
            if self.state.is_shutting_down:
                return

        options = build_client_options(self.config, self.state, self.logger)
        if "on_msa_code" in options:
            options["on_msa_code"] = self.threadsafe(options["on_msa_code"])
        try:
            session = self.session_factory(options)
        except Exception as e:
            self.state.is_connecting = False
            self.logger.error(f"Failed to create client: {e}")
            if is_auth_error(e):
                show_auth_tips(self.logger)
                self.terminate(1)
                return
            self.retry.handle_retry(self.connect, e)
            return

        self.session = session
        if self.state.is_first_attempt:
            self.logger.info(f"Gamertag: {self.config.gamertag}")
        self.register_handlers(session)

    def register_handlers(self, session: Session) -> None:
        session.on("join", self.threadsafe(self.on_join))
        session.on("text", self.threadsafe(self.on_text))
        session.on("error", self.threadsafe(self.on_error))
        session.on("close", self.threadsafe(self.on_close))
        session.on("disconnect", self.threadsafe(self.on_disconnect))

    def on_join(self, *args) -> None:
        self.logger.info("Successfully joined the server!")
        self.state.on_join()

    def on_text(self, packet: Mapping[str, Any]) -> None:
        self.logger.debug(json.dumps(packet, indent=2, default=str), "packet")
        line = format_text(packet, self.config.gamertag)
        if line is not None:
            self.logger.chat(line)

    def on_error(self, err: Any) -> None:
        # the auth library retries its own requests, trust it while the device code flow runs
        if self.state.is_authenticating and is_network_error(err):
            self.logger.info("[auth] Retrying authentication due to network issue...")
            return

        if self.state.is_authenticating and is_auth_error(err):
            self.logger.warning("Waiting for authentication to complete...")
            self.logger.warning("If authentication is taking too long, press Ctrl+C and try again.")
            return

        if is_auth_error(err):
            show_auth_tips(self.logger)
            self.state.is_connecting = False
            self.terminate(1)
            return

        self.logger.error(f"Connection error: {err}")
        self.retry.handle_retry(self.connect, err)

    def on_close(self, *args) -> None:
        self.logger.info("Disconnected from server.")
        self.state.is_connecting = False
        self.retry.schedule_reconnect(self.connect)

    def on_disconnect(self, packet: Optional[Mapping[str, Any]] = None) -> None:
        packet = packet or {}
        self.logger.info(translate_disconnect(packet.get("message") or "", packet.get("parameters")))
        self.state.is_connecting = False
        self.retry.schedule_reconnect(self.connect)

    async def shutdown(self, session: Optional[Session]) -> None:
        if self.state.is_shutting_down:
            # close() may hang, a second signal leaves right away
            self.logger.warning("Forced exit")
            self.force_exit(0)
            return
        self.state.is_shutting_down = True
        self.logger.info("Shutting down...")
        self.retry.cancel()
        if session is not None:
            try:
                await trio.to_thread.run_sync(session.close, abandon_on_cancel=True)
            except Exception:
                self.logger.warning("Failed to close the session cleanly")
                self.logger.bug(error=False)
        self.terminate(0)

    async def watch_signals(self) -> None:
        with trio.open_signal_receiver(signal.SIGINT, signal.SIGTERM) as receiver:
            async for signum in receiver:
                self.logger.debug(f"Received signal {signum}", "BCC")
                self.nursery.start_soon(self.shutdown, self.session)
