"""
Seam to the protocol client library, which owns the Bedrock wire protocol
"""
import importlib

from typing import TYPE_CHECKING, Any, Callable, Mapping, Protocol

from bcc.lib.state import ConnectionState
from bcc.lib.typeddicts import ClientOptions

if TYPE_CHECKING:
    from bcc.lib.config import Config
    from bcc.lib.logger import BCCLogger

SESSION_EVENTS = ("join", "text", "error", "close", "disconnect")


class Session(Protocol):
    def on(self, event: str, handler: Callable[..., None]) -> Any:
        ...

    def close(self) -> Any:
        ...


SessionFactory = Callable[[ClientOptions], Session]


class SessionFactoryError(Exception):
    pass


def load_session_factory(path: str) -> SessionFactory:
    """
    Resolve a "module:callable" string, e.g. "my_bedrock_client:create_client"
    """
    if not path or ":" not in path:
        raise SessionFactoryError(f"client_factory must look like 'module:callable', got {path!r}")
    module_name, attr = path.split(":", 1)
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise SessionFactoryError(f"Cannot import {module_name!r}: {e}") from e
    factory = getattr(module, attr, None)
    if factory is None or not callable(factory):
        raise SessionFactoryError(f"{module_name!r} has no callable {attr!r}")
    return factory


def build_client_options(config: "Config", state: ConnectionState, logger: "BCCLogger") -> ClientOptions:
    options: ClientOptions = {
        "host": config.host,
        "port": config.port,
        "gamertag": config.gamertag,
        "profiles_folder": config.profiles_folder,
    }

    if config.offline:
        options["offline"] = True
        if state.is_first_attempt:
            logger.info("Using offline mode (no authentication)")
    else:
        if state.is_first_attempt:
            logger.info("Using online mode (Microsoft authentication)")
        options["flow"] = "microsoft"

        def on_msa_code(data: Mapping[str, Any]) -> None:
            state.is_authenticating = True
            logger.info(f"[auth] Visit: {data['verification_uri']}?otc={data['user_code']}")

        options["on_msa_code"] = on_msa_code

    if config.version:
        options["version"] = config.version

    return options
