import trio

from mcstatus import BedrockServer
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from bcc.lib.logger import BCCLogger

PING_TIMEOUT = 3


class ServerInfo(NamedTuple):
    motd: str
    level_name: str
    version: str
    players_online: int
    players_max: int


def query_status(host: str, port: int, timeout: float = PING_TIMEOUT) -> ServerInfo:
    status = BedrockServer(host, port, timeout=timeout).status()
    motd = status.motd.to_plain() if status.motd is not None else ""
    return ServerInfo(
        motd=motd,
        level_name=status.map_name or "",
        version=status.version.name or "",
        players_online=status.players.online or 0,
        players_max=status.players.max or 0,
    )


async def ping_server(host: str, port: int, logger: "BCCLogger") -> Optional[ServerInfo]:
    try:
        info = await trio.to_thread.run_sync(query_status, host, port, abandon_on_cancel=True)
    except Exception as e:
        logger.warning(f"Failed to connect: {host}:{port}")
        logger.debug(f"Status query failed: {e!r}", "BCC")
        return None
    level = f" ({info.level_name})" if info.level_name else ""
    logger.info(f"> Host: {host}:{port}")
    logger.info(f"> MOTD: {info.motd or 'N/A'}{level}")
    logger.info(f"> Version: {info.version or 'N/A'}")
    logger.info(f"> Players: {info.players_online}/{info.players_max}")
    return info
