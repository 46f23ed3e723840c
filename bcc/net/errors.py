"""
Error detection and troubleshooting messages
"""
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Union

if TYPE_CHECKING:
    from bcc.lib.logger import BCCLogger

ErrorLike = Union[BaseException, str, None]

AUTH_ERROR_PATTERNS = [
    "authentication", "auth", "Auth", "invalid_grant", "device code", "post_request_failed", "fetch failed"
]
# suppressed while an auth flow is running, the auth library retries on its own
TRANSIENT_NETWORK_ERROR_PATTERNS = ["ECONNABORTED", "ETIMEDOUT", "ECONNRESET", "ENOTFOUND", "fetch failed"]
TIMEOUT_MARKER = "Ping timed out"
CONNECTION_REFUSED_MARKER = "ECONNREFUSED"


class ErrorKind(Enum):
    AUTH = "auth"
    TIMEOUT = "timeout"
    CONNECTION_REFUSED = "connection_refused"
    TRANSIENT_NETWORK = "transient_network"
    UNKNOWN = "unknown"


TROUBLESHOOTING_TIPS = {
    ErrorKind.TIMEOUT: [
        "Check if the server is running",
        "Verify the host and port in config.yml",
        "Check if the server allows external connections",
        "Ensure the Minecraft version matches the server",
        "Check firewall settings",
    ],
    ErrorKind.CONNECTION_REFUSED: [
        "The server may not be running",
        "Check the port number in config.yml",
        "Verify the host address is correct",
    ],
    ErrorKind.AUTH: [
        "Delete auth-cache/ directory: rm -rf auth-cache/",
        "Try using offline mode if the server supports it",
        "Ensure your Microsoft account is valid",
    ],
}


def error_message(err: ErrorLike) -> str:
    if err is None:
        return ""
    return str(err)


def cause_message(err: ErrorLike) -> str:
    cause = getattr(err, "__cause__", None)
    if cause is None:
        return ""
    return str(cause)


def is_auth_error(err: ErrorLike) -> bool:
    message = error_message(err)
    return any(pattern in message for pattern in AUTH_ERROR_PATTERNS)


def is_timeout_error(err: ErrorLike) -> bool:
    return TIMEOUT_MARKER in error_message(err)


def is_connection_refused_error(err: ErrorLike) -> bool:
    return CONNECTION_REFUSED_MARKER in error_message(err)


def is_network_error(err: ErrorLike) -> bool:
    full_message = error_message(err) + " " + cause_message(err)
    return any(pattern in full_message for pattern in TRANSIENT_NETWORK_ERROR_PATTERNS)


def classify(err: ErrorLike) -> ErrorKind:
    if not error_message(err) and not cause_message(err):
        return ErrorKind.UNKNOWN
    if is_auth_error(err):
        return ErrorKind.AUTH
    if is_timeout_error(err):
        return ErrorKind.TIMEOUT
    if is_connection_refused_error(err):
        return ErrorKind.CONNECTION_REFUSED
    if is_network_error(err):
        return ErrorKind.TRANSIENT_NETWORK
    return ErrorKind.UNKNOWN


def _print_tips(logger: "BCCLogger", heading: str, tips: List[str]) -> None:
    logger.error(heading)
    for i, tip in enumerate(tips):
        logger.error(f"  {i + 1}. {tip}")


def show_timeout_tips(logger: "BCCLogger") -> None:
    _print_tips(logger, "Troubleshooting tips:", TROUBLESHOOTING_TIPS[ErrorKind.TIMEOUT])


def show_connection_refused_tips(logger: "BCCLogger") -> None:
    _print_tips(logger, "Troubleshooting tips:", TROUBLESHOOTING_TIPS[ErrorKind.CONNECTION_REFUSED])


def show_auth_tips(logger: "BCCLogger") -> None:
    _print_tips(logger, "Authentication failed. Please check:", TROUBLESHOOTING_TIPS[ErrorKind.AUTH])
    logger.error("Exiting due to authentication error.")


def troubleshoot(err: ErrorLike, logger: "BCCLogger") -> Optional[ErrorKind]:
    if is_timeout_error(err):
        show_timeout_tips(logger)
        return ErrorKind.TIMEOUT
    elif is_connection_refused_error(err):
        show_connection_refused_tips(logger)
        return ErrorKind.CONNECTION_REFUSED
    elif is_auth_error(err):
        show_auth_tips(logger)
        return ErrorKind.AUTH
    return None
