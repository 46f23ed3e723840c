from typing import Any, Callable, Mapping, TypedDict


class TypedRetryConfig(TypedDict):
    max_retries: int
    delay_ms: int


class TypedLogConfig(TypedDict):
    path: str
    size_to_zip: int
    split_log: bool
    size_to_zip_chat: int


class TypedDebugConfig(TypedDict):
    all: bool
    BCC: bool
    packet: bool


class TypedConfig(TypedDict, total=False):
    host: str
    port: int
    gamertag: str
    offline: bool
    version: str
    debug: bool
    client_factory: str
    retry: TypedRetryConfig
    log: TypedLogConfig


class ClientOptions(TypedDict, total=False):
    host: str
    port: int
    gamertag: str
    profiles_folder: str
    version: str
    offline: bool
    flow: str
    on_msa_code: Callable[[Mapping[str, Any]], None]
