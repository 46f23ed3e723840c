"""
BCC config file stuffs
"""
import copy
import os

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from typing import TYPE_CHECKING, Optional

from bcc.lib.state import RetryPolicy
from bcc.lib.typeddicts import TypedConfig, TypedDebugConfig, TypedLogConfig

if TYPE_CHECKING:
    from bcc.lib.logger import BCCLogger

CONFIG_PATH = "config.yml"
AUTH_CACHE_PATH = "auth-cache"
REQUIRED_KEYS = ["host", "port", "gamertag"]
INT_KEYS = {
    "retry": ["max_retries", "delay_ms"],
    "log": ["size_to_zip", "size_to_zip_chat"],
}
DEFAULT_CONFIG: TypedConfig = {
    "host": "127.0.0.1",
    "port": 19132,
    "gamertag": "Bot",
    "offline": True,
    "version": "",
    "debug": False,
    "client_factory": "",
    "retry": {
        "max_retries": 10,
        "delay_ms": 5000,
    },
    "log": {
        "path": "logs",
        "size_to_zip": 512,
        "split_log": False,
        "size_to_zip_chat": 512,
    },
}


class ConfigError(ValueError):
    pass


class Config:
    def __init__(self, data: Optional[TypedConfig] = None):
        if data is None:
            data = copy.deepcopy(DEFAULT_CONFIG)
        self.raw_data = data
        self.host: str = data["host"]
        self.port: int = int(data["port"])
        self.gamertag: str = data["gamertag"]
        self.offline: bool = bool(data["offline"])
        self.version: str = data["version"] or ""
        self.debug: bool = bool(data["debug"])
        self.client_factory: str = data["client_factory"] or ""
        self.retry = data["retry"]
        self.log: TypedLogConfig = data["log"]

    @property
    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(int(self.retry["max_retries"]), int(self.retry["delay_ms"]))

    @property
    def debug_config(self) -> TypedDebugConfig:
        return {"all": False, "BCC": self.debug, "packet": self.debug}

    @property
    def profiles_folder(self) -> str:
        return os.path.join(AUTH_CACHE_PATH, self.gamertag)


class ConfigManager:
    def __init__(self, logger: "BCCLogger", path: str = CONFIG_PATH):
        self.logger = logger
        self.path = path
        self.yaml = YAML(typ="safe")
        self.yaml.default_flow_style = False

    def read(self) -> Config:
        if not os.path.exists(self.path):
            self.logger.error(f"{self.path} file not found, default config generated")
            self.__gen_config()
            return self.default()
        try:
            with open(self.path, "r", encoding="utf-8") as config_file:
                data = self.yaml.load(config_file)
            self.check(data)
        except YAMLError:
            self.logger.error(f"Invalid YAML in {self.path}")
            return self.default()
        except ConfigError as e:
            self.logger.error(f"Error loading {self.path}: {e}")
            return self.default()
        self.logger.debug(f"Finish config check of {self.path}", "BCC")
        return Config(data)

    def default(self) -> Config:
        self.logger.warning("Using default configuration...")
        return Config()

    def check(self, data) -> None:
        if not isinstance(data, dict):
            raise ConfigError("config root must be a mapping")
        missing = [i for i in REQUIRED_KEYS if not data.get(i)]
        if missing:
            raise ConfigError(f"Missing required fields: {', '.join(missing)}")
        self.__fill_defaults(data, DEFAULT_CONFIG)
        if not isinstance(data["gamertag"], (str, int)):
            raise ConfigError(f"gamertag must be a string, got {data['gamertag']!r}")
        data["gamertag"] = str(data["gamertag"])
        self.__check_number(data, "port", 1)
        for key in INT_KEYS["retry"]:
            self.__check_number(data["retry"], key, 0, "retry.")
        for key in INT_KEYS["log"]:
            self.__check_number(data["log"], key, 0, "log.")

    @staticmethod
    def __check_number(section: dict, key: str, minimum: int, prefix: str = "") -> None:
        value = section[key]
        if isinstance(value, bool):
            raise ConfigError(f"{prefix}{key} must be a number, got {value!r}")
        try:
            value = int(value)
        except (TypeError, ValueError):
            raise ConfigError(f"{prefix}{key} must be a number, got {value!r}")
        if value < minimum:
            raise ConfigError(f"{prefix}{key} must be at least {minimum}, got {value}")
        section[key] = value

    def __fill_defaults(self, data: dict, default: dict, prefix: str = "") -> None:
        for key, value in default.items():
            if key not in data or data[key] is None:
                self.logger.warning(f"Config {prefix}{key} not found, use default value {value}")
                data[key] = copy.deepcopy(value)
            elif isinstance(value, dict):
                if not isinstance(data[key], dict):
                    self.logger.warning(f"Config {prefix}{key} is not a mapping, use default value {value}")
                    data[key] = copy.deepcopy(value)
                else:
                    self.__fill_defaults(data[key], value, f"{prefix}{key}.")

    def __gen_config(self) -> None:
        with open(self.path, "w", encoding="utf-8") as config_file:
            self.yaml.dump(copy.deepcopy(DEFAULT_CONFIG), config_file)
        self.logger.info(f"Default config written to {self.path}, configure it and restart")
