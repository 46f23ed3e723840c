import logging
import os
import re
import sys
import traceback

from typing import Iterable, List, Optional, Pattern

from bcc.lib.typeddicts import TypedDebugConfig

DEFAULT_LOG_PATH = "logs"
LOG_FILE = "/latest.log"
CHAT_LOG_FILE = "/chat.log"
CHAT = 21
DEFAULT_DEBUG_CONFIG: TypedDebugConfig = {
    "all": False, "BCC": False, "packet": False
}

# noisy lines from the protocol library and its auth flow
FILTER_PATTERNS = [
    r"^\{",
    r"^\[msa\]",
    r"^TypeError: fetch failed",
    r"^Connecting to",
    r"^Server requested disconnect",
]


class ConsoleFilter(logging.Filter):
    def __init__(self, patterns: Iterable[str] = FILTER_PATTERNS):
        super().__init__()
        self.patterns: List[Pattern] = [re.compile(i) for i in patterns]

    def should_filter(self, msg) -> bool:
        if not isinstance(msg, str):
            return False
        return any(pattern.search(msg) for pattern in self.patterns)

    def filter(self, record: logging.LogRecord):
        return not self.should_filter(record.getMessage())


class ChatFilter(logging.Filter):
    def __init__(self, chat: bool):
        super().__init__()
        self.chat = chat

    def filter(self, record: logging.LogRecord):
        return self.chat == (record.levelno == CHAT)


class RootConsoleHandler(logging.StreamHandler):
    """Console output of third-party loggers, at most one on the root logger"""


class BCCLogger(logging.getLoggerClass()):
    def __init__(self, name: str):
        super().__init__(name)
        self.path = DEFAULT_LOG_PATH
        self.debug_config: TypedDebugConfig = dict(DEFAULT_DEBUG_CONFIG)
        self.console_filter = ConsoleFilter()
        logging.addLevelName(CHAT, "CHAT")
        self.setLevel(logging.DEBUG)
        sh = logging.StreamHandler(sys.stdout)
        sh.setFormatter(self.__formatter("%H:%M:%S"))
        sh.setLevel(logging.DEBUG)
        sh.addFilter(self.console_filter)
        self.addHandler(sh)
        self.console_handlers: List[logging.Handler] = [sh]

    @staticmethod
    def __formatter(datefmt: Optional[str] = None) -> logging.Formatter:
        return logging.Formatter(
            "[%(name)s] [%(asctime)s] [%(threadName)s/%(levelname)s]: %(message)s",
            datefmt=datefmt
        )

    def __file_handler(self, chat: bool, split_log: bool) -> logging.FileHandler:
        if chat:
            path = self.path + CHAT_LOG_FILE
        else:
            path = self.path + LOG_FILE
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(self.__formatter("%d-%m-%Y %H:%M:%S"))
        if split_log:
            fh.addFilter(ChatFilter(chat))
        fh.setLevel(logging.DEBUG)
        return fh

    def setup(
        self,
        debug_config: TypedDebugConfig,
        split_log: bool = False,
        path: str = DEFAULT_LOG_PATH,
        filter_patterns: Iterable[str] = FILTER_PATTERNS,
        capture_root: bool = True
    ) -> None:
        self.path = path
        self.debug_config = debug_config
        os.makedirs(path, exist_ok=True)
        self.addHandler(self.__file_handler(False, split_log))
        if split_log:
            self.addHandler(self.__file_handler(True, split_log))
        self.install_filter(ConsoleFilter(filter_patterns))
        if capture_root:
            # third-party loggers (protocol client, auth) share the console and its filter
            root = logging.getLogger()
            for handler in root.handlers[:]:
                if isinstance(handler, RootConsoleHandler):
                    root.removeHandler(handler)
                    handler.close()
                    if handler in self.console_handlers:
                        self.console_handlers.remove(handler)
            sh = RootConsoleHandler(sys.stdout)
            sh.setFormatter(self.__formatter("%H:%M:%S"))
            sh.addFilter(self.console_filter)
            root.addHandler(sh)
            self.console_handlers.append(sh)

    def install_filter(self, console_filter: ConsoleFilter) -> None:
        for handler in self.console_handlers:
            handler.removeFilter(self.console_filter)
            handler.addFilter(console_filter)
        self.console_filter = console_filter

    def bug(self, error=True, exit_now=False):
        for line in traceback.format_exc().splitlines():
            if error:
                self.error(line, exc_info=False)
            else:
                self.debug(line, "BCC")
        if exit_now:
            if not error and not self.debug_config["all"]:
                self.error("ERROR exist, use debug mode for more information")
            sys.exit(1)

    def debug(self, msg, module="all", *args) -> None:
        if self.debug_config.get(module) or self.debug_config["all"]:
            super().debug(msg, *args)

    def chat(self, msg):
        self.log(CHAT, msg)
