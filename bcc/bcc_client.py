import os
import trio

import bcc
from bcc.lib.config import ConfigManager
from bcc.lib.logger import BCCLogger, FILTER_PATTERNS
from bcc.lib.zip import LogArchiver
from bcc.net.orchestrator import SessionOrchestrator
from bcc.net.session import SessionFactoryError, load_session_factory


class BCCClient:
    def __init__(self, config_path: str = "config.yml"):
        self.logger = BCCLogger("BCC")
        self.logger.info(f"BCC is now starting at pid {os.getpid()}")

        self.config = ConfigManager(self.logger, config_path).read()
        self.logger.info(f"Version: {bcc.__version__}")

        log_config = self.config.log
        log_dir = log_config["path"]
        os.makedirs(log_dir, exist_ok=True)
        archiver = LogArchiver(self.logger, log_dir)
        archiver.zip_log("latest.log", log_config["size_to_zip"])
        if log_config["split_log"]:
            archiver.zip_log("chat.log", log_config["size_to_zip_chat"], "chat_")
        self.logger.setup(
            self.config.debug_config,
            split_log=log_config["split_log"],
            path=log_dir,
            filter_patterns=FILTER_PATTERNS
        )

        try:
            session_factory = load_session_factory(self.config.client_factory)
        except SessionFactoryError as e:
            self.logger.error(str(e))
            self.logger.warning("Set client_factory in config.yml to the protocol client you use")
            self.orchestrator = None
            return
        self.orchestrator = SessionOrchestrator(self.config, self.logger, session_factory)

    def start(self) -> int:
        if self.orchestrator is None:
            self.logger.info("Exit now")
            return 1
        try:
            exit_code = trio.run(self.orchestrator.run)
        except Exception:
            self.logger.bug()
            return 1
        self.logger.info(f"Exit now with code {exit_code}")
        return exit_code
