import os
import zipfile
from datetime import datetime
from typing import Optional

from bcc.lib.logger import BCCLogger


class LogArchiver:
    """
    Moves oversized log files of a log folder into dated zip archives
    """
    def __init__(self, logger: BCCLogger, log_dir: str) -> None:
        self.logger = logger
        self.log_dir = log_dir

    def archive_path(self, log_path: str, prefix: str = "") -> str:
        stamp = datetime.fromtimestamp(os.path.getmtime(log_path)).strftime("%Y-%m-%d_%H%M%S")
        archive = os.path.join(self.log_dir, f"{prefix}{stamp}.zip")
        index = 1
        while os.path.exists(archive):
            archive = os.path.join(self.log_dir, f"{prefix}{stamp}_{index}.zip")
            index += 1
        return archive

    def zip_log(self, file_name: str, max_size_kb: int, prefix: str = "") -> Optional[str]:
        log_path = os.path.join(self.log_dir, file_name)
        if not os.path.isfile(log_path):
            self.logger.debug(f"No {file_name} to archive", "BCC")
            return None
        if os.path.getsize(log_path) <= max_size_kb * 1024:
            return None
        archive = self.archive_path(log_path, prefix)
        with zipfile.ZipFile(archive, "w", compression=zipfile.ZIP_DEFLATED) as zipper:
            zipper.write(log_path, arcname=file_name)
        os.remove(log_path)
        self.logger.debug(f"Archived {log_path} as {archive}", "BCC")
        return archive
