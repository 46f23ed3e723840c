import os
import zipfile

from basic_fixture import *

from bcc.lib.zip import LogArchiver


def test_zip_large_log(logger, tmp_path):
    log = tmp_path / "latest.log"
    log.write_text("x" * 4096, encoding="utf-8")
    archive = LogArchiver(logger, str(tmp_path)).zip_log("latest.log", 1)
    assert archive is not None
    assert not log.exists()
    assert list(tmp_path.glob("*.zip")) == [tmp_path / os.path.basename(archive)]
    with zipfile.ZipFile(archive) as zipper:
        assert zipper.namelist() == ["latest.log"]


def test_zip_prefix(logger, tmp_path):
    (tmp_path / "chat.log").write_text("y" * 4096, encoding="utf-8")
    archive = LogArchiver(logger, str(tmp_path)).zip_log("chat.log", 1, "chat_")
    assert os.path.basename(archive).startswith("chat_")


def test_same_timestamp_gets_new_name(logger, tmp_path):
    archiver = LogArchiver(logger, str(tmp_path))
    log = tmp_path / "latest.log"
    log.write_text("x" * 4096, encoding="utf-8")
    os.utime(log, (1700000000, 1700000000))
    first = archiver.zip_log("latest.log", 1)
    log.write_text("z" * 4096, encoding="utf-8")
    os.utime(log, (1700000000, 1700000000))
    second = archiver.zip_log("latest.log", 1)
    assert first != second
    assert second.endswith("_1.zip")
    assert len(list(tmp_path.glob("*.zip"))) == 2


def test_small_or_missing_log(logger, tmp_path):
    archiver = LogArchiver(logger, str(tmp_path))
    log = tmp_path / "latest.log"
    assert archiver.zip_log("latest.log", 1) is None
    log.write_text("tiny", encoding="utf-8")
    assert archiver.zip_log("latest.log", 1) is None
    assert log.exists()
