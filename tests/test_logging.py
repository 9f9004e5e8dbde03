"""Tests for logger setup."""

import logging
import os
import subprocess
import sys
import textwrap
from pathlib import Path

from tbp.common.utils.logger import NOTICE_LEVEL, CustomLogger, get_logger, setup_logging


class TestImportSideEffects:
    def test_import_keeps_host_root_handler(self, tmp_path):
        """A program that configured logging before importing tbp keeps its handlers."""
        script = textwrap.dedent(
            """
            import logging
            handler = logging.StreamHandler()
            root = logging.getLogger()
            root.addHandler(handler)
            root.setLevel(logging.WARNING)
            import tbp
            print(handler in root.handlers, root.level == logging.WARNING, len(logging.getLogger("app").handlers))
            """
        )
        env = {**os.environ, "PYTHONPATH": str(Path(__file__).resolve().parents[1])}
        env.pop("TBP_LOG_DIR", None)
        result = subprocess.run(
            [sys.executable, "-c", script], cwd=tmp_path, env=env, capture_output=True, text=True, check=True
        )
        assert result.stdout.split() == ["True", "True", "0"]
        assert not (tmp_path / "logs").exists()


class TestSetupLogging:
    def test_handlers_on_app_logger_only(self, tmp_path):
        root_handlers = list(logging.getLogger().handlers)

        app_logger = setup_logging(str(tmp_path))

        assert len(app_logger.handlers) == 2
        assert logging.getLogger().handlers == root_handlers
        assert (tmp_path / "app.log").exists()

    def test_repeated_setup_does_not_stack(self, tmp_path):
        setup_logging(str(tmp_path))
        app_logger = setup_logging(str(tmp_path))
        assert len(app_logger.handlers) == 2

    def test_file_gets_debug_from_children(self, tmp_path):
        setup_logging(str(tmp_path))
        get_logger("app.blocks").debug("derived end pattern")
        for handler in get_logger().handlers:
            handler.flush()

        assert "derived end pattern" in (tmp_path / "app.log").read_text(encoding="utf-8")

    def test_info_is_promoted_to_notice(self, tmp_path):
        setup_logging(str(tmp_path))
        logger = get_logger("app.cli")
        assert isinstance(logger, CustomLogger)

        logger.info("found blocks")
        for handler in get_logger().handlers:
            handler.flush()

        assert logging.getLevelName(NOTICE_LEVEL) == "NOTICE"
        assert "| NOTICE | app.cli | found blocks" in (tmp_path / "app.log").read_text(encoding="utf-8")

    def test_other_loggers_keep_default_class(self):
        assert type(logging.getLogger("host.module")) is logging.Logger
