import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from SwarmCore.utils import setup_logging


def test_setup_logging_is_idempotent():
    logger = setup_logging("swarm_test_idempotent", level="DEBUG")
    handler_count = len(logger.handlers)

    again = setup_logging("swarm_test_idempotent", level=logging.WARNING)

    assert again is logger
    assert len(again.handlers) == handler_count
    assert again.level == logging.WARNING


def test_setup_logging_writes_to_log_dir(tmp_path: Path):
    logger = setup_logging("swarm_test_file", log_dir=str(tmp_path / "logs"))
    logger.info("swarm initialized")
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "logs" / "swarm_test_file_logs.log"
    assert "swarm initialized" in log_file.read_text(encoding="utf-8")


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("swarm_test_bad_level", level="LOUD")
