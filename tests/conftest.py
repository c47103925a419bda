import os
import tempfile

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("IDLE_COUNTER_LOG_DIR", tempfile.mkdtemp(prefix="idle_counter_logs_"))

import pytest
from loguru import logger
from PySide6.QtWidgets import QApplication

from idle_counter.preference_store import PreferenceStore
from idle_counter.settings import IdleCounterSettings


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def settings_file(tmp_path):
    return tmp_path / "prefs.ini"


@pytest.fixture
def store(settings_file):
    return PreferenceStore(settings_file=settings_file)


@pytest.fixture
def settings():
    return IdleCounterSettings(project_name="AwesomeProject")


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
