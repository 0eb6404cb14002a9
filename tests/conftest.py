import os

import pytest

# 헤드리스 환경에서도 위젯 테스트가 돌도록
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeQSettings:
    """QSettings를 in-memory dict로 대체."""

    def __init__(self):
        self._data: dict = {}
        self.sync_count = 0

    def value(self, key: str, default=None, type_=None):
        return self._data.get(key, default)

    def setValue(self, key: str, value) -> None:
        self._data[key] = value

    def clear(self) -> None:
        self._data.clear()

    def sync(self) -> None:
        self.sync_count += 1


@pytest.fixture
def fake_settings():
    """SettingsManager backed by FakeQSettings."""
    from src.services.settings_manager import SettingsManager

    mgr = SettingsManager.__new__(SettingsManager)
    mgr._settings = FakeQSettings()
    return mgr
