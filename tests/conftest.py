"""共通フィクスチャ。

- 時刻源/スケジューラの差し替え
- `QSP_*` 環境変数の隔離
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings as settings_mod
from tests._utils.fake_gl import FakeContext, FakeScheduler, FakeTime


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """各テストを既定設定で開始し、終了後も既定へ戻す。"""
    for name in ("QSP_TIME_SCALED_ANIMATION", "QSP_TICK_ERRORS_FATAL", "QSP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings_mod.reload_from_env()
    yield
    monkeypatch.undo()
    settings_mod.reload_from_env()


@pytest.fixture()
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def gl_ctx() -> FakeContext:
    return FakeContext()
