from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import pytest

from contactbook.domain.value_objects.ids import IdStrategyName
from contactbook.repositories.json_file import contacts_json

MODULE = "contactbook.config.settings"


def _reload_settings() -> Any:
    return importlib.reload(importlib.import_module(MODULE))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Prevent picking up values from a real .env during the test
    monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **k: None, raising=False)
    for key in ("CONTACTBOOK_BASE_DIR", "CONTACTBOOK_STORE_PATH", "CONTACTBOOK_ID_STRATEGY"):
        monkeypatch.delenv(key, raising=False)


def test_defaults_resolve_against_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    module = _reload_settings()
    s = module.settings

    assert s.base_dir == tmp_path.resolve()
    assert s.store_path == tmp_path.resolve() / "db" / "contacts.json"
    assert s.id_strategy is IdStrategyName.SEQUENTIAL
    assert s.indent == contacts_json.JSON_INDENT == 2
    assert module.STORE_PATH == s.store_path


def test_relative_store_path_uses_base_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CONTACTBOOK_BASE_DIR", str(tmp_path))
    monkeypatch.setenv("CONTACTBOOK_STORE_PATH", "data/people.json")
    s = _reload_settings().settings
    assert s.store_path == tmp_path.resolve() / "data" / "people.json"


def test_absolute_store_path_is_kept(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    target = tmp_path / "abs.json"
    monkeypatch.setenv("CONTACTBOOK_BASE_DIR", str(tmp_path / "elsewhere"))
    monkeypatch.setenv("CONTACTBOOK_STORE_PATH", str(target))
    assert _reload_settings().settings.store_path == target


def test_timestamp_random_strategy(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONTACTBOOK_ID_STRATEGY", " Timestamp-Random ")
    s = _reload_settings().settings
    assert s.id_strategy is IdStrategyName.TIMESTAMP_RANDOM


def test_unknown_strategy_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    module = _reload_settings()
    monkeypatch.setenv("CONTACTBOOK_ID_STRATEGY", "uuid")
    with pytest.raises(RuntimeError, match="CONTACTBOOK_ID_STRATEGY must be one of"):
        module._build_settings()


def test_settings_are_frozen() -> None:
    s = _reload_settings().settings
    with pytest.raises(Exception):
        s.indent = 4  # type: ignore[misc]
