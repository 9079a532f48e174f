import logging

import pytest

from pack_allocator import policy
from pack_allocator.policy import DEFAULT_POLICY, AllocationPolicy, load_policy


@pytest.fixture(autouse=True)
def clear_policy_cache():
    load_policy.cache_clear()
    yield
    load_policy.cache_clear()


def test_bundled_settings_raise_on_empty_catalog():
    assert load_policy() == AllocationPolicy(empty_catalog="raise")
    assert load_policy().raise_on_empty_catalog


def test_settings_file_selects_empty_plan(tmp_path):
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("empty_catalog: empty_plan\n", encoding="utf-8")

    loaded = load_policy(str(settings_path))

    assert loaded.empty_catalog == "empty_plan"
    assert not loaded.raise_on_empty_catalog


def test_missing_settings_file_uses_defaults(tmp_path):
    assert load_policy(str(tmp_path / "missing.yaml")) == DEFAULT_POLICY


def test_unknown_mode_falls_back_to_default(tmp_path, caplog):
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("empty_catalog: shrug\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger=policy.__name__):
        loaded = load_policy(str(settings_path))

    assert loaded == DEFAULT_POLICY
    assert "shrug" in caplog.text


def test_malformed_yaml_falls_back_to_default(tmp_path, caplog):
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("empty_catalog: [unclosed\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger=policy.__name__):
        loaded = load_policy(str(settings_path))

    assert loaded == DEFAULT_POLICY
    assert "Failed to read allocation settings" in caplog.text


def test_default_settings_path_points_into_package(monkeypatch, tmp_path):
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("empty_catalog: empty_plan\n", encoding="utf-8")
    monkeypatch.setattr(policy, "default_settings_path", lambda: str(settings_path))

    assert load_policy().empty_catalog == "empty_plan"
