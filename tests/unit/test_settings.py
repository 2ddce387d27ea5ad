import pytest

from core.settings import DEFAULT_PROMPT, DEFAULT_SETTINGS, LensSettings, SettingsStore


def test_defaults_on_first_run(data_store):
    store = SettingsStore(data_store)
    settings = store.load()

    assert settings.api_key == ""
    assert settings.prompt == DEFAULT_PROMPT
    assert settings.prompt.strip() != ""


def test_load_is_idempotent(data_store):
    data_store.data = {"api_key": "abc"}
    store = SettingsStore(data_store)

    assert store.load() == store.load()


def test_save_then_load_round_trip(data_store):
    store = SettingsStore(data_store)
    cfg = LensSettings(api_key="key-123", prompt="  Custom\nprompt  ")

    store.save(cfg)

    assert store.load() == cfg


def test_partial_blob_falls_back_to_defaults(data_store):
    data_store.data = {"api_key": "only-key"}
    settings = SettingsStore(data_store).load()

    assert settings.api_key == "only-key"
    assert settings.prompt == DEFAULT_SETTINGS.prompt


def test_empty_prompt_is_accepted(data_store):
    data_store.data = {"prompt": ""}
    settings = SettingsStore(data_store).load()

    assert settings.prompt == ""


def test_unknown_keys_are_ignored(data_store):
    data_store.data = {"api_key": "k", "legacy_option": "x"}
    settings = SettingsStore(data_store).load()

    assert settings.api_key == "k"
    assert not hasattr(settings, "legacy_option")


def test_load_does_not_mutate_defaults(data_store):
    data_store.data = {"api_key": "k", "prompt": "p"}
    SettingsStore(data_store).load()

    assert DEFAULT_SETTINGS.api_key == ""
    assert DEFAULT_SETTINGS.prompt == DEFAULT_PROMPT


def test_store_on_app_config(clean_config):
    """Settings survive a round trip through QSettings."""
    store = SettingsStore(clean_config)
    store.save(LensSettings(api_key="qs-key", prompt="line one\nline two"))

    loaded = SettingsStore(clean_config).load()
    assert loaded.api_key == "qs-key"
    assert loaded.prompt == "line one\nline two"
