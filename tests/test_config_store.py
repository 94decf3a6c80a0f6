import json
import os
import stat
import sys

import pytest

from adapters.config_store import ConfigStore
from core.config import AppSettings
from core.errors import ConfigNotFoundError, ConfigParseError, FilesystemError

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")


@pytest.fixture
def store(config_dir) -> ConfigStore:
    return ConfigStore(config_dir)


def test_path_is_config_json_inside_directory(store, config_dir):
    assert store.path == config_dir / "config.json"
    assert store.directory == config_dir


def test_default_directory_is_dot_wztools_in_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert ConfigStore().path == tmp_path / ".wztools" / "config.json"


def test_from_settings_uses_configured_directory(config_dir):
    store = ConfigStore.from_settings(AppSettings(config_dir=config_dir))
    assert store.path == config_dir / "config.json"


def test_save_then_load_round_trip(store, sample_config):
    store.save(sample_config)

    loaded = store.load()

    assert loaded == sample_config
    assert loaded.client_secret.get_secret_value() == "s3cr3t"
    assert loaded.password.get_secret_value() == "p4ssw0rd"


def test_saved_file_is_pretty_camel_case_json(store, sample_config):
    path = store.save(sample_config)

    text = path.read_text(encoding="utf-8")
    data = json.loads(text)

    assert text.startswith("{\n  ")
    assert data["clientId"] == "sb-client"
    assert data["workzoneHost"] == "acme.dt.launchpad.cfapps.eu10.hana.ondemand.com"
    assert data["subaccountId"] == "1234-abcd"


@posix_only
def test_save_uses_owner_only_permissions(store, sample_config, config_dir):
    path = store.save(sample_config)

    assert stat.S_IMODE(path.stat().st_mode) == 0o600
    assert stat.S_IMODE(config_dir.stat().st_mode) == 0o700


def test_save_overwrites_existing_file(store, sample_config, config_values):
    store.save(sample_config)
    config_values["subdomain"] = "other"
    store.save(type(sample_config)(**config_values))

    assert store.load().subdomain == "other"
    assert [p.name for p in store.directory.iterdir()] == ["config.json"]


@posix_only
def test_ensure_directory_tightens_existing_permissions(store, config_dir):
    config_dir.mkdir(mode=0o755)
    os.chmod(config_dir, 0o755)

    store.ensure_directory()

    assert stat.S_IMODE(config_dir.stat().st_mode) == 0o700


def test_ensure_directory_is_idempotent(store, config_dir):
    store.ensure_directory()
    store.ensure_directory()
    assert config_dir.is_dir()


def test_ensure_directory_fails_with_filesystem_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(FilesystemError):
        ConfigStore(blocker / "nested").ensure_directory()


def test_save_fails_with_filesystem_error(tmp_path, sample_config):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(FilesystemError):
        ConfigStore(blocker).save(sample_config)


def test_exists_only_checks_presence(store, config_dir):
    assert store.exists() is False
    config_dir.mkdir()
    store.path.write_text("garbage")
    assert store.exists() is True


def test_load_missing_file_raises_not_found(store):
    with pytest.raises(ConfigNotFoundError, match="wztools init"):
        store.load()


def test_load_invalid_json_raises_parse_error(store, config_dir):
    config_dir.mkdir()
    store.path.write_text("{not json")

    with pytest.raises(ConfigParseError, match="Failed to load configuration"):
        store.load()


def test_load_non_object_raises_parse_error(store, config_dir):
    config_dir.mkdir()
    store.path.write_text("[1, 2, 3]")

    with pytest.raises(ConfigParseError, match="expected a JSON object"):
        store.load()


def test_load_wrong_shape_raises_parse_error(store, config_dir):
    config_dir.mkdir()
    store.path.write_text(json.dumps({"clientId": "x", "wzUrl": "https://old.example.com"}))

    with pytest.raises(ConfigParseError) as excinfo:
        store.load()

    assert "clientSecret" in str(excinfo.value)
