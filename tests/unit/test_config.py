import json
from pathlib import Path

from config import config_from_dict, load_config
from core.cache.store import FileCacheStore, MemoryCacheStore
from core.geocode.opencage import OpenCageGeocoder
from core.services.context import init_services


def test_load_config_merges_user_file(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.json"
    cfg_path.write_text(
        json.dumps({"cache": {"directory": str(tmp_path / "cache")}, "http": {"timeout_seconds": "7"}}),
        encoding="utf-8",
    )

    cfg = load_config(cfg_path)

    assert cfg.flickr.api_key_env == "FLICKR_API_KEY"
    assert cfg.cache.directory == str(tmp_path / "cache")
    assert cfg.http.timeout_seconds == 7.0
    assert cfg.geocoder.enabled is True


def test_config_from_dict_tolerates_bad_values() -> None:
    cfg = config_from_dict({"http": {"timeout_seconds": "soon"}, "cache": {"enabled": "yes"}})
    assert cfg.http.timeout_seconds == 20.0
    assert cfg.cache.enabled is True


def test_init_services_reads_keys_from_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("FLICKR_API_KEY", "fk")
    monkeypatch.setenv("OPENCAGE_API_KEY", "ok")
    monkeypatch.delenv("UNSPLASH_ACCESS_KEY", raising=False)
    cfg = config_from_dict({"cache": {"directory": str(tmp_path)}})

    services, error = init_services(cfg)

    assert error is None
    assert services.flickr_api_key == "fk"
    assert services.unsplash_access_key == ""
    assert isinstance(services.geocoder, OpenCageGeocoder)
    assert isinstance(services.cache.store, FileCacheStore)


def test_init_services_without_credentials(monkeypatch) -> None:
    for name in ("FLICKR_API_KEY", "UNSPLASH_ACCESS_KEY", "OPENCAGE_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    cfg = config_from_dict({"cache": {"enabled": False}})

    services, error = init_services(cfg)

    assert error is not None and "FLICKR_API_KEY" in error
    assert services.geocoder is None
    assert isinstance(services.cache.store, MemoryCacheStore)
