from pathlib import Path

import yaml

from potato_doc.config import (
    DEFAULT_ENDPOINT_URL,
    ENDPOINT_ENV_VAR,
    load_config,
    resolve_endpoint_url,
)


def test_missing_config_file_gives_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.delenv(ENDPOINT_ENV_VAR, raising=False)

    config = load_config(tmp_path)

    assert config == {}
    assert resolve_endpoint_url(config) == DEFAULT_ENDPOINT_URL


def test_config_file_sets_endpoint(tmp_path: Path, monkeypatch):
    monkeypatch.delenv(ENDPOINT_ENV_VAR, raising=False)
    (tmp_path / "config.yaml").write_text(
        yaml.safe_dump({"ENDPOINT_URL": "http://localhost:8000/predict"}),
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert resolve_endpoint_url(config) == "http://localhost:8000/predict"


def test_environment_overrides_config_file(monkeypatch):
    monkeypatch.setenv(ENDPOINT_ENV_VAR, "http://env.test/predict")

    assert (
        resolve_endpoint_url({"ENDPOINT_URL": "http://file.test/predict"})
        == "http://env.test/predict"
    )


def test_invalid_config_is_ignored(tmp_path: Path):
    (tmp_path / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path) == {}

    (tmp_path / "config.yaml").write_text("ENDPOINT_URL: [unclosed\n", encoding="utf-8")
    assert load_config(tmp_path) == {}
