from __future__ import annotations

import pytest

from highlights.config import DevelopmentConfig, ProductionConfig, TestingConfig, get_config
from highlights.storage.backends import StorageBackend, resolve_backend


def test_get_config_by_name() -> None:
    assert get_config("production") is ProductionConfig
    assert get_config("testing") is TestingConfig
    assert get_config("unknown") is DevelopmentConfig


def test_get_config_reads_flask_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "production")
    assert get_config() is ProductionConfig


def test_resolve_backend_remote_when_fully_configured() -> None:
    config = {"GITHUB_TOKEN": "t", "REPO_OWNER": "octo", "REPO_NAME": "data"}
    assert resolve_backend(config) is StorageBackend.REMOTE


@pytest.mark.parametrize("missing", ["GITHUB_TOKEN", "REPO_OWNER", "REPO_NAME"])
def test_resolve_backend_local_when_anything_missing(missing: str) -> None:
    config = {"GITHUB_TOKEN": "t", "REPO_OWNER": "octo", "REPO_NAME": "data"}
    config[missing] = ""
    assert resolve_backend(config) is StorageBackend.LOCAL


def test_resolve_backend_token_alone_is_local() -> None:
    assert resolve_backend({"GITHUB_TOKEN": "t", "REPO_OWNER": None}) is StorageBackend.LOCAL


def test_testing_config_defaults_to_local() -> None:
    assert resolve_backend({k: getattr(TestingConfig, k) for k in dir(TestingConfig) if k.isupper()}) is (
        StorageBackend.LOCAL
    )
