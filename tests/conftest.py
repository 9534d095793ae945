from __future__ import annotations

import base64
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from highlights.app import create_app
from highlights.storage.backends import StorageBackend
from highlights.storage.document_store import DocumentStore
from highlights.storage.local_store import LocalStore
from highlights.storage.remote_store import GitHubContentsClient


class FakeResponse:
    def __init__(self, status_code: int, payload: Any = None) -> None:
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @property
    def text(self) -> str:
        return json.dumps(self._payload)

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no body")
        return self._payload


class FakeGitHub:
    """In-memory stand-in for a requests session talking to the contents API."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.files: dict[str, tuple[bytes, str]] = {}
        self.directories: set[str] = set()
        self.calls: list[tuple[str, str, Any, Any]] = []
        self.fail_status: int | None = None
        self.fail_exc: Exception | None = None
        self.before_put: Callable[[str], None] | None = None
        self._counter = 0

    def _next_sha(self) -> str:
        self._counter += 1
        return f"sha-{self._counter}"

    def seed(self, path: str, data: Any) -> str:
        sha = self._next_sha()
        self.files[path] = (json.dumps(data).encode("utf-8"), sha)
        return sha

    def seed_raw(self, path: str, raw: bytes) -> None:
        self.files[path] = (raw, self._next_sha())

    def stored(self, path: str) -> Any:
        return json.loads(self.files[path][0].decode("utf-8"))

    def request(self, method: str, url: str, timeout=None, params=None, json=None) -> FakeResponse:
        self.calls.append((method, url, params, json))
        if method == "PUT" and self.before_put is not None:
            hook, self.before_put = self.before_put, None
            hook(url.split("/contents/", 1)[1])
        if self.fail_exc is not None:
            raise self.fail_exc
        if self.fail_status is not None:
            return FakeResponse(self.fail_status, {"message": "failure"})

        path = url.split("/contents/", 1)[1]
        if method == "GET":
            if path in self.directories:
                return FakeResponse(200, [{"name": "posts.json", "path": f"{path}/posts.json", "type": "file"}])
            if path not in self.files:
                return FakeResponse(404, {"message": "Not Found"})
            raw, sha = self.files[path]
            return FakeResponse(
                200,
                {"path": path, "sha": sha, "content": base64.encodebytes(raw).decode("ascii")},
            )

        if method == "PUT":
            current = self.files.get(path)
            if current is not None and json.get("sha") != current[1]:
                status = 409 if json.get("sha") else 422
                return FakeResponse(status, {"message": "sha mismatch"})
            sha = self._next_sha()
            self.files[path] = (base64.b64decode(json["content"]), sha)
            return FakeResponse(201 if current is None else 200, {"content": {"path": path, "sha": sha}})

        return FakeResponse(405, {"message": "method not allowed"})


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def local_store(tmp_path: Path) -> LocalStore:
    return LocalStore(tmp_path / "local")


@pytest.fixture
def remote_client(github: FakeGitHub) -> GitHubContentsClient:
    return GitHubContentsClient(token="t0ken", owner="octo", repo="feed-data", session=github)


@pytest.fixture
def local_only_store(local_store: LocalStore) -> DocumentStore:
    return DocumentStore(StorageBackend.LOCAL, local_store)


@pytest.fixture
def remote_store(local_store: LocalStore, remote_client: GitHubContentsClient) -> DocumentStore:
    return DocumentStore(StorageBackend.REMOTE, local_store, remote=remote_client)


@pytest.fixture
def app(tmp_path: Path):
    return create_app("testing", overrides={"LOCAL_STORE_DIR": tmp_path / "app-data"})


@pytest.fixture
def client(app):
    return app.test_client()
