"""
Remote document storage on top of the GitHub repository contents API
"""
import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from highlights.storage.errors import Conflict, MalformedData, NotFound, TransientRemoteFailure

DEFAULT_API_URL = 'https://api.github.com'
API_VERSION = '2022-11-28'


@dataclass
class RemoteDocument:
    """A decoded remote document and its version marker"""
    content: List[Dict[str, Any]]
    sha: str


class GitHubContentsClient:
    """Reads and writes JSON array documents stored as files in a repository"""

    def __init__(self, token: str, owner: str, repo: str, branch: Optional[str] = None,
                 api_url: str = DEFAULT_API_URL, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'Authorization': f'Bearer {token}',
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': API_VERSION,
        })

    def _url(self, path: str) -> str:
        return f'{self.api_url}/repos/{self.owner}/{self.repo}/contents/{path.lstrip("/")}'

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        try:
            response = self.session.request(method, self._url(path), timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TransientRemoteFailure(f"{method} {path} failed: {e}") from e

        if response.status_code == 404:
            raise NotFound(f"{path} not found in {self.owner}/{self.repo}")
        if response.status_code == 409 or (method == 'PUT' and response.status_code == 422):
            raise Conflict(f"{path} changed since it was read", status_code=response.status_code)
        if not response.ok:
            raise TransientRemoteFailure(
                f"{method} {path} returned HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )
        return response

    def _metadata(self, path: str) -> Dict[str, Any]:
        params = {'ref': self.branch} if self.branch else None
        response = self._request('GET', path, params=params)
        try:
            meta = response.json()
        except ValueError as e:
            raise TransientRemoteFailure(f"GET {path} returned a non-JSON body") from e
        # A directory path answers with a JSON array of entries
        if not isinstance(meta, dict):
            raise MalformedData(f"Remote path {path} is not a file")
        return meta

    def get_document(self, path: str) -> RemoteDocument:
        """
        Fetch and decode a document

        Raises:
            NotFound: If the file does not exist
            MalformedData: If the file is not a base64 encoded JSON array
            TransientRemoteFailure: On any other remote failure
        """
        meta = self._metadata(path)
        try:
            raw = base64.b64decode(meta.get('content') or '')
            content = json.loads(raw.decode('utf-8'))
        except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedData(f"Remote document {path} is not valid JSON: {e}") from e

        if not isinstance(content, list):
            raise MalformedData(f"Remote document {path} is not a JSON array")
        return RemoteDocument(content=content, sha=meta.get('sha', ''))

    def get_version(self, path: str) -> Optional[str]:
        """Return the current version marker of a document, None if it does not exist"""
        try:
            return self._metadata(path).get('sha')
        except NotFound:
            return None

    def put_document(self, path: str, content: List[Dict[str, Any]], sha: Optional[str] = None,
                     message: Optional[str] = None) -> Optional[str]:
        """
        Create or replace a document

        With a sha the write is conditional on the stored version still
        matching it; without one the file is created.

        Returns:
            Version marker of the written document

        Raises:
            Conflict: If the stored version no longer matches sha
            TransientRemoteFailure: On any other remote failure
        """
        encoded = json.dumps(content, indent=2, ensure_ascii=False).encode('utf-8')
        body = {
            'message': message or f'Update {path}',
            'content': base64.b64encode(encoded).decode('ascii'),
        }
        if sha:
            body['sha'] = sha
        if self.branch:
            body['branch'] = self.branch

        response = self._request('PUT', path, json=body)
        try:
            payload = response.json()
        except ValueError:
            return None
        if not isinstance(payload, dict) or not isinstance(payload.get('content'), dict):
            return None
        return payload['content'].get('sha')
