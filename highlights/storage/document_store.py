"""
Document store: the posts and projects collections behind a remote backend
with a local fallback
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from highlights.storage.backends import StorageBackend
from highlights.storage.errors import Conflict, NotFound, StoreError
from highlights.storage.local_store import LocalStore
from highlights.storage.remote_store import DEFAULT_API_URL, GitHubContentsClient

logger = logging.getLogger(__name__)

POSTS = 'posts'
PROJECTS = 'projects'
COLLECTIONS = (POSTS, PROJECTS)

DEFAULT_PATHS = {
    POSTS: 'data/posts.json',
    PROJECTS: 'data/projects.json',
}

COMMIT_MESSAGES = {
    POSTS: 'Add new post',
    PROJECTS: 'Add new project',
}


@dataclass
class PersistOutcome:
    """Result of writing a collection"""
    backend: StorageBackend  # Backend that ended up holding the data
    success: bool = True
    conflict: bool = False  # Remote rejected a stale version marker
    version: Optional[str] = None  # Remote version marker after the write

    def to_dict(self) -> Dict[str, Any]:
        return {
            'backend': self.backend.value,
            'success': self.success,
            'conflict': self.conflict,
            'version': self.version,
        }


class DocumentStore:
    """
    Get/append access to the named JSON collections

    Every write rewrites the whole collection. Concurrent writers are
    last-write-wins; a write rejected by the remote lands in local storage.
    """

    def __init__(self, backend: StorageBackend, local: LocalStore,
                 remote: Optional[GitHubContentsClient] = None,
                 paths: Optional[Mapping[str, str]] = None):
        if backend is StorageBackend.REMOTE and remote is None:
            raise ValueError("Remote backend requires a remote client")
        self.backend = backend
        self.local = local
        self.remote = remote
        self.paths = dict(DEFAULT_PATHS, **(paths or {}))

    def _check_name(self, name: str) -> None:
        if name not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {name}")

    def _read(self, name: str) -> Tuple[List[Dict[str, Any]], StorageBackend]:
        """Read a collection and report which backend served it"""
        self._check_name(name)
        if self.backend is StorageBackend.LOCAL:
            return self.local.load(name), StorageBackend.LOCAL

        path = self.paths[name]
        try:
            return self.remote.get_document(path).content, StorageBackend.REMOTE
        except NotFound:
            logger.info(f"Remote document {path} does not exist yet, treating as empty")
            return [], StorageBackend.REMOTE
        except StoreError as e:
            logger.warning(f"Error fetching {path}, falling back to local storage: {e}")
            return self.local.load(name), StorageBackend.LOCAL

    def read_collection(self, name: str) -> List[Dict[str, Any]]:
        """
        Load a whole collection

        Raises:
            MalformedData: If local storage holds something other than a JSON array
        """
        return self._read(name)[0]

    def persist_collection(self, name: str, collection: List[Dict[str, Any]],
                           message: Optional[str] = None) -> PersistOutcome:
        """
        Write a whole collection

        Remote writes are conditional on the version marker read just before
        writing. Any remote failure, a conflict included, is absorbed by
        writing to local storage instead.
        """
        self._check_name(name)
        if self.backend is StorageBackend.LOCAL:
            return self._persist_local(name, collection)
        return self._persist_remote(name, collection, message)

    def _persist_local(self, name: str, collection: List[Dict[str, Any]],
                       conflict: bool = False) -> PersistOutcome:
        self.local.save(name, collection)
        return PersistOutcome(backend=StorageBackend.LOCAL, conflict=conflict)

    def _persist_remote(self, name: str, collection: List[Dict[str, Any]],
                        message: Optional[str]) -> PersistOutcome:
        path = self.paths[name]
        try:
            sha = self.remote.get_version(path)
            version = self.remote.put_document(
                path, collection, sha=sha,
                message=message or COMMIT_MESSAGES.get(name),
            )
        except Conflict as e:
            logger.warning(f"Conflict updating {path}, saving to local storage instead: {e}")
            return self._persist_local(name, collection, conflict=True)
        except StoreError as e:
            logger.warning(f"Error updating {path}, saving to local storage instead: {e}")
            return self._persist_local(name, collection)
        return PersistOutcome(backend=StorageBackend.REMOTE, version=version)

    def append_entity(self, name: str, entity: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Prepend an entity to a collection and write the collection back

        The write goes to the backend that served the read.

        Returns:
            The collection as written, newest first
        """
        return self.append_entity_with_outcome(name, entity)[0]

    def append_entity_with_outcome(self, name: str, entity: Dict[str, Any],
                                   validate: Optional[Callable[[List[Dict[str, Any]]], Any]] = None
                                   ) -> Tuple[List[Dict[str, Any]], PersistOutcome]:
        """
        Same as append_entity, also returning where the data ended up

        validate, when given, is called with the stored collection before
        anything is written; whatever it raises propagates and nothing is saved.
        """
        collection, source = self._read(name)
        if validate is not None:
            validate(collection)
        updated = [entity] + collection
        if source is StorageBackend.LOCAL:
            outcome = self._persist_local(name, updated)
        else:
            outcome = self._persist_remote(name, updated, None)
        return updated, outcome

    def posts_by_project(self, project_id: str) -> List[Dict[str, Any]]:
        """Posts tagged with project_id, whether or not the project exists"""
        return [post for post in self.read_collection(POSTS) if post.get('projectTag') == project_id]

    def project_by_id(self, project_id: str) -> Optional[Dict[str, Any]]:
        """First project with the given id, None if there is none"""
        for project in self.read_collection(PROJECTS):
            if project.get('id') == project_id:
                return project
        return None


def build_document_store(config: Mapping[str, Any], backend: StorageBackend) -> DocumentStore:
    """Assemble a DocumentStore from application configuration"""
    local = LocalStore(config['LOCAL_STORE_DIR'])
    remote = None
    if backend is StorageBackend.REMOTE:
        remote = GitHubContentsClient(
            token=config['GITHUB_TOKEN'],
            owner=config['REPO_OWNER'],
            repo=config['REPO_NAME'],
            branch=config.get('REPO_BRANCH') or None,
            api_url=config.get('GITHUB_API_URL') or DEFAULT_API_URL,
            timeout=float(config.get('REMOTE_TIMEOUT', 10)),
        )
    paths = {
        POSTS: config.get('POSTS_PATH') or DEFAULT_PATHS[POSTS],
        PROJECTS: config.get('PROJECTS_PATH') or DEFAULT_PATHS[PROJECTS],
    }
    return DocumentStore(backend, local, remote=remote, paths=paths)
