"""
Feed service - creates posts and projects and serves filtered feeds
"""
import logging
from typing import List, Optional, Tuple

from highlights.models.post import Post, DEFAULT_AUTHOR
from highlights.models.project import Project, DEFAULT_THUMBNAIL
from highlights.services.feed_query import filter_posts, distinct_project_tags
from highlights.storage.document_store import POSTS, PROJECTS, DocumentStore, PersistOutcome
from highlights.storage.errors import MalformedData

logger = logging.getLogger(__name__)


def _parse_posts(items) -> List[Post]:
    try:
        return [Post.from_dict(data) for data in items]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise MalformedData(f"Stored post could not be read: {e!r}") from e


def _parse_projects(items) -> List[Project]:
    try:
        return [Project.from_dict(data) for data in items]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise MalformedData(f"Stored project could not be read: {e!r}") from e


class FeedService:
    """Service for the posts feed and the projects it is tagged with"""

    def __init__(self, store: DocumentStore):
        """
        Args:
            store: Document store holding the posts and projects collections
        """
        self.store = store
        self.last_outcome: Optional[PersistOutcome] = None

    def all_posts(self) -> List[Post]:
        """All posts, newest first"""
        return _parse_posts(self.store.read_collection(POSTS))

    def list_posts(self, project_tag: Optional[str] = None,
                   search_term: Optional[str] = None,
                   posts: Optional[List[Post]] = None) -> List[Post]:
        """
        List posts, optionally filtered

        Args:
            project_tag: Only posts tagged with this project id
            search_term: Only posts whose content contains this text (any case)
            posts: Already loaded feed to filter instead of reading it again

        Returns:
            List of Post objects in feed order
        """
        if posts is None:
            posts = self.all_posts()
        return filter_posts(posts, project_tag=project_tag, search_term=search_term)

    def project_tags(self, posts: Optional[List[Post]] = None) -> List[str]:
        """Project tags used in the feed, in first-seen order"""
        if posts is None:
            posts = self.all_posts()
        return distinct_project_tags(posts)

    def list_projects(self) -> List[Project]:
        """
        List all projects

        Returns:
            List of Project objects, newest first
        """
        return _parse_projects(self.store.read_collection(PROJECTS))

    def get_project(self, project_id: str) -> Optional[Project]:
        """
        Get project by ID

        Args:
            project_id: Project slug

        Returns:
            Project object or None if not found
        """
        data = self.store.project_by_id(project_id)
        if data:
            return Project.from_dict(data)
        return None

    def get_project_posts(self, project_id: str) -> List[Post]:
        """Posts tagged with project_id; the project itself need not exist"""
        return _parse_posts(self.store.posts_by_project(project_id))

    def create_post(self, content: str, author: str = DEFAULT_AUTHOR,
                    project_tag: Optional[str] = None) -> Tuple[Post, List[Post]]:
        """
        Create a new post at the top of the feed

        Args:
            content: Post text
            author: Display name
            project_tag: Optional project id, not checked against the projects

        Returns:
            The created post and the updated feed

        Raises:
            ValueError: If content is empty
            MalformedData: If a stored post cannot be read; nothing is written
        """
        post = Post.create(content, author=author, project_tag=project_tag)
        updated, self.last_outcome = self.store.append_entity_with_outcome(
            POSTS, post.to_dict(), validate=_parse_posts)
        logger.info(f"Created post {post.id} ({self.last_outcome.backend.value} storage)")
        return post, _parse_posts(updated)

    def create_project(self, title: str, description: str = "",
                       thumbnail: Optional[str] = DEFAULT_THUMBNAIL) -> Tuple[Project, List[Project]]:
        """
        Create a new project

        Args:
            title: Project title, its slug becomes the id
            description: Project description
            thumbnail: Image URL

        Returns:
            The created project and the updated project list

        Raises:
            ValueError: If title is empty
            MalformedData: If a stored project cannot be read; nothing is written
        """
        project = Project.create(title, description=description, thumbnail=thumbnail)
        updated, self.last_outcome = self.store.append_entity_with_outcome(
            PROJECTS, project.to_dict(), validate=_parse_projects)
        logger.info(f"Created project {project.id} ({self.last_outcome.backend.value} storage)")
        return project, _parse_projects(updated)
