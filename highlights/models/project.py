"""
Project data models and schemas
"""
import re
from dataclasses import dataclass
from typing import Optional, Dict, Any

from highlights.models.post import utc_timestamp

DEFAULT_THUMBNAIL = 'https://via.placeholder.com/300x200'

_WHITESPACE_RUN = re.compile(r'\s+')


def slugify(title: str) -> str:
    """
    Derive a project id from its title

    Only lower-cases and turns each whitespace run into a hyphen, so
    punctuation survives: "My Cool Project!" -> "my-cool-project!".
    """
    return _WHITESPACE_RUN.sub('-', title.lower())


@dataclass
class Project:
    """Project metadata model"""
    id: str  # Slug of the title, referenced by Post.project_tag and URLs
    title: str  # Display name
    description: str
    created_at: str  # ISO format timestamp
    thumbnail: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert project to its stored JSON shape"""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'thumbnail': self.thumbnail,
            'createdAt': self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Project':
        """Create project from its stored JSON shape"""
        return cls(
            id=str(data['id']),
            title=data.get('title', ''),
            description=data.get('description') or '',
            created_at=data.get('createdAt', ''),
            thumbnail=data.get('thumbnail'),
        )

    @classmethod
    def create(cls, title: str, description: str = "",
               thumbnail: Optional[str] = DEFAULT_THUMBNAIL) -> 'Project':
        """
        Create a new project with its slug id and timestamp

        No uniqueness check is made: two projects with the same title get
        the same id.

        Raises:
            ValueError: If title is blank
        """
        if not title or not title.strip():
            raise ValueError("Project title cannot be empty")

        return cls(
            id=slugify(title),
            title=title,
            description=description or '',
            created_at=utc_timestamp(),
            thumbnail=thumbnail,
        )
