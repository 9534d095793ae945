"""
Post data model
"""
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Dict, Any

DEFAULT_AUTHOR = 'You'


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and 'Z' suffix"""
    now = datetime.now(timezone.utc).isoformat(timespec='milliseconds')
    return now.replace('+00:00', 'Z')


@dataclass
class Post:
    """A short message in the feed"""
    id: str  # Epoch milliseconds at creation
    content: str  # Free text, may carry **bold**, *italic*, [link](url) markers
    author: str  # Display name
    timestamp: str  # ISO format timestamp, immutable
    project_tag: Optional[str] = None  # Project id, not checked against projects
    likes: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert post to its stored JSON shape"""
        return {
            'id': self.id,
            'content': self.content,
            'author': self.author,
            'timestamp': self.timestamp,
            'projectTag': self.project_tag,
            'likes': self.likes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Post':
        """Create post from its stored JSON shape"""
        return cls(
            id=str(data['id']),
            content=data.get('content', ''),
            author=data.get('author', DEFAULT_AUTHOR),
            timestamp=data.get('timestamp', ''),
            project_tag=data.get('projectTag') or None,
            likes=int(data.get('likes') or 0),
        )

    @classmethod
    def create(cls, content: str, author: str = DEFAULT_AUTHOR,
               project_tag: Optional[str] = None) -> 'Post':
        """
        Create a new post stamped with the current time

        Args:
            content: Post text, surrounding whitespace is dropped
            author: Display name
            project_tag: Optional project id; blank means untagged

        Raises:
            ValueError: If content is empty
        """
        if not content or not content.strip():
            raise ValueError("Post content cannot be empty")

        return cls(
            id=str(time.time_ns() // 1_000_000),
            content=content.strip(),
            author=author or DEFAULT_AUTHOR,
            timestamp=utc_timestamp(),
            project_tag=project_tag or None,
            likes=0,
        )
