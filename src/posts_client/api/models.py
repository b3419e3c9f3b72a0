"""
API Models

Records exchanged with the posts and comments collections. All
identifiers are normalized to strings when decoded so that joining
comments to posts is plain equality.
"""

from dataclasses import dataclass
from typing import Any, Dict


def normalize_id(value: Any) -> str:
    """Convert a server identifier (int or str) to its string form."""
    if value is None:
        return ""
    return str(value)


def normalize_text(value: Any) -> str:
    """Convert a free-text field to a string; missing values become empty."""
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class PostDraft:
    """Body of a create or update request for a post."""
    title: str
    author: str

    def to_payload(self) -> Dict[str, str]:
        return {"title": self.title, "author": self.author}


@dataclass(frozen=True)
class Post:
    """Represents a post from the API."""
    id: str
    title: str
    author: str

    @classmethod
    def from_json(cls, item: Dict[str, Any]) -> "Post":
        return cls(
            id=normalize_id(item["id"]),
            title=normalize_text(item.get("title")),
            author=normalize_text(item.get("author")),
        )

    def draft(self) -> PostDraft:
        """The editable fields of this post."""
        return PostDraft(title=self.title, author=self.author)


@dataclass(frozen=True)
class Comment:
    """Represents a comment attached to a post."""
    id: str
    text: str
    post_id: str

    @classmethod
    def from_json(cls, item: Dict[str, Any]) -> "Comment":
        return cls(
            id=normalize_id(item["id"]),
            text=normalize_text(item.get("text")),
            post_id=normalize_id(item.get("postId")),
        )
