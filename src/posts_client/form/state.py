"""
Form State Module

Immutable state of the post form. Which post is being edited lives in
an EditSession value carried by the form, so switching between create
and update mode means replacing the form, not rebinding a handler.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from ..api.models import Post, PostDraft
from ..config import config


@dataclass(frozen=True)
class EditSession:
    """The post currently being edited, or none in create mode."""
    post_id: Optional[str] = None

    @classmethod
    def none(cls) -> "EditSession":
        return cls()

    @property
    def is_editing(self) -> bool:
        return bool(self.post_id)


@dataclass(frozen=True)
class PostForm:
    """Values bound to the title/author/post-id fields of the form."""
    title: str = ""
    author: str = ""
    session: EditSession = field(default_factory=EditSession)

    @classmethod
    def blank(cls) -> "PostForm":
        """An empty form in create mode."""
        return cls()

    @classmethod
    def from_post(cls, post: Post) -> "PostForm":
        """A form populated from a fetched post, in update mode for its id."""
        return cls(
            title=post.title,
            author=post.author,
            session=EditSession(post_id=post.id),
        )

    @property
    def post_id(self) -> Optional[str]:
        return self.session.post_id

    @property
    def submit_label(self) -> str:
        if self.session.is_editing:
            return config.render.update_label
        return config.render.create_label

    def with_values(
        self,
        title: Optional[str] = None,
        author: Optional[str] = None
    ) -> "PostForm":
        """Copy of this form with the given fields replaced; keeps the session."""
        changes = {}
        if title is not None:
            changes["title"] = title
        if author is not None:
            changes["author"] = author
        return replace(self, **changes)

    def draft(self) -> PostDraft:
        return PostDraft(title=self.title, author=self.author)
