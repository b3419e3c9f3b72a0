"""
Main Orchestrator Module

Entry point and central component of the Posts Client. PostsClient
coordinates:

1. Fetching the posts and comments collections
2. Joining and rendering them into the posts page
3. Issuing create/update/delete mutations
4. Re-fetching and re-rendering after every successful mutation

Every operation catches its own FetchError, logs it with context and
returns a Result instead of raising. Nothing is retried.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .config import config
from .api import APIClient, Comment, FetchError, Post, PostDraft
from .files import FileManager
from .form import PostForm
from .view import PostsView, render, render_page


logger = logging.getLogger(__name__)


# Configure logging
def setup_logging(log_level: str = "INFO", log_to_file: bool = True) -> logging.Logger:
    """Set up logging for the application."""
    # Create logger
    root = logging.getLogger("posts_client")
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)
    root.addHandler(console_handler)

    # File handler
    if log_to_file:
        config.log.log_directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            config.log.log_file_path,
            mode='a',
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(config.log.log_format))
        root.addHandler(file_handler)

    return root


@dataclass
class Result:
    """Outcome of a PostsClient operation: a value or the error that stopped it."""
    value: Any = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FetchError) -> "Result":
        return cls(error=error)


class PostsClient:
    """
    Component behind the posts page.

    Holds the current post form and the last rendered view. The view is
    never patched in place: each successful mutation triggers a full
    re-fetch of both collections.
    """

    def __init__(
        self,
        api: Optional[APIClient] = None,
        files: Optional[FileManager] = None
    ):
        """Initialize the client."""
        self.api = api or APIClient()
        self.files = files or FileManager()
        self.form = PostForm.blank()
        self.view = PostsView(blocks=())

        logger.info("PostsClient initialized")

    def _attempt(self, context: str, operation: Callable[..., Any], *args: Any) -> Result:
        try:
            return Result.success(operation(*args))
        except FetchError as e:
            logger.error(f"{context}: {e}")
            return Result.failure(e)

    # Queries

    def list_posts(self) -> Result:
        """Result holding List[Post]."""
        return self._attempt("Failed to fetch posts", self.api.list_posts)

    def list_comments(self) -> Result:
        """Result holding List[Comment]."""
        return self._attempt("Failed to fetch comments", self.api.list_comments)

    def refresh(self) -> Result:
        """
        Re-fetch both collections, render, and write the page.

        On failure the previous view and page are left untouched.

        Returns:
            Result holding the new PostsView.
        """
        posts_result = self.list_posts()
        if not posts_result.ok:
            return posts_result

        comments_result = self.list_comments()
        if not comments_result.ok:
            return comments_result

        posts: List[Post] = posts_result.value
        comments: List[Comment] = comments_result.value

        self.view = render(posts, comments)
        self._write_page()

        logger.info(
            f"Rendered {len(self.view.blocks)} posts with "
            f"{self.view.comment_count} comments"
        )
        return Result.success(self.view)

    # Post mutations

    def create_post(self, draft: PostDraft) -> Result:
        """Create a post, then refresh."""
        result = self._attempt("Failed to create post", self.api.create_post, draft)
        return self._refresh_after(result)

    def update_post(self, post_id: str, draft: PostDraft) -> Result:
        """Update a post, then refresh."""
        result = self._attempt(
            f"Failed to update post {post_id}", self.api.update_post, post_id, draft
        )
        return self._refresh_after(result)

    def delete_post(self, post_id: str) -> Result:
        """Delete a post, then refresh."""
        result = self._attempt(
            f"Failed to delete post {post_id}", self.api.delete_post, post_id
        )
        return self._refresh_after(result)

    # Comment mutations

    def add_comment(self, post_id: str, text: str) -> Result:
        """Attach a comment to a post, then refresh."""
        result = self._attempt(
            f"Failed to add comment to post {post_id}",
            self.api.create_comment, post_id, text
        )
        return self._refresh_after(result)

    def delete_comment(self, comment_id: str) -> Result:
        """Delete a comment, then refresh."""
        result = self._attempt(
            f"Failed to delete comment {comment_id}",
            self.api.delete_comment, comment_id
        )
        return self._refresh_after(result)

    # Form

    def begin_edit(self, post_id: str) -> Result:
        """
        Load a post into the form, switch it to update mode and rewrite
        the page so the form shows the loaded values.

        A later begin_edit replaces the session of an earlier one.

        Returns:
            Result holding the populated PostForm.
        """
        result = self._attempt(f"Failed to fetch post {post_id}", self.api.get_post, post_id)
        if not result.ok:
            return result

        self.form = PostForm.from_post(result.value)
        self._write_page()
        logger.info(f"Editing post {self.form.post_id}")
        return Result.success(self.form)

    def cancel_edit(self) -> None:
        self.form = PostForm.blank()
        self._write_page()

    def submit(self, form: Optional[PostForm] = None) -> Result:
        """
        Submit the form: update while editing, create otherwise.

        The form is reset to blank whether or not the request succeeds.

        Args:
            form: Form to submit (uses the current form if None).

        Returns:
            Result holding the created or updated Post.
        """
        form = form or self.form
        self.form = PostForm.blank()

        if form.session.is_editing:
            return self.update_post(form.post_id, form.draft())
        return self.create_post(form.draft())

    def _write_page(self) -> None:
        self.files.write_page(render_page(self.view, self.form))

    def _refresh_after(self, result: Result) -> Result:
        if result.ok:
            self.refresh()
        return result


def main():
    """Load the page once: fetch, render and write it."""
    setup_logging(config.log.log_level)

    try:
        client = PostsClient()
        result = client.refresh()

        if result.ok:
            logger.info(f"Page available at {client.files.get_page_path()}")
            sys.exit(0)
        else:
            logger.error("Could not load posts")
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
