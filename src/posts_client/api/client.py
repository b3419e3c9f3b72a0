"""
API Client Module

HTTP client for the posts and comments collections of a REST server
(json-server style). Every response status is checked; failures are
raised as FetchError subclasses and never retried.
"""

import logging
from typing import Any, List, Optional

import httpx

from ..config import config
from .errors import FetchError, NetworkError, ServerError, ValidationError
from .models import Comment, Post, PostDraft, normalize_id


logger = logging.getLogger(__name__)


class APIClient:
    """
    HTTP client for the posts/comments REST API.

    Features:
    - Configurable base URL and timeout
    - Status checks on every endpoint
    - Typed failures (NetworkError, ServerError, ValidationError)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: Server root (uses config default if None).
            timeout: Request timeout in seconds (uses config default if None).
            transport: Optional httpx transport, e.g. a MockTransport.
        """
        self.base_url = (base_url or config.api.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.api.timeout_seconds
        self.transport = transport
        self.posts_url = f"{self.base_url}{config.api.posts_endpoint}"
        self.comments_url = f"{self.base_url}{config.api.comments_endpoint}"
        logger.info(f"APIClient initialized (base_url: {self.base_url})")

    # Posts

    def list_posts(self) -> List[Post]:
        """
        Fetch every post.

        Returns:
            List of Post objects in server order.

        Raises:
            FetchError: If the request fails or the body is not a list of posts.
        """
        items = self._expect_list(self._request("GET", self.posts_url))
        posts = [Post.from_json(self._expect_object(item)) for item in items]
        logger.info(f"Fetched {len(posts)} posts")
        return posts

    def get_post(self, post_id: Any) -> Post:
        """Fetch one post by id."""
        url = self._item_url(self.posts_url, post_id)
        return Post.from_json(self._expect_object(self._request("GET", url)))

    def create_post(self, draft: PostDraft) -> Post:
        """Create a post; the server assigns the id."""
        data = self._request("POST", self.posts_url, json=draft.to_payload())
        post = Post.from_json(self._expect_object(data))
        logger.info(f"Created post {post.id}")
        return post

    def update_post(self, post_id: Any, draft: PostDraft) -> Post:
        """Replace the title and author of a post."""
        url = self._item_url(self.posts_url, post_id)
        data = self._request("PUT", url, json=draft.to_payload())
        post = Post.from_json(self._expect_object(data))
        logger.info(f"Updated post {post.id}")
        return post

    def delete_post(self, post_id: Any) -> None:
        """Delete a post. Its comments are left to the server."""
        self._request("DELETE", self._item_url(self.posts_url, post_id), parse=False)
        logger.info(f"Deleted post {post_id}")

    # Comments

    def list_comments(self) -> List[Comment]:
        """Fetch every comment."""
        items = self._expect_list(self._request("GET", self.comments_url))
        comments = [Comment.from_json(self._expect_object(item)) for item in items]
        logger.info(f"Fetched {len(comments)} comments")
        return comments

    def create_comment(self, post_id: Any, text: str) -> Comment:
        """
        Attach a comment to a post.

        Args:
            post_id: Parent post id; always sent as a string.
            text: Comment body, must not be blank.

        Raises:
            ValidationError: If text or post_id is blank.
        """
        if not text or not text.strip():
            raise ValidationError("Comment text must not be empty")
        parent = normalize_id(post_id)
        if not parent:
            raise ValidationError("Comment must reference a post id")

        payload = {"text": text, "postId": parent}
        data = self._request("POST", self.comments_url, json=payload)
        comment = Comment.from_json(self._expect_object(data))
        logger.info(f"Created comment {comment.id} on post {comment.post_id}")
        return comment

    def delete_comment(self, comment_id: Any) -> None:
        """Delete a comment."""
        self._request("DELETE", self._item_url(self.comments_url, comment_id), parse=False)
        logger.info(f"Deleted comment {comment_id}")

    def test_connection(self) -> bool:
        """
        Test whether the posts collection is reachable.

        Returns:
            True if GET /posts succeeds, False otherwise.
        """
        try:
            self._request("GET", self.posts_url)
            logger.info("API connection test successful")
            return True
        except FetchError as e:
            logger.warning(f"API connection test failed: {e}")
            return False

    # Internals

    def _item_url(self, collection_url: str, item_id: Any) -> str:
        item = normalize_id(item_id)
        if not item:
            raise ValidationError("An id is required")
        return f"{collection_url}/{item}"

    def _request(
        self,
        method: str,
        url: str,
        json: Optional[dict] = None,
        parse: bool = True
    ) -> Any:
        """
        Send one request and decode the JSON response.

        Raises:
            NetworkError: If the request could not be completed.
            ServerError: On non-2xx status or undecodable JSON.
        """
        logger.debug(f"{method} {url}")

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.request(method, url, json=json)
                response.raise_for_status()

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"{method} {url} returned {status}")
            raise ServerError(f"{method} {url} returned {status}", status_code=status) from e

        except httpx.TimeoutException as e:
            logger.warning(f"Timeout on {method} {url}: {e}")
            raise NetworkError(f"{method} {url} timed out") from e

        except httpx.RequestError as e:
            logger.warning(f"Network error on {method} {url}: {e}")
            raise NetworkError(f"{method} {url} failed: {e}") from e

        if not parse:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {method} {url}: {e}")
            raise ServerError(
                f"{method} {url} returned invalid JSON",
                status_code=response.status_code
            ) from e

    @staticmethod
    def _expect_list(data: Any) -> list:
        if not isinstance(data, list):
            raise ServerError(f"Unexpected API response format: {type(data).__name__}")
        return data

    @staticmethod
    def _expect_object(data: Any) -> dict:
        if not isinstance(data, dict) or "id" not in data:
            raise ServerError(f"Unexpected API response format: {type(data).__name__}")
        return data
