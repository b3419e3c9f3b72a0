"""
Render Module

Pure functions turning the posts and comments collections into a view
model, and the view model into HTML or plain text. Nothing here does
I/O; the view is recomputed from scratch after every fetch.
"""

from dataclasses import dataclass
from html import escape
from typing import Dict, List, Sequence, Tuple

from ..api.models import Comment, Post
from ..config import config
from ..form.state import PostForm


@dataclass(frozen=True)
class PostBlock:
    """A post together with the comments attached to it."""
    post: Post
    comments: Tuple[Comment, ...]


@dataclass(frozen=True)
class PostsView:
    """Derived display structure, in server-returned order."""
    blocks: Tuple[PostBlock, ...]

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    @property
    def comment_count(self) -> int:
        return sum(len(block.comments) for block in self.blocks)


def render(posts: Sequence[Post], comments: Sequence[Comment]) -> PostsView:
    """
    Join comments to their posts.

    A comment appears under a post iff its post_id equals the post's id.
    Comments whose post does not exist are dropped from the view.

    Args:
        posts: Posts in server order.
        comments: Comments in server order.

    Returns:
        PostsView with one block per post (empty when there are no posts).
    """
    if not posts:
        return PostsView(blocks=())

    by_post: Dict[str, List[Comment]] = {post.id: [] for post in posts}
    for comment in comments:
        if comment.post_id in by_post:
            by_post[comment.post_id].append(comment)

    return PostsView(blocks=tuple(
        PostBlock(post=post, comments=tuple(by_post[post.id]))
        for post in posts
    ))


POST_TEMPLATE = """<div class="post" data-post-id="{id}">
  <strong>Title:</strong> {title}<br>
  <strong>Author:</strong> {author}<br>
  <strong>ID:</strong> {id}<br>
  <button data-action="delete-post" data-post-id="{id}">Delete</button>
  <button data-action="edit-post" data-post-id="{id}">Edit</button>
  <ul class="comments">
{comments}
  </ul>
  <form class="comment-form" data-post-id="{id}">
    <input type="text" name="text" placeholder="Add a comment">
    <button type="submit" data-action="add-comment" data-post-id="{id}">Comment</button>
  </form>
</div>"""

COMMENT_TEMPLATE = (
    '    <li data-comment-id="{id}">{text} '
    '<button data-action="delete-comment" data-comment-id="{id}">Delete</button></li>'
)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{page_title}</title>
</head>
<body>
  <h1>{page_title}</h1>
  <form id="new-post-form">
    <input type="text" id="title" name="title" value="{title}">
    <input type="text" id="author" name="author" value="{author}">
    <input type="hidden" id="post-id" name="post-id" value="{post_id}">
    <button type="submit">{submit_label}</button>
  </form>
  <div id="posts-container">
{container}
  </div>
</body>
</html>
"""


def _display(value: str) -> str:
    return escape(value) if value else config.render.missing_value


def render_html(view: PostsView) -> str:
    """Render the posts container fragment."""
    if view.is_empty:
        return f"<p>{escape(config.render.empty_message)}</p>"

    blocks = []
    for block in view.blocks:
        comments = "\n".join(
            COMMENT_TEMPLATE.format(id=escape(c.id), text=escape(c.text))
            for c in block.comments
        )
        blocks.append(POST_TEMPLATE.format(
            id=_display(block.post.id),
            title=_display(block.post.title),
            author=_display(block.post.author),
            comments=comments,
        ))
    return "<br>\n".join(blocks)


def render_page(view: PostsView, form: PostForm) -> str:
    """Render the full document: post form plus posts container."""
    return PAGE_TEMPLATE.format(
        page_title=escape(config.render.page_title),
        title=escape(form.title, quote=True),
        author=escape(form.author, quote=True),
        post_id=escape(form.post_id or "", quote=True),
        submit_label=escape(form.submit_label),
        container=render_html(view),
    )


def render_text(view: PostsView) -> str:
    """Render a plain-text listing for the terminal."""
    if view.is_empty:
        return config.render.empty_message

    missing = config.render.missing_value
    lines = []
    for block in view.blocks:
        post = block.post
        lines.append(f"[{post.id or missing}] {post.title or missing} by {post.author or missing}")
        for comment in block.comments:
            lines.append(f"    #{comment.id} {comment.text}")
    return "\n".join(lines)
