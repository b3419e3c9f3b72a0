"""
View Module

Provides the pure join/render functions for the posts page.
"""

from .render import PostBlock, PostsView, render, render_html, render_page, render_text

__all__ = [
    "PostBlock",
    "PostsView",
    "render",
    "render_html",
    "render_page",
    "render_text",
]
