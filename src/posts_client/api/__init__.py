"""
API Client Module

Provides the HTTP client and records for the posts/comments REST API.
"""

from .client import APIClient
from .errors import FetchError, NetworkError, ServerError, ValidationError
from .models import Comment, Post, PostDraft

__all__ = [
    "APIClient",
    "Comment",
    "FetchError",
    "NetworkError",
    "Post",
    "PostDraft",
    "ServerError",
    "ValidationError",
]
