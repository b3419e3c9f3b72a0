"""
Form Module

Provides the immutable post form and its edit session.
"""

from .state import EditSession, PostForm

__all__ = ["EditSession", "PostForm"]
