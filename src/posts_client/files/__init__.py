"""
File Management Module

Provides output management for the rendered posts page.
"""

from .manager import FileManager

__all__ = ["FileManager"]
