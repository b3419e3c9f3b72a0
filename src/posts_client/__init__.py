"""
Posts Client

Client for a posts/comments REST API: fetches both collections, joins
comments to their posts, renders the result and issues mutations.
"""

__version__ = "1.0.0"
