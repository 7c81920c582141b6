"""Use cases for community posts."""

from .create_post import create_post
from .search_posts import filter_posts

__all__ = ["create_post", "filter_posts"]
