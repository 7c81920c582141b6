"""Interaction mutator: likes, replies, edits, deletes and applications."""

from .create_reply import create_reply
from .delete_entity import delete_entity
from .edit_entity import edit_entity
from .refs import EntityRef
from .submit_application import submit_application
from .toggle_like import toggle_like

__all__ = [
    "EntityRef",
    "create_reply",
    "delete_entity",
    "edit_entity",
    "submit_application",
    "toggle_like",
]
