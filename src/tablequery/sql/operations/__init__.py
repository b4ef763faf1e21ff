"""SELECT / INSERT / UPDATE / DELETE builders and executors."""

from .delete import build_delete, delete
from .insert import build_insert, insert
from .select import build_select, select
from .update import build_update, update

__all__ = [
    "build_delete",
    "build_insert",
    "build_select",
    "build_update",
    "delete",
    "insert",
    "select",
    "update",
]
