"""Command actions: the work behind each ``graft`` sub-command."""

from graft.actions.add import AddAction
from graft.actions.base import AbstractAction, ActionResult
from graft.actions.build import BuildAction

__all__ = [
    "AbstractAction",
    "ActionResult",
    "AddAction",
    "BuildAction",
]
