"""
Entity storage: the EntityStore, its flat file persistence and undo log.
"""

from .entity_store import EntityStore
from .flat_file import FlatFileStorage
from .undo import ActionType, UndoRecord, UndoLog, MAX_UNDO

__all__ = [
    'EntityStore',
    'FlatFileStorage',
    'ActionType',
    'UndoRecord',
    'UndoLog',
    'MAX_UNDO',
]
