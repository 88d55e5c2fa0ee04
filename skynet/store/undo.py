"""
Bounded undo log for the EntityStore.

Each add or delete pushes an UndoRecord. The log keeps the most recent
records only: pushing beyond the limit evicts the oldest record.
"""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Deque, Dict, List, Optional

MAX_UNDO = 5


class ActionType(Enum):
    ADD_AIRPORT = 'ADD_AIRPORT'
    DELETE_AIRPORT = 'DELETE_AIRPORT'
    ADD_AIRCRAFT = 'ADD_AIRCRAFT'
    DELETE_AIRCRAFT = 'DELETE_AIRCRAFT'
    ADD_ROUTE = 'ADD_ROUTE'
    DELETE_ROUTE = 'DELETE_ROUTE'
    ADD_FLIGHT = 'ADD_FLIGHT'
    DELETE_FLIGHT = 'DELETE_FLIGHT'


@dataclass
class UndoRecord:
    """
    A reversible action.

    `data` is a short serialized description of the entity (its key fields),
    `snapshot` holds copies of every entity the action touched, keyed by
    collection name ('airports', 'aircraft', 'routes', 'flights'), so the
    action can be reversed.
    """

    action: ActionType
    data: str
    snapshot: Dict[str, List[Any]] = field(default_factory=dict)

    def __str__(self):
        return f"{self.action.value}: {self.data}"


class UndoLog:
    """Last-in first-out log of UndoRecords capped at `limit` entries."""

    def __init__(self, limit: int = MAX_UNDO):
        self.limit = limit
        self._records: Deque[UndoRecord] = deque(maxlen=limit)

    def push(self, record: UndoRecord) -> None:
        # deque(maxlen) drops from the left, i.e. the oldest record
        self._records.append(record)

    def pop(self) -> Optional[UndoRecord]:
        return self._records.pop() if self._records else None

    def clear(self) -> None:
        self._records.clear()

    def records(self) -> List[UndoRecord]:
        """Records newest first."""
        return list(reversed(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return len(self._records) > 0
