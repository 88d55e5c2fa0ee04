"""
Queryable collection classes for fluent, composable queries.

The EntityStore hands out its entities wrapped in these collections so
callers can filter and sort them without touching the store's
internal dictionaries.
"""

from typing import TypeVar, Generic, Callable, List, Optional, Any, Union
from collections.abc import Iterable

import pandas as pd

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A lightweight, chainable collection for filtering and querying in-memory data.

    Examples:
        # Basic filtering
        collection.filter(lambda r: r.distance > 1000).all()

        # Attribute matching
        collection.where(country='USA').all()

        # Chaining
        collection.filter(lambda a: a.capacity > 150).where(model='A320').first()

        # Sorting
        collection.order_by(lambda r: r.distance, reverse=True).take(10).all()
    """

    def __init__(self, items: Union[List[T], Iterable[T]]):
        """
        Initialize a queryable collection.

        Args:
            items: List or iterable of items to wrap
        """
        self._items: List[T] = list(items) if not isinstance(items, list) else items

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Filter items using a predicate function.

        Args:
            predicate: Function that takes an item and returns True to include it

        Returns:
            New collection with filtered items
        """
        return self.__class__([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter items using keyword arguments (attribute matching).
        All conditions must match (AND logic).

        Examples:
            # Find an airport by code
            airports.where(code='JFK')

            # Inactive routes out of LHR
            routes.where(origin='LHR', operational=False)
        """
        def matches(item: T) -> bool:
            return all(
                getattr(item, key, None) == value
                for key, value in kwargs.items()
            )
        return self.filter(matches)

    def first(self) -> Optional[T]:
        """Return the first item or None if collection is empty."""
        return self._items[0] if self._items else None

    def all(self) -> List[T]:
        """Return all items as a list."""
        return self._items

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def order_by(self, key_func: Callable[[T], Any], reverse: bool = False) -> 'QueryableCollection[T]':
        """
        Sort items by a key function.

        Args:
            key_func: Function that returns a sort key for each item
            reverse: If True, sort in descending order

        Returns:
            New collection with sorted items
        """
        return self.__class__(sorted(self._items, key=key_func, reverse=reverse))

    def take(self, n: int) -> 'QueryableCollection[T]':
        """Take the first n items."""
        return self.__class__(self._items[:n])

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert the collection to a pandas DataFrame.

        Items must provide a to_dict() method. An empty collection gives an
        empty DataFrame.
        """
        return pd.DataFrame([item.to_dict() for item in self._items])

    # Make the collection behave like a list
    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        class_name = self.__class__.__name__
        count = len(self._items)
        if count == 0:
            return f"{class_name}([])"
        preview_items = [repr(str(item)) for item in self._items[:3]]
        if count > 3:
            preview_items.append('...')
        return f"{class_name}([{', '.join(preview_items)}], count={count})"
