# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Canonical store mapping rational values to integer handles."""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterator, List, Optional

from .errors import HandleError, StoreCapacityError
from .rational import Rational

__all__ = ['CanonicalStore', 'Handle', 'default_store']

logger = logging.getLogger(__name__)

Handle = int


class CanonicalStore:
    """Append-only bijection between Rational values and handles.

    Args:
        capacity (int): maximum number of values the store accepts
            (default: None, meaning unlimited)

    Handles are assigned in order of first appearance, starting at 0.
    They are never reused and stay valid for the lifetime of the store.

    Raises:
        ValueError: `capacity` is not a positive integer
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and (not isinstance(capacity, int) or
                                     capacity < 1):
            raise ValueError(f"Illegal capacity: {capacity!r}")
        self._capacity = capacity
        self._lock = threading.Lock()
        self._handles: Dict[Rational, Handle] = {}
        self._values: List[Rational] = []

    @property
    def capacity(self) -> Optional[int]:
        """Maximum number of values, None if unlimited."""
        return self._capacity

    def intern(self, value: Rational) -> Handle:
        """Return the handle of `value`, assigning a new one if needed.

        Raises:
            TypeError: `value` is not a Rational
            StoreCapacityError: a new handle would exceed the capacity
        """
        if not isinstance(value, Rational):
            raise TypeError(f"Can't intern {value!r}.")
        handle = self._handles.get(value)
        if handle is not None:
            return handle
        with self._lock:
            handle = self._handles.get(value)
            if handle is not None:
                return handle
            handle = len(self._values)
            if self._capacity is not None and handle >= self._capacity:
                raise StoreCapacityError(
                    f"Store is full ({self._capacity} values).")
            # publish the value before the handle, so that every handle
            # visible to a reader can be resolved
            self._values.append(value)
            self._handles[value] = handle
        logger.debug("Interned %s as handle %d.", value, handle)
        return handle

    def resolve(self, handle: Handle) -> Rational:
        """Return the value `handle` was assigned to.

        Raises:
            HandleError: `handle` was not produced by this store
        """
        if isinstance(handle, bool) or not isinstance(handle, int) or \
                handle < 0:
            raise HandleError(f"Illegal handle: {handle!r}")
        try:
            return self._values[handle]
        except IndexError:
            raise HandleError(f"Unknown handle: {handle}") from None

    def handle_of(self, value: Rational) -> Optional[Handle]:
        """Return the handle of `value` or None if it was never interned."""
        return self._handles.get(value)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, Rational) and value in self._handles

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Rational]:
        return iter(self._values[:])

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} with {len(self)} values>"


_default_store = CanonicalStore()


def default_store() -> CanonicalStore:
    """Return the store shared by the whole process."""
    return _default_store
