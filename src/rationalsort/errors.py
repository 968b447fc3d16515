# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Exceptions raised by package 'rationalsort'."""


__all__ = [
    'HandleError',
    'NotYetImplementedError',
    'RationalSortError',
    'RegistrationError',
    'StoreCapacityError',
]


class RationalSortError(Exception):
    """Base class of all exceptions raised by this package."""


class HandleError(RationalSortError, LookupError):
    """A handle was resolved that the store never handed out.

    This is a violation of the contract between host and store, not a
    recoverable condition.
    """


class StoreCapacityError(RationalSortError, MemoryError):
    """The store has reached its configured capacity."""


class RegistrationError(RationalSortError, TypeError):
    """A primitive could not be registered or dispatched."""


class NotYetImplementedError(RationalSortError, NotImplementedError):
    """The operation is not implemented for the given input."""
