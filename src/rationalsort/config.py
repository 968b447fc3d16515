# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Context-local configuration of the primitive operations."""

from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique


__all__ = ['UnsupportedPolicy', 'get_unsupported_policy',
           'set_unsupported_policy']


@unique
class UnsupportedPolicy(Enum):
    """Enumeration of ways to handle inputs an operation does not support."""

    def __new__(cls, value: int, doc: str) -> UnsupportedPolicy:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member

    NO_RESULT = (1, 'Return a result tagged as unsupported.')
    RAISE = (2, 'Raise NotYetImplementedError.')


_unsupported_policy: ContextVar[UnsupportedPolicy] = \
    ContextVar("unsupported_policy", default=UnsupportedPolicy.NO_RESULT)


def get_unsupported_policy() -> UnsupportedPolicy:
    """Return policy applied to unsupported inputs."""
    return _unsupported_policy.get()


def set_unsupported_policy(policy: UnsupportedPolicy) -> Token:
    """Set policy applied to unsupported inputs.

    Args:
        policy (UnsupportedPolicy): policy to be set

    Raises:
        TypeError: given 'policy' is not a valid policy
    """
    if not isinstance(policy, UnsupportedPolicy):
        raise TypeError(f"Illegal unsupported policy: {policy!r}")
    return _unsupported_policy.set(policy)
