from typing import Generic, Optional, TypeVar

import attrs


T = TypeVar('T')


@attrs.frozen
class CasOutcome(Generic[T]):
    """
    Result of a single compare-and-swap statement.

    When the condition failed the store answers with the value it actually holds,
    so ``current`` can seed the next attempt without another read. ``row_exists`` is
    False when the conditional update targeted a missing row.
    """

    applied: bool
    current: Optional[T] = None
    row_exists: bool = True

    @classmethod
    def success(cls, value: T) -> 'CasOutcome[T]':
        return cls(applied=True, current=value)

    @classmethod
    def conflict(cls, current: T) -> 'CasOutcome[T]':
        return cls(applied=False, current=current)

    @classmethod
    def missing(cls) -> 'CasOutcome[T]':
        return cls(applied=False, current=None, row_exists=False)
