"""
# dictreplace: strategies.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Selection of a candidate when several patterns match at the same position.

A selector is any callable taking a list of candidates (sorted ascending by length,
never empty) and returning one of:
- `None`, declining every candidate;
- a pattern `str`, whose length is then used as the advance;
- a `(pattern, advance)` pair, such as a `Selection` or a `Candidate` from the list,
  where an `advance` of `None` means the length of the pattern.

The selection is only honoured if the pattern is in the dictionary of substitutions.
Otherwise it is treated exactly as if the selector had returned `None`.
"""

import enum
from typing import Callable, NamedTuple, Optional, Union

from dictreplace.exceptions import UnrecognisedStrategyException


class Candidate(NamedTuple):
    pattern: str
    length: int


class Selection(NamedTuple):
    pattern: Optional[str]
    advance: Optional[int] = None


SelectionLike = Union[None, str, Selection, Candidate, tuple[Optional[str], Optional[int]]]
Selector = Callable[[list[Candidate]], SelectionLike]


class OverlapStrategy(enum.Enum):
    SHORTEST_MATCH = 'shortest-match'
    LONGEST_MATCH = 'longest-match'


def select_shortest_match(candidates: list[Candidate]) -> Optional[Candidate]:
    if len(candidates) == 0:
        return None

    return candidates[0]


def select_longest_match(candidates: list[Candidate]) -> Optional[Candidate]:
    if len(candidates) == 0:
        return None

    return candidates[-1]


def build_strategy_selector(strategy: Union[OverlapStrategy, str]) -> Selector:
    """
    Build the selector for a named strategy (an `OverlapStrategy` or its string value).
    """
    try:
        strategy = OverlapStrategy(strategy)
    except ValueError as value_error:
        raise UnrecognisedStrategyException(str(strategy)) from value_error

    if strategy is OverlapStrategy.SHORTEST_MATCH:
        return select_shortest_match
    else:
        return select_longest_match


def normalise_selection(selection: SelectionLike) -> Optional[Selection]:
    """
    Convert the return value of a selector into a `Selection`.

    Anything not of a recognised shape is treated as declining, the same as `None`.
    """
    if selection is None:
        return None

    if isinstance(selection, str):
        return Selection(selection)

    if not isinstance(selection, (tuple, list)) or len(selection) != 2:
        return None

    pattern, advance = selection
    if not isinstance(pattern, str):
        return None

    if advance is not None and (not isinstance(advance, int) or isinstance(advance, bool)):
        return None

    return Selection(pattern, advance)


class LimitedSelector:
    """
    Stateful selector allowing at most `limit` selections.

    The first `limit` selections that `selector` does not decline are passed through;
    every later call is declined.
    Used for policies such as "replace only the first N occurrences".
    Create a fresh instance for each call to `replace_occurrences`.
    """
    _selector: Selector
    _limit: int
    _count: int

    def __init__(self, selector: Selector, limit: int):
        if limit < 0:
            raise ValueError(f'error: limit must be non-negative (got {limit})')

        self._selector = selector
        self._limit = limit
        self._count = 0

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def count(self) -> int:
        return self._count

    def __call__(self, candidates: list[Candidate]) -> Optional[Selection]:
        if self._count >= self._limit:
            return None

        selection = normalise_selection(self._selector(candidates))
        if selection is not None:
            self._count += 1

        return selection
