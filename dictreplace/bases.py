"""
# dictreplace: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for replacement rules.
"""

import abc
import sys

from dictreplace.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from dictreplace.exceptions import CommittedMutateException, UncommittedApplyException


class Replacement(abc.ABC):
    """
    Base class for a replacement rule.

    Attributes are set (staged) first, then the rule is committed by `commit()`,
    after which it may be applied but no longer mutated.
    """
    _is_committed: bool
    _id: str
    _verbose_mode_enabled: bool

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        self._is_committed = False
        self._id = id_
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def id_(self) -> str:
        return self._id

    @property
    def is_committed(self) -> bool:
        return self._is_committed

    def commit(self):
        self._set_apply_method_variables()
        self._is_committed = True

    def apply(self, string: str) -> str:
        if not self._is_committed:
            raise UncommittedApplyException('error: cannot call `apply(string)` before `commit()`')

        string_before = string
        string_after = self._apply(string)

        if self._verbose_mode_enabled:
            if string_before == string_after:
                no_change_indicator = ' (no change)'
            else:
                no_change_indicator = ''

            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{self._id}', file=sys.stderr)
            print(string_before, file=sys.stderr)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator, file=sys.stderr)
            print(string_after, file=sys.stderr)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{self._id}', file=sys.stderr)
            print('\n\n\n\n', file=sys.stderr)

        return string_after

    @abc.abstractmethod
    def _set_apply_method_variables(self):
        """
        Set variables used in `self._apply(string)`.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _apply(self, string: str) -> str:
        """
        Apply the defined replacement to a string.
        """
        raise NotImplementedError


class ReplacementWithSubstitutions(Replacement, abc.ABC):
    """
    Base class for a replacement rule with substitutions.
    """
    _substitute_from_pattern: dict[str, str]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._substitute_from_pattern = {}

    @property
    def substitute_from_pattern(self) -> dict[str, str]:
        return dict(self._substitute_from_pattern)

    def add_substitution(self, pattern: str, substitute: str):
        if self._is_committed:
            raise CommittedMutateException('error: cannot call `add_substitution(...)` after `commit()`')

        self._substitute_from_pattern[pattern] = substitute
