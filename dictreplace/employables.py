"""
# dictreplace: employables.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Replacement rules that may be employed in rules files.
"""

from typing import Optional

from dictreplace.bases import ReplacementWithSubstitutions
from dictreplace.clusters import ClusterTable, build_cluster_table
from dictreplace.core import apply_cluster_table
from dictreplace.exceptions import CommittedMutateException
from dictreplace.strategies import LimitedSelector, OverlapStrategy, Selector, build_strategy_selector


class DictionaryReplacement(ReplacementWithSubstitutions):
    """
    A replacement rule for a dictionary of substitutions applied in a single pass.

    Rules file syntax:
    ````
    DictionaryReplacement: #«id»
    - strategy: (def) LONGEST_MATCH | SHORTEST_MATCH
    - limit: (def) NONE | «count»
    * "«pattern»" | '«pattern»' | «pattern»
        -->
      "«substitute»" | '«substitute»' | «substitute»
    [...]
    ````
    """
    _strategy: OverlapStrategy
    _replacement_limit: Optional[int]
    _cluster_table: Optional[ClusterTable]
    _strategy_selector: Optional[Selector]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._strategy = OverlapStrategy.LONGEST_MATCH
        self._replacement_limit = None
        self._cluster_table = None
        self._strategy_selector = None

    @property
    def attribute_names(self) -> tuple[str, ...]:
        return (
            'strategy',
            'limit',
        )

    @property
    def strategy(self) -> OverlapStrategy:
        return self._strategy

    @strategy.setter
    def strategy(self, value: OverlapStrategy):
        if self._is_committed:
            raise CommittedMutateException('error: cannot set `strategy` after `commit()`')

        self._strategy = value

    @property
    def replacement_limit(self) -> Optional[int]:
        return self._replacement_limit

    @replacement_limit.setter
    def replacement_limit(self, value: Optional[int]):
        if self._is_committed:
            raise CommittedMutateException('error: cannot set `replacement_limit` after `commit()`')

        if value is not None and value < 0:
            raise ValueError(f'error: `replacement_limit` must be non-negative (got {value})')

        self._replacement_limit = value

    def _set_apply_method_variables(self):
        self._cluster_table = build_cluster_table(self._substitute_from_pattern)
        self._strategy_selector = build_strategy_selector(self._strategy)

    def _apply(self, string: str) -> str:
        selector = self._strategy_selector
        if self._replacement_limit is not None:
            selector = LimitedSelector(selector, self._replacement_limit)

        return apply_cluster_table(string, self._substitute_from_pattern, self._cluster_table, selector)
