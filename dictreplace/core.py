"""
# dictreplace: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core replacement logic.

The string is scanned once, left to right, by a cursor.
At each position of the cursor, the anchor lengths are tried in ascending order.
For an anchor length at which a cluster occurs, the selector is called with the candidates found;
if its selection is a pattern of the dictionary, the substitute is emitted
and the cursor advances past the consumed characters.
If no anchor length yields a usable selection, one character is copied verbatim.
Emitted substitutes are never scanned again.

Positions and lengths are counted in code points (`str` indices), with patterns compared code point by code point.
There is no grapheme clustering and no Unicode normalisation: a precomposed `U+00E9` does not match
a decomposed `U+0065 U+0301`, and a pattern `e` matches the first code point of `U+0065 U+0301`,
replacing it and leaving the combining accent in place.
Normalise the string and the patterns beforehand (e.g. with `unicodedata.normalize`) if that matters.
"""

from typing import Optional, Union

from dictreplace.clusters import ClusterTable, build_cluster_table, compute_candidates
from dictreplace.strategies import OverlapStrategy, Selector, build_strategy_selector, normalise_selection


def apply_cluster_table(string: str, substitute_from_pattern: dict[str, str], cluster_table: ClusterTable,
                        selector: Selector) -> str:
    """
    Apply substitutions to a string using an already built cluster table.
    """
    string_length = len(string)
    output_pieces: list[str] = []
    index = 0

    while index < string_length:
        for anchor_length in cluster_table.anchor_lengths:
            candidates = compute_candidates(cluster_table, string, index, anchor_length)
            if len(candidates) == 0:
                continue

            selection = normalise_selection(selector(candidates))
            if selection is None or selection.pattern not in substitute_from_pattern:
                continue

            output_pieces.append(substitute_from_pattern[selection.pattern])

            advance = selection.advance
            if advance is None:
                advance = len(selection.pattern)
            index = min(index + max(advance, 1), string_length)
            break
        else:
            output_pieces.append(string[index])
            index += 1

    return ''.join(output_pieces)


def replace_occurrences(string: str, substitute_from_pattern: dict[str, str],
                        strategy: Optional[Union[OverlapStrategy, str]] = None,
                        selector: Optional[Selector] = None) -> str:
    """
    Replace occurrences of the patterns of a dictionary by their substitutes.

    When several patterns occur at the same position, the one chosen is determined by
    - `strategy`, either `OverlapStrategy.LONGEST_MATCH` (the default) or `OverlapStrategy.SHORTEST_MATCH`
      (or their string values `'longest-match'` and `'shortest-match'`); or
    - `selector`, a custom selection function (see `strategies.py`).
    At most one of `strategy` and `selector` may be given.

    ````
    replace_occurrences('AA AB AC', {'A': 'B', 'AB': 'X'})
    # 'BB X BC'
    replace_occurrences('AA AB AC', {'A': 'B', 'AB': 'X'}, strategy='shortest-match')
    # 'BB BB BC'
    replace_occurrences('AA AB AC', {'A': 'B', 'AB': 'X'}, selector=lambda candidates: 'XYZ')
    # 'AA AB AC'
    ````
    """
    if strategy is not None and selector is not None:
        raise ValueError('error: cannot specify both `strategy` and `selector`')

    if selector is None:
        if strategy is None:
            strategy = OverlapStrategy.LONGEST_MATCH
        selector = build_strategy_selector(strategy)

    cluster_table = build_cluster_table(substitute_from_pattern)

    return apply_cluster_table(string, substitute_from_pattern, cluster_table, selector)
