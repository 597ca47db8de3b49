"""
# dictreplace: clusters.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Clustering of patterns by common prefix, and lookup of candidates at a position.

A cluster is a list of patterns all beginning with a common pattern, the «anchor»,
which is the shortest pattern of the cluster. For example, the patterns
`as`, `assist` and `assert` form the single cluster
````
as: [as, assist, assert]
````
No anchor is a prefix of another anchor, so at any position of a string
the anchor of a given length occurring there (if any) is unique.
"""

from typing import NamedTuple

from dictreplace.strategies import Candidate


class ClusterTable(NamedTuple):
    members_from_anchor: dict[str, list[str]]
    anchor_lengths: list[int]


def build_cluster_table(substitute_from_pattern: dict[str, str]) -> ClusterTable:
    """
    Group the patterns of a dictionary of substitutions into prefix clusters.

    Empty patterns are ignored (they would never advance the cursor).
    The members of each cluster are sorted ascending by length,
    and `anchor_lengths` is the ascending, deduplicated list of anchor lengths.
    """
    members_from_anchor: dict[str, list[str]] = {}

    for pattern in substitute_from_pattern:
        if pattern == '':
            continue

        containing_anchor = next(
            (anchor for anchor in members_from_anchor if pattern.startswith(anchor)),
            None,
        )
        if containing_anchor is not None:
            members_from_anchor[containing_anchor].append(pattern)
            continue

        # The new pattern is a prefix of zero or more anchors, all of which it absorbs
        absorbed_anchors = [anchor for anchor in members_from_anchor if anchor.startswith(pattern)]
        members = [pattern]
        for anchor in absorbed_anchors:
            members.extend(members_from_anchor.pop(anchor))
        members_from_anchor[pattern] = members

    for members in members_from_anchor.values():
        members.sort(key=len)

    anchor_lengths = sorted({len(anchor) for anchor in members_from_anchor})

    return ClusterTable(members_from_anchor, anchor_lengths)


def compute_candidates(cluster_table: ClusterTable, string: str, index: int, anchor_length: int) -> list[Candidate]:
    """
    Compute the candidates occurring in `string` at `index` for an anchor of length `anchor_length`.

    Every member of the cluster is checked again against the string,
    since a member longer than the anchor need not occur even though the anchor does.
    """
    if index + anchor_length > len(string):
        return []

    members = cluster_table.members_from_anchor.get(string[index:index + anchor_length])
    if members is None:
        return []

    return [
        Candidate(member, len(member))
        for member in members
        if string.startswith(member, index)
    ]
