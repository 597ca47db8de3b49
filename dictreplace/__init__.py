"""
# dictreplace

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Single-pass replacement of literal patterns according to a dictionary of substitutions.
"""

from dictreplace._version import __version__
from dictreplace.core import replace_occurrences
from dictreplace.strategies import Candidate, LimitedSelector, OverlapStrategy, Selection

__all__ = [
    '__version__',
    'replace_occurrences',
    'Candidate',
    'LimitedSelector',
    'OverlapStrategy',
    'Selection',
]
