"""
# dictreplace: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

RULES_SYNTAX_HELP = '''\
In dictreplace rules syntax, a line must be one of the following:
(1) whitespace-only;
(2) a comment (beginning with `#`);
(3) a class declaration (`DictionaryReplacement: #«id»`);
(4) an attribute declaration (`- «name»: «value»`);
(5) a substitution declaration (`* «pattern» --> «substitute»`).
- Note for (1): a whitespace-only line ends the active class declaration.
- Note for (4): the attributes are
  `strategy: (def) LONGEST_MATCH | SHORTEST_MATCH` and
  `limit: (def) NONE | «count»`.
- Note for (5): the number of hyphens in the delimiter `-->`
  may be arbitrarily increased should «pattern» contain
  a run of hyphens followed by a closing angle-bracket.
  «pattern» and «substitute» may be bare, "double-quoted" or 'single-quoted'.
'''
