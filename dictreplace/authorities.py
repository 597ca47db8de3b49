"""
# dictreplace: authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The higher power that governs the parsing and application of rules files.
"""

import re
import sys
from typing import NamedTuple, Optional

from dictreplace.constants import GENERIC_ERROR_EXIT_CODE, RULES_SYNTAX_HELP
from dictreplace.employables import DictionaryReplacement
from dictreplace.strategies import OverlapStrategy


class ReplacementAuthority:
    """
    Object governing the parsing and application of replacement rules.

    ## `legislate`

    Parses rules file syntax.
    See the constant `RULES_SYNTAX_HELP` in `constants.py`.

    Terminology:
    - Class declarations are _committed_ (at the next whitespace-only line, class declaration, or end of file).
    - Attribute and substitution declarations are _staged_.

    ## `execute`

    Applies the legislated replacements, in order of declaration.
    """
    _replacement_from_id: dict[str, 'DictionaryReplacement']
    _replacement_queue: list['DictionaryReplacement']
    _strategy_override: Optional[OverlapStrategy]
    _verbose_mode_enabled: bool

    def __init__(self, verbose_mode_enabled: bool, strategy_override: Optional[OverlapStrategy] = None):
        self._replacement_from_id = {}
        self._replacement_queue = []
        self._strategy_override = strategy_override
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def replacement_queue(self) -> list['DictionaryReplacement']:
        return list(self._replacement_queue)

    @staticmethod
    def print_error(message: str, rules_file_name: str, line_number: int):
        print(f'error: `{rules_file_name}`, line {line_number}: {message}', file=sys.stderr)

    @staticmethod
    def is_whitespace_only(line: str) -> bool:
        return bool(re.fullmatch(pattern=r'[\s]*', string=line, flags=re.ASCII))

    @staticmethod
    def is_comment(line: str) -> bool:
        return line.startswith('#')

    @staticmethod
    def compute_class_declaration_match(line: str) -> Optional[re.Match]:
        return re.fullmatch(
            pattern=r'''
                (?P<class_name> [A-Za-z]+ ) [:]
                [\s]+
                [#] (?P<id_> [a-z0-9-.]+ )
                [\s]*
            ''',
            string=line,
            flags=re.ASCII | re.VERBOSE,
        )

    def process_class_declaration_line(self, class_declaration_match: re.Match,
                                       rules_file_name: str, line_number: int) -> 'DictionaryReplacement':
        class_name = class_declaration_match.group('class_name')
        id_ = class_declaration_match.group('id_')

        if class_name == 'DictionaryReplacement':
            replacement = DictionaryReplacement(id_, self._verbose_mode_enabled)
        else:
            ReplacementAuthority.print_error(f'unrecognised replacement class `{class_name}`',
                                             rules_file_name, line_number)
            sys.exit(GENERIC_ERROR_EXIT_CODE)

        if id_ in self._replacement_from_id:
            ReplacementAuthority.print_error(f'replacement already declared with id `{id_}`',
                                             rules_file_name, line_number)
            sys.exit(GENERIC_ERROR_EXIT_CODE)

        return replacement

    @staticmethod
    def compute_attribute_declaration_match(line: str) -> Optional[re.Match]:
        return re.fullmatch(
            pattern=r'''
                [-][ ] (?P<attribute_name> [a-z_]+ ) [:]
                (?P<attribute_value> [\s\S]* )
            ''',
            string=line,
            flags=re.ASCII | re.VERBOSE,
        )

    @staticmethod
    def compute_strategy_match(attribute_value: str) -> Optional[re.Match]:
        return re.fullmatch(
            pattern=r'''
                [\s]*
                (?:
                    (?P<strategy> SHORTEST_MATCH | LONGEST_MATCH )
                        |
                    (?P<invalid_value> [\s\S]*? )
                )
                [\s]*
            ''',
            string=attribute_value,
            flags=re.ASCII | re.VERBOSE,
        )

    @staticmethod
    def stage_strategy(replacement: 'DictionaryReplacement', attribute_value: str,
                       rules_file_name: str, line_number: int):
        strategy_match = ReplacementAuthority.compute_strategy_match(attribute_value)

        invalid_value = strategy_match.group('invalid_value')
        if invalid_value is not None:
            ReplacementAuthority.print_error(f'invalid value `{invalid_value}` for attribute `strategy`',
                                             rules_file_name, line_number)
            sys.exit(GENERIC_ERROR_EXIT_CODE)

        replacement.strategy = OverlapStrategy[strategy_match.group('strategy')]

    @staticmethod
    def compute_limit_match(attribute_value: str) -> Optional[re.Match]:
        return re.fullmatch(
            pattern=r'''
                [\s]*
                (?:
                    (?P<none_keyword> NONE )
                        |
                    (?P<limit> [0-9]+ )
                        |
                    (?P<invalid_value> [\s\S]*? )
                )
                [\s]*
            ''',
            string=attribute_value,
            flags=re.ASCII | re.VERBOSE,
        )

    @staticmethod
    def stage_limit(replacement: 'DictionaryReplacement', attribute_value: str,
                    rules_file_name: str, line_number: int):
        limit_match = ReplacementAuthority.compute_limit_match(attribute_value)

        invalid_value = limit_match.group('invalid_value')
        if invalid_value is not None:
            ReplacementAuthority.print_error(f'invalid value `{invalid_value}` for attribute `limit`',
                                             rules_file_name, line_number)
            sys.exit(GENERIC_ERROR_EXIT_CODE)

        if limit_match.group('none_keyword') is not None:
            replacement.replacement_limit = None
        else:
            replacement.replacement_limit = int(limit_match.group('limit'))

    @staticmethod
    def process_attribute_declaration_line(attribute_declaration_match: re.Match,
                                           replacement: Optional['DictionaryReplacement'],
                                           rules_file_name: str, line_number: int):
        if replacement is None:
            ReplacementAuthority.print_error('attribute declaration without an active class declaration',
                                             rules_file_name, line_number)
            sys.exit(GENERIC_ERROR_EXIT_CODE)

        attribute_name = attribute_declaration_match.group('attribute_name')
        if attribute_name not in replacement.attribute_names:
            ReplacementAuthority.print_error(f'unrecognised attribute `{attribute_name}`',
                                             rules_file_name, line_number)
            sys.exit(GENERIC_ERROR_EXIT_CODE)

        attribute_value = attribute_declaration_match.group('attribute_value')

        if attribute_name == 'strategy':
            ReplacementAuthority.stage_strategy(replacement, attribute_value, rules_file_name, line_number)
        elif attribute_name == 'limit':
            ReplacementAuthority.stage_limit(replacement, attribute_value, rules_file_name, line_number)

    @staticmethod
    def compute_substitution_declaration_match(line: str) -> Optional[re.Match]:
        return re.fullmatch(
            pattern=r'[*][ ] (?P<substitution> [\s\S]* )',
            string=line,
            flags=re.ASCII | re.VERBOSE,
        )

    @staticmethod
    def compute_substitution_match(substitution: str) -> Optional[re.Match]:
        substitution_delimiters: list[str] = re.findall(pattern='[-]{2,}[>]', string=substitution)
        if len(substitution_delimiters) == 0:
            return None

        longest_substitution_delimiter = max(substitution_delimiters, key=len)
        return re.fullmatch(
            pattern=fr'''
                [\s]*
                    (?:
                        "(?P<double_quoted_pattern> [\s\S]*? )"
                            |
                        '(?P<single_quoted_pattern> [\s\S]*? )'
                            |
                        (?P<bare_pattern> [\s\S]*? )
                    )
                [\s]*
                    {re.escape(longest_substitution_delimiter)}
                [\s]*
                    (?:
                        "(?P<double_quoted_substitute> [\s\S]*? )"
                            |
                        '(?P<single_quoted_substitute> [\s\S]*? )'
                            |
                        (?P<bare_substitute> [\s\S]*? )
                    )
                [\s]*
            ''',
            string=substitution,
            flags=re.ASCII | re.VERBOSE,
        )

    @staticmethod
    def process_substitution_declaration_line(substitution_declaration_match: re.Match,
                                              replacement: Optional['DictionaryReplacement'],
                                              rules_file_name: str, line_number: int):
        if replacement is None:
            ReplacementAuthority.print_error('substitution declaration without an active class declaration',
                                             rules_file_name, line_number)
            sys.exit(GENERIC_ERROR_EXIT_CODE)

        substitution = substitution_declaration_match.group('substitution')
        substitution_match = ReplacementAuthority.compute_substitution_match(substitution)
        if substitution_match is None:
            ReplacementAuthority.print_error(f'missing delimiter `-->` in substitution `{substitution}`',
                                             rules_file_name, line_number)
            sys.exit(GENERIC_ERROR_EXIT_CODE)

        pattern_and_substitute = extract_pattern_and_substitute(substitution_match)
        replacement.add_substitution(pattern_and_substitute.pattern, pattern_and_substitute.substitute)

    def commit(self, replacement: 'DictionaryReplacement'):
        if self._strategy_override is not None:
            replacement.strategy = self._strategy_override

        replacement.commit()

        self._replacement_from_id[replacement.id_] = replacement
        self._replacement_queue.append(replacement)

    def legislate(self, replacement_rules: str, rules_file_name: str):
        replacement: Optional['DictionaryReplacement'] = None

        for line_number, line in enumerate(replacement_rules.splitlines(), start=1):
            if ReplacementAuthority.is_whitespace_only(line):
                if replacement is not None:
                    self.commit(replacement)
                    replacement = None
                continue

            if ReplacementAuthority.is_comment(line):
                continue

            class_declaration_match = ReplacementAuthority.compute_class_declaration_match(line)
            if class_declaration_match is not None:
                if replacement is not None:
                    self.commit(replacement)
                replacement = self.process_class_declaration_line(class_declaration_match,
                                                                  rules_file_name, line_number)
                continue

            attribute_declaration_match = ReplacementAuthority.compute_attribute_declaration_match(line)
            if attribute_declaration_match is not None:
                ReplacementAuthority.process_attribute_declaration_line(attribute_declaration_match, replacement,
                                                                        rules_file_name, line_number)
                continue

            substitution_declaration_match = ReplacementAuthority.compute_substitution_declaration_match(line)
            if substitution_declaration_match is not None:
                ReplacementAuthority.process_substitution_declaration_line(substitution_declaration_match,
                                                                           replacement, rules_file_name,
                                                                           line_number)
                continue

            ReplacementAuthority.print_error('invalid syntax\n\n' + RULES_SYNTAX_HELP, rules_file_name, line_number)
            sys.exit(GENERIC_ERROR_EXIT_CODE)

        # At end of file
        if replacement is not None:
            self.commit(replacement)

    def execute(self, string: str) -> str:
        if self._verbose_mode_enabled:
            replacement_queue_ids = [
                f'#{replacement.id_}'
                for replacement in self._replacement_queue
            ]
            print(f'Replacement queue: {replacement_queue_ids}\n\n\n\n', file=sys.stderr)

        for replacement in self._replacement_queue:
            string = replacement.apply(string)

        return string


class PatternAndSubstitute(NamedTuple):
    pattern: str
    substitute: str


def extract_pattern_and_substitute(substitution_match: re.Match) -> 'PatternAndSubstitute':
    double_quoted_pattern = substitution_match.group('double_quoted_pattern')
    if double_quoted_pattern is not None:
        pattern = double_quoted_pattern
    else:
        single_quoted_pattern = substitution_match.group('single_quoted_pattern')
        if single_quoted_pattern is not None:
            pattern = single_quoted_pattern
        else:
            pattern = substitution_match.group('bare_pattern')

    double_quoted_substitute = substitution_match.group('double_quoted_substitute')
    if double_quoted_substitute is not None:
        substitute = double_quoted_substitute
    else:
        single_quoted_substitute = substitution_match.group('single_quoted_substitute')
        if single_quoted_substitute is not None:
            substitute = single_quoted_substitute
        else:
            substitute = substitution_match.group('bare_substitute')

    return PatternAndSubstitute(pattern, substitute)
