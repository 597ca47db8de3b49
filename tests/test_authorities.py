"""
# dictreplace: test_authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `authorities.py`.
"""

import contextlib
import io
import unittest

from dictreplace.authorities import ReplacementAuthority, extract_pattern_and_substitute
from dictreplace.constants import GENERIC_ERROR_EXIT_CODE
from dictreplace.strategies import OverlapStrategy

RULES = r'''# Overlapping patterns

DictionaryReplacement: #assorted
* "as " --> "with "
* assisting --> working
* assertive --> peers
* 'asked' --> 'blue shirts'
* assesses --> poses

DictionaryReplacement: #first-two-only
- strategy: SHORTEST_MATCH
- limit: 2
* danger --> worry
* no --> some
'''


class TestAuthorities(unittest.TestCase):
    def test_legislate_and_execute(self):
        replacement_authority = ReplacementAuthority(verbose_mode_enabled=False)
        replacement_authority.legislate(RULES, rules_file_name='RULES')

        replacement_queue = replacement_authority.replacement_queue
        self.assertEqual([replacement.id_ for replacement in replacement_queue], ['assorted', 'first-two-only'])
        self.assertEqual(replacement_queue[0].strategy, OverlapStrategy.LONGEST_MATCH)
        self.assertEqual(replacement_queue[0].replacement_limit, None)
        self.assertEqual(replacement_queue[1].strategy, OverlapStrategy.SHORTEST_MATCH)
        self.assertEqual(replacement_queue[1].replacement_limit, 2)

        self.assertEqual(
            replacement_authority.execute(
                'As stated above, assisting as assertive as asked astonishingly assesses no real danger'
            ),
            'As stated above, working with peers with blue shirts astonishingly poses some real worry',
        )
        self.assertEqual(replacement_authority.execute('no no no'), 'some some no')

    def test_legislate_strategy_override(self):
        replacement_authority = ReplacementAuthority(
            verbose_mode_enabled=False,
            strategy_override=OverlapStrategy.SHORTEST_MATCH,
        )
        replacement_authority.legislate(
            'DictionaryReplacement: #overlap\n'
            '- strategy: LONGEST_MATCH\n'
            '* A --> B\n'
            '* AB --> X\n',
            rules_file_name='RULES',
        )
        self.assertEqual(replacement_authority.execute('AA AB AC'), 'BB BB BC')

    def test_legislate_errors(self):
        invalid_rules_list = [
            'UnknownReplacement: #unknown',
            'DictionaryReplacement: #duplicate\n\nDictionaryReplacement: #duplicate',
            '- strategy: LONGEST_MATCH',
            'DictionaryReplacement: #bad-strategy\n- strategy: MIDDLE_MATCH',
            'DictionaryReplacement: #bad-limit\n- limit: -1',
            'DictionaryReplacement: #bad-attribute\n- apply_mode: SEQUENTIAL',
            '* a --> b',
            'DictionaryReplacement: #missing-delimiter\n* a -> b',
            'DictionaryReplacement: #invalid\nnonsense',
        ]
        for invalid_rules in invalid_rules_list:
            replacement_authority = ReplacementAuthority(verbose_mode_enabled=False)
            stderr = io.StringIO()
            with contextlib.redirect_stderr(stderr), self.assertRaises(SystemExit) as context_manager:
                replacement_authority.legislate(invalid_rules, rules_file_name='RULES')
            self.assertEqual(context_manager.exception.code, GENERIC_ERROR_EXIT_CODE)
            self.assertTrue(stderr.getvalue().startswith('error: `RULES`, line '))

    def test_compute_substitution_match(self):
        self.assertIsNone(ReplacementAuthority.compute_substitution_match('a -> b'))

        substitution_match = ReplacementAuthority.compute_substitution_match('  a-->b  ')
        self.assertEqual(extract_pattern_and_substitute(substitution_match), ('a', 'b'))

        substitution_match = ReplacementAuthority.compute_substitution_match('"as " --> \'with \'')
        self.assertEqual(extract_pattern_and_substitute(substitution_match), ('as ', 'with '))

        substitution_match = ReplacementAuthority.compute_substitution_match('a --> b ---> c')
        self.assertEqual(extract_pattern_and_substitute(substitution_match), ('a --> b', 'c'))

        substitution_match = ReplacementAuthority.compute_substitution_match('$number --> (800) 555-0152')
        self.assertEqual(extract_pattern_and_substitute(substitution_match), ('$number', '(800) 555-0152'))

    def test_execute_verbose_mode(self):
        replacement_authority = ReplacementAuthority(verbose_mode_enabled=True)
        replacement_authority.legislate('DictionaryReplacement: #greetings\n* Hello --> Goodbye', 'RULES')

        stderr = io.StringIO()
        stdout = io.StringIO()
        with contextlib.redirect_stderr(stderr), contextlib.redirect_stdout(stdout):
            self.assertEqual(replacement_authority.execute('Hello'), 'Goodbye')
        self.assertEqual(stdout.getvalue(), '')
        self.assertIn("Replacement queue: ['#greetings']", stderr.getvalue())


if __name__ == '__main__':
    unittest.main()
