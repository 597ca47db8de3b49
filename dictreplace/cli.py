"""
# dictreplace: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import io
import sys
from typing import Optional

from dictreplace._version import __version__
from dictreplace.authorities import ReplacementAuthority
from dictreplace.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE
from dictreplace.strategies import OverlapStrategy

DESCRIPTION = '''
    Replace occurrences of literal patterns in text, according to a rules file.
'''
RULES_FILE_NAME_HELP = '''
    name of rules file defining the substitutions
'''
INPUT_FILE_NAME_HELP = '''
    name of input file (concatenated in order; standard input if none given)
'''
STRATEGY_HELP = '''
    strategy for overlapping patterns, overriding the rules file
'''
OUTPUT_FILE_NAME_HELP = '''
    name of output file (standard output if not given)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every replacement applied)
'''


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(prog='dictreplace', description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-s', '--strategy',
        dest='strategy_name',
        choices=[strategy.value for strategy in OverlapStrategy],
        default=None,
        help=STRATEGY_HELP,
    )
    argument_parser.add_argument(
        '-o', '--output',
        dest='output_file_name',
        default=None,
        help=OUTPUT_FILE_NAME_HELP,
        metavar='output.txt',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'rules_file_name',
        help=RULES_FILE_NAME_HELP,
        metavar='rules.txt',
    )
    argument_parser.add_argument(
        'input_file_names',
        default=[],
        help=INPUT_FILE_NAME_HELP,
        metavar='input.txt',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def extract_strategy_override(strategy_name: Optional[str]) -> Optional[OverlapStrategy]:
    if strategy_name is None:
        return None

    return OverlapStrategy(strategy_name)


def apply_rules(replacement_rules: str, rules_file_name: str, string: str, verbose_mode_enabled: bool = False,
                strategy_override: Optional[OverlapStrategy] = None) -> str:
    """
    Apply the rules of a rules file to a string.
    """
    replacement_authority = ReplacementAuthority(verbose_mode_enabled, strategy_override)
    replacement_authority.legislate(replacement_rules, rules_file_name)

    return replacement_authority.execute(string)


def read_file_argument(file_name: str) -> str:
    try:
        with open(file_name, 'r', encoding='utf-8') as file:
            return file.read()
    except FileNotFoundError:
        print(f'error: argument `{file_name}`: file not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except UnicodeDecodeError:
        print(f'error: argument `{file_name}`: file is not valid UTF-8', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except OSError as os_error:
        print(f'error: argument `{file_name}`: cannot read file ({os_error.strerror})', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def read_standard_input() -> str:
    standard_input = sys.stdin
    if isinstance(standard_input, io.TextIOWrapper):
        standard_input.reconfigure(encoding='utf-8')

    try:
        return standard_input.read()
    except UnicodeDecodeError:
        print('error: standard input is not valid UTF-8', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def write_standard_output(result: str):
    standard_output = sys.stdout
    if isinstance(standard_output, io.TextIOWrapper):
        standard_output.reconfigure(encoding='utf-8')

    standard_output.write(result)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    rules_file_name = parsed_arguments.rules_file_name
    input_file_names = parsed_arguments.input_file_names
    output_file_name = parsed_arguments.output_file_name
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled
    strategy_override = extract_strategy_override(parsed_arguments.strategy_name)

    replacement_rules = read_file_argument(rules_file_name)

    if len(input_file_names) > 0:
        string = ''.join(read_file_argument(input_file_name) for input_file_name in input_file_names)
    else:
        string = read_standard_input()

    result = apply_rules(replacement_rules, rules_file_name, string, verbose_mode_enabled, strategy_override)

    if output_file_name is None:
        write_standard_output(result)
        return

    try:
        with open(output_file_name, 'w', encoding='utf-8') as output_file:
            output_file.write(result)
        print(f'success: wrote to `{output_file_name}`')
    except IOError:
        print(f'error: cannot write to `{output_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


if __name__ == '__main__':
    main()
