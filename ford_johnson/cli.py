"""
Command-line front end for :mod:`ford_johnson`.

Parses non-negative, distinct integers from the command line, then prints them before and
after sorting with :func:`ford_johnson.merge_insertion_sort`, along with the time the sort took.

Copyright © 2025 Hauke Dämpfling (haukex@zero-g.net)

Permission to use, copy, modify, and/or distribute this software for any
purpose with or without fee is hereby granted, provided that the above
copyright notice and this permission notice appear in all copies.

THE SOFTWARE IS PROVIDED “AS IS” AND THE AUTHOR DISCLAIMS ALL WARRANTIES
WITH REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF
MERCHANTABILITY AND FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR
ANY SPECIAL, DIRECT, INDIRECT, OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES
WHATSOEVER RESULTING FROM LOSS OF USE, DATA OR PROFITS, WHETHER IN AN
ACTION OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS ACTION, ARISING OUT OF
OR IN CONNECTION WITH THE USE OR PERFORMANCE OF THIS SOFTWARE.
"""
import re
import sys
import time
import logging
import argparse
from collections.abc import Sequence
from typing import Optional
from . import merge_insertion_sort

_log = logging.getLogger(__name__)

#: The largest number accepted by default (the largest signed 32-bit integer).
MAX_VALUE = 2**31 - 1

_NUMBER_RE = re.compile(r'\s*[+-]?[0-9]+', re.ASCII)

def parse_input(args :Sequence[str], max_value :int = MAX_VALUE) -> list[int]:
    """Parses and validates the numbers to be sorted.

    :param args: The command-line arguments, one number each.
    :param max_value: The largest number to accept.
    :return: The numbers, in the order given.
    :raises ValueError: If an argument isn't an integer in the range ``0..max_value``, or is a duplicate.
    """
    rv :list[int] = []
    seen :set[int] = set()
    for arg in args:
        if not _NUMBER_RE.fullmatch(arg):
            raise ValueError(f"Invalid input -> {arg}")
        try:
            num = int(arg)
        except ValueError as ex:  # e.g. more digits than the interpreter's int conversion limit
            raise ValueError(f"Invalid input -> {arg}") from ex
        if num<0 or num>max_value:
            raise ValueError(f"Invalid input -> {arg}")
        if num in seen:
            raise ValueError(f"Duplicate number found: {arg}")
        seen.add(num)
        rv.append(num)
    return rv

def format_sequence(label :str, values :Sequence[int]) -> str:
    return f"{label}: " + ' '.join( str(v) for v in values )

def format_timing(count :int, elapsed_us :float) -> str:
    return f"Time to process a range of {count} elements with merge-insertion sort : {elapsed_us:.5f} us"

def main(argv :Optional[Sequence[str]] = None) -> int:
    """Command-line entry point.

    :param argv: The arguments, without the program name; defaults to ``sys.argv[1:]``.
    :return: The exit status.
    """
    parser = argparse.ArgumentParser(prog='ford-johnson',
        description='Sort distinct non-negative integers with the Ford-Johnson merge-insertion sort')
    parser.add_argument('numbers', nargs='+', metavar='NUMBER', help='the numbers to sort')
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug output')
    parser.add_argument('--max-value', type=int, default=MAX_VALUE,
        help=f'the largest number to accept (default: {MAX_VALUE})')
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s - %(message)s')

    try:
        values = parse_input(args.numbers, args.max_value)
    except ValueError as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1
    _log.debug("parsed %d numbers", len(values))

    print(format_sequence("Before", values))
    start = time.perf_counter_ns()
    result = merge_insertion_sort(values)
    end = time.perf_counter_ns()
    print(format_sequence("After ", result))
    print(format_timing(len(result), (end-start)/1000))
    return 0
