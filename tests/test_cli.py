"""
Tests for ford_johnson.cli

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
import io
import unittest
from contextlib import redirect_stdout, redirect_stderr
from ford_johnson import cli

class TestCli(unittest.TestCase):

    def _run(self, *argv :str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            rv = cli.main(list(argv))
        return rv, out.getvalue(), err.getvalue()

    def test_parse_input(self):
        self.assertEqual( cli.parse_input([]), [] )
        self.assertEqual( cli.parse_input(['3','0','2','5','4','1']), [3,0,2,5,4,1] )
        self.assertEqual( cli.parse_input(['+7',' 8','-0','0009']), [7,8,0,9] )
        self.assertEqual( cli.parse_input(['2147483647']), [cli.MAX_VALUE] )
        self.assertEqual( cli.parse_input(['100'], max_value=100), [100] )

        for bad in ('', ' ', 'x', '1x', '1.5', '1e3', '1_000', '0x10', '3 ', '-1', '2147483648', '²'):
            with self.assertRaisesRegex(ValueError, 'Invalid input'):
                cli.parse_input(['1', bad])
        with self.assertRaisesRegex(ValueError, r'^Invalid input -> 101$'):
            cli.parse_input(['101'], max_value=100)
        # longer than the interpreter will convert to int
        with self.assertRaisesRegex(ValueError, r'^Invalid input -> 9{5000}$'):
            cli.parse_input(['9'*5000])

        with self.assertRaisesRegex(ValueError, r'^Duplicate number found: 3$'):
            cli.parse_input(['3','1','3'])
        with self.assertRaisesRegex(ValueError, r'^Duplicate number found: \+1$'):
            cli.parse_input(['1','+1'])

    def test_format(self):
        self.assertEqual( cli.format_sequence("Before", [3,0,2]), "Before: 3 0 2" )
        self.assertEqual( cli.format_sequence("After ", [0,2,3]), "After : 0 2 3" )
        self.assertEqual( cli.format_sequence("Before", []), "Before: " )
        self.assertEqual( cli.format_timing(6, 12.5),
            "Time to process a range of 6 elements with merge-insertion sort : 12.50000 us" )

    def test_main(self):
        rv, out, err = self._run('3','0','2','5','4','1')
        self.assertEqual( rv, 0 )
        self.assertEqual( err, '' )
        lines = out.splitlines()
        self.assertEqual( len(lines), 3 )
        self.assertEqual( lines[0], "Before: 3 0 2 5 4 1" )
        self.assertEqual( lines[1], "After : 0 1 2 3 4 5" )
        self.assertRegex( lines[2], r'^Time to process a range of 6 elements with merge-insertion sort : \d+\.\d{5} us$' )

        rv, out, err = self._run('9','1','8','2','7')
        self.assertEqual( rv, 0 )
        self.assertEqual( out.splitlines()[1], "After : 1 2 7 8 9" )

        rv, out, err = self._run('5')
        self.assertEqual( rv, 0 )
        self.assertEqual( out.splitlines()[:2], ["Before: 5", "After : 5"] )

    def test_main_errors(self):
        rv, out, err = self._run('3','-5')
        self.assertEqual( rv, 1 )
        self.assertEqual( out, '' )
        self.assertEqual( err, "Error: Invalid input -> -5\n" )

        rv, out, err = self._run('3','4','3')
        self.assertEqual( rv, 1 )
        self.assertEqual( out, '' )
        self.assertEqual( err, "Error: Duplicate number found: 3\n" )

        rv, out, err = self._run('--max-value','10','3','11')
        self.assertEqual( rv, 1 )
        self.assertEqual( err, "Error: Invalid input -> 11\n" )

        rv, out, err = self._run('1','0'+'9'*5000)
        self.assertEqual( rv, 1 )
        self.assertEqual( out, '' )
        self.assertTrue( err.startswith("Error: Invalid input -> 09999") )

        with self.assertRaises(SystemExit) as cm:
            self._run()
        self.assertEqual( cm.exception.code, 2 )
