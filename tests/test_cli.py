"""
Tests for the airgeo command line.
"""

import io
import unittest

from rich.console import Console

from airgeo.cli import build_parser, main


class TestCli(unittest.TestCase):
    """Run the subcommands against an in-memory console."""

    def run_cli(self, *argv):
        buf = io.StringIO()
        console = Console(file=buf, width=120)
        status = main(list(argv), console=console)
        return status, buf.getvalue()

    def test_show(self):
        status, out = self.run_cli("show", "40.0, -73.0, 1000.0")
        self.assertEqual(status, 0)
        self.assertIn("Latitude", out)
        self.assertIn("40.000000", out)
        self.assertIn("-73.000000", out)

    def test_show_unparsable(self):
        status, out = self.run_cli("show", "garbage")
        self.assertEqual(status, 1)
        self.assertIn("Cannot parse position", out)

    def test_antipode(self):
        status, out = self.run_cli("--precision", "2", "antipode", "40, -73, 1000")
        self.assertEqual(status, 0)
        self.assertEqual(out.strip(), "(-40.00, 107.00, 1000.00)")

    def test_distance(self):
        status, out = self.run_cli("--precision", "1", "distance", "0, 0, 0", "1, 0, 0")
        self.assertEqual(status, 0)
        self.assertIn("111120.0 m", out)
        self.assertIn("60.0 NM", out)
        self.assertIn("Initial course", out)

    def test_estimate(self):
        status, out = self.run_cli("--precision", "3", "estimate", "0, 0, 0", "--north", "1852")
        self.assertEqual(status, 0)
        self.assertEqual(out.strip(), "(0.017, 0.000, 0.000)")

    def test_negative_precision(self):
        status, out = self.run_cli("--precision", "-1", "show", "0, 0, 0")
        self.assertEqual(status, 2)
        self.assertIn("precision", out)

    def test_subcommand_required(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args([])


if __name__ == "__main__":
    unittest.main()
