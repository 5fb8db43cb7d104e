"""
scan_test provides tests for the token scanning and coercion helpers.
"""
from __future__ import annotations

import unittest

from browsercmd.compiler.scan import (
    arg,
    join_from,
    join_tail,
    parse_float,
    parse_int,
    parse_uint,
    scan_flags,
)


class PositionalTest(unittest.TestCase):
    """
    PositionalTest covers safe indexing and joining.
    """

    def test_arg_past_end_is_none(self) -> None:
        self.assertEqual(arg(["a", "b"], 1), "b")
        self.assertIsNone(arg(["a", "b"], 2))
        self.assertIsNone(arg([], 0))
        self.assertIsNone(arg(["a"], -1))

    def test_join_from(self) -> None:
        self.assertEqual(join_from(["#q", "hello", "world"], 1), "hello world")
        self.assertEqual(join_from(["#q"], 1), "")

    def test_join_tail_distinguishes_absent(self) -> None:
        """join_tail is None when nothing is left, never an empty string."""
        self.assertIsNone(join_tail(["a", "b", "c"], 3))
        self.assertEqual(join_tail(["a", "b", "c", "d", "e"], 3), "d e")


class CoercionTest(unittest.TestCase):
    """
    CoercionTest covers best-effort numeric parsing.
    """

    def test_parse_int_accepts_signed_digits(self) -> None:
        self.assertEqual(parse_int("42"), 42)
        self.assertEqual(parse_int("-1"), -1)
        self.assertEqual(parse_int("+5"), 5)

    def test_parse_int_rejects_non_integers(self) -> None:
        for token in ["abc", "1.5", " 1", "1_000", "", "0x10", "--1", None]:
            with self.subTest(token=token):
                self.assertIsNone(parse_int(token))

    def test_parse_int_is_32_bit(self) -> None:
        self.assertEqual(parse_int("2147483647"), 2147483647)
        self.assertEqual(parse_int("-2147483648"), -2147483648)
        self.assertIsNone(parse_int("2147483648"))

    def test_parse_uint_rejects_negative(self) -> None:
        self.assertEqual(parse_uint("500"), 500)
        self.assertEqual(parse_uint("+7"), 7)
        self.assertIsNone(parse_uint("-1"))
        self.assertIsNone(parse_uint("18446744073709551616"))
        self.assertEqual(parse_uint("18446744073709551615"), 2**64 - 1)

    def test_parse_float(self) -> None:
        self.assertEqual(parse_float("37.7749"), 37.7749)
        self.assertEqual(parse_float("-122"), -122.0)
        self.assertEqual(parse_float("1e3"), 1000.0)
        for token in ["north", "", " 1.0", "1_0.5", None]:
            with self.subTest(token=token):
                self.assertIsNone(parse_float(token))

    def test_parse_float_rejects_non_finite(self) -> None:
        """NaN and infinities have no JSON form."""
        for token in ["nan", "NaN", "inf", "-inf", "-Infinity", "1e400"]:
            with self.subTest(token=token):
                self.assertIsNone(parse_float(token))

    def test_parse_float_rejects_non_ascii_digits(self) -> None:
        self.assertIsNone(parse_float("١٢"))
        self.assertIsNone(parse_float("１.５"))


class ScanFlagsTest(unittest.TestCase):
    """
    ScanFlagsTest covers scan-and-remove flag extraction.
    """

    def test_switch_anywhere(self) -> None:
        scan = scan_flags(["--exact", "role", "button"], switches=("--exact",))
        self.assertTrue(scan.has("--exact"))
        self.assertEqual(scan.positionals, ("role", "button"))

    def test_valued_flag_consumes_next_token(self) -> None:
        scan = scan_flags(
            ["role", "button", "--name", "Submit", "click"], valued=("--name",)
        )
        self.assertEqual(scan.value("--name"), "Submit")
        self.assertEqual(scan.positionals, ("role", "button", "click"))

    def test_valued_flag_without_value_is_unset(self) -> None:
        scan = scan_flags(["url", "--body"], valued=("--body",))
        self.assertIsNone(scan.value("--body"))
        self.assertEqual(scan.positionals, ("url",))

    def test_first_occurrence_wins(self) -> None:
        scan = scan_flags(["--filter", "a", "--filter", "b"], valued=("--filter",))
        self.assertEqual(scan.value("--filter"), "a")

    def test_absent_flags(self) -> None:
        scan = scan_flags(["a", "b"], switches=("--clear",), valued=("--filter",))
        self.assertFalse(scan.has("--clear"))
        self.assertIsNone(scan.value("--filter"))
        self.assertEqual(scan.positional(1), "b")
        self.assertIsNone(scan.positional(2))

    def test_unknown_flags_stay_positional(self) -> None:
        scan = scan_flags(["--other", "x"], switches=("--clear",))
        self.assertEqual(scan.positionals, ("--other", "x"))


if __name__ == "__main__":
    unittest.main()
