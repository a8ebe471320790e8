# tests/test_text_utils.py
import unittest
from decimal import Decimal

from painel.utils.text_utils import capitalize_first, format_brl, month_label, parse_valor


class TestTextUtils(unittest.TestCase):
    def test_capitalize_first(self):
        self.assertEqual(capitalize_first(""), "")
        self.assertEqual(capitalize_first("jan/26"), "Jan/26")
        self.assertEqual(capitalize_first("mAIO"), "MAIO")

    def test_month_label(self):
        self.assertEqual(month_label(2026, 1), "Jan/26")
        self.assertEqual(month_label(2026, 3), "Mar/26")
        self.assertEqual(month_label(2030, 12), "Dez/30")
        self.assertEqual(month_label(2005, 9), "Set/05")

    def test_parse_valor_numbers(self):
        self.assertEqual(parse_valor(150), 150.0)
        self.assertEqual(parse_valor(99.9), 99.9)
        self.assertEqual(parse_valor(Decimal("10.50")), 10.5)

    def test_parse_valor_strings(self):
        self.assertEqual(parse_valor("150"), 150.0)
        self.assertEqual(parse_valor("150.5"), 150.5)
        self.assertAlmostEqual(parse_valor("1.234,56"), 1234.56)
        self.assertAlmostEqual(parse_valor("R$ 1.234,56"), 1234.56)

    def test_parse_valor_invalid(self):
        self.assertIsNone(parse_valor(None))
        self.assertIsNone(parse_valor(""))
        self.assertIsNone(parse_valor("abc"))
        self.assertIsNone(parse_valor(True))
        self.assertIsNone(parse_valor(float("nan")))

    def test_format_brl(self):
        self.assertEqual(format_brl(1234.5), "R$ 1.234,50")
        self.assertEqual(format_brl(0), "R$ 0,00")
        self.assertEqual(format_brl(None), "R$ 0,00")
        self.assertEqual(format_brl(-10), "-R$ 10,00")
        self.assertEqual(format_brl(1000000), "R$ 1.000.000,00")
