"""
Tests for answer formatting
"""
import unittest

from formprint.formatting import format_value, parse_date


class CheckboxTestCase(unittest.TestCase):

    def test_true_is_yes(self):
        self.assertEqual(format_value("checkbox", True), "Yes")

    def test_false_is_no(self):
        self.assertEqual(format_value("checkbox", False), "No")

    def test_missing_is_no(self):
        self.assertEqual(format_value("checkbox", None), "No")


class MultiChoiceTestCase(unittest.TestCase):

    def test_selected_keys_in_order(self):
        value = {"A": True, "B": False, "C": True}
        self.assertEqual(format_value("multi_choice", value), "A, C")

    def test_empty_mapping(self):
        self.assertEqual(format_value("multi_choice", {}), "None selected")

    def test_missing_value(self):
        self.assertEqual(format_value("multi_choice", None), "None selected")

    def test_nothing_truthy(self):
        self.assertEqual(format_value("multi_choice", {"A": False}), "None selected")

    def test_list_of_labels(self):
        self.assertEqual(format_value("multi_choice", ["X", "Y"]), "X, Y")


class ChoiceTestCase(unittest.TestCase):

    def test_radio_value(self):
        self.assertEqual(format_value("radio", "Pass"), "Pass")

    def test_dropdown_empty(self):
        self.assertEqual(format_value("dropdown", ""), "Not selected")
        self.assertEqual(format_value("radio", None), "Not selected")


class DateTestCase(unittest.TestCase):

    def test_iso_date(self):
        self.assertEqual(format_value("date", "2024-03-14"), "14/03/2024")

    def test_iso_datetime_with_zulu(self):
        self.assertEqual(format_value("date", "2024-03-14T08:30:00Z"), "14/03/2024")

    def test_day_first_input(self):
        self.assertEqual(format_value("date", "14.03.2024"), "14/03/2024")

    def test_unparseable_passes_through(self):
        self.assertEqual(format_value("date", "next tuesday"), "next tuesday")

    def test_empty(self):
        self.assertEqual(format_value("date", ""), "Not specified")
        self.assertEqual(format_value("date", None), "Not specified")

    def test_parse_date_rejects_garbage(self):
        self.assertIsNone(parse_date("31/02/2024"))


class TextTestCase(unittest.TestCase):

    def test_number_is_stringified(self):
        self.assertEqual(format_value("number", 42), "42")

    def test_missing_text_is_empty(self):
        self.assertEqual(format_value("short_text", None), "")
        self.assertEqual(format_value("long_text", None), "")

    def test_unknown_type_uses_text(self):
        self.assertEqual(format_value("signature_pad", 7), "7")
