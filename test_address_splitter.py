import os
import sys
import unittest

# Add current directory to path so we can import modules
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from address_splitter import split_address


class TestSplitAddress(unittest.TestCase):
    def test_resolved_card_address(self):
        parts = split_address("45B/2 Park Street, Sydney NSW 2000 Australia")
        self.assertEqual(parts.street, "45B/2 Park Street")
        self.assertEqual(parts.city, "Sydney")
        self.assertEqual(parts.state, "NSW")
        self.assertEqual(parts.postcode, "2000")
        self.assertEqual(parts.country, "Australia")

    def test_canonical_upper_case_string(self):
        parts = split_address("1 PARK ST, SYDNEY NSW 2000 AUSTRALIA")
        self.assertEqual(
            (parts.street, parts.city, parts.state, parts.postcode),
            ("1 PARK ST", "SYDNEY", "NSW", "2000"),
        )

    def test_comma_before_country(self):
        parts = split_address("Level 2, 20 Bar Road, Sydney NSW 2000, Australia")
        self.assertEqual(parts.street, "Level 2, 20 Bar Road")
        self.assertEqual(parts.city, "Sydney")
        self.assertEqual(parts.country, "Australia")

    def test_state_is_upper_cased_and_country_defaults(self):
        parts = split_address("1 Collins St, Melbourne vic 3000")
        self.assertEqual(parts.state, "VIC")
        self.assertEqual(parts.country, "Australia")

    def test_without_comma(self):
        parts = split_address("10 Smith Street Sydney NSW 2000")
        self.assertEqual(parts.street, "10 Smith Street")
        self.assertEqual(parts.city, "Sydney")
        self.assertEqual(parts.state, "NSW")
        self.assertEqual(parts.postcode, "2000")
        self.assertEqual(parts.country, "Australia")

    def test_fallback_keeps_whole_string(self):
        parts = split_address("12 Rue de la Paix, 75002 Paris")
        self.assertEqual(parts.street, "12 Rue de la Paix, 75002 Paris")
        self.assertEqual((parts.city, parts.state, parts.postcode, parts.country), ("", "", "", ""))

    def test_fallback_detects_australian_postcode(self):
        parts = split_address("PO Box 123 Sydney 2001")
        self.assertEqual(parts.street, "PO Box 123 Sydney 2001")
        self.assertEqual(parts.country, "Australia")

    def test_empty(self):
        self.assertTrue(split_address("").is_blank())
        self.assertTrue(split_address(None).is_blank())


if __name__ == "__main__":
    unittest.main()
