import os
import sys
import unittest
from unittest.mock import patch

# Add current directory to path so we can import modules
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from fastapi.testclient import TestClient

import config
from api import app

CARD = (
    "Jane Smith\nChief Marketing Officer\nFlow Power Pty Ltd\n"
    "45B/2 Park Street, Sydney NSW 2000 Australia\n"
    "e: jane.smith@flowpower.com.au\nw: www.flowpower.com.au"
)


class TestAPI(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def test_ping(self):
        response = self.client.get("/ping")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    def test_parse(self):
        response = self.client.post("/parse", json={"text": CARD})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["rawText"], CARD)
        self.assertEqual(body["contact"]["fullName"], "Jane Smith")
        self.assertEqual(body["contact"]["companyName"], "Flow Power Pty Ltd")
        self.assertEqual(body["contact"]["website"], "https://www.flowpower.com.au")
        self.assertNotIn("phone", body["contact"])
        self.assertNotIn("linkedinUrl", body["contact"])

    def test_parse_blank_text(self):
        response = self.client.post("/parse", json={"text": "  \n "})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Text is required")

    def test_parse_missing_text(self):
        response = self.client.post("/parse", json={})
        self.assertEqual(response.status_code, 422)

    def test_parse_text_too_long(self):
        with patch.object(config, "MAX_TEXT_CHARS", 10):
            response = self.client.post("/parse", json={"text": CARD})
        self.assertEqual(response.status_code, 413)

    def test_split_address(self):
        response = self.client.post(
            "/split-address", json={"address": "45B/2 Park Street, Sydney NSW 2000 Australia"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "street": "45B/2 Park Street",
                "city": "Sydney",
                "state": "NSW",
                "postcode": "2000",
                "country": "Australia",
            },
        )

    def test_vcard_download(self):
        response = self.client.post(
            "/vcard", json={"fullName": "Jane Smith", "email": "jane.smith@flowpower.com.au"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.headers["content-type"].startswith("text/vcard"))
        self.assertIn('filename="Jane_Smith.vcf"', response.headers["content-disposition"])
        self.assertIn("FN:Jane Smith", response.text.split("\r\n"))


if __name__ == "__main__":
    unittest.main()
