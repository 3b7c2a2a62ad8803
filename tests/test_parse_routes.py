import unittest
from fastapi.testclient import TestClient
from backend.main import app

class TestParseRoutes(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def test_health(self):
        r = self.client.get("/health")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"status": "ok"})

    def test_parse_markup(self):
        payload = '<?xml version="1.0"?><PrintLetterBarcodeData uid="123456789012" name="Jane Doe"/>'
        r = self.client.post("/api/parse", json={"payload": payload})
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(body["format"], "structured_markup")
        self.assertEqual(body["record"]["uid"], "XXXX XXXX 9012")
        self.assertEqual(body["record"]["street"], "")
        self.assertEqual(body["display"]["raw"], payload)

    def test_parse_delimited(self):
        r = self.client.post("/api/parse", json={"payload": "REF123"})
        body = r.json()
        self.assertEqual(body["format"], "delimited")
        self.assertEqual(body["record"]["name"], "N/A")
        self.assertIn("Name: Unknown", body["display"]["fields"])

    def test_malformed_payload_still_200(self):
        r = self.client.post("/api/parse", json={"payload": "<?xml nope"})
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(set(body["record"]), {"rawData", "parseError"})
        self.assertTrue(body["display"]["warning"])

    def test_format_matches_parser_branch(self):
        cases = {
            "<?xml nope": "structured_markup",
            '<?xml version="1.0"?><Other/>': "structured_markup",
            " <?xml version=\"1.0\"?><PrintLetterBarcodeData name=\"A\"/>": "delimited",
            "": "delimited",
        }
        for payload, fmt in cases.items():
            body = self.client.post("/api/parse", json={"payload": payload}).json()
            self.assertEqual(body["format"], fmt, payload)
            # delimited records always carry referenceId, markup ones never do
            self.assertEqual("referenceId" in body["record"], fmt == "delimited", payload)

    def test_missing_payload_is_422(self):
        r = self.client.post("/api/parse", json={})
        self.assertEqual(r.status_code, 422)

if __name__ == "__main__":
    unittest.main()
