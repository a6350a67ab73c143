from __future__ import annotations

import json
import unittest

from opsflow.core.induction_notes import InductionDetails, decode_details, encode_details


class InductionNotesTests(unittest.TestCase):
    def test_encode_skips_empty_fields(self) -> None:
        notes = encode_details(InductionDetails(portal_url="https://portal.example", username="jdoe"))
        self.assertEqual(json.loads(notes), {"portal_url": "https://portal.example", "username": "jdoe"})
        self.assertIsNone(encode_details(InductionDetails()))
        self.assertIsNone(encode_details(None))

    def test_decode_structured_notes(self) -> None:
        details = decode_details('{"portal_url": "https://p", "password": "s3cret"}')
        self.assertEqual(details.portal_url, "https://p")
        self.assertEqual(details.password, "s3cret")
        self.assertIsNone(details.additional_notes)

    def test_plain_text_becomes_additional_notes(self) -> None:
        self.assertEqual(decode_details("Bring safety boots").additional_notes, "Bring safety boots")
        self.assertEqual(decode_details("{not json").additional_notes, "{not json")

    def test_empty_notes(self) -> None:
        self.assertEqual(decode_details(None), InductionDetails())
        self.assertEqual(decode_details(""), InductionDetails())


if __name__ == "__main__":
    unittest.main()
