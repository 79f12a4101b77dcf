#!/usr/bin/env python3
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from data_parser import extract_saved_items, is_unarchived, parse_saved_item
from models import SavedItem


class TestIsUnarchived(unittest.TestCase):
    def test_string_zero(self):
        self.assertTrue(is_unarchived({"status": "0"}))

    def test_int_zero(self):
        self.assertTrue(is_unarchived({"status": 0}))

    def test_float_zero(self):
        self.assertTrue(is_unarchived({"status": 0.0}))
        self.assertFalse(is_unarchived({"status": 1.0}))

    def test_padded_string_zero(self):
        self.assertTrue(is_unarchived({"status": " 0 "}))

    def test_archived_and_deleted(self):
        for status in ("1", "2", 1, 2):
            with self.subTest(status=status):
                self.assertFalse(is_unarchived({"status": status}))

    def test_missing_or_garbage_status(self):
        self.assertFalse(is_unarchived({}))
        self.assertFalse(is_unarchived({"status": None}))
        self.assertFalse(is_unarchived({"status": "unread"}))
        self.assertFalse(is_unarchived({"status": False}))


class TestParseSavedItem(unittest.TestCase):
    def test_extracts_resolved_fields(self):
        raw = {
            "item_id": "123",
            "resolved_title": "Article One",
            "resolved_url": "http://example.com/a1",
            "given_title": "ignored",
            "given_url": "http://example.com/ignored",
            "status": "0",
        }
        self.assertEqual(
            parse_saved_item(raw), SavedItem("Article One", "http://example.com/a1")
        )

    def test_falls_back_to_given_fields(self):
        raw = {
            "resolved_title": "",
            "given_title": "Article Two",
            "given_url": "http://example.com/a2",
        }
        self.assertEqual(
            parse_saved_item(raw), SavedItem("Article Two", "http://example.com/a2")
        )

    def test_handles_missing_fields(self):
        self.assertEqual(parse_saved_item({"item_id": "456"}), SavedItem("", ""))


class TestExtractSavedItems(unittest.TestCase):
    def test_keeps_only_unarchived(self):
        items = [
            {"resolved_title": "A", "resolved_url": "http://a", "status": "0"},
            {"resolved_title": "B", "resolved_url": "http://b", "status": "1"},
            {"resolved_title": "C", "resolved_url": "http://c", "status": 0},
            {"resolved_title": "D", "resolved_url": "http://d", "status": "2"},
        ]
        saves = extract_saved_items(items)
        self.assertCountEqual(
            saves, [SavedItem("A", "http://a"), SavedItem("C", "http://c")]
        )

    def test_no_active_items(self):
        items = [{"resolved_title": "B", "resolved_url": "http://b", "status": "1"}]
        self.assertEqual(extract_saved_items(items), [])

    def test_skips_non_dict_entries(self):
        self.assertEqual(extract_saved_items(["junk", None]), [])


if __name__ == "__main__":
    unittest.main()
