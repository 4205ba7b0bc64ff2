import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_triage.utils import extract_structured_json, strip_code_fences


class TestLlmParsing(unittest.TestCase):

    def test_plain_json(self):
        self.assertEqual(extract_structured_json('{"a": 1}'), {"a": 1})

    def test_fenced_json(self):
        self.assertEqual(extract_structured_json('```json\n{"a": 1}\n```'), {"a": 1})

    def test_fence_inside_prose(self):
        text = 'Sure!\n```json\n{"a": 1}\n```\nLet me know.'
        self.assertEqual(extract_structured_json(text), {"a": 1})

    def test_trailing_prose(self):
        self.assertEqual(extract_structured_json('{"a": {"b": 2}} hope this helps'), {"a": {"b": 2}})

    def test_no_json(self):
        for text in ("", "nothing here", "[1, 2]"):
            with self.assertRaises(ValueError):
                extract_structured_json(text)

    def test_strip_code_fences(self):
        self.assertEqual(strip_code_fences("```\nx\n```"), "x")


if __name__ == '__main__':
    unittest.main()
