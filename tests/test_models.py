import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_triage.exceptions import ValidationError
from event_triage.models import Analysis, Event, EventContent, Severity


class TestSeverity(unittest.TestCase):

    def test_ordering(self):
        self.assertLess(Severity.LOW, Severity.MED)
        self.assertLess(Severity.MED, Severity.HIGH)
        self.assertLess(Severity.HIGH, Severity.CRITICAL)
        self.assertEqual(max(Severity), Severity.CRITICAL)

    def test_ordering_is_by_tier_not_label(self):
        # alphabetically "HIGH" > "CRITICAL" and "MED" > "HIGH"
        self.assertGreater(Severity.CRITICAL, Severity.HIGH)
        self.assertGreater(Severity.HIGH, Severity.MED)
        self.assertGreaterEqual(Severity.MED, Severity.LOW)
        self.assertLessEqual(Severity.HIGH, Severity.CRITICAL)
        self.assertFalse(Severity.HIGH >= Severity.CRITICAL)
        self.assertEqual(sorted([Severity.HIGH, Severity.CRITICAL, Severity.LOW, Severity.MED]), list(Severity))


class TestAnalysis(unittest.TestCase):

    def test_wire_names(self):
        analysis = Analysis("s", Severity.MED, "Notify team lead")
        self.assertEqual(
            analysis.to_dict(),
            {"summary": "s", "severity": "MED", "suggestedAction": "Notify team lead"},
        )
        self.assertEqual(Analysis.from_dict(analysis.to_dict()), analysis)

    def test_rejects_malformed(self):
        for payload in (
            [],
            {"summary": "s", "severity": "MED"},
            {"summary": "", "severity": "MED", "suggestedAction": "a"},
            {"summary": "s", "severity": "URGENT", "suggestedAction": "a"},
            {"summary": "s", "severity": 3, "suggestedAction": "a"},
        ):
            with self.assertRaises(ValueError):
                Analysis.from_dict(payload)


class TestEventContent(unittest.TestCase):

    def test_canonical_serialization(self):
        content = EventContent.from_dict(
            {"metadata": {"user": "bob", "count": 2}, "ip": "1.2.3.4", "description": "d", "type": "t"}
        )
        self.assertEqual(
            content.serialize(),
            '{"type":"t","description":"d","ip":"1.2.3.4","metadata":{"user":"bob","count":2}}',
        )

    def test_nested_metadata_allowed(self):
        content = EventContent.from_dict(
            {"type": "t", "description": "d", "metadata": {"a": [1, 2.5, True, None, {"b": "c"}]}}
        )
        self.assertEqual(content.metadata["a"][4], {"b": "c"})

    def test_rejects_bad_payloads(self):
        for payload in (
            "not a dict",
            {"description": "d"},
            {"type": "", "description": "d"},
            {"type": "t", "description": "d", "domain": 5},
            {"type": "t", "description": "d", "metadata": []},
            {"type": "t", "description": "d", "metadata": {"when": object()}},
        ):
            with self.assertRaises(ValidationError):
                EventContent.from_dict(payload)


class TestEvent(unittest.TestCase):

    def test_apply_sets_all_fields(self):
        event = Event(id="e", watch_list_id="w", content=EventContent("t", "d"), correlation_id="c")
        self.assertIsNone(event.analysis)

        analysis = Analysis("s", Severity.LOW, "Monitor for patterns")
        processed = event.apply(analysis)

        self.assertTrue(processed.processed)
        self.assertEqual(processed.analysis, analysis)
        self.assertFalse(event.processed)
        self.assertEqual(processed.to_dict()["severity"], "LOW")


if __name__ == '__main__':
    unittest.main()
