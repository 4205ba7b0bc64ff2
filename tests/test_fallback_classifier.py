import unittest
import random
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_triage.models import EventContent, Severity
from event_triage.services.fallback_classifier import (
    FallbackClassifier,
    SUGGESTED_ACTIONS,
    match_terms,
    score_severity,
)


class TestFallbackClassifier(unittest.TestCase):

    def setUp(self):
        self.classifier = FallbackClassifier(rng=random.Random(42))
        self.terms = ["alpha", "beta", "gamma", "delta", "epsilon"]

    def test_critical_keyword_beats_med_keyword(self):
        content = EventContent(type="alert", description="Data breach after suspicious login")
        analysis = self.classifier.classify(content, [])
        self.assertEqual(analysis.severity, Severity.CRITICAL)
        self.assertIn(analysis.suggested_action, SUGGESTED_ACTIONS[Severity.CRITICAL])

    def test_high_keyword(self):
        content = EventContent(type="alert", description="Trojan malware found on host")
        self.assertEqual(self.classifier.classify(content, []).severity, Severity.HIGH)

    def test_med_keyword(self):
        content = EventContent(type="email", description="Phishing email reported")
        self.assertEqual(self.classifier.classify(content, []).severity, Severity.MED)

    def test_keyword_in_metadata_counts(self):
        content = EventContent(
            type="login",
            description="User logged in",
            metadata={"tags": ["ransomware"]},
        )
        self.assertEqual(self.classifier.classify(content, []).severity, Severity.CRITICAL)

    def test_three_matched_terms_escalate_to_high(self):
        content = EventContent(type="login", description="User alpha logged in from beta via gamma")
        analysis = self.classifier.classify(content, self.terms)
        self.assertEqual(analysis.severity, Severity.HIGH)
        self.assertEqual(
            analysis.summary,
            'Mock analysis: Detected event of type "login" matching terms: alpha, beta, gamma. '
            "User alpha logged in from beta via gamma",
        )

    def test_one_matched_term_is_med(self):
        content = EventContent(type="login", description="User alpha logged in")
        self.assertEqual(self.classifier.classify(content, self.terms).severity, Severity.MED)

    def test_no_matches_is_low(self):
        content = EventContent(type="login", description="User logged in")
        analysis = self.classifier.classify(content, self.terms)
        self.assertEqual(analysis.severity, Severity.LOW)
        self.assertEqual(
            analysis.summary,
            'Mock analysis: Detected event of type "login" with no term matches. User logged in',
        )
        self.assertIn(analysis.suggested_action, SUGGESTED_ACTIONS[Severity.LOW])

    def test_repeated_calls_keep_severity_and_summary(self):
        classifier = FallbackClassifier()
        content = EventContent(type="login", description="User alpha logged in from beta")
        first = classifier.classify(content, self.terms)
        for _ in range(20):
            again = classifier.classify(content, self.terms)
            self.assertEqual(again.severity, first.severity)
            self.assertEqual(again.summary, first.summary)
            self.assertIn(again.suggested_action, SUGGESTED_ACTIONS[first.severity])

    def test_seeded_rng_pins_action(self):
        content = EventContent(type="login", description="User logged in")
        a = FallbackClassifier(rng=random.Random(7)).classify(content, [])
        b = FallbackClassifier(rng=random.Random(7)).classify(content, [])
        self.assertEqual(a.suggested_action, b.suggested_action)

    def test_match_terms_case_insensitive_and_ordered(self):
        self.assertEqual(match_terms('{"d":"Foo BAR"}', ["bar", "Foo", "baz"]), ["bar", "Foo"])

    def test_score_severity_ignores_terms_when_keyword_present(self):
        self.assertEqual(score_severity("a phishing note", ["a", "b", "c"]), Severity.MED)

    def test_each_tier_has_three_actions(self):
        for severity in Severity:
            self.assertEqual(len(SUGGESTED_ACTIONS[severity]), 3)


if __name__ == '__main__':
    unittest.main()
