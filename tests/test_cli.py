import unittest
from unittest.mock import patch
import io
import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_triage.__main__ import main
from event_triage.exceptions import ValidationError
from event_triage.models import Analysis, Event, EventContent, Severity


class TestCli(unittest.TestCase):

    @patch('event_triage.__main__.simulate_event')
    def test_prints_processed_event(self, mock_simulate):
        event = Event(id="e1", watch_list_id="w1", content=EventContent("alert", "Trojan"), correlation_id="c")
        mock_simulate.return_value = event.apply(Analysis("s", Severity.HIGH, "Escalate to security team"))

        with patch('sys.stdout', new_callable=io.StringIO) as out:
            code = main(["--terms", "malware, phishing", "--type", "alert", "--description", "Trojan", "--ip", "1.2.3.4"])

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out.getvalue())["severity"], "HIGH")
        name, terms, content = mock_simulate.call_args[0]
        self.assertEqual(terms, ["malware", "phishing"])
        self.assertEqual(content, {"type": "alert", "description": "Trojan", "ip": "1.2.3.4"})

    @patch('event_triage.__main__.simulate_event')
    def test_invalid_metadata(self, mock_simulate):
        code = main(["--terms", "a", "--type", "t", "--description", "d", "--metadata", "{oops"])
        self.assertEqual(code, 2)
        mock_simulate.assert_not_called()

    @patch('event_triage.__main__.simulate_event')
    def test_validation_error(self, mock_simulate):
        mock_simulate.side_effect = ValidationError("bad")
        self.assertEqual(main(["--terms", "a", "--type", "t", "--description", "d"]), 2)


if __name__ == '__main__':
    unittest.main()
