import unittest
from unittest.mock import patch, MagicMock
import os
import sys
from zoneinfo import ZoneInfo

import requests

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from timezone_helper import get_timezone_from_ip, get_user_timezone, resolve_timezone

class TestTimezoneHelper(unittest.TestCase):

    def test_resolve_known_zone(self):
        self.assertEqual(resolve_timezone("Europe/London"), ZoneInfo("Europe/London"))

    def test_unknown_zone_falls_back_to_utc(self):
        with self.assertLogs('timezone_helper', level='WARNING'):
            self.assertEqual(resolve_timezone("Mars/Olympus_Mons"), ZoneInfo("UTC"))

    def test_user_timezone_default(self):
        self.assertEqual(get_user_timezone({}), ZoneInfo("UTC"))

    @patch('timezone_helper.requests.get')
    def test_timezone_from_ip(self, mock_get):
        response = MagicMock()
        response.json.return_value = {"timezone": "Asia/Seoul"}
        mock_get.return_value = response
        self.assertEqual(get_timezone_from_ip(), "Asia/Seoul")

    @patch('timezone_helper.requests.get')
    def test_timezone_lookup_failure(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout("slow")
        with self.assertLogs('timezone_helper', level='WARNING'):
            self.assertEqual(get_timezone_from_ip(), "UTC")


if __name__ == '__main__':
    unittest.main()
