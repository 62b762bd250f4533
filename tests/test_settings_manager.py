import unittest
from unittest.mock import patch
import json
import os
import sys
import tempfile

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import config
from error_messages import SettingsError
from settings_manager import get_int_setting, load_settings, save_settings, save_settings_safe

class TestSettingsManager(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.settings_file = os.path.join(self.temp_dir.name, "settings.json")
        self.patcher = patch.object(config, 'SETTINGS_FILE', self.settings_file)
        self.patcher.start()

    def tearDown(self):
        self.patcher.stop()
        self.temp_dir.cleanup()

    def test_missing_file_gives_empty_settings(self):
        self.assertEqual(load_settings(), {})

    def test_save_and_load(self):
        data = {'user_timezone': 'Europe/London', 'week_start': 0, 'job_source': 'local'}
        save_settings(data)
        self.assertEqual(load_settings(), data)

    def test_corrupted_file(self):
        with open(self.settings_file, "w", encoding="utf-8") as f:
            f.write("{not valid json")
        with self.assertLogs('settings_manager', level='WARNING'):
            self.assertEqual(load_settings(), {})

    def test_non_object_file(self):
        with open(self.settings_file, "w", encoding="utf-8") as f:
            json.dump([1, 2, 3], f)
        with self.assertLogs('settings_manager', level='WARNING'):
            self.assertEqual(load_settings(), {})

    def test_save_settings_safe_keeps_window_geometry(self):
        save_settings({'window_geometry': [1, 2, 3, 4], 'theme': 'dark'})
        merged = save_settings_safe({'window_geometry': [9, 9, 9, 9], 'theme': 'light'})
        self.assertEqual(merged['window_geometry'], [1, 2, 3, 4])
        self.assertEqual(load_settings(), {'window_geometry': [1, 2, 3, 4], 'theme': 'light'})

    def test_save_settings_safe_without_preserved_keys(self):
        save_settings({'window_geometry': [1, 2, 3, 4]})
        save_settings_safe({'window_geometry': [5, 6, 7, 8]}, preserve_keys=[])
        self.assertEqual(load_settings()['window_geometry'], [5, 6, 7, 8])

    def test_unwritable_file_raises_settings_error(self):
        missing = os.path.join(self.temp_dir.name, "missing", "settings.json")
        with patch.object(config, 'SETTINGS_FILE', missing):
            with self.assertRaises(SettingsError) as ctx:
                save_settings({'theme': 'dark'})
        self.assertEqual(ctx.exception.error_code, 'CONFIG_001')


class TestIntSettings(unittest.TestCase):

    def test_valid_value(self):
        self.assertEqual(get_int_setting({'week_start': '0'}, 'week_start', 6, 0, 6), 0)

    def test_missing_value(self):
        self.assertEqual(get_int_setting({}, 'month_cell_job_cap', 3, 0), 3)

    def test_invalid_and_out_of_range(self):
        with self.assertLogs('settings_manager', level='WARNING'):
            self.assertEqual(get_int_setting({'week_start': 'sunday'}, 'week_start', 6, 0, 6), 6)
        with self.assertLogs('settings_manager', level='WARNING'):
            self.assertEqual(get_int_setting({'week_start': 9}, 'week_start', 6, 0, 6), 6)
        with self.assertLogs('settings_manager', level='WARNING'):
            self.assertEqual(get_int_setting({'year_cell_job_cap': -1}, 'year_cell_job_cap', 5, 0), 5)


if __name__ == '__main__':
    unittest.main()
