import os
import tempfile
import unittest
from datetime import datetime, timedelta, timezone
from functools import partial
from unittest.mock import MagicMock, patch

from tzparse import get_timechanges, get_zoneinfo, tzfile
from tzparse.errors import InvalidTimezone, NoData, ZoneNotFound
from tzparse.models import RawZoneData, Timechange, TimeTypeInfo
from tzparse.timezone_utils import display_name

from tzif_fixtures import build_zoneinfo_dir, ts, utc

SYSTEM_PARIS = '/usr/share/zoneinfo/Europe/Paris'


class DisplayNameTests(unittest.TestCase):
    def test_area_and_location(self):
        self.assertEqual(display_name('/usr/share/zoneinfo/Europe/Paris', sep='/'), 'Europe/Paris')

    def test_location_directly_under_zoneinfo(self):
        self.assertEqual(display_name('/usr/share/zoneinfo/UTC', sep='/'), 'UTC')

    def test_bare_name_is_rejected(self):
        with self.assertRaises(InvalidTimezone):
            display_name('Europe/Paris', sep='/')

    def test_windows_separator(self):
        self.assertEqual(
            display_name('C:\\tzdata\\zoneinfo\\America\\New_York', sep='\\'),
            'America/New_York',
        )


class GetTimechangesTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.zoneinfo_dir = build_zoneinfo_dir(self.tmp.name)
        self.parser = partial(tzfile.parse, zoneinfo_dir=self.zoneinfo_dir)

    def tearDown(self):
        self.tmp.cleanup()

    def test_paris_2019(self):
        changes = get_timechanges('Europe/Paris', 2019, parser=self.parser)

        self.assertEqual(changes, [
            Timechange(time=utc(2019, 3, 31, 1), gmt_offset=7200, is_dst=True, abbreviation='CEST'),
            Timechange(time=utc(2019, 10, 27, 1), gmt_offset=3600, is_dst=False, abbreviation='CET'),
        ])

    def test_full_path_uses_default_parser(self):
        path = os.path.join(self.zoneinfo_dir, 'Europe', 'Paris')

        changes = get_timechanges(path, 2019)

        self.assertEqual(len(changes), 2)

    def test_all_changes(self):
        changes = get_timechanges('Europe/Paris', parser=self.parser)

        self.assertEqual(len(changes), 6)

    def test_current_year(self):
        changes = get_timechanges('Europe/Paris', 0, parser=self.parser, now=utc(2018, 5, 5))

        self.assertEqual([c.time.year for c in changes], [2018, 2018])

    def test_zone_without_dst_returns_single_change(self):
        changes = get_timechanges('Asia/Tokyo', 2019, parser=self.parser)

        self.assertEqual(changes, [
            Timechange(time=utc(1951, 9, 8, 15), gmt_offset=32400, is_dst=False, abbreviation='JST'),
        ])

    def test_unknown_zone(self):
        with self.assertRaises(ZoneNotFound):
            get_timechanges('Nowhere/Atlantis', 2019, parser=self.parser)

    def test_zone_without_transitions_raises_no_data(self):
        with self.assertRaises(NoData):
            get_timechanges('Etc/Empty', 2019, parser=self.parser)

    def test_repeated_calls_return_equal_results(self):
        first = get_timechanges('Europe/Paris', 2020, parser=self.parser)
        second = get_timechanges('Europe/Paris', 2020, parser=self.parser)

        self.assertEqual(first, second)

    def test_parser_is_called_with_identifier(self):
        raw = RawZoneData(
            transition_times=[0],
            transition_types=[0],
            type_infos=[TimeTypeInfo(utc_offset=0, is_dst=False, abbreviation_index=0)],
            abbreviations=['UTC'],
        )
        parser = MagicMock(return_value=raw)

        get_timechanges('Etc/UTC', 2020, parser=parser)

        parser.assert_called_once_with('Etc/UTC')


class GetZoneinfoTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.zoneinfo_dir = build_zoneinfo_dir(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def _path(self, name):
        return os.path.join(self.zoneinfo_dir, *name.split('/'))

    def test_paris_in_summer(self):
        state = get_zoneinfo(self._path('Europe/Paris'), now=utc(2019, 8, 1, 10))

        self.assertEqual(state.timezone_name, 'Europe/Paris')
        self.assertTrue(state.dst_active)
        self.assertEqual(state.abbreviation, 'CEST')
        self.assertEqual(state.utc_offset, timezone(timedelta(hours=2)))
        self.assertEqual(state.dst_from, utc(2019, 3, 31, 1))
        self.assertEqual(state.dst_until, utc(2019, 10, 27, 1))
        self.assertEqual(state.week_number, 31)

    def test_paris_in_winter(self):
        state = get_zoneinfo(self._path('Europe/Paris'), now=utc(2020, 12, 1))

        self.assertFalse(state.dst_active)
        self.assertEqual(state.abbreviation, 'CET')
        self.assertEqual(state.raw_offset, 3600)

    def test_paris_after_recorded_history_has_no_window(self):
        state = get_zoneinfo(self._path('Europe/Paris'), now=utc(2023, 7, 1))

        self.assertFalse(state.dst_active)
        self.assertEqual(state.dst_offset, 0)
        self.assertIsNone(state.dst_from)
        self.assertIsNone(state.dst_until)

    def test_flat_zone_name(self):
        state = get_zoneinfo(self._path('UTC'), now=utc(2021, 6, 1))

        self.assertEqual(state.timezone_name, 'UTC')
        self.assertEqual(state.abbreviation, 'UTC')

    def test_naive_now_is_treated_as_utc(self):
        state = get_zoneinfo(self._path('Asia/Tokyo'), now=datetime(2021, 6, 1, 12))

        self.assertEqual(state.utc_instant, utc(2021, 6, 1, 12))
        self.assertEqual(state.local_instant.hour, 21)

    def test_bare_name_raises_invalid_timezone(self):
        with self.assertRaises(InvalidTimezone):
            get_zoneinfo('Europe/Paris', now=utc(2021, 6, 1))

    def test_clock_is_sampled_once(self):
        with patch('tzparse.query.utc_now', return_value=utc(2019, 8, 1)) as mock_now, \
                patch('tzparse.transitions.utc_now') as transitions_now:
            state = get_zoneinfo(self._path('Europe/Paris'))

        mock_now.assert_called_once_with()
        transitions_now.assert_not_called()
        self.assertEqual(state.utc_instant, utc(2019, 8, 1))

    def test_zone_without_transitions_raises_no_data(self):
        with self.assertRaises(NoData):
            get_zoneinfo(self._path('Etc/Empty'), now=utc(2021, 6, 1))


@unittest.skipUnless(os.path.exists(SYSTEM_PARIS), 'system zone database not installed')
class SystemZoneDatabaseTests(unittest.TestCase):
    def setUp(self):
        raw = tzfile.parse(SYSTEM_PARIS)
        if max(raw.transition_times) < ts(2020, 1, 1):
            self.skipTest("slim zone file, recent changes live in the footer rule")

    def test_paris_2019_from_system_file(self):
        changes = get_timechanges(SYSTEM_PARIS, 2019)

        self.assertEqual(changes, [
            Timechange(time=utc(2019, 3, 31, 1), gmt_offset=7200, is_dst=True, abbreviation='CEST'),
            Timechange(time=utc(2019, 10, 27, 1), gmt_offset=3600, is_dst=False, abbreviation='CET'),
        ])

    def test_paris_zoneinfo_from_system_file(self):
        state = get_zoneinfo(SYSTEM_PARIS, now=utc(2019, 8, 1))

        self.assertEqual(state.timezone_name, 'Europe/Paris')
        self.assertEqual(state.abbreviation, 'CEST')


if __name__ == '__main__':
    unittest.main()
