"""
データモデル単体テスト
"""

import unittest
from datetime import datetime

import pytz

from radiko_client.errors import MalformedTimestampError
from radiko_client.models import Program, ProgramListing, RadikoTimestamp, Station
from radiko_client.utils.datetime_utils import (
    JST, format_programs_date, format_radiko_datetime
)


class TestRadikoTimestamp(unittest.TestCase):
    """日時文字列値型テスト"""

    def test_01_解析と比較(self):
        a = RadikoTimestamp.parse("20240101050000")
        b = RadikoTimestamp.parse("20240101060000")

        self.assertLess(a, b)
        self.assertEqual(a.value, 20240101050000)
        self.assertEqual(str(a), "20240101050000")
        self.assertEqual(a, RadikoTimestamp.parse("20240101050000"))

    def test_02_数値として比較(self):
        # Then: 桁数が違っても整数値で比較される
        self.assertLess(RadikoTimestamp.parse("99"), RadikoTimestamp.parse("100"))

    def test_03_不正な文字列(self):
        for text in ["", "abc", "2024-01-01", " 100", "-100", "1.5"]:
            with self.subTest(text=text):
                with self.assertRaises(MalformedTimestampError):
                    RadikoTimestamp.parse(text)

    def test_04_datetimeとの変換(self):
        ts = RadikoTimestamp.from_datetime(datetime(2024, 1, 1, 5, 0, 0))
        self.assertEqual(ts.text, "20240101050000")

        dt = ts.to_datetime()
        self.assertEqual(dt, JST.localize(datetime(2024, 1, 1, 5, 0, 0)))

    def test_05_ASCII以外の数字は不正(self):
        # Given: 全角数字・アラビア数字
        for text in ["１５０", "٢٠٢٤", "20240101０50000"]:
            with self.subTest(text=text):
                with self.assertRaises(MalformedTimestampError):
                    RadikoTimestamp.parse(text)


class TestDatetimeUtils(unittest.TestCase):
    """日時フォーマットテスト"""

    def test_01_naiveは日本時間とみなす(self):
        self.assertEqual(format_radiko_datetime(datetime(2024, 1, 1, 5, 0, 0)), "20240101050000")

    def test_02_awareは日本時間へ変換(self):
        utc_value = pytz.utc.localize(datetime(2024, 1, 1, 0, 0, 0))
        self.assertEqual(format_radiko_datetime(utc_value), "20240101090000")

    def test_03_番組表の日付は5時区切り(self):
        self.assertEqual(format_programs_date(datetime(2024, 1, 2, 4, 59, 59)), "20240101")
        self.assertEqual(format_programs_date(datetime(2024, 1, 2, 5, 0, 0)), "20240102")
        self.assertEqual(format_programs_date(datetime(2024, 3, 1, 0, 30, 0)), "20240229")


class TestProgram(unittest.TestCase):
    """番組データクラステスト"""

    def setUp(self):
        self.program = Program(
            ft="20240101050000", to="20240101063000",
            ftl="0500", tol="0630", dur="5400",
            title="朝の番組", pfm="山田太郎, 田中花子,"
        )

    def test_01_時刻プロパティ(self):
        self.assertEqual(self.program.start_time, JST.localize(datetime(2024, 1, 1, 5, 0, 0)))
        self.assertEqual(self.program.end_time, JST.localize(datetime(2024, 1, 1, 6, 30, 0)))
        self.assertEqual(self.program.duration_seconds, 5400)

    def test_02_dur未設定時は時刻から算出(self):
        program = Program(ft="20240101050000", to="20240101053000")
        self.assertEqual(program.duration_seconds, 1800)

    def test_03_出演者一覧(self):
        self.assertEqual(self.program.performers, ["山田太郎", "田中花子"])

    def test_04_半開区間の包含判定(self):
        self.assertTrue(self.program.contains("20240101050000"))
        self.assertTrue(self.program.contains("20240101062959"))
        self.assertFalse(self.program.contains("20240101063000"))
        self.assertFalse(self.program.contains("20240101045959"))

    def test_05_読み取り専用(self):
        with self.assertRaises(AttributeError):
            self.program.title = "変更"

    def test_06_放送局の番組一覧(self):
        station = Station(id="JOAK", name="NHK",
                          listing=ProgramListing(date="20240101", programs=(self.program,)))
        self.assertEqual(station.programs, (self.program,))
        self.assertEqual(Station(id="TBS").programs, ())
