"""
番組情報取得モジュール

このモジュールはRadikoの番組情報を取得します。
- 放送局一覧の取得
- 日付別・放送局別・週間の番組表の取得
- 現在放送中の番組の取得
- 開始時刻・放送時刻からの番組特定

取得結果はその都度新しいスナップショットとして返し、キャッシュしません。
"""

import threading
from datetime import datetime
from typing import List, Optional

from .client import API_V2, API_V3, RadikoClient, api_path
from .decoder import decode_radio_stations, decode_stations
from .errors import ParameterError
from .locator import find_program_by_start, find_program_covering
from .models import Program, RadioStation, Station
from .utils.base import LoggerMixin
from .utils.datetime_utils import format_programs_date, format_radiko_datetime


class ProgramInfoManager(LoggerMixin):
    """番組情報取得クラス"""

    def __init__(self, client: Optional[RadikoClient] = None):
        super().__init__()
        self.client = client or RadikoClient()

    def get_radio_stations(self, cancel_event: Optional[threading.Event] = None,
                           timeout: Optional[float] = None) -> List[RadioStation]:
        """エリアの放送局一覧を取得"""
        area_id = self.client.area_id
        self.logger.info(f"放送局一覧を取得中: area_id={area_id}")

        body = self.client.execute(
            "GET", api_path(API_V3, "station/list", f"{area_id}.xml"),
            cancel_event=cancel_event, timeout=timeout
        )
        return decode_radio_stations(body)

    def get_programs_by_station(self, station_id: str, date: datetime,
                                cancel_event: Optional[threading.Event] = None,
                                timeout: Optional[float] = None) -> List[Program]:
        """放送局の1日分の番組一覧を取得"""
        self._require_station_id(station_id)
        programs_date = format_programs_date(date)
        self.logger.info(f"番組表を取得中: {station_id} {programs_date}")

        body = self.client.execute(
            "GET", api_path(API_V3, "program/station/date", programs_date, f"{station_id}.xml"),
            cancel_event=cancel_event, timeout=timeout
        )
        stations = decode_stations(body)
        if not stations:
            self.logger.warning(f"番組データが空です: {station_id} {programs_date}")
            return []
        return list(stations[0].programs)

    def find_program_by_station(self, station_id: str, date: datetime,
                                cancel_event: Optional[threading.Event] = None,
                                timeout: Optional[float] = None) -> Program:
        """指定時刻に放送中の番組を取得

        Raises:
            ProgramNotFoundError: 該当番組がない場合
            MalformedTimestampError: 番組表の日時文字列が不正な場合
        """
        programs = self.get_programs_by_station(station_id, date,
                                                cancel_event=cancel_event, timeout=timeout)
        return find_program_covering(programs, format_radiko_datetime(date))

    def get_stations(self, date: datetime,
                     cancel_event: Optional[threading.Event] = None,
                     timeout: Optional[float] = None) -> List[Station]:
        """エリア全局の1日分の番組表を取得"""
        area_id = self.client.area_id
        programs_date = format_programs_date(date)
        self.logger.info(f"番組表を取得中: {programs_date}, area_id={area_id}")

        body = self.client.execute(
            "GET", api_path(API_V3, "program/date", programs_date, f"{area_id}.xml"),
            cancel_event=cancel_event, timeout=timeout
        )
        stations = decode_stations(body)
        self.logger.info(f"番組表取得完了: {len(stations)}局")
        return stations

    def get_now_programs(self, cancel_event: Optional[threading.Event] = None,
                         timeout: Optional[float] = None) -> List[Station]:
        """現在放送中の番組を取得"""
        area_id = self.client.area_id
        body = self.client.execute(
            "GET", api_path(API_V2, "program/now"),
            query={'area_id': area_id},
            cancel_event=cancel_event, timeout=timeout
        )
        return decode_stations(body)

    def get_program_by_start_time(self, station_id: str, start: datetime,
                                  cancel_event: Optional[threading.Event] = None,
                                  timeout: Optional[float] = None) -> Program:
        """指定時刻ちょうどに開始する番組を取得

        Raises:
            ParameterError: station_id が空の場合（通信は行わない）
            ProgramNotFoundError: 該当番組がない場合
        """
        self._require_station_id(station_id)
        stations = self.get_stations(start, cancel_event=cancel_event, timeout=timeout)
        return find_program_by_start(stations, station_id, start)

    def get_weekly_programs(self, station_id: str,
                            cancel_event: Optional[threading.Event] = None,
                            timeout: Optional[float] = None) -> List[Station]:
        """放送局の週間番組表を取得"""
        self._require_station_id(station_id)
        body = self.client.execute(
            "GET", api_path(API_V3, "program/station/weekly", f"{station_id}.xml"),
            cancel_event=cancel_event, timeout=timeout
        )
        return decode_stations(body)

    def _require_station_id(self, station_id: str) -> None:
        if not station_id:
            raise ParameterError("放送局IDが指定されていません")
