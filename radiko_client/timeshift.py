"""
タイムフリープレイリスト取得モジュール

放送済み番組のタイムフリー再生用M3U8 URIを取得します。
1. 番組表から指定時刻ちょうどに開始する番組を特定
2. 番組の ft/to を指定して認証付きでプレイリストを要求
3. プレイリスト本文からメディアURIを抽出

いずれかの段階で失敗した時点で例外を送出し、途中結果は返しません。
"""

import threading
from datetime import datetime
from typing import Optional

from .client import API_V2, RadikoClient, api_path
from .errors import ParameterError
from .models import Program
from .playlist import get_uri_from_m3u8
from .program_info import ProgramInfoManager
from .utils.base import LoggerMixin


class TimeshiftPlaylistResolver(LoggerMixin):
    """タイムフリーM3U8 URI取得クラス"""

    PLAYLIST_PATH = api_path(API_V2, "ts/playlist.m3u8")

    # プレイリスト1件あたりの長さ（固定値）
    PLAYLIST_LENGTH = "15"

    def __init__(self, client: Optional[RadikoClient] = None,
                 program_info_manager: Optional[ProgramInfoManager] = None):
        super().__init__()
        self.client = client or RadikoClient()
        self.program_info_manager = program_info_manager or ProgramInfoManager(self.client)

    def get_playlist_uri(self, station_id: str, start: datetime,
                         cancel_event: Optional[threading.Event] = None,
                         timeout: Optional[float] = None) -> str:
        """タイムフリー再生用のメディアURIを取得

        Args:
            station_id: 放送局ID
            start: 番組開始時刻（番組表の開始時刻と完全一致する必要がある）
            cancel_event: セットされたら通信を中断する
            timeout: 通信ごとのタイムアウト秒数

        Returns:
            str: メディア（chunklist）のURI

        Raises:
            ParameterError: station_id が空の場合
            TransportError: 番組表・プレイリストの取得に失敗した場合
            DecodeError: 番組表の解析に失敗した場合
            ProgramNotFoundError: 開始時刻が一致する番組がない場合
            PlaylistParseError: プレイリストにURIがない場合
            AuthenticationError: 認証に失敗した場合
            RequestCancelledError: キャンセルされた場合（認証中を含む）
        """
        if not station_id:
            raise ParameterError("放送局IDが指定されていません")

        program = self.program_info_manager.get_program_by_start_time(
            station_id, start, cancel_event=cancel_event, timeout=timeout
        )
        self.logger.info(f"タイムフリー対象番組: {station_id} {program.ft}-{program.to} {program.title}")

        body = self.client.execute_authenticated(
            "POST", self.PLAYLIST_PATH,
            query=self.build_playlist_query(station_id, program),
            cancel_event=cancel_event, timeout=timeout
        )

        uri = get_uri_from_m3u8(body)
        self.logger.info(f"タイムフリーURI取得成功: {uri}")
        return uri

    def build_playlist_query(self, station_id: str, program: Program) -> dict:
        """プレイリスト要求のクエリパラメータを生成"""
        return {
            'station_id': station_id,
            'ft': program.ft,
            'to': program.to,
            'l': self.PLAYLIST_LENGTH
        }
