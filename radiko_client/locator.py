"""
番組検索モジュール

番組表スナップショットから番組を特定する純粋関数群（通信なし）。
- 開始時刻の完全一致による検索（タイムフリー用）
- 放送時間 [ft, to) の包含による検索（指定時刻に放送中の番組）

いずれも一覧の並び順で走査し、最初に一致したものを返します。
"""

from datetime import datetime
from typing import Iterable, Union

from .errors import ProgramNotFoundError
from .logging_config import get_logger
from .models import Program, RadikoTimestamp, Station
from .utils.datetime_utils import format_radiko_datetime

logger = get_logger(__name__)


def find_program_by_start(stations: Iterable[Station], station_id: str,
                          start: datetime) -> Program:
    """指定時刻ちょうどに開始する番組を取得

    最初にIDが一致した放送局の番組を順に調べ、ft が日時文字列と
    完全一致する最初の番組を返す。

    Args:
        stations: 番組表スナップショット
        station_id: 放送局ID
        start: 番組開始時刻（タイムゾーンなしは日本時間とみなす）

    Returns:
        Program: 一致した番組

    Raises:
        ProgramNotFoundError: 放送局または番組が見つからない場合
    """
    ft = format_radiko_datetime(start)

    station = next((s for s in stations if s.id == station_id), None)
    if station is None:
        logger.debug(f"放送局が見つかりません: {station_id}")
        raise ProgramNotFoundError(
            f"放送局が見つかりません: {station_id}",
            context={'station_id': station_id, 'ft': ft}
        )

    for program in station.programs:
        if program.ft == ft:
            return program

    logger.debug(f"開始時刻が一致する番組がありません: {station_id} {ft}")
    raise ProgramNotFoundError(
        f"番組が見つかりません: {station_id} {ft}",
        context={'station_id': station_id, 'ft': ft}
    )


def find_program_covering(programs: Iterable[Program],
                          target: Union[str, RadikoTimestamp]) -> Program:
    """指定時刻に放送中の番組を取得

    ft <= target < to を満たす最初の番組を返す。日時文字列が不正な番組に
    行き当たった時点で、後続に一致する番組があっても即座に失敗する。

    Args:
        programs: 1放送局・1日分の番組一覧
        target: 日時文字列（YYYYMMDDHHmmss）

    Returns:
        Program: 一致した番組

    Raises:
        MalformedTimestampError: target または ft/to が数値でない場合
        ProgramNotFoundError: 該当する番組がない場合
    """
    timestamp = RadikoTimestamp.parse(target)

    for program in programs:
        if program.contains(timestamp):
            return program

    raise ProgramNotFoundError(
        f"番組が見つかりません: {timestamp}",
        context={'target': str(timestamp)}
    )
