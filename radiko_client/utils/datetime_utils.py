"""
日時処理ユーティリティ

radikoが使う日時文字列（日本時間・区切りなし）との変換を統一
"""

from datetime import datetime, timedelta

import pytz


JST = pytz.timezone('Asia/Tokyo')

DATETIME_FORMAT = '%Y%m%d%H%M%S'
PROGRAMS_DATE_FORMAT = '%Y%m%d'

# 番組表の日付境界（5:00 JST）
BROADCAST_DAY_START_HOUR = 5


def to_jst(value: datetime) -> datetime:
    """datetime を日本時間に変換

    タイムゾーン情報のない datetime は日本時間とみなす。

    Args:
        value: 変換対象の datetime

    Returns:
        日本時間の aware datetime
    """
    if value.tzinfo is None:
        return JST.localize(value)
    return value.astimezone(JST)


def format_radiko_datetime(value: datetime) -> str:
    """datetime を radiko の日時文字列に変換

    Example:
        format_radiko_datetime(datetime(2024, 1, 1, 5, 0, 0))
        # '20240101050000'
    """
    return to_jst(value).strftime(DATETIME_FORMAT)


def format_programs_date(value: datetime) -> str:
    """番組表APIで使う日付文字列を生成

    radikoの番組表は5:00始まりのため、0:00〜4:59は前日の番組表に属する。

    Example:
        format_programs_date(datetime(2024, 1, 2, 3, 0, 0))
        # '20240101'
    """
    jst_value = to_jst(value)
    if jst_value.hour < BROADCAST_DAY_START_HOUR:
        jst_value = jst_value - timedelta(days=1)
    return jst_value.strftime(PROGRAMS_DATE_FORMAT)


def parse_radiko_datetime(text: str) -> datetime:
    """radiko の日時文字列を日本時間の datetime に変換

    Raises:
        ValueError: 形式が不正な場合
    """
    return JST.localize(datetime.strptime(text, DATETIME_FORMAT))
