"""
radiko_client ユーティリティモジュール

共通機能やヘルパー関数を提供するユーティリティパッケージ
"""

from typing import List
from .base import LoggerMixin
from .datetime_utils import (
    JST, to_jst, format_radiko_datetime, format_programs_date, parse_radiko_datetime
)
from .network_utils import create_radiko_session

__all__: List[str] = [
    'LoggerMixin',
    'JST',
    'to_jst',
    'format_radiko_datetime',
    'format_programs_date',
    'parse_radiko_datetime',
    'create_radiko_session'
]
