"""
radiko_client - radikoの番組表・タイムフリーAPIクライアント

主要コンポーネント:
- models: 放送局・番組のデータモデル
- locator: 番組表からの番組特定（開始時刻一致・放送時間包含）
- program_info: 番組表APIの呼び出し
- timeshift: タイムフリー用プレイリストURIの取得
- auth / client: 認証とHTTP通信
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .auth import RadikoAuthenticator, AuthInfo
from .client import RadikoClient
from .config import ClientConfig, load_client_config
from .errors import (
    RadikoClientError, ErrorCategory, ParameterError, TransportError,
    RequestCancelledError, AuthenticationError, DecodeError, PlaylistParseError,
    ProgramNotFoundError, MalformedTimestampError
)
from .locator import find_program_by_start, find_program_covering
from .models import RadikoTimestamp, Program, ProgramListing, Station, RadioStation
from .program_info import ProgramInfoManager
from .timeshift import TimeshiftPlaylistResolver

__all__ = [
    # 認証・通信
    'RadikoAuthenticator',
    'AuthInfo',
    'RadikoClient',
    'ClientConfig',
    'load_client_config',

    # データモデル
    'RadikoTimestamp',
    'Program',
    'ProgramListing',
    'Station',
    'RadioStation',

    # 番組検索・取得
    'find_program_by_start',
    'find_program_covering',
    'ProgramInfoManager',
    'TimeshiftPlaylistResolver',

    # エラー
    'RadikoClientError',
    'ErrorCategory',
    'ParameterError',
    'TransportError',
    'RequestCancelledError',
    'AuthenticationError',
    'DecodeError',
    'PlaylistParseError',
    'ProgramNotFoundError',
    'MalformedTimestampError',
]
