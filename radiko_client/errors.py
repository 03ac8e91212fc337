"""
エラー定義モジュール

radiko_clientが送出する例外を定義します。
呼び出し側が「通信できなかった」「解析できなかった」「解析できたが番組がない」を
区別してフォールバック処理を書けるよう、種類ごとにクラスを分けています。
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """エラーカテゴリ"""
    PARAMETER = "parameter"               # 引数不正
    NETWORK = "network"                   # ネットワーク関連
    AUTHENTICATION = "authentication"     # 認証関連
    DECODE = "decode"                     # レスポンス解析関連
    NOT_FOUND = "not_found"               # 番組が見つからない
    TIMESTAMP = "timestamp"               # 日時文字列不正


class RadikoClientError(Exception):
    """radiko_client基底例外クラス"""
    category = ErrorCategory.NETWORK

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ParameterError(RadikoClientError):
    """引数エラー（通信前に検出）"""
    category = ErrorCategory.PARAMETER


class TransportError(RadikoClientError):
    """通信エラー"""
    category = ErrorCategory.NETWORK

    def __init__(self, message: str, status_code: Optional[int] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)
        self.status_code = status_code


class RequestCancelledError(TransportError):
    """キャンセル指示によりリクエストを中断した"""
    pass


class AuthenticationError(RadikoClientError):
    """認証エラー"""
    category = ErrorCategory.AUTHENTICATION


class DecodeError(RadikoClientError):
    """レスポンス解析エラー"""
    category = ErrorCategory.DECODE


class PlaylistParseError(DecodeError):
    """プレイリストからURIを抽出できない"""
    pass


class ProgramNotFoundError(RadikoClientError):
    """指定した放送局・時刻に該当する番組がない"""
    category = ErrorCategory.NOT_FOUND

    def __init__(self, message: str = "番組が見つかりません",
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)


class MalformedTimestampError(RadikoClientError):
    """日時文字列を数値として解釈できない"""
    category = ErrorCategory.TIMESTAMP

    def __init__(self, value: Any, context: Optional[Dict[str, Any]] = None):
        super().__init__(f"日時文字列が不正です: {value!r}", context)
        self.value = value
