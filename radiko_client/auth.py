"""
Radiko認証モジュール

このモジュールはRadikoサービスへの認証（エリア認証）を管理します。
- auth1: 認証トークンと部分キー位置の取得
- auth2: 部分キー送信による認証完了とエリアIDの取得
- 認証トークンの有効期限管理

認証に失敗してもリトライは行いません。
"""

import base64
import threading
import time
from dataclasses import dataclass
from typing import Optional

import requests

from .errors import AuthenticationError, RequestCancelledError
from .utils.base import LoggerMixin
from .utils.network_utils import create_radiko_session


@dataclass(frozen=True)
class AuthInfo:
    """認証情報を保持するデータクラス"""
    auth_token: str
    area_id: str
    expires_at: float

    def is_expired(self) -> bool:
        """認証トークンが期限切れかどうかをチェック"""
        return time.time() >= self.expires_at


class RadikoAuthenticator(LoggerMixin):
    """Radiko認証を管理するクラス"""

    AUTH1_PATH = "v2/api/auth1"
    AUTH2_PATH = "v2/api/auth2"

    # Radiko認証キー（固定値）
    AUTH_KEY = "bcd151073c03b352e1ef2fd66c32209da9ca0afa"

    # トークン有効期間（秒）
    TOKEN_LIFETIME = 3600

    AUTH_HEADERS = {
        'X-Radiko-App': 'pc_html5',
        'X-Radiko-App-Version': '0.0.1',
        'X-Radiko-User': 'dummy_user',
        'X-Radiko-Device': 'pc'
    }

    def __init__(self, base_url: str = "https://radiko.jp",
                 session: Optional[requests.Session] = None,
                 timeout: float = 30.0):
        super().__init__()
        self.base_url = base_url.rstrip('/')
        self.session = session or create_radiko_session()
        self.timeout = timeout

        self.auth_info: Optional[AuthInfo] = None
        self._lock = threading.Lock()

    def _generate_partialkey(self, offset: int, length: int) -> str:
        """部分キーを生成"""
        auth_key_bytes = self.AUTH_KEY.encode('utf-8')
        partial_key = auth_key_bytes[offset:offset + length]
        return base64.b64encode(partial_key).decode('utf-8')

    def authenticate(self, cancel_event: Optional[threading.Event] = None,
                     timeout: Optional[float] = None) -> AuthInfo:
        """基本認証（エリア認証）を実行

        Args:
            cancel_event: セットされたら auth1/auth2 の送信前に中断する
            timeout: 各リクエストのタイムアウト秒数（None時は既定値）

        Raises:
            AuthenticationError: 通信失敗・レスポンス不正の場合
            RequestCancelledError: キャンセルされた場合
        """
        if timeout is None:
            timeout = self.timeout

        try:
            self.logger.info("Radiko基本認証を開始")
            self._check_cancelled(cancel_event, self.AUTH1_PATH)

            # Step 1: 認証開始リクエスト
            auth1_response = self.session.get(
                f"{self.base_url}/{self.AUTH1_PATH}",
                headers=self.AUTH_HEADERS,
                timeout=timeout
            )
            auth1_response.raise_for_status()

            auth_token = auth1_response.headers.get('X-Radiko-AuthToken')
            key_length = auth1_response.headers.get('X-Radiko-KeyLength')
            key_offset = auth1_response.headers.get('X-Radiko-KeyOffset')

            if not auth_token:
                raise AuthenticationError("認証トークンが取得できませんでした")
            if not key_length or not key_offset:
                raise AuthenticationError("認証キー情報が取得できませんでした")

            try:
                partialkey = self._generate_partialkey(int(key_offset), int(key_length))
            except ValueError as e:
                raise AuthenticationError(
                    f"認証キー情報が不正です: offset={key_offset}, length={key_length}"
                ) from e

            # Step 2: 認証を完了
            auth2_headers = {
                'X-Radiko-AuthToken': auth_token,
                'X-Radiko-Partialkey': partialkey,
                'X-Radiko-User': self.AUTH_HEADERS['X-Radiko-User'],
                'X-Radiko-Device': self.AUTH_HEADERS['X-Radiko-Device']
            }

            self._check_cancelled(cancel_event, self.AUTH2_PATH)
            auth2_response = self.session.get(
                f"{self.base_url}/{self.AUTH2_PATH}",
                headers=auth2_headers,
                timeout=timeout
            )
            auth2_response.raise_for_status()

            # レスポンス形式: "area_id,area_name,area_name_ascii"
            area_id = auth2_response.text.strip().split(',')[0].strip()
            if not area_id:
                raise AuthenticationError("エリアIDが取得できませんでした")

            auth_info = AuthInfo(
                auth_token=auth_token,
                area_id=area_id,
                expires_at=time.time() + self.TOKEN_LIFETIME
            )
            self.auth_info = auth_info

            self.logger.info(f"基本認証完了: area_id={area_id}")
            return auth_info

        except requests.RequestException as e:
            self.logger.error(f"認証リクエストエラー: {e}")
            raise AuthenticationError(f"認証リクエストに失敗しました: {e}") from e

    def get_valid_auth_info(self, cancel_event: Optional[threading.Event] = None,
                            timeout: Optional[float] = None) -> AuthInfo:
        """有効な認証情報を取得（期限切れの場合は再認証）"""
        with self._lock:
            if self.auth_info and not self.auth_info.is_expired():
                return self.auth_info

            self.logger.info("認証情報が期限切れまたは未取得、再認証を実行")
            return self.authenticate(cancel_event=cancel_event, timeout=timeout)

    def is_authenticated(self) -> bool:
        """認証済みかどうかをチェック"""
        return self.auth_info is not None and not self.auth_info.is_expired()

    def logout(self) -> None:
        """認証情報をクリア"""
        self.auth_info = None
        self.logger.info("認証情報をクリアしました")

    def _check_cancelled(self, cancel_event: Optional[threading.Event], path: str) -> None:
        if cancel_event is not None and cancel_event.is_set():
            self.logger.info(f"認証をキャンセルしました: {path}")
            raise RequestCancelledError(f"認証がキャンセルされました: {path}",
                                        context={'path': path})
