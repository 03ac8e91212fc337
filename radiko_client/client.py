"""
HTTPクライアントモジュール

radiko APIへのリクエスト送信を担当します。
- APIパス（v2/v3）からのURL組み立て
- 認証トークンヘッダーの付与
- キャンセル・タイムアウト制御
- レスポンス本文の読み切りと確実な解放
"""

import threading
from typing import Dict, Optional

import requests

from .auth import RadikoAuthenticator
from .config import ClientConfig
from .errors import RequestCancelledError, TransportError
from .utils.base import LoggerMixin
from .utils.network_utils import create_radiko_session


API_V2 = "v2/api"
API_V3 = "v3"


def api_path(*parts: str) -> str:
    """APIパスを組み立て

    Example:
        api_path(API_V3, "program/date", "20240101", "JP13.xml")
        # 'v3/program/date/20240101/JP13.xml'
    """
    return '/'.join(part.strip('/') for part in parts if part)


class RadikoClient(LoggerMixin):
    """radiko APIクライアント"""

    def __init__(self, config: Optional[ClientConfig] = None,
                 authenticator: Optional[RadikoAuthenticator] = None,
                 session: Optional[requests.Session] = None):
        super().__init__()
        self.config = config or ClientConfig()
        self.session = session or create_radiko_session(user_agent=self.config.user_agent)
        self.authenticator = authenticator or RadikoAuthenticator(
            base_url=self.config.base_url,
            session=self.session,
            timeout=self.config.timeout
        )

    @property
    def area_id(self) -> str:
        """エリアID（認証済みなら認証結果、未認証なら設定値）"""
        if self.authenticator.is_authenticated():
            return self.authenticator.auth_info.area_id
        return self.config.area_id

    def build_url(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def execute(self, method: str, path: str,
                query: Optional[Dict[str, str]] = None,
                headers: Optional[Dict[str, str]] = None,
                cancel_event: Optional[threading.Event] = None,
                timeout: Optional[float] = None) -> bytes:
        """リクエストを送信してレスポンス本文を返す

        Args:
            method: HTTPメソッド
            path: APIパス（例: v3/station/list/JP13.xml）
            query: クエリパラメータ
            headers: 追加ヘッダー
            cancel_event: セットされたらリクエストを中断する
            timeout: タイムアウト秒数（None時は設定値）

        Returns:
            bytes: レスポンス本文

        Raises:
            RequestCancelledError: キャンセルされた場合
            TransportError: 通信失敗・HTTPエラーの場合
        """
        url = self.build_url(path)
        self._check_cancelled(cancel_event, url)

        self.logger.debug(f"リクエスト送信: {method} {url} {query or {}}")
        try:
            response = self.session.request(
                method,
                url,
                params=query,
                headers=headers,
                timeout=timeout if timeout is not None else self.config.timeout,
                stream=True
            )
        except requests.RequestException as e:
            self.logger.error(f"リクエストエラー: {method} {url} - {e}")
            raise TransportError(f"リクエストに失敗しました: {e}",
                                 context={'url': url}) from e

        try:
            if response.status_code >= 400:
                self.logger.error(f"HTTPエラー: {method} {url} - {response.status_code}")
                raise TransportError(
                    f"HTTP {response.status_code}: {url}",
                    status_code=response.status_code,
                    context={'url': url}
                )

            chunks = []
            for chunk in response.iter_content(chunk_size=self.config.chunk_size):
                self._check_cancelled(cancel_event, url)
                chunks.append(chunk)
            return b''.join(chunks)

        except requests.RequestException as e:
            self.logger.error(f"レスポンス受信エラー: {method} {url} - {e}")
            raise TransportError(f"レスポンスの受信に失敗しました: {e}",
                                 status_code=response.status_code,
                                 context={'url': url}) from e
        finally:
            response.close()

    def execute_authenticated(self, method: str, path: str,
                              query: Optional[Dict[str, str]] = None,
                              cancel_event: Optional[threading.Event] = None,
                              timeout: Optional[float] = None) -> bytes:
        """認証トークンヘッダー付きでリクエストを送信

        Raises:
            AuthenticationError: 認証に失敗した場合
            RequestCancelledError: キャンセルされた場合
            TransportError: 通信失敗・HTTPエラーの場合
        """
        self._check_cancelled(cancel_event, self.build_url(path))
        auth_info = self.authenticator.get_valid_auth_info(cancel_event=cancel_event,
                                                           timeout=timeout)
        headers = {
            'X-Radiko-AuthToken': auth_info.auth_token,
            'X-Radiko-AreaId': auth_info.area_id
        }
        return self.execute(method, path, query=query, headers=headers,
                            cancel_event=cancel_event, timeout=timeout)

    def _check_cancelled(self, cancel_event: Optional[threading.Event], url: str) -> None:
        if cancel_event is not None and cancel_event.is_set():
            self.logger.info(f"リクエストをキャンセルしました: {url}")
            raise RequestCancelledError(f"リクエストがキャンセルされました: {url}",
                                        context={'url': url})
