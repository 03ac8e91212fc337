"""
ネットワーク処理ユーティリティ

HTTP セッション作成などのネットワーク関連処理の統一機能
"""

import requests
from typing import Dict, Optional


DEFAULT_USER_AGENT = 'radiko-client/1.0'


def create_radiko_session(
    user_agent: str = DEFAULT_USER_AGENT,
    additional_headers: Optional[Dict[str, str]] = None
) -> requests.Session:
    """Radiko API用の標準セッションを作成

    タイムアウトはセッションではなくリクエスト単位で指定する
    （requests.Session は timeout 属性を参照しないため）。

    Args:
        user_agent: User-Agent ヘッダー
        additional_headers: 追加ヘッダー辞書

    Returns:
        requests.Session: 設定済みセッション

    Example:
        session = create_radiko_session()
        response = session.get("https://radiko.jp/v2/api/auth1", timeout=30)
    """
    session = requests.Session()

    standard_headers = {
        'User-Agent': user_agent,
        'Accept': '*/*',
        'Accept-Language': 'ja,en;q=0.9',
        'Accept-Encoding': 'gzip, deflate, br',
        'Connection': 'keep-alive'
    }

    if additional_headers:
        standard_headers.update(additional_headers)

    session.headers.update(standard_headers)
    return session
