"""
プレイリスト解析モジュール

タイムフリーAPIが返すM3U8プレイリストから、実際のメディア（chunklist）の
URIを取り出します。
"""

import re
from typing import Union

import m3u8

from .errors import PlaylistParseError
from .logging_config import get_logger

logger = get_logger(__name__)

M3U8_URI_PATTERN = re.compile(r'^https?://.+\.m3u8$')


def get_uri_from_m3u8(body: Union[bytes, str]) -> str:
    """M3U8プレイリスト本文からメディアURIを抽出

    バリアントプレイリストのうち絶対URLで .m3u8 を指す最初のものを返す。
    バリアントとして解釈できない場合は各行を直接調べる。

    Args:
        body: プレイリスト本文

    Returns:
        str: メディアURI

    Raises:
        PlaylistParseError: URIが見つからない場合
    """
    if isinstance(body, bytes):
        try:
            body = body.decode('utf-8')
        except UnicodeDecodeError as e:
            raise PlaylistParseError(f"プレイリストの文字コードが不正です: {e}") from e

    try:
        playlist = m3u8.loads(body)
    except Exception as e:
        # m3u8 は不正な行に対して ValueError 以外も送出しうる
        raise PlaylistParseError(f"プレイリストの解析に失敗しました: {e}") from e

    for variant in playlist.playlists:
        if variant.uri and M3U8_URI_PATTERN.match(variant.uri):
            logger.debug(f"メディアURI取得: {variant.uri}")
            return variant.uri

    for line in body.splitlines():
        line = line.strip()
        if M3U8_URI_PATTERN.match(line):
            logger.debug(f"メディアURI取得（行走査）: {line}")
            return line

    logger.error(f"プレイリストにURIがありません: {body[:200]!r}")
    raise PlaylistParseError("プレイリストにメディアURIが見つかりません")
