"""
テスト用共通ユーティリティ

radiko APIのXML・M3U8レスポンスと、requests.Response 相当のモックを生成します。
"""

from typing import Dict, Iterable, List, Optional
from unittest.mock import MagicMock

import requests


def prog_xml(ft: str, to: str, title: str = "テスト番組", ftl: str = "", tol: str = "",
             dur: str = "", pfm: str = "") -> str:
    """<prog> 要素を生成"""
    return (
        f'<prog ft="{ft}" to="{to}" ftl="{ftl}" tol="{tol}" dur="{dur}">'
        f'<title>{title}</title><sub_title/><desc>番組説明</desc>'
        f'<pfm>{pfm}</pfm><info/><url>https://example.com/{ft}</url>'
        f'</prog>'
    )


def station_xml(station_id: str, name: str, progs: Iterable[str],
                date: str = "20240101", scd: bool = False) -> str:
    """<station> 要素を生成（scd=True で現在放送中API形式）"""
    progs_xml = f'<progs><date>{date}</date>{"".join(progs)}</progs>'
    if scd:
        progs_xml = f'<scd>{progs_xml}</scd>'
    return f'<station id="{station_id}"><name>{name}</name>{progs_xml}</station>'


def weekly_station_xml(station_id: str, name: str, days: Dict[str, Iterable[str]]) -> str:
    """日ごとに <progs> が並ぶ週間番組表形式の <station> 要素を生成"""
    progs_xml = ''.join(
        f'<progs><date>{date}</date>{"".join(progs)}</progs>' for date, progs in days.items()
    )
    return f'<station id="{station_id}"><name>{name}</name>{progs_xml}</station>'


def radiko_xml(stations: Iterable[str]) -> bytes:
    """番組表レスポンス全体を生成"""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<radiko><ttl>1800</ttl><srvtime>1704060000</srvtime>'
        f'<stations>{"".join(stations)}</stations></radiko>'
    ).encode('utf-8')


def station_list_xml(stations: Dict[str, str]) -> bytes:
    """放送局一覧レスポンスを生成"""
    items = ''.join(
        f'<station><id>{sid}</id><name>{name}</name><ascii_name>{sid}</ascii_name></station>'
        for sid, name in stations.items()
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<stations area_id="JP13" area_name="TOKYO JAPAN">{items}</stations>'
    ).encode('utf-8')


CHUNKLIST_URI = "https://radiko.jp/v2/api/ts/chunklist/NejwVqPA.m3u8"

PLAYLIST_M3U8 = (
    "#EXTM3U\n"
    "#EXT-X-VERSION:6\n"
    '#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=52973,CODECS="mp4a.40.5"\n'
    f"{CHUNKLIST_URI}\n"
).encode('utf-8')


def make_response(body: bytes = b"", status_code: int = 200,
                  headers: Optional[Dict[str, str]] = None,
                  chunks: Optional[List[bytes]] = None) -> MagicMock:
    """requests.Response 相当のモックを生成"""
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.content = body
    response.text = body.decode('utf-8', errors='replace')
    response.iter_content.return_value = chunks if chunks is not None else [body]
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    return response
