"""
XMLデコードモジュール

radiko APIのXMLレスポンスを番組表データモデルに変換します。
- 放送局一覧（<stations><station><id/>...）
- 番組表（<radiko><stations><station id=".."><progs>...）
- 現在放送中（<radiko><stations><station id=".."><scd><progs>...）
"""

import xml.etree.ElementTree as ET
from typing import List, Optional, Union

from .errors import DecodeError
from .logging_config import get_logger
from .models import Program, ProgramListing, RadioStation, Station

logger = get_logger(__name__)


def _parse_root(body: Union[bytes, str], expected_tag: str) -> ET.Element:
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        logger.error(f"XML解析エラー: {e}")
        raise DecodeError(f"XMLの解析に失敗しました: {e}") from e

    if root.tag != expected_tag:
        logger.error(f"想定外のルート要素: <{root.tag}> (期待値: <{expected_tag}>)")
        raise DecodeError(
            f"想定外のルート要素です: <{root.tag}>",
            context={'expected': expected_tag, 'actual': root.tag}
        )
    return root


def _get_element_text(parent: Optional[ET.Element], tag_name: str) -> str:
    """XML要素からテキストを取得（要素がなければ空文字）"""
    if parent is None:
        return ""
    elem = parent.find(tag_name)
    if elem is None or elem.text is None:
        return ""
    return elem.text.strip()


def _parse_program(prog_elem: ET.Element) -> Program:
    return Program(
        ft=prog_elem.get('ft', ''),
        to=prog_elem.get('to', ''),
        ftl=prog_elem.get('ftl', ''),
        tol=prog_elem.get('tol', ''),
        dur=prog_elem.get('dur', ''),
        title=_get_element_text(prog_elem, 'title'),
        sub_title=_get_element_text(prog_elem, 'sub_title'),
        desc=_get_element_text(prog_elem, 'desc'),
        pfm=_get_element_text(prog_elem, 'pfm'),
        info=_get_element_text(prog_elem, 'info'),
        url=_get_element_text(prog_elem, 'url'),
    )


def _parse_listing(progs_elems: List[ET.Element]) -> ProgramListing:
    """<progs> 要素群を1つの番組一覧に変換

    週間番組表では日ごとに <progs> が並ぶため、番組は文書順に連結し、
    日付は最後の <progs> のものを採用する。
    """
    if not progs_elems:
        return ProgramListing()
    return ProgramListing(
        date=_get_element_text(progs_elems[-1], 'date'),
        programs=tuple(
            _parse_program(p) for progs in progs_elems for p in progs.findall('prog')
        ),
    )


def decode_stations(body: Union[bytes, str]) -> List[Station]:
    """番組表レスポンスを放送局のリストに変換

    <progs> が直下にない場合は <scd><progs>（現在放送中API）を参照する。

    Raises:
        DecodeError: XMLが不正、またはルート要素が <radiko> でない場合
    """
    root = _parse_root(body, 'radiko')

    stations = []
    for station_elem in root.findall('stations/station'):
        progs_elems = station_elem.findall('progs') or station_elem.findall('scd/progs')

        stations.append(Station(
            id=station_elem.get('id', ''),
            name=_get_element_text(station_elem, 'name'),
            listing=_parse_listing(progs_elems),
        ))

    logger.debug(f"番組表デコード完了: {len(stations)}局")
    return stations


def decode_radio_stations(body: Union[bytes, str]) -> List[RadioStation]:
    """放送局一覧レスポンスを変換

    Raises:
        DecodeError: XMLが不正、またはルート要素が <stations> でない場合
    """
    root = _parse_root(body, 'stations')

    stations = [
        RadioStation(
            id=_get_element_text(station_elem, 'id'),
            name=_get_element_text(station_elem, 'name'),
        )
        for station_elem in root.findall('station')
    ]

    logger.debug(f"放送局一覧デコード完了: {len(stations)}局")
    return stations
