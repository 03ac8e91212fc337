"""
番組表データモデル

radikoのXMLレスポンスから得られる放送局・番組情報を表すデータクラス群。
すべて読み取り専用のスナップショットで、生成後に変更されることはありません。
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from functools import total_ordering
from typing import List, Tuple, Union

from .errors import MalformedTimestampError
from .utils.datetime_utils import format_radiko_datetime, parse_radiko_datetime


_DIGITS = re.compile(r'[0-9]+')


@total_ordering
@dataclass(frozen=True)
class RadikoTimestamp:
    """radikoの日時文字列（YYYYMMDDHHmmss、日本時間）を表す値型

    元の文字列を保持し、比較は整数値で行う。
    """
    text: str
    value: int = field(repr=False)

    @classmethod
    def parse(cls, text: Union[str, 'RadikoTimestamp']) -> 'RadikoTimestamp':
        """日時文字列を解析

        Raises:
            MalformedTimestampError: 数字以外を含む場合
        """
        if isinstance(text, RadikoTimestamp):
            return text
        if not isinstance(text, str) or not _DIGITS.fullmatch(text):
            raise MalformedTimestampError(text)
        return cls(text=text, value=int(text))

    @classmethod
    def from_datetime(cls, value: datetime) -> 'RadikoTimestamp':
        return cls.parse(format_radiko_datetime(value))

    def to_datetime(self) -> datetime:
        """日本時間の datetime に変換"""
        try:
            return parse_radiko_datetime(self.text)
        except ValueError as e:
            raise MalformedTimestampError(self.text) from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RadikoTimestamp):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: 'RadikoTimestamp') -> bool:
        if not isinstance(other, RadikoTimestamp):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Program:
    """番組情報

    ft/to はレスポンスの文字列をそのまま保持する。区間は [ft, to) の半開区間。
    """
    ft: str
    to: str
    ftl: str = ""
    tol: str = ""
    dur: str = ""
    title: str = ""
    sub_title: str = ""
    desc: str = ""
    pfm: str = ""
    info: str = ""
    url: str = ""

    @property
    def start(self) -> RadikoTimestamp:
        return RadikoTimestamp.parse(self.ft)

    @property
    def end(self) -> RadikoTimestamp:
        return RadikoTimestamp.parse(self.to)

    @property
    def start_time(self) -> datetime:
        """開始時刻（日本時間）"""
        return self.start.to_datetime()

    @property
    def end_time(self) -> datetime:
        """終了時刻（日本時間）"""
        return self.end.to_datetime()

    @property
    def duration_seconds(self) -> int:
        """番組時間（秒）。dur属性がなければ開始・終了時刻から算出"""
        if self.dur.isdigit():
            return int(self.dur)
        return int((self.end_time - self.start_time).total_seconds())

    @property
    def performers(self) -> List[str]:
        """出演者一覧"""
        return [p.strip() for p in self.pfm.split(',') if p.strip()]

    def contains(self, timestamp: Union[str, RadikoTimestamp]) -> bool:
        """指定時刻が放送時間 [ft, to) に含まれるか

        Raises:
            MalformedTimestampError: いずれかの日時文字列が不正な場合
        """
        target = RadikoTimestamp.parse(timestamp)
        start, end = self.start, self.end
        return start <= target < end


@dataclass(frozen=True)
class ProgramListing:
    """日付単位の番組一覧"""
    date: str = ""
    programs: Tuple[Program, ...] = ()


@dataclass(frozen=True)
class Station:
    """放送局（番組表付き）"""
    id: str
    name: str = ""
    listing: ProgramListing = field(default_factory=ProgramListing)

    @property
    def programs(self) -> Tuple[Program, ...]:
        return self.listing.programs


@dataclass(frozen=True)
class RadioStation:
    """放送局一覧の1件"""
    id: str
    name: str = ""
