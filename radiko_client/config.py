"""
クライアント設定モジュール

RadikoClientの接続設定を保持し、JSON設定ファイルからの読み込みを提供します。
設定ファイルは読み込みのみで、書き戻しは行いません。
"""

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .logging_config import get_logger
from .utils.network_utils import DEFAULT_USER_AGENT

logger = get_logger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """接続設定"""
    base_url: str = "https://radiko.jp"
    area_id: str = "JP13"
    timeout: float = 30.0
    chunk_size: int = 8192
    user_agent: str = DEFAULT_USER_AGENT

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClientConfig':
        """辞書から生成（未知のキーは無視）"""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.debug(f"未知の設定キーを無視します: {sorted(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})


def load_client_config(config_path: Optional[Union[str, Path]] = None,
                       encoding: str = 'utf-8') -> ClientConfig:
    """設定ファイルを読み込み

    Args:
        config_path: JSON設定ファイルパス（None時はデフォルト設定）
        encoding: ファイルエンコーディング

    Returns:
        ClientConfig: デフォルト設定にファイルの内容をマージした設定
    """
    default_config = ClientConfig()
    if config_path is None:
        return default_config

    path = Path(config_path)
    try:
        if not path.exists():
            logger.info(f"設定ファイルが存在しません: {path}")
            return default_config

        with open(path, 'r', encoding=encoding) as f:
            config = json.load(f)

        if not isinstance(config, dict):
            logger.error(f"設定ファイルの形式が不正です: {path}")
            return default_config

        merged_config = default_config.to_dict()
        merged_config.update(config)

        logger.debug(f"設定ファイル読み込み成功: {path}")
        return ClientConfig.from_dict(merged_config)

    except json.JSONDecodeError as e:
        logger.error(f"設定ファイルJSON解析エラー: {path} - {e}")
        return default_config
    except OSError as e:
        logger.error(f"設定ファイル読み込みエラー: {path} - {e}")
        return default_config
