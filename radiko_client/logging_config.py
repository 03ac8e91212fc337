"""
ログ設定モジュール

radiko_client全体のログ設定を統一管理します。
- 通常使用時：ライブラリとして出力先を持たない（NullHandler）
- 環境変数でファイル出力・コンソール出力を有効化
- テスト時：コンソール出力あり
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union


class RadikoClientLogConfig:
    """radiko_clientのログ設定管理クラス"""

    # デフォルト設定
    DEFAULT_LOG_LEVEL = logging.INFO
    DEFAULT_MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __init__(self):
        self._initialized = False
        self._is_test_mode = self._detect_test_mode()
        self._console_output = self._determine_console_output()

    def _detect_test_mode(self) -> bool:
        """テストモードかどうかを判定"""
        return any([
            'PYTEST_CURRENT_TEST' in os.environ,
            'pytest' in sys.modules,
            os.environ.get('RADIKO_CLIENT_TEST_MODE', '').lower() == 'true'
        ])

    def _determine_console_output(self) -> bool:
        """コンソール出力を行うかどうかを判定"""
        console_env = os.environ.get('RADIKO_CLIENT_CONSOLE_OUTPUT', '').lower()
        if console_env == 'true':
            return True
        elif console_env == 'false':
            return False

        return self._is_test_mode

    def setup_logging(self,
                      log_level: Optional[Union[str, int]] = None,
                      log_file: Optional[str] = None,
                      console_output: Optional[bool] = None,
                      max_log_size: Optional[int] = None) -> None:
        """
        ログ設定を初期化

        ルートロガーには触れず、``radiko_client`` ロガー配下にのみハンドラーを設定する。

        Args:
            log_level: ログレベル（DEBUG, INFO, WARNING, ERROR, CRITICAL）
            log_file: ログファイルパス（None時は環境変数、未設定ならファイル出力なし）
            console_output: コンソール出力の有無（None時は自動判定）
            max_log_size: ログファイルの最大サイズ（バイト）
        """
        if self._initialized:
            return

        if log_level is None:
            log_level = os.environ.get('RADIKO_CLIENT_LOG_LEVEL', self.DEFAULT_LOG_LEVEL)

        if isinstance(log_level, str):
            log_level = getattr(logging, log_level.upper(), self.DEFAULT_LOG_LEVEL)

        if log_file is None:
            log_file = os.environ.get('RADIKO_CLIENT_LOG_FILE') or None

        if console_output is None:
            console_output = self._console_output

        if max_log_size is None:
            max_log_size = self.DEFAULT_MAX_LOG_SIZE

        formatter = logging.Formatter(self.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
        handlers = []

        # ファイルハンドラー（明示指定時のみ、テスト時は無効）
        if log_file and not self._is_test_mode:
            try:
                Path(log_file).parent.mkdir(parents=True, exist_ok=True)

                from logging.handlers import RotatingFileHandler
                file_handler = RotatingFileHandler(
                    log_file,
                    maxBytes=max_log_size,
                    backupCount=5,
                    encoding='utf-8'
                )
                file_handler.setLevel(log_level)
                handlers.append(file_handler)

            except OSError as e:
                print(f"Warning: Failed to create log file handler: {e}", file=sys.stderr)

        if console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(log_level)
            handlers.append(console_handler)

        if not handlers:
            handlers.append(logging.NullHandler())

        package_logger = logging.getLogger('radiko_client')
        for handler in package_logger.handlers[:]:
            package_logger.removeHandler(handler)
        for handler in handlers:
            handler.setFormatter(formatter)
            package_logger.addHandler(handler)
        package_logger.setLevel(log_level)

        self._initialized = True

        if console_output:
            package_logger.debug(f"ログ設定完了 - レベル: {logging.getLevelName(log_level)}, "
                                 f"ファイル: {log_file}, コンソール出力: {console_output}")

    def get_logger(self, name: str) -> logging.Logger:
        """
        ロガーを取得

        Args:
            name: ロガー名

        Returns:
            logging.Logger: 設定済みのロガー
        """
        if not self._initialized:
            self.setup_logging()

        return logging.getLogger(name)

    def is_test_mode(self) -> bool:
        """テストモードかどうかを返す"""
        return self._is_test_mode

    def is_console_output_enabled(self) -> bool:
        """コンソール出力が有効かどうかを返す"""
        return self._console_output

    def reset(self) -> None:
        """ログ設定をリセット（テスト用）"""
        self._initialized = False
        package_logger = logging.getLogger('radiko_client')
        for handler in package_logger.handlers[:]:
            package_logger.removeHandler(handler)


# グローバルインスタンス
_log_config = RadikoClientLogConfig()


def setup_logging(log_level: Optional[Union[str, int]] = None,
                  log_file: Optional[str] = None,
                  console_output: Optional[bool] = None,
                  max_log_size: Optional[int] = None) -> None:
    """
    radiko_clientのログ設定を初期化

    Args:
        log_level: ログレベル
        log_file: ログファイルパス
        console_output: コンソール出力の有無
        max_log_size: ログファイルの最大サイズ
    """
    _log_config.setup_logging(log_level, log_file, console_output, max_log_size)


def get_logger(name: str) -> logging.Logger:
    """
    ロガーを取得

    Args:
        name: ロガー名

    Returns:
        logging.Logger: 設定済みのロガー
    """
    return _log_config.get_logger(name)


def is_test_mode() -> bool:
    """テストモードかどうかを返す"""
    return _log_config.is_test_mode()


def is_console_output_enabled() -> bool:
    """コンソール出力が有効かどうかを返す"""
    return _log_config.is_console_output_enabled()


def reset_logging() -> None:
    """ログ設定をリセット（テスト用）"""
    _log_config.reset()
