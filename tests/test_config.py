"""
設定・ログ設定単体テスト
"""

import json
import logging
import shutil
import tempfile
import unittest
from pathlib import Path

import pytest

from radiko_client.config import ClientConfig, load_client_config
from radiko_client.logging_config import get_logger, is_test_mode, setup_logging


class TestLoadClientConfig(unittest.TestCase):
    """設定ファイル読み込みテスト"""

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_01_パス未指定はデフォルト(self):
        self.assertEqual(load_client_config(), ClientConfig())

    def test_02_ファイル内容をマージ(self):
        config_path = self.temp_dir / "config.json"
        config_path.write_text(json.dumps({
            "area_id": "JP27",
            "timeout": 10,
            "prefecture": "大阪"  # 未知のキーは無視
        }), encoding='utf-8')

        config = load_client_config(config_path)

        self.assertEqual(config.area_id, "JP27")
        self.assertEqual(config.timeout, 10)
        self.assertEqual(config.base_url, "https://radiko.jp")

    def test_03_ファイルがない(self):
        config = load_client_config(self.temp_dir / "missing.json")

        self.assertEqual(config, ClientConfig())
        # Then: ファイルは作成されない
        self.assertFalse((self.temp_dir / "missing.json").exists())

    def test_04_壊れたJSON(self):
        config_path = self.temp_dir / "broken.json"
        config_path.write_text("{area_id: ", encoding='utf-8')

        self.assertEqual(load_client_config(config_path), ClientConfig())

    def test_05_辞書以外のJSON(self):
        config_path = self.temp_dir / "list.json"
        config_path.write_text("[1, 2, 3]", encoding='utf-8')

        self.assertEqual(load_client_config(config_path), ClientConfig())


@pytest.mark.usefixtures("isolated_logging")
class TestLoggingConfig(unittest.TestCase):
    """ログ設定テスト"""

    def test_01_テストモード判定(self):
        self.assertTrue(is_test_mode())

    def test_02_パッケージロガーにのみハンドラー設定(self):
        root_handlers = list(logging.getLogger().handlers)

        setup_logging(log_level="DEBUG", console_output=False)

        package_logger = logging.getLogger('radiko_client')
        self.assertEqual(package_logger.level, logging.DEBUG)
        self.assertEqual(len(package_logger.handlers), 1)
        self.assertIsInstance(package_logger.handlers[0], logging.NullHandler)
        self.assertEqual(logging.getLogger().handlers, root_handlers)

    def test_03_モジュールロガー取得(self):
        logger = get_logger('radiko_client.locator')
        self.assertEqual(logger.name, 'radiko_client.locator')

    def test_04_テスト時はファイル出力しない(self):
        temp_dir = Path(tempfile.mkdtemp())
        try:
            setup_logging(log_file=str(temp_dir / "radiko_client.log"), console_output=False)
            self.assertFalse((temp_dir / "radiko_client.log").exists())
        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)
