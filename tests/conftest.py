"""
pytest configuration and fixtures for radiko_client tests
"""

import os

import pytest

os.environ.setdefault("RADIKO_CLIENT_TEST_MODE", "true")


@pytest.fixture
def isolated_logging():
    """ログ設定を初期化した状態でテストを実行"""
    from radiko_client.logging_config import reset_logging

    reset_logging()
    yield
    reset_logging()
