"""
radiko_client テストパッケージ

テスト構造:
- test_models.py: データモデルのテスト
- test_locator.py: 番組検索のテスト
- test_decoder.py: XMLデコードのテスト
- test_playlist.py: M3U8解析のテスト
- test_auth.py: 認証モジュールのテスト
- test_client.py: HTTP通信のテスト
- test_program_info.py: 番組表APIのテスト
- test_timeshift.py: タイムフリーURI取得のテスト
- test_config.py: 設定・ログ設定のテスト
"""
