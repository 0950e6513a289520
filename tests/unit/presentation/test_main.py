"""アプリケーション起動処理のテスト。"""

from unittest.mock import patch

import pytest

from src.infrastructure.config import Settings
from src.presentation import main as main_module


class TestMain:
    """mainのテストクラス。"""

    def test_main_runs_uvicorn_with_settings(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """設定値でuvicornが起動されることを確認する。"""
        settings = Settings(
            _env_file=None, host="0.0.0.0", port=9000, log_level="warning"
        )
        monkeypatch.setattr(main_module, "get_settings", lambda: settings)

        with patch.object(main_module.uvicorn, "run") as run:
            main_module.main()

        run.assert_called_once_with(
            "src.presentation.main:app",
            host="0.0.0.0",
            port=9000,
            reload=False,
            log_level="warning",
        )
