"""
Тесты для системы конфигурации
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from common_api.config import ClientConfig


class TestClientConfig:
    """Тесты конфигурации клиента"""

    def test_config_creation(self):
        """Тест создания конфигурации"""
        config = ClientConfig(api_url="http://localhost:8000", timeout=10)

        assert config.api_url == "http://localhost:8000"
        assert config.timeout == 10

    def test_config_save_and_load(self):
        """Тест сохранения и загрузки конфигурации"""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = os.path.join(temp_dir, "test_common_api.toml")

            # Создаем и сохраняем конфиг
            original_config = ClientConfig(
                api_url="http://api.example.com", retries=5, token="secret"
            )
            original_config.save_to_file(config_path)

            # Загружаем конфиг
            loaded_config = ClientConfig.from_file(config_path)

            assert loaded_config is not None
            assert loaded_config.api_url == "http://api.example.com"
            assert loaded_config.retries == 5
            assert loaded_config.token == "secret"
            assert loaded_config.log_level == "INFO"

    def test_config_search_dir(self):
        """Тест поиска конфига в указанной директории"""
        with tempfile.TemporaryDirectory() as temp_dir:
            ClientConfig(api_url="http://found").save_to_file(
                os.path.join(temp_dir, "common_api.toml")
            )
            config = ClientConfig.from_file("nonexistent.toml", search_dir=temp_dir)
            assert config.api_url == "http://found"

    def test_config_file_not_exists(self):
        """Тест загрузки несуществующего конфига"""
        config = ClientConfig.from_file("nonexistent.toml")
        assert config is None

    def test_broken_config_file(self):
        """Тест загрузки повреждённого конфига"""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = os.path.join(temp_dir, "broken.toml")
            with open(config_path, "w") as f:
                f.write("api_url = [unclosed")
            assert ClientConfig.from_file(config_path) is None

    def test_config_merge_with_args(self):
        """Тест объединения конфига с аргументами"""
        config = ClientConfig(api_url="http://localhost:8000", download_dir="exports")

        # Мокаем args
        class MockArgs:
            def __init__(self):
                self.url = "http://api.new.com"
                self.output = None

        merged = config.merge_with_args(MockArgs())

        assert merged.api_url == "http://api.new.com"  # Переписан из args
        assert merged.download_dir == "exports"  # Остался из config

    def test_default_values(self):
        """Тест значений по умолчанию"""
        config = ClientConfig()

        assert config.api_url is None
        assert config.timeout == 30
        assert config.retries == 3
        assert config.download_dir == "."
        assert config.token is None

    def test_apply(self):
        """Тест инициализации клиента по конфигу"""
        client = MagicMock()
        config = ClientConfig(api_url="http://api", token="tok")

        assert config.apply(client) is client
        client.initialize.assert_called_once_with(
            "http://api", timeout=30, retries=3, download_dir="."
        )
        client.set_auth_token.assert_called_once_with("tok")

    def test_apply_without_url(self):
        """Тест применения конфига без URL"""
        with pytest.raises(ValueError):
            ClientConfig().apply(MagicMock())
