"""
Конфигурация клиента API
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "common_api.toml"


@dataclass
class ClientConfig:
    """Конфигурация подключения клиента к серверу API"""

    api_url: Optional[str] = None
    timeout: int = 30
    retries: int = 3
    download_dir: str = "."
    log_level: str = "INFO"
    token: Optional[str] = None

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILENAME, search_dir: str = None
    ) -> Optional["ClientConfig"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_FILENAME)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (OSError, toml.TomlDecodeError) as exc:
            logger.warning(f"Cannot read the config file {config_path}: {exc}")
            return None

        return cls(
            api_url=config_data.get("api_url"),
            timeout=int(config_data.get("timeout", 30)),
            retries=int(config_data.get("retries", 3)),
            download_dir=config_data.get("download_dir", "."),
            log_level=config_data.get("log_level", "INFO"),
            token=config_data.get("token"),
        )

    def save_to_file(self, config_path: str = CONFIG_FILENAME) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            "api_url": self.api_url,
            "timeout": self.timeout,
            "retries": self.retries,
            "download_dir": self.download_dir,
            "log_level": self.log_level,
        }
        # toml не умеет записывать None
        if self.token:
            config_data["token"] = self.token
        config_data = {k: v for k, v in config_data.items() if v is not None}

        with open(config_path, "w") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "ClientConfig":
        """Объединение с аргументами командной строки"""
        return ClientConfig(
            api_url=getattr(args, "url", None) or self.api_url,
            timeout=getattr(args, "timeout", None) or self.timeout,
            retries=getattr(args, "retries", None) or self.retries,
            download_dir=getattr(args, "output", None) or self.download_dir,
            log_level=getattr(args, "log_level", None) or self.log_level,
            token=getattr(args, "token", None) or self.token,
        )

    def apply(self, client):
        """Инициализация клиента по конфигурации"""
        if not self.api_url:
            raise ValueError("API URL is not configured.")
        client.initialize(
            self.api_url,
            timeout=self.timeout,
            retries=self.retries,
            download_dir=self.download_dir,
        )
        if self.token:
            client.set_auth_token(self.token)
        return client
