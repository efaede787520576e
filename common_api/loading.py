"""
Индикатор выполнения запросов
"""

import logging

logger = logging.getLogger(__name__)


class Loading:
    """Порт индикатора загрузки.

    Клиент вызывает show_* перед запросом и hide() после него. Реализация по
    умолчанию ничего не отображает и только пишет сообщения в лог; приложение
    с интерфейсом переопределяет show() и hide().
    """

    def show(self, message: str) -> None:
        logger.debug(message)

    def hide(self) -> None:
        pass

    def show_getting(self) -> None:
        self.show("Getting data...")

    def show_adding(self) -> None:
        self.show("Adding data...")

    def show_updating(self) -> None:
        self.show("Updating data...")

    def show_deleting(self) -> None:
        self.show("Deleting data...")

    def show_restoring(self) -> None:
        self.show("Restoring data...")

    def show_purging(self) -> None:
        self.show("Purging data...")

    def show_erasing(self) -> None:
        self.show("Erasing data...")

    def show_exporting(self) -> None:
        self.show("Exporting data...")

    def show_importing(self) -> None:
        self.show("Importing data...")

    def show_downloading(self) -> None:
        self.show("Downloading file...")

    def show_uploading(self) -> None:
        self.show("Uploading file...")
