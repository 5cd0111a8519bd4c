"""Конфигурация приложения Projects"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Конфигурация приложения"""

    # Пути
    PROJECT_ROOT = Path(__file__).parent
    DATA_DIR = PROJECT_ROOT / "data"
    DB_PATH = Path(os.getenv("PROJECTS_DB", str(DATA_DIR / "projects.db")))

    # Логирование
    LOG_DIR = Path(os.getenv("PROJECTS_LOG_DIR", str(PROJECT_ROOT / "logs")))
    LOG_LEVEL = os.getenv("PROJECTS_LOG_LEVEL", "WARNING").upper()
    JSON_LOGS = os.getenv("PROJECTS_JSON_LOGS", "true").lower() in ("1", "true", "yes")

    @classmethod
    def validate(cls):
        """Валидация конфигурации"""
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(
                f"PROJECTS_LOG_LEVEL '{cls.LOG_LEVEL}' не является уровнем логирования. "
                "Допустимо: DEBUG, INFO, WARNING, ERROR, CRITICAL."
            )

        # Создание необходимых директорий
        cls.DB_PATH.parent.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_log_level(cls) -> int:
        """Числовой уровень логирования для консоли"""
        return logging.getLevelName(cls.LOG_LEVEL)
