#!/usr/bin/env python3
"""
Projects - консольное меню для учета проектов

Позволяет:
- Добавлять проекты
- Просматривать список проектов
- Выбирать проект и обновлять его данные
- Удалять проекты

Использование:
    python projects_app.py    - Запустить интерактивное меню (Enter в меню - выход)
"""

import sys

import click

from config import Config
from core.cli_interface import cli
from utils.logging_config import setup_logging


def main():
    """Главная точка входа"""
    try:
        Config.validate()
        setup_logging()

        # Запуск CLI; Ctrl-C обрабатываем здесь, а не в click
        cli(standalone_mode=False)

    except (KeyboardInterrupt, click.exceptions.Abort):
        print("\n\nInterrupted by user")
        sys.exit(0)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)


if __name__ == '__main__':
    main()
