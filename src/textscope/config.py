"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс TEXTSCOPE_, вложенность через __)
- Валидация значений
- Настройка логирования
"""

import os
import yaml
import copy
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Any] = {
    'text_analysis': {
        'spacy_model': "en_core_web_sm",
        # false: Unicode \w вместо [A-Za-z0-9_]
        'ascii_word_chars': True,
    },
    'frequency': {
        'min_word_length': 3,
        'top_n': 10,
    },
    'pipeline': {
        'parallel': False,
        'max_workers': 4,
    },
    'annotation': {
        'primary_model': {
            'type': 'spacy',
            'name': 'en_core_web_sm',
            'include_punctuation': False,
        },
    },
    'storage': {
        'history_file': "data/history.json",
        'history_limit': 50,
        'custom_stopwords_file': "data/custom_stopwords.json",
    },
    'ingestion': {
        'strip_html': True,
        'text_extensions': ['.txt', '.md', '.json', '.csv', '.xml', '.html', '.htm', '.js', '.ts'],
    },
    'logging': {
        'level': "INFO",
        'format': "%(asctime)s - %(levelname)s - %(message)s",
        'log_to_file': False,
        'log_file': "logs/textscope.log",
        'max_log_files': 10,
    },
}


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}

        self._load_config()
        self._load_env()
        try:
            self._apply_env_overrides()
            self._validate()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")
        # {timestamp} подставляется один раз на экземпляр
        self._log_file = self._resolve_logging_file()
        self._configure_logging_if_needed()

    def _resolve_config_path(self) -> Path:
        env = os.getenv('TEXTSCOPE_ENV', '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            candidate = self.config_path
        if candidate.exists():
            return candidate
        return self.config_path

    def _load_config(self):
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        try:
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                self._merge(self.config_data, loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.warning(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
        except Exception as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = self._get_default_config()

    def _load_env(self):
        """Загружает переменные окружения из .env файла"""
        try:
            load_dotenv()
        except Exception as e:
            logger.error(f"Ошибка загрузки переменных окружения: {e}")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (TEXTSCOPE_*)."""
        prefix = 'TEXTSCOPE_'
        for key, val in os.environ.items():
            if not key.startswith(prefix):
                continue
            if key in ('TEXTSCOPE_ENV',):
                continue
            tail = key[len(prefix):]
            # Вложенность разделяется двойным подчёркиванием
            dotted = tail.replace('__', '.').lower()
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv('TEXTSCOPE_ENV'):
            logger.info(f"Активирован профиль: {os.getenv('TEXTSCOPE_ENV')}")

    def _validate(self) -> None:
        """Проверяет диапазоны числовых параметров."""
        for dotted in ('frequency.min_word_length', 'frequency.top_n',
                       'storage.history_limit', 'pipeline.max_workers'):
            default = self._get_default_value(dotted)
            try:
                value = int(self.get(dotted, default))
            except (TypeError, ValueError):
                value = 0
            if value < 1:
                logger.warning(f"{dotted} < 1 — установлено значение по умолчанию {default}")
                value = default
            self._set_nested(self.config_data, dotted, value)

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если изменились уровень,
        формат или файл логирования, либо явно указан force=True.
        """
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_textscope_configured", False) and not force:
            if (
                getattr(root, "_textscope_console_level", None) == console_level_name and
                getattr(root, "_textscope_file_level", None) == file_level_name and
                getattr(root, "_textscope_format", None) == desired_fmt and
                getattr(root, "_textscope_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            self.cleanup_old_log_files()
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_textscope_configured", True)
        setattr(root, "_textscope_console_level", console_level_name)
        setattr(root, "_textscope_file_level", file_level_name)
        setattr(root, "_textscope_format", desired_fmt)
        setattr(root, "_textscope_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return copy.deepcopy(DEFAULT_CONFIG)

    def _get_default_value(self, key: str) -> Any:
        value: Any = DEFAULT_CONFIG
        for k in key.split('.'):
            value = value[k]
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_env(self, key: str, default: Any = None) -> Any:
        """Получает значение переменной окружения"""
        return os.getenv(key, default)

    # --- Анализ текста ---
    def get_spacy_model(self) -> str:
        """Получает название модели spaCy"""
        return self.get('text_analysis.spacy_model', "en_core_web_sm")

    def is_ascii_word_chars(self) -> bool:
        """Считать ли символами слова только ASCII"""
        return bool(self.get('text_analysis.ascii_word_chars', True))

    def get_min_word_length(self) -> int:
        """Получает минимальную длину слова для частотного анализа"""
        return int(self.get('frequency.min_word_length', 3))

    def get_frequency_top_n(self) -> int:
        """Получает размер топа частотности"""
        return int(self.get('frequency.top_n', 10))

    def is_parallel_pipeline_enabled(self) -> bool:
        """Запускать ли компоненты анализа параллельно"""
        return bool(self.get('pipeline.parallel', False))

    def get_pipeline_workers(self) -> int:
        """Количество потоков параллельного пайплайна"""
        return max(1, int(self.get('pipeline.max_workers', 4)))

    def get_primary_model_config(self) -> Dict[str, Any]:
        """Настройки аннотатора (тип/имя)."""
        cfg = dict(self.get('annotation.primary_model', {}) or {})
        cfg.setdefault('name', self.get_spacy_model())
        return cfg

    # --- Хранилища ---
    def get_history_file(self) -> str:
        """Путь к файлу истории анализов"""
        return self.get('storage.history_file', "data/history.json")

    def get_history_limit(self) -> int:
        """Максимальное число записей истории на пользователя"""
        return int(self.get('storage.history_limit', 50))

    def get_custom_stopwords_file(self) -> str:
        """Путь к файлу пользовательских стоп-слов"""
        return self.get('storage.custom_stopwords_file', "data/custom_stopwords.json")

    # --- Загрузка файлов ---
    def is_strip_html_enabled(self) -> bool:
        """Извлекать ли видимый текст из HTML"""
        return bool(self.get('ingestion.strip_html', True))

    def get_text_extensions(self) -> List[str]:
        """Расширения файлов, читаемых как простой текст"""
        return [ext.lower() for ext in self.get('ingestion.text_extensions', [])]

    # --- Логирование ---
    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        return self.get('logging.console_level', self.get('logging.level', "INFO"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def _resolve_logging_file(self) -> str:
        log_file_template = self.get('logging.log_file', "logs/textscope.log")
        if "{timestamp}" in log_file_template:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            return log_file_template.replace("{timestamp}", timestamp)
        return log_file_template

    def get_logging_file(self) -> str:
        """Получает путь к файлу логов ({timestamp} заменяется временем создания Config)"""
        return self._log_file

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get_logging_file()).parent
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("textscope*.log"))
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        # Самые новые последними
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
