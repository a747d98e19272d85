"""
Файловые хранилища: история анализов и пользовательские стоп-слова.

История хранится в одном JSON-файле вида {пользователь: [записи]},
новые записи добавляются в начало, хранится не более history_limit
записей на пользователя. Пользовательские стоп-слова — упорядоченный
список уникальных слов в нижнем регистре.
"""

import json
import logging
import threading
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .config import config
from .exceptions import StorageError
from .interfaces.text_processor import AnalysisResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """Запись истории анализов."""
    id: str
    timestamp: int  # миллисекунды с начала эпохи
    text: str
    result: AnalysisResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'timestamp': self.timestamp,
            'text': self.text,
            'result': self.result.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryEntry":
        return cls(
            id=str(data['id']),
            timestamp=int(data['timestamp']),
            text=data.get('text', ''),
            result=AnalysisResult.from_dict(data.get('result', {})),
        )


def _read_json(path: Path, default: Any) -> Any:
    """Читает JSON-файл; отсутствующий файл даёт значение по умолчанию.

    Raises:
        StorageError: файл не разбирается как JSON или верхний уровень
            не совпадает по типу со значением по умолчанию
    """
    if not path.exists():
        return default
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Повреждён файл хранилища {path}: {e}")
        raise StorageError(f"Файл {path} повреждён: {e}") from e
    if not isinstance(data, type(default)):
        raise StorageError(
            f"Файл {path}: ожидался {type(default).__name__}, получен {type(data).__name__}"
        )
    return data


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


class HistoryStore:
    """Хранилище истории анализов по пользователям."""

    def __init__(self, path: Optional[Union[str, Path]] = None, limit: Optional[int] = None):
        """
        Args:
            path: Путь к JSON-файлу истории (по умолчанию из config)
            limit: Максимум записей на пользователя (по умолчанию из config)
        """
        self.path = Path(path or config.get_history_file())
        self.limit = limit or config.get_history_limit()
        self._lock = threading.Lock()

    def save(self, user: str, text: str, result: AnalysisResult) -> HistoryEntry:
        """
        Сохраняет результат анализа в начало истории пользователя.

        Args:
            user: Идентификатор пользователя
            text: Исходный текст
            result: Результат анализа

        Returns:
            Созданная запись
        """
        entry = HistoryEntry(
            id=uuid.uuid4().hex,
            timestamp=int(time.time() * 1000),
            text=text,
            result=result,
        )
        with self._lock:
            all_history = _read_json(self.path, {})
            entries = [entry.to_dict()] + all_history.get(user, [])
            all_history[user] = entries[:self.limit]
            _write_json(self.path, all_history)
        logger.info(f"История: сохранена запись {entry.id} для '{user}'")
        return entry

    def get(self, user: str) -> List[HistoryEntry]:
        """Возвращает историю пользователя (новые записи первыми)."""
        with self._lock:
            all_history = _read_json(self.path, {})
        try:
            return [HistoryEntry.from_dict(item) for item in all_history.get(user, [])]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise StorageError(f"Файл {self.path}: некорректная запись истории '{user}': {e}") from e

    def clear(self, user: str) -> None:
        """Очищает историю пользователя."""
        with self._lock:
            all_history = _read_json(self.path, {})
            all_history[user] = []
            _write_json(self.path, all_history)
        logger.info(f"История пользователя '{user}' очищена")


class CustomStopwordStore:
    """Хранилище пользовательских стоп-слов."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Args:
            path: Путь к JSON-файлу со списком слов (по умолчанию из config)
        """
        self.path = Path(path or config.get_custom_stopwords_file())
        self._lock = threading.Lock()
        stored = (self._normalize(w) for w in _read_json(self.path, []))
        self._words: List[str] = list(dict.fromkeys(w for w in stored if w))

    @staticmethod
    def _normalize(word: str) -> str:
        return word.strip().lower()

    def words(self) -> Tuple[str, ...]:
        """Возвращает снимок списка слов."""
        with self._lock:
            return tuple(self._words)

    def add(self, word: str) -> bool:
        """
        Добавляет слово в конец списка.

        Returns:
            True если слово добавлено, False если пустое или уже есть
        """
        normalized = self._normalize(word)
        if not normalized:
            return False
        with self._lock:
            if normalized in self._words:
                return False
            self._words.append(normalized)
            _write_json(self.path, self._words)
        logger.info(f"Добавлено стоп-слово: {normalized}")
        return True

    def remove(self, word: str) -> bool:
        """
        Удаляет слово из списка.

        Returns:
            True если слово было в списке
        """
        normalized = self._normalize(word)
        with self._lock:
            if normalized not in self._words:
                return False
            self._words.remove(normalized)
            _write_json(self.path, self._words)
        logger.info(f"Удалено стоп-слово: {normalized}")
        return True

    def clear(self) -> None:
        """Удаляет все пользовательские стоп-слова."""
        with self._lock:
            self._words = []
            _write_json(self.path, self._words)
