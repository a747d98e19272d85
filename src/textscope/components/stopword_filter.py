"""
Компонент для фильтрации стоп-слов.

Проверка принадлежности выполняется без учёта регистра; в обоих потоках
(удалённые и оставшиеся токены) сохраняются исходный регистр и порядок.
"""

from typing import AbstractSet, Iterable, Optional, Sequence
from ..interfaces.text_processor import StopwordFilterInterface, StopwordResult
from ..lexicons import BASE_STOPWORDS


def merge_stopwords(base: AbstractSet[str], custom: Optional[Iterable[str]] = None) -> frozenset:
    """
    Объединяет базовый словарь с пользовательскими стоп-словами.

    Args:
        base: Базовый словарь (в нижнем регистре)
        custom: Дополнительные слова из хранилища настроек

    Returns:
        Неизменяемое множество слов в нижнем регистре
    """
    if not custom:
        return frozenset(base)
    extra = {w.strip().lower() for w in custom if w and w.strip()}
    return frozenset(base) | extra


class StopwordFilter(StopwordFilterInterface):
    """Фильтр стоп-слов."""

    def __init__(self, stopwords: AbstractSet[str] = BASE_STOPWORDS,
                 custom_stopwords: Optional[Iterable[str]] = None):
        """
        Инициализирует фильтр.

        Args:
            stopwords: Базовый словарь стоп-слов
            custom_stopwords: Пользовательские стоп-слова (дополняют базовый словарь)
        """
        self.stopwords = merge_stopwords(stopwords, custom_stopwords)

    def is_stopword(self, token: str) -> bool:
        """Проверяет, является ли токен стоп-словом."""
        return token.lower() in self.stopwords

    def filter(self, tokens: Sequence[str]) -> StopwordResult:
        """
        Разделяет токены на удалённые стоп-слова и оставшиеся слова.

        Args:
            tokens: Последовательность токенов

        Returns:
            StopwordResult; clean_text — оставшиеся токены через один пробел
        """
        removed = []
        retained = []
        for token in tokens:
            if self.is_stopword(token):
                removed.append(token)
            else:
                retained.append(token)

        return StopwordResult(removed=tuple(removed), clean_text=' '.join(retained))
