"""
Компонент для анализа частотности слов.

Отвечает за подсчёт частоты появления слов и получение самых частых
слов для отображения. Анализатор не хранит состояние между вызовами.
"""

from typing import AbstractSet, Dict, List, Optional, Sequence, Tuple
from ..interfaces.text_processor import FrequencyAnalyzerInterface, FrequencyEntry
from ..lexicons import BASE_STOPWORDS


class FrequencyAnalyzer(FrequencyAnalyzerInterface):
    """Анализатор частотности слов."""

    def __init__(self, stopwords: AbstractSet[str] = BASE_STOPWORDS,
                 min_length: int = 3, top_n: int = 10):
        """
        Инициализирует анализатор частотности.

        Args:
            stopwords: Множество стоп-слов в нижнем регистре
            min_length: Минимальная длина учитываемого слова
            top_n: Количество слов в результате
        """
        self.stopwords = stopwords
        self.min_length = min_length
        self.top_n = top_n

    def is_countable(self, word: str) -> bool:
        """Проверяет, учитывается ли слово (в нижнем регистре) в частотности."""
        return len(word) >= self.min_length and word not in self.stopwords

    def count_frequency(self, tokens: Sequence[str]) -> Dict[str, int]:
        """
        Подсчитывает частоту появления слов.

        Args:
            tokens: Список токенов в исходном регистре

        Returns:
            Словарь {слово: частота}; порядок ключей — порядок первого появления
        """
        counts: Dict[str, int] = {}
        for token in tokens:
            word = token.lower()
            if self.is_countable(word):
                counts[word] = counts.get(word, 0) + 1
        return counts

    def get_most_frequent(self, counts: Dict[str, int], n: Optional[int] = None) -> List[Tuple[str, int]]:
        """
        Возвращает n самых частых слов.

        Args:
            counts: Результат count_frequency
            n: Количество слов (по умолчанию top_n)

        Returns:
            Список кортежей (слово, частота)
        """
        if n is None:
            n = self.top_n
        if not counts or n <= 0:
            return []

        # sorted стабилен: при равной частоте сохраняется порядок первого появления
        ranked = sorted(counts.items(), key=lambda x: x[1], reverse=True)
        return ranked[:n]

    def analyze(self, tokens: Sequence[str]) -> Tuple[FrequencyEntry, ...]:
        """
        Возвращает топ самых частых слов.

        Args:
            tokens: Список токенов в исходном регистре

        Returns:
            Кортеж FrequencyEntry, отсортированный по убыванию частоты
        """
        counts = self.count_frequency(tokens)
        return tuple(FrequencyEntry(word=w, count=c) for w, c in self.get_most_frequent(counts))
