"""
Компонент для токенизации текста.

Извлекает максимальные последовательности символов слова (буквы, цифры,
подчёркивание) без какой-либо нормализации: регистр и порядок сохраняются.
"""

import re
from typing import List, Sequence
from ..interfaces.text_processor import TokenProcessorInterface


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации текста."""

    def __init__(self, ascii_only: bool = True):
        """
        Инициализирует процессор токенизации.

        Args:
            ascii_only: Считать символами слова только [A-Za-z0-9_];
                False включает Unicode-буквы
        """
        self.ascii_only = ascii_only

        # \w+ с флагом re.ASCII эквивалентен [A-Za-z0-9_]+
        if ascii_only:
            self.word_pattern = re.compile(r'\w+', re.ASCII)
        else:
            self.word_pattern = re.compile(r'\w+')

    def tokenize(self, text: str) -> List[str]:
        """
        Разбивает текст на токены.

        Args:
            text: Исходный текст

        Returns:
            Список токенов в исходном регистре и порядке
        """
        if not text or not text.strip():
            return []

        return self.word_pattern.findall(text)

    def get_token_statistics(self, tokens: Sequence[str]) -> dict:
        """
        Возвращает статистику по токенам.

        Args:
            tokens: Список токенов

        Returns:
            Словарь со статистикой
        """
        if not tokens:
            return {
                'word_count': 0,
                'unique_words': 0,
                'density': 0.0,
                'avg_length': 0.0
            }

        unique_words = len({t.lower() for t in tokens})
        lengths = [len(t) for t in tokens]

        return {
            'word_count': len(tokens),
            'unique_words': unique_words,
            'density': unique_words / len(tokens) * 100,
            'avg_length': round(sum(lengths) / len(lengths), 1)
        }
