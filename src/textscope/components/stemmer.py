"""
Компонент для стемминга английских слов.

Упрощённый эвристический стеммер (не алгоритм Портера): один проход,
фиксированный порядок правил, без повторных проверок после срабатывания.
Результат не обязан быть словарным словом: "running" -> "runn",
"boxes" -> "boxe".
"""

from ..interfaces.text_processor import StemmerInterface


class SuffixStemmer(StemmerInterface):
    """Стеммер на основе отсечения суффиксов."""

    def __init__(self, min_length: int = 3):
        """
        Args:
            min_length: Слова короче этой длины возвращаются без изменений
        """
        self.min_length = min_length

    def stem(self, word: str) -> str:
        """
        Возвращает стем слова в нижнем регистре.

        Args:
            word: Исходное слово

        Returns:
            Стем слова
        """
        stem = word.lower()
        if len(stem) < self.min_length:
            return stem

        # Шаг 1: множественное число (срабатывает не более одного правила)
        if stem.endswith('sses'):
            stem = stem[:-2]
        elif stem.endswith('ies'):
            stem = stem[:-2]
        elif stem.endswith('ss'):
            pass
        elif stem.endswith('s'):
            stem = stem[:-1]

        # Шаг 2: глагольные суффиксы, проверяются на результате шага 1
        if stem.endswith('eed'):
            stem = stem[:-1]
        elif stem.endswith('ed') and len(stem) > 3:
            stem = stem[:-2]
        elif stem.endswith('ing') and len(stem) > 3:
            stem = stem[:-3]

        return stem
