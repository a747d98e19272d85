"""
Компонент для словарной оценки тональности.

Каждый токен (без фильтра по длине и без фильтра стоп-слов: "not" и "no"
несут тональность) ищется в словаре в нижнем регистре. Совпадения дают
запись в разбивке с исходным регистром слова.
"""

from typing import Mapping, Sequence
from ..interfaces.text_processor import (
    SentimentBreakdownEntry,
    SentimentResult,
    SentimentScorerInterface,
    Verdict,
)
from ..lexicons import POLARITY_SCORES


class SentimentScorer(SentimentScorerInterface):
    """Оценщик тональности по словарю полярности."""

    def __init__(self, polarity: Mapping[str, int] = POLARITY_SCORES):
        """
        Args:
            polarity: Словарь {слово в нижнем регистре: вес}
        """
        self.polarity = polarity

    def score(self, tokens: Sequence[str]) -> SentimentResult:
        """
        Оценивает тональность последовательности токенов.

        Args:
            tokens: Токены в исходном регистре

        Returns:
            SentimentResult: сумма весов, вердикт и разбивка по совпадениям
        """
        total = 0
        breakdown = []
        for token in tokens:
            weight = self.polarity.get(token.lower())
            if weight is None:
                continue
            total += weight
            breakdown.append(SentimentBreakdownEntry(word=token, score=weight))

        return SentimentResult(
            score=total,
            verdict=Verdict.from_score(total),
            breakdown=tuple(breakdown),
        )
