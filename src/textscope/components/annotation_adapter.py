"""
Адаптер внешнего лингвистического аннотатора.

Вызывает аннотатор один раз на анализ и переупаковывает его вывод
в структуры lemmas и pos. Собственной логики POS, лемматизации
и сегментации на предложения здесь нет: любая ошибка аннотатора
превращается в AnnotationUnavailable.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from ..exceptions import AnnotationUnavailable
from ..interfaces.text_processor import LemmaPair, PosTagEntry
from ..models.base_model import BaseTextModel, ModelAnalysisResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnnotationOutput:
    """Переупакованный вывод аннотатора."""
    sentence_count: int
    lemmas: Tuple[LemmaPair, ...]
    pos: Tuple[PosTagEntry, ...]


class LinguisticAnnotationAdapter:
    """Тонкий потребитель внешнего аннотатора."""

    def __init__(self, annotator: BaseTextModel):
        """
        Args:
            annotator: Реализация BaseTextModel (например, SpacyModel)
        """
        self.annotator = annotator

    def annotate(self, text: str) -> AnnotationOutput:
        """
        Аннотирует текст и возвращает леммы, POS-метки и число предложений.

        Args:
            text: Исходный текст

        Returns:
            AnnotationOutput

        Raises:
            AnnotationUnavailable: аннотатор упал или вернул некорректные данные
        """
        try:
            raw = self.annotator.analyze_text(text)
        except Exception as e:
            raise AnnotationUnavailable(f"Лингвистический аннотатор недоступен: {e}") from e

        try:
            return self._repackage(raw)
        except AnnotationUnavailable:
            raise
        except Exception as e:
            raise AnnotationUnavailable(f"Некорректный ответ аннотатора: {e}") from e

    def _repackage(self, raw: ModelAnalysisResult) -> AnnotationOutput:
        """Проверяет ответ аннотатора и строит lemmas и pos."""
        sentence_count = raw.sentence_count
        if isinstance(sentence_count, bool) or not isinstance(sentence_count, int) or sentence_count < 0:
            raise AnnotationUnavailable(f"Некорректное число предложений: {sentence_count!r}")

        lemmas = []
        pos = []
        for term in raw.terms:
            text = term.text
            normal = term.normal
            if not isinstance(text, str):
                raise AnnotationUnavailable(f"Термин без текста: {term!r}")
            tags = term.tags
            if isinstance(tags, str) or not all(isinstance(tag, str) for tag in tags):
                raise AnnotationUnavailable(f"Некорректные метки термина {text!r}: {tags!r}")

            pos.append(PosTagEntry(text=text, tags=frozenset(tags)))

            if text.strip():
                root = term.root or normal or text
                lemmas.append(LemmaPair(original=text, root=root))

        logger.debug(f"Аннотация: предложений={sentence_count}, терминов={len(pos)}, лемм={len(lemmas)}")
        return AnnotationOutput(sentence_count=sentence_count, lemmas=tuple(lemmas), pos=tuple(pos))
