"""
Базовые интерфейсы и структуры данных для лингвистических аннотаторов.

Ядро не полагается на внутреннее устройство конкретного теггера: ему
нужны только число предложений и упорядоченный список терминов.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional


@dataclass(frozen=True)
class AnnotatedTerm:
    """Термин аннотатора."""
    text: str
    normal: str
    root: Optional[str] = None
    tags: frozenset = field(default_factory=frozenset)


@dataclass
class ModelAnalysisResult:
    """Результат анализа текста аннотатором."""
    sentence_count: int
    terms: List[AnnotatedTerm]
    processing_time_ms: float
    model_name: str
    model_type: str
    metadata: Optional[Dict[str, Any]] = None


class BaseTextModel(ABC):
    """Базовый интерфейс лингвистического аннотатора."""

    @abstractmethod
    def load(self) -> None:
        """Загружает модель в память (ленивая загрузка)."""
        pass

    @abstractmethod
    def analyze_text(self, text: str) -> ModelAnalysisResult:
        """Сегментирует и аннотирует текст за один проход."""
        pass

    @abstractmethod
    def unload(self) -> None:
        """Выгружает модель из памяти (если применимо)."""
        pass

    @abstractmethod
    def get_model_info(self) -> Dict[str, Any]:
        """Возвращает информацию о модели (имя, тип, состояние)."""
        pass

    def segment(self, text: str) -> int:
        """Возвращает количество предложений в тексте."""
        return self.analyze_text(text).sentence_count

    def annotate(self, text: str) -> List[AnnotatedTerm]:
        """Возвращает упорядоченный список терминов."""
        return self.analyze_text(text).terms
