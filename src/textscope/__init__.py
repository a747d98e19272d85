"""
TextScope - модуль для многоаспектного лингвистического анализа английского текста

Этот модуль предоставляет инструменты для:
- Токенизации, стемминга и фильтрации стоп-слов
- Частотного анализа и лексической статистики
- Словарной оценки тональности
- Лемматизации и определения частей речи (через spaCy)
- Хранения истории анализов и экспорта результатов
"""

__version__ = "0.1.0"

from .exceptions import (
    TextScopeError,
    AnnotationUnavailable,
    AnnotatorConfigError,
    StorageError,
    UnsupportedDocumentError,
)
from .interfaces.text_processor import AnalysisResult, Verdict
from .components.text_pipeline import TextAnalysisPipeline

__all__ = [
    "TextScopeError",
    "AnnotationUnavailable",
    "AnnotatorConfigError",
    "StorageError",
    "UnsupportedDocumentError",
    "AnalysisResult",
    "Verdict",
    "TextAnalysisPipeline",
]
