"""
Интерфейсы для компонентов анализа текста.

Определяет абстрактные базовые классы для всех компонентов
и неизменяемые записи результата анализа.
"""

from .text_processor import (
    TextProcessor,
    TokenProcessorInterface,
    StemmerInterface,
    StopwordFilterInterface,
    FrequencyAnalyzerInterface,
    SentimentScorerInterface,
    ResultExporterInterface,
    AnalysisResult,
    LexicalStats,
    FrequencyEntry,
    StemPair,
    LemmaPair,
    PosTagEntry,
    StopwordResult,
    SentimentBreakdownEntry,
    SentimentResult,
    Verdict,
)

__all__ = [
    'TextProcessor',
    'TokenProcessorInterface',
    'StemmerInterface',
    'StopwordFilterInterface',
    'FrequencyAnalyzerInterface',
    'SentimentScorerInterface',
    'ResultExporterInterface',
    'AnalysisResult',
    'LexicalStats',
    'FrequencyEntry',
    'StemPair',
    'LemmaPair',
    'PosTagEntry',
    'StopwordResult',
    'SentimentBreakdownEntry',
    'SentimentResult',
    'Verdict',
]
