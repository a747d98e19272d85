"""
Компоненты для анализа текста.

Каждый компонент отвечает за одну конкретную задачу:
- TokenProcessor - токенизация текста
- SuffixStemmer - эвристический стемминг
- StopwordFilter - фильтрация стоп-слов
- FrequencyAnalyzer - подсчёт частотности
- SentimentScorer - словарная оценка тональности
- LinguisticAnnotationAdapter - леммы, POS и предложения от внешнего аннотатора
- TextAnalysisPipeline - сборка результата анализа
- ResultExporter - экспорт результатов
"""

from .tokenizer import TokenProcessor
from .stemmer import SuffixStemmer
from .stopword_filter import StopwordFilter, merge_stopwords
from .frequency_analyzer import FrequencyAnalyzer
from .sentiment_scorer import SentimentScorer
from .annotation_adapter import LinguisticAnnotationAdapter, AnnotationOutput
from .text_pipeline import TextAnalysisPipeline
from .exporter import ResultExporter

__all__ = [
    'TokenProcessor',
    'SuffixStemmer',
    'StopwordFilter',
    'merge_stopwords',
    'FrequencyAnalyzer',
    'SentimentScorer',
    'LinguisticAnnotationAdapter',
    'AnnotationOutput',
    'TextAnalysisPipeline',
    'ResultExporter',
]
