"""
Пайплайн анализа текста.

Последовательность работы:
- Пустой текст (или только пробелы) — обнулённый результат без вызова компонентов
- Токенизация выполняется один раз
- Стемминг, стоп-слова, частотность и тональность работают над одной
  последовательностью токенов, аннотатор — над исходным текстом
- Компоненты независимы и могут выполняться параллельно в пуле потоков
"""

import time
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import AbstractSet, Iterable, Mapping, Optional

from ..config import Config, config as default_config
from ..interfaces.text_processor import AnalysisResult, LexicalStats, TextProcessor
from ..lexicons import BASE_STOPWORDS, POLARITY_SCORES
from ..models.base_model import BaseTextModel
from .annotation_adapter import LinguisticAnnotationAdapter
from .frequency_analyzer import FrequencyAnalyzer
from .sentiment_scorer import SentimentScorer
from .stemmer import SuffixStemmer
from .stopword_filter import StopwordFilter, merge_stopwords
from .tokenizer import TokenProcessor

logger = logging.getLogger(__name__)


class TextAnalysisPipeline(TextProcessor):
    """
    Оркестратор анализа текста.

    Не хранит состояния между вызовами: словари передаются в конструктор
    и используются только для чтения.
    """

    def __init__(self, annotator: BaseTextModel,
                 stopwords: AbstractSet[str] = BASE_STOPWORDS,
                 polarity: Mapping[str, int] = POLARITY_SCORES,
                 custom_stopwords: Optional[Iterable[str]] = None,
                 ascii_only: bool = True,
                 min_word_length: int = 3,
                 top_n: int = 10,
                 parallel: bool = False,
                 max_workers: int = 4):
        """
        Инициализирует пайплайн.

        Args:
            annotator: Внешний лингвистический аннотатор
            stopwords: Базовый словарь стоп-слов
            polarity: Словарь тональности
            custom_stopwords: Пользовательские стоп-слова по умолчанию
            ascii_only: Токенизировать только по [A-Za-z0-9_] (False: Unicode \\w)
            min_word_length: Минимальная длина слова для частотности
            top_n: Размер топа частотности
            parallel: Запускать компоненты в пуле потоков
            max_workers: Размер пула потоков
        """
        self.stopwords = stopwords
        self.polarity = polarity
        self.custom_stopwords = tuple(custom_stopwords or ())
        self.min_word_length = min_word_length
        self.top_n = top_n
        self.parallel = parallel
        self.max_workers = max_workers

        self.tokenizer = TokenProcessor(ascii_only=ascii_only)
        self.stemmer = SuffixStemmer()
        self.sentiment_scorer = SentimentScorer(polarity)
        self.annotation_adapter = LinguisticAnnotationAdapter(annotator)

    @classmethod
    def from_config(cls, cfg: Optional[Config] = None,
                    custom_stopwords: Optional[Iterable[str]] = None,
                    annotator: Optional[BaseTextModel] = None) -> "TextAnalysisPipeline":
        """
        Создаёт пайплайн по настройкам проекта.

        Args:
            cfg: Конфигурация (по умолчанию глобальная)
            custom_stopwords: Пользовательские стоп-слова
            annotator: Готовый аннотатор (по умолчанию создаётся фабрикой)

        Raises:
            AnnotatorConfigError: некорректный раздел annotation.primary_model
        """
        cfg = cfg or default_config
        if annotator is None:
            from ..models.model_factory import ModelFactory
            annotator = ModelFactory.create(cfg.get_primary_model_config())
        return cls(
            annotator=annotator,
            custom_stopwords=custom_stopwords,
            ascii_only=cfg.is_ascii_word_chars(),
            min_word_length=cfg.get_min_word_length(),
            top_n=cfg.get_frequency_top_n(),
            parallel=cfg.is_parallel_pipeline_enabled(),
            max_workers=cfg.get_pipeline_workers(),
        )

    def analyze(self, text: str, custom_stopwords: Optional[Iterable[str]] = None) -> AnalysisResult:
        """
        Анализирует текст.

        Args:
            text: Исходный текст
            custom_stopwords: Пользовательские стоп-слова для этого вызова
                (заменяют заданные в конструкторе)

        Returns:
            AnalysisResult

        Raises:
            AnnotationUnavailable: аннотатор недоступен
        """
        if not text or not text.strip():
            return AnalysisResult.empty()

        start = time.time()
        custom = self.custom_stopwords if custom_stopwords is None else tuple(custom_stopwords)
        stopwords = merge_stopwords(self.stopwords, custom)
        stopword_filter = StopwordFilter(stopwords)
        frequency_analyzer = FrequencyAnalyzer(stopwords, min_length=self.min_word_length, top_n=self.top_n)

        tokens = tuple(self.tokenizer.tokenize(text))

        tasks = {
            'stems': (self.stemmer.stem_tokens, tokens),
            'stopwords': (stopword_filter.filter, tokens),
            'word_freq': (frequency_analyzer.analyze, tokens),
            'sentiment': (self.sentiment_scorer.score, tokens),
            'annotation': (self.annotation_adapter.annotate, text),
        }

        if self.parallel:
            with ThreadPoolExecutor(max_workers=self.max_workers) as ex:
                futures = {name: ex.submit(fn, arg) for name, (fn, arg) in tasks.items()}
                # result() пробрасывает исключение из потока, в том числе AnnotationUnavailable
                outputs = {name: fut.result() for name, fut in futures.items()}
        else:
            outputs = {name: fn(arg) for name, (fn, arg) in tasks.items()}

        annotation = outputs['annotation']
        stats = self.tokenizer.get_token_statistics(tokens)

        result = AnalysisResult(
            has_data=True,
            lexical=LexicalStats(
                sentence_count=annotation.sentence_count,
                word_count=stats['word_count'],
                char_count=len(text),
                density=stats['density'],
                word_freq=outputs['word_freq'],
            ),
            tokens=tokens,
            lemmas=annotation.lemmas,
            stems=outputs['stems'],
            stopwords=outputs['stopwords'],
            pos=annotation.pos,
            sentiment=outputs['sentiment'],
        )

        dt = (time.time() - start) * 1000
        logger.debug(f"Анализ завершён: tokens={len(tokens)}, parallel={self.parallel}, time={dt:.1f}ms")
        return result
