"""
Абстрактные интерфейсы и структуры данных для компонентов анализа текста.

Определяет контракты, которые должны реализовывать все компоненты,
и неизменяемые записи результата анализа. Внешнее представление
результата (to_dict) использует имена полей в стиле camelCase.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union


class Verdict(str, Enum):
    """Итоговая оценка тональности."""
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"

    @classmethod
    def from_score(cls, score: int) -> "Verdict":
        """Определяет вердикт по знаку суммарного балла."""
        if score > 0:
            return cls.POSITIVE
        if score < 0:
            return cls.NEGATIVE
        return cls.NEUTRAL


@dataclass(frozen=True)
class StemPair:
    """Исходный токен и его стем (в нижнем регистре)."""
    original: str
    stem: str


@dataclass(frozen=True)
class LemmaPair:
    """Термин аннотатора и его лемма."""
    original: str
    root: str


@dataclass(frozen=True)
class PosTagEntry:
    """Термин аннотатора и неупорядоченный набор грамматических меток."""
    text: str
    tags: frozenset = field(default_factory=frozenset)


@dataclass(frozen=True)
class FrequencyEntry:
    """Слово (в нижнем регистре) и число его появлений."""
    word: str
    count: int


@dataclass(frozen=True)
class StopwordResult:
    """Результат фильтрации стоп-слов."""
    removed: Tuple[str, ...] = ()
    clean_text: str = ""

    @property
    def removed_count(self) -> int:
        return len(self.removed)


@dataclass(frozen=True)
class SentimentBreakdownEntry:
    """Совпадение токена со словарём тональности."""
    word: str
    score: int


@dataclass(frozen=True)
class SentimentResult:
    """Суммарная тональность текста с разбивкой по словам."""
    score: int = 0
    verdict: Verdict = Verdict.NEUTRAL
    breakdown: Tuple[SentimentBreakdownEntry, ...] = ()


@dataclass(frozen=True)
class LexicalStats:
    """Поверхностная статистика текста."""
    sentence_count: int = 0
    word_count: int = 0
    char_count: int = 0
    density: float = 0.0
    word_freq: Tuple[FrequencyEntry, ...] = ()


@dataclass(frozen=True)
class AnalysisResult:
    """Результат анализа текста — единственный внешний артефакт ядра."""
    has_data: bool
    lexical: LexicalStats
    tokens: Tuple[str, ...]
    lemmas: Tuple[LemmaPair, ...]
    stems: Tuple[StemPair, ...]
    stopwords: StopwordResult
    pos: Tuple[PosTagEntry, ...]
    sentiment: SentimentResult

    @classmethod
    def empty(cls) -> "AnalysisResult":
        """Возвращает полностью обнулённый результат (hasData = False)."""
        return cls(
            has_data=False,
            lexical=LexicalStats(),
            tokens=(),
            lemmas=(),
            stems=(),
            stopwords=StopwordResult(),
            pos=(),
            sentiment=SentimentResult(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Сериализует результат во внешний формат.

        Returns:
            Словарь, пригодный для json.dumps; метки POS отсортированы
        """
        return {
            'hasData': self.has_data,
            'lexical': {
                'sentenceCount': self.lexical.sentence_count,
                'wordCount': self.lexical.word_count,
                'charCount': self.lexical.char_count,
                'density': self.lexical.density,
                'wordFreq': [{'word': e.word, 'count': e.count} for e in self.lexical.word_freq],
            },
            'tokens': list(self.tokens),
            'lemmas': [{'original': l.original, 'root': l.root} for l in self.lemmas],
            'stems': [{'original': s.original, 'stem': s.stem} for s in self.stems],
            'stopwords': {
                'removed': list(self.stopwords.removed),
                'cleanText': self.stopwords.clean_text,
                'removedCount': self.stopwords.removed_count,
            },
            'pos': [{'text': p.text, 'tags': sorted(p.tags)} for p in self.pos],
            'sentiment': {
                'score': self.sentiment.score,
                'verdict': self.sentiment.verdict.value,
                'breakdown': [{'word': b.word, 'score': b.score} for b in self.sentiment.breakdown],
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisResult":
        """Восстанавливает результат из словаря, созданного to_dict()."""
        lexical = data.get('lexical', {})
        stopwords = data.get('stopwords', {})
        sentiment = data.get('sentiment', {})
        return cls(
            has_data=bool(data.get('hasData', False)),
            lexical=LexicalStats(
                sentence_count=int(lexical.get('sentenceCount', 0)),
                word_count=int(lexical.get('wordCount', 0)),
                char_count=int(lexical.get('charCount', 0)),
                density=float(lexical.get('density', 0.0)),
                word_freq=tuple(FrequencyEntry(e['word'], int(e['count'])) for e in lexical.get('wordFreq', [])),
            ),
            tokens=tuple(data.get('tokens', [])),
            lemmas=tuple(LemmaPair(l['original'], l['root']) for l in data.get('lemmas', [])),
            stems=tuple(StemPair(s['original'], s['stem']) for s in data.get('stems', [])),
            stopwords=StopwordResult(
                removed=tuple(stopwords.get('removed', [])),
                clean_text=stopwords.get('cleanText', ''),
            ),
            pos=tuple(PosTagEntry(p['text'], frozenset(p.get('tags', []))) for p in data.get('pos', [])),
            sentiment=SentimentResult(
                score=int(sentiment.get('score', 0)),
                verdict=Verdict(sentiment.get('verdict', Verdict.NEUTRAL.value)),
                breakdown=tuple(
                    SentimentBreakdownEntry(b['word'], int(b['score'])) for b in sentiment.get('breakdown', [])
                ),
            ),
        )


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Разбивает текст на токены."""
        pass


class StemmerInterface(ABC):
    """Интерфейс для стемминга отдельного слова."""

    @abstractmethod
    def stem(self, word: str) -> str:
        """Возвращает эвристический стем слова."""
        pass

    def stem_tokens(self, tokens: Sequence[str]) -> Tuple[StemPair, ...]:
        """Строит пары (токен, стем) в исходном порядке."""
        return tuple(StemPair(original=t, stem=self.stem(t)) for t in tokens)


class StopwordFilterInterface(ABC):
    """Интерфейс для фильтрации стоп-слов."""

    @abstractmethod
    def filter(self, tokens: Sequence[str]) -> StopwordResult:
        """Разделяет токены на удалённые и оставшиеся."""
        pass


class FrequencyAnalyzerInterface(ABC):
    """Интерфейс для анализа частотности слов."""

    @abstractmethod
    def count_frequency(self, tokens: Sequence[str]) -> Dict[str, int]:
        """Подсчитывает частоту появления слов."""
        pass

    @abstractmethod
    def get_most_frequent(self, counts: Dict[str, int], n: Optional[int] = None) -> List[Tuple[str, int]]:
        """Возвращает n самых частых слов."""
        pass

    @abstractmethod
    def analyze(self, tokens: Sequence[str]) -> Tuple[FrequencyEntry, ...]:
        """Возвращает топ слов для отображения."""
        pass


class SentimentScorerInterface(ABC):
    """Интерфейс для словарной оценки тональности."""

    @abstractmethod
    def score(self, tokens: Sequence[str]) -> SentimentResult:
        """Оценивает тональность последовательности токенов."""
        pass


class ResultExporterInterface(ABC):
    """Интерфейс для экспорта результатов."""

    @abstractmethod
    def export_to_excel(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует результат в Excel формат."""
        pass

    @abstractmethod
    def export_to_csv(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует потокенную таблицу в CSV."""
        pass

    @abstractmethod
    def export_to_json(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует результат в JSON формат."""
        pass


class TextProcessor(ABC):
    """Основной интерфейс для обработки текста."""

    @abstractmethod
    def analyze(self, text: str, custom_stopwords: Optional[Iterable[str]] = None) -> AnalysisResult:
        """Анализирует текст и возвращает результат."""
        pass
