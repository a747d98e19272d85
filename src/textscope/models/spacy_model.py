"""
Обёртка над spaCy, реализующая интерфейс BaseTextModel.

Переводит UPOS-теги и морфологию spaCy в набор меток вида
"Noun", "Verb", "Plural", "PastTense".
"""

from __future__ import annotations

import time
from typing import Dict, Any, Optional, List

from .base_model import BaseTextModel, AnnotatedTerm, ModelAnalysisResult
from ..components.spacy_manager import SpacyManager


# UPOS -> основные метки
POS_LABELS: Dict[str, tuple] = {
    'NOUN': ('Noun',),
    'PROPN': ('Noun', 'ProperNoun'),
    'VERB': ('Verb',),
    'AUX': ('Verb', 'Auxiliary'),
    'ADJ': ('Adjective',),
    'ADV': ('Adverb',),
    'ADP': ('Preposition',),
    'CCONJ': ('Conjunction',),
    'SCONJ': ('Conjunction',),
    'CONJ': ('Conjunction',),
    'DET': ('Determiner',),
    'PRON': ('Pronoun',),
    'NUM': ('Value',),
    'PART': ('Particle',),
    'INTJ': ('Expression',),
    'SYM': ('Symbol',),
    'X': ('Unknown',),
}

# (признак, значение) -> дополнительная метка
MORPH_LABELS: Dict[tuple, str] = {
    ('Number', 'Sing'): 'Singular',
    ('Number', 'Plur'): 'Plural',
    ('Tense', 'Past'): 'PastTense',
    ('Tense', 'Pres'): 'PresentTense',
    ('VerbForm', 'Ger'): 'Gerund',
    ('VerbForm', 'Inf'): 'Infinitive',
    ('Degree', 'Cmp'): 'Comparative',
    ('Degree', 'Sup'): 'Superlative',
    ('Poss', 'Yes'): 'Possessive',
    ('Polarity', 'Neg'): 'Negative',
}


def token_tags(token) -> frozenset:
    """
    Строит набор меток для токена spaCy.

    Args:
        token: spacy.tokens.Token

    Returns:
        Неизменяемое множество меток
    """
    labels = set(POS_LABELS.get(token.pos_, ('Unknown',)))
    for attr in token.morph:
        key, values = attr.split('=', 1) if '=' in attr else (attr, '')
        for value in values.split(','):
            label = MORPH_LABELS.get((key, value))
            if label:
                labels.add(label)
    return frozenset(labels)


class SpacyModel(BaseTextModel):
    """Аннотатор на основе spaCy."""

    def __init__(self, model_name: str = "en_core_web_sm", include_punctuation: bool = False) -> None:
        self.model_name = model_name
        self.include_punctuation = include_punctuation
        self._nlp = None

    def load(self) -> None:
        if self._nlp is not None:
            return
        self._nlp = SpacyManager().get_nlp(self.model_name)

    def analyze_text(self, text: str) -> ModelAnalysisResult:
        start = time.time()
        if not text:
            return ModelAnalysisResult(sentence_count=0, terms=[], processing_time_ms=0.0,
                                       model_name=self.model_name, model_type="spacy")
        if self._nlp is None:
            self.load()
        doc = self._nlp(text)
        sentence_count = sum(1 for _ in doc.sents)
        terms: List[AnnotatedTerm] = []
        for token in doc:
            if token.is_space:
                continue
            if token.is_punct and not self.include_punctuation:
                continue
            terms.append(AnnotatedTerm(
                text=token.text,
                normal=token.norm_ or token.text.lower(),
                root=token.lemma_.lower() or None,
                tags=token_tags(token),
            ))
        elapsed = (time.time() - start) * 1000.0
        return ModelAnalysisResult(sentence_count=sentence_count, terms=terms, processing_time_ms=elapsed,
                                   model_name=self.model_name, model_type="spacy")

    def unload(self) -> None:
        self._nlp = None

    def get_model_info(self) -> Dict[str, Any]:
        return {
            "name": self.model_name,
            "type": "spacy",
            "loaded": self._nlp is not None,
        }
