"""
Тесты обёртки spaCy, менеджера моделей и фабрики аннотаторов.

spaCy-модель подменяется заглушкой FakeNLP, поэтому en_core_web_sm
для этих тестов не нужна.
"""

import pytest
import spacy

from textscope.components.spacy_manager import EXCLUDED_COMPONENTS, SpacyManager
from textscope.exceptions import AnnotationUnavailable, AnnotatorConfigError
from textscope.models.model_factory import ModelFactory
from textscope.models.spacy_model import SpacyModel, token_tags

from .utils.fake_nlp import FakeToken


class TestTokenTags:
    """Тесты для перевода UPOS и морфологии в метки."""

    def test_noun_plural(self):
        token = FakeToken("dogs", "NOUN", "dog", ["Number=Plur"])
        assert token_tags(token) == frozenset({"Noun", "Plural"})

    def test_proper_noun(self):
        token = FakeToken("Paris", "PROPN", "Paris", ["Number=Sing"])
        assert token_tags(token) == frozenset({"Noun", "ProperNoun", "Singular"})

    def test_auxiliary_past(self):
        token = FakeToken("were", "AUX", "be", ["Mood=Ind", "Number=Plur", "Tense=Past"])
        assert token_tags(token) == frozenset({"Verb", "Auxiliary", "Plural", "PastTense"})

    def test_gerund(self):
        token = FakeToken("running", "VERB", "run", ["Aspect=Prog", "VerbForm=Ger"])
        assert token_tags(token) == frozenset({"Verb", "Gerund"})

    def test_comparative_and_negative(self):
        assert token_tags(FakeToken("happier", "ADJ", "happy", ["Degree=Cmp"])) == \
            frozenset({"Adjective", "Comparative"})
        assert token_tags(FakeToken("not", "PART", "not", ["Polarity=Neg"])) == \
            frozenset({"Particle", "Negative"})

    def test_multi_value_feature(self):
        token = FakeToken("they", "PRON", "they", ["Number=Sing,Plur"])
        assert token_tags(token) == frozenset({"Pronoun", "Singular", "Plural"})

    def test_unknown_pos(self):
        token = FakeToken("foo", "WHATEVER", "foo", [])
        assert token_tags(token) == frozenset({"Unknown"})


class TestSpacyManager:
    """Тесты для SpacyManager."""

    def test_singleton(self):
        assert SpacyManager() is SpacyManager()

    def test_model_loaded_once(self, fake_nlp):
        manager = SpacyManager()
        first = manager.get_nlp("en_core_web_sm")
        second = manager.get_nlp("en_core_web_sm")

        assert first is second is fake_nlp
        assert fake_nlp.loaded == [("en_core_web_sm", tuple(EXCLUDED_COMPONENTS))]

    def test_default_model_from_config(self, fake_nlp):
        SpacyManager().get_nlp()
        assert fake_nlp.loaded[0][0] == "en_core_web_sm"

    def test_missing_model_hint(self, monkeypatch):
        def failing_load(name, exclude=None, **kwargs):
            raise OSError(f"[E050] Can't find model '{name}'")

        monkeypatch.setattr(spacy, "load", failing_load)
        with pytest.raises(RuntimeError, match="python -m spacy download xx_missing"):
            SpacyManager().get_nlp("xx_missing")

    def test_unload(self, fake_nlp):
        manager = SpacyManager()
        manager.get_nlp("en_core_web_sm")
        assert manager.get_model_info()['loaded'] == ["en_core_web_sm"]

        manager.unload("en_core_web_sm")
        assert manager.get_model_info()['loaded'] == []


class TestSpacyModel:
    """Тесты для SpacyModel."""

    def test_lazy_load(self, fake_nlp):
        model = SpacyModel()
        assert model.get_model_info()['loaded'] is False
        model.load()
        assert model.get_model_info() == {"name": "en_core_web_sm", "type": "spacy", "loaded": True}

    def test_analyze_text(self, fake_nlp):
        result = SpacyModel().analyze_text("The dogs were running. The cat sat!")

        assert result.sentence_count == 2
        assert result.model_type == "spacy"
        assert [t.text for t in result.terms] == ["The", "dogs", "were", "running", "The", "cat", "sat"]

        running = result.terms[3]
        assert running.normal == "running"
        assert running.root == "run"
        assert running.tags == frozenset({"Verb", "Gerund"})

    def test_single_call_per_analysis(self, fake_nlp):
        SpacyModel().analyze_text("I love this! I hate that.")
        assert fake_nlp.calls == 1

    def test_include_punctuation(self, fake_nlp):
        result = SpacyModel(include_punctuation=True).analyze_text("Stop!")
        assert [t.text for t in result.terms] == ["Stop", "!"]

    def test_space_tokens_skipped(self, fake_nlp):
        result = SpacyModel(include_punctuation=True).analyze_text("One.\n\nTwo.")
        assert "\n\n" not in [t.text for t in result.terms]

    def test_empty_text(self, fake_nlp):
        result = SpacyModel().analyze_text("")
        assert result.sentence_count == 0
        assert result.terms == []
        assert fake_nlp.calls == 0

    def test_segment_and_annotate(self, fake_nlp):
        model = SpacyModel()
        assert model.segment("One. Two. Three.") == 3
        assert [t.text for t in model.annotate("cat sat")] == ["cat", "sat"]

    def test_unload(self, fake_nlp):
        model = SpacyModel()
        model.load()
        model.unload()
        assert model.get_model_info()['loaded'] is False


class TestModelFactory:
    """Тесты для ModelFactory."""

    def test_create_spacy(self):
        model = ModelFactory.create({"type": "spacy", "name": "en_core_web_md", "include_punctuation": True})
        assert isinstance(model, SpacyModel)
        assert model.model_name == "en_core_web_md"
        assert model.include_punctuation is True

    def test_default_name(self):
        model = ModelFactory.create({"type": "SpaCy"})
        assert model.model_name == "en_core_web_sm"

    def test_unknown_type(self):
        with pytest.raises(AnnotatorConfigError, match="stanza"):
            ModelFactory.create({"type": "stanza"})

    @pytest.mark.parametrize("model_cfg", [{}, None, {"name": "en_core_web_sm"}, {"type": 3}])
    def test_missing_section_or_type(self, model_cfg):
        with pytest.raises(AnnotatorConfigError):
            ModelFactory.create(model_cfg)

    @pytest.mark.parametrize("model_cfg", [
        {"type": "spacy", "name": 42},
        {"type": "spacy", "name": "en core"},
        {"type": "spacy", "include_punctuation": "yes"},
    ])
    def test_invalid_values(self, model_cfg):
        with pytest.raises(AnnotatorConfigError):
            ModelFactory.create(model_cfg)

    def test_validate_normalizes(self, caplog):
        settings = ModelFactory.validate({"type": " SpaCy ", "name": "", "extra": 1})
        assert settings == {"type": "spacy", "name": "en_core_web_sm", "include_punctuation": False}
        assert "extra" in caplog.text

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            ModelFactory.create({"type": "stanza"})

    def test_create_and_load_or_fail(self, fake_nlp):
        model = ModelFactory.create_and_load_or_fail({"type": "spacy"})
        assert model.get_model_info()['loaded'] is True

    def test_create_and_load_or_fail_unknown(self):
        with pytest.raises(AnnotatorConfigError):
            ModelFactory.create_and_load_or_fail({"type": "stanza"})

    def test_create_and_load_or_fail_missing_model(self, monkeypatch):
        def failing_load(name, exclude=None, **kwargs):
            raise OSError("not installed")

        monkeypatch.setattr(spacy, "load", failing_load)
        with pytest.raises(AnnotationUnavailable, match="Не удалось загрузить модель"):
            ModelFactory.create_and_load_or_fail({"type": "spacy", "name": "xx_missing"})
