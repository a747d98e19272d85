import sys
from pathlib import Path

import pytest

# Пакет лежит в src/, делаем его импортируемым без установки
SRC_DIR = Path(__file__).resolve().parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from textscope.components.spacy_manager import SpacyManager  # noqa: E402


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы английских текстов для тестирования."""
    from .fixtures.sample_texts import (
        SAMPLE_SIMPLE_TEXT, SAMPLE_COMPLEX_TEXT, SAMPLE_REPEATED_TEXT, SAMPLE_HTML_TEXT,
    )

    return {
        "simple": SAMPLE_SIMPLE_TEXT,
        "complex": SAMPLE_COMPLEX_TEXT,
        "repeated": SAMPLE_REPEATED_TEXT,
        "html": SAMPLE_HTML_TEXT,
    }


@pytest.fixture
def fake_annotator():
    """Детерминированный аннотатор без spaCy."""
    from .utils.fake_annotator import FakeAnnotator

    return FakeAnnotator()


@pytest.fixture
def fake_nlp(monkeypatch):
    """Подменяет spacy.load заглушкой FakeNLP и возвращает её экземпляр."""
    import spacy
    from .utils.fake_nlp import FakeNLP

    nlp = FakeNLP()
    loaded = []

    def fake_load(name, exclude=None, **kwargs):
        loaded.append((name, tuple(exclude or ())))
        return nlp

    monkeypatch.setattr(spacy, "load", fake_load)
    nlp.loaded = loaded
    return nlp


@pytest.fixture(autouse=True)
def reset_spacy_manager():
    """Каждый тест начинает с пустого кэша моделей spaCy."""
    SpacyManager._instance = None
    SpacyManager._models.clear()
    yield
    SpacyManager._instance = None
    SpacyManager._models.clear()


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
