"""
Централизованный менеджер spaCy для проекта.

Обеспечивает единообразную загрузку моделей и исключение ненужных
компонентов пайплайна. Загруженные модели используются только для чтения
и разделяются между всеми аннотаторами процесса.
"""

import threading
import spacy
import logging
from typing import Optional, Dict, Any, List
from ..config import config

logger = logging.getLogger(__name__)

# NER не нужен ни для сегментации, ни для POS/лемм
EXCLUDED_COMPONENTS: List[str] = ['ner']


class SpacyManager:
    """
    Централизованный менеджер spaCy для всего проекта.

    Обеспечивает:
    - Единую загрузку каждой модели (по имени)
    - Исключение NER из пайплайна
    - Понятную ошибку с подсказкой по установке модели
    """

    _instance: Optional['SpacyManager'] = None
    _models: Dict[str, spacy.Language] = {}
    _lock = threading.Lock()

    def __new__(cls) -> 'SpacyManager':
        """Синглтон для избежания множественной загрузки моделей."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def _load_model(self, model_name: str) -> spacy.Language:
        """Загружает модель spaCy с исключением ненужных компонентов."""
        try:
            nlp = spacy.load(model_name, exclude=EXCLUDED_COMPONENTS)
        except Exception as e:
            raise RuntimeError(
                f"Не удалось загрузить модель spaCy '{model_name}'. "
                f"Установите модель: python -m spacy download {model_name}"
            ) from e

        logger.info(f"SpaCy модель {model_name} загружена (исключены: {EXCLUDED_COMPONENTS})")
        return nlp

    def get_nlp(self, model_name: Optional[str] = None) -> spacy.Language:
        """
        Возвращает загруженную модель spaCy.

        Args:
            model_name: Название модели (по умолчанию из config)

        Returns:
            Объект spacy.Language
        """
        model_name = model_name or config.get_spacy_model()
        with self._lock:
            nlp = self._models.get(model_name)
            if nlp is None:
                nlp = self._load_model(model_name)
                self._models[model_name] = nlp
        return nlp

    def unload(self, model_name: Optional[str] = None) -> None:
        """Выгружает одну модель или все модели, если имя не указано."""
        with self._lock:
            if model_name is None:
                self._models.clear()
            else:
                self._models.pop(model_name, None)

    def get_model_info(self) -> Dict[str, Any]:
        """Возвращает информацию о загруженных моделях."""
        return {
            'loaded': sorted(self._models),
            'excluded_components': list(EXCLUDED_COMPONENTS)
        }
