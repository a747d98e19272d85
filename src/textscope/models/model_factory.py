"""
Фабрика аннотаторов: проверяет раздел annotation.primary_model и
строит по нему реализацию BaseTextModel.

Ожидаемый формат:
{
  "type": "spacy",
  "name": "en_core_web_sm",
  "include_punctuation": false
}
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping

from ..exceptions import AnnotationUnavailable, AnnotatorConfigError
from .base_model import BaseTextModel
from .spacy_model import SpacyModel

logger = logging.getLogger(__name__)

DEFAULT_SPACY_MODEL = "en_core_web_sm"
KNOWN_KEYS = frozenset({"type", "name", "include_punctuation"})


def _build_spacy(settings: Dict[str, Any]) -> BaseTextModel:
    return SpacyModel(model_name=settings["name"], include_punctuation=settings["include_punctuation"])


# тип аннотатора -> конструктор по проверенным настройкам
ANNOTATOR_BUILDERS: Dict[str, Callable[[Dict[str, Any]], BaseTextModel]] = {
    "spacy": _build_spacy,
}


class ModelFactory:
    """Создаёт аннотаторы на основе конфигурации."""

    @staticmethod
    def validate(model_cfg: Mapping[str, Any]) -> Dict[str, Any]:
        """Проверяет настройки аннотатора и подставляет значения по умолчанию.

        Args:
            model_cfg: Раздел annotation.primary_model

        Returns:
            Нормализованные настройки: type в нижнем регистре, name, include_punctuation

        Raises:
            AnnotatorConfigError: раздел пуст, тип неизвестен или значения неверного типа
        """
        if not isinstance(model_cfg, Mapping) or not model_cfg:
            raise AnnotatorConfigError("Раздел annotation.primary_model не задан")

        model_type = model_cfg.get("type")
        if not isinstance(model_type, str) or model_type.strip().lower() not in ANNOTATOR_BUILDERS:
            supported = ", ".join(sorted(ANNOTATOR_BUILDERS))
            raise AnnotatorConfigError(f"Неизвестный тип аннотатора {model_type!r} (поддерживаются: {supported})")

        name = model_cfg.get("name") or DEFAULT_SPACY_MODEL
        if not isinstance(name, str) or not name.strip() or any(ch.isspace() for ch in name.strip()):
            raise AnnotatorConfigError(f"Некорректное имя модели spaCy: {name!r}")

        include_punctuation = model_cfg.get("include_punctuation", False)
        if not isinstance(include_punctuation, bool):
            raise AnnotatorConfigError(
                f"include_punctuation должен быть true/false, получено {include_punctuation!r}"
            )

        unknown = sorted(set(model_cfg) - KNOWN_KEYS)
        if unknown:
            logger.warning(f"Неизвестные ключи annotation.primary_model проигнорированы: {unknown}")

        return {
            "type": model_type.strip().lower(),
            "name": name.strip(),
            "include_punctuation": include_punctuation,
        }

    @staticmethod
    def create(model_cfg: Mapping[str, Any]) -> BaseTextModel:
        """Создаёт аннотатор из словаря настроек (без загрузки модели).

        Raises:
            AnnotatorConfigError: некорректные настройки
        """
        settings = ModelFactory.validate(model_cfg)
        logger.debug(f"Аннотатор: {settings}")
        return ANNOTATOR_BUILDERS[settings["type"]](settings)

    @staticmethod
    def create_and_load_or_fail(model_cfg: Mapping[str, Any]) -> BaseTextModel:
        """Создаёт и загружает аннотатор или выбрасывает ошибку (Fail Fast).

        Args:
            model_cfg: Конфигурация модели

        Returns:
            Загруженный аннотатор

        Raises:
            AnnotatorConfigError: некорректные настройки
            AnnotationUnavailable: модель не удалось загрузить
        """
        model = ModelFactory.create(model_cfg)
        try:
            model.load()
        except Exception as e:
            raise AnnotationUnavailable(f"Не удалось загрузить модель: {e}") from e
        return model
