from .base_model import BaseTextModel, AnnotatedTerm, ModelAnalysisResult
from .spacy_model import SpacyModel
from .model_factory import ModelFactory

__all__ = [
    "BaseTextModel",
    "AnnotatedTerm",
    "ModelAnalysisResult",
    "SpacyModel",
    "ModelFactory",
]
