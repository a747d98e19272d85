"""
Исключения проекта textscope.

Компоненты ядра (токенизация, стемминг, стоп-слова, частотность,
тональность) являются тотальными функциями и исключений не выбрасывают.
Единственная ошибка ядра — недоступность внешнего аннотатора.
"""


class TextScopeError(Exception):
    """Базовое исключение проекта."""


class AnnotationUnavailable(TextScopeError, RuntimeError):
    """Лингвистический аннотатор недоступен или вернул некорректные данные.

    Отличает «нет данных, потому что аннотация не удалась» от
    «нет данных, потому что текст пустой».
    """


class UnsupportedDocumentError(TextScopeError, ValueError):
    """Формат файла не поддерживается модулем загрузки текста."""


class AnnotatorConfigError(TextScopeError, ValueError):
    """Раздел annotation.primary_model задан некорректно."""


class StorageError(TextScopeError, ValueError):
    """Файл хранилища повреждён или имеет неожиданную структуру."""
