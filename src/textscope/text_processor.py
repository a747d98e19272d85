"""
Модуль для загрузки текста из файлов

Содержит функции для:
- Чтения текстовых файлов с подбором кодировки
- Удаления HTML тегов
- Извлечения текста из документов Word (.docx)
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import docx
from bs4 import BeautifulSoup

from .config import config
from .exceptions import UnsupportedDocumentError

logger = logging.getLogger(__name__)

HTML_EXTENSIONS = ('.html', '.htm')


class DocumentReader:
    """Класс для получения исходного текста из файлов"""

    def __init__(self, strip_html: Optional[bool] = None,
                 text_extensions: Optional[Iterable[str]] = None) -> None:
        """
        Args:
            strip_html: Извлекать ли видимый текст из HTML (по умолчанию из config)
            text_extensions: Расширения, читаемые как простой текст (по умолчанию из config)
        """
        self.strip_html = config.is_strip_html_enabled() if strip_html is None else strip_html
        extensions = config.get_text_extensions() if text_extensions is None else text_extensions
        self.text_extensions = {ext.lower() for ext in extensions}

    def remove_html_tags(self, text: str) -> str:
        """
        Удаляет HTML теги из текста используя BeautifulSoup

        Args:
            text: HTML текст

        Returns:
            Очищенный текст без HTML тегов
        """
        if not text:
            return ""

        if '<' in text and '>' in text:
            soup = BeautifulSoup(text, "html.parser")
            for tag in soup(["script", "style"]):
                tag.decompose()
            return soup.get_text()
        return text

    def read_text_file(self, path: Path) -> str:
        """Читает текстовый файл, перебирая распространённые кодировки."""
        for enc in ("utf-8", "utf-8-sig", "cp1252"):
            try:
                return path.read_text(encoding=enc)
            except UnicodeDecodeError:
                continue
        return path.read_bytes().decode("utf-8", "ignore")

    def read_docx(self, path: Path) -> str:
        """Извлекает текст абзацев из документа Word."""
        document = docx.Document(str(path))
        return "\n".join(par.text for par in document.paragraphs)

    def read(self, filepath: Union[str, Path]) -> str:
        """
        Читает файл и возвращает исходный текст для анализа

        Args:
            filepath: Путь к файлу

        Returns:
            Текст файла

        Raises:
            UnsupportedDocumentError: если формат файла не поддерживается
            FileNotFoundError: если файл не существует
        """
        path = Path(filepath)
        suffix = path.suffix.lower()

        if suffix == '.docx':
            if not path.exists():
                raise FileNotFoundError(path)
            text = self.read_docx(path)
        elif suffix in self.text_extensions:
            text = self.read_text_file(path)
            if suffix in HTML_EXTENSIONS and self.strip_html:
                text = self.remove_html_tags(text)
        else:
            raise UnsupportedDocumentError(
                f"Формат файла не поддерживается: {path.name} "
                f"(поддерживаются: {', '.join(sorted(self.text_extensions | {'.docx'}))})"
            )

        logger.debug(f"Прочитан файл {path}: {len(text)} символов")
        return text
