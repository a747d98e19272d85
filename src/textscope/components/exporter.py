"""
Компонент для экспорта результатов анализа.

Отвечает за экспорт результатов в различные форматы:
Excel (по листу на каждое представление), CSV с потокенной таблицей,
JSON с временной меткой.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Union
import pandas as pd
from ..interfaces.text_processor import AnalysisResult, ResultExporterInterface
import logging

logger = logging.getLogger(__name__)


class ResultExporter(ResultExporterInterface):
    """Экспортёр результатов анализа.

    Все таблицы строятся только из AnalysisResult, поэтому экспорт
    согласован с тем, какие стоп-слова и словарь тональности
    использовались при анализе.
    """

    def _prepare_path(self, filepath: Union[str, Path], suffix: str) -> Path:
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix(suffix)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        return filepath

    def build_token_rows(self, result: AnalysisResult) -> List[Dict[str, Any]]:
        """
        Строит потокенную таблицу: позиция, токен, стем, стоп-слово, вес тональности.

        Флаг стоп-слова и вес берутся из result.stopwords.removed и
        result.sentiment.breakdown: обе последовательности идут в порядке
        токенов, а решение для одинакового токена внутри анализа одно и то же.

        Args:
            result: Результат анализа

        Returns:
            Список строк таблицы
        """
        removed = result.stopwords.removed
        breakdown = result.sentiment.breakdown
        removed_pos = 0
        breakdown_pos = 0

        rows = []
        for i, (token, stem) in enumerate(zip(result.tokens, result.stems)):
            is_stopword = removed_pos < len(removed) and removed[removed_pos] == token
            if is_stopword:
                removed_pos += 1

            polarity = 0
            if breakdown_pos < len(breakdown) and breakdown[breakdown_pos].word == token:
                polarity = breakdown[breakdown_pos].score
                breakdown_pos += 1

            rows.append({
                'position': i,
                'token': token,
                'stem': stem.stem,
                'is_stopword': is_stopword,
                'polarity': polarity,
            })
        return rows

    def export_to_excel(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат в Excel формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._prepare_path(filepath, '.xlsx')
        lexical = result.lexical

        lexical_df = pd.DataFrame({
            'Parameter': ['Sentences', 'Words', 'Characters', 'Lexical density (%)',
                          'Removed stopwords', 'Sentiment score', 'Verdict', 'Exported at'],
            'Value': [
                lexical.sentence_count,
                lexical.word_count,
                lexical.char_count,
                round(lexical.density, 2),
                result.stopwords.removed_count,
                result.sentiment.score,
                result.sentiment.verdict.value,
                datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
            ]
        })
        freq_df = pd.DataFrame([{'Word': e.word, 'Count': e.count} for e in lexical.word_freq],
                               columns=['Word', 'Count'])
        tokens_df = pd.DataFrame(self.build_token_rows(result),
                                 columns=['position', 'token', 'stem', 'is_stopword', 'polarity'])
        lemmas_df = pd.DataFrame([{'Original': l.original, 'Root': l.root} for l in result.lemmas],
                                 columns=['Original', 'Root'])
        pos_df = pd.DataFrame([{'Text': p.text, 'Tags': ', '.join(sorted(p.tags))} for p in result.pos],
                              columns=['Text', 'Tags'])
        sentiment_df = pd.DataFrame([{'Word': b.word, 'Score': b.score} for b in result.sentiment.breakdown],
                                    columns=['Word', 'Score'])

        with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
            lexical_df.to_excel(writer, sheet_name='Lexical', index=False)
            freq_df.to_excel(writer, sheet_name='Frequency', index=False)
            tokens_df.to_excel(writer, sheet_name='Tokens', index=False)
            lemmas_df.to_excel(writer, sheet_name='Lemmas', index=False)
            pos_df.to_excel(writer, sheet_name='POS', index=False)
            sentiment_df.to_excel(writer, sheet_name='Sentiment', index=False)

        logger.info(f"Результаты экспортированы в Excel: {filepath}")
        return filepath

    def export_to_csv(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует потокенную таблицу в CSV.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._prepare_path(filepath, '.csv')
        df = pd.DataFrame(self.build_token_rows(result),
                          columns=['position', 'token', 'stem', 'is_stopword', 'polarity'])
        df.to_csv(filepath, index=False, encoding='utf-8')
        logger.info(f"Потокенная таблица экспортирована в CSV: {filepath}")
        return filepath

    def export_to_json(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат в JSON формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._prepare_path(filepath, '.json')
        payload = {
            'exported_at': datetime.now().isoformat(timespec='seconds'),
            'result': result.to_dict(),
        }
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        logger.info(f"Результаты экспортированы в JSON: {filepath}")
        return filepath

    def export(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """Выбирает формат экспорта по расширению файла (.xlsx, .csv, .json)."""
        suffix = Path(filepath).suffix.lower()
        if suffix == '.xlsx':
            return self.export_to_excel(result, filepath)
        if suffix == '.csv':
            return self.export_to_csv(result, filepath)
        return self.export_to_json(result, filepath)
