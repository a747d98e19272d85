#!/usr/bin/env python3
"""
Интерфейс командной строки для TextScope

Команды:
1. analyze - анализ текста (из аргумента, файла или stdin)
2. history - просмотр и очистка истории анализов
3. stopwords - управление пользовательскими стоп-словами
"""

import sys
import json
import argparse
from typing import List, Optional

from .config import config
from .exceptions import TextScopeError
from .interfaces.text_processor import AnalysisResult

DEFAULT_USER = "default"


def print_summary(result: AnalysisResult) -> None:
    """Печатает краткую сводку результата анализа"""
    if not result.has_data:
        print("ℹ️ Текст пустой — анализировать нечего")
        return

    lexical = result.lexical
    print("📊 Лексическая статистика:")
    print(f"   Предложений: {lexical.sentence_count}")
    print(f"   Слов: {lexical.word_count}")
    print(f"   Символов: {lexical.char_count}")
    print(f"   Лексическая плотность: {lexical.density:.1f}%")

    if lexical.word_freq:
        print("\n🔝 Самые частые слова:")
        for entry in lexical.word_freq:
            print(f"   {entry.word}: {entry.count}")

    print(f"\n🧹 Удалено стоп-слов: {result.stopwords.removed_count}")
    print(f"   Очищенный текст: {result.stopwords.clean_text}")

    sentiment = result.sentiment
    print(f"\n💬 Тональность: {sentiment.verdict.value} (балл {sentiment.score})")
    for entry in sentiment.breakdown:
        print(f"   {entry.word}: {entry.score:+d}")


def run_analyze(args) -> int:
    """Анализирует текст и при необходимости сохраняет историю/экспорт"""
    from .components.text_pipeline import TextAnalysisPipeline
    from .components.exporter import ResultExporter
    from .storage import CustomStopwordStore, HistoryStore
    from .text_processor import DocumentReader

    if args.file:
        text = DocumentReader().read(args.file)
    elif args.text is not None:
        text = args.text
    else:
        text = sys.stdin.read()

    custom_stopwords = CustomStopwordStore().words()
    pipeline = TextAnalysisPipeline.from_config(config, custom_stopwords=custom_stopwords)
    if args.parallel:
        pipeline.parallel = True

    result = pipeline.analyze(text)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_summary(result)

    if result.has_data and not args.no_history:
        HistoryStore().save(args.user, text, result)

    if args.export:
        exported = ResultExporter().export(result, args.export)
        print(f"✅ Результаты экспортированы в: {exported}")

    return 0


def run_history(args) -> int:
    """Показывает или очищает историю пользователя"""
    from .storage import HistoryStore

    store = HistoryStore()
    if args.action == 'clear':
        store.clear(args.user)
        print(f"🗑️ История пользователя '{args.user}' очищена")
        return 0

    entries = store.get(args.user)
    if not entries:
        print("📭 История пуста")
        return 0
    for entry in entries:
        preview = entry.text.strip().replace("\n", " ")[:60]
        print(f"{entry.id}  {entry.timestamp}  {entry.result.sentiment.verdict.value:<8}  {preview}")
    return 0


def run_stopwords(args) -> int:
    """Управляет списком пользовательских стоп-слов"""
    from .storage import CustomStopwordStore

    store = CustomStopwordStore()
    if args.action == 'add':
        if store.add(args.word or ""):
            print(f"✅ Добавлено: {args.word.strip().lower()}")
        else:
            print("⚠️ Слово пустое или уже в списке")
    elif args.action == 'remove':
        if store.remove(args.word or ""):
            print(f"✅ Удалено: {args.word.strip().lower()}")
        else:
            print("⚠️ Слова нет в списке")
    else:
        words = store.words()
        if not words:
            print("📭 Пользовательских стоп-слов нет")
        for word in words:
            print(word)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textscope",
        description="TextScope - многоаспектный анализ английского текста",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  textscope analyze "I love this! I hate that."
  textscope analyze --file essay.docx --export report.xlsx
  textscope history list --user alice
  textscope stopwords add lorem
        """
    )
    sub = parser.add_subparsers(dest='command', required=True)

    analyze = sub.add_parser('analyze', help='Проанализировать текст')
    analyze.add_argument('text', nargs='?', help='Текст для анализа (по умолчанию stdin)')
    analyze.add_argument('--file', help='Прочитать текст из файла (.txt, .md, .html, .docx, ...)')
    analyze.add_argument('--user', default=DEFAULT_USER, help='Пользователь для истории')
    analyze.add_argument('--json', action='store_true', help='Вывести полный результат в JSON')
    analyze.add_argument('--export', help='Экспортировать результат (.xlsx, .csv, .json)')
    analyze.add_argument('--parallel', action='store_true', help='Запустить компоненты параллельно')
    analyze.add_argument('--no-history', action='store_true', help='Не сохранять результат в историю')
    analyze.set_defaults(func=run_analyze)

    history = sub.add_parser('history', help='История анализов')
    history.add_argument('action', choices=['list', 'clear'])
    history.add_argument('--user', default=DEFAULT_USER)
    history.set_defaults(func=run_history)

    stopwords = sub.add_parser('stopwords', help='Пользовательские стоп-слова')
    stopwords.add_argument('action', choices=['list', 'add', 'remove'])
    stopwords.add_argument('word', nargs='?')
    stopwords.set_defaults(func=run_stopwords)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Главная функция CLI"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, 'action', None) in ('add', 'remove') and not args.word:
        parser.error("укажите слово")

    try:
        return args.func(args)
    except (TextScopeError, FileNotFoundError) as e:
        print(f"❌ {e}")
        return 1
    except RuntimeError as e:
        print(f"❌ Ошибка: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
