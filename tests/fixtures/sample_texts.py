"""Наборы английских текстов для тестирования.

Содержит простые и сложные примеры, а также HTML-текст для проверки извлечения.
"""

SAMPLE_SIMPLE_TEXT = "I love this! I hate that."


SAMPLE_COMPLEX_TEXT = """
The committee's decision was surprisingly good, although several members
were not happy. Running meetings twice a week is exhausting; the boxes of
reports keep growing, and nobody wants to read them. Still, the final report
was wonderful and everyone agreed that the project was a success.
""".strip()


SAMPLE_REPEATED_TEXT = """
Apple banana apple. Cherry banana apple! Date elderberry fig grape honeydew
kiwi lemon mango. Banana cherry.
""".strip()


SAMPLE_HTML_TEXT = """
<html>
  <head><style>p { color: red; }</style></head>
  <body>
    <p>The house is big and <strong>beautiful</strong>.</p>
    <p>The dog eats in the garden.</p>
  </body>
</html>
""".strip()
