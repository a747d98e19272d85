"""
Тесты для анализатора частотности.
"""

from textscope.components.frequency_analyzer import FrequencyAnalyzer
from textscope.interfaces.text_processor import FrequencyEntry


class TestFrequencyAnalyzer:
    """Тесты для FrequencyAnalyzer."""

    def test_init(self):
        analyzer = FrequencyAnalyzer()
        assert analyzer.min_length == 3
        assert analyzer.top_n == 10

    def test_count_frequency_lowercases_and_filters(self):
        """Стоп-слова и короткие слова не учитываются, регистр сводится к нижнему."""
        analyzer = FrequencyAnalyzer()
        counts = analyzer.count_frequency(["The", "Cat", "cat", "is", "on", "a", "MAT", "ox"])
        assert counts == {"cat": 2, "mat": 1}

    def test_count_frequency_keeps_first_occurrence_order(self):
        analyzer = FrequencyAnalyzer()
        counts = analyzer.count_frequency(["pear", "apple", "pear", "fig"])
        assert list(counts) == ["pear", "apple", "fig"]

    def test_analyze_simple(self):
        analyzer = FrequencyAnalyzer()
        result = analyzer.analyze(["I", "love", "this", "I", "hate", "that"])
        assert result == (FrequencyEntry("love", 1), FrequencyEntry("hate", 1))

    def test_analyze_sorted_descending(self):
        analyzer = FrequencyAnalyzer()
        tokens = "Apple banana apple Cherry banana apple Banana cherry".split()
        result = analyzer.analyze(tokens)
        assert result == (
            FrequencyEntry("apple", 3),
            FrequencyEntry("banana", 3),
            FrequencyEntry("cherry", 2),
        )

    def test_ties_resolved_by_first_occurrence(self):
        """При равной частоте раньше идёт слово, встретившееся первым."""
        analyzer = FrequencyAnalyzer()
        result = analyzer.analyze(["zebra", "yak", "xylophone", "yak", "zebra"])
        assert [e.word for e in result] == ["zebra", "yak", "xylophone"]

    def test_top_n_limit(self):
        """В результате не больше top_n записей."""
        words = ["word%02d" % i for i in range(25)]
        result = FrequencyAnalyzer().analyze(words)
        assert len(result) == 10
        assert result[0] == FrequencyEntry("word00", 1)

        result = FrequencyAnalyzer(top_n=3).analyze(words)
        assert len(result) == 3

    def test_min_length(self):
        analyzer = FrequencyAnalyzer(min_length=5)
        assert analyzer.analyze(["tree", "trees", "forest"]) == (
            FrequencyEntry("trees", 1),
            FrequencyEntry("forest", 1),
        )

    def test_custom_stopwords(self):
        analyzer = FrequencyAnalyzer(stopwords=frozenset({"apple"}))
        assert analyzer.analyze(["apple", "the", "kiwi"]) == (
            FrequencyEntry("the", 1),
            FrequencyEntry("kiwi", 1),
        )

    def test_get_most_frequent(self):
        analyzer = FrequencyAnalyzer()
        counts = {"alpha": 1, "beta": 3, "gamma": 2}
        assert analyzer.get_most_frequent(counts, 2) == [("beta", 3), ("gamma", 2)]
        assert analyzer.get_most_frequent(counts, 0) == []
        assert analyzer.get_most_frequent({}) == []

    def test_analyze_empty(self):
        assert FrequencyAnalyzer().analyze([]) == ()

    def test_analyzer_is_stateless(self):
        """Повторный вызов не накапливает счётчики."""
        analyzer = FrequencyAnalyzer()
        analyzer.analyze(["kiwi", "kiwi"])
        assert analyzer.analyze(["kiwi"]) == (FrequencyEntry("kiwi", 1),)
