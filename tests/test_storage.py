"""
Тесты для файловых хранилищ: истории анализов и пользовательских стоп-слов.
"""

import json

import pytest

from textscope.components.text_pipeline import TextAnalysisPipeline
from textscope.exceptions import StorageError
from textscope.storage import CustomStopwordStore, HistoryEntry, HistoryStore


@pytest.fixture
def analysis_result(fake_annotator, sample_texts):
    return TextAnalysisPipeline(fake_annotator).analyze(sample_texts["simple"])


class TestHistoryStore:
    """Тесты для HistoryStore."""

    def test_save_and_get(self, temp_directory, analysis_result, sample_texts):
        store = HistoryStore(temp_directory / "history.json", limit=5)
        entry = store.save("alice", sample_texts["simple"], analysis_result)

        entries = store.get("alice")
        assert entries == [entry]
        assert entries[0].result == analysis_result
        assert entries[0].text == sample_texts["simple"]
        assert entry.timestamp > 0
        assert entry.id

    def test_newest_first(self, temp_directory, analysis_result):
        store = HistoryStore(temp_directory / "history.json", limit=5)
        first = store.save("alice", "first", analysis_result)
        second = store.save("alice", "second", analysis_result)

        assert [e.id for e in store.get("alice")] == [second.id, first.id]

    def test_limit(self, temp_directory, analysis_result):
        store = HistoryStore(temp_directory / "history.json", limit=3)
        for i in range(5):
            store.save("alice", f"text {i}", analysis_result)

        entries = store.get("alice")
        assert [e.text for e in entries] == ["text 4", "text 3", "text 2"]

    def test_users_are_separate(self, temp_directory, analysis_result):
        store = HistoryStore(temp_directory / "history.json")
        store.save("alice", "a", analysis_result)
        store.save("bob", "b", analysis_result)

        assert [e.text for e in store.get("alice")] == ["a"]
        assert [e.text for e in store.get("bob")] == ["b"]
        assert store.get("carol") == []

    def test_clear(self, temp_directory, analysis_result):
        store = HistoryStore(temp_directory / "history.json")
        store.save("alice", "a", analysis_result)
        store.save("bob", "b", analysis_result)
        store.clear("alice")

        assert store.get("alice") == []
        assert len(store.get("bob")) == 1

    def test_persisted_as_json(self, temp_directory, analysis_result):
        path = temp_directory / "nested" / "history.json"
        HistoryStore(path).save("alice", "a", analysis_result)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["alice"][0]["result"]["hasData"] is True
        assert HistoryStore(path).get("alice")[0].text == "a"

    def test_entry_roundtrip(self, analysis_result):
        entry = HistoryEntry(id="abc", timestamp=1700000000000, text="t", result=analysis_result)
        assert HistoryEntry.from_dict(entry.to_dict()) == entry

    def test_default_limit_from_config(self, temp_directory):
        assert HistoryStore(temp_directory / "history.json").limit == 50

    def test_corrupt_file_raises_storage_error(self, temp_directory):
        path = temp_directory / "history.json"
        path.write_text("{\"alice\": [", encoding="utf-8")
        with pytest.raises(StorageError, match="повреждён"):
            HistoryStore(path).get("alice")

    def test_unexpected_structure(self, temp_directory):
        path = temp_directory / "history.json"
        path.write_text(json.dumps(["not", "a", "mapping"]), encoding="utf-8")
        with pytest.raises(StorageError):
            HistoryStore(path).get("alice")

    def test_malformed_entry(self, temp_directory):
        path = temp_directory / "history.json"
        path.write_text(json.dumps({"alice": [{"text": "no id"}]}), encoding="utf-8")
        with pytest.raises(StorageError, match="alice"):
            HistoryStore(path).get("alice")


class TestCustomStopwordStore:
    """Тесты для CustomStopwordStore."""

    def test_empty_by_default(self, temp_directory):
        assert CustomStopwordStore(temp_directory / "stopwords.json").words() == ()

    def test_add_normalizes(self, temp_directory):
        store = CustomStopwordStore(temp_directory / "stopwords.json")
        assert store.add("  Lorem ") is True
        assert store.words() == ("lorem",)

    def test_add_rejects_blank_and_duplicates(self, temp_directory):
        store = CustomStopwordStore(temp_directory / "stopwords.json")
        store.add("lorem")
        assert store.add("LOREM") is False
        assert store.add("   ") is False
        assert store.words() == ("lorem",)

    def test_remove(self, temp_directory):
        store = CustomStopwordStore(temp_directory / "stopwords.json")
        store.add("lorem")
        store.add("ipsum")
        assert store.remove("Lorem") is True
        assert store.remove("dolor") is False
        assert store.words() == ("ipsum",)

    def test_clear(self, temp_directory):
        store = CustomStopwordStore(temp_directory / "stopwords.json")
        store.add("lorem")
        store.clear()
        assert store.words() == ()

    def test_persistence(self, temp_directory):
        path = temp_directory / "stopwords.json"
        store = CustomStopwordStore(path)
        store.add("lorem")
        store.add("ipsum")

        assert CustomStopwordStore(path).words() == ("lorem", "ipsum")
        assert json.loads(path.read_text(encoding="utf-8")) == ["lorem", "ipsum"]

    def test_load_normalizes_stored_words(self, temp_directory):
        path = temp_directory / "stopwords.json"
        path.write_text(json.dumps(["Lorem", "lorem ", "", "IPSUM"]), encoding="utf-8")
        assert CustomStopwordStore(path).words() == ("lorem", "ipsum")

    def test_words_used_by_pipeline(self, temp_directory, fake_annotator):
        store = CustomStopwordStore(temp_directory / "stopwords.json")
        store.add("kiwi")
        result = TextAnalysisPipeline(fake_annotator).analyze("kiwi mango", custom_stopwords=store.words())
        assert result.stopwords.removed == ("kiwi",)

    def test_corrupt_file_raises_storage_error(self, temp_directory):
        path = temp_directory / "stopwords.json"
        path.write_bytes(b"\xff\xfe not json")
        with pytest.raises(StorageError):
            CustomStopwordStore(path)
