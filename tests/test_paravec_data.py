import pytest

from paravec_data import FileLabelAwareIterator, LabelledDocument, LabelsSource, common_preprocess, tokenize


def test_iterator_yields_every_file_with_folder_label(corpus):
    iterator = FileLabelAwareIterator(corpus)
    docs = list(iterator)
    assert len(docs) == len(iterator) == 3
    assert docs[0] == LabelledDocument(label="music", content="The band played a new song.", name="a.txt")
    assert [d.label for d in docs] == ["music", "sport", "sport"]


def test_iterator_is_reiterable(corpus):
    iterator = FileLabelAwareIterator(corpus)
    assert list(iterator) == list(iterator)


def test_labels_are_sorted_folder_names(corpus):
    assert FileLabelAwareIterator(corpus).labels == ["music", "sport"]


def test_labels_across_several_source_folders(corpus, tmp_path):
    other = tmp_path / "other"
    (other / "sport").mkdir(parents=True)
    (other / "science").mkdir()
    (other / "sport" / "c.txt").write_text("Final whistle.", encoding="utf-8")
    iterator = FileLabelAwareIterator(corpus, other)
    assert iterator.labels == ["music", "sport", "science"]
    assert len(iterator) == 4


def test_missing_folder_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileLabelAwareIterator(tmp_path / "nope")


def test_folder_without_labels_raises(tmp_path):
    (tmp_path / "loose.txt").write_text("no label", encoding="utf-8")
    with pytest.raises(ValueError):
        FileLabelAwareIterator(tmp_path)


def test_labels_source_keeps_first_seen_order():
    source = LabelsSource(["b", "a", "b"])
    source.store_label("c")
    assert source.labels == ["b", "a", "c"]


def test_common_preprocess_strips_digits_and_punctuation():
    assert common_preprocess("Hello,") == "hello"
    assert common_preprocess("(U.S.A.)") == "usa"
    assert common_preprocess("2024!") == ""
    assert common_preprocess("don't") == "dont"


def test_tokenize_drops_empty_tokens():
    assert tokenize("The 3 cats; sat  on\tthe MAT.") == ["the", "cats", "sat", "on", "the", "mat"]


def test_tokenize_without_preprocessor():
    assert tokenize("A b.", preprocessor=None) == ["A", "b."]


def test_titles_are_unique_per_file(corpus):
    titles = [doc.title for doc in FileLabelAwareIterator(corpus)]
    assert titles == ["music/a.txt", "sport/a.txt", "sport/b.txt"]
    assert LabelledDocument("sport", "text").title == "sport"
