import pytest

from meili.update_operation import UpdateOperation


@pytest.mark.parametrize(
    ("operation", "text"),
    [
        (UpdateOperation.CLEAR_ALL_DOCUMENTS, "ClearAllDocuments"),
        (UpdateOperation.DOCUMENTS_ADDITION, "DocumentsAddition"),
        (UpdateOperation.DOCUMENTS_DELETION, "DocumentsDeletion"),
        (UpdateOperation.SYNONYMS_ADDITION, "SynonymsAddition"),
        (UpdateOperation.SYNONYMS_DELETION, "SynonymsDelettion"),
        (UpdateOperation.STOP_WORDS_ADDITION, "StopWordsAddition"),
        (UpdateOperation.STOP_WORDS_DELETION, "StopWordsDeletion"),
        (UpdateOperation.SCHEMA, "Schema"),
        (UpdateOperation.CONFIG, "Config"),
    ],
)
def test_display(operation, text):
    assert str(operation) == text
    assert f"{operation}" == text


def test_all_operations_have_distinct_names():
    names = [UpdateOperation.__str__(operation) for operation in UpdateOperation]
    assert len(names) == 9
    assert len(set(names)) == len(names)
    assert "SynonymsDelettion" in names