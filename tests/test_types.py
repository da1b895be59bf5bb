import dataclasses

import pytest

from meili.types import DocIndex, DocumentId, Highlight


def test_document_id_accepts_full_u64_range():
    top = DocumentId(2**64 - 1)
    assert int(top) == 2**64 - 1
    assert int(DocumentId(0)) == 0


@pytest.mark.parametrize("value", [-1, 2**64])
def test_document_id_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        DocumentId(value)


def test_document_id_rejects_non_integer():
    with pytest.raises(TypeError):
        DocumentId("12")
    with pytest.raises(TypeError):
        DocumentId(True)


def test_document_id_ordering_and_hash():
    ids = [DocumentId(5), DocumentId(1), DocumentId(3)]
    assert [int(i) for i in sorted(ids)] == [1, 3, 5]
    assert len({DocumentId(7), DocumentId(7)}) == 1


def test_doc_index_orders_by_document_first():
    a = DocIndex(DocumentId(1), attribute=9, word_index=9, char_index=9, char_length=9)
    b = DocIndex(DocumentId(2), attribute=0, word_index=0, char_index=0, char_length=0)
    assert a < b
    assert sorted([b, a]) == [a, b]


def test_doc_index_rejects_large_u16_field():
    with pytest.raises(ValueError):
        DocIndex(DocumentId(1), attribute=65536, word_index=0, char_index=0, char_length=0)


def test_doc_index_requires_document_id_type():
    with pytest.raises(TypeError):
        DocIndex(1, attribute=0, word_index=0, char_index=0, char_length=0)


def test_highlight_ordering_follows_field_order():
    h1 = Highlight(attribute=0, char_index=10, char_length=1)
    h2 = Highlight(attribute=1, char_index=0, char_length=1)
    h3 = Highlight(attribute=1, char_index=0, char_length=2)
    assert sorted([h3, h2, h1]) == [h1, h2, h3]


def test_highlight_is_immutable_and_replaceable():
    h = Highlight(attribute=2, char_index=4, char_length=3)
    moved = dataclasses.replace(h, char_index=1)
    assert moved.char_index == 1
    assert moved.attribute == h.attribute
    with pytest.raises(dataclasses.FrozenInstanceError):
        h.char_index = 0  # type: ignore[misc]


def test_highlight_rejects_negative():
    with pytest.raises(ValueError):
        Highlight(attribute=0, char_index=-1, char_length=0)