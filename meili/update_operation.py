"""Kinds of update that can be applied to an index."""

from __future__ import annotations

import enum


class UpdateOperation(enum.Enum):
    """An update kind, displayed by its name."""

    CLEAR_ALL_DOCUMENTS = "ClearAllDocuments"
    DOCUMENTS_ADDITION = "DocumentsAddition"
    DOCUMENTS_DELETION = "DocumentsDeletion"
    SYNONYMS_ADDITION = "SynonymsAddition"
    SYNONYMS_DELETION = "SynonymsDelettion"
    STOP_WORDS_ADDITION = "StopWordsAddition"
    STOP_WORDS_DELETION = "StopWordsDeletion"
    SCHEMA = "Schema"
    CONFIG = "Config"

    def __str__(self) -> str:
        return self.value