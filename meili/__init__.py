"""Schemas, tokenizer, settings and search result formatting for a search engine."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "schema",
    "tokenizer",
    "update_operation",
    "option",
    "schema_body",
    "settings",
    "search",
]