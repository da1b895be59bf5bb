# meili

Building blocks of a small search engine, written as a plain Python library:
document schemas, a word tokenizer, index settings and the formatting of
search hits (cropping, match positions, highlighting).

## Modules

- `meili.schema`: document schemas. Build one with `SchemaBuilder`, give every
  attribute a `SchemaProps` (combine `DISPLAYED`, `INDEXED` and `RANKED` with
  `|`), serialise it with `Schema.to_dict`/`from_dict`, `to_json`/`from_json`
  and `to_toml`/`from_toml`, print it with `repr()` or `Schema.pretty()`, and
  compare two schemas with `diff`, which returns `IdentChange`, `AttrMove`,
  `AttrPropsChange`, `RemovedAttr` and `NewAttr` records.
- `meili.tokenizer`: splits text into `Token`s carrying the word, its word
  position and its character position. Soft separators (whitespace, quotes,
  `- _ ' : / \`) advance the word position by 1, hard ones (`. ; , ! ? ( )`)
  by 8; CJK characters are words of their own. `Tokenizer` handles one text,
  `SeqTokenizer` a sequence of texts laid end to end, and
  `split_query_string` yields only the words. `is_cjk` tells whether a
  character is in a CJK block.
- `meili.types`: the `DocumentId`, `DocIndex` and `Highlight` records, with
  range checks on their integer fields.
- `meili.schema_body`: the client-facing schema form, a mapping of field names
  to sets of `FieldProperty` values (`SchemaBody.from_schema`, `to_schema`,
  `to_dict`, `from_dict`). A body without an identifier field gets
  `documentId` as identifier.
- `meili.settings`: index settings (`SettingBody` with `ranking_order`,
  `distinct_field` and `ranking_rules`; `RankingOrdering.ASC`/`DSC`),
  read and written with camel-case keys, and `SettingBody.merge` to apply
  a partial update.
- `meili.search`: `crop_text`, `crop_document`, `calculate_matches` and
  `calculate_highlights` turn raw `Highlight`s into cropped fields,
  `MatchPosition` lists and `<em>`-highlighted strings; `SearchHit` and
  `SearchResult` render to response dictionaries; `ranking_criteria` turns
  settings into an ordered list of criteria; `SearchError` carries search
  failure messages.
- `meili.update_operation`: the `UpdateOperation` enumeration of update kinds.
- `meili.option`: `parse_options` reads the server options (`--db-path`,
  `--http-addr`, `--api-key`, `--no-analytics`, or the `MEILI_DB_PATH`,
  `MEILI_HTTP_ADDR`, `MEILI_API_KEY`, `MEILI_NO_ANALYTICS` environment
  variables) into an `Options` record. Defaults are `./data.ms` and
  `127.0.0.1:7700`.

## Install

```
pip install .
```

## Examples

Build a schema and look at it:

```python
from meili.schema import SchemaBuilder, DISPLAYED, INDEXED

builder = SchemaBuilder.with_identifier("id")
builder.new_attribute("title", DISPLAYED | INDEXED)
builder.new_attribute("date", DISPLAYED)
schema = builder.build()

print(schema.identifier_name())   # id
print(schema.to_json())
```

Tokenize some text:

```python
from meili.tokenizer import Tokenizer

for token in Tokenizer("yo ! lolo ? wtf"):
    print(token.word, token.word_index, token.char_index)
# yo 0 0
# lolo 8 5
# wtf 16 12
```

Highlight matches in a document:

```python
from meili.search import MatchPosition, calculate_highlights

document = {"title": "Fondation (Isaac ASIMOV)"}
matches = {"title": [MatchPosition(start=0, length=9)]}
calculate_highlights(document, matches, {"title"})
# {'title': '<em>Fondation</em> (Isaac ASIMOV)'}
```

## What it does not do

This package holds no search index and no storage: it does not store
documents, run queries or rank results itself. There is no HTTP server and
no command to start one; `parse_options` only reads the options such a
server would take. It also has no API key or access-control handling and no
mapping of errors to HTTP responses.

## Tests

```
pip install ".[test]"
pytest
```