"""Split text into words, tracking word and character positions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import lru_cache
from itertools import takewhile
from typing import Iterable, Iterator

from unidecode import unidecode

_CJK_RANGES = (
    ("\u2e80", "\u2eff"),
    ("\u2f00", "\u2fdf"),
    ("\u3040", "\u309f"),
    ("\u30a0", "\u30ff"),
    ("\u3100", "\u312f"),
    ("\u3200", "\u32ff"),
    ("\u3400", "\u4dbf"),
    ("\u4e00", "\u9fff"),
    ("\uf900", "\ufaff"),
)

# Characters carrying the Unicode White_Space property.
_WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_SOFT_CHARS = frozenset("-_':/\\")
_HARD_CHARS = frozenset(".;,!?()")


def is_cjk(c: str) -> bool:
    """Whether the character belongs to one of the CJK blocks."""
    return any(low <= c <= high for low, high in _CJK_RANGES)


class _Separator(enum.IntEnum):
    SOFT = 1
    HARD = 8

    def merge(self, other: _Separator) -> _Separator:
        if self is _Separator.SOFT and other is _Separator.SOFT:
            return _Separator.SOFT
        return _Separator.HARD


class _Category(enum.Enum):
    SOFT = "soft"
    HARD = "hard"
    CJK = "cjk"
    OTHER = "other"


@lru_cache(maxsize=4096)
def _classify_separator(c: str) -> _Separator | None:
    if c in _WHITESPACE:
        return _Separator.SOFT
    if unidecode(c) in ("'", '"'):
        return _Separator.SOFT
    if c in _SOFT_CHARS:
        return _Separator.SOFT
    if c in _HARD_CHARS:
        return _Separator.HARD
    return None


def _is_separator(c: str) -> bool:
    return _classify_separator(c) is not None


def _classify_char(c: str) -> _Category:
    separator = _classify_separator(c)
    if separator is _Separator.SOFT:
        return _Category.SOFT
    if separator is _Separator.HARD:
        return _Category.HARD
    if is_cjk(c):
        return _Category.CJK
    return _Category.OTHER


_SEPARATORS = (_Category.SOFT, _Category.HARD)


def _same_group(a: str, b: str) -> bool:
    ca, cb = _classify_char(a), _classify_char(b)
    if _Category.CJK in (ca, cb):
        return False
    if ca in _SEPARATORS and cb in _SEPARATORS:
        return True
    return ca == cb


def _is_word(s: str) -> bool:
    return not any(_is_separator(c) for c in s)


def _groups(text: str) -> Iterator[str]:
    if not text:
        return
    group = [text[0]]
    for previous, current in zip(text, text[1:]):
        if _same_group(previous, current):
            group.append(current)
        else:
            yield "".join(group)
            group = [current]
    yield "".join(group)


@dataclass(frozen=True)
class Token:
    """A word with its word position and character position in the text."""

    word: str
    word_index: int
    char_index: int


class Tokenizer:
    """Iterator over the words of a single text."""

    def __init__(self, string: str) -> None:
        skipped = sum(1 for _ in takewhile(_is_separator, string))
        self._tokens = self._generate(string[skipped:], skipped)

    @staticmethod
    def _generate(text: str, char_index: int) -> Iterator[Token]:
        word_index = 0
        groups = list(_groups(text))
        for group, following in zip(groups, [*groups[1:], None]):
            if not _is_word(group):
                merged = _Separator.SOFT
                for c in group:
                    category = _classify_separator(c)
                    if category is not None:
                        merged = merged.merge(category)
                word_index += int(merged)
                char_index += len(group)
                continue

            token = Token(group, word_index, char_index)
            if following is not None and _is_word(following):
                word_index += 1
            char_index += len(group)
            yield token

    def __iter__(self) -> Tokenizer:
        return self

    def __next__(self) -> Token:
        return next(self._tokens)


class SeqTokenizer:
    """Iterator over the words of several texts, placed one after another."""

    def __init__(self, texts: Iterable[str]) -> None:
        self._tokens = self._generate(iter(texts))

    @staticmethod
    def _generate(texts: Iterator[str]) -> Iterator[Token]:
        word_offset = 0
        char_offset = 0
        for text in texts:
            tokens = Tokenizer(text)
            current = next(tokens, None)
            while current is not None:
                following = next(tokens, None)
                token = Token(
                    current.word,
                    current.word_index + word_offset,
                    current.char_index + char_offset,
                )
                if following is None:
                    hard_space = int(_Separator.HARD)
                    word_offset = token.word_index + hard_space
                    char_offset = token.char_index + hard_space
                yield token
                current = following

    def __iter__(self) -> SeqTokenizer:
        return self

    def __next__(self) -> Token:
        return next(self._tokens)


def split_query_string(query: str) -> Iterator[str]:
    """Yield the words of a query."""
    return (token.word for token in Tokenizer(query))