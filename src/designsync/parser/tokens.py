"""Lark Transformer that splits a utility class token into a ClassToken."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Sequence

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from designsync.model.element import normalize_classes
from designsync.model.token import ClassToken
from designsync.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

log = logging.getLogger(__name__)


class ClassTokenTransformer(Transformer):  # type: ignore[type-arg]
    """Transform the parse tree of one token into a ClassToken."""

    def __init__(self, raw: str) -> None:
        super().__init__()
        self._raw = raw

    def start(self, items: list[Token]) -> ClassToken:
        variants = tuple(str(t)[:-1] for t in items if t.type == "VARIANT")
        body = next(str(t) for t in items if t.type == "BODY")
        return ClassToken(raw=self._raw, body=body, variants=variants)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_class_token(raw: str) -> ClassToken:
    """Parse a single class token.

    Raises ParseError if *raw* is empty, contains whitespace, or ends in a
    dangling variant (``hover:``).
    """
    try:
        tree = _parser().parse(raw)
    except LarkError as e:
        raise ParseError(str(e), token=raw, column=getattr(e, "column", None)) from e
    return ClassTokenTransformer(raw).transform(tree)


@lru_cache(maxsize=4096)
def split_class_token(raw: str) -> ClassToken:
    """Parse a token, treating anything the grammar rejects as a bare body."""
    try:
        return parse_class_token(raw)
    except ParseError:
        log.debug("Unparseable class token %r kept as a bare body", raw)
        return ClassToken(raw=raw, body=raw)


def parse_classes(classes: str | Sequence[str] | None) -> list[ClassToken]:
    """Parse a space-joined class string (or list of tokens) into ClassTokens."""
    return [split_class_token(raw) for raw in normalize_classes(classes)]
