"""
Noteful API — Text Search Query Builder
========================================

What:  Turns a free-text `searchTerm` into SQLAlchemy filter and score
       expressions over `notes.title` and `notes.content`.
Why:   Keeps the search semantics in one place, independent of the HTTP
       layer and of the database dialect.
How:   The term is tokenized into words, "quoted phrases" and -negated
       words. Each positive term contributes a CASE expression to the
       relevance score; the filter combines the match rules below.

Matching rules:
    - Case-insensitive substring match (ILIKE, wildcards escaped)
    - At least one word or phrase must match title or content
    - Every phrase must match title or content
    - No negated word may match title or content

Scoring:
    Per positive term: TITLE_WEIGHT for a title hit + CONTENT_WEIGHT for a
    content hit. A title hit outranks a body-only hit.

Example:
    parse_search_term('cats "life lessons" -dogs')
    → words=['cats'], phrases=['life lessons'], excluded=['dogs']
"""

import functools
import operator
import re
from dataclasses import dataclass, field
from typing import List

from sqlalchemy import and_, case, false, literal, not_, or_
from sqlalchemy.sql.elements import ColumnElement

from noteful.models.note import Note

TITLE_WEIGHT = 2.0
CONTENT_WEIGHT = 1.0

_TOKEN_RE = re.compile(r'"([^"]*)"|(\S+)')


@dataclass
class ParsedSearch:
    words: List[str] = field(default_factory=list)
    phrases: List[str] = field(default_factory=list)
    excluded: List[str] = field(default_factory=list)

    @property
    def terms(self) -> List[str]:
        """Positive terms (phrases first) that contribute to the score."""
        return self.phrases + self.words

    @property
    def is_empty(self) -> bool:
        return not self.terms


def _append_unique(bucket: List[str], value: str) -> None:
    if value and value not in bucket:
        bucket.append(value)


def parse_search_term(raw: str) -> ParsedSearch:
    """Split a search string into lowercase words, phrases and exclusions."""
    parsed = ParsedSearch()
    for match in _TOKEN_RE.finditer(raw or ""):
        phrase, word = match.groups()
        if phrase is not None:
            _append_unique(parsed.phrases, " ".join(phrase.lower().split()))
        elif word.startswith("-") and len(word) > 1:
            _append_unique(parsed.excluded, word[1:].lower())
        else:
            # A stray quote (unbalanced) is not part of the word
            _append_unique(parsed.words, word.strip('"').lower())
    return parsed


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so user input is matched literally."""
    return (
        term.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )


def _contains(column, term: str) -> ColumnElement:
    return column.ilike(f"%{escape_like(term)}%", escape="\\")


def _matches_note(term: str) -> ColumnElement:
    return or_(_contains(Note.title, term), _contains(Note.content, term))


def score_expression(parsed: ParsedSearch) -> ColumnElement:
    """Sum of weighted title/content hits for every positive term."""
    parts = []
    for term in parsed.terms:
        parts.append(case((_contains(Note.title, term), TITLE_WEIGHT), else_=0.0))
        parts.append(case((_contains(Note.content, term), CONTENT_WEIGHT), else_=0.0))
    if not parts:
        return literal(0.0)
    return functools.reduce(operator.add, parts)


def match_condition(parsed: ParsedSearch) -> ColumnElement:
    """WHERE clause implementing the matching rules in the module docstring."""
    if parsed.is_empty:
        return false()

    conditions = [or_(*[_matches_note(term) for term in parsed.terms])]
    conditions.extend(_matches_note(phrase) for phrase in parsed.phrases)
    conditions.extend(not_(_matches_note(word)) for word in parsed.excluded)
    return and_(*conditions)
