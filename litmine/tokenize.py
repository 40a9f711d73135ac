# -*- coding: utf-8 -*-
"""
Tokenization and normalization.

Turns a DOC-LINE table into a TOKEN table with one row per term occurrence:
doc_id, line_id, [chap_id], token_num, term. In n-gram mode each row is a
window of n adjacent tokens joined by a single space.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Protocol

import pandas as pd

from .config import TOKEN_PAT
from .corpus import DOC_COLS
from .errors import InputValidationError
from .nltk_data import ensure_nltk_data

logger = logging.getLogger(__name__)


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> Iterator[str]: ...


@dataclass(frozen=True)
class RegexTokenizer:
    """Emit every match of token_pat, lower-cased by default.

    The default pattern keeps runs of letters and digits plus internal
    apostrophes, so punctuation and underscores never reach a token.
    """

    token_pat: str = TOKEN_PAT
    lower: bool = True

    def tokenize(self, text: str) -> Iterator[str]:
        for m in re.finditer(self.token_pat, text or ''):
            tok = m.group(0)
            yield tok.lower() if self.lower else tok


def _windows(tokens, n):
    for i in range(len(tokens) - n + 1):
        yield tuple(tokens[i:i + n])


def ngrams(tokens, n):
    """Overlapping windows of n tokens; k tokens give max(k - n + 1, 0) windows."""
    if n < 1:
        raise InputValidationError("n-gram size must be at least 1, got {}".format(n))
    return _windows(list(tokens), n)


def tokenize_docs(docs, tokenizer=None, n=1, stopwords=None):
    """Build the TOKEN table from a DOC-LINE table.

    Windows are taken over a document's whole token stream before stop words
    are removed; a window is dropped if any of its tokens is a stop word.
    """
    if n < 1:
        raise InputValidationError("n-gram size must be at least 1, got {}".format(n))
    tokenizer = tokenizer or RegexTokenizer()
    stopwords = frozenset(stopwords or ())
    extra = [col for col in docs.columns if col not in DOC_COLS]

    rows = []
    for doc_id, doc in docs.groupby('doc_id', sort=False):
        where, toks = [], []
        for rec in doc[['line_id'] + extra + ['line']].itertuples(index=False, name=None):
            for tok in tokenizer.tokenize(rec[-1]):
                where.append(rec[:-1])
                toks.append(tok)
        for i, gram in enumerate(ngrams(toks, n)):
            if stopwords and any(t in stopwords for t in gram):
                continue
            rows.append((doc_id,) + where[i] + (i, ' '.join(gram)))

    tokens = pd.DataFrame(rows, columns=['doc_id', 'line_id'] + extra + ['token_num', 'term'])
    logger.debug("Tokenized %d lines into %d %d-grams", len(docs.index), len(tokens.index), n)
    return tokens


def get_stopwords(source='nltk', extra=None):
    """Return a stop word set.

    source is 'nltk' (English list from NLTK), None (no stop words), a path
    to a file with one word per line, or any iterable of words.
    """
    if source == 'nltk':
        ensure_nltk_data('corpora/stopwords', 'stopwords')
        from nltk.corpus import stopwords
        words = stopwords.words('english')
    elif source is None:
        words = []
    elif isinstance(source, (str, Path)):
        words = Path(source).read_text(encoding='utf-8').split('\n')
    else:
        words = list(source)
    sw = {w.strip().lower() for w in words if w and w.strip()}
    sw.update(w.lower() for w in (extra or []))
    return frozenset(sw)


def remove_stopwords(tokens, stopwords, col='term'):
    """Anti-join a TOKEN or COUNT table against a stop word set."""
    stopwords = frozenset(stopwords)
    drop = tokens[col].map(lambda term: any(p in stopwords for p in term.split(' '))).astype(bool)
    return tokens[~drop].reset_index(drop=True)
