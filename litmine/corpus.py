# -*- coding: utf-8 -*-
"""
Corpus loading.

A corpus is a DOC-LINE table: one row per line with columns doc_id, line_id
and line. line_id counts from 0 within each document. Chapters (or any other
milestone) are added afterwards with add_chapters().
"""

import logging
import re
from collections.abc import Mapping, Sequence
from pathlib import Path

import pandas as pd

from .errors import InputValidationError
from .nltk_data import ensure_nltk_data

logger = logging.getLogger(__name__)

DOC_COLS = ['doc_id', 'line_id', 'line']

GUTENBERG_START = re.compile(r'\*\*\* ?START OF (?:THE|THIS) PROJECT GUTENBERG EBOOK', re.I)
GUTENBERG_END = re.compile(r'\*\*\* ?END OF (?:THE|THIS) PROJECT GUTENBERG EBOOK', re.I)


def _validate_doc(doc_id, lines):
    if not isinstance(doc_id, str) or not doc_id.strip():
        raise InputValidationError("Malformed document id: {!r}".format(doc_id))
    if isinstance(lines, (str, bytes)) or not isinstance(lines, Sequence):
        raise InputValidationError(
            "Document {} must be a sequence of lines, got {}".format(doc_id, type(lines).__name__))
    if len(lines) == 0:
        raise InputValidationError("Document {} has no text".format(doc_id))
    for i, line in enumerate(lines):
        if not isinstance(line, str):
            raise InputValidationError(
                "Document {} line {} is not a string: {!r}".format(doc_id, i, line))


def corpus_from_mapping(mapping):
    """Convert {doc_id: [line, ...]} into a DOC-LINE table."""
    if not isinstance(mapping, Mapping):
        raise InputValidationError("Corpus must be a mapping of doc_id to lines")
    rows = []
    for doc_id, lines in mapping.items():
        _validate_doc(doc_id, lines)
        rows.extend((doc_id, i, line) for i, line in enumerate(lines))
    docs = pd.DataFrame(rows, columns=DOC_COLS)
    docs['line_id'] = docs['line_id'].astype('int')
    logger.debug("Corpus has %d documents and %d lines", len(mapping), len(docs.index))
    return docs


def read_source_lines(src_file, start_line=None, end_line=None, strip=True):
    """Lines of a plaintext file, clipped to start_line..end_line inclusive.

    Both bounds refer to 0-based lines of the raw file.
    """
    lines = Path(src_file).read_text(encoding='utf-8').splitlines()
    if start_line is None:
        start_line = 0
    if end_line is None:
        end_line = len(lines) - 1
    lines = lines[start_line:end_line + 1]
    if strip:
        lines = [line.strip() for line in lines]
    return lines


def import_source(src_file, start_line=None, end_line=None, doc_id=None, strip=True):
    """Read a plaintext file into a DOC-LINE table.

    start_line and end_line clip front and back matter.
    """
    src_file = Path(src_file)
    lines = read_source_lines(src_file, start_line, end_line, strip)
    return corpus_from_mapping({doc_id or src_file.stem: lines})


def import_sources(src_files, start_line=None, end_line=None, strip=True):
    """Read several plaintext files into one DOC-LINE table, one document each.

    Each file's stem is its doc_id, so two files with the same stem are
    rejected rather than merged into one document.
    """
    mapping = {}
    for src_file in map(Path, src_files):
        if src_file.stem in mapping:
            raise InputValidationError(
                "Duplicate document id {!r} from {}; rename one of the files".format(src_file.stem, src_file))
        mapping[src_file.stem] = read_source_lines(src_file, start_line, end_line, strip)
    return corpus_from_mapping(mapping)


def strip_gutenberg(lines):
    """Drop the Project Gutenberg header and license, if the markers are there."""
    start = end = None
    for i, line in enumerate(lines):
        if start is None and GUTENBERG_START.search(line):
            start = i + 1
        elif start is not None and GUTENBERG_END.search(line):
            end = i
            break
    if start is None or end is None:
        return list(lines)
    return list(lines[start:end])


def load_gutenberg(fileids, strip=True):
    """Load texts from the NLTK Gutenberg sample, e.g. 'austen-emma.txt'."""
    ensure_nltk_data('corpora/gutenberg', 'gutenberg')
    from nltk.corpus import gutenberg
    mapping = {}
    for fileid in fileids:
        lines = gutenberg.raw(fileid).splitlines()
        if strip:
            lines = [line.strip() for line in strip_gutenberg(lines)]
        mapping[fileid] = lines
    return corpus_from_mapping(mapping)


def add_chapters(docs, chap_pat, case=False, col='chap_id'):
    """Add a running chapter number to each line.

    The counter goes up at each line matching chap_pat, so lines before the
    first heading (title page, front matter) are chapter 0.
    """
    ms = docs['line'].str.match(chap_pat, case=case).astype('int')
    return docs.assign(**{col: ms.groupby(docs['doc_id'], sort=False).cumsum()})
