# -*- coding: utf-8 -*-
"""
Sentiment lexicons and aggregation.

A lexicon is a table keyed by term, with either a `sentiment` label column
(binary lexicons like Bing: positive/negative) or a numeric `score` column
(scalar lexicons like AFINN). Lexicons are read-only lookup tables: joins are
inner joins, so a term missing from the lexicon simply does not match.
"""

import logging
import numbers
from pathlib import Path

import pandas as pd

from .errors import InputValidationError
from .ngrams import separate_ngrams
from .nltk_data import ensure_nltk_data

logger = logging.getLogger(__name__)

COLUMN_ALIASES = {'word': 'term', 'value': 'score', 'label': 'sentiment', 'polarity': 'sentiment'}


def is_scalar(lexicon):
    return 'score' in lexicon.columns


def _clean_lexicon(df):
    df = df.rename(columns=COLUMN_ALIASES)
    if 'term' not in df.columns or not ({'sentiment', 'score'} & set(df.columns)):
        raise InputValidationError(
            "Lexicon needs a term column and a sentiment or score column, got {}".format(list(df.columns)))
    if 'score' in df.columns:
        df = df[['term', 'score']].assign(score=pd.to_numeric(df['score'], errors='coerce'))
        keys = ['term']
    else:
        df = df[['term', 'sentiment']]
        keys = ['term', 'sentiment']
    df = df.dropna()
    df = df[df.term.map(lambda x: isinstance(x, str) and x.strip() != '').astype(bool)]
    df = df.assign(term=df.term.str.strip().str.lower())
    if 'sentiment' in df.columns:
        df = df[df.sentiment.map(lambda x: isinstance(x, str)).astype(bool)]
        df = df.assign(sentiment=df.sentiment.str.strip().str.lower())
    return df.drop_duplicates(keys).reset_index(drop=True)


def lexicon_from_mapping(mapping):
    """Build a lexicon from {term: label} or {term: score}.

    Whichever kind the valid values are decides the lexicon kind; entries
    of the other kind, or with missing values, are dropped.
    """
    items = [(k, v) for k, v in mapping.items() if v is not None]
    scores = [(k, v) for k, v in items if isinstance(v, numbers.Number) and not isinstance(v, bool)]
    if scores and len(scores) >= len(items) - len(scores):
        return _clean_lexicon(pd.DataFrame(scores, columns=['term', 'score']))
    labels = [(k, v) for k, v in items if isinstance(v, str)]
    return _clean_lexicon(pd.DataFrame(labels, columns=['term', 'sentiment']))


def load_lexicon(path, sep=None):
    """Read a CSV lexicon, or a TSV one when the file ends in .tsv or .tab."""
    if sep is None:
        sep = '\t' if Path(path).suffix.lower() in ('.tsv', '.tab') else ','
    df = pd.read_csv(path, sep=sep)
    lexicon = _clean_lexicon(df)
    logger.debug("Loaded lexicon %s with %d entries", path, len(lexicon.index))
    return lexicon


def bing_lexicon():
    """Positive/negative opinion words of Hu and Liu, via NLTK."""
    ensure_nltk_data('corpora/opinion_lexicon', 'opinion_lexicon')
    from nltk.corpus import opinion_lexicon
    rows = [(w, 'positive') for w in opinion_lexicon.positive()]
    rows += [(w, 'negative') for w in opinion_lexicon.negative()]
    return _clean_lexicon(pd.DataFrame(rows, columns=['term', 'sentiment']))


def join_lexicon(df, lexicon):
    return df.merge(lexicon, on='term', how='inner')


def sentiment_word_counts(counts, lexicon):
    """Total count of each lexicon word across the corpus, largest first."""
    joined = join_lexicon(counts, lexicon)
    if is_scalar(lexicon):
        words = joined.groupby(['term', 'score'])['n'].sum().reset_index()
        words['contribution'] = words.n * words.score
    else:
        words = joined.groupby(['term', 'sentiment'])['n'].sum().reset_index()
    return words.sort_values(['n', 'term'], ascending=[False, True], kind='mergesort')\
        .reset_index(drop=True)


def _block_index(tokens, block_size):
    last = tokens.groupby('doc_id')['line_id'].max() // block_size
    return pd.MultiIndex.from_tuples(
        [(doc_id, b) for doc_id, m in last.items() for b in range(int(m) + 1)],
        names=['doc_id', 'block'])


def block_sentiment(tokens, lexicon, block_size=80):
    """Net sentiment per block of block_size consecutive lines.

    Block b holds lines b * block_size up to (b + 1) * block_size - 1. Every
    block up to a document's last line is reported, with zero when it has no
    lexicon words; the last block may be short.
    """
    if block_size < 1:
        raise InputValidationError("block_size must be at least 1, got {}".format(block_size))
    idx = _block_index(tokens, block_size)
    joined = join_lexicon(tokens, lexicon)
    joined = joined.assign(block=joined.line_id // block_size)

    if is_scalar(lexicon):
        net = joined.groupby(['doc_id', 'block'])['score'].sum().rename('sentiment')
        return net.reindex(idx, fill_value=0).reset_index()

    joined = joined.assign(positive=(joined.sentiment == 'positive').astype('int'),
                           negative=(joined.sentiment == 'negative').astype('int'))
    labels = joined.groupby(['doc_id', 'block'])[['positive', 'negative']].sum()
    labels = labels.reindex(idx, fill_value=0)
    labels['sentiment'] = labels.positive - labels.negative
    return labels.reset_index()


def chapter_sentiment_ratio(tokens, lexicon, label='negative', exclude=(0,), top=1):
    """Share of each chapter's words that carry the given label.

    Chapters listed in exclude (front matter, by default chapter 0) are left
    out. Returns the top chapters of each document by ratio, or all of them
    when top is None.
    """
    if 'chap_id' not in tokens.columns:
        raise InputValidationError("Tokens have no chap_id column; run add_chapters() first")
    if is_scalar(lexicon):
        raise InputValidationError("Chapter ratios need a labelled lexicon")
    words = tokens.groupby(['doc_id', 'chap_id']).size().rename('words')
    lex = lexicon.loc[lexicon.sentiment == label, ['term']].drop_duplicates()
    hits = tokens.merge(lex, on='term').groupby(['doc_id', 'chap_id']).size().rename('hits')
    ratios = hits.to_frame().join(words).reset_index()
    ratios['ratio'] = ratios.hits / ratios.words
    ratios = ratios[~ratios.chap_id.isin(list(exclude or ()))]
    ratios = ratios.sort_values(['doc_id', 'ratio', 'chap_id'], ascending=[True, False, True])
    if top is not None:
        ratios = ratios.groupby('doc_id').head(top)
    return ratios.reset_index(drop=True)


def negated_contributions(bigrams, lexicon, negation_words):
    """Scored words preceded by a negation, e.g. 'not happy'.

    contribution = n * score shows how much those words pushed sentiment
    the wrong way.
    """
    if not is_scalar(lexicon):
        raise InputValidationError("Negation contributions need a scored lexicon")
    words = separate_ngrams(bigrams)
    words = words[words.word1.isin(set(negation_words))]
    scored = words.merge(lexicon.rename(columns={'term': 'word2'}), on='word2')
    scored = scored.assign(contribution=scored.n * scored.score)
    scored = scored.assign(magnitude=scored.contribution.abs())\
        .sort_values(['magnitude', 'term', 'doc_id'], ascending=[False, True, True], kind='mergesort')
    return scored.drop(columns='magnitude').reset_index(drop=True)
