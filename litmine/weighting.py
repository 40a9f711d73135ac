# -*- coding: utf-8 -*-
"""
Frequency and weighting engine.

We create the COUNT table (doc_id, term, n) from the TOKEN table and derive
everything else from it: document totals, document frequencies, TFIDF, the
vocabulary and the DTM. Nothing here modifies its input.

    tf     = n / total
    idf    = ln(N / df)
    tf_idf = tf * idf

where N is the number of documents with at least one token. A term that
occurs in every document gets idf == 0 and so tf_idf == 0.
"""

import logging

import numpy as np

from .errors import InputValidationError

logger = logging.getLogger(__name__)

RANK_ORDER = (['tf_idf', 'n', 'term', 'doc_id'], [False, False, True, True])


def count_terms(tokens):
    counts = tokens.groupby(['doc_id', 'term']).size()\
        .reset_index(name='n')
    counts['n'] = counts['n'].astype('int')
    return counts


def doc_totals(counts):
    return counts.groupby('doc_id')['n'].sum()\
        .rename('total').reset_index()


def doc_frequency(counts):
    return counts[counts.n > 0].groupby('term')['doc_id'].nunique()\
        .rename('df').reset_index()


def compute_tfidf(counts):
    """Add total, df, tf, idf and tf_idf to a COUNT table.

    Documents whose total is zero never reach the division; they are left
    out of N and produce no rows.
    """
    counts = counts[counts.n > 0]
    totals = doc_totals(counts)
    totals = totals[totals.total > 0]
    N = len(totals.index)
    tfidf = counts.merge(totals, on='doc_id')\
        .merge(doc_frequency(counts), on='term')
    tfidf = tfidf.assign(tf=tfidf.n / tfidf.total, idf=np.log(N / tfidf.df))
    tfidf = tfidf.assign(tf_idf=tfidf.tf * tfidf.idf)\
        .sort_values(['doc_id', 'term']).reset_index(drop=True)
    logger.debug("TFIDF over %d documents and %d terms", N, tfidf.term.nunique())
    return tfidf


def rank_terms(tfidf, n=None, by_doc=True):
    """Order by tf_idf, breaking ties by count and then alphabetically.

    With by_doc, rows are grouped per document and given a 1-based rank;
    n keeps the top n of each document (or of the whole table).
    """
    by, ascending = RANK_ORDER
    ranked = tfidf.sort_values(by, ascending=ascending, kind='mergesort')
    if not by_doc:
        ranked = ranked.head(n) if n is not None else ranked
        return ranked.reset_index(drop=True)
    if n is not None:
        ranked = ranked.groupby('doc_id').head(n)
    ranked = ranked.sort_values('doc_id', kind='mergesort')
    ranked = ranked.assign(rank=ranked.groupby('doc_id').cumcount() + 1)
    return ranked.reset_index(drop=True)


def create_vocab(tokens):
    vocab = tokens.groupby('term').size()\
        .reset_index(name='n')
    vocab['f'] = vocab.n.div(vocab.n.sum())
    vocab.index.name = 'term_id'
    return vocab


def create_dtm(counts, fill_val=0):
    dtm = counts.set_index(['doc_id', 'term'])['n'].unstack(fill_value=fill_val)
    dtm.columns.name = None
    return dtm


def zipf_table(counts):
    """Rank terms by count in each document, alongside their term frequency."""
    zipf = counts.sort_values(['doc_id', 'n', 'term'], ascending=[True, False, True])
    zipf = zipf.assign(
        rank=zipf.groupby('doc_id').cumcount() + 1,
        term_frequency=zipf.n / zipf.groupby('doc_id')['n'].transform('sum'))
    return zipf.reset_index(drop=True)


def frequency_proportions(counts, reference):
    """Line up each document's term proportions against a reference document.

    Only terms used in both documents are kept.
    """
    if reference not in set(counts.doc_id):
        raise InputValidationError("Reference document {} not in counts".format(reference))
    props = counts.assign(proportion=counts.n / counts.groupby('doc_id')['n'].transform('sum'))
    ref = props.loc[props.doc_id == reference, ['term', 'proportion']]\
        .rename(columns={'proportion': 'reference'})
    other = props.loc[props.doc_id != reference, ['doc_id', 'term', 'proportion']]
    return other.merge(ref, on='term')\
        .sort_values(['doc_id', 'term']).reset_index(drop=True)


def correlate_proportions(props):
    """Pearson correlation of each document's proportions with the reference."""
    corr = props.groupby('doc_id')[['proportion', 'reference']]\
        .apply(lambda g: g.proportion.corr(g.reference))
    return corr.rename('corr').reset_index()
