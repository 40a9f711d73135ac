# -*- coding: utf-8 -*-
"""
N-gram and co-occurrence analysis.

Turns bigram/trigram COUNT tables into a networkx graph of adjacent words,
and measures how often words share a section (pairwise counts and phi
correlations). Layout and drawing are left to the caller.
"""

import logging

import networkx as nx
import pandas as pd

from .errors import InputValidationError

logger = logging.getLogger(__name__)


def separate_ngrams(counts, n=None, col='term'):
    """Split 'a b' terms into word1, word2 (, word3 ...) columns.

    Without n, the widest term sets the number of columns; shorter terms
    leave their trailing word columns empty.
    """
    split = counts[col].str.split(' ')
    widest = int(split.map(len).max()) if len(split.index) else 2
    if n is None:
        n = widest
    elif widest > n:
        raise InputValidationError(
            "Found a term of {} words but asked for {} word columns".format(widest, n))
    names = ['word{}'.format(i + 1) for i in range(n)]
    parts = pd.DataFrame([words + [None] * (n - len(words)) for words in split],
                         columns=names, index=counts.index)
    return counts.join(parts)


def build_ngram_graph(counts, min_count=20, directed=True):
    """Graph of adjacent words from n-gram counts.

    Counts are summed over documents first; only n-grams with more than
    min_count occurrences are kept. Every adjacent pair in a kept n-gram
    becomes an edge whose weight is the summed count.
    """
    totals = counts.groupby('term')['n'].sum()
    totals = totals[totals > min_count]
    G = nx.DiGraph() if directed else nx.Graph()
    for term, n in totals.items():
        words = term.split(' ')
        G.add_nodes_from(words)
        for a, b in zip(words, words[1:]):
            if G.has_edge(a, b):
                G[a][b]['weight'] += int(n)
            else:
                G.add_edge(a, b, weight=int(n))
    logger.debug("N-gram graph has %d nodes and %d edges", G.number_of_nodes(), G.number_of_edges())
    return G


def graph_edges(G):
    """Edge list of a graph as a table, heaviest first."""
    edges = pd.DataFrame(
        [(a, b, d['weight']) for a, b, d in G.edges(data=True)],
        columns=['source', 'target', 'weight'])
    return edges.sort_values(['weight', 'source', 'target'], ascending=[False, True, True])\
        .reset_index(drop=True)


def _frequent(tokens, min_count):
    n = tokens.groupby('term').size()
    return tokens[tokens.term.isin(n[n >= min_count].index)]


def pairwise_counts(tokens, section='chap_id', min_count=1):
    """Number of sections in which each pair of words appears together.

    Sections are taken within documents. Both orders of a pair are listed.
    """
    pres = _frequent(tokens, min_count)[['doc_id', section, 'term']].drop_duplicates()
    pairs = pres.merge(pres, on=['doc_id', section], suffixes=('1', '2'))
    pairs = pairs[pairs.term1 != pairs.term2]
    pairs = pairs.groupby(['term1', 'term2']).size().reset_index(name='n')\
        .rename(columns={'term1': 'item1', 'term2': 'item2'})
    return pairs.sort_values(['n', 'item1', 'item2'], ascending=[False, True, True])\
        .reset_index(drop=True)


def pairwise_correlation(tokens, section='chap_id', min_count=20):
    """Phi coefficient between the section-presence vectors of frequent words.

    Pairs whose correlation is undefined (a word present in every section)
    are dropped.
    """
    pres = _frequent(tokens, min_count)
    M = pd.crosstab([pres.doc_id, pres[section]], pres.term).gt(0).astype('int')
    corr = M.corr()
    corr.index.name = 'item1'
    corr.columns.name = None
    corr = corr.reset_index().melt(id_vars='item1', var_name='item2', value_name='correlation')
    corr = corr[(corr.item1 != corr.item2) & corr.correlation.notna()]
    return corr.sort_values(['correlation', 'item1', 'item2'], ascending=[False, True, True])\
        .reset_index(drop=True)
