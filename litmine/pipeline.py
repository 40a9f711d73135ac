# -*- coding: utf-8 -*-
"""
The whole run in one call: DOC-LINE table in, every derived table out.

Loader -> Tokenizer -> Weighting -> Reporter, each stage a pure function of
the previous one's output, so the same corpus and config always give the
same result.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

import pandas as pd

from .config import DEFAULT_CONFIG, merge_config
from .corpus import add_chapters, corpus_from_mapping
from .ngrams import build_ngram_graph
from .sentiment import (bing_lexicon, block_sentiment, chapter_sentiment_ratio,
                        is_scalar, load_lexicon, negated_contributions,
                        sentiment_word_counts)
from .tokenize import RegexTokenizer, get_stopwords, remove_stopwords, tokenize_docs
from .weighting import compute_tfidf, count_terms, rank_terms

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    config: dict
    docs: pd.DataFrame
    tokens: pd.DataFrame
    counts: pd.DataFrame
    tfidf: pd.DataFrame
    ranked: pd.DataFrame
    ngram_counts: pd.DataFrame
    ngram_tfidf: pd.DataFrame
    graph: Any
    word_sentiment: Optional[pd.DataFrame] = None
    blocks: Optional[pd.DataFrame] = None
    chapter_ratios: Optional[pd.DataFrame] = None
    negations: Optional[pd.DataFrame] = None


def resolve_lexicon(source):
    if source is None:
        return None
    if source == 'bing':
        return bing_lexicon()
    return load_lexicon(source)


def run_pipeline(docs, config=None, stopwords=None, lexicon=None):
    """Run every stage over docs (a DOC-LINE table or {doc_id: lines}).

    stopwords and lexicon override what the config names, which lets callers
    supply their own lookup tables.
    """
    cfg = merge_config(DEFAULT_CONFIG, config)
    if isinstance(docs, Mapping):
        docs = corpus_from_mapping(docs)

    if cfg['chap']['chap_pat'] and 'chap_id' not in docs.columns:
        logger.info("CHAP")
        docs = add_chapters(docs, cfg['chap']['chap_pat'])

    if stopwords is None:
        stopwords = get_stopwords(cfg['stopwords']['source'], cfg['stopwords']['extra'])
    tokenizer = RegexTokenizer(**cfg['tokens'])

    logger.info("TOKENS")
    all_tokens = tokenize_docs(docs, tokenizer)
    tokens = remove_stopwords(all_tokens, stopwords)
    logger.debug("%d tokens, %d after stop words", len(all_tokens.index), len(tokens.index))

    logger.info("TFIDF")
    counts = count_terms(tokens)
    tfidf = compute_tfidf(counts)
    ranked = rank_terms(tfidf, n=cfg['report']['top'])

    logger.info("NGRAMS")
    n = cfg['ngrams']['n']
    all_ngrams = tokenize_docs(docs, tokenizer, n=n)
    ngram_counts = count_terms(remove_stopwords(all_ngrams, stopwords))
    ngram_tfidf = compute_tfidf(ngram_counts)
    graph = build_ngram_graph(ngram_counts, cfg['ngrams']['min_count'], cfg['ngrams']['directed'])

    result = PipelineResult(
        config=cfg, docs=docs, tokens=tokens, counts=counts, tfidf=tfidf, ranked=ranked,
        ngram_counts=ngram_counts, ngram_tfidf=ngram_tfidf, graph=graph)

    if lexicon is None:
        lexicon = resolve_lexicon(cfg['sentiment']['lexicon'])
    if lexicon is None:
        return result

    logger.info("SENTIMENT")
    result.word_sentiment = sentiment_word_counts(count_terms(all_tokens), lexicon)
    result.blocks = block_sentiment(all_tokens, lexicon, cfg['sentiment']['block_size'])
    if is_scalar(lexicon):
        if n == 2:
            result.negations = negated_contributions(
                count_terms(all_ngrams), lexicon, cfg['ngrams']['negation_words'])
    elif 'chap_id' in all_tokens.columns:
        result.chapter_ratios = chapter_sentiment_ratio(
            all_tokens, lexicon, cfg['sentiment']['label'], cfg['chap']['exclude'])
    return result
