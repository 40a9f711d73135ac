# -*- coding: utf-8 -*-
"""
litmine: tidy text mining of literary corpora with pandas.

We create a DOC-LINE table from the source texts, a TOKEN table from that,
and derive COUNT, TFIDF, sentiment and n-gram tables from the tokens.
"""

from .corpus import (add_chapters, corpus_from_mapping, import_source, import_sources,
                     load_gutenberg, read_source_lines, strip_gutenberg)
from .errors import ConfigError, InputValidationError, LitmineError
from .ngrams import build_ngram_graph, pairwise_correlation, pairwise_counts, separate_ngrams
from .pipeline import PipelineResult, run_pipeline
from .sentiment import (bing_lexicon, block_sentiment, chapter_sentiment_ratio, join_lexicon,
                        lexicon_from_mapping, load_lexicon, negated_contributions,
                        sentiment_word_counts)
from .tokenize import RegexTokenizer, Tokenizer, get_stopwords, ngrams, remove_stopwords, tokenize_docs
from .weighting import (compute_tfidf, count_terms, create_dtm, create_vocab, doc_frequency,
                        doc_totals, rank_terms, zipf_table)

__version__ = '0.1.0'
