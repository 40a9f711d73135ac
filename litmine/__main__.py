# -*- coding: utf-8 -*-
"""
Command line entry point.

    python -m litmine --gutenberg austen-emma.txt austen-persuasion.txt --lexicon bing
    python -m litmine --corpus moby.txt --start 318 --end 23238 --config moby.yaml
"""

import argparse
import logging
from pathlib import Path

from .config import load_config
from .corpus import import_sources, load_gutenberg
from .errors import LitmineError
from .ngrams import graph_edges
from .pipeline import run_pipeline
from .report import format_table
from .weighting import rank_terms

logger = logging.getLogger('litmine')


def build_parser():
    p = argparse.ArgumentParser(prog='litmine', description="Tidy text mining of literary corpora")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument('--corpus', nargs='+', help="Plaintext files, one document each")
    src.add_argument('--gutenberg', nargs='+', help="NLTK Gutenberg file ids, e.g. austen-emma.txt")
    p.add_argument('--start', type=int, default=None, help="First line to keep in each --corpus file")
    p.add_argument('--end', type=int, default=None, help="Last line to keep in each --corpus file")
    p.add_argument('--config', default=None, help="YAML config overriding the defaults")
    p.add_argument('--lexicon', default=None, help="'bing' or a CSV/TSV lexicon file")
    p.add_argument('--top', type=int, default=None, help="Terms to show per document")
    p.add_argument('--figures', default=None, help="Directory to save charts into")
    p.add_argument('-v', '--verbose', action='store_true', help="Log every stage")
    return p


def load_docs(args):
    if args.gutenberg:
        return load_gutenberg(args.gutenberg)
    return import_sources(args.corpus, args.start, args.end)


def save_figures(result, outdir):
    from .plots import plot_block_sentiment, plot_top_terms
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    plot_top_terms(result.ranked).savefig(outdir / 'top_tfidf.png', bbox_inches='tight')
    if result.blocks is not None:
        plot_block_sentiment(result.blocks).savefig(outdir / 'block_sentiment.png', bbox_inches='tight')
    print("Saved charts to", outdir)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')
    try:
        cfg = load_config(args.config)
        if args.lexicon:
            cfg['sentiment']['lexicon'] = args.lexicon
        if args.top:
            cfg['report']['top'] = args.top
        result = run_pipeline(load_docs(args), cfg)
    except (LitmineError, OSError) as e:
        logger.error("%s", e)
        return 1

    fmt = cfg['report']['float_format']
    print(format_table(result.ranked[['doc_id', 'rank', 'term', 'n', 'tf_idf']], fmt, "TFIDF"))
    print()
    ngrams = rank_terms(result.ngram_tfidf, n=cfg['report']['top'])
    print(format_table(ngrams[['doc_id', 'rank', 'term', 'n', 'tf_idf']], fmt, "N-GRAM TFIDF"))
    print()
    print(format_table(graph_edges(result.graph).head(cfg['report']['top']), fmt, "N-GRAM GRAPH"))
    if result.word_sentiment is not None:
        print()
        print(format_table(result.word_sentiment.head(cfg['report']['top']), fmt, "SENTIMENT WORDS"))
    if result.chapter_ratios is not None:
        print()
        print(format_table(result.chapter_ratios, fmt, "CHAPTER RATIOS"))
    if result.negations is not None:
        print()
        print(format_table(result.negations.head(cfg['report']['top']), fmt, "NEGATIONS"))
    if args.figures:
        save_figures(result, args.figures)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
