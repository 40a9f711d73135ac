import pandas as pd
import pytest

from litmine.corpus import add_chapters, corpus_from_mapping
from litmine.errors import InputValidationError
from litmine.sentiment import (block_sentiment, chapter_sentiment_ratio, is_scalar, join_lexicon,
                               lexicon_from_mapping, load_lexicon, negated_contributions,
                               sentiment_word_counts)
from litmine.tokenize import tokenize_docs
from litmine.weighting import count_terms

BING = lexicon_from_mapping({'good': 'positive', 'happy': 'positive', 'bad': 'negative', 'sad': 'negative'})
AFINN = lexicon_from_mapping({'good': 3, 'happy': 3, 'bad': -3, 'sad': -2})


def tokens_of(mapping, chap_pat=None):
    docs = corpus_from_mapping(mapping)
    if chap_pat:
        docs = add_chapters(docs, chap_pat)
    return tokenize_docs(docs)


def test_lexicon_kinds():
    assert not is_scalar(BING)
    assert is_scalar(AFINN)
    assert list(BING.columns) == ['term', 'sentiment']
    assert list(AFINN.columns) == ['term', 'score']


def test_malformed_lexicon_entries_are_dropped():
    lex = lexicon_from_mapping({'Good': 'Positive', '': 'negative', 'bad': None, 'odd': 3})
    assert lex.term.tolist() == ['good']
    assert lex.sentiment.tolist() == ['positive']


def test_load_lexicon_tsv_with_aliases(tmp_path):
    path = tmp_path / 'afinn.tsv'
    path.write_text('word\tvalue\nabandon\t-2\nabhor\tx\nabsolve\t2\n', encoding='utf-8')
    lex = load_lexicon(path)
    assert is_scalar(lex)
    assert dict(zip(lex.term, lex.score)) == {'abandon': -2, 'absolve': 2}


def test_load_lexicon_needs_known_columns(tmp_path):
    path = tmp_path / 'bad.csv'
    path.write_text('a,b\nx,y\n', encoding='utf-8')
    with pytest.raises(InputValidationError):
        load_lexicon(path)


def test_join_drops_terms_missing_from_lexicon():
    joined = join_lexicon(tokens_of({'d': ['the good cat']}), BING)
    assert joined.term.tolist() == ['good']


def test_block_sentiment_binary():
    blocks = block_sentiment(tokens_of({'d': ['good', 'bad', 'good']}), BING, block_size=2)
    assert blocks.block.tolist() == [0, 1]
    assert blocks.positive.tolist() == [1, 1]
    assert blocks.negative.tolist() == [1, 0]
    assert blocks.sentiment.tolist() == [0, 1]


def test_block_sentiment_scalar():
    blocks = block_sentiment(tokens_of({'d': ['good', 'sad', 'happy']}), AFINN, block_size=2)
    assert blocks.block.tolist() == [0, 1]
    assert blocks.sentiment.tolist() == [1, 3]


def test_block_sentiment_fills_quiet_blocks():
    tokens = tokens_of({'d': ['good', 'meh', 'meh', 'meh', 'bad'], 'e': ['happy']})
    blocks = block_sentiment(tokens, BING, block_size=2)
    assert list(zip(blocks.doc_id, blocks.block, blocks.sentiment)) == [
        ('d', 0, 1), ('d', 1, 0), ('d', 2, -1), ('e', 0, 1)]


def test_block_sentiment_without_any_matches():
    blocks = block_sentiment(tokens_of({'d': ['meh', 'meh', 'meh']}), BING, block_size=2)
    assert blocks.sentiment.tolist() == [0, 0]


def test_block_size_must_be_positive():
    with pytest.raises(InputValidationError):
        block_sentiment(tokens_of({'d': ['good']}), BING, block_size=0)


def test_sentiment_word_counts():
    counts = count_terms(tokens_of({'d1': ['good good bad'], 'd2': ['good cat']}))
    words = sentiment_word_counts(counts, BING)
    assert list(zip(words.term, words.sentiment, words.n)) == [
        ('good', 'positive', 3), ('bad', 'negative', 1)]
    scored = sentiment_word_counts(counts, AFINN)
    assert scored.contribution.tolist() == [9, -3]


def test_chapter_sentiment_ratio_skips_front_matter():
    tokens = tokens_of({'d': ['bad', 'Chapter 1', 'bad good', 'Chapter 2', 'bad bad good fine']},
                       chap_pat=r'^chapter \d+')
    top = chapter_sentiment_ratio(tokens, BING)
    assert top.chap_id.tolist() == [2]
    assert top.ratio.tolist() == pytest.approx([2 / 6])
    every = chapter_sentiment_ratio(tokens, BING, exclude=(), top=None)
    assert every.chap_id.tolist() == [0, 2, 1]
    assert every.words.tolist() == [1, 6, 4]


def test_chapter_sentiment_ratio_needs_chapters():
    with pytest.raises(InputValidationError):
        chapter_sentiment_ratio(tokens_of({'d': ['bad']}), BING)


def test_negated_contributions():
    bigrams = count_terms(tokenize_docs(corpus_from_mapping({'d': ['not happy at all', 'not sad']}), n=2))
    out = negated_contributions(bigrams, AFINN, ['not', 'no'])
    assert out.term.tolist() == ['not happy', 'not sad']
    assert out.contribution.tolist() == [3, -2]
    assert 'magnitude' not in out.columns


def test_negated_contributions_need_scores():
    with pytest.raises(InputValidationError):
        negated_contributions(pd.DataFrame({'doc_id': [], 'term': [], 'n': []}), BING, ['not'])
