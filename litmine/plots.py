# -*- coding: utf-8 -*-
"""
Charts for the tables litmine produces. Each function returns the figure
and leaves showing or saving it to the caller.
"""

import matplotlib.pyplot as plt
import seaborn as sns

from .report import top_n

sns.set_theme()

WIDE = (15, 3)
THIN = (5, 15)


def plot_top_terms(df, value='tf_idf', n=15, group='doc_id'):
    """One horizontal bar chart of the top n terms per document."""
    groups = list(df.groupby(group, sort=True)) if group else [(None, df)]
    fig, axes = plt.subplots(1, len(groups), figsize=(5 * len(groups), 6), squeeze=False)
    for ax, (key, g) in zip(axes[0], groups):
        top = top_n(g, value, n, group=None)
        sns.barplot(data=top, y='term', x=value, orient='h', ax=ax)
        if key is not None:
            ax.set_title(str(key))
    fig.tight_layout()
    return fig


def plot_block_sentiment(blocks):
    """Net sentiment through each document, one row of bars per document."""
    docs = list(blocks.groupby('doc_id', sort=True))
    fig, axes = plt.subplots(len(docs), 1, figsize=(WIDE[0], WIDE[1] * len(docs)), squeeze=False)
    for ax, (doc_id, g) in zip(axes[:, 0], docs):
        ax.bar(g.block, g.sentiment, color=['navy' if s >= 0 else 'firebrick' for s in g.sentiment])
        ax.set_title(str(doc_id))
        ax.set_xlabel('block')
    fig.tight_layout()
    return fig


def plot_corr_heatmap(dtm, terms):
    """Correlation of the given terms' columns in a document-term matrix."""
    corr = dtm[list(terms)].corr()
    fig, ax = plt.subplots(figsize=(10, 10))
    sns.heatmap(corr, vmax=.3, annot=True, center=0,
                cmap='RdYlGn', square=True, linewidths=.5,
                cbar_kws={"shrink": .5}, ax=ax)
    return fig
