# -*- coding: utf-8 -*-
"""
Tables for reading: deterministic top-n selection and plain-text rendering.
"""


TIES = [('n', False), ('term', True)]


def top_n(df, col, n=10, group='doc_id', ties=None):
    """Top n rows by col (descending), per group.

    ties is a list of (column, ascending) pairs that break equal values of
    col, by default count descending and then term; columns the frame lacks
    are skipped.
    """
    ties = [(c, asc) for c, asc in (TIES if ties is None else ties) if c in df.columns and c != col]
    ranked = df.sort_values([col] + [c for c, _ in ties],
                            ascending=[False] + [asc for _, asc in ties], kind='mergesort')
    if group is None:
        return ranked.head(n).reset_index(drop=True)
    ranked = ranked.groupby(group).head(n)
    return ranked.sort_values(group, kind='mergesort').reset_index(drop=True)


def format_table(df, float_format='{:.5f}', title=None):
    body = df.to_string(index=False, float_format=float_format.format) if len(df.index) else '(empty)'
    if title:
        return '{}\n{}\n{}'.format(title, '-' * len(title), body)
    return body
