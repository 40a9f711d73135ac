# -*- coding: utf-8 -*-
"""
Run configuration.

Configs are plain nested dicts, one section per pipeline stage. YAML files
only need to name the keys they change; everything else comes from
DEFAULT_CONFIG.
"""

import copy
import logging

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

# Regular expressions for OHCO
TOKEN_PAT = r"[^\W_]+(?:'[^\W_]+)*"
CHAP_PAT = r'^\s*(?:chapter|CHAPTER|Chapter)\s+(?:[\dIVXLCivxlc]+)\b'

DEFAULT_CONFIG = dict(
    tokens = dict(
        token_pat = TOKEN_PAT,
        lower = True
    ),
    stopwords = dict(
        source = 'nltk',
        extra = []
    ),
    chap = dict(
        chap_pat = CHAP_PAT,
        exclude = [0]
    ),
    sentiment = dict(
        block_size = 80,
        lexicon = None,
        label = 'negative'
    ),
    ngrams = dict(
        n = 2,
        min_count = 20,
        directed = True,
        negation_words = ['not', 'no', 'never', 'without']
    ),
    report = dict(
        top = 10,
        float_format = '{:.5f}'
    )
)


def merge_config(base, overrides):
    """Return a copy of base with overrides merged in, section by section."""
    cfg = copy.deepcopy(base)
    for section, values in (overrides or {}).items():
        if section not in cfg:
            raise ConfigError("Unknown config section: {}".format(section))
        if not isinstance(values, dict):
            raise ConfigError("Config section {} must be a mapping".format(section))
        for key, val in values.items():
            if key not in cfg[section]:
                raise ConfigError("Unknown config key: {}.{}".format(section, key))
            cfg[section][key] = val
    return cfg


def load_config(path=None):
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    with open(path, 'r', encoding='utf-8') as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Config file {} does not hold a mapping".format(path))
    logger.debug("Loaded config overrides from %s: %s", path, sorted(raw))
    return merge_config(DEFAULT_CONFIG, raw)
