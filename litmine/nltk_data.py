# -*- coding: utf-8 -*-

import logging

import nltk
from nltk.data import find

logger = logging.getLogger(__name__)


def ensure_nltk_data(resource, package):
    """Download an NLTK data package the first time it is needed."""
    try:
        find(resource)
    except LookupError:
        logger.info("Downloading NLTK package %s", package)
        nltk.download(package, quiet=True)
