# -*- coding: utf-8 -*-
"""
Exceptions raised by litmine.

Everything here is raised synchronously to the caller. Nothing is retried:
a bad corpus or a bad parameter is a data or programming defect.
"""


class LitmineError(Exception):
    pass


class InputValidationError(LitmineError, ValueError):
    """Malformed corpus entry or out-of-range parameter."""


class ConfigError(LitmineError):
    """Unknown config section/key or a config file that is not a mapping."""
