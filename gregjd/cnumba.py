#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 14:10:36 2026

@author: Marcel Hesselberth

numba glue. All compiled functions in gregjd are decorated with cnjit, which
reads its settings from cnumba.ini next to this file (or from the file named
by the GREGJD_CONFIG environment variable).
"""

import os
import logging
from configparser import ConfigParser

import numba

logger = logging.getLogger(__name__)

path, ext = os.path.splitext(__file__)
config_filename = os.environ.get("GREGJD_CONFIG", f"{path}.ini")
config = ConfigParser()
config.read(config_filename)

numba_acc   = (config.getboolean("Numba", "jit", fallback=True)
               and not numba.config.DISABLE_JIT)
numba_cache = config.getboolean("Numba", "cache", fallback=False)

logger.debug("numba %s, jit=%s, cache=%s (%s)", numba.__version__,
             numba_acc, numba_cache, config_filename)


def cnjit(signature_or_function=None, **kwargs):
    """
    Decorator compiling a function in nopython mode.

    Used as @cnjit, @cnjit() or @cnjit(signature_or_function='f8(i8)').
    Keyword arguments are passed on to numba.njit.

    Parameters
    ----------
    signature_or_function : str, function or None
        A numba signature (eager compilation) or the function to compile.

    Returns
    -------
    Dispatcher or function
        The compiled dispatcher, or the function itself when jit is off.
    """
    kwargs.setdefault("cache", numba_cache)

    def wrap(func):
        if not numba_acc:
            return func
        if signature is None:
            return numba.njit(**kwargs)(func)
        return numba.njit(signature, **kwargs)(func)

    if callable(signature_or_function):
        signature = None
        return wrap(signature_or_function)
    signature = signature_or_function
    return wrap
