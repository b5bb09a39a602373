"""
This module provides a few utility decorators
"""
import functools
import logging
import time

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)


def timeit(method):
    '''A decorator for logging the execution time of certain methods'''
    @functools.wraps(method)
    def timed(*args, **kw):
        ts = time.perf_counter()
        result = method(*args, **kw)
        te = time.perf_counter()
        logger.debug('%r  %2.4f s', method.__qualname__, te - ts)
        return result
    return timed
