import logging
import time

logger = logging.getLogger(__name__)


def timeit(method):
    def timed(*args, **kw):
        ts = time.perf_counter()
        result = method(*args, **kw)
        te = time.perf_counter()
        logger.debug("%s elapsed time: %f sec", method.__qualname__, (te - ts))
        return result

    return timed
