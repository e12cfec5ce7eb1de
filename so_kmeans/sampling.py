"""sampling.py

Picks the initial k-means centers with per-language reservoir sampling
"""

import logging
import random
from typing import Iterator, List

from .config import KMeansConfig
from .errors import InsufficientSamplePool

logger = logging.getLogger(__name__)


def reservoirSampling(lang : int, iterator : Iterator, size : int,
                      strict : bool = True) -> list:
    """Draws a uniform sample of a stream in a single pass

    The first `size` elements fill the reservoir. The element at 1-based
    position i > size replaces slot j, with j uniform in [0, i), when j < size.

    :param lang: The language code, used as the random seed
    :param iterator: The elements of one language partition
    :param size: The number of elements to keep
    :param strict: Whether a stream shorter than `size` raises or is returned whole
    :return: A list of `size` elements, fewer only for a short stream when not strict
    """

    res = []
    rnd = random.Random(lang)
    for elt in iterator:
        res.append(elt)
        if len(res) == size:
            break
    if len(res) < size and strict:
        raise InsufficientSamplePool(lang, len(res), size)

    i = size
    for elt in iterator:
        i += 1
        if (j := rnd.randrange(i)) < size:
            res[j] = elt
    return res


def sampleVectors(vectors, config : KMeansConfig) -> List[tuple]:
    """Chooses the initial centers

    :param vectors: A Dataset of (language code, score) points
    :param config: The k-means parameters
    :return: A list of exactly config.kmeansKernels points
    """

    k = config.kmeansKernels
    if not config.stratified:
        # Languages are too close together to sample them separately
        logger.info('Sampling %d centers regardless of language', k)
        res = vectors.sampleUniform(k, config.uniformSampleSeed)
        if len(res) != k:
            raise InsufficientSamplePool(None, len(res), k)
        return res

    logger.info('Sampling %d centers per language over %d languages',
                config.perLang, len(config.langs))
    sampled = vectors.sampleStratified(config.perLang, lambda lang : lang)
    res = sorted(sampled)

    counts = {}
    for lang, _ in res:
        counts[lang] = counts.get(lang, 0) + 1
    for index in range(len(config.langs)):
        lang = index * config.langSpread
        if counts.get(lang, 0) != config.perLang:
            raise InsufficientSamplePool(lang, counts.get(lang, 0), config.perLang)
    if len(res) != k:
        raise InsufficientSamplePool(None, len(res), k)
    return res
