"""dataset.py

The partitioned collection the pipeline is written against, plus an
in-memory implementation of it
"""

from abc import ABC, abstractmethod
import functools
import random
from typing import Callable, Iterable, List

from .sampling import reservoirSampling


class Dataset(ABC):
    """Bulk transformations over a (possibly distributed) collection

    Keyed operations expect elements to be (key, value) pairs. Only
    `collect`, `count` and the sampling methods bring data back to the caller.
    """

    @abstractmethod
    def map(self, fn : Callable) -> 'Dataset':
        pass

    @abstractmethod
    def flatMap(self, fn : Callable) -> 'Dataset':
        pass

    @abstractmethod
    def filter(self, predicate : Callable) -> 'Dataset':
        pass

    @abstractmethod
    def join(self, other : 'Dataset') -> 'Dataset':
        """Inner equi-join on key, yielding (key, (left value, right value))"""

    @abstractmethod
    def groupByKey(self) -> 'Dataset':
        """Groups values per key, yielding (key, list of values)"""

    @abstractmethod
    def reduceByKey(self, fn : Callable) -> 'Dataset':
        pass

    @abstractmethod
    def reduce(self, fn : Callable):
        """Folds all elements with an associative function"""

    @abstractmethod
    def collect(self) -> list:
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def sampleUniform(self, totalCount : int, seed : int) -> list:
        """Samples without replacement regardless of key"""

    @abstractmethod
    def cache(self) -> 'Dataset':
        """Keeps the collection in memory across repeated scans"""

    @abstractmethod
    def unpersist(self) -> 'Dataset':
        pass

    def sampleStratified(self, perGroupQuota : int, seedFn : Callable) -> list:
        """Reservoir samples `perGroupQuota` values from every key

        :param perGroupQuota: Number of values kept per key
        :param seedFn: Maps a key to the seed of its reservoir
        :return: A local list of (key, value) pairs; a key with fewer than
            `perGroupQuota` values contributes all of them
        """

        return self \
            .groupByKey() \
            .flatMap(lambda group : [
                (group[0], value) for value in
                reservoirSampling(seedFn(group[0]), iter(group[1]), perGroupQuota, strict=False)]) \
            .collect()


class LocalDataset(Dataset):
    """A Dataset held as a single in-memory list

    Iteration order is the insertion order, which keeps local runs reproducible.
    """

    def __init__(self, items : Iterable = ()) -> None:
        self._items = list(items)

    def __repr__(self) -> str:
        return f'LocalDataset({len(self._items)} items)'

    def map(self, fn : Callable) -> 'LocalDataset':
        return LocalDataset(fn(item) for item in self._items)

    def flatMap(self, fn : Callable) -> 'LocalDataset':
        return LocalDataset(out for item in self._items for out in fn(item))

    def filter(self, predicate : Callable) -> 'LocalDataset':
        return LocalDataset(item for item in self._items if predicate(item))

    def join(self, other : Dataset) -> 'LocalDataset':
        right = {}
        for key, value in other.collect():
            right.setdefault(key, []).append(value)
        return LocalDataset(
            (key, (value, match))
            for key, value in self._items
            for match in right.get(key, ()))

    def groupByKey(self) -> 'LocalDataset':
        groups = {}
        for key, value in self._items:
            groups.setdefault(key, []).append(value)
        return LocalDataset(groups.items())

    def reduceByKey(self, fn : Callable) -> 'LocalDataset':
        reduced = {}
        for key, value in self._items:
            reduced[key] = fn(reduced[key], value) if key in reduced else value
        return LocalDataset(reduced.items())

    def reduce(self, fn : Callable):
        if not self._items:
            raise ValueError('Can not reduce() empty LocalDataset')
        return functools.reduce(fn, self._items)

    def collect(self) -> List:
        return list(self._items)

    def count(self) -> int:
        return len(self._items)

    def sampleUniform(self, totalCount : int, seed : int) -> list:
        return random.Random(seed).sample(self._items, min(totalCount, len(self._items)))

    def cache(self) -> 'LocalDataset':
        return self

    def unpersist(self) -> 'LocalDataset':
        return self
