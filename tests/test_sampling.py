"""Tests for choosing the initial centers."""

import pytest

from so_kmeans.config import KMeansConfig
from so_kmeans.dataset import LocalDataset
from so_kmeans.errors import InsufficientSamplePool
from so_kmeans.sampling import reservoirSampling, sampleVectors


def test_reservoir_keeps_stream_when_exactly_full() -> None:
    assert reservoirSampling(7, iter([5, 6, 7]), 3) == [5, 6, 7]


def test_reservoir_samples_from_stream() -> None:
    sample = reservoirSampling(3, iter(range(1000)), 10)
    assert len(sample) == 10
    assert len(set(sample)) == 10
    assert all(0 <= elt < 1000 for elt in sample)
    assert sample != list(range(10))


def test_reservoir_is_seeded_by_language() -> None:
    assert reservoirSampling(50000, iter(range(500)), 5) == \
        reservoirSampling(50000, iter(range(500)), 5)


def test_reservoir_is_roughly_uniform() -> None:
    hits = [0] * 10
    for seed in range(2000):
        for elt in reservoirSampling(seed, iter(range(10)), 1):
            hits[elt] += 1
    assert all(100 < count < 300 for count in hits)


def test_reservoir_short_stream_raises() -> None:
    with pytest.raises(InsufficientSamplePool):
        reservoirSampling(0, iter([1, 2]), 3)


def test_reservoir_short_stream_returned_whole_when_not_strict() -> None:
    assert reservoirSampling(0, iter([1, 2]), 3, strict=False) == [1, 2]


def _points(config : KMeansConfig, perLang : int) -> LocalDataset:
    return LocalDataset(
        (index * config.langSpread, score)
        for index in range(len(config.langs))
        for score in range(perLang))


def test_stratified_sample_covers_every_language() -> None:
    config = KMeansConfig(langs=('Java', 'Python', 'Scala'), kmeansKernels=6)
    centers = sampleVectors(_points(config, 50), config)
    assert len(centers) == 6
    for index in range(3):
        assert len([c for c in centers if c[0] == index * config.langSpread]) == 2
    assert centers == sampleVectors(_points(config, 50), config)


def test_default_parameters_take_three_per_language() -> None:
    config = KMeansConfig()
    centers = sampleVectors(_points(config, 10), config)
    assert len(centers) == config.kmeansKernels
    assert {c[0] // config.langSpread for c in centers} == set(range(len(config.langs)))


def test_missing_language_raises() -> None:
    config = KMeansConfig(langs=('Java', 'Python'), kmeansKernels=2)
    points = LocalDataset([(0, 1), (0, 2)])
    with pytest.raises(InsufficientSamplePool) as info:
        sampleVectors(points, config)
    assert info.value.lang == config.langSpread


def test_small_spread_samples_regardless_of_language(monkeypatch) -> None:
    config = KMeansConfig(langs=('Java', 'Python'), langSpread=100, kmeansKernels=4)
    # every point is Java, which the stratified path would reject
    points = LocalDataset((0, score) for score in range(10))

    def fail(*args, **kwargs):
        raise AssertionError('stratified sampling used')

    monkeypatch.setattr(LocalDataset, 'sampleStratified', fail)
    centers = sampleVectors(points, config)
    assert len(centers) == 4
    assert centers == sampleVectors(points, config)


def test_small_spread_with_too_few_points_raises() -> None:
    config = KMeansConfig(langs=('Java', 'Python'), langSpread=100, kmeansKernels=4)
    with pytest.raises(InsufficientSamplePool):
        sampleVectors(LocalDataset([(0, 1)]), config)


def test_language_below_quota_raises() -> None:
    config = KMeansConfig(langs=('Java', 'Python'), kmeansKernels=4)
    points = LocalDataset([(0, 1), (0, 2), (0, 3), (50000, 4)])
    with pytest.raises(InsufficientSamplePool) as info:
        sampleVectors(points, config)
    assert info.value.lang == config.langSpread
    assert info.value.available == 1
    assert info.value.required == 2
