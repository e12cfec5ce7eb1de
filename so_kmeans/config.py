"""config.py

K-means parameters for clustering postings by (language, score)
"""

from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidConfiguration

LANGS = (
    'JavaScript', 'Java', 'PHP', 'Python', 'C#', 'C++', 'Ruby', 'CSS',
    'Objective-C', 'Perl', 'Scala', 'Haskell', 'MATLAB', 'Clojure', 'Groovy')


@dataclass(frozen=True)
class KMeansConfig:
    """Parameters of one clustering run

    :param langs: The known languages, in code order
    :param langSpread: How far apart languages are placed on the first axis
    :param kmeansKernels: Number of centers, a multiple of len(langs)
    :param kmeansEta: Convergence threshold on total center movement
    :param kmeansMaxIterations: Iteration budget of the refinement loop
    :param uniformSampleSeed: Seed of the unstratified sampling fallback
    :param uniformSampleThreshold: Spreads below this are sampled unstratified
    :param strict: Abort on malformed lines instead of dropping them
    """

    langs: Tuple[str, ...] = LANGS
    langSpread: int = 50000
    kmeansKernels: int = 45
    kmeansEta: float = 20.0
    kmeansMaxIterations: int = 120
    uniformSampleSeed: int = 42
    uniformSampleThreshold: int = 500
    strict: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, 'langs', tuple(self.langs))
        if not self.langs:
            raise InvalidConfiguration('at least one language is required')
        if len(set(self.langs)) != len(self.langs):
            raise InvalidConfiguration(f'duplicate languages in {self.langs}')
        # The language is recovered from a point as code // langSpread
        if self.langSpread <= 0:
            raise InvalidConfiguration(
                "if langSpread is not positive the language can't be recovered")
        if self.kmeansKernels <= 0 or self.kmeansKernels % len(self.langs):
            raise InvalidConfiguration(
                'kmeansKernels should be a positive multiple of the number of '
                f'languages, got {self.kmeansKernels} for {len(self.langs)}')
        if self.kmeansMaxIterations < 1:
            raise InvalidConfiguration(
                f'kmeansMaxIterations must be positive, got {self.kmeansMaxIterations}')

    @property
    def perLang(self) -> int:
        """Number of initial centers drawn from each language"""

        return self.kmeansKernels // len(self.langs)

    @property
    def stratified(self) -> bool:
        return self.langSpread >= self.uniformSampleThreshold
