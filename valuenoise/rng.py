"""
Seeded random sources for lattice node values.

Every generation call owns exactly one source and draws from it in a fixed
order, so the draw sequence is what makes a field reproducible. Two sources are
provided: the default wraps numpy's PCG64 generator, the legacy source is a
48-bit linear congruential generator kept so fields made with it can be
regenerated exactly.


Classes
-------
RandomSource
    Abstract base: ordered stream of uniform doubles in [0, 1).
NumpySource
    Default source backed by numpy.random.default_rng (PCG64).
LegacySource
    48-bit LCG source for regenerating legacy fields bit-for-bit.


Functions
---------
makeSource(seed, kind)
    Build a source by name.
"""

from abc import ABC, abstractmethod
from typing import Union
from numpy.typing import NDArray
import numpy as np
from valuenoise import logger

#-----------------------------------------------------------------------------#

# Type Aliases
NPFltArr = NDArray[np.float64]

# Global Variables
log = logger.addLog('vn.rng')

# Legacy LCG constants
LCG_MULTIPLIER = 0x5DEECE66D
LCG_INCREMENT = 0xB
LCG_MASK = (1 << 48) - 1
DOUBLE_UNIT = 1.0 / (1 << 53)

# Source kinds
DEFAULT_SOURCE = 'numpy'

###############################################################################

class RandomSource(ABC):
    """
    Ordered stream of uniform doubles in [0, 1) fixed by a 64-bit seed.

    Draws are never rewound or repeated: each call advances the internal state
    and two sources built from the same seed return identical sequences.


    Attributes
    ----------
    seed : int
        Seed the source was constructed with.
    draws : int
        Number of values handed out so far.
    """

    def __init__(self, seed:int)->None:
        self.seed = int(seed)
        self.draws = 0

    def __repr__(self)->str:
        return (f"{self.__class__.__name__}("
                f"seed={self.seed}, draws={self.draws})")

    @abstractmethod
    def next(self)->float:
        """Return the next double in [0, 1)."""
        raise NotImplementedError(
            f"{self.__class__.__name__} does not implement next()")

    def take(self, n:int)->NPFltArr:
        """
        Return the next n draws in order.


        Parameters
        ----------
        n : int
            Number of values to draw. Non-positive n draws nothing.


        Returns
        -------
        values : ndarray, shape (n,)
            Same values as n successive calls to next().
        """

        if (n <= 0):
            return np.zeros(0)
        return np.fromiter((self.next() for _ in range(n)),
                           dtype=np.float64, count=n)

###############################################################################

class NumpySource(RandomSource):
    """
    Random source backed by ``numpy.random.default_rng``.

    Bulk draws through take() consume the generator exactly as the same number
    of single draws would, so lattice construction can ask for a whole row at
    once without changing the sequence.
    """

    def __init__(self, seed:int)->None:
        super().__init__(seed)
        self.rng = np.random.default_rng(seed=self.seed & ((1 << 64) - 1))

    def next(self)->float:
        self.draws += 1
        return float(self.rng.random())

    def take(self, n:int)->NPFltArr:
        if (n <= 0):
            return np.zeros(0)
        self.draws += n
        return self.rng.random(n)

###############################################################################

class LegacySource(RandomSource):
    """
    48-bit linear congruential source.

    The seed is scrambled with the multiplier and truncated to 48 bits. Each
    double is assembled from the high 26 bits of one step and the high 27 bits
    of the next, giving 53 bits of mantissa.


    Notes
    -----
    state' = (state * 0x5DEECE66D + 0xB) mod 2^48

    Negative seeds are accepted and wrap as two's complement 64-bit integers.
    """

    def __init__(self, seed:int)->None:
        super().__init__(seed)
        self._state = (self.seed ^ LCG_MULTIPLIER) & LCG_MASK

    def _nextBits(self, bits:int)->int:
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK
        return self._state >> (48 - bits)

    def next(self)->float:
        self.draws += 1
        return ((self._nextBits(26) << 27) + self._nextBits(27)) * DOUBLE_UNIT

###############################################################################

SOURCES = {
    'numpy': NumpySource,
    'legacy': LegacySource,
}

def makeSource(seed:int,
               kind:Union[str, type] = DEFAULT_SOURCE,
               )->RandomSource:
    """
    Build a fresh random source.


    Parameters
    ----------
    seed : int
        64-bit seed.
    kind : str or RandomSource subclass, default='numpy'
        'numpy' or 'legacy', or a RandomSource subclass to instantiate.
        Unknown names log a warning and fall back to 'numpy'.


    Returns
    -------
    source : RandomSource
        New source owned by the caller.
    """

    if (isinstance(kind, type) and issubclass(kind, RandomSource)):
        return kind(seed)
    if (kind not in SOURCES):
        log.warning("'%s' is not a valid random source", kind)
        log.warning("Proceeding with default: '%s'.", DEFAULT_SOURCE)
        kind = DEFAULT_SOURCE
    return SOURCES[kind](seed)

###############################################################################
