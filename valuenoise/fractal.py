"""
Fractal (fBm) composition of value noise octaves.

A composition sums a fixed number of octaves. Octave k has frequency 2^k and
amplitude maxAmplitude / 2^k, so each layer doubles the detail and halves the
contribution of the one before it. All octaves of one call draw from a single
random source seeded once, in octave order.


Classes
-------
ValueNoise
    Parameter container that generates and keeps a 1-D or 2-D noise field.


Functions
---------
octaves(maxAmplitude, nOctaves)
    Iterate the Octave descriptors of a composition.
amplitudeSum(maxAmplitude, nOctaves)
    Sum of octave amplitudes, maxAmplitude * (1 - 2^-N).
generate(length, maxAmplitude, seed, ...)
    1-D fractal noise field.
generate2D(width, height, maxAmplitude, seed, ...)
    2-D fractal noise field.


Notes
-----
**Output Envelope:**

Every node of octave k lies within +-amplitude_k / 2 and both default
strategies stay within the range of their endpoints, so no sample exceeds
amplitudeSum(maxAmplitude, N) / 2 in magnitude. Nodes are independent draws,
so the bound is an envelope, not a range the field reaches.

**Errors:**

Non-positive sizes return empty or zero-filled arrays. Overflow and NaN are
not trapped and pass through into the returned field.


Examples
--------
>>> import valuenoise as vn
>>> line = vn.generate(800, 200, seed=25083025)
>>> line.shape
(800,)
>>> grid = vn.generate2D(800, 600, 255, seed=27184235)
>>> grid.shape
(600, 800)
"""

from collections.abc import Generator
from typing import Optional, Tuple, Union
from numpy.typing import NDArray
import numpy as np
from valuenoise import logger
from valuenoise.rng import LegacySource, makeSource, DEFAULT_SOURCE
from valuenoise.octave import Octave, octave1D, octave2D
from valuenoise.interpolation import (Interpolator1D, Interpolator2D,
                                      get1D, get2D, DEFAULT_1D, DEFAULT_2D)

#-----------------------------------------------------------------------------#

# Type Aliases
NPFltArr = NDArray[np.float64]
Number = Union[int, float, np.number]
SourceKind = Union[str, type]

# Global Variables
log = logger.addLog('vn.fractal')

# Default number of octaves in a composition
N_OCTAVES = 7

###############################################################################

def octaves(maxAmplitude:Number,
            nOctaves:int = N_OCTAVES,
            )->Generator[Octave, None, None]:
    """
    Yield the octaves of a composition, index 1 through nOctaves.


    Parameters
    ----------
    maxAmplitude : float
        Amplitude the composition is scaled to.
    nOctaves : int, default=7
        Number of octaves.


    Yields
    ------
    octave : Octave
        Octave with frequency 2^k and amplitude maxAmplitude / 2^k.
    """

    for k in range(1, nOctaves + 1):
        yield Octave.fromIndex(k, maxAmplitude)

###############################################################################

def amplitudeSum(maxAmplitude:Number, nOctaves:int = N_OCTAVES)->float:
    """Return the summed octave amplitudes, maxAmplitude * (1 - 2^-N)."""
    return maxAmplitude * (1 - 2.0 ** -nOctaves)

###############################################################################

def generate(length:int,
             maxAmplitude:Number,
             seed:int,
             nOctaves:int = N_OCTAVES,
             interpolator:Union[str, Interpolator1D] = DEFAULT_1D,
             source:SourceKind = DEFAULT_SOURCE,
             )->NPFltArr:
    """
    Generate a 1-D fractal value noise sequence.


    Parameters
    ----------
    length : int
        Number of samples. Non-positive gives an empty array.
    maxAmplitude : float
        Composition amplitude. Octave k uses maxAmplitude / 2^k.
    seed : int
        64-bit seed. Same arguments always give the same field.
    nOctaves : int, default=7
        Number of octaves summed.
    interpolator : str or Interpolator1D, default='fade'
        Strategy between lattice nodes, 'fade' or 'linear'.
    source : str or RandomSource subclass, default='numpy'
        Kind of random source created for this call.
        With 'legacy' the samples after each node are also filled the way
        the legacy generator fills them, so its profiles are reproduced
        exactly.


    Returns
    -------
    noise : ndarray, shape (max(length, 0),)
        Sum of all octave fields.
    """

    strategy = get1D(interpolator)
    rng = makeSource(seed, source)
    noise = np.zeros(max(length, 0))
    if (length <= 0):
        log.debug('Non-positive length %s: returning empty field', length)
        return noise

    legacyFill = isinstance(rng, LegacySource)
    for octave in octaves(maxAmplitude, nOctaves):
        noise += octave1D(rng, octave.frequency, octave.amplitude,
                          length, strategy, legacyFill)
    log.debug('1D noise: length=%s, octaves=%s, draws=%s',
              length, nOctaves, rng.draws)
    return noise

###############################################################################

def generate2D(width:int,
               height:int,
               maxAmplitude:Number,
               seed:int,
               nOctaves:int = N_OCTAVES,
               interpolator:Union[str, Interpolator2D] = DEFAULT_2D,
               source:SourceKind = DEFAULT_SOURCE,
               )->NPFltArr:
    """
    Generate a 2-D fractal value noise grid.


    Parameters
    ----------
    width, height : int
        Grid size in samples. Non-positive gives an empty array.
    maxAmplitude : float
        Composition amplitude. Octave k uses maxAmplitude / 2^k.
    seed : int
        64-bit seed. Same arguments always give the same grid.
    nOctaves : int, default=7
        Number of octaves summed.
    interpolator : str or Interpolator2D, default='bilinear'
        Cell strategy, 'bilinear' (area weighted) or 'parametric'.
    source : str or RandomSource subclass, default='numpy'
        Kind of random source created for this call.


    Returns
    -------
    noise : ndarray, shape (max(height, 0), max(width, 0))
        Sum of all octave fields, indexed [row, column].
    """

    strategy = get2D(interpolator)
    rng = makeSource(seed, source)
    noise = np.zeros((max(height, 0), max(width, 0)))
    if (width <= 0 or height <= 0):
        log.debug('Non-positive size %sx%s: returning empty field',
                  width, height)
        return noise

    for octave in octaves(maxAmplitude, nOctaves):
        noise += octave2D(rng, octave.frequency, octave.amplitude,
                          width, height, strategy)
    log.debug('2D noise: %sx%s, octaves=%s, draws=%s',
              width, height, nOctaves, rng.draws)
    return noise

###############################################################################

class ValueNoise:
    """
    Fractal value noise field with its generation parameters.

    Generates the field on construction and keeps every parameter needed to
    regenerate it.


    Parameters
    ----------
    size : int or (int, int)
        Sample count for a 1-D field, or (width, height) for a 2-D grid.
    maxAmplitude : float, default=255
        Composition amplitude.
    seed : int, default=0
        Seed. seed=0 is valid and reproducible. Ignored if random=True.
    nOctaves : int, default=7
        Number of octaves.
    interpolator : str or strategy, optional
        Defaults to 'fade' for 1-D and 'bilinear' for 2-D.
    source : str, default='numpy'
        Random source kind.
    random : bool, default=False
        If True, draw a fresh seed from system entropy and store it in
        self.seed.


    Attributes
    ----------
    noise : ndarray
        Generated field, shape (length,) or (height, width).
    dims : int
        1 or 2.


    Examples
    --------
    >>> vn = ValueNoise((800, 600), maxAmplitude=255, seed=27184235)
    >>> vn.noise.shape
    (600, 800)
    >>> heights = vn.shifted()      # offset into [0, maxAmplitude]
    """

    def __init__(self,
                 size:Union[int, Tuple[int, int]],
                 maxAmplitude:Number = 255,
                 seed:int = 0,
                 nOctaves:int = N_OCTAVES,
                 interpolator:Optional[Union[str, Interpolator1D,
                                             Interpolator2D]] = None,
                 source:SourceKind = DEFAULT_SOURCE,
                 random:bool = False,
                 ):

        self.size = size
        self.maxAmplitude = maxAmplitude
        self.nOctaves = nOctaves
        self.source = source
        self.seed = seed
        if (random):
            self.seed = int(np.random.SeedSequence().entropy) & ((1 << 63) - 1)
            log.info('Random noise seed: %s', self.seed)

        if (isinstance(size, (tuple, list))):
            self.dims = 2
            self.interpolator = get2D(DEFAULT_2D if interpolator is None
                                      else interpolator)
            width, height = size
            self.noise = generate2D(width, height, maxAmplitude, self.seed,
                                    nOctaves, self.interpolator, source)
        else:
            self.dims = 1
            self.interpolator = get1D(DEFAULT_1D if interpolator is None
                                      else interpolator)
            self.noise = generate(size, maxAmplitude, self.seed,
                                  nOctaves, self.interpolator, source)

    ## Special Methods =======================================================#
    def __repr__(self)->str:
        """Detailed description of ValueNoise."""
        return (
            f"{self.__class__.__name__}("
            f"size={self.size}, "
            f"maxAmplitude={self.maxAmplitude}, "
            f"seed={self.seed}, "
            f"nOctaves={self.nOctaves}, "
            f"interpolator='{self.interpolator.name}', "
            f"source='{self.source}')"
        )

    #--------------------------------------------------------------------------
    def __str__(self)->str:
        """User friendly description of ValueNoise."""
        cw = 16
        lo, hi = self.range()
        return (
            f"Value Noise {self.dims}D\n"
            f"{' Size:':{cw}} {self.size}\n"
            f"{' Amplitude:':{cw}} {self.maxAmplitude}\n"
            f"{' Octaves:':{cw}} {self.nOctaves}\n"
            f"{' Interpolator:':{cw}} {self.interpolator.name}\n"
            f"{' Seed:':{cw}} {self.seed}\n"
            f"{' Range:':{cw}} {lo:.3f} to {hi:.3f}\n"
        )

    ## Methods ===============================================================#
    def range(self)->Tuple[float, float]:
        """Smallest and largest sample, (0, 0) for an empty field."""
        if (self.noise.size == 0):
            return 0.0, 0.0
        return float(self.noise.min()), float(self.noise.max())

    #--------------------------------------------------------------------------
    def envelope(self)->float:
        """Largest magnitude any sample can reach."""
        return amplitudeSum(self.maxAmplitude, self.nOctaves) / 2

    #--------------------------------------------------------------------------
    def shifted(self)->NPFltArr:
        """Field offset by maxAmplitude/2, the display convention."""
        return self.noise + self.maxAmplitude / 2

    #--------------------------------------------------------------------------
    def normalized(self)->NPFltArr:
        """
        Field linearly rescaled to [0, 1].

        A constant or empty field maps to zeros.
        """

        lo, hi = self.range()
        if (hi - lo <= 0):
            return np.zeros_like(self.noise)
        return (self.noise - lo) / (hi - lo)

###############################################################################
