"""
Single-octave value noise layers.

An octave is one frequency/amplitude layer: a lattice of random node values
spaced evenly over the output domain, with every sample between nodes filled
by an interpolation strategy. Octaves are summed by the fractal module.


Classes
-------
Octave
    Frozen (index, frequency, amplitude) descriptor.


Functions
---------
nodeValues(source, amplitude, n)
    Draw n lattice node values.
octave1D(source, frequency, amplitude, length, interpolator)
    One 1-D noise layer.
latticeShape(frequency, width, height)
    Step sizes and lattice dimensions of a 2-D octave.
octave2D(source, frequency, amplitude, width, height, interpolator)
    One 2-D noise layer.


Notes
-----
**Draw Order:**

The source is consumed left to right in 1-D and row-major in 2-D. The number
of draws per octave depends only on the sizes and frequency, so the fields of
later octaves do not depend on how earlier ones were interpolated.

**Node Values:**

Each node is ``amplitude/2 - r*amplitude`` for one draw r in [0, 1), so its
magnitude never exceeds amplitude/2.

**Step Sizes:**

Both the 1-D step and the 2-D steps are clamped to at least 1. With more
lattice cells than samples along an axis every sample then lands on a node.
"""

from dataclasses import dataclass
from typing import Tuple
from numpy.typing import NDArray
import numpy as np
from valuenoise import logger
from valuenoise.rng import RandomSource
from valuenoise.interpolation import Interpolator1D, Interpolator2D

#-----------------------------------------------------------------------------#

# Type Aliases
NPFltArr = NDArray[np.float64]

# Global Variables
log = logger.addLog('vn.octave')

###############################################################################

@dataclass(frozen=True)
class Octave:
    """
    One layer of a fractal composition.


    Attributes
    ----------
    index : int
        Octave number, starting at 1.
    frequency : int
        Lattice cells across the domain, 2**index.
    amplitude : float
        Peak-to-peak node range, maxAmplitude / frequency.
    """

    index: int
    frequency: int
    amplitude: float

    @classmethod
    def fromIndex(cls, index:int, maxAmplitude:float)->'Octave':
        """Build octave `index` of a composition with the given amplitude."""
        frequency = 2 ** index
        return cls(index, frequency, maxAmplitude / frequency)

###############################################################################

def nodeValues(source:RandomSource, amplitude:float, n:int)->NPFltArr:
    """
    Draw n node values in [-amplitude/2, amplitude/2].


    Parameters
    ----------
    source : RandomSource
        Source to advance by n draws.
    amplitude : float
        Octave amplitude.
    n : int
        Number of nodes.


    Returns
    -------
    values : ndarray, shape (n,)
        amplitude/2 - r*amplitude for each draw r, in draw order.
    """

    return (amplitude / 2) - source.take(n) * amplitude

###############################################################################

def octave1D(source:RandomSource,
             frequency:int,
             amplitude:float,
             length:int,
             interpolator:Interpolator1D,
             legacyFill:bool = False,
             )->NPFltArr:
    """
    Generate one 1-D octave.


    Parameters
    ----------
    source : RandomSource
        Shared source of the generation call.
    frequency : int
        Number of lattice steps across the domain.
    amplitude : float
        Octave amplitude.
    length : int
        Number of output samples.
    interpolator : Interpolator1D
        Strategy filling samples between nodes.
    legacyFill : bool, default=False
        Use the sample right after the left node as the left endpoint, as the
        legacy generator does. The first sample after each node then repeats
        that node's value.


    Returns
    -------
    wave : ndarray, shape (max(length, 0),)
        Octave field. All zeros, with no draws, if length or frequency is not
        positive.


    Notes
    -----
    The step between nodes is ``max(1, length // frequency)``. The first node
    sits at position 0; further nodes sit at multiples of the step while the
    position is below ``(step + 1) * frequency - 1``. Every node consumes one
    draw whether or not it falls inside the output, and nodes are written
    directly. Samples strictly between two nodes are interpolated using the
    two nodes as endpoints, or from the sample after the left node with
    legacyFill. The final segment may be cut short by the end of
    the output and nothing is written past ``length - 1``.
    """

    wave = np.zeros(max(length, 0))
    if (length <= 0 or frequency <= 0):
        log.debug('Empty 1D octave: length=%s, frequency=%s',
                  length, frequency)
        return wave

    step = max(1, length // frequency)
    shift = 1 if legacyFill else 0
    positions = range(step, (step + 1) * frequency - 1, step)
    nodes = nodeValues(source, amplitude, 1 + len(positions))

    wave[0] = nodes[0]
    for k, i in enumerate(positions):
        last, node = nodes[k], nodes[k + 1]
        if (i < length):
            wave[i] = node
        j = np.arange(i - step + 1, min(i, length))
        if (j.size):
            wave[j] = interpolator(i - step + shift, last, i, node, j)

    return wave

###############################################################################

def latticeShape(frequency:int,
                 width:int,
                 height:int,
                 )->Tuple[int, int, int, int]:
    """
    Compute step sizes and lattice dimensions of a 2-D octave.


    Parameters
    ----------
    frequency : int
        Lattice cells across each axis. Must be positive.
    width, height : int
        Output size in samples. Must be positive.


    Returns
    -------
    stepX, stepY : int
        Samples per lattice cell, clamped to at least 1.
    rows, cols : int
        Lattice dimensions, (height // stepY + 2) and (width // stepX + 2).
        The extra row and column give the last samples a full cell.
    """

    stepX = max(1, width // frequency)
    stepY = max(1, height // frequency)
    return stepX, stepY, height // stepY + 2, width // stepX + 2

###############################################################################

def octave2D(source:RandomSource,
             frequency:int,
             amplitude:float,
             width:int,
             height:int,
             interpolator:Interpolator2D,
             )->NPFltArr:
    """
    Generate one 2-D octave.


    Parameters
    ----------
    source : RandomSource
        Shared source of the generation call.
    frequency : int
        Lattice cells across each axis.
    amplitude : float
        Octave amplitude.
    width, height : int
        Output size in samples.
    interpolator : Interpolator2D
        Strategy filling samples inside each cell. It receives whole arrays
        of corner values and offsets.


    Returns
    -------
    wave : ndarray, shape (max(height, 0), max(width, 0))
        Octave field indexed [row, column]. All zeros, with no draws, if any
        of width, height, frequency is not positive.


    Notes
    -----
    Sample (i, j) lies in cell (i // stepY, j // stepX) at local offset
    (rx, ry). Samples with rx == ry == 0 sit on a node and take its value
    directly. All others are interpolated over the local cell
    (0, 0)-(stepX, stepY) from the corners

    - v1 = lattice[i1, j1]          v2 = lattice[i1, j1 + 1]
    - v3 = lattice[i1 + 1, j1]      v4 = lattice[i1 + 1, j1 + 1]
    """

    if (width <= 0 or height <= 0 or frequency <= 0):
        log.debug('Empty 2D octave: width=%s, height=%s, frequency=%s',
                  width, height, frequency)
        return np.zeros((max(height, 0), max(width, 0)))

    stepX, stepY, rows, cols = latticeShape(frequency, width, height)
    lattice = nodeValues(source, amplitude, rows * cols).reshape(rows, cols)

    i = np.arange(height)[:, None]
    j = np.arange(width)[None, :]
    i1 = i // stepY
    j1 = j // stepX
    ry = i - i1 * stepY
    rx = j - j1 * stepX

    v1 = lattice[i1, j1]
    v2 = lattice[i1, j1 + 1]
    v3 = lattice[i1 + 1, j1]
    v4 = lattice[i1 + 1, j1 + 1]

    wave = interpolator(0, 0, stepX, stepY, v1, v2, v3, v4, rx, ry)
    onNode = (rx == 0) & (ry == 0)
    return np.where(onNode, v1, wave)

###############################################################################
