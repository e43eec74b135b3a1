"""
Interpolation strategies used to fill the space between lattice nodes.

Strategies are stateless callables. They accept plain floats or numpy arrays
(broadcasting), and none of them clamp their inputs or guard degenerate cells:
a query outside the cell extrapolates with the same formula, and a cell of
zero width or height divides by zero. Octave generation never builds such a
cell because its step sizes are at least 1.


Classes
-------
Interpolator1D
    Base for (x1, y1, x2, y2, x) -> y strategies.
Linear
    Straight line between the two known samples.
Fade
    Quintic smoothstep 6t^5 - 15t^4 + 10t^3 between the two samples.
Interpolator2D
    Base for four-corner cell strategies.
Bilinear
    Area-weighted bilinear interpolation.
ParametricBilinear
    Edge-then-vertical bilinear interpolation on normalized offsets.


Functions
---------
fade(t)
    Quintic smoothstep polynomial.
get1D(name), get2D(name)
    Resolve a strategy from a name or instance.


Notes
-----
Corner order for the 2-D strategies::

    v1 (x1, y1) ---- v2 (x2, y1)
        |                 |
    v3 (x1, y2) ---- v4 (x2, y2)
"""

from abc import ABC, abstractmethod
from typing import Union
from numpy.typing import NDArray
import numpy as np
from valuenoise import logger

#-----------------------------------------------------------------------------#

# Type Aliases
NPFltArr = NDArray[np.float64]
Value = Union[float, NPFltArr]

# Global Variables
log = logger.addLog('vn.interp')

# Default strategy names
DEFAULT_1D = 'fade'
DEFAULT_2D = 'bilinear'

###############################################################################

def fade(t:Value)->Value:
    """
    Quintic smoothstep with zero first and second derivatives at t=0 and t=1.


    Parameters
    ----------
    t : float or ndarray
        Normalized position, nominally in [0, 1].


    Returns
    -------
    ft : float or ndarray
        t^3 (t (6t - 15) + 10).
    """

    return t * t * t * (t * (t * 6 - 15) + 10)

###############################################################################

class Interpolator1D(ABC):
    """
    Strategy interpolating between two known samples (x1, y1) and (x2, y2).
    """

    name = ''

    def __repr__(self)->str:
        return f"{self.__class__.__name__}()"

    def __call__(self, x1:Value, y1:Value, x2:Value, y2:Value,
                 x:Value)->Value:
        return self.interpolate(x1, y1, x2, y2, x)

    @abstractmethod
    def interpolate(self, x1:Value, y1:Value, x2:Value, y2:Value,
                    x:Value)->Value:
        """
        Return the interpolated value at query position x.


        Parameters
        ----------
        x1, y1 : float or ndarray
            Position and value of the left sample.
        x2, y2 : float or ndarray
            Position and value of the right sample. x1 < x2 in normal use.
        x : float or ndarray
            Query position.


        Returns
        -------
        y : float or ndarray
            Interpolated value.
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} does not implement interpolate()")

#------------------------------------------------------------------------------

class Linear(Interpolator1D):
    """Linear interpolation: y1 + (x-x1)(y2-y1)/(x2-x1)."""

    name = 'linear'

    def interpolate(self, x1, y1, x2, y2, x):
        return y1 + (x - x1) * (y2 - y1) / (x2 - x1)

#------------------------------------------------------------------------------

class Fade(Interpolator1D):
    """
    Smoothstep interpolation.

    With t = (x-x1)/(x2-x1) the result is y1 + fade(t)(y2-y1). The curve
    leaves and enters each node with zero slope, so adjacent segments join
    without a kink.
    """

    name = 'fade'

    def interpolate(self, x1, y1, x2, y2, x):
        t = (x - x1) / (x2 - x1)
        return y1 + fade(t) * (y2 - y1)

###############################################################################

class Interpolator2D(ABC):
    """
    Strategy interpolating inside a rectangular cell from its four corners.
    """

    name = ''

    def __repr__(self)->str:
        return f"{self.__class__.__name__}()"

    def __call__(self, x1:Value, y1:Value, x2:Value, y2:Value,
                 v1:Value, v2:Value, v3:Value, v4:Value,
                 tx:Value, ty:Value)->Value:
        return self.interpolate(x1, y1, x2, y2, v1, v2, v3, v4, tx, ty)

    @abstractmethod
    def interpolate(self, x1:Value, y1:Value, x2:Value, y2:Value,
                    v1:Value, v2:Value, v3:Value, v4:Value,
                    tx:Value, ty:Value)->Value:
        """
        Return the interpolated value at (tx, ty).


        Parameters
        ----------
        x1, y1 : float
            Top-left cell corner.
        x2, y2 : float
            Bottom-right cell corner.
        v1, v2, v3, v4 : float or ndarray
            Top-left, top-right, bottom-left and bottom-right corner values.
        tx, ty : float or ndarray
            Query point in the same frame as the corners.


        Returns
        -------
        v : float or ndarray
            Interpolated value.
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} does not implement interpolate()")

#------------------------------------------------------------------------------

class Bilinear(Interpolator2D):
    """
    Area-weighted bilinear interpolation.

    Each corner is weighted by the area of the rectangle spanned by the query
    point and the opposite corner, normalized by the cell area.
    """

    name = 'bilinear'

    def interpolate(self, x1, y1, x2, y2, v1, v2, v3, v4, tx, ty):
        w4 = np.abs((tx - x1) * (ty - y1)) * v4
        w3 = np.abs((tx - x2) * (ty - y1)) * v3
        w2 = np.abs((tx - x1) * (ty - y2)) * v2
        w1 = np.abs((tx - x2) * (ty - y2)) * v1
        # Summation order is fixed: legacy fields depend on it bit for bit
        return (w4 + w3 + w2 + w1) / ((x2 - x1) * (y2 - y1))

#------------------------------------------------------------------------------

class ParametricBilinear(Interpolator2D):
    """
    Bilinear interpolation on normalized offsets.

    Interpolates along the top and bottom edges by dx, then between the two
    edge values by dy.
    """

    name = 'parametric'

    def interpolate(self, x1, y1, x2, y2, v1, v2, v3, v4, tx, ty):
        dx = (tx - x1) / (x2 - x1)
        dy = (ty - y1) / (y2 - y1)
        top = v1 * (1 - dx) + v2 * dx
        bottom = v3 * (1 - dx) + v4 * dx
        return top * (1 - dy) + bottom * dy

###############################################################################

STRATEGIES_1D = {s.name: s for s in (Linear(), Fade())}
STRATEGIES_2D = {s.name: s for s in (Bilinear(), ParametricBilinear())}

def _resolve(choice, table:dict, base:type, default:str):
    if (isinstance(choice, base)):
        return choice
    if (choice not in table):
        log.warning("'%s' is not a valid %s strategy", choice,
                    base.__name__)
        log.warning("Proceeding with default: '%s'.", default)
        choice = default
    return table[choice]

def get1D(choice:Union[str, Interpolator1D] = DEFAULT_1D)->Interpolator1D:
    """Return the 1-D strategy for a name ('linear', 'fade') or instance."""
    return _resolve(choice, STRATEGIES_1D, Interpolator1D, DEFAULT_1D)

def get2D(choice:Union[str, Interpolator2D] = DEFAULT_2D)->Interpolator2D:
    """Return the 2-D strategy for a name ('bilinear', 'parametric') or instance."""
    return _resolve(choice, STRATEGIES_2D, Interpolator2D, DEFAULT_2D)

###############################################################################
