"""
Palettes and matplotlib display for noise fields.

Turns generated fields into palette indices and images. Nothing here feeds
back into generation: the functions only consume finished arrays.


Functions
---------
**Palettes:**

    grayPalette()
        256-entry gray ramp.
    terrainPalette()
        256-entry banded water / coast / land / mountain / snow palette.
    getPalette(name)
        Palette by name.
    cmapFromPalette(palette)
        Wrap a palette as a matplotlib colormap.

**Cells:**

    toCells(field, maxAmplitude)
        Offset a field by half its amplitude and wrap it into byte indices.
    skyline(noise, height, amplitude, detail)
        Cell image of a 1-D field drawn as a shaded landscape profile.
    colorize(cells, palette)
        Look up palette colors for a cell image.

**Display:**

    plotField(field, palette, ax, title)
        Line plot of a 1-D field or image of a 2-D field.
    cm2inch(value)
        Convert centimeters to inches for figure sizing.


Notes
-----
Default figure parameters are module-level globals and can be changed before
calling the plot functions.
"""

from typing import Optional, Union
from numpy.typing import NDArray
import matplotlib as mpl
import matplotlib.pyplot as plt
import numpy as np
from valuenoise import logger

#-----------------------------------------------------------------------------#

# Type Aliases
NPFltArr = NDArray[np.float64]
NPByteArr = NDArray[np.uint8]

# Global Variables
log = logger.addLog('vn.render')

# Palette
PALETTE_SIZE = 256
DEFAULT_PALETTE = 'terrain'

# Terrain bands: (upper bound, band start, band width, base rgb, slope rgb)
# Each channel is base + slope * f with f the position inside the band.
TERRAIN_BANDS = [
    (0.3,    0.0, 0.3, (0.0, 0.0, 0.5), (0.0, 0.0, 0.5)),      # deep water
    (0.4,    0.3, 0.1, (0.0, 0.0, 1.0), (0.0, 0.2, -0.2)),     # water
    (0.5,    0.4, 0.1, (0.8, 0.8, 0.2), (0.2, 0.2, -0.2)),     # coast
    (0.6,    0.5, 0.2, (0.5, 0.4, 0.2), (0.3, 0.2, -0.2)),     # land
    (0.7,    0.6, 0.2, (0.2, 0.8, 0.1), (0.2, 0.2, -0.1)),     # high terrain
    (0.8,    0.7, 0.2, (0.4, 0.4, 0.4), (0.4, 0.4, 0.4)),      # mountains
    (np.inf, 0.8, 0.1, (0.7, 0.7, 0.7), (0.3, 0.3, 0.3)),      # snow
]

# Plot Parameters
figSize = [25, 15]      # figure size in cm
dpiValue = 100          # figure dpi value

###############################################################################

def cm2inch(value:float)->float:
    """Convert centimeters to inches for matplotlib figure sizing."""
    return value / 2.54

###############################################################################

def grayPalette()->NPFltArr:
    """
    Gray ramp palette.


    Returns
    -------
    palette : ndarray, shape (256, 3)
        Entry i is gray level i/256 in every channel.
    """

    gray = np.arange(PALETTE_SIZE) / PALETTE_SIZE
    return np.repeat(gray[:, None], 3, axis=1)

###############################################################################

def terrainPalette()->NPFltArr:
    """
    Banded terrain palette.


    Returns
    -------
    palette : ndarray, shape (256, 3)
        RGB rows in [0, 1].


    Notes
    -----
    Entry i maps to height v = i/255 and takes the first band whose upper
    bound exceeds v: deep water below 0.3, water below 0.4, coast below 0.5,
    land below 0.6, high terrain below 0.7, mountains below 0.8, snow above.
    Inside a band the color moves linearly with f = (v - start) / width and
    every channel is clamped to [0, 1].
    """

    palette = np.zeros((PALETTE_SIZE, 3))
    for i in range(PALETTE_SIZE):
        v = i / (PALETTE_SIZE - 1)
        for upper, start, width, base, slope in TERRAIN_BANDS:
            if (v < upper):
                f = (v - start) / width
                palette[i] = np.asarray(base) + np.asarray(slope) * f
                break
    return np.clip(palette, 0, 1)

###############################################################################

PALETTES = {
    'gray': grayPalette,
    'terrain': terrainPalette,
}

def getPalette(name:str = DEFAULT_PALETTE)->NPFltArr:
    """
    Return a palette by name ('gray' or 'terrain').

    Unknown names log a warning and fall back to the terrain palette.
    """

    if (name not in PALETTES):
        log.warning("'%s' is not a valid palette", name)
        log.warning("Proceeding with default: '%s'.", DEFAULT_PALETTE)
        name = DEFAULT_PALETTE
    return PALETTES[name]()

#------------------------------------------------------------------------------

def cmapFromPalette(palette:NPFltArr)->mpl.colors.ListedColormap:
    """Wrap an (n, 3) palette as a matplotlib colormap."""
    return mpl.colors.ListedColormap(palette)

###############################################################################

def _toBytes(values:NPFltArr)->NPByteArr:
    # Truncate toward zero, keep the low 8 bits
    return (np.trunc(values).astype(np.int64) & 0xFF).astype(np.uint8)

#------------------------------------------------------------------------------

def toCells(field:NPFltArr, maxAmplitude:float)->NPByteArr:
    """
    Convert a noise field to palette indices.


    Parameters
    ----------
    field : ndarray
        1-D or 2-D noise field centered on zero.
    maxAmplitude : float
        Amplitude the field was generated with.


    Returns
    -------
    cells : ndarray of uint8, same shape as field
        field + maxAmplitude // 2, truncated toward zero and wrapped to a
        byte.
        Values outside [0, 256) wrap around instead of saturating, so clamp
        the field first if that matters.
    """

    return _toBytes(np.asarray(field, dtype=np.float64) + maxAmplitude // 2)

###############################################################################

def skyline(noise:NPFltArr,
            height:int,
            amplitude:float,
            detail:Optional[NPFltArr] = None,
            )->NPByteArr:
    """
    Draw a 1-D field as a landscape profile cell image.


    Parameters
    ----------
    noise : ndarray, shape (width,)
        1-D noise field generated with `amplitude`.
    height : int
        Image height in cells.
    amplitude : float
        Amplitude of `noise`. Profile heights are noise + amplitude // 2.
    detail : ndarray, shape (width,), optional
        Second 1-D field adding texture, applied at 1/100 of its value.


    Returns
    -------
    cells : ndarray of uint8, shape (height, width)
        Palette indices. Column b is filled from row height - value down to
        the bottom, value = int(noise[b] + amplitude // 2). Cell shades fall by
        one per row from the profile top, lifted by
        (PALETTE_SIZE - 1 - amplitude) // 2 so the ramp sits mid-palette.
        Cells above the profile stay 0.
    """

    noise = np.asarray(noise, dtype=np.float64)
    width = noise.shape[0]
    cells = np.zeros((max(height, 0), width), dtype=np.uint8)
    if (height <= 0 or width == 0):
        return cells

    value = np.trunc(noise + amplitude // 2).astype(np.int64)
    extra = np.zeros(width) if detail is None else np.asarray(detail) / 100
    base = (PALETTE_SIZE - 1 - amplitude) // 2

    # a is the depth of each cell below the top of its column's profile
    a = np.arange(height)[:, None] - (height - value)[None, :]
    filled = (a >= 0) & (a < value)
    shade = _toBytes(value - a + base + extra)
    cells[filled] = shade[filled]
    return cells

###############################################################################

def colorize(cells:NPByteArr, palette:Optional[NPFltArr] = None)->NPFltArr:
    """
    Look up palette colors for a cell image.


    Parameters
    ----------
    cells : ndarray of uint8
        Palette indices.
    palette : ndarray, shape (256, 3), optional
        Palette to use. Defaults to the terrain palette.


    Returns
    -------
    rgb : ndarray, shape cells.shape + (3,)
        RGB values in [0, 1].
    """

    if (palette is None):
        palette = terrainPalette()
    return palette[np.asarray(cells, dtype=np.uint8)]

###############################################################################

def plotField(field:NPFltArr,
              palette:Optional[Union[str, NPFltArr]] = None,
              ax:Optional[plt.Axes] = None,
              title:Optional[str] = None,
              )->plt.Figure:
    """
    Plot a noise field.


    Parameters
    ----------
    field : ndarray
        1-D field (drawn as a line) or 2-D field (drawn as an image with row 0
        at the top).
    palette : str or ndarray, optional
        Palette name or array for 2-D images. Defaults to 'terrain'.
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. A new figure is created if None.
    title : str, optional
        Axes title.


    Returns
    -------
    fig : matplotlib.figure.Figure
        Figure containing the plot. Not shown; call plt.show() or
        fig.savefig() as needed.
    """

    field = np.asarray(field, dtype=np.float64)
    if (ax is None):
        fig = plt.figure(figsize=(cm2inch(figSize[0]), cm2inch(figSize[1])),
                         dpi=dpiValue)
        ax = fig.add_subplot(111)
    else:
        fig = ax.figure

    if (field.ndim == 1):
        ax.plot(np.arange(field.shape[0]), field, linewidth=1)
        ax.set_xlabel('Sample')
        ax.set_ylabel('Value')
        ax.grid(True, alpha=0.3)
    elif (field.ndim == 2):
        if (palette is None or isinstance(palette, str)):
            palette = getPalette(palette or DEFAULT_PALETTE)
        img = ax.imshow(field, cmap=cmapFromPalette(palette),
                        origin='upper', interpolation='nearest')
        fig.colorbar(img, ax=ax)
    else:
        log.warning('Cannot plot a %s-dimensional field', field.ndim)

    if (title is not None):
        ax.set_title(title)
    return fig

###############################################################################
