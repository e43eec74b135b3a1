"""
valuenoise: Deterministic Fractal Value Noise

Reproducible 1-D and 2-D value noise for heightmaps and terrain profiles. A
seed, a domain size, a maximum amplitude and an octave count fix the output
completely.

Modules
-------
rng : Seeded random sources
interpolation : 1-D and 2-D interpolation strategies
octave : Single-octave lattice construction and fill
fractal : Octave composition, generate() and generate2D()
render : Palettes, cell images and matplotlib display
logger : Logging configuration and utilities

Examples
--------
### 1-D profile:

>>> import valuenoise as vn
>>>
>>> line = vn.generate(800, 200, seed=25083025)
>>> line.shape
(800,)

### 2-D heightmap with a terrain palette:

>>> grid = vn.generate2D(800, 600, 255, seed=27184235)
>>> cells = vn.render.toCells(grid, 255)
>>> rgb = vn.render.colorize(cells, vn.render.terrainPalette())

### Regenerate a field made with the legacy 48-bit LCG:

>>> legacy = vn.generate2D(800, 600, 255, seed=27184235, source='legacy')
"""

# Core modules - import for direct access
from . import logger
from . import rng
from . import interpolation
from . import octave
from . import fractal
from . import render

# Classes and functions for convenience
from .fractal import generate, generate2D, ValueNoise

# Version info
__version__ = "0.1.0"

# Define what gets imported with "from valuenoise import *"
__all__ = [
    # Modules
    'logger',
    'rng',
    'interpolation',
    'octave',
    'fractal',
    'render',
    # Main functions and classes
    'generate',
    'generate2D',
    'ValueNoise',
]
