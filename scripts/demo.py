"""
demo.py - Command Line Demo for valuenoise

Generates a 1-D landscape profile or a 2-D terrain heightmap and shows it in a
matplotlib window, or writes it to an image file with --out. The defaults
reproduce the stock 800x600 profile and heightmap views.

    python scripts/demo.py --mode 2d --width 800 --height 600
    python scripts/demo.py --mode 1d --out profile.png
"""

import argparse
import matplotlib.pyplot as plt
import numpy as np
import valuenoise as vn

#------------------------------------------------------------------------------#
#    Defaults                                                                  #
#------------------------------------------------------------------------------#

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
SEED_1D = 25083025
SEED_2D = 27184235
AMPLITUDE_1D = 200
AMPLITUDE_2D = 255

log = vn.logger.addLog('demo')

##############################################################################

def checkSize(width:int, height:int)->tuple:
    """Return (width, height), falling back to defaults for invalid sizes."""
    if (width <= 0 or height <= 0):
        log.warning('Invalid size parameters %sx%s, using defaults',
                    width, height)
        return DEFAULT_WIDTH, DEFAULT_HEIGHT
    return width, height

##############################################################################

def profile1D(width:int, height:int, seed:int, amplitude:int,
              nOctaves:int)->np.ndarray:
    """Build the 1-D landscape profile as an RGB image."""

    noise = vn.generate(width, amplitude, seed, nOctaves)
    # Low-amplitude texture field layered on the profile shading
    detail = vn.generate(width, (vn.render.PALETTE_SIZE - 1 - amplitude) * 100,
                         seed, nOctaves)
    cells = vn.render.skyline(noise, height, amplitude, detail)
    return vn.render.colorize(cells, vn.render.grayPalette())

##############################################################################

def terrain2D(width:int, height:int, seed:int, amplitude:int,
              nOctaves:int, interpolator:str)->np.ndarray:
    """Build the 2-D heightmap as an RGB image."""

    noise = vn.generate2D(width, height, amplitude, seed, nOctaves,
                          interpolator)
    cells = vn.render.toCells(noise, amplitude)
    return vn.render.colorize(cells, vn.render.terrainPalette())

##############################################################################

def main(argv=None)->None:
    parser = argparse.ArgumentParser(
        description="Generate and display fractal value noise")
    parser.add_argument("--mode", type=str, choices=["1d", "2d"], default="1d",
                        help="Draw a 1-D profile or a 2-D heightmap")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                        help="Image width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT,
                        help="Image height in pixels")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the noise generator")
    parser.add_argument("--amplitude", "-a", type=int, default=None,
                        help="Maximum amplitude of the composition")
    parser.add_argument("--octaves", "-o", type=int, default=vn.fractal.N_OCTAVES,
                        help="Number of octaves to sum")
    parser.add_argument("--interpolator", "-i", type=str, default="bilinear",
                        choices=["bilinear", "parametric"],
                        help="Cell interpolation for the 2-D heightmap")
    parser.add_argument("--out", type=str, default=None,
                        help="Write the image to this file instead of showing it")
    parser.add_argument("--log", type=str, default=None,
                        help="Also write a debug log to this file")
    args = parser.parse_args(argv)

    vn.logger.setupMain(fileName=args.log)
    width, height = checkSize(args.width, args.height)

    if (args.mode == "1d"):
        seed = SEED_1D if args.seed is None else args.seed
        amplitude = AMPLITUDE_1D if args.amplitude is None else args.amplitude
        image = profile1D(width, height, seed, amplitude, args.octaves)
    else:
        seed = SEED_2D if args.seed is None else args.seed
        amplitude = AMPLITUDE_2D if args.amplitude is None else args.amplitude
        image = terrain2D(width, height, seed, amplitude, args.octaves,
                          args.interpolator)
    log.info('Generated %s noise %sx%s with seed %s',
             args.mode, width, height, seed)

    if (args.out is not None):
        plt.imsave(args.out, image)
        log.info('Saved %s', args.out)
    else:
        plt.figure(figsize=(width / 100, height / 100), dpi=100)
        plt.imshow(image)
        plt.axis('off')
        plt.show()

if __name__ == "__main__":
    main()
