"""
example.py - Simple Example for valuenoise

Generates a heightmap and a profile with default settings and plots both.
"""

import matplotlib.pyplot as plt
import valuenoise as vn

#------------------------------------------------------------------------------#
#    Set Up Logging                                                            #
#------------------------------------------------------------------------------#

vn.logger.setupMain()                          # console logging only

#------------------------------------------------------------------------------#
#    Generate                                                                  #
#------------------------------------------------------------------------------#

terrain = vn.ValueNoise((400, 300),            # width x height grid
                        maxAmplitude=255,      # peak-to-peak node range
                        seed=27184235)         # fixes the whole field
profile = vn.ValueNoise(400,                   # 1-D sample count
                        maxAmplitude=200,
                        seed=25083025)
print(terrain)
print(profile)

#------------------------------------------------------------------------------#
#    Plot                                                                      #
#------------------------------------------------------------------------------#

fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 4))
vn.render.plotField(terrain.noise, palette='terrain', ax=ax1, title='2D')
vn.render.plotField(profile.noise, ax=ax2, title='1D')
plt.show()
