from .. import Quantity as Q_

# wall and fouling resistances used in the overall heat transfer coefficient
K_TUBE_WALL = Q_(50.0, 'W / (m * K)')  # carbon steel
R_FOULING_TUBE = Q_(0.0002, 'm ** 2 * K / W')
R_FOULING_SHELL = Q_(0.0002, 'm ** 2 * K / W')

# bounds of the correction factor of multi-pass exchangers
F_MIN = 0.75
F_MAX = 1.0

# return bend and entrance losses on the tube side, in velocity heads per pass
K_RETURN_PER_PASS = 4.0
