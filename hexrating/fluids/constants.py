from .. import Quantity as Q_

STANDARD_PRESSURE = Q_(101325.0, 'Pa')

# Coefficients of the fitted water property curve (see `water.WaterCurve`).
T_REF_WATER_CURVE = Q_(20.0, 'degC')
RHO_REF_WATER = Q_(1000.0, 'kg / m ** 3')
MU_REF_WATER = Q_(1.0e-3, 'Pa * s')
K_REF_WATER = Q_(0.6, 'W / (m * K)')
CP_WATER = Q_(4.186, 'kJ / (kg * K)')
