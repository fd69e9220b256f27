from .constants import (
    CP_WATER,
    STANDARD_PRESSURE,
    T_REF_WATER_CURVE
)

from .fluid import FluidState, FluidModel, CoolPropFluid

from .water import WaterCurve

from .exceptions import CoolPropError
