"""Fitted property curve of liquid water.

The curve is a coarse linear/exponential fit around room temperature. It is
the default fluid model of the rating engine and it is applied to both
streams whatever fluid the exchanger actually handles: results for
non-aqueous fluids are indicative only. Use `CoolPropFluid` for anything
else.
"""
import math
from .constants import (
    T_REF_WATER_CURVE,
    RHO_REF_WATER,
    MU_REF_WATER,
    K_REF_WATER,
    CP_WATER
)
from .fluid import FluidModel, FluidState
from .. import Quantity


Q_ = Quantity


class WaterCurve(FluidModel):

    def __call__(self, T: Quantity) -> FluidState:
        T = T.to('degC').m
        dT = T - T_REF_WATER_CURVE.to('degC').m
        rho = RHO_REF_WATER.to('kg / m ** 3').m - 0.2 * dT
        mu = MU_REF_WATER.to('Pa * s').m * math.exp(-0.02 * dT)
        k = K_REF_WATER.to('W / (m * K)').m + 0.002 * T
        return FluidState(
            T=Q_(T, 'degC'),
            rho=Q_(rho, 'kg / m ** 3'),
            mu=Q_(mu, 'Pa * s'),
            cp=CP_WATER,
            k=Q_(k, 'W / (m * K)')
        )

    def __repr__(self) -> str:
        return 'WaterCurve()'
