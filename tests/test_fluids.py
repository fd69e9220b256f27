import math
import pytest
from hexrating import Quantity
from hexrating.fluids import WaterCurve, CoolPropFluid, CoolPropError, FluidState

Q_ = Quantity


def test_water_curve_at_reference_temperature():
    water = WaterCurve()(Q_(20, 'degC'))
    assert water.rho.to('kg / m ** 3').m == pytest.approx(1000.0)
    assert water.mu.to('Pa * s').m == pytest.approx(1.0e-3)
    assert water.cp.to('kJ / (kg * K)').m == pytest.approx(4.186)
    assert water.k.to('W / (m * K)').m == pytest.approx(0.64)
    assert water.Pr == pytest.approx(1.0e-3 * 4.186 * 1000 / 0.64)


@pytest.mark.parametrize('T', [-10.0, 50.0, 120.0, 300.0])
def test_water_curve_follows_fitted_expressions(T):
    water = WaterCurve()(Q_(T, 'degC'))
    mu = 0.001 * math.exp(-0.02 * (T - 20))
    k = 0.6 + 0.002 * T
    assert water.rho.to('kg / m ** 3').m == pytest.approx(1000 - 0.2 * (T - 20))
    assert water.mu.to('Pa * s').m == pytest.approx(mu)
    assert water.k.to('W / (m * K)').m == pytest.approx(k)
    assert water.Pr == pytest.approx(mu * 4.186 * 1000 / k)


def test_water_curve_accepts_kelvin():
    water_C = WaterCurve()(Q_(50, 'degC'))
    water_K = WaterCurve()(Q_(323.15, 'K'))
    assert water_K.rho.m == pytest.approx(water_C.rho.m)
    assert water_K.Pr == pytest.approx(water_C.Pr)


def test_coolprop_water_near_room_temperature():
    water = CoolPropFluid('Water')(Q_(20, 'degC'))
    assert isinstance(water, FluidState)
    assert water.rho.to('kg / m ** 3').m == pytest.approx(998.2, rel=1e-3)
    assert water.mu.to('Pa * s').m == pytest.approx(1.0016e-3, rel=1e-2)
    assert water.Pr == pytest.approx(7.0, rel=0.02)


def test_coolprop_unknown_fluid_raises():
    with pytest.raises((CoolPropError, ValueError)):
        CoolPropFluid('NotAFluid')(Q_(20, 'degC'))


def test_coolprop_water_above_boiling_point_needs_pressure():
    T = Q_(120, 'degC')
    steam = CoolPropFluid('Water')(T)
    liquid = CoolPropFluid('Water', P=Q_(5, 'bar'))(T)
    assert steam.rho.to('kg / m ** 3').m < 1.0
    assert liquid.rho.to('kg / m ** 3').m == pytest.approx(943.4, rel=1e-2)
