import math
import pytest
from hexrating import Quantity
from hexrating.fluids import WaterCurve
from hexrating.rating import (
    Stream,
    heat_duty,
    log_mean_temperature_difference,
    correction_factor,
    temperature_difference,
    DegenerateTemperatureDifferenceError
)

Q_ = Quantity


def streams(
    shell_in=150.0, shell_out=90.0, shell_flow=5000.0,
    tube_in=25.0, tube_out=75.0, tube_flow=8000.0
) -> tuple[Stream, Stream]:
    water = WaterCurve()
    shell = Stream.create(Q_(shell_flow, 'kg / hr'), Q_(shell_in, 'degC'), Q_(shell_out, 'degC'), water)
    tube = Stream.create(Q_(tube_flow, 'kg / hr'), Q_(tube_in, 'degC'), Q_(tube_out, 'degC'), water)
    return shell, tube


def test_fluid_evaluated_at_mean_temperature():
    shell, tube = streams()
    assert shell.fluid.T.to('degC').m == pytest.approx(120.0)
    assert tube.fluid.T.to('degC').m == pytest.approx(50.0)
    assert shell.m_dot.to('kg / s').m == pytest.approx(5000 / 3600)


def test_heat_duties_of_example_scenario():
    duty = heat_duty(*streams())
    assert duty.Q_shell == pytest.approx(5000 / 3600 * 4.186 * 60)
    assert duty.Q_tube == pytest.approx(8000 / 3600 * 4.186 * 50)
    assert duty.Q_shell == pytest.approx(348.83, abs=0.01)
    assert duty.Q_tube == pytest.approx(465.11, abs=0.01)
    assert duty.Q_avg == pytest.approx((duty.Q_shell + duty.Q_tube) / 2)
    assert duty.heat_balance_error == pytest.approx(200 / 7)


def test_duty_sign_follows_temperature_change():
    # the shell-side stream is heated instead of cooled
    duty = heat_duty(*streams(shell_in=20.0, shell_out=60.0, tube_in=90.0, tube_out=50.0))
    assert duty.Q_shell < 0.0
    assert duty.Q_tube < 0.0
    assert duty.Q_avg > 0.0


def test_heat_balance_error_vanishes_when_duties_match():
    duty = heat_duty(*streams(shell_flow=5000.0, tube_flow=6000.0))
    assert abs(duty.Q_shell) == pytest.approx(abs(duty.Q_tube))
    assert duty.heat_balance_error == pytest.approx(0.0, abs=1e-9)


def test_heat_balance_error_is_positive_when_duties_differ():
    duty = heat_duty(*streams(tube_flow=6100.0))
    assert duty.heat_balance_error > 0.0


def test_lmtd_of_example_scenario():
    dT = temperature_difference(*streams(), N_passes=1)
    assert dT.dT_1 == pytest.approx(75.0)
    assert dT.dT_2 == pytest.approx(65.0)
    assert dT.LMTD == pytest.approx(10 / math.log(75 / 65))
    assert dT.LMTD == pytest.approx(69.88, abs=0.01)
    assert dT.F == 1.0
    assert dT.CMTD == dT.LMTD
    assert dT.dT_approach == pytest.approx(65.0)
    assert dT.P == pytest.approx(0.4)
    assert dT.R == pytest.approx(1.2)


def test_lmtd_limit_for_equal_terminal_differences():
    assert log_mean_temperature_difference(20.0, 20.0) == 20.0
    assert log_mean_temperature_difference(20.0, 40.0) == pytest.approx(20 / math.log(2))
    assert log_mean_temperature_difference(40.0, 20.0) == pytest.approx(20 / math.log(2))


def test_lmtd_with_zero_terminal_difference_raises():
    with pytest.raises(DegenerateTemperatureDifferenceError):
        log_mean_temperature_difference(0.0, 20.0)
    with pytest.raises(DegenerateTemperatureDifferenceError):
        temperature_difference(*streams(tube_out=150.0), N_passes=1)


@pytest.mark.parametrize('P, R', [(0.4, 1.2), (0.48, 2.0), (0.9, 0.5), (0.0, 3.0)])
def test_single_pass_correction_factor_is_one(P, R):
    assert correction_factor(P, R, N_passes=1) == 1.0


def test_correction_factor_falls_back_to_one_for_unit_capacity_ratio():
    # 150 -> 100 degC against 25 -> 75 degC: R = 1 and dT_1 = dT_2
    dT = temperature_difference(*streams(shell_out=100.0), N_passes=2)
    assert dT.R == 1.0
    assert dT.F == 1.0
    assert dT.LMTD == pytest.approx(75.0)


@pytest.mark.parametrize('P', [0.0, 1.0, 1.2, -0.1])
def test_correction_factor_falls_back_to_one_outside_formula_range(P):
    assert correction_factor(P, 2.0, N_passes=2) == 1.0


def test_multi_pass_correction_factor():
    S = math.sqrt(5)
    W = math.sqrt(0.04 / 0.52)
    F = S * math.log((1 - W) / (1 - 2 * W)) / math.log((2 / W - 3 + S) / (2 / W - 3 - S))
    assert correction_factor(0.48, 2.0, N_passes=2) == pytest.approx(F)
    assert correction_factor(0.48, 2.0, N_passes=2) == pytest.approx(0.9151, abs=1e-3)


def test_multi_pass_correction_factor_is_clamped():
    assert correction_factor(0.465, 2.0, N_passes=2) == 0.75


def test_multi_pass_correction_factor_without_real_value_raises():
    with pytest.raises(DegenerateTemperatureDifferenceError):
        correction_factor(0.4, 0.8, N_passes=2)
    with pytest.raises(DegenerateTemperatureDifferenceError):
        correction_factor(0.6, 2.0, N_passes=2)


def test_equal_inlet_temperatures_raise():
    with pytest.raises(DegenerateTemperatureDifferenceError) as exc_info:
        temperature_difference(*streams(shell_in=25.0, shell_out=20.0), N_passes=1)
    assert exc_info.value.quantity == 'P'


def test_unchanged_tube_temperature_raises():
    with pytest.raises(DegenerateTemperatureDifferenceError) as exc_info:
        temperature_difference(*streams(tube_out=25.0), N_passes=1)
    assert exc_info.value.quantity == 'R'
