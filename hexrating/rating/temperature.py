"""Heat duties and mean temperature difference of a shell-and-tube heat
exchanger.

The shell-side stream is taken as the hot stream and the tube-side stream as
the cold stream. The duties keep their sign: a negative duty means that the
stream is heated (shell side) or cooled (tube side) instead.

References
----------
[1] Kern D. Q. (1950). Process Heat Transfer. McGraw-Hill.
[2] Bowman R. A., Mueller A. C., Nagle W. M. (1940). Mean Temperature
    Difference in Design. Trans. ASME 62, 283-294.
"""
import math
from dataclasses import dataclass
from hexrating import Quantity
from hexrating.fluids import FluidModel, FluidState
from hexrating.logging import ModuleLogger
from .constants import F_MIN, F_MAX
from .exceptions import DegenerateTemperatureDifferenceError

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)


@dataclass(frozen=True)
class Stream:
    """Flow stream through one side of the exchanger.

    Attributes
    ----------
    m_dot:
        Mass flow rate.
    T_in:
        Inlet temperature.
    T_out:
        Outlet temperature.
    fluid:
        Fluid properties at the mean stream temperature.
    """
    m_dot: Quantity
    T_in: Quantity
    T_out: Quantity
    fluid: FluidState

    @classmethod
    def create(
        cls,
        m_dot: Quantity,
        T_in: Quantity,
        T_out: Quantity,
        fluid_model: FluidModel
    ) -> 'Stream':
        """Creates a `Stream` of which the fluid properties are evaluated by
        `fluid_model` at the arithmetic mean of inlet and outlet temperature.
        """
        T_in = T_in.to('degC')
        T_out = T_out.to('degC')
        T_mean = Q_((T_in.m + T_out.m) / 2, 'degC')
        return cls(m_dot.to('kg / s'), T_in, T_out, fluid_model(T_mean))

    @property
    def heat_flow(self) -> Quantity:
        """Heat released by the stream (positive when the stream cools
        down)."""
        dT = self.T_in.to('degC').m - self.T_out.to('degC').m
        Q = self.m_dot * self.fluid.cp * Q_(dT, 'K')
        return Q.to('kW')


@dataclass(frozen=True)
class HeatDuty:
    """Heat duties in kW and the heat balance error in percent."""
    Q_shell: float
    Q_tube: float

    @property
    def Q_avg(self) -> float:
        """Average of the absolute duties; used instead of either duty to
        smooth out an imbalance between both sides."""
        return (abs(self.Q_shell) + abs(self.Q_tube)) / 2

    @property
    def heat_balance_error(self) -> float:
        return abs((self.Q_shell - self.Q_tube) / self.Q_avg) * 100


@dataclass(frozen=True)
class TemperatureDifference:
    """Terminal and mean temperature differences in K, the capacity ratio R,
    the temperature efficiency P and the correction factor F."""
    dT_1: float
    dT_2: float
    LMTD: float
    P: float
    R: float
    F: float

    @property
    def CMTD(self) -> float:
        """Corrected mean temperature difference."""
        return self.F * self.LMTD

    @property
    def dT_approach(self) -> float:
        return min(self.dT_1, self.dT_2)


def heat_duty(shell: Stream, tube: Stream) -> HeatDuty:
    """Returns the heat duty of both sides. The shell side duty is the heat
    released by the shell-side stream, the tube side duty is the heat absorbed
    by the tube-side stream.

    Raises
    ------
    DegenerateTemperatureDifferenceError:
        If both duties are zero.
    """
    Q_shell = shell.heat_flow.to('kW').m
    Q_tube = -tube.heat_flow.to('kW').m
    if Q_shell == 0.0 and Q_tube == 0.0:
        raise DegenerateTemperatureDifferenceError(
            'heat duty', 0.0, 'no temperature change on either side'
        )
    return HeatDuty(Q_shell, Q_tube)


def log_mean_temperature_difference(dT_1: float, dT_2: float) -> float:
    """Returns the logarithmic mean of the terminal temperature differences
    `dT_1` and `dT_2`. When both are equal, the limit value `dT_1` is
    returned.

    Raises
    ------
    DegenerateTemperatureDifferenceError:
        If a terminal temperature difference is zero.
    """
    dT_1, dT_2 = abs(dT_1), abs(dT_2)
    if dT_1 == 0.0 or dT_2 == 0.0:
        raise DegenerateTemperatureDifferenceError(
            'terminal temperature difference', 0.0,
            'LMTD is zero, the required area would be infinite'
        )
    if math.isclose(dT_1, dT_2, rel_tol=1e-12):
        return dT_1
    return abs((dT_1 - dT_2) / math.log(dT_1 / dT_2))


def correction_factor(P: float, R: float, N_passes: int) -> float:
    """Returns the LMTD correction factor F of a multi-pass exchanger.

    For a single pass F is 1. Otherwise the formula is only applied for
    R != 1 and 0 < P < 1; outside this range F is kept at 1. The result is
    clamped between `F_MIN` and `F_MAX`.

    Raises
    ------
    DegenerateTemperatureDifferenceError:
        If the formula has no real value for the given P and R (logarithm of
        a non-positive number or fractional power of a negative number).
    """
    F = 1.0
    if N_passes <= 1:
        return F
    if R == 1.0 or not (0.0 < P < 1.0):
        logger.info(f"F kept at 1.0: P = {P:.4f}, R = {R:.4f} outside formula range")
        return F
    S = math.sqrt(R ** 2 + 1) / (R - 1)
    base = (1 - P * R) / (1 - P)
    if base <= 0.0:
        raise DegenerateTemperatureDifferenceError(
            'F', float('nan'), f'(1 - P.R) / (1 - P) = {base:.4g} is not positive'
        )
    W = base ** (1 / N_passes)
    num_arg = (1 - W) / (1 - R * W) if R * W != 1.0 else float('inf')
    a = 2 / W - 1 - R
    den_arg = (a + S) / (a - S) if a != S else float('inf')
    if not (0.0 < num_arg < float('inf')) or not (0.0 < den_arg < float('inf')):
        raise DegenerateTemperatureDifferenceError(
            'F', float('nan'), f'undefined for P = {P:.4f}, R = {R:.4f}'
        )
    den = math.log(den_arg)
    if den == 0.0:
        raise DegenerateTemperatureDifferenceError(
            'F', float('nan'), f'undefined for P = {P:.4f}, R = {R:.4f}'
        )
    F = S * math.log(num_arg) / den
    F = max(F_MIN, min(F_MAX, F))
    return F


def temperature_difference(shell: Stream, tube: Stream, N_passes: int) -> TemperatureDifference:
    """Returns the mean temperature difference between the shell-side and
    tube-side stream.

    The terminal differences are taken as for counterflow:
    dT_1 = |T_shell_in - T_tube_out| and dT_2 = |T_shell_out - T_tube_in|.
    P and R are defined the same way whatever the actual flow arrangement.

    Raises
    ------
    DegenerateTemperatureDifferenceError:
        If a terminal temperature difference is zero, if the inlet
        temperatures are equal (P undefined) or if the tube-side temperature
        doesn't change (R undefined).
    """
    T_s_in, T_s_out = shell.T_in.to('degC').m, shell.T_out.to('degC').m
    T_t_in, T_t_out = tube.T_in.to('degC').m, tube.T_out.to('degC').m
    dT_1 = abs(T_s_in - T_t_out)
    dT_2 = abs(T_s_out - T_t_in)
    LMTD = log_mean_temperature_difference(dT_1, dT_2)
    if T_s_in == T_t_in:
        raise DegenerateTemperatureDifferenceError(
            'P', float('nan'), 'shell and tube inlet temperatures are equal'
        )
    if T_t_out == T_t_in:
        raise DegenerateTemperatureDifferenceError(
            'R', float('nan'), 'tube outlet temperature equals inlet temperature'
        )
    P = (T_t_out - T_t_in) / (T_s_in - T_t_in)
    R = (T_s_in - T_s_out) / (T_t_out - T_t_in)
    F = correction_factor(P, R, N_passes)
    logger.debug(f"dT_1 = {dT_1:.3f} K, dT_2 = {dT_2:.3f} K, LMTD = {LMTD:.3f} K, F = {F:.4f}")
    return TemperatureDifference(dT_1, dT_2, LMTD, P, R, F)
