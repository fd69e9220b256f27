import math
from typing import Type
from hexrating import Quantity
from hexrating.fluids import FluidState
from .constants import K_RETURN_PER_PASS
from .correlations import FlowRegime, TubeSideCorrelations
from .exceptions import GeometryInconsistentError
from .geometry import ExchangerGeometry

Q_ = Quantity


def check_positive(name: str, value: float) -> float:
    """Returns `value` if it is a finite, positive number; otherwise raises
    `GeometryInconsistentError`."""
    if not math.isfinite(value) or value <= 0.0:
        raise GeometryInconsistentError(name, value, 'must be finite and positive')
    return value


class TubeSide:
    """Flow of the tube-side fluid through the tubes of one pass."""

    def __init__(
        self,
        geometry: ExchangerGeometry,
        fluid: FluidState,
        m_dot: Quantity,
        correlations: Type[TubeSideCorrelations] = TubeSideCorrelations
    ) -> None:
        """Creates a `TubeSide` instance.

        Parameters
        ----------
        geometry:
            Working geometry of the exchanger.
        fluid:
            Properties of the tube-side fluid at its mean temperature.
        m_dot:
            Mass flow rate of the tube-side fluid.
        correlations:
            Set of Nusselt number and friction factor correlations.
        """
        self.geometry = geometry
        self.fluid = fluid
        self.m_dot = m_dot.to('kg / s')
        self.correlations = correlations

    @property
    def D_i(self) -> float:
        return self.geometry.D_i.to('m').m

    def mean_velocity(self) -> Quantity:
        """Mean flow velocity in the tubes."""
        V_dot = self.m_dot / self.fluid.rho
        u_m = V_dot / self.geometry.A_tube_flow
        u_m = check_positive('tube velocity', u_m.to('m / s').m)
        return Q_(u_m, 'm / s')

    def reynolds_number(self) -> float:
        rho = self.fluid.rho.to('kg / m ** 3').m
        mu = self.fluid.mu.to('Pa * s').m
        u_m = self.mean_velocity().to('m / s').m
        Re = rho * u_m * self.D_i / mu
        return check_positive('tube Reynolds number', Re)

    def flow_regime(self) -> FlowRegime:
        return self.correlations.flow_regime(self.reynolds_number())

    def nusselt_number(self) -> float:
        D_on_L = (self.geometry.D_i / self.geometry.L).to('frac').m
        Nu = self.correlations.nusselt_number(
            self.reynolds_number(),
            self.fluid.Pr,
            D_on_L
        )
        return check_positive('tube Nusselt number', Nu)

    def heat_transfer_coeff(self) -> Quantity:
        """Film coefficient at the inner tube wall."""
        k = self.fluid.k.to('W / (m * K)').m
        h = self.nusselt_number() * k / self.D_i
        return Q_(h, 'W / (m ** 2 * K)')

    def friction_factor(self) -> float:
        return self.correlations.friction_factor(self.reynolds_number())

    def pressure_drop(self) -> Quantity:
        """Pressure drop over all tube passes: friction in the tubes plus
        `K_RETURN_PER_PASS` velocity heads per pass for return bends and
        entrance losses."""
        N_p = self.geometry.N_passes
        L_on_D = (self.geometry.L / self.geometry.D_i).to('frac').m
        f = self.friction_factor()
        rho = self.fluid.rho.to('kg / m ** 3').m
        u_m = self.mean_velocity().to('m / s').m
        dP = (f * L_on_D * N_p + K_RETURN_PER_PASS * N_p) * rho * u_m ** 2 / 2
        return Q_(dP, 'Pa').to('kPa')
