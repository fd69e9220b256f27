from typing import Type
from hexrating import Quantity
from hexrating.fluids import FluidState
from .correlations import FlowRegime, ShellSideCorrelations
from .geometry import ExchangerGeometry
from .tube_side import check_positive

Q_ = Quantity


class ShellSide:
    """Crossflow of the shell-side fluid over the tube bundle between two
    baffles."""

    def __init__(
        self,
        geometry: ExchangerGeometry,
        fluid: FluidState,
        m_dot: Quantity,
        correlations: Type[ShellSideCorrelations] = ShellSideCorrelations
    ) -> None:
        self.geometry = geometry
        self.fluid = fluid
        self.m_dot = m_dot.to('kg / s')
        self.correlations = correlations

    @property
    def D_o(self) -> float:
        return self.geometry.D_o.to('m').m

    def mean_velocity(self) -> Quantity:
        """Mean velocity through the crossflow area."""
        V_dot = self.m_dot / self.fluid.rho
        u_m = V_dot / self.geometry.A_shell_flow
        u_m = check_positive('shell velocity', u_m.to('m / s').m)
        return Q_(u_m, 'm / s')

    def reynolds_number(self) -> float:
        """Reynolds number based on the outer tube diameter."""
        rho = self.fluid.rho.to('kg / m ** 3').m
        mu = self.fluid.mu.to('Pa * s').m
        u_m = self.mean_velocity().to('m / s').m
        Re = rho * u_m * self.D_o / mu
        return check_positive('shell Reynolds number', Re)

    def flow_regime(self) -> FlowRegime:
        return self.correlations.flow_regime(self.reynolds_number())

    def nusselt_number(self) -> float:
        Nu = self.correlations.nusselt_number(self.reynolds_number(), self.fluid.Pr)
        return check_positive('shell Nusselt number', Nu)

    def heat_transfer_coeff(self) -> Quantity:
        """Film coefficient at the outer tube wall."""
        k = self.fluid.k.to('W / (m * K)').m
        h = self.nusselt_number() * k / self.D_o
        return Q_(h, 'W / (m ** 2 * K)')

    def friction_factor(self) -> float:
        return self.correlations.friction_factor(self.reynolds_number())

    def pressure_drop(self) -> Quantity:
        """Pressure drop over the shell: the number of tube rows crossed
        times the number of baffle compartments."""
        N_b = self.geometry.N_baffles
        N_r = self.geometry.N_cross_rows
        f = self.friction_factor()
        rho = self.fluid.rho.to('kg / m ** 3').m
        u_m = self.mean_velocity().to('m / s').m
        dP = (N_b + 1) * f * N_r * rho * u_m ** 2 / 2
        return Q_(dP, 'Pa').to('kPa')
