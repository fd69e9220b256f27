"""Thermal-hydraulic rating of a shell-and-tube heat exchanger.

Given the properties of shell, tubes and baffles, the rating determines:
- the heat duty of both sides and the heat balance error,
- the (corrected) mean temperature difference,
- the film coefficients of both sides and the overall heat transfer
  coefficient,
- the required heat transfer area compared to the installed area,
- the pressure drop on the tube side and on the shell side.

The calculation is a simplified one. By default the fluid properties of both
streams are taken from a fitted curve for liquid water, and a single
correction factor formula is used for any number of passes.

Example
-------
```
from hexrating.exchanger import load_exchanger
from hexrating.rating import ShellAndTubeRating

exchanger = load_exchanger('data')
result = ShellAndTubeRating().rate(exchanger)
print(result.to_frame())
```
"""
from dataclasses import dataclass, field, fields, asdict
from typing import Type
import pandas as pd
from hexrating import Quantity
from hexrating.exchanger import Exchanger
from hexrating.fluids import FluidModel, WaterCurve
from hexrating.logging import ModuleLogger
from .constants import K_TUBE_WALL, R_FOULING_TUBE, R_FOULING_SHELL
from .correlations import TubeSideCorrelations, ShellSideCorrelations
from .geometry import derive_geometry
from .shell_side import ShellSide
from .temperature import Stream, heat_duty, temperature_difference
from .tube_side import TubeSide, check_positive

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)


def _result(group: str, label: str, unit: str = '-') -> dict:
    return {'group': group, 'label': label, 'unit': unit}


@dataclass(frozen=True)
class PerformanceResult:
    """Result of a rating calculation. All values are plain numbers in the
    units listed in the field metadata."""
    # heat duty
    Q_shell: float = field(metadata=_result('duty', 'Shell Side Heat Duty', 'kW'))
    Q_tube: float = field(metadata=_result('duty', 'Tube Side Heat Duty', 'kW'))
    Q_avg: float = field(metadata=_result('duty', 'Average Heat Duty', 'kW'))
    heat_balance_error: float = field(metadata=_result('duty', 'Heat Balance Error', '%'))
    # temperatures
    LMTD: float = field(metadata=_result('temperature', 'LMTD', 'K'))
    F: float = field(metadata=_result('temperature', 'Correction Factor (F)'))
    CMTD: float = field(metadata=_result('temperature', 'CMTD', 'K'))
    dT_approach: float = field(metadata=_result('temperature', 'Temperature Approach', 'K'))
    P: float = field(metadata=_result('temperature', 'Temperature Efficiency (P)'))
    R: float = field(metadata=_result('temperature', 'Heat Capacity Ratio (R)'))
    eps_shell: float = field(metadata=_result('temperature', 'Effectiveness', '%'))
    # heat transfer
    Re_tube: float = field(metadata=_result('transport', 'Tube Reynolds Number'))
    Re_shell: float = field(metadata=_result('transport', 'Shell Reynolds Number'))
    Nu_tube: float = field(metadata=_result('transport', 'Tube Nusselt Number'))
    Nu_shell: float = field(metadata=_result('transport', 'Shell Nusselt Number'))
    u_tube: float = field(metadata=_result('transport', 'Tube Velocity', 'm/s'))
    u_shell: float = field(metadata=_result('transport', 'Shell Velocity', 'm/s'))
    h_tube: float = field(metadata=_result('transport', 'Tube Side h_i', 'W/(m².K)'))
    h_shell: float = field(metadata=_result('transport', 'Shell Side h_o', 'W/(m².K)'))
    U: float = field(metadata=_result('transport', 'Overall U Calculated', 'W/(m².K)'))
    # area
    A_installed: float = field(metadata=_result('area', 'Heat Transfer Area', 'm²'))
    A_required: float = field(metadata=_result('area', 'Required Area', 'm²'))
    area_margin: float = field(metadata=_result('area', 'Area Margin', '%'))
    # hydraulics
    dP_tube: float = field(metadata=_result('hydraulics', 'Tube Pressure Drop', 'kPa'))
    dP_shell: float = field(metadata=_result('hydraulics', 'Shell Pressure Drop', 'kPa'))
    N_baffles: int = field(metadata=_result('hydraulics', 'Number of Baffles'))

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    def to_frame(self) -> pd.DataFrame:
        """Returns the results as a table with columns 'group', 'quantity',
        'value' and 'unit', indexed by field name."""
        rows = {
            f.name: {
                'group': f.metadata['group'],
                'quantity': f.metadata['label'],
                'value': getattr(self, f.name),
                'unit': f.metadata['unit']
            }
            for f in fields(self)
        }
        return pd.DataFrame.from_dict(rows, orient='index')


def overall_heat_transfer_coeff(
    h_i: Quantity,
    h_o: Quantity,
    t_wall: Quantity,
    k_wall: Quantity = K_TUBE_WALL,
    R_f_i: Quantity = R_FOULING_TUBE,
    R_f_o: Quantity = R_FOULING_SHELL
) -> Quantity:
    """Returns the overall heat transfer coefficient as the inverse of the
    sum of the film, wall and fouling resistances per unit area. The
    resistances are simply added, i.e. the difference between inner and outer
    tube surface is ignored.
    """
    R_tot = 1 / h_i + t_wall / k_wall + 1 / h_o + R_f_i + R_f_o
    U = 1 / R_tot
    return U.to('W / (m ** 2 * K)')


def area_margin(A_installed: float, A_required: float) -> float:
    """Excess of installed over required heat transfer area, in percent of
    the required area."""
    return (A_installed / A_required - 1) * 100


class ShellAndTubeRating:

    def __init__(
        self,
        shell_fluid: FluidModel | None = None,
        tube_fluid: FluidModel | None = None,
        k_wall: Quantity = K_TUBE_WALL,
        R_fouling_tube: Quantity = R_FOULING_TUBE,
        R_fouling_shell: Quantity = R_FOULING_SHELL,
        tube_correlations: Type[TubeSideCorrelations] = TubeSideCorrelations,
        shell_correlations: Type[ShellSideCorrelations] = ShellSideCorrelations
    ) -> None:
        """Creates a `ShellAndTubeRating` object. The object only holds the
        settings of the calculation, so it can be reused for any number of
        exchangers.

        Parameters
        ----------
        shell_fluid: optional
            Property model of the shell-side fluid. Defaults to `WaterCurve`.
        tube_fluid: optional
            Property model of the tube-side fluid. Defaults to `WaterCurve`.
        k_wall:
            Thermal conductivity of the tube material.
        R_fouling_tube:
            Fouling resistance on the inside of the tubes.
        R_fouling_shell:
            Fouling resistance on the outside of the tubes.
        tube_correlations:
            Correlation set for the tube side.
        shell_correlations:
            Correlation set for the shell side.
        """
        self.shell_fluid = shell_fluid or WaterCurve()
        self.tube_fluid = tube_fluid or WaterCurve()
        self.k_wall = k_wall.to('W / (m * K)')
        self.R_fouling_tube = R_fouling_tube.to('m ** 2 * K / W')
        self.R_fouling_shell = R_fouling_shell.to('m ** 2 * K / W')
        self.tube_correlations = tube_correlations
        self.shell_correlations = shell_correlations

    def _streams(self, exchanger: Exchanger) -> tuple[Stream, Stream]:
        shell, tubes = exchanger.shell, exchanger.tubes
        shell_stream = Stream.create(
            m_dot=Q_(shell.number('flowRate'), 'kg / hr'),
            T_in=Q_(shell.number('inletTemp'), 'degC'),
            T_out=Q_(shell.number('outletTemp'), 'degC'),
            fluid_model=self.shell_fluid
        )
        tube_stream = Stream.create(
            m_dot=Q_(tubes.number('flowRate'), 'kg / hr'),
            T_in=Q_(tubes.number('inletTemp'), 'degC'),
            T_out=Q_(tubes.number('outletTemp'), 'degC'),
            fluid_model=self.tube_fluid
        )
        return shell_stream, tube_stream

    def rate(self, exchanger: Exchanger) -> PerformanceResult:
        """Rates `exchanger` and returns the result.

        Raises
        ------
        IncompletePropertiesError:
            If shell or tube properties are incomplete, or the baffle spacing
            is not set. Nothing is calculated in that case.
        GeometryInconsistentError:
            If a derived geometric or flow quantity is not positive.
        DegenerateTemperatureDifferenceError:
            If the mean temperature difference cannot be determined.
        """
        geometry = derive_geometry(exchanger)
        shell_stream, tube_stream = self._streams(exchanger)

        duty = heat_duty(shell_stream, tube_stream)
        dT = temperature_difference(shell_stream, tube_stream, geometry.N_passes)

        tube = TubeSide(geometry, tube_stream.fluid, tube_stream.m_dot, self.tube_correlations)
        shell = ShellSide(geometry, shell_stream.fluid, shell_stream.m_dot, self.shell_correlations)
        h_i = tube.heat_transfer_coeff()
        h_o = shell.heat_transfer_coeff()

        U = overall_heat_transfer_coeff(
            h_i, h_o, geometry.t_wall,
            self.k_wall, self.R_fouling_tube, self.R_fouling_shell
        ).to('W / (m ** 2 * K)').m
        A_installed = geometry.A_installed.to('m ** 2').m
        A_required = check_positive('required area', duty.Q_avg * 1000 / (U * dT.CMTD))

        T_s_in = shell_stream.T_in.to('degC').m
        dT_shell = abs(T_s_in - shell_stream.T_out.to('degC').m)
        eps_shell = dT_shell / abs(T_s_in - tube_stream.T_in.to('degC').m) * 100

        result = PerformanceResult(
            Q_shell=duty.Q_shell,
            Q_tube=duty.Q_tube,
            Q_avg=duty.Q_avg,
            heat_balance_error=duty.heat_balance_error,
            LMTD=dT.LMTD,
            F=dT.F,
            CMTD=dT.CMTD,
            dT_approach=dT.dT_approach,
            P=dT.P,
            R=dT.R,
            eps_shell=eps_shell,
            Re_tube=tube.reynolds_number(),
            Re_shell=shell.reynolds_number(),
            Nu_tube=tube.nusselt_number(),
            Nu_shell=shell.nusselt_number(),
            u_tube=tube.mean_velocity().to('m / s').m,
            u_shell=shell.mean_velocity().to('m / s').m,
            h_tube=h_i.to('W / (m ** 2 * K)').m,
            h_shell=h_o.to('W / (m ** 2 * K)').m,
            U=U,
            A_installed=A_installed,
            A_required=A_required,
            area_margin=area_margin(A_installed, A_required),
            dP_tube=tube.pressure_drop().to('kPa').m,
            dP_shell=shell.pressure_drop().to('kPa').m,
            N_baffles=geometry.N_baffles
        )
        logger.debug(
            f"Q_avg = {result.Q_avg:.2f} kW, U = {result.U:.1f} W/(m2.K), "
            f"area margin = {result.area_margin:.2f} %"
        )
        if result.area_margin < 0.0:
            logger.info(
                f"installed area {A_installed:.2f} m2 is smaller than "
                f"required area {A_required:.2f} m2"
            )
        return result


def rate(exchanger: Exchanger, **settings) -> PerformanceResult:
    """Rates `exchanger` with a `ShellAndTubeRating` created from the keyword
    arguments in `settings`."""
    return ShellAndTubeRating(**settings).rate(exchanger)
