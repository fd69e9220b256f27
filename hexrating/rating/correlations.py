"""Nusselt number and friction factor correlations of the tube side and shell
side of a shell-and-tube heat exchanger.

The flow regime is determined first from the Reynolds number; then the
correlation that belongs to this regime is applied. The switch between
correlations is stepwise: the Nusselt number is not continuous at the regime
boundaries.

A correlation set is a class with the classification method `flow_regime`
and one static method per regime. To use another set of correlations, derive
from `TubeSideCorrelations` or `ShellSideCorrelations`, override what needs
to change, and pass the new class to the rating.

References
----------
[1] Kern D. Q. (1950). Process Heat Transfer. McGraw-Hill.
[2] Incropera F. P., & DeWitt D. P. Fundamentals of Heat and Mass Transfer.
    John Wiley & Sons.
"""
import math
from enum import Enum


class FlowRegime(Enum):
    LAMINAR = 'laminar'
    TRANSITION = 'transition'
    TURBULENT = 'turbulent'


class TubeSideCorrelations:
    Re_lam = 2300.0
    Re_turb = 8000.0

    @classmethod
    def flow_regime(cls, Re: float) -> FlowRegime:
        if Re < cls.Re_lam:
            return FlowRegime.LAMINAR
        if Re < cls.Re_turb:
            return FlowRegime.TRANSITION
        return FlowRegime.TURBULENT

    @staticmethod
    def laminar_nusselt_number(Re: float, Pr: float, D_on_L: float) -> float:
        """Sieder-Tate type correlation for laminar flow with thermal entrance
        effect (without viscosity correction)."""
        return 1.86 * (Re * Pr * D_on_L) ** 0.33

    @staticmethod
    def transition_nusselt_number(Re: float, Pr: float, D_on_L: float) -> float:
        return (0.037 * Re ** 0.75 - 6.66) * Pr ** 0.42

    @staticmethod
    def turbulent_nusselt_number(Re: float, Pr: float, D_on_L: float) -> float:
        """Dittus-Boelter correlation (heating of the fluid)."""
        return 0.023 * Re ** 0.8 * Pr ** 0.4

    @classmethod
    def nusselt_number(cls, Re: float, Pr: float, D_on_L: float) -> float:
        """Returns the average Nusselt number of the tube flow.

        Parameters
        ----------
        Re:
            Reynolds number based on the inner tube diameter.
        Pr:
            Prandtl number.
        D_on_L:
            Ratio of inner tube diameter to tube length.
        """
        match cls.flow_regime(Re):
            case FlowRegime.LAMINAR:
                return cls.laminar_nusselt_number(Re, Pr, D_on_L)
            case FlowRegime.TRANSITION:
                return cls.transition_nusselt_number(Re, Pr, D_on_L)
            case FlowRegime.TURBULENT:
                return cls.turbulent_nusselt_number(Re, Pr, D_on_L)

    @staticmethod
    def laminar_friction_factor(Re: float) -> float:
        """Hagen-Poiseuille (Darcy friction factor)."""
        return 64 / Re

    @staticmethod
    def turbulent_friction_factor(Re: float) -> float:
        """Blasius (Darcy friction factor, smooth tube)."""
        return 0.316 * Re ** -0.25

    @classmethod
    def friction_factor(cls, Re: float) -> float:
        # transition flow is treated as turbulent
        if cls.flow_regime(Re) is FlowRegime.LAMINAR:
            return cls.laminar_friction_factor(Re)
        return cls.turbulent_friction_factor(Re)


class ShellSideCorrelations:
    Re_crit = 1000.0

    @classmethod
    def flow_regime(cls, Re: float) -> FlowRegime:
        if Re < cls.Re_crit:
            return FlowRegime.LAMINAR
        return FlowRegime.TURBULENT

    @staticmethod
    def laminar_nusselt_number(Re: float, Pr: float) -> float:
        return 0.196 * Re ** 0.6 * Pr ** 0.33

    @staticmethod
    def turbulent_nusselt_number(Re: float, Pr: float) -> float:
        """Kern's correlation for flow across a tube bundle (without viscosity
        correction)."""
        return 0.36 * Re ** 0.55 * Pr ** 0.33

    @classmethod
    def nusselt_number(cls, Re: float, Pr: float) -> float:
        """Returns the average Nusselt number of the crossflow over the tube
        bundle.

        Parameters
        ----------
        Re:
            Reynolds number based on the outer tube diameter.
        Pr:
            Prandtl number.
        """
        match cls.flow_regime(Re):
            case FlowRegime.LAMINAR:
                return cls.laminar_nusselt_number(Re, Pr)
            case _:
                return cls.turbulent_nusselt_number(Re, Pr)

    @staticmethod
    def friction_factor(Re: float) -> float:
        """Friction factor per tube row crossed."""
        return math.exp(0.576 - 0.19 * math.log(Re))
