from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Tuple
import CoolProp
from .constants import STANDARD_PRESSURE
from .exceptions import CoolPropError
from .. import Quantity


Q_ = Quantity


@dataclass(frozen=True)
class FluidState:
    """Thermophysical properties of a fluid at a single (mean) temperature.

    Attributes
    ----------
    T:
        Temperature at which the properties were evaluated.
    rho:
        Mass density.
    mu:
        Dynamic (absolute) viscosity.
    cp:
        Specific heat at constant pressure.
    k:
        Thermal conductivity.
    """
    T: Quantity
    rho: Quantity
    mu: Quantity
    cp: Quantity
    k: Quantity

    @property
    def Pr(self) -> float:
        """Prandtl number."""
        Pr = self.mu * self.cp / self.k
        return Pr.to('frac').m


class FluidModel(ABC):
    """Capability interface of a fluid property model: maps a temperature to
    a `FluidState`. The rating engine only talks to this interface, so any
    fluid can be plugged in without touching the correlations.
    """

    @abstractmethod
    def __call__(self, T: Quantity) -> FluidState:
        ...


class CoolPropFluid(FluidModel):
    _coolprop_qties: Dict[str, Tuple[int, str]] = {
        'rho': (CoolProp.iDmass, 'kg / m ** 3'),
        'mu': (CoolProp.iviscosity, 'Pa * s'),
        'cp': (CoolProp.iCpmass, 'J / kg / K'),
        'k': (CoolProp.iconductivity, 'W / m / K'),
    }

    def __init__(
        self,
        name: str,
        backend: str = 'HEOS',
        P: Quantity = STANDARD_PRESSURE
    ) -> None:
        """Creates a `CoolPropFluid`-instance.

        Parameters
        ----------
        name: str
            Name of the fluid as known by CoolProp, e.g. 'Water', or the name
            of an incompressible fluid, e.g. 'T66' (Therminol 66) in
            combination with backend 'INCOMP'.
        backend: str, default: 'HEOS'
            The backend CoolProp must use to perform state calculations.
        P: Quantity, default: standard atmospheric pressure
            Pressure at which the properties are evaluated. The pressure drop
            through the exchanger is not taken into account.
            At standard atmospheric pressure water boils at 100 degC: a stream
            of liquid water with a mean temperature above 100 degC (e.g. the
            hot side of the exchanger) needs a higher pressure, otherwise
            the properties of steam are returned.
        """
        self.fluid_name = name
        self.backend = backend
        self.P = P.to('Pa')

    def __call__(self, T: Quantity) -> FluidState:
        # A new state object for every call: CoolProp's `AbstractState` is
        # mutable and must not be shared between concurrent calculations.
        try:
            state = CoolProp.AbstractState(self.backend, self.fluid_name)
            state.update(
                CoolProp.PT_INPUTS,
                self.P.m,
                T.to('K').m
            )
            qties = {
                name: Q_(state.keyed_output(key), unit)
                for name, (key, unit) in self._coolprop_qties.items()
            }
        except ValueError as err:
            raise CoolPropError(err) from None
        return FluidState(T=T.to('degC'), **qties)

    def __repr__(self) -> str:
        return f"CoolPropFluid({self.fluid_name!r}, backend={self.backend!r})"
