"""Derivation of the working geometry of a shell-and-tube heat exchanger from
the part properties (diameters and lengths in mm) entered in the editor.
"""
import math
from dataclasses import dataclass
from hexrating import Quantity
from hexrating.exchanger import Exchanger, PartProperties
from hexrating.logging import ModuleLogger
from .exceptions import IncompletePropertiesError, GeometryInconsistentError

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)

# properties that must hold numbers, by part name
NUMERIC_KEYS: dict[str, tuple[str, ...]] = {
    'Shell': ('inletTemp', 'outletTemp', 'flowRate', 'innerDiameter', 'numPasses'),
    'Tubes': (
        'inletTemp', 'outletTemp', 'flowRate', 'outerDiameter', 'numTubes',
        'effectiveTubeLength', 'tubeInnerDiameter', 'tubePitch'
    ),
    'Baffles': ('spacing',),
}


def count(x: float) -> int:
    """Rounds `x` down to an integer count. The quotient is first rounded to
    9 decimals, so that e.g. 2.8 / 0.2 = 13.999999999999998 counts as 14."""
    return math.floor(round(x, 9))


@dataclass(frozen=True)
class ExchangerGeometry:
    """Working geometry of the exchanger.

    Attributes
    ----------
    D_o:
        Outer tube diameter.
    D_i:
        Inner tube diameter.
    L:
        Effective tube length.
    N_tubes:
        Number of tubes.
    N_passes:
        Number of passes (at least 1).
    B:
        Baffle spacing.
    D_s:
        Inner diameter of the shell.
    p_t:
        Tube pitch.
    h_cut: optional
        Height of the baffle cut; None if the baffle cut is not known.
    """
    D_o: Quantity
    D_i: Quantity
    L: Quantity
    N_tubes: int
    N_passes: int
    B: Quantity
    D_s: Quantity
    p_t: Quantity
    h_cut: Quantity | None = None

    @property
    def t_wall(self) -> Quantity:
        """Tube wall thickness."""
        return ((self.D_o - self.D_i) / 2).to('m')

    @property
    def N_tubes_per_pass(self) -> float:
        return self.N_tubes / self.N_passes

    @property
    def A_tube_flow(self) -> Quantity:
        """Flow area of the tubes in one pass."""
        A = math.pi * self.D_i ** 2 / 4 * self.N_tubes_per_pass
        return A.to('m ** 2')

    @property
    def A_shell_flow(self) -> Quantity:
        """Crossflow area between two baffles. The free width is taken as the
        shell diameter minus the total width of the tubes of one pass."""
        A = self.B * (self.D_s - self.N_tubes * self.D_o / self.N_passes)
        return A.to('m ** 2')

    @property
    def A_installed(self) -> Quantity:
        """External heat transfer area of the tube bundle."""
        A = math.pi * self.D_o * self.L * self.N_tubes
        return A.to('m ** 2')

    @property
    def N_baffles(self) -> int:
        L = self.L.to('m').m
        B = self.B.to('m').m
        return count((L - B) / B)

    @property
    def N_cross_rows(self) -> int:
        """Number of tube rows crossed by the shell-side flow."""
        return count((self.D_s / self.p_t).to('frac').m)


def _length(part: PartProperties, key: str) -> Quantity:
    return Q_(part.number(key), 'mm').to('m')


def _whole_number(part: PartProperties, key: str, quantity: str) -> int:
    value = part.number(key)
    if not value.is_integer():
        raise GeometryInconsistentError(quantity, value, 'must be a whole number')
    return int(value)


def _not_numeric(part: PartProperties, keys: tuple[str, ...]) -> list[str]:
    not_numeric = []
    for key in keys:
        try:
            part.number(key)
        except ValueError:
            not_numeric.append(key)
    return not_numeric


def check_complete(exchanger: Exchanger) -> None:
    """Checks that shell and tube properties are complete, that the baffle
    spacing is set, and that the properties used in the calculation hold
    numbers.

    Raises
    ------
    IncompletePropertiesError
    """
    for part in (exchanger.shell, exchanger.tubes):
        missing = part.missing()
        if missing:
            raise IncompletePropertiesError(part.name, missing)
    # the baffle record may be partly filled in, but the spacing is needed
    if 'spacing' in exchanger.baffles.missing():
        raise IncompletePropertiesError(exchanger.baffles.name, ['spacing'])
    parts = (exchanger.shell, exchanger.tubes, exchanger.baffles)
    for part in parts:
        not_numeric = _not_numeric(part, NUMERIC_KEYS[part.name])
        if not_numeric:
            raise IncompletePropertiesError(part.name, not_numeric)


def _read_numbers(exchanger: Exchanger) -> ExchangerGeometry:
    shell, tubes, baffles = exchanger.shell, exchanger.tubes, exchanger.baffles
    D_s = _length(shell, 'innerDiameter')
    h_cut = None
    if not _not_numeric(baffles, ('outerCutPercent',)):
        cut = Q_(baffles.number('outerCutPercent'), 'percent')
        h_cut = (cut * D_s).to('m')
    return ExchangerGeometry(
        D_o=_length(tubes, 'outerDiameter'),
        D_i=_length(tubes, 'tubeInnerDiameter'),
        L=_length(tubes, 'effectiveTubeLength'),
        N_tubes=_whole_number(tubes, 'numTubes', 'number of tubes'),
        N_passes=max(_whole_number(shell, 'numPasses', 'number of passes'), 1),
        B=_length(baffles, 'spacing'),
        D_s=D_s,
        p_t=_length(tubes, 'tubePitch'),
        h_cut=h_cut
    )


def _validate(geometry: ExchangerGeometry) -> None:
    lengths = {
        'tube outer diameter': geometry.D_o,
        'tube inner diameter': geometry.D_i,
        'tube length': geometry.L,
        'baffle spacing': geometry.B,
        'shell inner diameter': geometry.D_s,
        'tube pitch': geometry.p_t,
    }
    for name, length in lengths.items():
        value = length.to('m').m
        if not math.isfinite(value) or value <= 0.0:
            raise GeometryInconsistentError(name, value, 'must be positive')
    if geometry.N_tubes < 1:
        raise GeometryInconsistentError('number of tubes', geometry.N_tubes, 'must be at least 1')
    if geometry.D_i >= geometry.D_o:
        raise GeometryInconsistentError(
            'tube wall thickness', geometry.t_wall.to('m').m,
            'inner diameter must be smaller than outer diameter'
        )
    A_shell = geometry.A_shell_flow.to('m ** 2').m
    if A_shell <= 0.0:
        raise GeometryInconsistentError(
            'shell crossflow area', A_shell,
            'tubes of one pass are wider than the shell'
        )
    if geometry.N_cross_rows < 1:
        raise GeometryInconsistentError(
            'number of crossflow rows', geometry.N_cross_rows,
            'tube pitch is larger than the shell diameter'
        )


def derive_geometry(exchanger: Exchanger) -> ExchangerGeometry:
    """Returns the working geometry of `exchanger` in SI units.

    Raises
    ------
    IncompletePropertiesError:
        If the shell or tube properties are incomplete, or if the baffle
        spacing is not set.
    GeometryInconsistentError:
        If a derived quantity (length, flow area, number of rows) is not
        positive, or if the number of tubes or passes is not a whole number.
    """
    check_complete(exchanger)
    geometry = _read_numbers(exchanger)
    _validate(geometry)
    if geometry.N_baffles < 0:
        logger.warning(
            f"baffle spacing {geometry.B.to('mm'):~P} exceeds the tube length "
            f"{geometry.L.to('mm'):~P}"
        )
    logger.debug(f"geometry: {geometry}")
    return geometry
