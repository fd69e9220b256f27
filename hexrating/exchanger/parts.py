"""Property records of the three exchanger parts that take part in the rating
calculation: shell, tubes and baffles.

Each record has a fixed set of attributes. An attribute holds a number, a
short text code, or the marker `UNSET`. Attributes are addressed in two ways:
by their Python name (e.g. `inlet_temp`) or by the key used in the property
editor and in the example CSV files (e.g. `inletTemp`).

Units are those of the property editor: temperatures in degC, lengths and
diameters in mm, mass flow rates in kg/h, pressures in kg/cm2 (gauge).
"""
from __future__ import annotations
import dataclasses
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Mapping


class _Unset:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNSET'

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


UNSET = _Unset()

Value = float | int | str | _Unset


def is_unset(value: Any) -> bool:
    """Returns True if `value` doesn't count as a set attribute value: the
    `UNSET` marker, None, or blank text."""
    if value is UNSET or value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def _normalize(value: Any) -> Value:
    if is_unset(value):
        return UNSET
    if isinstance(value, str):
        return value.strip()
    return value


def _prop(key: str, unit: str | None = None) -> Any:
    return field(default=UNSET, metadata={'key': key, 'unit': unit})


@dataclass(frozen=True)
class PartProperties:
    """Base class of the part property records. Records are immutable: use
    `replace` to get a modified copy."""
    name: ClassVar[str] = ''

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, _normalize(getattr(self, f.name)))

    @classmethod
    def keys(cls) -> list[str]:
        """Returns the editor keys of all attributes."""
        return [f.metadata['key'] for f in fields(cls)]

    @classmethod
    def units(cls) -> dict[str, str | None]:
        """Returns the editor unit of each attribute, by editor key."""
        return {f.metadata['key']: f.metadata['unit'] for f in fields(cls)}

    @classmethod
    def attribute_name(cls, key: str) -> str:
        """Returns the Python attribute name that goes with editor `key`."""
        for f in fields(cls):
            if key in (f.metadata['key'], f.name):
                return f.name
        raise KeyError(f"{cls.name.lower()} has no property '{key}'")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> PartProperties:
        """Creates a record from a mapping with editor keys (Python attribute
        names are accepted too). Keys that don't belong to the part are
        ignored, missing keys stay unset.
        """
        known = {}
        for f in fields(cls):
            for key in (f.metadata['key'], f.name):
                if key in mapping:
                    known[f.name] = mapping[key]
                    break
        return cls(**known)

    def to_mapping(self) -> dict[str, Any]:
        """Returns the attribute values by editor key. Unset values are
        returned as None."""
        return {
            f.metadata['key']: None if is_unset(v := getattr(self, f.name)) else v
            for f in fields(self)
        }

    def get(self, key: str) -> Value:
        return getattr(self, self.attribute_name(key))

    def missing(self) -> list[str]:
        """Returns the editor keys of the attributes that are not set."""
        return [
            f.metadata['key']
            for f in fields(self)
            if is_unset(getattr(self, f.name))
        ]

    def is_complete(self) -> bool:
        """A record is complete if every attribute is set."""
        return not self.missing()

    def number(self, key: str) -> float:
        """Returns the numeric value of the attribute with editor `key`.

        Raises
        ------
        ValueError:
            If the attribute is unset or holds text that cannot be read as a
            number.
        """
        value = self.get(key)
        if is_unset(value):
            raise ValueError(f"{self.name.lower()} property '{key}' is not set")
        if isinstance(value, bool):
            raise ValueError(f"{self.name.lower()} property '{key}' is not a number")
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ValueError(
                f"{self.name.lower()} property '{key}' is not a number: {value!r}"
            ) from None

    def replace(self, **changes: Any) -> PartProperties:
        """Returns a copy with the given attributes changed. Both editor keys
        and attribute names can be used."""
        changes = {self.attribute_name(k): v for k, v in changes.items()}
        return dataclasses.replace(self, **changes)

    def unset(self, key: str) -> PartProperties:
        """Returns a copy in which the attribute with editor `key` is unset."""
        return self.replace(**{key: UNSET})


@dataclass(frozen=True)
class ShellProperties(PartProperties):
    name: ClassVar[str] = 'Shell'

    inlet_temp: Value = _prop('inletTemp', 'degC')
    outlet_temp: Value = _prop('outletTemp', 'degC')
    inlet_diameter: Value = _prop('inletDiameter', 'mm')
    flow_rate: Value = _prop('flowRate', 'kg / hr')
    inner_diameter: Value = _prop('innerDiameter', 'mm')
    orientation: Value = _prop('orientation')
    num_passes: Value = _prop('numPasses')
    test_pressure: Value = _prop('testPressure', 'kgf / cm ** 2')
    corrosion_allowance: Value = _prop('corrosionAllowance', 'mm')
    design_h2_pressure: Value = _prop('designH2Pressure', 'kgf / cm ** 2')
    insulation_purpose: Value = _prop('insulationPurpose')
    design_metal_temp: Value = _prop('designMetalTemp', 'degC')
    mech_design_temp_min: Value = _prop('mechDesignTempMin', 'degC')
    mech_design_temp_max: Value = _prop('mechDesignTempMax', 'degC')
    material: Value = _prop('material')
    min_nozzle_distance: Value = _prop('minNozzleDistance', 'mm')


@dataclass(frozen=True)
class TubeProperties(PartProperties):
    name: ClassVar[str] = 'Tubes'

    inlet_temp: Value = _prop('inletTemp', 'degC')
    outlet_temp: Value = _prop('outletTemp', 'degC')
    flow_rate: Value = _prop('flowRate', 'kg / hr')
    inlet_diameter: Value = _prop('inletDiameter', 'mm')
    outer_diameter: Value = _prop('outerDiameter', 'mm')
    num_tubes: Value = _prop('numTubes')
    effective_tube_length: Value = _prop('effectiveTubeLength', 'mm')
    tube_inner_diameter: Value = _prop('tubeInnerDiameter', 'mm')
    tube_pitch: Value = _prop('tubePitch', 'mm')
    tube_layout: Value = _prop('tubeLayout')
    material: Value = _prop('material')


@dataclass(frozen=True)
class BaffleProperties(PartProperties):
    name: ClassVar[str] = 'Baffles'

    spacing: Value = _prop('spacing', 'mm')
    baffle_type: Value = _prop('baffleType')
    cut_orientation: Value = _prop('cutOrientation')
    free_end_spacing: Value = _prop('freeEndSpacing', 'mm')
    near_end_spacing: Value = _prop('nearEndSpacing', 'mm')
    outer_cut_percent: Value = _prop('outerCutPercent', 'percent')
    free_outer_hole_area: Value = _prop('freeOuterHoleArea', 'mm ** 2')
    tubes_in_window: Value = _prop('tubesInWindow')
    impingement_plate: Value = _prop('impingementPlate')
    material: Value = _prop('material')


@dataclass(frozen=True)
class Exchanger:
    """Immutable snapshot of the properties of the three parts, as handed
    over to the rating engine."""
    shell: ShellProperties = field(default_factory=ShellProperties)
    tubes: TubeProperties = field(default_factory=TubeProperties)
    baffles: BaffleProperties = field(default_factory=BaffleProperties)

    @classmethod
    def from_mappings(
        cls,
        shell: Mapping[str, Any] | None = None,
        tubes: Mapping[str, Any] | None = None,
        baffles: Mapping[str, Any] | None = None
    ) -> Exchanger:
        return cls(
            shell=ShellProperties.from_mapping(shell or {}),
            tubes=TubeProperties.from_mapping(tubes or {}),
            baffles=BaffleProperties.from_mapping(baffles or {})
        )

    def replace(self, **parts: PartProperties) -> Exchanger:
        return dataclasses.replace(self, **parts)
