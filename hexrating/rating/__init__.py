from .exceptions import (
    RatingError,
    IncompletePropertiesError,
    GeometryInconsistentError,
    DegenerateTemperatureDifferenceError
)

from .geometry import ExchangerGeometry, derive_geometry

from .temperature import (
    Stream,
    HeatDuty,
    TemperatureDifference,
    heat_duty,
    log_mean_temperature_difference,
    correction_factor,
    temperature_difference
)

from .correlations import FlowRegime, TubeSideCorrelations, ShellSideCorrelations

from .tube_side import TubeSide

from .shell_side import ShellSide

from .performance import (
    PerformanceResult,
    ShellAndTubeRating,
    overall_heat_transfer_coeff,
    area_margin,
    rate
)
