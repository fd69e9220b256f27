import pint

UNITS = pint.UnitRegistry(on_redefinition='ignore')
Quantity = UNITS.Quantity

# dimensionless units used for ratios, baffle cuts and margins
unit_definitions = [
    'fraction = [] = frac',
    'percent = 1e-2 frac = % = pct',
]
for ud in unit_definitions:
    UNITS.define(ud)

pint.set_application_registry(UNITS)
