"""
EXAMPLE 1
---------
Rating of a single pass shell-and-tube heat exchanger with the example data
set in folder `data`.

Hot water (5000 kg/h) is cooled from 150 degC to 90 degC on the shell side.
Cold water (8000 kg/h) is heated from 25 degC to 75 degC in 20 tubes
(OD 19 mm, ID 15 mm, length 3 m) on a 25 mm pitch in a 500 mm shell with a
baffle spacing of 150 mm.

The second part shows the same exchanger with the tube-side fluid
properties taken from CoolProp instead of the fitted water curve.
"""
from pathlib import Path
import pandas as pd
from hexrating import Quantity
from hexrating.exchanger import load_exchanger
from hexrating.fluids import CoolPropFluid
from hexrating.rating import ShellAndTubeRating, RatingError

Q_ = Quantity

pd.set_option('display.width', 120)

data_dir = Path(__file__).parent / 'data'
exchanger = load_exchanger(data_dir)

rating = ShellAndTubeRating()
result = rating.rate(exchanger)
print(result.to_frame().round(3))

# The tube-side stream as real water at atmospheric pressure.
rating = ShellAndTubeRating(
    tube_fluid=CoolPropFluid('Water'),
    R_fouling_tube=Q_(0.0004, 'm ** 2 * K / W')
)
result = rating.rate(exchanger)
print(f"U = {result.U:.1f} W/(m2.K), area margin = {result.area_margin:.1f} %")

# The shell-side water has a mean temperature of 120 degC: it stays liquid
# only above its saturation pressure (about 2 bar).
rating = ShellAndTubeRating(
    shell_fluid=CoolPropFluid('Water', P=Q_(5, 'bar')),
    tube_fluid=CoolPropFluid('Water')
)
result = rating.rate(exchanger)
print(f"U = {result.U:.1f} W/(m2.K), area margin = {result.area_margin:.1f} %")

# Putting 100 tubes in the same shell with a single pass leaves no room for
# the shell-side flow.
crowded = exchanger.replace(tubes=exchanger.tubes.replace(numTubes=100))
try:
    rating.rate(crowded)
except RatingError as err:
    print(f"{type(err).__name__}: {err}")
