import pytest
from hexrating.exchanger import Exchanger


SHELL = {
    'inletTemp': 150, 'outletTemp': 90, 'inletDiameter': 100, 'flowRate': 5000,
    'innerDiameter': 500, 'orientation': 'horizontal', 'numPasses': 1,
    'testPressure': 15, 'corrosionAllowance': 3, 'designH2Pressure': 10,
    'insulationPurpose': 'heat conservation', 'designMetalTemp': 200,
    'mechDesignTempMin': -10, 'mechDesignTempMax': 250,
    'material': 'SA-516-70', 'minNozzleDistance': 150,
}

TUBES = {
    'inletTemp': 25, 'outletTemp': 75, 'flowRate': 8000, 'inletDiameter': 80,
    'outerDiameter': 19, 'numTubes': 20, 'effectiveTubeLength': 3000,
    'tubeInnerDiameter': 15, 'tubePitch': 25, 'tubeLayout': '30',
    'material': 'SA-179',
}

BAFFLES = {
    'spacing': 150, 'baffleType': 'single segmental',
    'cutOrientation': 'horizontal', 'freeEndSpacing': 300,
    'nearEndSpacing': 300, 'outerCutPercent': 25, 'freeOuterHoleArea': 0,
    'tubesInWindow': 'yes', 'impingementPlate': 'yes', 'material': 'SA-516-70',
}


@pytest.fixture
def exchanger() -> Exchanger:
    """Single pass exchanger with 20 tubes in a 500 mm shell."""
    return Exchanger.from_mappings(SHELL, TUBES, BAFFLES)


@pytest.fixture
def crowded_exchanger() -> Exchanger:
    """Same process conditions, but 100 tubes of 19 mm in a single pass
    through a 500 mm shell."""
    return Exchanger.from_mappings(SHELL, {**TUBES, 'numTubes': 100}, BAFFLES)
