"""Loading of part properties from CSV files.

A part file has a header row with editor keys and one data row with the
values, e.g.::

    inletTemp,outletTemp,flowRate,...
    25,75,8000,...

An example data set consists of three such files in one directory:
`shell.csv`, `tube.csv` and `baffle.csv`.
"""
import math
from pathlib import Path
from typing import Any, Type
import pandas as pd
from hexrating.logging import ModuleLogger
from .parts import (
    PartProperties,
    ShellProperties,
    TubeProperties,
    BaffleProperties,
    Exchanger,
    UNSET
)

logger = ModuleLogger.get_logger(__name__)


PART_FILES: dict[str, tuple[str, Type[PartProperties]]] = {
    'shell': ('shell.csv', ShellProperties),
    'tubes': ('tube.csv', TubeProperties),
    'baffles': ('baffle.csv', BaffleProperties),
}


def _parse_value(text: str) -> Any:
    # numbers become numbers, anything else stays text
    text = text.strip()
    if not text:
        return UNSET
    try:
        number = float(text)
    except ValueError:
        return text
    if not math.isfinite(number):
        return text
    return int(number) if number.is_integer() and '.' not in text else number


def load_part(file_path: Path | str, part_type: Type[PartProperties]) -> PartProperties:
    """Reads the properties of one exchanger part from a CSV file.

    Parameters
    ----------
    file_path:
        Path of the CSV file.
    part_type:
        The record class of the part, e.g. `TubeProperties`.

    Returns
    -------
    A record of type `part_type`. Columns that don't belong to the part are
    skipped; empty cells and columns absent from the file are left unset.
    """
    file_path = Path(file_path)
    df = pd.read_csv(
        file_path,
        dtype=str,
        keep_default_na=False,
        skipinitialspace=True,
        nrows=1
    )
    df.columns = [str(c).strip() for c in df.columns]
    if df.empty:
        logger.warning(f"{file_path.name}: no data row, all properties unset")
        return part_type()
    row = df.iloc[0]
    known_keys = set(part_type.keys())
    values = {}
    num_skipped = 0
    for key, text in row.items():
        if key not in known_keys:
            logger.debug(f"{file_path.name}: skipped '{key}' (not a {part_type.name.lower()} property)")
            continue
        value = _parse_value(text)
        if value is UNSET:
            num_skipped += 1
            logger.debug(f"{file_path.name}: skipped '{key}' (empty value)")
            continue
        values[key] = value
    logger.info(
        f"{file_path.name}: loaded {len(values)} properties, "
        f"skipped {num_skipped} empty values"
    )
    return part_type.from_mapping(values)


def load_exchanger(dir_path: Path | str) -> Exchanger:
    """Reads an example data set (`shell.csv`, `tube.csv` and `baffle.csv`)
    from directory `dir_path`.

    Raises
    ------
    FileNotFoundError:
        If one of the three files is missing.
    """
    dir_path = Path(dir_path)
    parts = {}
    for part_name, (file_name, part_type) in PART_FILES.items():
        file_path = dir_path / file_name
        if not file_path.is_file():
            raise FileNotFoundError(f"part file '{file_path}' not found")
        parts[part_name] = load_part(file_path, part_type)
    return Exchanger(**parts)
