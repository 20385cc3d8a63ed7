"""Coordinate grid of the sector map.

The map is a large hexagon made of flat-top hex cells arranged in seven
vertical lines ``a`` (left) to ``g`` (right). Lines hold 4, 5, 6, 7, 6, 5 and
4 cells, numbered from the top, so ``d4`` is the centre cell. Each line is
vertically centred: seven stacked cells span the full canvas height, shorter
lines start half a cell lower per missing cell.

Positions are fractions of the canvas size and refer to the top-left corner
of the cell's bounding box. The table is fixed; a token is valid if and only
if it is a key of ``CELL_POSITIONS``.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from hades_map.errors import InvalidCoordinate
from hades_map.types import Coordinate

CELLS_PER_LINE = 7
# 7 cells stacked vertically fill the map height
CELL_HEIGHT = 1.0 / CELLS_PER_LINE
# horizontal pitch between neighbouring lines, slightly under a cell height
CELL_WIDTH = (1.0 / CELLS_PER_LINE) - 0.007
GRID_OFFSET_X = 0.01

LINE_LENGTHS: Tuple[Tuple[str, int], ...] = (
    ("a", 4),
    ("b", 5),
    ("c", 6),
    ("d", 7),
    ("e", 6),
    ("f", 5),
    ("g", 4),
)


@dataclass(frozen=True)
class CellPoint:
    """Top-left corner of a cell as a fraction of the canvas size.

    Attributes:
        x: Horizontal fraction in ``[0, 1)``.
        y: Vertical fraction in ``[0, 1)``.
    """

    x: float
    y: float


def _build_cell_positions() -> PMap[Coordinate, CellPoint]:
    positions: Dict[Coordinate, CellPoint] = {}
    for index, (line, length) in enumerate(LINE_LENGTHS):
        x = GRID_OFFSET_X + index * CELL_WIDTH
        top = (CELLS_PER_LINE - length) / 2.0 * CELL_HEIGHT
        for number in range(1, length + 1):
            positions[f"{line}{number}"] = CellPoint(
                x=x, y=top + (number - 1) * CELL_HEIGHT
            )
    return pmap(positions)


CELL_POSITIONS: PMap[Coordinate, CellPoint] = _build_cell_positions()
VALID_COORDINATES = frozenset(CELL_POSITIONS.keys())


def is_valid_coordinate(coord: Coordinate) -> bool:
    return coord.lower() in CELL_POSITIONS


def normalized_position(coord: Coordinate) -> CellPoint:
    """
    Look up the fractional top-left position of ``coord`` (case-insensitive).
    Raises ``InvalidCoordinate`` for tokens outside the grid.
    """
    point = CELL_POSITIONS.get(coord.lower())
    if point is None:
        raise InvalidCoordinate(coord)
    return point


def grid_lines() -> List[List[Coordinate]]:
    """All valid coordinates grouped by line, left to right, top to bottom."""
    return [
        [f"{line}{number}" for number in range(1, length + 1)]
        for line, length in LINE_LENGTHS
    ]
