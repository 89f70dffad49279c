"""
Mine layout generation and adjacency counting.

Both run once, before a session is handed to the player. Coordinates
are (x, y) tuples with x the column and y the row.
"""
import random
from typing import Collection, FrozenSet, List, Tuple, Union

from .errors import InvalidDifficultyConfig

Coordinate = Tuple[int, int]
RandomSource = Union[None, int, random.Random]


# ============================================================================
# Randomness
# ============================================================================

def resolve_rng(source: RandomSource = None) -> random.Random:
    """
    Turn a seed or generator into a random.Random instance.

    Args:
        source: None for an unseeded generator, an int seed, or an
            existing generator which is used as-is.
    """
    if isinstance(source, random.Random):
        return source
    return random.Random(source)


# ============================================================================
# Mine Placement
# ============================================================================

def generate_mine_layout(
    width: int,
    height: int,
    mine_count: int,
    rng: RandomSource = None,
) -> FrozenSet[Coordinate]:
    """
    Pick mine positions uniformly without replacement.

    No cell is kept clear, so the first tile opened may be a mine.

    Args:
        width: Number of columns.
        height: Number of rows.
        mine_count: Mines to place.
        rng: Seed or generator.

    Returns:
        Exactly mine_count distinct in-bounds coordinates.

    Raises:
        InvalidDifficultyConfig: If the mines would not fit.
    """
    total_cells = width * height
    if mine_count < 0 or mine_count >= total_cells:
        raise InvalidDifficultyConfig(
            f"Cannot place {mine_count} mines on {total_cells} cells"
        )
    positions = [(x, y) for y in range(height) for x in range(width)]
    return frozenset(resolve_rng(rng).sample(positions, mine_count))


# ============================================================================
# Adjacency
# ============================================================================

def neighbors(x: int, y: int, width: int, height: int) -> List[Coordinate]:
    """
    Get the up to eight in-bounds positions around (x, y).

    Args:
        x: Column of center tile.
        y: Row of center tile.
        width: Board width.
        height: Board height.

    Returns:
        List of (x, y) tuples for valid neighbors.
    """
    result = []
    for delta_y in (-1, 0, 1):
        for delta_x in (-1, 0, 1):
            if delta_x == 0 and delta_y == 0:
                continue
            new_x = x + delta_x
            new_y = y + delta_y
            if 0 <= new_x < width and 0 <= new_y < height:
                result.append((new_x, new_y))
    return result


def compute_adjacency(
    width: int,
    height: int,
    mines: Collection[Coordinate],
) -> List[List[int]]:
    """
    Count neighbouring mines for every tile.

    Returns:
        Grid indexed [y][x]. Mine tiles hold 0.
    """
    mine_set = mines if isinstance(mines, (set, frozenset)) else set(mines)
    counts = [[0] * width for _ in range(height)]
    for y in range(height):
        for x in range(width):
            if (x, y) in mine_set:
                continue
            counts[y][x] = sum(
                1 for position in neighbors(x, y, width, height)
                if position in mine_set
            )
    return counts
