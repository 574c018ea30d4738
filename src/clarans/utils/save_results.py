import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

import pandas as pd

from clarans.clustering import DistanceFunc, SearchResult, assign_points
from clarans.utils.points import Point

logger = logging.getLogger(__name__)

def _write_frame(df: pd.DataFrame, target: Union[str, Path]) -> None:
    if str(target) == '-':
        df.to_csv(sys.stdout, index=False)
        return
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(target, index=False)

def default_columns(dimensions: int) -> List[str]:
    """Column names for points without a header: x, y, z up to three dimensions, x0..xN-1 beyond."""
    names = ['x', 'y', 'z']
    return names[:dimensions] if dimensions <= 3 else [f'x{i}' for i in range(dimensions)]

def save_medoids(
    points: Sequence[Point],
    result: SearchResult,
    target: Union[str, Path],
    columns: Optional[List[str]] = None
) -> pd.DataFrame:
    """Write the medoid points, in slot order, as CSV to a file or '-' for stdout."""
    medoids = result.medoid_points(points)
    if columns is None:
        columns = default_columns(len(medoids[0]) if medoids else 0)
    df = pd.DataFrame([list(p.coords) for p in medoids], columns=columns)
    _write_frame(df, target)
    if str(target) != '-':
        logger.info(f"Saved {len(df)} medoids to {target}")
    return df

def save_assignments(
    points: Sequence[Any],
    result: SearchResult,
    distance: DistanceFunc,
    target: Union[str, Path]
) -> pd.DataFrame:
    """Write an index,cluster row per point, cluster being its medoid slot."""
    labels = assign_points(points, result.medoids, distance)
    df = pd.DataFrame({'index': range(len(points)), 'cluster': labels})
    _write_frame(df, target)
    if str(target) != '-':
        logger.info(f"Saved cluster assignments to {target}")
    return df
