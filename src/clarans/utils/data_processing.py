import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from clarans.utils.points import Point, points_from_array

logger = logging.getLogger(__name__)

def read_points_frame(source: Union[str, Path]) -> pd.DataFrame:
    """Read delimited text with a header row from a file or '-' for stdin."""
    if str(source) == '-':
        logger.info("Loading points from standard input")
        return pd.read_csv(sys.stdin)
    logger.info(f"Loading points from {source}")
    return pd.read_csv(source)

def select_coordinate_columns(
    df: pd.DataFrame,
    columns: Optional[List[str]] = None
) -> pd.DataFrame:
    """Keep the requested coordinate columns, or every numeric column."""
    if columns:
        missing = [c for c in columns if c not in df.columns]
        if missing:
            raise ValueError(f"Missing coordinate columns in input data: {missing}")
        return df[columns].astype(float)

    numeric = df.select_dtypes(include='number')
    if numeric.shape[1] == 0:
        raise ValueError("Input data has no numeric columns")
    return numeric.astype(float)

def load_points(
    source: Union[str, Path],
    columns: Optional[List[str]] = None
) -> tuple[List[Point], List[str]]:
    """
    Load points from a CSV file or standard input.

    Args:
        source: Path to the CSV file, or '-' for standard input
        columns: Coordinate columns to use; defaults to all numeric columns

    Returns:
        tuple: (points, names of the coordinate columns)

    Raises:
        ValueError: If no points could be read
    """
    try:
        df = read_points_frame(source)
    except pd.errors.EmptyDataError:
        df = pd.DataFrame()

    if df.empty:
        raise ValueError(f"No points read from {source}")

    coords = select_coordinate_columns(df, columns).dropna()
    if coords.empty:
        raise ValueError(f"No complete points read from {source}")
    if len(coords) < len(df):
        logger.warning(f"Dropped {len(df) - len(coords)} rows with missing coordinates")

    points = points_from_array(coords.to_numpy())
    logger.info(f"Loaded {len(points)} points with columns {list(coords.columns)}")
    return points, [str(c) for c in coords.columns]
