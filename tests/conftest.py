import pytest
import numpy as np
import yaml
from pathlib import Path

from clarans.utils.points import Point, euclidean_distance

# Define project root for path fixtures
repo_root = Path(__file__).resolve().parent.parent

@pytest.fixture(scope="session")
def default_yaml():
    """Path to the packaged default configuration"""
    return repo_root / "src" / "clarans" / "config" / "default_config.yaml"

@pytest.fixture
def rng():
    """Seeded generator so search tests are deterministic"""
    return np.random.default_rng(12345)

@pytest.fixture
def two_pairs():
    """Two well separated pairs of points, one unit apart within each pair"""
    return [Point((0.0, 0.0)), Point((0.0, 1.0)), Point((10.0, 0.0)), Point((10.0, 1.0))]

@pytest.fixture
def blob_points():
    """Three gaussian blobs of 15 points each"""
    gen = np.random.default_rng(7)
    centers = [(0.0, 0.0), (20.0, 0.0), (10.0, 20.0)]
    return [
        Point(tuple(float(v) for v in gen.normal(center, 1.0)))
        for center in centers
        for _ in range(15)
    ]

@pytest.fixture
def distance():
    return euclidean_distance

@pytest.fixture
def points_csv(tmp_path):
    """Small x,y CSV file with a header row"""
    path = tmp_path / "data.csv"
    path.write_text("x,y\n0,0\n0,1\n10,0\n10,1\n")
    return path

@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config built from the defaults plus overrides"""
    def _write(**overrides):
        cfg = {
            'num_clusters': 2,
            'minima': 5,
            'max_neighbors': 20,
            'input_file': 'data.csv',
            'output_file': str(tmp_path / 'result.csv'),
        }
        cfg.update(overrides)
        path = tmp_path / 'cfg.yaml'
        with open(path, 'w') as f:
            yaml.safe_dump(cfg, f)
        return path
    return _write
