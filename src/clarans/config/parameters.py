from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import yaml

from clarans.clustering.common import ACCEPTANCE_POLICIES
from clarans.utils.points import METRICS

def _is_int(value) -> bool:
    # YAML true/false load as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)

@dataclass
class Parameters:
    """Configuration parameters for the medoid search"""
    num_clusters: int
    minima: int
    max_neighbors: int
    input_file: str
    output_file: str
    num_threads: int = 1
    acceptance: str = 'reset'
    metric: str = 'euclidean'
    columns: Optional[List[str]] = None
    assignments_file: Optional[str] = None
    seed: Optional[int] = None
    generate: int = 0  # > 0 replaces the input file with random points
    dimensions: int = 2
    value_range: List[float] = field(default_factory=lambda: [0.0, 100.0])

    @classmethod
    def from_yaml(cls, path: Path | str = None) -> 'Parameters':
        """Load parameters from YAML file"""
        if path is None:
            path = Path(__file__).parent / 'default_config.yaml'

        with open(path) as f:
            data = yaml.safe_load(f)
            return cls(**data)

    def __post_init__(self):
        """Validate parameters after initialization"""
        for name in ('num_clusters', 'minima', 'num_threads', 'dimensions'):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise ValueError(f"{name} must be a positive integer. Got: {value}")

        for name in ('max_neighbors', 'generate'):
            value = getattr(self, name)
            if not _is_int(value) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer. Got: {value}")

        if self.acceptance not in ACCEPTANCE_POLICIES:
            raise ValueError(
                f"acceptance must be one of {', '.join(ACCEPTANCE_POLICIES)}. Got: {self.acceptance}"
            )

        if self.metric not in METRICS:
            raise ValueError(
                f"metric must be one of {', '.join(METRICS)}. Got: {self.metric}"
            )

        if self.seed is not None and (not _is_int(self.seed) or self.seed < 0):
            raise ValueError(f"seed must be a non-negative integer. Got: {self.seed}")

        if len(self.value_range) != 2 or not self.value_range[0] < self.value_range[1]:
            raise ValueError(
                f"value_range must be [low, high] with low < high. Got: {self.value_range}"
            )
