"""
Command-line entry point: load points, search medoids, save results.
"""
import logging
import sys
import time

import numpy as np

from clarans.clustering import parallel_search, search
from clarans.config.parameters import Parameters
from clarans.utils.cli import parse_args, load_parameters, print_parameter_help
from clarans.utils.data_processing import load_points
from clarans.utils.logging import setup_logging, ProgressTracker, Colors, Symbols
from clarans.utils.points import create_random_points, get_distance_function
from clarans.utils.save_results import save_assignments, save_medoids

logger = logging.getLogger(__name__)

def run_pipeline(params: Parameters, verbose: bool = False) -> float:
    """Run the load/search/save steps and return the best cost."""
    steps = ['Load Points', 'Search Medoids', 'Save Results']
    progress = ProgressTracker(steps)
    start_time = time.time()
    completed = False
    try:
        cost = _run_steps(params, progress, start_time, verbose)
        completed = True
        return cost
    finally:
        progress.close(success=completed)

def _run_steps(params: Parameters, progress: ProgressTracker, start_time: float, verbose: bool) -> float:
    # Step 1: Points from file, stdin or the random generator
    if params.generate > 0:
        points = create_random_points(
            params.generate,
            params.dimensions,
            params.value_range,
            np.random.default_rng(params.seed)
        )
        columns = None
        progress.advance(f"Generated {Colors.BOLD}{len(points)}{Colors.RESET} random points")
    else:
        points, columns = load_points(params.input_file, params.columns)
        progress.advance(f"Loaded {Colors.BOLD}{len(points)}{Colors.RESET} points")

    # Step 2: Search
    distance = get_distance_function(params.metric)
    if params.num_threads == 1:
        result = search(
            points,
            num_clusters=params.num_clusters,
            minima=params.minima,
            max_neighbors=params.max_neighbors,
            distance=distance,
            rng=params.seed,
            acceptance=params.acceptance,
            progress=verbose
        )
    else:
        result = parallel_search(
            points,
            num_clusters=params.num_clusters,
            minima=params.minima,
            max_neighbors=params.max_neighbors,
            num_threads=params.num_threads,
            distance=distance,
            seed=params.seed,
            acceptance=params.acceptance
        )
    progress.advance(f"Found {len(result.medoids)} medoids, total cost {Colors.BOLD}{result.cost:,.4f}{Colors.RESET}")
    for slot, point in enumerate(result.medoid_points(points)):
        logger.debug(f"Medoid {slot}: {point}")

    # Step 3: Save
    save_medoids(points, result, params.output_file, columns)
    if params.assignments_file:
        save_assignments(points, result, distance, params.assignments_file)
    progress.advance(f"Results saved {Colors.GRAY}(execution time: {time.time() - start_time:.1f}s){Colors.RESET}")
    return result.cost

def main(argv=None):
    """Run the CLARANS command-line tool."""
    parser = parse_args()
    args = parser.parse_args(argv)

    if args.help_params:
        print_parameter_help()

    setup_logging(verbose=args.verbose)

    try:
        params = load_parameters(args)
        run_pipeline(params, verbose=args.verbose)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"{Symbols.CROSS} {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
