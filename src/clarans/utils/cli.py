from argparse import ArgumentParser, RawTextHelpFormatter
from typing import Dict, Any
from clarans.config.parameters import Parameters
from clarans.clustering.common import ACCEPTANCE_POLICIES
from clarans.utils.points import METRICS
import sys
from clarans.utils.logging import Colors

def print_parameter_help():
    """Display detailed help information about parameters"""
    help_text = f"""
{Colors.BOLD}CLARANS Medoid Search Parameters{Colors.RESET}
{Colors.CYAN}════════════════════════════════{Colors.RESET}

{Colors.YELLOW}Search Parameters:{Colors.RESET}
  --num-clusters INT       Number of medoids to find
                           Default: 4
                           Example: --num-clusters 8

  --minima INT             Number of random restarts
                           Default: 100
                           Example: --minima 250

  --max-neighbors INT      Neighbor trials per restart
                           Set to 0 to keep the random initial medoids
                           Default: 100
                           Example: --max-neighbors 500

  --acceptance STR         How the neighbor budget is counted
                           Options:
                             - reset (consecutive failed trials, reset on every move)
                             - budget (total trials per restart)
                           Default: reset
                           Example: --acceptance budget

  --metric STR             Distance between points
                           Options:
                             - euclidean
                             - haversine (latitude, longitude in degrees; km)
                           Default: euclidean
                           Example: --metric haversine

{Colors.YELLOW}Parallelism:{Colors.RESET}
  --num-threads INT        Worker threads sharing the restarts
                           Default: 1 (sequential search)
                           Example: --num-threads 4

  --seed INT               Seed for reproducible runs
                           Default: none (fresh entropy each run)
                           Example: --seed 42

{Colors.YELLOW}Input/Output:{Colors.RESET}
  --input PATH             CSV file with a header row, '-' for stdin
                           Default: data.csv
                           Example: --input points.csv

  --output PATH            CSV file for the medoids, '-' for stdout
                           Default: result.csv
                           Example: --output -

  --columns NAME [NAME..]  Coordinate columns to read
                           Default: every numeric column
                           Example: --columns lat lon

  --assignments PATH       Also write index,cluster for every point
                           Example: --assignments labels.csv

  --generate INT           Search random points instead of reading --input
                           Example: --generate 1000 --dimensions 3

  --config PATH            Path to custom config file
                           Default: src/clarans/config/default_config.yaml
                           Example: --config my_config.yaml

{Colors.YELLOW}Other Options:{Colors.RESET}
  --verbose               Enable verbose output
                           Default: False
                           Example: --verbose

{Colors.CYAN}Examples:{Colors.RESET}
  # Cluster a CSV file with 8 medoids on 4 threads
  clarans --input points.csv --num-clusters 8 --num-threads 4

  # Read stdin, write stdout
  cat points.csv | clarans --input - --output -

  # Demo on random 3-D points
  clarans --generate 1000 --dimensions 3 --seed 7
"""
    print(help_text)
    sys.exit(0)

def parse_args() -> ArgumentParser:
    """Parse command line arguments for parameter overrides"""
    parser = ArgumentParser(
        description='CLARANS k-medoid clustering',
        formatter_class=RawTextHelpFormatter
    )

    parser.add_argument(
        '--help-params',
        action='store_true',
        help='Show detailed parameter information and exit'
    )

    parser.add_argument('--config', type=str, help='Path to custom config file')
    parser.add_argument('--input', dest='input_file', type=str, help="Input CSV file, '-' for stdin")
    parser.add_argument('--output', dest='output_file', type=str, help="Output CSV file, '-' for stdout")
    parser.add_argument('--assignments', dest='assignments_file', type=str, help='Write point-to-cluster assignments')
    parser.add_argument('--columns', nargs='+', help='Coordinate columns to read')
    parser.add_argument('--num-clusters', type=int, help='Number of medoids')
    parser.add_argument('--minima', type=int, help='Number of restarts')
    parser.add_argument('--max-neighbors', type=int, help='Neighbor trials per restart')
    parser.add_argument('--num-threads', type=int, help='Number of worker threads')
    parser.add_argument(
        '--acceptance',
        type=str,
        choices=list(ACCEPTANCE_POLICIES),
        help='Neighbor budget policy (reset, budget)'
    )
    parser.add_argument(
        '--metric',
        type=str,
        choices=list(METRICS),
        help='Distance metric (euclidean, haversine)'
    )
    parser.add_argument('--seed', type=int, help='Random seed')
    parser.add_argument('--generate', type=int, help='Number of random points to generate')
    parser.add_argument('--dimensions', type=int, help='Dimensions of generated points')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')

    return parser

def get_parameter_overrides(args) -> Dict[str, Any]:
    """Extract parameter overrides from command line arguments"""
    overrides = {k: v for k, v in vars(args).items() if v is not None}

    for key in ['config', 'verbose', 'help_params']:
        overrides.pop(key, None)

    overrides = {k.replace('-', '_'): v for k, v in overrides.items()}

    return overrides

def load_parameters(args) -> Parameters:
    """Load parameters with optional command line overrides"""
    if args.config:
        params = Parameters.from_yaml(args.config)
    else:
        params = Parameters.from_yaml()

    overrides = get_parameter_overrides(args)

    if overrides:
        data = params.__dict__.copy()
        data.update(overrides)
        params = Parameters(**data)

    return params
