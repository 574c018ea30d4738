"""Console logging and step progress for the clarans command-line tool.

Everything goes to stderr so the medoid CSV can be written to stdout.
"""
import logging
import sys
from tqdm import tqdm

class Colors:
    """ANSI color codes for prettier output."""
    CYAN = '\033[36m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    RED = '\033[31m'
    BLUE = '\033[34m'
    GRAY = '\033[37m'
    BOLD = '\033[1m'
    RESET = '\033[0m'

class Symbols:
    """Status markers used in step and error messages."""
    CHECK = '✓'
    CROSS = '✗'
    ROCKET = '🚀'

LEVEL_COLORS = {
    'DEBUG': Colors.GRAY,
    'INFO': Colors.CYAN,
    'WARNING': Colors.YELLOW,
    'ERROR': Colors.RED,
    'CRITICAL': Colors.RED + Colors.BOLD,
}

class SimpleFormatter(logging.Formatter):
    """Color each message by level; no timestamps or logger names."""
    def format(self, record):
        color = LEVEL_COLORS.get(record.levelname, Colors.RESET)
        return f"{color}{record.getMessage()}{Colors.RESET}"

def setup_logging(verbose: bool = False):
    """Route all loggers to one colored stderr handler; DEBUG shows per-restart improvements."""
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console = logging.StreamHandler()
    console.setFormatter(SimpleFormatter())
    logger.addHandler(console)

class ProgressTracker:
    """Progress bar over the load / search / save steps of one run."""
    def __init__(self, steps):
        self.steps = steps
        self.pbar = tqdm(
            total=len(steps),
            desc=f"{Colors.BLUE}{Symbols.ROCKET} Medoid Search{Colors.RESET}",
            bar_format="{desc}: {percentage:3.0f}%|{bar}| {n_fmt}/{total_fmt}"
        )
        self.current = 0
        self.closed = False

    def advance(self, message=None):
        """Mark the current step done, optionally printing a status line."""
        if message:
            self.pbar.write(f"{Colors.GREEN}{Symbols.CHECK} {message}{Colors.RESET}", file=sys.stderr)
        self.current += 1
        self.pbar.update(1)

    def close(self, success: bool = True):
        """Close the bar once; a failed run names the step it stopped at."""
        if self.closed:
            return
        if success:
            self.pbar.write(f"\n{Colors.GREEN}{Symbols.ROCKET} Search completed!{Colors.RESET}\n", file=sys.stderr)
        else:
            step = self.steps[self.current] if self.current < len(self.steps) else 'finish'
            self.pbar.write(f"{Colors.RED}{Symbols.CROSS} Search aborted at step: {step}{Colors.RESET}", file=sys.stderr)
        self.pbar.close()
        self.closed = True
