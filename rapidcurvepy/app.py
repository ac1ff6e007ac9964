import logging
import sys
from typing import Optional, TextIO

import numpy as np

from rapidcurvepy.aggregate import format_summary, summarize_circles
from rapidcurvepy.constants import EVAL_PARAMETER, NUM_WORKERS
from rapidcurvepy.errors import InvalidParameterError
from rapidcurvepy.generator import GeneratorConfig, generate_curves
from rapidcurvepy.report import evaluate_curves, format_report

logger = logging.getLogger(__name__)


def run(
    config: Optional[GeneratorConfig] = None,
    rng: Optional[np.random.Generator] = None,
    out: Optional[TextIO] = None,
    num_workers: int = NUM_WORKERS,
):
    """
    Generate curves, report their evaluation at t=PI/4 and the circle summary.

    Returns:
        Tuple of (collection, evaluations, summary)
    """
    out = out or sys.stdout
    collection = generate_curves(config, rng)

    evaluations = evaluate_curves(collection, EVAL_PARAMETER)
    out.write(format_report(evaluations))

    summary = summarize_circles(collection, num_workers=num_workers)
    out.write(format_summary(summary))
    return collection, evaluations, summary


def main() -> int:
    """Console entry point. Returns the process exit code."""
    logging.basicConfig(level=logging.WARNING)
    try:
        run()
    except InvalidParameterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
