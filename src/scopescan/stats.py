"""Own-line distribution statistics: median, percentiles, MAD outliers."""

from dataclasses import dataclass
from typing import List, Sequence, Union

import numpy as np

# Normal distribution consistency constant for modified z-scores
_MAD_CONSTANT = 0.6745


def median_absolute_deviation(values: Union[List[float], np.ndarray]) -> float:
    """
    Median Absolute Deviation: MAD = median(|x_i - median(x)|).

    Args:
        values: List or array of values

    Returns:
        MAD value
    """
    array = np.asarray(values, dtype=float)
    return float(np.median(np.abs(array - np.median(array))))


def modified_z_scores(values: Union[List[float], np.ndarray]) -> List[float]:
    """
    Modified z-scores using MAD (robust to outliers).

    M_i = 0.6745 * (x_i - median) / MAD

    Returns all zeros when MAD is zero.
    """
    array = np.asarray(values, dtype=float)
    mad = median_absolute_deviation(array)
    if mad == 0:
        return [0.0] * len(array)
    return (_MAD_CONSTANT * (array - np.median(array)) / mad).tolist()


@dataclass(frozen=True)
class OwnLineSummary:
    """Summary of own-line counts across a codebase.

    Attributes:
        count: Number of functions
        median: Median own lines
        p90: 90th percentile
        maximum: Largest own-line count
        mad: Median absolute deviation
        outliers: Counts whose modified z-score exceeds the threshold
    """

    count: int
    median: float
    p90: float
    maximum: int
    mad: float
    outliers: tuple[int, ...]


def summarize_own_lines(counts: Sequence[int], threshold: float = 3.5) -> OwnLineSummary:
    """
    Summarize a distribution of own-line counts.

    Only the upper tail counts as outlying; short functions are never flagged.

    Args:
        counts: Own-line counts
        threshold: Modified z-score above which a count is an outlier

    Returns:
        OwnLineSummary (all zeros for an empty input)
    """
    if len(counts) == 0:
        return OwnLineSummary(count=0, median=0.0, p90=0.0, maximum=0, mad=0.0, outliers=())

    array = np.asarray(counts, dtype=float)
    scores = modified_z_scores(array)
    outliers = sorted(
        (int(count) for count, score in zip(counts, scores) if score > threshold), reverse=True
    )

    return OwnLineSummary(
        count=len(counts),
        median=float(np.median(array)),
        p90=float(np.percentile(array, 90)),
        maximum=int(array.max()),
        mad=median_absolute_deviation(array),
        outliers=tuple(outliers),
    )
