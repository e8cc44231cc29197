"""Median and equal-width histogram of aggregated values."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from statistics import median

from domain.common import DistributionSummary, HistogramBin
from domain.errors import EmptyInputError, InvalidArgumentError


def bin_bounds(max_value: float, num_bins: int) -> list[float]:
    """Return the num_bins + 1 edges spanning [0, max_value]."""
    return [max_value * k / num_bins for k in range(num_bins + 1)]


def analyze_distribution(
    values: Sequence[float],
    num_bins: int,
    *,
    label_decimals: int = 2,
) -> DistributionSummary:
    """Summarize a value population as median, max and an N-bin histogram.

    Bins are half-open ``[lower, upper)`` except the last, which also takes
    the maximum. Values below zero are counted in the first bin; when the
    maximum is not positive every value lands in the last bin.
    """
    if num_bins <= 0:
        raise InvalidArgumentError(f"num_bins must be greater than 0, got {num_bins}")
    if label_decimals < 0:
        raise InvalidArgumentError(f"label_decimals must be >= 0, got {label_decimals}")
    if not values:
        raise EmptyInputError("cannot analyze an empty value sequence")

    max_value = max(values)
    edges = bin_bounds(max_value, num_bins)
    lower_edges = edges[:-1]

    counts = [0] * num_bins
    if max_value <= 0:
        # Degenerate range; nothing to spread across bins.
        counts[-1] = len(values)
    else:
        for value in values:
            index = bisect_right(lower_edges, value) - 1
            counts[min(max(index, 0), num_bins - 1)] += 1

    bins = tuple(
        HistogramBin(lower=edges[k], upper=edges[k + 1], count=counts[k])
        for k in range(num_bins)
    )
    labels = tuple(round(edge, label_decimals) for edge in lower_edges) + (max_value,)

    return DistributionSummary(
        median=float(median(values)),
        max_value=float(max_value),
        bins=bins,
        labels=labels,
    )


__all__ = ["analyze_distribution", "bin_bounds"]
