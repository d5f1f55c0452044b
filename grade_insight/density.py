"""
Kernel density estimation for score distributions.

Produces a smooth curve sampled on a uniform grid, using a Gaussian kernel
with Silverman's rule-of-thumb bandwidth h = 1.06 * sigma * n^(-1/5).
"""

import logging
from dataclasses import dataclass, field

import numpy as np
from scipy import stats

from .config import DENSITY_GRID_POINTS, DENSITY_MIN_PAD, DENSITY_PAD_RATIO, FALLBACK_BANDWIDTH
from .statistics import population_std

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DensityCurve:
    x: list = field(default_factory=list)
    y: list = field(default_factory=list)
    bandwidth: float = 0.0

    @property
    def is_empty(self):
        return len(self.x) == 0

    def peak(self):
        """x position of the highest density, or None for an empty curve."""
        if self.is_empty:
            return None
        return self.x[int(np.argmax(self.y))]

    def to_dict(self):
        return {'x': list(self.x), 'y': list(self.y)}


def silverman_bandwidth(samples):
    """Silverman bandwidth; falls back to FALLBACK_BANDWIDTH when the samples have no spread."""
    arr = np.asarray(samples, dtype=float)
    if arr.size == 0:
        return FALLBACK_BANDWIDTH
    sigma = population_std(arr)
    if sigma <= 0:
        logger.debug('Zero variance in %d samples; using fallback bandwidth %s',
                     arr.size, FALLBACK_BANDWIDTH)
        return FALLBACK_BANDWIDTH
    return 1.06 * sigma * arr.size ** (-1 / 5)


def evaluation_grid(samples, num_points=DENSITY_GRID_POINTS):
    """Uniform grid over the sample range, padded on both sides."""
    lo, hi = float(np.min(samples)), float(np.max(samples))
    spread = hi - lo
    pad = DENSITY_PAD_RATIO * spread if spread > 0 else DENSITY_MIN_PAD
    return np.linspace(lo - pad, hi + pad, num_points)


def estimate(samples, num_points=DENSITY_GRID_POINTS, bandwidth=None):
    """
    Estimate the probability density of samples.

    Returns an empty curve for an empty input. The density at each grid point
    is (1 / (n * h)) * sum(K((x - sample) / h)) with K the standard normal pdf.
    """
    arr = np.asarray(samples, dtype=float)
    if arr.size == 0:
        return DensityCurve()

    h = bandwidth if bandwidth is not None else silverman_bandwidth(arr)
    if h <= 0:
        logger.debug('Non-positive bandwidth %s; using fallback bandwidth %s', h, FALLBACK_BANDWIDTH)
        h = FALLBACK_BANDWIDTH
    grid = evaluation_grid(arr, num_points)

    # Kernel matrix: one row per grid point, one column per sample
    u = (grid[:, np.newaxis] - arr[np.newaxis, :]) / h
    density = stats.norm.pdf(u).sum(axis=1) / (arr.size * h)

    return DensityCurve(x=grid.tolist(), y=density.tolist(), bandwidth=float(h))
