"""
Robust locally weighted scatterplot smoothing.

For more information, see

William S. Cleveland: "Robust locally weighted regression and smoothing
scatterplots", Journal of the American Statistical Association, December 1979,
volume 74, number 368, pp. 829-836.
"""
from dataclasses import dataclass
import logging

import numpy as np

from .fitter import local_fit
from .select import six_mad

logger = logging.getLogger(__name__)


def window_size(n, f):
    """Number of points in each neighbourhood: at least two, at most `n`."""
    return max(2, min(n, int(f * n + 1e-7)))


def clowess(x, y, f, nsteps, delta, ys, rw, res):
    """
    Robust LOWESS smoother writing into caller-owned buffers.

    No validation is done here: `x` must be non-decreasing, all arrays must
    have the same length and `ys`, `rw`, `res` must be writable float arrays
    distinct from `x` and `y`.

    Parameters
    ----------
    x, y : np.ndarray
        The scatterplot, ordered by `x`.
    f : float
        Fraction of points used for each local fit.
    nsteps : int
        Number of robustness iterations after the initial fit.
    delta : float
        Points within `delta` of the last fitted abscissa are not fitted
        but linearly interpolated.
    ys : np.ndarray
        Output: fitted values.
    rw : np.ndarray
        Output: robustness weights used in the last fit. Only written when
        `nsteps > 0`; if iteration stops early because the residuals are
        essentially zero it holds the absolute residuals, partially ordered.
    res : np.ndarray
        Output: residuals `y - ys` of the last fit.

    Returns
    -------
    int
        The number of fitting passes performed.
    """
    n = len(x)
    if n < 2:
        ys[:n] = y[:n]
        return 0

    ns = window_size(n, f)
    logger.debug("lowess: ns = %d", ns)

    iteration = 1
    while iteration <= nsteps + 1:
        _smooth_pass(x, y, ns, delta, ys, res, iteration > 1, rw)

        res[:] = y - ys
        sc = np.abs(res).sum() / n

        # robustness weights, except after the last pass
        if iteration > nsteps:
            break

        rw[:] = np.abs(res)
        cmad = six_mad(rw)
        logger.debug("lowess: iteration %d, cmad = %g", iteration, cmad)
        if cmad < 1e-7 * sc:
            logger.debug("lowess: residual spread negligible, stopping "
                         "after %d passes", iteration)
            break

        _biweight(np.abs(res), cmad, out=rw)
        iteration += 1
    return iteration


def _smooth_pass(x, y, ns, delta, ys, w, userw, rw):
    n = len(x)
    nleft = 0
    nright = ns - 1
    last = -1       # index of the previously estimated point
    i = 0           # index of the current point

    while True:
        if nright < n - 1:
            # move the window right if the radius decreases;
            # ties with x[nright+1] are picked up by local_fit
            d1 = x[i] - x[nleft]
            d2 = x[nright + 1] - x[i]
            if d1 > d2:
                nleft += 1
                nright += 1
                continue

        fit, ok = local_fit(x, y, x[i], nleft, nright, w, userw, rw)
        # all weights zero: copy over the observed value
        ys[i] = fit if ok else y[i]

        if last < i - 1:
            # skipped points -- interpolate
            denom = x[i] - x[last]
            alpha = (x[last + 1:i] - x[last]) / denom
            ys[last + 1:i] = alpha * ys[i] + (1. - alpha) * ys[last]

        last = i

        cut = x[last] + delta
        i = last + 1
        while i < n:
            if x[i] > cut:
                break
            if x[i] == x[last]:
                ys[i] = ys[last]
                last = i
            i += 1
        i = max(last + 1, i - 1)

        if last >= n - 1:
            break


def _biweight(r, cmad, out):
    c9 = 0.999 * cmad
    c1 = 0.001 * cmad
    out[:] = 0.
    out[r <= c1] = 1.
    taper = (r > c1) & (r <= c9)
    out[taper] = (1. - (r[taper] / cmad) ** 2) ** 2
    return out


@dataclass
class LowessResult:
    """
    Output of :func:`lowess`.

    Attributes
    ----------
    x : np.ndarray
        The predictor values in increasing order.
    y : np.ndarray
        Fitted values at `x`.
    residuals : np.ndarray
        Observed minus fitted values, ordered as `x`.
    robustness_weights : np.ndarray
        Robustness weights of the last pass, ordered as `x`.
    n_passes : int
        Number of fitting passes performed.
    order : np.ndarray
        Permutation that sorts the input: `x == x_input[order]`.
    """

    x: np.ndarray
    y: np.ndarray
    residuals: np.ndarray
    robustness_weights: np.ndarray
    n_passes: int
    order: np.ndarray


def _as_xy(x, y):
    x = np.asarray(x, dtype=float)
    if y is None:
        if x.ndim != 2 or x.shape[1] != 2:
            raise ValueError("If `y` is not given, `x` must have shape (n, 2).")
        x, y = x[:, 0], x[:, 1]
    else:
        y = np.asarray(y, dtype=float)
    x = np.ravel(x)
    y = np.ravel(y)
    if x.shape != y.shape:
        raise ValueError(f"`x` and `y` lengths differ ({len(x)} != {len(y)}).")
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
        raise ValueError("`x` and `y` must be finite.")
    return x, y


def lowess(x, y=None, f=2./3, nsteps=3, delta=None):
    """
    Smooth a scatterplot with robust locally weighted regression.

    The pairs are ordered by `x` (stable sort, so tied abscissae keep their
    input order) before smoothing.

    Parameters
    ----------
    x : array-like
        Predictor values, or an `(n, 2)` array of `(x, y)` pairs if `y` is
        None.
    y : array-like, optional
        Response values.
    f : float, default=2/3
        Smoother span: the fraction of points influencing each fitted value.
        Values above 1 use all points.
    nsteps : int, default=3
        Number of robustifying iterations; 0 gives the non-robust fit.
    delta : float, optional
        Distance within which the local fit is replaced by linear
        interpolation. Defaults to 1% of the range of `x`.

    Returns
    -------
    LowessResult
    """
    x, y = _as_xy(x, y)

    if not np.isfinite(f) or f <= 0:
        raise ValueError("`f` must be finite and > 0.")
    if nsteps < 0:
        raise ValueError("`nsteps` must be >= 0.")
    nsteps = int(nsteps)

    order = np.argsort(x, kind="stable")
    x = x[order]
    y = y[order]
    n = len(x)

    if delta is None:
        delta = 0.01 * (x[-1] - x[0]) if n else 0.
    if not np.isfinite(delta) or delta < 0:
        raise ValueError("`delta` must be finite and >= 0.")

    ys = np.zeros(n)
    rw = np.ones(n)
    res = np.zeros(n)
    n_passes = clowess(x, y, f, nsteps, delta, ys, rw, res)

    return LowessResult(x=x,
                        y=ys,
                        residuals=res,
                        robustness_weights=rw,
                        n_passes=n_passes,
                        order=order)
