import numpy as np


def naive_local_fit(x, y, xs, nleft, nright, rw=None):
    """
    Weighted least squares line at `xs` over the window, solved with lstsq.

    Used as a reference for `local_fit` away from the degenerate cases
    (positive half-width, points well spread).
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    h = max(xs - x[nleft], x[nright] - xs)

    idx = np.arange(nleft, len(x))
    dists = np.abs(x[idx] - xs)
    keep = (dists <= 0.999 * h) | (x[idx] <= xs)
    # the scan stops at the first point to the right beyond the window
    stop = np.flatnonzero(~keep)
    if stop.size:
        idx = idx[:stop[0]]
        dists = dists[:stop[0]]

    u = dists / h
    weights = (1 - u**3)**3
    weights[u > 0.999] = 0
    weights[u <= 0.001] = 1
    if rw is not None:
        weights = weights * np.asarray(rw)[idx]

    sqrt_w = np.sqrt(weights)
    X_des = np.vander(x[idx] - xs, 2, increasing=True)
    X_w = X_des * sqrt_w[:, None]
    y_w = y[idx] * sqrt_w
    beta, _, _, _ = np.linalg.lstsq(X_w, y_w, rcond=None)
    return beta[0]
