import numpy as np


def _cube(u):
    return u * u * u


def _scan_window(x, xs, h9, nleft, nright):
    """
    Distances `|x_j - xs|` for `j = nleft, nleft+1, ...` up to (not
    including) the first point to the right of `xs` lying farther than `h9`.

    Ties on the right boundary extend the scan past `nright`, so the search
    starts just past the window and widens until the stopping point is seen.
    """
    n = len(x)
    stop = min(n, nright + 2)
    while True:
        seg = x[nleft:stop]
        r = np.abs(seg - xs)
        beyond = np.flatnonzero((r > h9) & (seg > xs))
        if beyond.size:
            return r[:beyond[0]]
        if stop == n:
            return r
        stop = min(n, nleft + 2 * (stop - nleft))


def local_fit(x, y, xs, nleft, nright, w, userw=False, rw=None):
    """
    Tricube-weighted local linear fit at a single abscissa.

    Parameters
    ----------
    x : np.ndarray
        Sorted predictor values.
    y : np.ndarray
        Response values.
    xs : float
        Abscissa at which to evaluate the fit.
    nleft, nright : int
        Inclusive (0-based) bounds of the neighbourhood.
    w : np.ndarray
        Scratch buffer of length `len(x)`; the final local weights are
        written to `w[nleft:nrt+1]` where `nrt >= nright` is the rightmost
        point picked up (ties may push it past `nright`).
    userw : bool, optional
        Multiply the tricube weights by the robustness weights `rw`.
    rw : np.ndarray, optional
        Robustness weights, required when `userw` is True.

    Returns
    -------
    ys : float
        The fitted value, NaN when `ok` is False.
    ok : bool
        False if every weight in the neighbourhood is zero.
    """
    x_range = x[-1] - x[0]
    h = max(xs - x[nleft], x[nright] - xs)
    h9 = 0.999 * h
    h1 = 0.001 * h

    r = _scan_window(x, xs, h9, nleft, nright)
    end = nleft + len(r)

    wj = np.zeros(len(r))
    near = r <= h9
    wj[near] = 1.
    taper = near & (r > h1)
    wj[taper] = _cube(1. - _cube(r[taper] / h))
    if userw:
        wj *= rw[nleft:end]

    a = wj.sum()
    if a <= 0.:
        w[nleft:end] = wj
        return np.nan, False

    # weighted least squares with weights summing to one
    wj /= a
    if h > 0.:
        xj = x[nleft:end]
        a = np.dot(wj, xj)
        c = np.dot(wj, (xj - a) ** 2)
        if np.sqrt(c) > 0.001 * x_range:
            # points are spread out enough to compute a slope
            b = (xs - a) / c
            wj *= b * (xj - a) + 1.

    w[nleft:end] = wj
    return float(np.dot(wj, y[nleft:end])), True
