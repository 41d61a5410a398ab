def partial_sort(x, k, lo=0, hi=None):
    """
    Partially sort `x[lo:hi+1]` in place so that `x[k]` holds its k-th
    smallest value.

    After the call every element of `x[lo:k]` is `<= x[k]` and every
    element of `x[k+1:hi+1]` is `>= x[k]`; the order within either side is
    unspecified.

    Parameters
    ----------
    x : np.ndarray
        Array to rearrange (modified in place).
    k : int
        Target rank (0-based, absolute index into `x`).
    lo, hi : int, optional
        Inclusive bounds of the active range. Defaults to the whole array.

    Returns
    -------
    np.ndarray
        The same array `x`.
    """
    if hi is None:
        hi = len(x) - 1

    L, R = lo, hi
    while L < R:
        v = x[k]
        i, j = L, R
        while i <= j:
            while x[i] < v:
                i += 1
            while v < x[j]:
                j -= 1
            if i <= j:
                x[i], x[j] = x[j], x[i]
                i += 1
                j -= 1
        if j < k:
            L = i
        if k < i:
            R = j
    return x


def six_mad(rw):
    """
    Six times the median of `rw`, computed by partial selection.

    `rw` is rearranged in place. For even lengths the two central order
    statistics are averaged.
    """
    n = len(rw)
    m1 = n // 2
    partial_sort(rw, m1)
    if n % 2 == 0:
        m2 = n - m1 - 1
        partial_sort(rw, m2)
        return 3. * (rw[m1] + rw[m2])
    return 6. * rw[m1]
