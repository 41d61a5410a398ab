from importlib import resources

import numpy as np


def load_cleveland():
    """
    Load the example scatterplot distributed with the original LOWESS
    routines (Cleveland, 1979).

    The data has 20 points, ten of them tied at ``x = 6``, and is the
    standard check for an implementation.

    Returns
    -------
    x, y : np.ndarray
        Predictor values (sorted) and responses.

    Examples
    --------

    from robust_lowess import lowess
    from robust_lowess.datasets import load_cleveland

    x, y = load_cleveland()
    print(lowess(x, y, f=0.25, nsteps=0, delta=0).y)
    """
    with resources.files('robust_lowess').joinpath('data/cleveland.csv').open('r') as f:
        data = np.loadtxt(f, delimiter=',', skiprows=1)
    return data[:, 0], data[:, 1]
