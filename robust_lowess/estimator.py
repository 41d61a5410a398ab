from dataclasses import dataclass, field
import numpy as np
from scipy.interpolate import interp1d
from sklearn.base import BaseEstimator

from .lowess import lowess


@dataclass
class LowessSmoother(BaseEstimator):
    """
    Robust LOWESS estimator.

    Fits a LOWESS curve to a scatterplot and predicts by linear
    interpolation between the fitted values.

    Parameters
    ----------
    f : float, default=2/3
        The smoother span (fraction of points used for each local fit).
    nsteps : int, default=3
        Number of robustness iterations.
    delta : float, optional
        Interpolation distance for skipping local fits. Defaults to 1% of
        the range of `x`.

    Attributes
    ----------
    x_ : np.ndarray
        Sorted training predictor values.
    y_hat_ : np.ndarray
        Fitted values at `x_`.
    residuals_ : np.ndarray
        Residuals at `x_`.
    robustness_weights_ : np.ndarray
        Robustness weights of the final pass at `x_`.
    n_passes_ : int
        Number of fitting passes performed.
    """
    f: float = 2./3
    nsteps: int = 3
    delta: float = None

    x_: np.ndarray = field(init=False, default=None, repr=False)
    y_hat_: np.ndarray = field(init=False, default=None, repr=False)
    residuals_: np.ndarray = field(init=False, default=None, repr=False)
    robustness_weights_: np.ndarray = field(init=False, default=None, repr=False)
    n_passes_: int = field(init=False, default=None, repr=False)
    _interpolator: interp1d = field(init=False, default=None, repr=False)

    def fit(self, x, y):
        """
        Fit the LOWESS curve.

        Parameters
        ----------
        x : np.ndarray
            The predictor variable (any order).
        y : np.ndarray
            The response variable.

        Returns
        -------
        self : LowessSmoother
        """
        result = lowess(x, y, f=self.f, nsteps=self.nsteps, delta=self.delta)

        self.x_ = result.x
        self.y_hat_ = result.y
        self.residuals_ = result.residuals
        self.robustness_weights_ = result.robustness_weights
        self.n_passes_ = result.n_passes

        # tied abscissae share a fitted value
        x_unique, idx = np.unique(self.x_, return_index=True)
        if len(x_unique) >= 2:
            self._interpolator = interp1d(x_unique,
                                          self.y_hat_[idx],
                                          bounds_error=False,
                                          fill_value=np.nan,
                                          assume_sorted=True)
        else:
            self._interpolator = None
        return self

    def predict(self, x_new=None):
        """
        Predict the response at new predictor values.

        Parameters
        ----------
        x_new : np.ndarray, optional
            Points to predict at. If None, returns the fitted values at the
            (sorted) training points.

        Returns
        -------
        np.ndarray
            Predicted values; NaN outside the range of the training data.
        """
        if self.y_hat_ is None:
            raise ValueError("Model has not been fitted yet. Call fit(x, y) first.")

        if x_new is None:
            return self.y_hat_

        x_new = np.atleast_1d(np.asarray(x_new, dtype=float))
        if self._interpolator is None:
            y_pred = np.full(x_new.shape, np.nan)
            if len(self.x_):
                y_pred[x_new == self.x_[0]] = self.y_hat_[0]
            return y_pred
        return self._interpolator(x_new)
