import numpy as np
import pytest
from sklearn.base import clone
from robust_lowess import LowessSmoother, lowess


def test_fit_predict():
    rng = np.random.default_rng(0)
    n = 100
    x = rng.uniform(0, 10, n)
    y = np.sin(x) + rng.normal(0, 0.2, n)

    smoother = LowessSmoother(f=0.3)
    assert smoother.fit(x, y) is smoother

    expected = lowess(x, y, f=0.3)
    np.testing.assert_allclose(smoother.predict(), expected.y)
    np.testing.assert_allclose(smoother.x_, expected.x)
    np.testing.assert_allclose(smoother.residuals_, expected.residuals)
    assert smoother.n_passes_ == 4

    # predictions at the training points reproduce the fitted values
    np.testing.assert_allclose(smoother.predict(smoother.x_), smoother.y_hat_)

    x_new = np.linspace(smoother.x_[0], smoother.x_[-1], 50)
    y_pred = smoother.predict(x_new)
    assert y_pred.shape == x_new.shape
    np.testing.assert_allclose(y_pred, np.interp(x_new, smoother.x_, smoother.y_hat_))


def test_predict_out_of_range():
    x = np.linspace(0, 1, 20)
    smoother = LowessSmoother(nsteps=0).fit(x, 2 * x)
    y_pred = smoother.predict([-0.5, 0.5, 1.5])
    assert np.isnan(y_pred[0]) and np.isnan(y_pred[2])
    np.testing.assert_allclose(y_pred[1], 1.0)


def test_predict_scalar():
    x = np.linspace(0, 10, 20)
    smoother = LowessSmoother(f=0.5).fit(x, np.sin(x))
    pred = smoother.predict(5.0)
    assert pred.shape == (1,)
    assert not np.isnan(pred[0])


def test_predict_with_ties():
    x, y = np.array([1., 1., 2., 3.]), np.array([1., 3., 5., 7.])
    smoother = LowessSmoother(f=0.5, nsteps=0, delta=0).fit(x, y)
    np.testing.assert_allclose(smoother.predict([1., 1.5, 3.]), [2., 3.5, 7.])


def test_single_abscissa():
    smoother = LowessSmoother().fit([2., 2., 2.], [1., 2., 3.])
    pred = smoother.predict([2., 3.])
    assert not np.isnan(pred[0])
    assert np.isnan(pred[1])


def test_not_fitted():
    with pytest.raises(ValueError):
        LowessSmoother().predict([1.])


def test_sklearn_params():
    smoother = LowessSmoother(f=0.4, nsteps=1, delta=0.5)
    assert smoother.get_params() == dict(f=0.4, nsteps=1, delta=0.5)

    other = clone(smoother).set_params(nsteps=2)
    assert other.nsteps == 2
    assert other.y_hat_ is None
