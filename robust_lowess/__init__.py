from .lowess import lowess, clowess, LowessResult
from .fitter import local_fit
from .select import partial_sort
from .estimator import LowessSmoother
