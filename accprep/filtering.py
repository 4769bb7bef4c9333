# main libraries
import numbers
import numpy as np
from typing import Optional, Tuple
from scipy.signal import medfilt

# internal imports
from .errors import FilterConfigError


def validate_window_size(window_size, n_samples: Optional[int] = None) -> None:
    """
    Check a median filter window size.

    :param window_size: Number of samples in the window; positive and odd.
    :param n_samples: Number of rows the window slides over. When given,
        the window may not be longer.
    """
    if isinstance(window_size, bool) or not isinstance(window_size, numbers.Integral):
        raise FilterConfigError(window_size, "must be an integer")
    if window_size < 1:
        raise FilterConfigError(window_size, "must be positive")
    if window_size % 2 == 0:
        raise FilterConfigError(window_size, "must be odd")
    if n_samples is not None and window_size > n_samples:
        raise FilterConfigError(window_size, f"exceeds the number of samples ({n_samples})")


def median_filter_matrix(matrix: np.ndarray, window_size: int) -> np.ndarray:
    """
    Median filter each column of a (n_samples, n_trials) matrix.

    The value at row ``i`` is the median of rows ``i - (n-1)/2`` to
    ``i + (n-1)/2`` of the same column. Rows beyond either end count as
    zeros (zero padding, as MATLAB's medfilt1). ``window_size == 1`` returns
    an unchanged copy.

    :param matrix: 2-D array, time along axis 0.
    :param window_size: Odd window length, at most the number of rows.
    :return: Filtered matrix with the shape of ``matrix``.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim != 2:
        raise ValueError(f"Expected a 2-D (samples, trials) matrix, got shape {matrix.shape}")
    validate_window_size(window_size, matrix.shape[0])
    if window_size == 1:
        return matrix.copy()
    # window of 1 along the trial axis keeps columns independent
    return medfilt(matrix, kernel_size=[window_size, 1])


def filter_axis_matrices(
    x_set: np.ndarray,
    y_set: np.ndarray,
    z_set: np.ndarray,
    window_size: int,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Median filter the three axis matrices of a batch with the same window.

    The window is checked against the number of samples before any axis is
    filtered.
    """
    validate_window_size(window_size, np.shape(x_set)[0])
    return (
        median_filter_matrix(x_set, window_size),
        median_filter_matrix(y_set, window_size),
        median_filter_matrix(z_set, window_size),
    )
