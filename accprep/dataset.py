# main libraries
import numpy as np
from typing import Callable, Optional, Tuple
from tqdm import tqdm

# internal imports
from .constants import TRIAL_PATTERN
from .errors import AlignmentError
from .loader import discover_trial_files, load_trial


def build_axis_matrices(
    folder: str,
    pattern: str = TRIAL_PATTERN,
    on_trial: Optional[Callable] = None,
    progress: bool = False,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, int]:
    """
    Read every trial of a folder and stack them into one matrix per axis.

    Column ``j`` of each matrix holds the ``j``-th trial in sorted file
    order. All trials must have the same number of samples as the first
    one, otherwise :class:`AlignmentError` is raised and nothing is returned.

    :param folder: Directory containing the trial files.
    :param pattern: Glob pattern identifying trial files.
    :param on_trial: Called as ``on_trial(index, path, trial_df)`` after each
        trial is decoded, in column order.
    :param progress: Show a tqdm progress bar over the files.

    :returns:
        x_set, y_set, z_set (np.ndarray): (n_samples, n_trials) accelerations in m/s².
        n_samples (int): Number of samples shared by all trials.
    """
    files = discover_trial_files(folder, pattern)
    x_set = y_set = z_set = None
    n_samples = None

    for j, path in enumerate(tqdm(files, desc="Trials", disable=not progress)):
        trial = load_trial(path)

        if n_samples is None:
            n_samples = len(trial)
            x_set = np.empty((n_samples, len(files)))
            y_set = np.empty((n_samples, len(files)))
            z_set = np.empty((n_samples, len(files)))
        elif len(trial) != n_samples:
            raise AlignmentError(path, len(trial), files[0], n_samples)

        x_set[:, j] = trial["x"].to_numpy()
        y_set[:, j] = trial["y"].to_numpy()
        z_set[:, j] = trial["z"].to_numpy()

        if on_trial is not None:
            on_trial(j, path, trial)

    return x_set, y_set, z_set, n_samples
