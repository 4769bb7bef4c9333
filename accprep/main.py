# main libraries
from typing import Dict, List, Optional, Tuple
import argparse
import os
import numpy as np
import pandas as pd

# internal libraries
from .constants import (ACC_COLUMNS, BATCH_PLOT_LIMIT, DEFAULT_WINDOW, FS,
                        SPECTRUM_ORDERS, TRIAL_PATTERN, TRIAL_PLOT_LIMIT)
from .dataset import build_axis_matrices
from .filtering import filter_axis_matrices, validate_window_size
from .spectrum import filter_order_spectra
from .viz import NullSink, PlotSink, export_report_to_pdf


def _safe_emit(sink, title: str, series: Dict[str, np.ndarray], **kwargs) -> None:
    # diagnostics never abort the pipeline
    try:
        sink.emit(title, series, **kwargs)
    except Exception as e:
        print(f"Warning: diagnostics sink failed on '{title}': {e}")


def _emit_spectra(sink, noisy_x: np.ndarray) -> None:
    try:
        freqs, spectra = filter_order_spectra(noisy_x, SPECTRUM_ORDERS, fs=FS)
    except Exception as e:
        print(f"Warning: could not compute filter spectra: {e}")
        return
    series = {("NO filtering" if n == 1 else f"filter n = {n}"): amp for n, amp in spectra.items()}
    _safe_emit(
        sink,
        "Power spectra of filtered acceleration data",
        series,
        xvalues=freqs,
        overlay=True,
        xlabel="frequency [Hz]",
        ylabel="amplitude",
    )


def process(
    directory: str,
    window_size: int = DEFAULT_WINDOW,
    emit_diagnostics: bool = False,
    sink=None,
    pattern: str = TRIAL_PATTERN,
    progress: bool = False,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, int]:
    """
    Read the trials of a folder, convert them to m/s² and median filter them.

    :param directory: Folder containing the sensing device output files.
    :param window_size: Odd median filter window, at most the number of samples.
    :param emit_diagnostics: Send every trial, the noisy and filtered batch and
        the filter-order spectra of the x axis to ``sink``.
    :param sink: Object with an ``emit(title, series, **kwargs)`` method.
        Defaults to a :class:`NullSink`.
    :param pattern: Glob pattern identifying trial files.
    :param progress: Show a progress bar while reading files.

    :return: (x_set, y_set, z_set, n_samples); each set is a
        (n_samples, n_trials) matrix, one column per trial in file name order.
    """
    validate_window_size(window_size)
    if sink is None:
        sink = NullSink()

    on_trial = None
    if emit_diagnostics:
        def on_trial(j, path, trial):
            _safe_emit(
                sink,
                f"Trial {j + 1} - Noisy accelerations",
                {axis: trial[axis].to_numpy() for axis in ACC_COLUMNS},
                ylim=TRIAL_PLOT_LIMIT,
            )

    noisy_x, noisy_y, noisy_z, n_samples = build_axis_matrices(
        directory, pattern=pattern, on_trial=on_trial, progress=progress
    )
    x_set, y_set, z_set = filter_axis_matrices(noisy_x, noisy_y, noisy_z, window_size)

    if emit_diagnostics:
        _safe_emit(sink, "Noisy modeling dataset",
                   {"x": noisy_x, "y": noisy_y, "z": noisy_z}, ylim=BATCH_PLOT_LIMIT)
        _safe_emit(sink, "Filtered modeling dataset",
                   {"x": x_set, "y": y_set, "z": z_set}, ylim=BATCH_PLOT_LIMIT)
        _emit_spectra(sink, noisy_x)

    return x_set, y_set, z_set, n_samples


def export_axis_matrices(outdir: str, x_set: np.ndarray, y_set: np.ndarray, z_set: np.ndarray) -> List[str]:
    """
    Save the three axis matrices as CSV files (one column per trial).

    :param outdir: Output directory, created if missing.
    :return: Paths of x_set.csv, y_set.csv and z_set.csv.
    """
    os.makedirs(outdir, exist_ok=True)
    paths = []
    for axis, matrix in zip(ACC_COLUMNS, (x_set, y_set, z_set)):
        path = os.path.join(outdir, f"{axis}_set.csv")
        pd.DataFrame(matrix).to_csv(path, index=False, header=False)
        paths.append(path)
    print(f"✓ Matrices saved  →  {outdir}")
    return paths


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Convert and median filter a folder of accelerometer trials."
    )
    parser.add_argument("folder", help="directory containing the trial files")
    parser.add_argument("--window", type=int, default=DEFAULT_WINDOW, help="median filter window size (odd)")
    parser.add_argument("--pattern", default=TRIAL_PATTERN, help="glob pattern of trial files")
    parser.add_argument("--outdir", default="output", help="where matrices and plots are written")
    parser.add_argument("--plots", action="store_true", help="save diagnostic plots and a PDF report")
    args = parser.parse_args(argv)

    sink = PlotSink(os.path.join(args.outdir, "plots"), prefix="accprep") if args.plots else None
    x_set, y_set, z_set, n_samples = process(
        args.folder,
        window_size=args.window,
        emit_diagnostics=args.plots,
        sink=sink,
        pattern=args.pattern,
        progress=True,
    )
    print(f"Processed {x_set.shape[1]} trial(s) of {n_samples} samples (window {args.window}).")
    export_axis_matrices(args.outdir, x_set, y_set, z_set)
    if sink is not None:
        pdf = export_report_to_pdf(sink.outdir, sink.prefix, png_files=sink.saved)
        if pdf:
            print(f"✓ Report saved  →  {pdf}")


if __name__ == "__main__":
    main()
