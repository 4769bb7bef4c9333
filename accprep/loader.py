# main libraries
import os, glob
import numpy as np
import pandas as pd
from typing import List

# internal imports
from .adc_a import adc_to_acceleration
from .constants import ACC_COLUMNS, ADC_RANGE, TRIAL_PATTERN
from .errors import TrialFormatError

INT_TOKEN = r"[+-]?\d+"


# -----------------------------------------------------------------
def discover_trial_files(folder: str, pattern: str = TRIAL_PATTERN) -> List[str]:
    """
    Find the trial files of a folder.

    Files are returned sorted by name, which fixes the column each trial
    takes in the axis matrices.

    :param folder: Directory containing the sensing device output files.
    :param pattern: Glob pattern identifying trial files.
    :return: Sorted list of trial file paths.
    """
    if not os.path.exists(folder):
        raise FileNotFoundError(f"Trial folder not found: {folder}")
    if not os.path.isdir(folder):
        raise NotADirectoryError(f"Not a directory: {folder}")

    files = sorted(f for f in glob.glob(os.path.join(folder, pattern)) if os.path.isfile(f))
    if not files:
        raise FileNotFoundError(f"No trial files matching '{pattern}' in {folder}")
    print(f"Found {len(files)} trial file(s) in {folder}")
    return files


# -----------------------------------------------------------------
def read_trial_file(path: str) -> pd.DataFrame:
    """
    Read the raw ADC codes of one trial file.

    Each record is a line holding three integers separated by tabs or
    spaces. Blank lines are ignored, so record numbers count non-blank
    lines only.

    :param path: Path to the trial file.
    :return: DataFrame with int64 columns x, y, z, one row per record.
    """
    if os.path.getsize(path) == 0:
        print(f"Warning: {path} is empty.")
        return pd.DataFrame(columns=ACC_COLUMNS, dtype=np.int64)
    try:
        df = pd.read_csv(path, sep=r"\s+", header=None, dtype=str)
    except pd.errors.EmptyDataError:
        print(f"Warning: {path} has no records.")
        return pd.DataFrame(columns=ACC_COLUMNS, dtype=np.int64)
    except pd.errors.ParserError as e:
        # pandas reports physical lines, counted from its first-row width
        record, n_fields = find_bad_record(path)
        raise TrialFormatError(path, record, f"expected 3 fields per record, saw {n_fields}") from e

    if df.shape[1] != len(ACC_COLUMNS):
        record, n_fields = find_bad_record(path)
        raise TrialFormatError(path, record, f"expected 3 fields per record, saw {n_fields}")

    is_int = df.apply(lambda col: col.str.fullmatch(INT_TOKEN, na=False))
    bad_rows = np.flatnonzero(~is_int.all(axis=1).to_numpy(dtype=bool))
    if len(bad_rows) > 0:
        row = bad_rows[0]
        tokens = " ".join(df.iloc[row].dropna())
        raise TrialFormatError(path, int(row) + 1, f"expected 3 integers, got '{tokens}'")

    values = df.to_numpy(dtype=str)
    try:
        codes = values.astype(np.int64)
    except (OverflowError, ValueError):
        for row, tokens in enumerate(values):
            try:
                tokens.astype(np.int64)
            except (OverflowError, ValueError) as e:
                raise TrialFormatError(
                    path, row + 1, f"integer out of range in '{' '.join(tokens)}'"
                ) from e
        raise
    return pd.DataFrame(codes, columns=ACC_COLUMNS)


# -----------------------------------------------------------------
def find_bad_record(path: str) -> tuple:
    """
    Locate the first record of a trial file without exactly three fields.

    :param path: Path to the trial file.
    :return: (record, n_fields) with a 1-based record number counting
        non-blank lines, or (None, None) when every record has three fields.
    """
    with open(path) as fh:
        records = (line.split() for line in fh if line.strip())
        for record, fields in enumerate(records, start=1):
            if len(fields) != len(ACC_COLUMNS):
                return record, len(fields)
    return None, None


# -----------------------------------------------------------------
def detect_out_of_range(data: np.ndarray, expected_range: tuple) -> tuple[float, int, np.ndarray]:
    """
    Detect raw codes that fall outside the device range.

    :param data: Raw codes, any shape.
    :param expected_range: Tuple specifying the valid (min, max) codes.

    :returns:
        - out_of_range_fraction (float): Fraction of codes outside the range.
        - n_out_of_range (int): Number of out-of-range codes.
        - out_of_range_mask (np.ndarray): Boolean mask marking out-of-range codes.
    """
    data = np.asarray(data)
    if data.size == 0:
        return float('nan'), 0, np.zeros(data.shape, dtype=bool)
    out_of_range_mask = (data < expected_range[0]) | (data > expected_range[1])
    n_out_of_range = int(out_of_range_mask.sum())
    return n_out_of_range / data.size, n_out_of_range, out_of_range_mask


# -----------------------------------------------------------------
def load_trial(path: str) -> pd.DataFrame:
    """
    Load a trial file, converting ADC codes to m/s².

    Codes outside the device range are reported and converted unclamped.

    :param path: Path to the trial file.
    :return: DataFrame with float columns x, y, z in m/s².
    """
    raw = read_trial_file(path)
    frac, n_out, _ = detect_out_of_range(raw.to_numpy(), ADC_RANGE)
    if n_out > 0:
        print(f"Warning: {path} has {n_out} code(s) outside {ADC_RANGE} ({frac:.4f} of values).")
    return adc_to_acceleration(raw.astype(float))
