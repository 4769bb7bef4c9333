# main libraries
import numpy as np
from typing import Dict, Sequence, Tuple

# internal imports
from .constants import FS, SPECTRUM_ORDERS
from .filtering import median_filter_matrix


def next_pow2(n: int) -> int:
    """Smallest power of two greater than or equal to ``n`` (1 for n <= 1)."""
    return 1 if n <= 1 else 1 << (int(n) - 1).bit_length()


def filter_order_spectra(
    noisy: np.ndarray,
    orders: Sequence[int] = SPECTRUM_ORDERS,
    fs: float = FS,
) -> Tuple[np.ndarray, Dict[int, np.ndarray]]:
    """
    Compare the amplitude spectra of a signal median filtered with several orders.

    Order 1 stands for the unfiltered signal. Each column of ``noisy`` is
    zero-padded to the next power of two before the FFT and only the first
    half of the spectrum is kept.

    :param noisy: (n_samples, n_trials) matrix, or a 1-D signal.
    :param orders: Median filter window sizes to compare.
    :param fs: Sampling frequency in Hz.

    :returns:
        freqs (np.ndarray): Frequencies in Hz, length nfft // 2.
        spectra (dict): order -> (nfft // 2, n_trials) array of 2*|FFT|.
            Orders longer than the signal are left out.
    """
    noisy = np.asarray(noisy, dtype=np.float64)
    if noisy.ndim == 1:
        noisy = noisy[:, np.newaxis]
    n_samples = noisy.shape[0]
    nfft = next_pow2(n_samples)
    half = nfft // 2
    freqs = fs / 2 * np.linspace(0, 1, half)

    spectra = {}
    for n in orders:
        if n > n_samples:
            print(f"Warning: skipping filter order {n}, longer than the {n_samples} samples.")
            continue
        filtered = median_filter_matrix(noisy, n)
        spectra[n] = 2 * np.abs(np.fft.fft(filtered, n=nfft, axis=0)[:half])
    return freqs, spectra
