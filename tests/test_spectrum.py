import numpy as np
import pytest

from accprep.spectrum import filter_order_spectra, next_pow2


@pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (2, 2), (5, 8), (8, 8), (100, 128)])
def test_next_pow2(n, expected):
    assert next_pow2(n) == expected


def test_spectra_shapes_and_frequencies():
    rng = np.random.default_rng(0)
    noisy = rng.normal(size=(20, 2))

    freqs, spectra = filter_order_spectra(noisy, orders=(1, 3, 5), fs=32)

    assert len(freqs) == 16
    assert freqs[0] == 0.0
    assert freqs[-1] == pytest.approx(16.0)
    assert sorted(spectra) == [1, 3, 5]
    for amp in spectra.values():
        assert amp.shape == (16, 2)


def test_order_one_is_the_raw_spectrum():
    noisy = np.sin(np.linspace(0, 8 * np.pi, 30))[:, np.newaxis]

    _, spectra = filter_order_spectra(noisy, orders=(1,))

    expected = 2 * np.abs(np.fft.fft(noisy, n=32, axis=0)[:16])
    np.testing.assert_allclose(spectra[1], expected)


def test_orders_longer_than_signal_are_skipped(capsys):
    _, spectra = filter_order_spectra(np.ones((4, 1)), orders=(1, 3, 5, 7))

    assert sorted(spectra) == [1, 3]
    assert "skipping filter order 5" in capsys.readouterr().out


def test_one_dimensional_signal():
    freqs, spectra = filter_order_spectra(np.ones(8), orders=(3,))

    assert spectra[3].shape == (4, 1)
