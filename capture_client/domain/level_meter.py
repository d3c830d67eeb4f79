"""Frequency-domain level meter for live capture feedback."""

import numpy as np

FFT_SIZE = 256
BAR_COUNT = 5
BIN_STRIDE = 10
MIN_BAR_HEIGHT = 10.0
MAX_BAR_HEIGHT = 30.0
# Decibel window mapped onto 0..255, matching a browser AnalyserNode.
MIN_DECIBELS = -100.0
MAX_DECIBELS = -30.0


def frequency_levels(samples: np.ndarray) -> np.ndarray:
    """
    Computes byte-scaled magnitudes for the most recent FFT_SIZE samples.

    Integer PCM is scaled to [-1, 1]. Shorter inputs are zero-padded.

    Returns:
        uint8 array of FFT_SIZE // 2 frequency bins.
    """
    signal = np.asarray(samples)
    if np.issubdtype(signal.dtype, np.integer):
        signal = signal.astype(np.float64) / np.iinfo(signal.dtype).max
    signal = signal.astype(np.float64).ravel()[-FFT_SIZE:]
    if signal.size < FFT_SIZE:
        signal = np.pad(signal, (FFT_SIZE - signal.size, 0))

    spectrum = np.abs(np.fft.rfft(signal * np.blackman(FFT_SIZE)))[: FFT_SIZE // 2]
    decibels = 20 * np.log10(spectrum / FFT_SIZE + 1e-12)
    scaled = (decibels - MIN_DECIBELS) / (MAX_DECIBELS - MIN_DECIBELS) * 255
    return np.clip(scaled, 0, 255).astype(np.uint8)


def bar_heights(samples: np.ndarray, bar_count: int = BAR_COUNT) -> list[float]:
    """Maps levels at every BIN_STRIDE-th bin to bar heights in [10, 30]."""
    levels = frequency_levels(samples)
    heights = []
    for index in range(bar_count):
        bin_index = index * BIN_STRIDE
        value = int(levels[bin_index]) if bin_index < levels.size else 0
        heights.append(max(MIN_BAR_HEIGHT, value / 255 * MAX_BAR_HEIGHT))
    return heights
