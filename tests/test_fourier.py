"""Tests for centered Fourier utilities and numeric helpers."""

import numpy as np
import pytest

from holoaxial.math import (
    centered_fft2,
    centered_frequencies,
    complex_dtype,
    complex_sqrt,
    machine_epsilon,
    outer_sum,
)


class TestCenteredFrequencies:
    """Tests for centered_frequencies."""

    def test_even_length_spans_minus_pi_to_below_pi(self):
        """Even n runs from -pi in steps of 2*pi/n, stopping short of pi."""
        q = centered_frequencies(8)
        expected = -np.pi + 2 * np.pi * np.arange(8) / 8
        assert np.allclose(q, expected)
        assert q[0] == -np.pi
        assert q[-1] < np.pi

    def test_zero_frequency_at_center(self):
        """The zero frequency sits at index n // 2."""
        for n in (7, 8, 9, 16):
            q = centered_frequencies(n)
            assert q[n // 2] == 0.0

    def test_matches_fftshift_ordering(self):
        """Ordering matches fftshift of the FFT frequencies, odd n included."""
        for n in (5, 6):
            q = centered_frequencies(n)
            expected = 2 * np.pi * np.fft.fftshift(np.fft.fftfreq(n))
            assert np.array_equal(q, expected)

    def test_dtype(self):
        """Requested precision is honored."""
        assert centered_frequencies(4, np.float32).dtype == np.float32
        assert centered_frequencies(4).dtype == np.float64


class TestCenteredFFT2:
    """Tests for centered_fft2."""

    def test_dc_is_mean(self):
        """Forward normalization puts the mean at the central element."""
        rng = np.random.default_rng(0)
        a = rng.normal(size=(6, 10))
        spectrum = centered_fft2(a)
        assert np.isclose(spectrum[3, 5], a.mean())

    def test_sum_recovers_origin_sample(self):
        """Summing the spectrum is the inverse transform at the origin."""
        rng = np.random.default_rng(1)
        a = rng.normal(size=(8, 8))
        assert np.isclose(centered_fft2(a).sum(), a[0, 0])

    def test_single_precision_preserved(self):
        """float32 input gives a complex64 spectrum."""
        a = np.ones((4, 4), dtype=np.float32)
        assert centered_fft2(a).dtype == np.complex64


class TestOuterSum:
    """Tests for outer_sum."""

    def test_elementwise_definition(self):
        """Element (i, j) equals u[i] + v[j]."""
        u = np.array([1.0, 2.0, 3.0])
        v = np.array([10.0, 20.0])
        grid = outer_sum(u, v)
        assert grid.shape == (3, 2)
        for i in range(3):
            for j in range(2):
                assert grid[i, j] == u[i] + v[j]


class TestNumeric:
    """Tests for floating-point helpers."""

    def test_complex_sqrt_negative_is_imaginary(self):
        """Negative reals map to the positive imaginary axis, not NaN."""
        result = complex_sqrt(np.array([4.0, -4.0, 0.0]))
        assert np.allclose(result, [2.0, 2.0j, 0.0])
        assert not np.any(np.isnan(result))

    def test_complex_sqrt_principal_branch(self):
        """Real part of the result is never negative."""
        x = np.linspace(-5, 5, 41)
        assert np.all(complex_sqrt(x).real >= 0)

    def test_complex_sqrt_keeps_precision(self):
        """float32 input gives complex64 output."""
        x = np.array([-1.0, 1.0], dtype=np.float32)
        assert complex_sqrt(x).dtype == np.complex64
        assert complex_sqrt(np.array([-1, 1])).dtype == np.complex128

    def test_machine_epsilon(self):
        """Epsilon follows the requested precision."""
        assert machine_epsilon(np.float64) == np.finfo(np.float64).eps
        assert machine_epsilon(np.float32) == np.finfo(np.float32).eps

    def test_complex_dtype(self):
        """Real dtypes pair with complex dtypes of the same width."""
        assert complex_dtype(np.float32) == np.complex64
        assert complex_dtype(np.float64) == np.complex128
        with pytest.raises(TypeError):
            complex_dtype(np.int32)
