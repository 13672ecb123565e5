"""
Tests for FilterKernel and the kernel file cache.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import pytest
import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from funcsynth import (
    FilterKernel,
    load_kernel,
    clear_kernel_cache,
    ConfigurationError,
    ResourceError,
)


def _pcm16(values):
    return np.array(values, dtype="<i2").tobytes()


class TestFilterKernel:
    """Test FilterKernel construction and spectra."""

    def test_samples(self):
        kernel = FilterKernel([1.0, 0.5], name="test")
        assert len(kernel) == 2
        assert kernel.name == "test"
        assert_array_equal(kernel.samples, [1.0, 0.5])

    def test_samples_read_only(self):
        kernel = FilterKernel([1.0, 0.5])
        with pytest.raises(ValueError):
            kernel.samples[0] = 0.0

    def test_empty_rejected(self):
        with pytest.raises(ConfigurationError):
            FilterKernel([])

    def test_default_block_size(self):
        kernel = FilterKernel(np.ones(10))
        assert kernel.block_size == 20
        assert len(kernel.spectrum()) == 11

    def test_unit_impulse_spectrum(self):
        assert_allclose(FilterKernel([1.0]).spectrum(8), np.ones(5))

    def test_spectrum_cached(self):
        kernel = FilterKernel([1.0, 0.5, 0.25])
        assert kernel.spectrum() is kernel.spectrum()
        assert kernel.spectrum(16) is kernel.spectrum(16)
        assert kernel.spectrum(16) is not kernel.spectrum()

    def test_invalid_block_size(self):
        kernel = FilterKernel(np.ones(4))
        with pytest.raises(ConfigurationError):
            kernel.spectrum(7)
        with pytest.raises(ConfigurationError):
            kernel.spectrum(2)


class TestPcm16Decoding:
    """Test decoding kernels from raw 16-bit PCM."""

    def test_from_bytes(self):
        kernel = FilterKernel.from_pcm16_bytes(_pcm16([32767, -32767, 0, 16384]))
        assert_allclose(kernel.samples, [1.0, -1.0, 0.0, 16384 / 32767])

    def test_odd_length_rejected(self):
        with pytest.raises(ResourceError):
            FilterKernel.from_pcm16_bytes(_pcm16([1, 2])[:-1])

    def test_empty_rejected(self):
        with pytest.raises(ResourceError):
            FilterKernel.from_pcm16_bytes(b"")

    def test_from_file(self, tmp_path):
        path = tmp_path / "ir.raw"
        path.write_bytes(_pcm16([32767, 0, -32767]))
        kernel = FilterKernel.from_pcm16_file(path)
        assert_allclose(kernel.samples, [1.0, 0.0, -1.0])
        assert kernel.name == str(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ResourceError):
            FilterKernel.from_pcm16_file(tmp_path / "missing.raw")

    def test_truncated_file(self, tmp_path):
        path = tmp_path / "truncated.raw"
        path.write_bytes(_pcm16([100, 200, 300])[:-1])
        with pytest.raises(ResourceError):
            FilterKernel.from_pcm16_file(path)

    def test_resource_error_is_os_error(self, tmp_path):
        with pytest.raises(OSError):
            FilterKernel.from_pcm16_file(tmp_path / "missing.raw")


class TestKernelCache:
    """Test load_kernel() caching."""

    def test_cached_per_path(self, tmp_path):
        path = tmp_path / "ir.raw"
        path.write_bytes(_pcm16([32767, 16384]))
        first = load_kernel(path)
        assert load_kernel(path) is first
        assert load_kernel(str(path)) is first

    def test_equivalent_paths_share_entry(self, tmp_path):
        (tmp_path / "sub").mkdir()
        path = tmp_path / "ir.raw"
        path.write_bytes(_pcm16([32767]))
        assert load_kernel(tmp_path / "sub" / ".." / "ir.raw") is load_kernel(path)

    def test_cache_survives_file_change(self, tmp_path):
        path = tmp_path / "ir.raw"
        path.write_bytes(_pcm16([32767]))
        first = load_kernel(path)
        path.write_bytes(_pcm16([0, 0]))
        assert len(load_kernel(path)) == len(first) == 1

    def test_clear(self, tmp_path):
        path = tmp_path / "ir.raw"
        path.write_bytes(_pcm16([32767]))
        first = load_kernel(path)
        clear_kernel_cache()
        assert load_kernel(path) is not first

    def test_missing_file_not_cached(self, tmp_path):
        path = tmp_path / "late.raw"
        with pytest.raises(ResourceError):
            load_kernel(path)
        path.write_bytes(_pcm16([32767]))
        assert len(load_kernel(path)) == 1
