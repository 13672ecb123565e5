"""
Tests for Record rendering, buffer playback and block convolution.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import pytest
import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from funcsynth import (
    Record,
    FilterKernel,
    ConstantNode,
    LineNode,
    SineNode,
    ImpulseNode,
    MixNode,
    ErrorMode,
    set_error_mode,
    set_sample_rate,
    ConfigurationError,
    RenderError,
)


class TestRecordRendering:
    """Test Record.record()."""

    def test_constant_buffer(self):
        record = Record.record(ConstantNode(0.5), 100, 1.0)
        assert len(record) == 100
        assert record.sample_rate == 100
        assert_array_equal(record.samples, np.full(100, 0.5))

    def test_silent_outside_buffer(self):
        record = Record.record(ConstantNode(0.5), 100, 1.0)
        assert record.sample(0.0) == 0.5
        assert record.sample(0.999) == 0.5
        assert record.sample(-0.01) == 0.0
        assert record.sample(1.0) == 0.0
        assert record.sample(5.0) == 0.0

    def test_sample_i_at_i_over_rate(self):
        record = Record.record(LineNode(0.0, 1.0), 10, 1.0)
        t = np.arange(10) / 10.0
        assert_allclose(record.sample(t), t)

    def test_floor_lookup(self):
        record = Record.record(LineNode(0.0, 1.0), 10, 1.0)
        assert record.sample(0.35) == pytest.approx(0.3)

    def test_default_sample_rate(self):
        set_sample_rate(1000)
        record = Record.record(ConstantNode(1.0), duration=0.5)
        assert record.sample_rate == 1000
        assert len(record) == 500

    def test_duration(self):
        record = Record.record(ConstantNode(1.0), 8000, 0.25)
        assert record.duration == pytest.approx(0.25)

    def test_zero_duration(self):
        record = Record.record(ConstantNode(1.0), 100, 0.0)
        assert len(record) == 0
        assert record.sample(0.0) == 0.0

    def test_invalid_parameters(self):
        with pytest.raises(ConfigurationError):
            Record.record(ConstantNode(1.0), 0, 1.0)
        with pytest.raises(ConfigurationError):
            Record.record(ConstantNode(1.0), 100, -1.0)
        with pytest.raises(ConfigurationError):
            Record.record(ConstantNode(1.0), 100, 1.0, chunk_size=0)

    def test_threaded_matches_single(self):
        node = MixNode([(0.5, SineNode.sin(440.0)), (0.5, SineNode.sin(660.0))])
        single = Record.record(node, 8000, 1.0, chunk_size=1000)
        threaded = Record.record(node, 8000, 1.0, workers=4, chunk_size=1000)
        assert_array_equal(threaded.samples, single.samples)

    def test_chunking_does_not_change_result(self):
        node = SineNode.sin(3.0)
        a = Record.record(node, 1000, 1.0, chunk_size=7)
        b = Record.record(node, 1000, 1.0)
        assert_array_equal(a.samples, b.samples)

    def test_samples_read_only(self):
        record = Record.record(ConstantNode(1.0), 10, 1.0)
        with pytest.raises(ValueError):
            record.samples[0] = 2.0

    def test_from_samples_copies(self):
        data = np.array([1.0, 2.0, 3.0])
        record = Record.from_samples(data, 3)
        data[0] = 9.0
        assert record.sample(0.0) == 1.0

    def test_invalid_sample_rate(self):
        with pytest.raises(ConfigurationError):
            Record([1.0], 0)

    def test_record_is_a_node(self):
        record = Record.from_samples([1.0, 2.0], 2)
        mix = MixNode([(2.0, record)])
        assert mix.sample(0.5) == 4.0
        assert record.inputs() == []


class TestRecordConvolution:
    """Test Record.convolve()."""

    def setup_method(self):
        self.record = Record.record(SineNode.sin(440.0), 8000, 0.5)
        self.original = self.record.samples.copy()

    def test_unit_impulse_round_trip(self):
        self.record.convolve(FilterKernel([1.0]))
        assert len(self.record) == len(self.original)
        assert_allclose(self.record.samples, self.original, atol=1e-12)

    def test_recorded_impulse_kernel_round_trip(self):
        kernel = FilterKernel(Record.record(ImpulseNode(), 8000, 0.01).samples)
        assert len(kernel) == 80
        self.record.convolve(kernel)
        assert_allclose(self.record.samples, self.original, atol=1e-12)

    def test_bare_spectrum(self):
        spectrum = FilterKernel([1.0]).spectrum(64)
        self.record.convolve(spectrum)
        # 4000 samples padded up to a multiple of 64
        assert len(self.record) == 4032
        assert_allclose(self.record.samples[:4000], self.original, atol=1e-12)
        assert_allclose(self.record.samples[4000:], 0.0, atol=1e-12)

    def test_blocks_are_independent(self):
        # A one-sample delay wraps around inside each 4-sample block
        record = Record.from_samples([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0], 8)
        record.convolve(FilterKernel([0.0, 1.0]))
        assert_allclose(record.samples, [4.0, 1.0, 2.0, 3.0, 8.0, 5.0, 6.0, 7.0], atol=1e-12)

    def test_overlap_add_matches_linear_convolution(self):
        rng = np.random.default_rng(1234)
        x = rng.uniform(-1.0, 1.0, 1000)
        h = rng.uniform(-1.0, 1.0, 37)
        record = Record.from_samples(x, 1000)
        record.convolve(FilterKernel(h), overlap_add=True)
        assert_allclose(record.samples, np.convolve(x, h), atol=1e-10)

    def test_overlap_add_short_buffer(self):
        record = Record.from_samples([1.0, 2.0], 2)
        record.convolve(FilterKernel([1.0, 1.0, 1.0]), overlap_add=True)
        assert_allclose(record.samples, [1.0, 3.0, 3.0, 2.0], atol=1e-12)

    def test_apply_filter_alias(self):
        self.record.apply_filter(FilterKernel([0.5]))
        assert_allclose(self.record.samples, 0.5 * self.original, atol=1e-12)

    def test_spectrum_too_short(self):
        with pytest.raises(RenderError):
            self.record.convolve(np.array([1.0 + 0.0j]))

    def test_render_errors_fatal_in_lenient_mode(self):
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(RenderError):
            self.record.convolve(np.array([1.0 + 0.0j]))

    def test_overlap_add_needs_kernel(self):
        with pytest.raises(RenderError):
            self.record.convolve(FilterKernel([1.0]).spectrum(), overlap_add=True)

    def test_convolved_record_still_samples(self):
        self.record.convolve(FilterKernel([1.0]))
        assert self.record.sample(1.0 / 8000) == pytest.approx(self.original[1])
