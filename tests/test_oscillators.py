"""
Tests for SineNode and the sawtooth, square and triangle oscillators.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import pytest
import numpy as np
from numpy.testing import assert_allclose

from funcsynth import (
    SineNode,
    SawtoothNode,
    SquareNode,
    TriangleNode,
    LineNode,
)


class TestSineNode:
    """Test SineNode sampling and its closed-form integral."""

    def test_sin_and_cos(self):
        assert SineNode.sin(1.0).sample(0.0) == pytest.approx(0.0)
        assert SineNode.sin(1.0).sample(0.25) == pytest.approx(1.0)
        assert SineNode.cos(1.0).sample(0.0) == pytest.approx(1.0)

    def test_properties(self):
        node = SineNode(440.0, 0.5)
        assert node.frequency == 440.0
        assert node.phase == 0.5

    def test_bounded(self):
        t = np.linspace(0.0, 1.0, 10001)
        values = SineNode.sin(440.0).sample(t)
        assert np.all(np.abs(values) <= 1.0)

    @pytest.mark.parametrize("phase", [0.0, 0.7, np.pi / 2.0])
    def test_integral_zero_at_origin(self, phase):
        assert SineNode(3.0, phase).integral().sample(0.0) == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("phase", [0.0, 0.7, np.pi / 2.0])
    def test_integral_derivative_matches_sample(self, phase):
        node = SineNode(3.0, phase)
        integral = node.integral()
        t = np.linspace(0.0, 2.0, 101)
        h = 1e-6
        derivative = (integral.sample(t + h) - integral.sample(t - h)) / (2.0 * h)
        assert_allclose(derivative, node.sample(t), atol=1e-6)

    def test_integral_closed_form(self):
        f = 2.0
        t = 0.3
        expected = (1.0 - np.cos(2.0 * np.pi * f * t)) / (2.0 * np.pi * f)
        assert SineNode.sin(f).integral().sample(t) == pytest.approx(expected)

    def test_zero_frequency_integral_is_line(self):
        integral = SineNode(0.0, np.pi / 2.0).integral()
        assert isinstance(integral, LineNode)
        assert integral.sample(0.0) == 0.0
        assert integral.sample(2.0) == pytest.approx(2.0)

    def test_zero_frequency_sine_integral_is_zero(self):
        integral = SineNode.sin(0.0).integral()
        assert integral.sample(5.0) == pytest.approx(0.0)


class TestSawtoothNode:
    """Test SawtoothNode."""

    def test_shape(self):
        node = SawtoothNode(1.0)
        assert node.sample(0.0) == pytest.approx(-1.0)
        assert node.sample(0.25) == pytest.approx(-0.5)
        assert node.sample(0.5) == pytest.approx(0.0)
        assert node.sample(1.25) == pytest.approx(-0.5)

    def test_range(self):
        values = SawtoothNode(7.0).sample(np.linspace(-1.0, 1.0, 1001))
        assert np.all(values >= -1.0)
        assert np.all(values < 1.0)


class TestSquareNode:
    """Test SquareNode."""

    def test_square(self):
        node = SquareNode(1.0)
        assert node.sample(0.25) == 1.0
        assert node.sample(0.75) == -1.0

    def test_pulse_width(self):
        node = SquareNode(1.0, pulse_width=0.25)
        assert node.pulse_width == 0.25
        assert node.sample(0.1) == 1.0
        assert node.sample(0.3) == -1.0

    def test_invalid_pulse_width(self):
        with pytest.raises(ValueError):
            SquareNode(1.0, pulse_width=1.5)


class TestTriangleNode:
    """Test TriangleNode."""

    def test_shape(self):
        node = TriangleNode(1.0)
        assert node.sample(0.0) == pytest.approx(-1.0)
        assert node.sample(0.25) == pytest.approx(0.0)
        assert node.sample(0.5) == pytest.approx(1.0)
        assert node.sample(0.75) == pytest.approx(0.0)
        assert node.sample(1.0) == pytest.approx(-1.0)
