"""
Tests for MixNode, GainNode, ShiftNode, DelayNode, GateNode and RangeNode.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import pytest
import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from funcsynth import (
    ConstantNode,
    LineNode,
    SineNode,
    ImpulseNode,
    MixNode,
    GainNode,
    ShiftNode,
    DelayNode,
    GateNode,
    RangeNode,
    ConfigurationError,
)


class TestMixNode:
    """Test MixNode sums, unison and event placement."""

    def test_weighted_sum(self):
        mix = MixNode([(2.0, ConstantNode(1.0)), (3.0, LineNode(0.0, 1.0))])
        assert mix.sample(2.0) == pytest.approx(8.0)
        assert len(mix) == 2

    def test_empty_mix_is_zero(self):
        assert_array_equal(MixNode([]).sample(np.array([0.0, 1.0])), [0.0, 0.0])

    def test_inputs_and_items(self):
        a = ConstantNode(1.0)
        b = ConstantNode(2.0)
        mix = MixNode([(0.5, a), (0.25, b)])
        assert mix.inputs() == [a, b]
        assert mix.items == [(0.5, a), (0.25, b)]

    def test_integral_linearity(self):
        a = ConstantNode(1.0)
        b = SineNode.sin(3.0)
        mix = MixNode([(2.0, a), (3.0, b)])
        t = np.linspace(0.0, 1.0, 11)
        expected = 2.0 * a.integral().sample(t) + 3.0 * b.integral().sample(t)
        assert_allclose(mix.integral().sample(t), expected)

    def test_unison_frequencies(self):
        mix = MixNode.unison(100.0, 3, SineNode.sin)
        assert [node.frequency for node in mix.inputs()] == [50.0, 100.0, 200.0]
        assert all(gain == 1.0 for gain, _ in mix.items)

    def test_unison_seven(self):
        mix = MixNode.unison(440.0, 7, SineNode.sin)
        assert len(mix) == 7
        assert mix.inputs()[0].frequency == pytest.approx(55.0)
        assert mix.inputs()[-1].frequency == pytest.approx(3520.0)

    @pytest.mark.parametrize("count", [0, 2, 4, -1])
    def test_unison_rejects_even_or_non_positive(self, count):
        with pytest.raises(ConfigurationError):
            MixNode.unison(440.0, count, SineNode.sin)

    def test_from_events_places_nodes(self):
        mix = MixNode.from_events([(0.5, ImpulseNode()), (2.0, ImpulseNode())])
        assert mix.sample(0.0) == 0.0
        assert mix.sample(0.5) == 1.0
        assert mix.sample(2.0) == 1.0
        assert all(isinstance(node, ShiftNode) for node in mix.inputs())


class TestGainNode:
    """Test GainNode."""

    def test_sample(self):
        node = GainNode(ConstantNode(2.0), 3.0)
        assert node.gain == 3.0
        assert node.sample(1.0) == 6.0

    def test_default_gain(self):
        assert GainNode(ConstantNode(2.0)).gain == 1.0

    def test_inputs(self):
        source = ConstantNode(1.0)
        assert GainNode(source, 0.5).inputs() == [source]

    def test_integral(self):
        integral = GainNode(ConstantNode(2.0), 3.0).integral()
        assert integral.sample(0.0) == 0.0
        assert integral.sample(2.0) == pytest.approx(12.0)


class TestShiftNode:
    """Test ShiftNode and DelayNode."""

    def test_shift_advances(self):
        assert ShiftNode(LineNode(0.0, 1.0), 2.0).sample(1.0) == 3.0

    def test_delay_postpones(self):
        assert DelayNode(LineNode(0.0, 1.0), 2.0).sample(3.0) == 1.0

    def test_negative_shift_is_delay(self):
        t = np.linspace(-1.0, 3.0, 9)
        source = SineNode.sin(2.0)
        assert_allclose(
            ShiftNode(source, -0.5).sample(t),
            DelayNode(source.clone(), 0.5).sample(t),
        )

    def test_shift_integral(self):
        integral = ShiftNode(LineNode(0.0, 1.0), 2.0).integral()
        assert integral.sample(0.0) == pytest.approx(0.0)
        # integral of (s + 2) from 0 to 1
        assert integral.sample(1.0) == pytest.approx(2.5)

    def test_delay_integral(self):
        integral = DelayNode(LineNode(0.0, 1.0), 2.0).integral()
        assert integral.sample(0.0) == pytest.approx(0.0)
        # integral of (s - 2) from 0 to 1
        assert integral.sample(1.0) == pytest.approx(-1.5)

    def test_properties(self):
        source = ConstantNode(1.0)
        assert ShiftNode(source, 1.5).offset == 1.5
        assert DelayNode(source.clone(), 0.5).delay == 0.5
        assert ShiftNode(source, 1.5).inputs() == [source]


class TestGateNode:
    """Test GateNode."""

    def test_half_open_interval(self):
        gate = GateNode(ConstantNode(1.0), 1.0, 2.0)
        assert gate.sample(0.999) == 0.0
        assert gate.sample(1.0) == 1.0
        assert gate.sample(1.999) == 1.0
        assert gate.sample(2.0) == 0.0

    def test_start_after_end_rejected(self):
        with pytest.raises(ConfigurationError):
            GateNode(ConstantNode(1.0), 2.0, 1.0)

    def test_empty_interval_is_silent(self):
        gate = GateNode(ConstantNode(1.0), 1.0, 1.0)
        assert gate.sample(1.0) == 0.0

    def test_idempotent(self):
        source = SineNode.sin(3.0)
        once = GateNode(source, 0.2, 0.7)
        twice = GateNode(GateNode(source.clone(), 0.2, 0.7), 0.2, 0.7)
        t = np.linspace(-1.0, 2.0, 301)
        assert_array_equal(once.sample(t), twice.sample(t))

    def test_integral_rezeroed_at_start(self):
        integral = GateNode(ConstantNode(1.0), 1.0, 2.0).integral()
        assert integral.sample(0.0) == 0.0
        assert integral.sample(1.0) == pytest.approx(0.0)
        assert integral.sample(1.5) == pytest.approx(0.5)
        assert integral.sample(2.5) == 0.0

    def test_adjacent_gates_never_overlap(self):
        mix = MixNode([
            (1.0, GateNode(ConstantNode(1.0), 0.0, 1.0)),
            (1.0, GateNode(ConstantNode(1.0), 1.0, 2.0)),
        ])
        t = np.linspace(0.0, 1.99, 200)
        assert_array_equal(mix.sample(t), np.ones_like(t))


class TestRangeNode:
    """Test RangeNode."""

    @pytest.mark.parametrize("x, expected", [(-1.0, 2.0), (0.0, 3.0), (1.0, 4.0)])
    def test_maps_onto_range(self, x, expected):
        assert RangeNode(ConstantNode(x), 2.0, 4.0).sample(0.0) == pytest.approx(expected)

    def test_integral_of_constant_source(self):
        # (x + 1) / 2 * 2 + 2 = 3 for x = 0, so the integral is 3t
        integral = RangeNode(ConstantNode(0.0), 2.0, 4.0).integral()
        assert integral.sample(0.0) == 0.0
        assert integral.sample(2.0) == pytest.approx(6.0)

    def test_integral_derivative_matches_sample(self):
        node = RangeNode(SineNode.sin(5.0), 1.05, 1.10)
        integral = node.integral()
        t = np.linspace(0.0, 1.0, 51)
        h = 1e-6
        derivative = (integral.sample(t + h) - integral.sample(t - h)) / (2.0 * h)
        assert_allclose(derivative, node.sample(t), atol=1e-6)
