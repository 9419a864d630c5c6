"""
Unit tests for subordinate-station offsets.
"""
import numpy as np
import pytest

STATION = [
    {'name': 'M2', 'amplitude': 1.0, 'phase': 100.0},
    {'name': 'S2', 'amplitude': 0.3, 'phase': 130.0},
    {'name': 'K1', 'amplitude': 0.5, 'phase': 200.0},
    {'name': 'O1', 'amplitude': 0.35, 'phase': 190.0},
]

START = '2019-03-01'
END = '2019-03-04'


def _offsets(high=1.0, low=1.0, kind='ratio', time_high=0, time_low=0):
    return {
        'height': {'high': high, 'low': low, 'type': kind},
        'time': {'high': time_high, 'low': time_low},
    }


def _levels(points):
    return np.array([p.level for p in points])


@pytest.fixture
def prediction():
    from tide_predictor.harmonics import predict
    return predict(STATION, START, END)


# -----------------------------------------------------------------------
# Offset normalization tests
# -----------------------------------------------------------------------

class TestNormalizeOffsets:
    """Tests for interpolation.normalize_offsets."""

    def test_empty(self):
        """No offsets means no subordinate mapping."""
        from tide_predictor.harmonics.interpolation import normalize_offsets
        assert normalize_offsets(None) is None
        assert normalize_offsets({}) is None

    def test_defaults(self):
        """Missing values default to the neutral adjustment."""
        from tide_predictor.harmonics.interpolation import normalize_offsets
        ratio = normalize_offsets({'time': {'high': 15}})
        assert ratio.height_type == 'ratio'
        assert (ratio.height_high, ratio.height_low) == (1.0, 1.0)
        assert (ratio.time_high, ratio.time_low) == (15.0, 0.0)

        fixed = normalize_offsets({'height': {'type': 'fixed', 'low': -0.2}})
        assert fixed.fixed
        assert (fixed.height_high, fixed.height_low) == (0.0, -0.2)

    def test_invalid_type(self):
        """Height types other than ratio and fixed are rejected."""
        from tide_predictor.harmonics.interpolation import normalize_offsets
        with pytest.raises(ValueError, match="'ratio' or 'fixed'"):
            normalize_offsets({'height': {'type': 'percent'}})

    def test_passthrough(self):
        """ExtremeOffsets instances are returned unchanged."""
        from tide_predictor.harmonics import ExtremeOffsets
        from tide_predictor.harmonics.interpolation import normalize_offsets
        offsets = ExtremeOffsets(height_high=1.1)
        assert normalize_offsets(offsets) is offsets


# -----------------------------------------------------------------------
# Keyframe interpolation tests
# -----------------------------------------------------------------------

class TestMapHours:
    """Tests for interpolation.map_hours and helpers."""

    def test_cosine_ease(self):
        """The ease runs from 0 to 1 through 0.5 at the midpoint."""
        from tide_predictor.harmonics.interpolation import cosine_ease
        assert cosine_ease(0.0) == pytest.approx(0.0)
        assert cosine_ease(0.5) == pytest.approx(0.5)
        assert cosine_ease(1.0) == pytest.approx(1.0)
        assert cosine_ease(0.25) < 0.25

    def test_keyframes_sorted(self):
        """Keyframes are ordered by subordinate time."""
        from tide_predictor.harmonics.interpolation import (
            ExtremeOffsets,
            build_keyframes,
        )
        offsets = ExtremeOffsets(time_high=240.0, time_low=0.0)
        keyframes = build_keyframes([(0.0, True), (2.0, False)], offsets)
        np.testing.assert_allclose(keyframes.sub_hours, [2.0, 4.0])
        np.testing.assert_allclose(keyframes.time_offsets, [0.0, 4.0])
        assert len(keyframes) == 2

    def test_interpolation(self):
        """Linear time offsets and eased height adjustments."""
        from tide_predictor.harmonics.interpolation import (
            ExtremeOffsets,
            build_keyframes,
            map_hours,
        )
        offsets = ExtremeOffsets(
            height_high=2.0, height_low=1.0, time_high=60.0, time_low=0.0,
        )
        keyframes = build_keyframes([(0.0, True), (6.0, False)], offsets)
        ref_hours, adjustments = map_hours(
            np.array([0.0, 1.0, 3.5, 6.0, 10.0]), keyframes, offsets,
        )
        np.testing.assert_allclose(ref_hours, [-1.0, 0.0, 3.0, 6.0, 10.0])
        np.testing.assert_allclose(adjustments, [2.0, 2.0, 1.5, 1.0, 1.0])

    def test_no_keyframes(self):
        """Without keyframes the mean offsets apply."""
        from tide_predictor.harmonics.interpolation import (
            ExtremeOffsets,
            build_keyframes,
            map_hours,
        )
        offsets = ExtremeOffsets(
            height_high=2.0, height_low=4.0, time_high=30.0, time_low=90.0,
        )
        ref_hours, adjustments = map_hours(
            np.array([0.0, 1.0]), build_keyframes([], offsets), offsets,
        )
        np.testing.assert_allclose(ref_hours, [-1.0, 0.0])
        np.testing.assert_allclose(adjustments, [3.0, 3.0])


# -----------------------------------------------------------------------
# Subordinate prediction tests
# -----------------------------------------------------------------------

class TestSubordinatePrediction:
    """Tests for predictions with offsets."""

    def test_identity_timeline(self, prediction):
        """Neutral offsets reproduce the reference curve exactly."""
        reference = prediction.get_timeline_prediction()
        subordinate = prediction.get_timeline_prediction(offsets=_offsets())
        assert subordinate == reference

    def test_identity_extremes(self, prediction):
        """Neutral offsets reproduce the reference extremes exactly."""
        reference = prediction.get_extremes_prediction()
        subordinate = prediction.get_extremes_prediction(offsets=_offsets())
        assert subordinate == reference

    def test_ratio_timeline(self, prediction):
        """Equal ratios scale the whole curve."""
        reference = _levels(prediction.get_timeline_prediction())
        scaled = _levels(prediction.get_timeline_prediction(
            offsets=_offsets(high=2.0, low=2.0),
        ))
        np.testing.assert_array_equal(scaled, reference * 2.0)

    def test_fixed_timeline(self, prediction):
        """Equal fixed offsets shift the whole curve."""
        reference = _levels(prediction.get_timeline_prediction())
        shifted = _levels(prediction.get_timeline_prediction(
            offsets=_offsets(high=0.5, low=0.5, kind='fixed'),
        ))
        np.testing.assert_array_equal(shifted, reference + 0.5)

    def test_ratio_extremes(self, prediction):
        """Highs and lows take their own ratios."""
        reference = prediction.get_extremes_prediction()
        adjusted = prediction.get_extremes_prediction(
            offsets=_offsets(high=1.2, low=0.8),
        )
        assert len(adjusted) == len(reference)
        for ref, sub in zip(reference, adjusted):
            assert sub.hour == ref.hour
            assert sub.high == ref.high
            factor = 1.2 if ref.high else 0.8
            assert sub.level == pytest.approx(ref.level * factor)

    def test_time_shift_timeline(self, prediction):
        """Equal time offsets delay the whole curve."""
        timeline = prediction.get_timeline_prediction(
            offsets=_offsets(time_high=30, time_low=30),
        )
        hours = np.array([p.hour for p in timeline])
        np.testing.assert_allclose(
            _levels(timeline), prediction.levels(hours - 0.5), atol=1e-12,
        )

    def test_time_shift_extremes(self, prediction):
        """Shifted extremes sit at reference extremes plus the offset."""
        buffered = [h for h, _, _ in prediction.find_extremes(-36.0, 108.0)]
        shifted = prediction.get_extremes_prediction(
            offsets=_offsets(time_high=45, time_low=-20),
        )
        assert shifted
        for e in shifted:
            delta = 0.75 if e.high else -20 / 60.0
            assert min(abs(h - (e.hour - delta)) for h in buffered) < 1e-9
            assert 0.0 <= e.hour <= prediction.span_hours

    def test_shift_brings_in_extremes(self):
        """A reference extreme before the span can shift into it."""
        from tide_predictor.harmonics import predict
        prediction = predict(STATION, '2019-03-01T00:00:00Z', '2019-03-01T02:00:00Z')
        reference = prediction.find_extremes(-36.0, 0.0)
        last_high = max(h for h, _, high in reference if high)
        minutes = int((0.5 - last_high) * 60) + 1
        shifted = prediction.get_extremes_prediction(
            offsets=_offsets(time_high=minutes, time_low=minutes),
        )
        assert any(
            abs(e.hour - (last_high + minutes / 60.0)) < 1e-9 for e in shifted
        )

    def test_flat_station_uses_mean_offsets(self):
        """A station without extremes takes the mean height adjustment."""
        from tide_predictor.harmonics import predict
        prediction = predict(
            [{'name': 'Z0', 'amplitude': 0.5, 'phase': 0.0}], START, END,
        )
        levels = _levels(prediction.get_timeline_prediction(
            offsets=_offsets(high=2.0, low=4.0),
        ))
        np.testing.assert_allclose(levels, 1.5)
        assert prediction.get_extremes_prediction(
            offsets=_offsets(high=2.0, low=4.0),
        ) == []
