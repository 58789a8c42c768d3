import math

import pytest

from cpugol.metrics import FrameMetrics


def test_no_samples_gives_nan():
    metrics = FrameMetrics()
    avg = metrics.averages()
    assert avg.input == pytest.approx(math.nan, nan_ok=True)
    assert avg.fps == pytest.approx(math.nan, nan_ok=True)
    assert str(avg.frametime) == "nan"


def test_frametime_is_sum_of_parts():
    metrics = FrameMetrics()
    for _ in range(3):
        metrics.update(1.5, 2.0, 0.5)
    avg = metrics.averages()
    assert avg.frametime == pytest.approx(avg.input + avg.update + avg.draw)
    assert avg.input == pytest.approx(1.5)
    assert avg.draw == pytest.approx(0.5)


def test_fps_is_inverse_of_frametime():
    metrics = FrameMetrics()
    metrics.update(2.0, 3.0, 5.0)
    avg = metrics.averages()
    assert avg.fps * avg.frametime == pytest.approx(1000.0)


def test_zero_frametime_gives_infinite_fps():
    metrics = FrameMetrics()
    metrics.update(0.0, 0.0, 0.0)
    assert metrics.averages().fps == math.inf


def test_old_samples_are_overwritten():
    metrics = FrameMetrics(capacity=4)
    metrics.update(100.0, 100.0, 100.0)
    for _ in range(4):
        metrics.update(1.0, 1.0, 1.0)
    avg = metrics.averages()
    assert avg.input == pytest.approx(1.0)
    assert len(metrics.frametime) == 4


def test_report_contents():
    metrics = FrameMetrics()
    for _ in range(5):
        metrics.update(1.0, 2.0, 1.0)
    text = metrics.report(5, 0.5, 7, 5)
    assert text.startswith("\nSimulation ended.\n")
    assert "\tframecount:      5 frames\n" in text
    assert "\tfinal popcount:  7\n" in text
    assert "\tgenerations:     5\n" in text
    assert "Stats:\n" in text
    assert "100.0%" in text


def test_report_without_frames_does_not_raise_division_errors():
    metrics = FrameMetrics()
    text = metrics.report(0, 0.0, 0, 0)
    assert "\tframecount:      0 frames\n" in text
    assert "nan" in text