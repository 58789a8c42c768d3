"""Per-frame timing metrics kept in small ring buffers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .ring_buffer import DEFAULT_CAPACITY, RingBuffer


def _div(numerator: float, denominator: float) -> float:
    """Floating division that yields inf or NaN instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


@dataclass(frozen=True)
class MetricAverages:
    input: float
    update: float
    draw: float
    frametime: float
    fps: float


class FrameMetrics:
    """Recent input, update and draw timings plus derived frame time and FPS."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.input = RingBuffer("INPUT(MS)", capacity)
        self.update_time = RingBuffer("UPDATE(MS)", capacity)
        self.draw = RingBuffer("DRAW(MS)", capacity)
        self.frametime = RingBuffer("FRAMETIME(MS)", capacity)
        self.fps = RingBuffer("FPS", capacity)

    def update(self, ms_input: float, ms_update: float, ms_draw: float) -> None:
        """Record the timings of one frame."""
        ms_frametime = ms_input + ms_update + ms_draw
        fps = _div(1.0, ms_frametime / 1000.0)
        self.input.put(ms_input)
        self.update_time.put(ms_update)
        self.draw.put(ms_draw)
        self.frametime.put(ms_frametime)
        self.fps.put(fps)

    def averages(self) -> MetricAverages:
        return MetricAverages(
            input=self.input.average(),
            update=self.update_time.average(),
            draw=self.draw.average(),
            frametime=self.frametime.average(),
            fps=self.fps.average(),
        )

    def report(
        self, frame_count: int, elapsed_s: float, population: int, generations: int
    ) -> str:
        """Format the end-of-run summary."""
        avg = self.averages()
        elapsed_ms = elapsed_s * 1000.0
        lines = [
            "\nSimulation ended.\n",
            f"\tframecount:      {frame_count} frames\n",
            f"\ttook:            {elapsed_ms:0.0f}ms\n",
            f"\tfinal popcount:  {population}\n",
            f"\tgenerations:     {generations}\n",
            "Stats:\n",
        ]
        for label, value in (
            ("input:", avg.input),
            ("update:", avg.update),
            ("draw:", avg.draw),
        ):
            share = _div(value, avg.frametime) * 100.0
            lines.append(
                f"\t{label:<21}{value:0.2f}ms              {share:0.1f}%\n "
            )
        lines.append(
            f"\tframetime/overall:   {avg.frametime:0.2f}ms/"
            f"{_div(elapsed_ms, frame_count):0.2f}ms      100.0%\n "
        )
        lines.append(
            f"\tfps/overall:         {avg.fps:0.2f}/"
            f"{_div(frame_count, elapsed_s):0.2f}fps\n"
        )
        return "".join(lines)