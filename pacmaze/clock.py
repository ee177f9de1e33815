from __future__ import annotations

from pacmaze import config


class FixedTimestep:
    """Accumulates real frame time and hands it out as whole simulation steps.

    Long frames are clamped and the number of steps per frame is capped so a
    stall (window drag, breakpoint) can't trigger a catch-up spiral.
    """

    def __init__(self, step: float = config.TIMESTEP,
                 max_frame: float = config.MAX_FRAME_TIME,
                 max_steps: int = config.MAX_STEPS_PER_FRAME):
        self.step = step
        self.max_frame = max_frame
        self.max_steps = max_steps
        self.accumulator = 0.0

    def advance(self, frame_dt: float) -> int:
        """Add one frame's worth of time; return how many steps to simulate."""
        self.accumulator += max(0.0, min(frame_dt, self.max_frame))
        steps = 0
        while self.accumulator >= self.step and steps < self.max_steps:
            self.accumulator -= self.step
            steps += 1
        if steps == self.max_steps:
            self.accumulator = min(self.accumulator, self.step)
        return steps

    def reset(self):
        self.accumulator = 0.0
