"""Heads-up display text: the score and the frame-rate counter."""

from __future__ import annotations

from dataclasses import dataclass

FPS_SAMPLE_FRAMES = 100
SCORE_REFRESH_FRAMES = 10

SCORE_BACKGROUND_SIZE = (550.0, 100.0)
SCORE_BACKGROUND_POSITION = (15.0, 30.0)
FPS_BACKGROUND_SIZE = (240.0, 55.0)
FPS_BACKGROUND_POSITION = (15.0, 163.0)
HUD_BACKGROUND_COLOUR = (0, 0, 0, 150)
FPS_TEXT_SIZE = 50
FPS_TEXT_POSITION = (20.0, 160.0)
SCORE_TEXT_SIZE = 100
SCORE_TEXT_POSITION = (20.0, 20.0)


def format_score(score: int) -> str:
    """Return the score line shown in the corner of the screen."""
    return f"Score = {score}"


@dataclass
class FpsCounter:
    """A frame-rate readout sampled from a single frame every hundred frames."""

    frame_count: int = 0
    fps: float = 0.0

    def tick(self, dt: float) -> None:
        """Count a frame that took ``dt`` seconds, refreshing the reading when due."""
        self.frame_count += 1
        if self.frame_count >= FPS_SAMPLE_FRAMES:
            if dt > 0:
                self.fps = 1.0 / dt
            self.frame_count = 0

    @property
    def score_refresh_due(self) -> bool:
        """Whether the score text should be redrawn this frame."""
        return self.frame_count % SCORE_REFRESH_FRAMES == 0

    def text(self) -> str:
        """Return the readout, with the rate truncated to a whole number."""
        return f"FPS: {int(self.fps)}"