"""Frame-by-frame sprite animation driven by elapsed time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from sprite2d.sprite import Frame


@dataclass
class Animation:
    """A looping sequence of frames, each shown for ``frame_duration`` seconds."""

    frames: Sequence[Frame]
    frame_duration: float = 0.1
    current_frame: int = 0
    elapsed_time: float = 0.0
    _frames: List[Frame] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._frames = list(self.frames)
        if not self._frames:
            raise ValueError("an animation needs at least one frame")
        self.frames = tuple(self._frames)

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    def update(self, delta_time: float) -> None:
        """Advance the clock; step at most one frame once the duration is reached."""
        self.elapsed_time += delta_time
        if self.elapsed_time >= self.frame_duration:
            self.elapsed_time = 0.0
            self.current_frame += 1
            if self.current_frame >= self.frame_count:
                self.current_frame = 0

    def current(self) -> Frame:
        """The frame to draw now."""
        return self._frames[self.current_frame]