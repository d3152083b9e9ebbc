"""Animated exhaust flame drawn behind the tank."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pygame

from .entity import _draw_rotated

MAX_FLAME_FRAMES = 8
FRAME_DELAY_MS = 100
FLAME_SIZE = 32

_UINT32 = 0xFFFFFFFF

log = logging.getLogger(__name__)


class FlameLoadError(Exception):
    """The flame animation could not be loaded."""


@dataclass
class ExhaustFlame:
    """A looping sequence of frames advanced on a fixed delay."""

    frames: list = field(default_factory=list)
    frame_index: int = 0
    frame_delay: int = FRAME_DELAY_MS
    last_time: int = 0

    @property
    def frame_count(self):
        return len(self.frames)

    def update(self, now):
        """Advance one frame if more than ``frame_delay`` ms passed since the last step."""
        if not self.frames:
            return
        elapsed = (now - self.last_time) & _UINT32
        if elapsed > self.frame_delay:
            self.frame_index = (self.frame_index + 1) % self.frame_count
            self.last_time = now

    def render(self, surface, x, y, angle):
        """Draw the current frame at ``(x, y)`` rotated by ``angle`` degrees."""
        if not self.frames or not 0 <= self.frame_index < self.frame_count:
            log.warning("flame render skipped: not initialized or invalid frame")
            return
        dst = pygame.Rect(int(x), int(y), FLAME_SIZE, FLAME_SIZE)
        _draw_rotated(surface, self.frames[self.frame_index], dst, angle)

    def unload(self):
        """Release all frames."""
        self.frames.clear()


def load_flame(basepath, frame_count, now):
    """Load ``<basepath>0.png`` ... ``<basepath>{frame_count-1}.png``."""
    if frame_count > MAX_FLAME_FRAMES:
        raise FlameLoadError(f"Too many frames: {frame_count} (max {MAX_FLAME_FRAMES})")

    frames = []
    for i in range(frame_count):
        filename = f"{basepath}{i}.png"
        try:
            frames.append(pygame.image.load(filename))
        except (pygame.error, OSError) as exc:
            raise FlameLoadError(f"Failed to load {filename}: {exc}") from exc
    return ExhaustFlame(frames=frames, last_time=now)