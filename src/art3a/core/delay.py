"""Delay - frame timing in milliseconds."""

from __future__ import annotations

from dataclasses import dataclass, field

from art3a.core.constants import DEFAULT_DELAY_MS
from art3a.errors import DelayDuplicateError, DelayParseError


@dataclass
class Delay:
    """
    Global frame delay plus sparse per-frame overrides.

    A delay of 0 means "unset" and reads back as the 50 ms default.
    """
    global_ms: int = 0
    per_frame: dict[int, int] = field(default_factory=dict)

    @classmethod
    def parse(cls, s: str) -> Delay:
        """Parse ``"<global> <frame>:<ms> ..."``."""
        delay = cls()
        seen_global = False
        tokens = [t for t in s.strip().split(" ") if t]
        if not tokens:
            raise DelayParseError(f"delay line is empty: '{s}'")
        for token in tokens:
            if ":" in token:
                frame_s, ms_s = token.split(":", 1)
                try:
                    frame, ms = int(frame_s), int(ms_s)
                except ValueError:
                    raise DelayParseError(f"failed to parse per-frame delay '{token}'") from None
                if frame < 0 or ms < 0:
                    raise DelayParseError(f"negative per-frame delay '{token}'")
                if frame in delay.per_frame:
                    raise DelayDuplicateError(f"per-frame delay for frame {frame} duplicates: '{token}'")
                delay.per_frame[frame] = ms
            else:
                if seen_global:
                    raise DelayDuplicateError(f"global delay duplicates: '{token}'")
                try:
                    delay.global_ms = int(token)
                except ValueError:
                    raise DelayParseError(f"failed to parse global delay '{token}'") from None
                if delay.global_ms < 0:
                    raise DelayParseError(f"negative global delay '{token}'")
                seen_global = True
        if delay.global_ms == 0:
            delay.global_ms = DEFAULT_DELAY_MS
        return delay

    def get_global(self) -> int:
        return self.global_ms or DEFAULT_DELAY_MS

    def get_frame(self, frame: int) -> int:
        return self.per_frame.get(frame, self.global_ms) or DEFAULT_DELAY_MS

    def set_global(self, ms: int) -> None:
        """Set the global delay; 0 resets it to the default."""
        self.global_ms = ms or DEFAULT_DELAY_MS

    def set_frame(self, frame: int, ms: int) -> None:
        """Set a per-frame override; 0 removes it."""
        if ms == 0:
            self.per_frame.pop(frame, None)
        else:
            self.per_frame[frame] = ms

    def set_frames(self, count: int) -> None:
        """
        Fit the overrides to an animation of ``count`` frames.

        Overrides for frames past the end and those equal to the global delay
        are dropped. When every frame carries the same override it becomes
        the global delay.
        """
        global_ms = self.get_global()
        kept: dict[int, int] = {}
        values = set()
        for frame, ms in self.per_frame.items():
            if frame < count:
                values.add(ms)
                if ms != global_ms:
                    kept[frame] = ms
        if len(values) == 1 and len(kept) == count:
            global_ms = values.pop() or DEFAULT_DELAY_MS
            kept = {}
        self.global_ms = global_ms
        self.per_frame = kept

    def to_list(self, frames: int) -> list[int]:
        """Return the delay of each of the first ``frames`` frames."""
        return [self.get_frame(f) for f in range(frames)]

    def __str__(self) -> str:
        parts = [str(self.get_global())]
        parts.extend(f"{f}:{ms}" for f, ms in sorted(self.per_frame.items()))
        return " ".join(parts)
