"""Execution frames — which steps a call entered and whether they were unwrapped.

Reading a step accessor pushes a frame carrying that step's error override.
The next ``step(...)`` unwrap consults the top frame: on failure the
override replaces the error, on success the frame is marked done. Only the
top frame is ever mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class ExecutionFrame:
    """One entered step."""

    step_name: str
    error: Any = None
    done: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"step": self.step_name, "error": self.error, "done": self.done}


class FrameStack:
    """Append-only, per-call stack of ExecutionFrames."""

    def __init__(self) -> None:
        self._frames: list[ExecutionFrame] = []

    def push(self, step_name: str, error: Any = None) -> ExecutionFrame:
        frame = ExecutionFrame(step_name=step_name, error=error)
        self._frames.append(frame)
        return frame

    def top(self) -> ExecutionFrame | None:
        return self._frames[-1] if self._frames else None

    def pending(self) -> ExecutionFrame | None:
        """Top frame if it has not been unwrapped yet."""
        frame = self.top()
        if frame is None or frame.done:
            return None
        return frame

    def mark_done(self) -> ExecutionFrame | None:
        frame = self.pending()
        if frame is not None:
            frame.done = True
        return frame

    def to_list(self) -> list[dict[str, Any]]:
        return [frame.to_dict() for frame in self._frames]

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[ExecutionFrame]:
        return iter(self._frames)

    def __repr__(self) -> str:
        names = [f.step_name + ("*" if f.done else "") for f in self._frames]
        return f"FrameStack({names})"
