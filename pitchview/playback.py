"""Play, pause and edit state that decides what happens to each video frame."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_FPS = 60.0


@dataclass(frozen=True)
class FrameAction:
    """What to do for the next displayed frame."""

    read_frame: bool
    reuse_background: bool
    resize_frame: bool
    rebuild_background: bool
    update_mask: bool


class PlaybackState:
    """Tracks playing, pausing and pitch-point editing across frames."""

    def __init__(self) -> None:
        self.paused = False
        self.pause_detected = False
        self.resumed = False
        self.first_frame_loaded = True
        self.editing = False
        self.background_ready = False
        self.fps = DEFAULT_FPS
        self.last_frame = 0.0
        self.frame_count = 0

    def update(self, playing: bool, editing: bool) -> FrameAction:
        """Take the user's play and edit choices and decide the frame's work."""
        if playing and self.paused:
            self.paused = False
            self.resumed = True
        elif playing:
            self.resumed = False
        elif not self.paused:
            self.paused = True
            self.pause_detected = True
        else:
            self.pause_detected = False
        self.editing = bool(editing)

        running = not self.paused or self.pause_detected
        read = running or not self.first_frame_loaded
        if not read and not self.editing and self.background_ready:
            return FrameAction(
                read_frame=False,
                reuse_background=True,
                resize_frame=False,
                rebuild_background=False,
                update_mask=False,
            )

        rebuild = read or self.editing
        if rebuild and not read:
            self.background_ready = True
        return FrameAction(
            read_frame=read,
            reuse_background=False,
            resize_frame=not (self.paused and self.editing),
            rebuild_background=rebuild,
            update_mask=rebuild and running,
        )

    def start_video(self, frame_count: float, fps: float) -> None:
        """Reset for a newly opened video of ``frame_count`` frames at ``fps``."""
        self.frame_count = 0
        self.first_frame_loaded = False
        self.background_ready = False
        self.last_frame = frame_count
        self.fps = fps

    def advance(self) -> None:
        """Record that a frame was read and shown as the new background."""
        self.frame_count += 1
        self.first_frame_loaded = True
        self.background_ready = True

    def time(self) -> float:
        """Seconds of video shown so far."""
        return self.frame_count / self.fps