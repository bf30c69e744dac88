import logging
import os
from datetime import datetime

import cv2
import numpy as np
import pygame

logger = logging.getLogger(__name__)


def surface_to_frame(surface: pygame.Surface) -> np.ndarray:
    """Converts a pygame surface to an OpenCV (height, width, 3) BGR frame."""
    view = pygame.surfarray.array3d(surface)
    # view is (width, height, 3) RGB
    frame = np.ascontiguousarray(np.transpose(view, (1, 0, 2)))
    return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)


class VideoRecorder:
    """
    Streams rendered frames into an mp4. When no output file is given the
    video goes to recordings/<prefix>_<timestamp>.mp4.
    """
    RECORDINGS_DIR = "recordings"

    def __init__(self, active=False, output_file=None, fps=30, prefix="maze_gen"):
        self.active = active
        self.fps = fps
        self.writer = None
        self.frame_count = 0
        self.output_file = output_file
        if self.active and self.output_file is None:
            self.output_file = self.default_output_file(prefix)

    @classmethod
    def default_output_file(cls, prefix: str, now: datetime = None) -> str:
        ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
        return os.path.join(cls.RECORDINGS_DIR, f"{prefix}_{ts}.mp4")

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        # Initialize writer on first frame
        if self.writer is None:
            directory = os.path.dirname(self.output_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, surface.get_size())
            logger.info("Recording started: %s", self.output_file)

        self.writer.write(surface_to_frame(surface))
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info("Video saved: %s (%d frames)", self.output_file, self.frame_count)
            self.writer = None
