import os
import logging
import pygame
import cv2
import numpy as np
from datetime import datetime
from maze_carver import config

logger = logging.getLogger(__name__)

def default_output_file(prefix="maze_carve"):
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    fname = f"{prefix}_{ts}.mp4"
    if os.path.isdir(config.RECORDINGS_DIR):
        return os.path.join(config.RECORDINGS_DIR, fname)
    return fname

def surface_to_bgr(surface: pygame.Surface) -> np.ndarray:
    """pygame surface -> (height, width, 3) BGR frame for OpenCV."""
    view = pygame.surfarray.array3d(surface)
    # surfarray is (width, height, 3) RGB
    frame = np.ascontiguousarray(np.transpose(view, (1, 0, 2)))
    return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)

class VideoRecorder:
    def __init__(self, active=False, output_file=None, fps=config.RECORD_FPS):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

        if self.active and not self.output_file:
            self.output_file = default_output_file()

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        frame = surface_to_bgr(surface)
        height, width = frame.shape[:2]

        # Frames must keep the size of the first one
        if self.writer is None:
            self.frame_size = (width, height)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.info(f"Recording started: {self.output_file}")
        elif (width, height) != self.frame_size:
            frame = cv2.resize(frame, self.frame_size)

        self.writer.write(frame)
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
