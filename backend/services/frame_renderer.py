"""
Image renderer for Snake sessions.

Paints the board with Pillow and can export the recorded frames as an MP4:
1. Every flush() appends the current frame as a numpy array
2. write_video() encodes the frames with MoviePy/FFmpeg
"""

import logging
import os
from typing import List, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont
from moviepy import ImageSequenceClip

from domain.constants import DEFAULT_PIXEL_SIZE
from domain.geometry import Position, Size
from .renderers import Renderer

logger = logging.getLogger(__name__)

DEFAULT_FPS = 7  # Roughly one frame per 150ms tick
SCORE_BAR_HEIGHT = 40


class ColorScheme:
    """Board colors"""

    BACKGROUND = "#FFFFFF"
    GRID_LINE = "#E5E7EB"
    SNAKE = "#2E8B22"
    FOOD = "#EA2014"
    SCORE_BAR = "#1a1f2e"
    SCORE_TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class FrameRenderer(Renderer):
    """Paints the board on a Pillow image and records one frame per flush()."""

    def __init__(self, size: Size, pixel_size: int = DEFAULT_PIXEL_SIZE, max_frames: Optional[int] = None):
        if pixel_size <= 0:
            raise ValueError(f"Pixel size must be positive, got {pixel_size}.")
        super().__init__(size)
        self.pixel_size = pixel_size
        self.max_frames = max_frames
        self.frames: List[np.ndarray] = []

        board_pixels = self.size.scale(self.pixel_size)
        self.image = Image.new(
            'RGB',
            (board_pixels.x, board_pixels.y + SCORE_BAR_HEIGHT),
            hex_to_rgb(ColorScheme.BACKGROUND)
        )
        self.draw = ImageDraw.Draw(self.image)
        self.font = ImageFont.load_default()
        self.clear()

    def clear(self) -> None:
        board_pixels = self.size.scale(self.pixel_size)
        self.draw.rectangle(
            [0, 0, board_pixels.x, board_pixels.y],
            fill=hex_to_rgb(ColorScheme.BACKGROUND)
        )

        # Draw grid
        for i in range(self.size.x + 1):
            x = i * self.pixel_size
            self.draw.line([x, 0, x, board_pixels.y], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)

        for i in range(self.size.y + 1):
            y = i * self.pixel_size
            self.draw.line([0, y, board_pixels.x, y], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)

    def mark_snake(self, point: Position) -> None:
        self._draw_cell(point, hex_to_rgb(ColorScheme.SNAKE))

    def mark_food(self, point: Position) -> None:
        self._draw_cell(point, hex_to_rgb(ColorScheme.FOOD))

    def set_score(self, score: int) -> None:
        super().set_score(score)
        top = self.size.y * self.pixel_size
        self.draw.rectangle(
            [0, top, self.image.width, top + SCORE_BAR_HEIGHT],
            fill=hex_to_rgb(ColorScheme.SCORE_BAR)
        )
        self.draw.text(
            (10, top + SCORE_BAR_HEIGHT // 3),
            f"Score: {score}",
            fill=hex_to_rgb(ColorScheme.SCORE_TEXT),
            font=self.font
        )

    def _draw_cell(self, point: Position, color: Tuple[int, int, int], padding: int = 1) -> None:
        """Fill a single board cell"""
        x, y = point[0] * self.pixel_size, point[1] * self.pixel_size
        self.draw.rectangle(
            [x + padding, y + padding, x + self.pixel_size - padding, y + self.pixel_size - padding],
            fill=color
        )

    def pixel_at(self, point: Position) -> Tuple[int, int, int]:
        """Color at the centre of a board cell."""
        half = self.pixel_size // 2
        return self.image.getpixel((point[0] * self.pixel_size + half, point[1] * self.pixel_size + half))

    def flush(self) -> None:
        if self.max_frames is not None and len(self.frames) >= self.max_frames:
            return
        self.frames.append(np.array(self.image))

    def save_frame(self, path: str) -> str:
        """Write the current image to disk (format from the file extension)."""
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.image.save(path)
        return path

    def write_video(self, output_path: str, fps: int = DEFAULT_FPS) -> str:
        """
        Encode the recorded frames as a video.

        Args:
            output_path: Destination file (e.g. session.mp4)
            fps: Frames per second

        Returns:
            Path to the generated video file
        """
        if not self.frames:
            raise ValueError("No frames recorded; nothing to write.")

        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        logger.info(f"Encoding {len(self.frames)} frames to {output_path}")
        clip = ImageSequenceClip(self.frames, fps=fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path
