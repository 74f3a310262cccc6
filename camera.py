#camera.py

import constants as C
import logger as log

class Camera:
    """Sampling offset over the noise plane, in grid cells."""
    def __init__(self):
        self.x = 0.0
        self.y = 0.0
        self.dirty = True
        log.log(f"Camera initialized at noise offset ({self.x:.1f}, {self.y:.1f})")

    def pan(self, dx, dy):
        """Moves the sampling window. The noise plane has no edges, so nothing is clamped."""
        if dx == 0 and dy == 0:
            return
        self.x += dx
        self.y += dy
        self.dirty = True

    def pan_for_keys(self, left, right, up, down, delta_seconds):
        """Pans from arrow key state, scaled by the frame time."""
        step = C.CAMERA_PAN_SPEED_CELLS * delta_seconds
        dx = (step if right else 0.0) - (step if left else 0.0)
        dy = (step if down else 0.0) - (step if up else 0.0)
        self.pan(dx, dy)

    def reset(self):
        if self.x != 0.0 or self.y != 0.0:
            self.x = 0.0
            self.y = 0.0
            self.dirty = True
