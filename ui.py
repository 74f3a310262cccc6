#ui.py

import math
import pygame
import constants as C

class Slider:
    """
    An integer range control. The stored value is always an integer between
    minimum and maximum; `divisor` turns it into the real parameter.
    """
    def __init__(self, name, label, minimum, maximum, value, divisor=1, decimals=0):
        self.name = name
        self.label = label
        self.minimum = minimum
        self.maximum = maximum
        self.divisor = divisor
        self.decimals = decimals
        self.value = minimum
        self.set_value(value)
        self.rect = pygame.Rect(0, 0, C.SLIDER_WIDTH, C.SLIDER_HEIGHT)
        self.dragging = False

    def set_value(self, value):
        """Clamps and stores a new value. Returns True if it changed."""
        clamped = max(self.minimum, min(self.maximum, int(round(value))))
        if clamped == self.value:
            return False
        self.value = clamped
        return True

    @property
    def parameter(self):
        """The slider value converted to the parameter it controls."""
        if self.divisor == 1:
            return self.value
        return self.value / self.divisor

    def display_value(self):
        if self.decimals == 0:
            return str(self.parameter)
        return f"{self.parameter:.{self.decimals}f}"

    def value_for_position(self, pos_x):
        """Maps a pointer x coordinate onto the nearest slider value."""
        ratio = (pos_x - self.rect.left) / self.rect.width
        value = ratio * (self.maximum - self.minimum) + self.minimum
        return max(self.minimum, min(self.maximum, int(math.floor(value + 0.5))))

    def knob_position(self):
        span = self.maximum - self.minimum
        ratio = (self.value - self.minimum) / span if span else 0.0
        return int(self.rect.left + ratio * self.rect.width), self.rect.centery

    def hit_rect(self):
        """The track plus some room around it for the knob."""
        return self.rect.inflate(C.SLIDER_KNOB_RADIUS * 2, C.SLIDER_KNOB_RADIUS * 2)

    def handle_event(self, event):
        """Processes mouse input. Returns True when the value changed."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.hit_rect().collidepoint(event.pos):
                self.dragging = True
                return self.set_value(self.value_for_position(event.pos[0]))
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            return self.set_value(self.value_for_position(event.pos[0]))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
        return False

    def draw(self, surface, font):
        label_surface = font.render(f"{self.label}: {self.display_value()}", True, C.COLOR_TEXT)
        surface.blit(label_surface, (self.rect.left, self.rect.top - C.SLIDER_LABEL_OFFSET_Y))

        pygame.draw.rect(surface, C.COLOR_SLIDER_TRACK, self.rect, border_radius=4)
        knob_x, knob_y = self.knob_position()
        fill_rect = pygame.Rect(self.rect.left, self.rect.top, knob_x - self.rect.left, self.rect.height)
        pygame.draw.rect(surface, C.COLOR_SLIDER_FILL, fill_rect, border_radius=4)
        knob_color = C.COLOR_SLIDER_KNOB_ACTIVE if self.dragging else C.COLOR_SLIDER_KNOB
        pygame.draw.circle(surface, knob_color, (knob_x, knob_y), C.SLIDER_KNOB_RADIUS)


def build_sliders():
    """Creates the parameter sliders and lays them out in columns under the panels."""
    sliders = []
    for index, (name, label, minimum, maximum, default, divisor, decimals) in enumerate(C.SLIDER_DEFINITIONS):
        slider = Slider(name, label, minimum, maximum, default, divisor, decimals)
        column = index // C.SLIDERS_PER_COLUMN
        row = index % C.SLIDERS_PER_COLUMN
        slider.rect.topleft = (
            C.PANEL_MARGIN + column * C.SLIDER_COLUMN_SPACING,
            C.SLIDER_TOP + C.SLIDER_LABEL_OFFSET_Y + row * C.SLIDER_ROW_SPACING
        )
        sliders.append(slider)
    return sliders

def draw_sliders(surface, font, sliders):
    for slider in sliders:
        slider.draw(surface, font)

def draw_status(surface, font, text):
    """Draws a single status line along the bottom of the window."""
    text_surface = font.render(text, True, C.COLOR_TEXT)
    surface.blit(text_surface, (C.STATUS_POS_X, C.STATUS_POS_Y))
