"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60

# Window
SCREEN_W = 800
SCREEN_H = 600

# Controls row
CONTROL_Y = 75
CLEAR_RECT = (20, CONTROL_Y - 15, 60, 30)
SLIDER_W = 120
SLIDER_X = SCREEN_W - 75 - SLIDER_W // 2
SLIDER_KNOB_R = 10

# Colors
BG_COLOR = (255, 255, 255)
CLEAR_TEXT = (142, 142, 147)
SLIDER_TRACK = (209, 209, 214)
SLIDER_FILL = (0, 122, 255)
ARROW_COLOR = (0, 122, 255)
STATUS_TEXT = (120, 120, 140)
