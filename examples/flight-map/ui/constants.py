"""Layout constants and color definitions."""

# Timing
FPS = 60

# Window
SCREEN_W = 1024
SCREEN_H = 640
STATUS_H = 28

# View (OpenStreetMap zoom 3 resolution, map units per pixel)
INITIAL_RESOLUTION = 156543.03392804097 / 2**3
MIN_RESOLUTION = 156543.03392804097 / 2**8
MAX_RESOLUTION = 156543.03392804097 / 2**1
ZOOM_STEP = 1.25
GRATICULE_STEP = 30  # degrees

# Flights
LINE_COLOR = (0xEA, 0xE9, 0x11)
LINE_WIDTH = 3
MARKER_START = (80, 200, 255)
MARKER_END = (255, 110, 90)
MARKER_ICON_PX = 1.5e6  # radius in px at marker scale 1.0
MARKER_MIN_R = 2
MARKER_MAX_R = 9

# Colors
BG_COLOR = (18, 28, 44)
GRATICULE_COLOR = (40, 55, 78)
EQUATOR_COLOR = (60, 80, 110)
ANTIMERIDIAN_COLOR = (110, 60, 60)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
POPUP_BG = (245, 245, 245)
POPUP_BORDER = (170, 170, 170)
POPUP_TEXT = (30, 30, 30)
