# Configuration file for the map editor
import math

# Screen dimensions
WIDTH, HEIGHT = 640, 480
FPS = 60
CAPTION = "Kanzapanoid Map Editor"

# Colors
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (160, 160, 160)

# Line colors
LINE_ERROR = (204, 51, 0)      # Poly too small to be a shape
LINE_ACTIVE = (0, 153, 51)     # Poly being edited
LINE_INACTIVE = (0, 153, 204)  # Finished polys
LINE_SELECTED = (0, 255, 0)    # Preview lines to the mouse

# Cursor color per mode (0 = map name input, 1 = editing)
MOUSE_COLORS = [WHITE, (0, 255, 0), (0, 0, 255)]
CURSOR_LENGTH = 20 * math.sqrt(2)
CURSOR_ANGLE = math.pi / 4

VERTEX_SIZE = 4
MAX_COORD = 1_000_000_000 # Keeps poly bounds inside pygame.Rect range

# Camera
CAMERA_SPEED = 10 # Pixels per frame

# Text field
FONT_SIZE = 20
TEXT_DEFAULT = "Map Name?"
TEXT_INACTIVE_COLOR = (255, 255, 255, 0x33)
TEXT_ACTIVE_COLOR = (255, 255, 255, 0x66)
TEXT_SELECTION_COLOR = (0, 153, 204, 0x99)
TEXT_CARET_COLOR = (255, 255, 255)
TEXT_PADDING = 5

# Map configuration
MAP_DIR = "maps"
MAP_EXT = ".json"
