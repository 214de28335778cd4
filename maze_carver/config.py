# --- Maze size defaults ---
DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10
DEFAULT_SEED = None

# --- Text markers (wall, open, visited, solution) ---
CHAR_WALL = "X"
CHAR_OPEN = " "
CHAR_VISITED = "V"
CHAR_SOLUTION = "*"

# --- Showcase run: (width, height, trace) ---
DEMO_MAZES = [
    (5, 5, True),
    (5, 5, False),
    (10, 15, False),
    (30, 20, False),
]

# --- Viewer ---
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
TARGET_FPS = 60
STEPS_PER_FRAME = 1
RECORD_FPS = 30
RECORDINGS_DIR = "recordings"
