import logging
import pygame
from maze_carver import config
from maze_carver.core.grid import Grid
from maze_carver.core.events import EVT_DONE

logger = logging.getLogger(__name__)

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_OPEN = (25, 25, 25)
    COLOR_VISITED = (60, 100, 160)# Blue tint
    COLOR_SOLUTION = (255, 215, 0)# Gold
    COLOR_HEAD = (220, 60, 60)

    STATE_COLORS = {
        Grid.WALL: COLOR_WALL,
        Grid.OPEN: COLOR_OPEN,
        Grid.VISITED: COLOR_VISITED,
        Grid.SOLUTION: COLOR_SOLUTION,
    }

    def __init__(self, grid: Grid, generator=None, width=config.WINDOW_WIDTH, height=config.WINDOW_HEIGHT,
                 record=False, steps_per_frame=config.STEPS_PER_FRAME):
        self.grid = grid
        self.generator = generator
        self.screen_width = width
        self.screen_height = height
        self.steps_per_frame = max(1, steps_per_frame)

        # Camera
        self.cell_size = 20.0  # Pixels per grid position
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        from maze_carver.viz.recorder import VideoRecorder
        self.recorder = VideoRecorder(active=record)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None
        self.gen_iter = None
        self.last_event = None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = max(1.0, min(available_w / self.grid.cols, available_h / self.grid.rows))

        total_w = self.grid.cols * self.cell_size
        total_h = self.grid.rows * self.cell_size
        self.offset_x = (self.screen_width - total_w) / 2
        self.offset_y = (self.screen_height - total_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Carver - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        self.fit_to_screen()

    def world_to_screen(self, col, row):
        sx = col * self.cell_size + self.offset_x
        sy = row * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(0.5, min(100.0, self.cell_size))

                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def visible_range(self):
        start_col = max(0, int((-self.offset_x) / self.cell_size))
        start_row = max(0, int((-self.offset_y) / self.cell_size))
        end_col = min(self.grid.cols, int((self.screen_width - self.offset_x) / self.cell_size) + 1)
        end_row = min(self.grid.rows, int((self.screen_height - self.offset_y) / self.cell_size) + 1)
        return start_row, end_row, start_col, end_col

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        start_row, end_row, start_col, end_col = self.visible_range()
        size = int(self.cell_size) + 1

        for row in range(start_row, end_row):
            for col in range(start_col, end_col):
                state = self.grid.cells[row * self.grid.cols + col]
                px, py = self.world_to_screen(col, row)
                pygame.draw.rect(self.surface, self.STATE_COLORS[state], (int(px), int(py), size, size))

        # Carving head
        if self.last_event and not self.gen_finished:
            row, col = self.last_event.cell
            px, py = self.world_to_screen(col, row)
            pygame.draw.rect(self.surface, self.COLOR_HEAD, (int(px), int(py), size, size))

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        status = "Done" if self.gen_finished else "Carving"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.width}x{self.grid.height} ({self.grid.total_cells:,} cells)",
            f"Zoom: {self.cell_size:.2f}",
            f"Status: {status}",
        ]
        if self.last_event:
            info.append(f"Visited: {self.last_event.visited} / Depth: {self.last_event.depth}")
            info.append("Goal reached" if self.last_event.solved else "Searching goal")
        if self.recorder.active:
            info.append("REC")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def step(self, gen_iter):
        """Advances the generator by up to steps_per_frame events."""
        try:
            for _ in range(self.steps_per_frame):
                self.last_event = next(gen_iter)
                if self.last_event.kind == EVT_DONE:
                    raise StopIteration
        except StopIteration:
            self.gen_finished = True
            logger.info("Generation finished")

    def finish(self):
        """Drains whatever the window left unfinished."""
        if self.gen_iter and not self.gen_finished:
            for event in self.gen_iter:
                self.last_event = event
            self.gen_finished = True

    def run_loop(self):
        self.gen_iter = self.generator.run() if self.generator else None

        while self.running:
            self.handle_input()

            if self.gen_iter and not self.gen_finished:
                self.step(self.gen_iter)

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(config.TARGET_FPS)

        self.recorder.stop()
        pygame.quit()
