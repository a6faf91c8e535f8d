import sys
import pygame
from config import *
from mapeditor.camera import Camera
from mapeditor.editor import MapEditor
from mapeditor.helpers import radians_to_vec2
from mapeditor.text_field import TextField

INPUT_MODE = 0 # Typing the map name
EDIT_MODE = 1 # Placing vertices


class MapEditorApp:
    def __init__(self, map_dir=MAP_DIR):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(CAPTION)
        pygame.mouse.set_visible(False) # We draw our own cursor
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, FONT_SIZE)
        self.running = True

        self.camera = Camera()
        self.mode = INPUT_MODE
        self.map_file = ''

        self.editor = MapEditor(map_dir)
        self.input = TextField(TEXT_DEFAULT, font=self.font)

    def close(self):
        self.running = False

    def open_map(self, name):
        if not name:
            print("No map name given.")
            return False
        try:
            self.editor.map.open(name)
        except (OSError, ValueError) as e:
            print(f"Error loading map: {e}")
            return False
        self.map_file = name
        self.editor.reset()
        pygame.display.set_caption(f"{CAPTION} - {name}")
        return True

    def save_map(self):
        try:
            self.editor.map.save()
        except (OSError, ValueError) as e:
            print(f"Error saving map: {e}")
            return False
        return True

    def update(self):
        # Arrow keys belong to the caret while typing
        if self.input.active:
            return
        self.camera.update(pygame.key.get_pressed())

    def button_down(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN:
            mouse_x, mouse_y = event.pos
        else:
            mouse_x, mouse_y = pygame.mouse.get_pos()
        key = event.key if event.type == pygame.KEYDOWN else None
        button = event.button if event.type == pygame.MOUSEBUTTONDOWN else None

        if self.mode == EDIT_MODE:
            if key == pygame.K_ESCAPE:
                self.close()
            elif button == 1:
                world = self.camera.to_world((mouse_x, mouse_y))
                self.editor.click(world.x, world.y)
            elif button == 3:
                self.editor.undo_line()
            elif key == pygame.K_c:
                self.editor.close_poly()
            elif key == pygame.K_u:
                self.editor.undo_poly()
            elif key == pygame.K_s:
                self.save_map()
        elif self.mode == INPUT_MODE:
            if key == pygame.K_ESCAPE:
                # Escape isn't eaten by the text field; use it for deselecting
                if self.input.active:
                    self.input.deselect()
                else:
                    self.close()
            elif button == 1:
                if self.input.under_point(mouse_x, mouse_y):
                    self.input.select()
                else:
                    self.input.deselect()
            elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                name = self.input.text if self.input.active else self.map_file
                self.open_map(name)
                self.input.deselect()
            else:
                self.input.handle_event(event)

        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.mode = INPUT_MODE if self.mode == EDIT_MODE else EDIT_MODE

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
            elif event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                self.button_down(event)
            elif event.type == pygame.TEXTINPUT and self.mode == INPUT_MODE:
                self.input.handle_event(event)

    def draw_status(self):
        name = self.editor.map.name or "(no map)"
        mode = "EDIT" if self.mode == EDIT_MODE else "NAME"
        status = (f"{mode} | Map: {name} | Polys: {len(self.editor.map.polys)} | "
                  f"Camera: {self.camera.x}, {self.camera.y}")
        status_text = self.font.render(status, True, GREY)
        self.screen.blit(status_text, (10, HEIGHT - status_text.get_height() - 5))

    def draw_cursor(self, mouse_pos):
        tip = pygame.Vector2(mouse_pos)
        tail = tip + radians_to_vec2(CURSOR_ANGLE) * CURSOR_LENGTH
        pygame.draw.line(self.screen, MOUSE_COLORS[self.mode], tip, tail, 2)

    def draw(self):
        mouse_pos = pygame.mouse.get_pos()
        self.screen.fill(BLACK)
        self.editor.draw(self.screen, self.camera, mouse_pos)
        self.input.draw(self.screen)
        self.draw_status()
        self.draw_cursor(mouse_pos)

    def run(self):
        while self.running:
            self.handle_events()
            self.update()
            self.draw()

            pygame.display.flip()
            self.clock.tick(FPS)

        pygame.quit()


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    app = MapEditorApp()
    if argv:
        # Map name given on the command line, go straight to editing
        if app.open_map(argv[0]):
            app.mode = EDIT_MODE
    app.run()
