import pygame
from config import *
from mapeditor.vector_map import VectorMap


# --- Editor Class ---
class MapEditor:
    """Holds the map and the poly currently being drawn (the open poly)."""

    def __init__(self, map_dir=MAP_DIR):
        self.map = VectorMap(True, map_dir)
        self.open_poly = None

    def click(self, x, y):
        # x, y are world coordinates
        if self.open_poly is None:
            self.open_poly = self.map.new_poly()
        self.open_poly.add_vertex(x, y)

    def undo_line(self):
        if self.open_poly is None:
            return
        self.open_poly.pop_vertex()
        if not self.open_poly.vertices:
            # Nothing left of it, forget the poly entirely
            if self.open_poly in self.map.polys:
                self.map.polys.remove(self.open_poly)
            self.open_poly = None

    def undo_poly(self):
        if not self.map.polys:
            return
        poly = self.map.polys.pop()
        if poly is self.open_poly:
            self.open_poly = None

    def close_poly(self):
        self.open_poly = None

    def reset(self):
        """Drops the open poly, eg. after a different map is opened."""
        self.open_poly = None

    def draw(self, screen, camera, mouse_pos):
        self.map.draw(screen, camera, self.open_poly)

        if self.open_poly is None or not self.open_poly.vertices:
            return

        vertices = self.open_poly.vertices
        first = camera.to_screen(vertices[0])
        last = camera.to_screen(vertices[-1])

        # Shape of the poly if you close it, only once it has more than two vertices
        if len(vertices) > 2:
            pygame.draw.line(screen, LINE_ACTIVE, first, last, 1)

        # From the last vertex to the mouse
        pygame.draw.line(screen, LINE_SELECTED, last, mouse_pos, 1)

        # From the first vertex to the mouse
        if len(vertices) > 1:
            pygame.draw.line(screen, LINE_SELECTED, first, mouse_pos, 1)
