import math
import pygame
import numpy as np
from config import *
from mapeditor.helpers import to_vec2


class Poly:
    def __init__(self, vertices=()):
        self.vertices = [pygame.Vector2(v) for v in vertices]

    def add_vertex(self, x, y):
        self.vertices.append(pygame.Vector2(x, y))

    def pop_vertex(self):
        if not self.vertices:
            return None
        return self.vertices.pop()

    def is_closed_shape(self):
        return len(self.vertices) > 2

    def as_array(self):
        """Vertices as an (N, 2) float array."""
        if not self.vertices:
            return np.zeros((0, 2))
        return np.array([(v.x, v.y) for v in self.vertices], dtype=float)

    def area(self):
        # Shoelace formula
        if not self.is_closed_shape():
            return 0.0
        pts = self.as_array()
        x, y = pts[:, 0], pts[:, 1]
        return 0.5 * abs(np.dot(x, np.roll(y, 1)) - np.dot(y, np.roll(x, 1)))

    def bounds(self):
        """World-space bounding rect, at least 1x1 so it can collide."""
        if not self.vertices:
            return None
        pts = self.as_array()
        min_x, min_y = np.floor(pts.min(axis=0))
        max_x, max_y = np.ceil(pts.max(axis=0))
        return pygame.Rect(int(min_x), int(min_y),
                           int(max_x - min_x) + 1, int(max_y - min_y) + 1)

    def draw(self, screen, camera, open_poly=None):
        if not self.vertices:
            return

        is_open = self is open_poly
        if is_open:
            color = LINE_ACTIVE
        elif self.is_closed_shape():
            color = LINE_INACTIVE
        else:
            color = LINE_ERROR

        points = [camera.to_screen(v) for v in self.vertices]
        for start, end in zip(points, points[1:]):
            pygame.draw.line(screen, color, start, end, 2)
        # The closing edge of an open poly is drawn by the editor as a preview
        if not is_open and self.is_closed_shape():
            pygame.draw.line(screen, color, points[-1], points[0], 2)

        # Vertices go over the lines
        for point in points:
            marker = pygame.Rect(0, 0, VERTEX_SIZE * 2, VERTEX_SIZE * 2)
            marker.center = (int(point.x), int(point.y))
            pygame.draw.rect(screen, WHITE, marker, 1)

    def to_data(self):
        return {"type": type(self).__name__,
                "vertices": [[v.x, v.y] for v in self.vertices]}

    @classmethod
    def from_data(cls, data):
        return cls(parse_vertices(data.get("vertices", [])))


def parse_vertices(raw):
    vertices = []
    for vertex in raw:
        # Older maps store vertices as "x y" strings
        if isinstance(vertex, str):
            vertex = to_vec2(vertex)
        else:
            x, y = vertex
            vertex = pygame.Vector2(float(x), float(y))
        # json happily reads NaN and Infinity; bounds() needs values a Rect can hold
        if not all(math.isfinite(c) and abs(c) <= MAX_COORD for c in vertex):
            raise ValueError(f"Vertex out of range: {tuple(vertex)}")
        vertices.append(vertex)
    return vertices
