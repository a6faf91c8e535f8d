import pygame
from config import *


class Camera:
    """Scrolling is stored as the position of the top left corner of the screen."""

    def __init__(self, x=0, y=0, speed=CAMERA_SPEED):
        self.x = x
        self.y = y
        self.speed = speed

    def update(self, keys):
        # keys is anything indexable by key code, eg. pygame.key.get_pressed()
        if keys[pygame.K_LEFT]:
            self.x -= self.speed
        if keys[pygame.K_RIGHT]:
            self.x += self.speed
        if keys[pygame.K_UP]:
            self.y -= self.speed
        if keys[pygame.K_DOWN]:
            self.y += self.speed

    def pan(self, dx, dy):
        self.x += dx
        self.y += dy

    @property
    def offset(self):
        return pygame.Vector2(self.x, self.y)

    def to_world(self, pos):
        return pygame.Vector2(pos) + self.offset

    def to_screen(self, pos):
        return pygame.Vector2(pos) - self.offset

    def view_rect(self, size=(WIDTH, HEIGHT)):
        return pygame.Rect(self.x, self.y, size[0], size[1])
