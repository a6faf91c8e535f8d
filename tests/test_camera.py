from collections import defaultdict

import pygame

from config import CAMERA_SPEED
from mapeditor.camera import Camera


def held(*keys):
    pressed = defaultdict(bool)
    for key in keys:
        pressed[key] = True
    return pressed


def test_arrow_keys_scroll_by_speed():
    camera = Camera()
    camera.update(held(pygame.K_RIGHT, pygame.K_DOWN))
    assert (camera.x, camera.y) == (CAMERA_SPEED, CAMERA_SPEED)
    camera.update(held(pygame.K_LEFT))
    camera.update(held(pygame.K_LEFT))
    assert camera.x == -CAMERA_SPEED
    camera.update(held(pygame.K_UP))
    assert camera.y == 0


def test_opposite_keys_cancel():
    camera = Camera(5, 5)
    camera.update(held(pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN))
    assert (camera.x, camera.y) == (5, 5)


def test_no_keys_no_movement():
    camera = Camera()
    camera.update(held())
    assert (camera.x, camera.y) == (0, 0)


def test_world_and_screen_coordinates():
    camera = Camera(100, -20)
    assert camera.to_world((10, 10)) == pygame.Vector2(110, -10)
    assert camera.to_screen((110, -10)) == pygame.Vector2(10, 10)
    camera.pan(-100, 20)
    assert camera.to_world((3, 4)) == pygame.Vector2(3, 4)


def test_view_rect_follows_camera():
    camera = Camera(30, 40)
    assert camera.view_rect((640, 480)) == pygame.Rect(30, 40, 640, 480)
