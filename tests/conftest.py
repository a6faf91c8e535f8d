import os

# Headless pygame, must be set before the display is initialised
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from mapeditor import MapEditorApp


@pytest.fixture(scope="session", autouse=True)
def _pygame():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture()
def map_dir(tmp_path):
    return tmp_path / "maps"


@pytest.fixture()
def app(map_dir):
    return MapEditorApp(map_dir=str(map_dir))


def key_event(key, unicode='', mod=0):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=mod, unicode=unicode)


def click_event(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def text_event(text):
    return pygame.event.Event(pygame.TEXTINPUT, text=text)
