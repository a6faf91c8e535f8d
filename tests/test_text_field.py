import pygame
import pytest

from config import TEXT_PADDING
from conftest import key_event, text_event
from mapeditor.text_field import TextField


@pytest.fixture()
def field():
    return TextField("Map Name?")


def test_starts_with_default_text(field):
    assert field.text == "Map Name?"
    assert not field.active
    assert field.caret_pos == field.selection_start == len("Map Name?")


def test_select_clears_default_and_deselect_restores_it(field):
    field.select()
    assert field.active
    assert field.text == ""
    field.deselect()
    assert not field.active
    assert field.text == "Map Name?"


def test_select_keeps_typed_text(field):
    field.select()
    field.handle_event(text_event("cave"))
    field.deselect()
    field.select()
    assert field.text == "cave"


def test_inactive_field_ignores_input(field):
    assert not field.handle_event(text_event("x"))
    assert field.text == "Map Name?"


def test_typing_and_deleting(field):
    field.select()
    for ch in "level1":
        assert field.handle_event(text_event(ch))
    assert field.text == "level1"
    field.handle_event(key_event(pygame.K_BACKSPACE))
    assert field.text == "level"
    field.handle_event(key_event(pygame.K_HOME))
    field.handle_event(key_event(pygame.K_DELETE))
    assert field.text == "evel"
    assert field.caret_pos == 0
    field.handle_event(key_event(pygame.K_BACKSPACE))
    assert field.text == "evel"


def test_shift_selection_is_replaced_by_typing(field):
    field.select()
    field.handle_event(text_event("forest"))
    field.handle_event(key_event(pygame.K_LEFT, mod=pygame.KMOD_SHIFT))
    field.handle_event(key_event(pygame.K_LEFT, mod=pygame.KMOD_SHIFT))
    field.handle_event(key_event(pygame.K_LEFT, mod=pygame.KMOD_SHIFT))
    assert field.has_selection()
    field.handle_event(text_event("um"))
    assert field.text == "forum"
    assert not field.has_selection()


def test_caret_movement_is_clamped(field):
    field.select()
    field.handle_event(text_event("ab"))
    field.handle_event(key_event(pygame.K_RIGHT))
    assert field.caret_pos == 2
    for _ in range(3):
        field.handle_event(key_event(pygame.K_LEFT))
    assert field.caret_pos == 0
    field.handle_event(key_event(pygame.K_END))
    assert field.caret_pos == 2


def test_return_and_escape_are_not_consumed(field):
    field.select()
    assert not field.handle_event(key_event(pygame.K_RETURN))
    assert not field.handle_event(key_event(pygame.K_ESCAPE))


def test_under_point(field):
    left = field.x - TEXT_PADDING
    assert not field.under_point(left, field.y)
    assert field.under_point(left + 1, field.y)
    assert field.under_point(field.x + field.width, field.y + field.height)
    assert not field.under_point(field.x, field.y + field.height + TEXT_PADDING)


def test_draw(field):
    screen = pygame.Surface((640, 480))
    field.draw(screen)
    field.select()
    field.handle_event(text_event("abc"))
    field.handle_event(key_event(pygame.K_HOME, mod=pygame.KMOD_SHIFT))
    field.draw(screen)
