import pygame
from config import *


class TextField:
    """
    Single line text input drawn at the top of the window.

    The caret and the selection start are indexes into `text`; when they are
    equal there is no selection.
    """

    def __init__(self, default_text=TEXT_DEFAULT, x=10, y=10, width=None, font=None):
        self.font = font or pygame.font.SysFont(None, FONT_SIZE)
        self.x, self.y = x, y
        self.width = width if width is not None else WIDTH - TEXT_PADDING * 4
        self.height = self.font.get_height()

        self.default_text = default_text
        self.active = False
        self.text = default_text

    @property
    def text(self):
        return self._text

    @text.setter
    def text(self, value):
        self._text = value
        self.caret_pos = self.selection_start = len(value)

    @property
    def rect(self):
        return pygame.Rect(self.x - TEXT_PADDING, self.y - TEXT_PADDING,
                           self.width + TEXT_PADDING * 2, self.height + TEXT_PADDING * 2)

    def select(self):
        self.active = True
        if self.text == self.default_text:
            self.text = ''

    def deselect(self):
        self.active = False
        if self.text == '':
            self.text = self.default_text

    def under_point(self, mouse_x, mouse_y):
        """Hit-test for selecting the field with the mouse."""
        return (self.x - TEXT_PADDING < mouse_x < self.x + self.width + TEXT_PADDING and
                self.y - TEXT_PADDING < mouse_y < self.y + self.height + TEXT_PADDING)

    def has_selection(self):
        return self.caret_pos != self.selection_start

    def _delete_selection(self):
        start = min(self.caret_pos, self.selection_start)
        end = max(self.caret_pos, self.selection_start)
        self._text = self._text[:start] + self._text[end:]
        self.caret_pos = self.selection_start = start

    def insert(self, value):
        if self.has_selection():
            self._delete_selection()
        pos = self.caret_pos
        self._text = self._text[:pos] + value + self._text[pos:]
        self.caret_pos = self.selection_start = pos + len(value)

    def _move_caret(self, pos, extend):
        self.caret_pos = max(0, min(len(self._text), pos))
        if not extend:
            self.selection_start = self.caret_pos

    def handle_event(self, event):
        """Returns True if the event was used by the field."""
        if not self.active:
            return False

        if event.type == pygame.TEXTINPUT:
            self.insert(event.text)
            return True

        if event.type != pygame.KEYDOWN:
            return False

        extend = bool(getattr(event, 'mod', 0) & pygame.KMOD_SHIFT)
        if event.key == pygame.K_BACKSPACE:
            if self.has_selection():
                self._delete_selection()
            elif self.caret_pos > 0:
                self.selection_start = self.caret_pos - 1
                self._delete_selection()
        elif event.key == pygame.K_DELETE:
            if self.has_selection():
                self._delete_selection()
            elif self.caret_pos < len(self._text):
                self.selection_start = self.caret_pos + 1
                self._delete_selection()
        elif event.key == pygame.K_LEFT:
            self._move_caret(self.caret_pos - 1, extend)
        elif event.key == pygame.K_RIGHT:
            self._move_caret(self.caret_pos + 1, extend)
        elif event.key == pygame.K_HOME:
            self._move_caret(0, extend)
        elif event.key == pygame.K_END:
            self._move_caret(len(self._text), extend)
        else:
            return False
        return True

    def draw(self, screen):
        # Background changes depending on whether the field is selected
        background = TEXT_ACTIVE_COLOR if self.active else TEXT_INACTIVE_COLOR
        box = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        box.fill(background)
        screen.blit(box, self.rect.topleft)

        pos_x = self.x + self.font.size(self.text[:self.caret_pos])[0]
        sel_x = self.x + self.font.size(self.text[:self.selection_start])[0]

        if sel_x != pos_x:
            selection = pygame.Surface((abs(pos_x - sel_x), self.height), pygame.SRCALPHA)
            selection.fill(TEXT_SELECTION_COLOR)
            screen.blit(selection, (min(sel_x, pos_x), self.y))

        if self.active:
            pygame.draw.line(screen, TEXT_CARET_COLOR, (pos_x, self.y), (pos_x, self.y + self.height))

        text_surface = self.font.render(self.text, True, WHITE)
        screen.blit(text_surface, (self.x, self.y))
