import importlib
import math
import re

import pygame


def radians_to_vec2(angle):
    """Unit vector pointing along `angle` (radians, 0 = right)."""
    return pygame.Vector2(math.cos(angle), math.sin(angle))

def radians_to_cartesian(angle):
    # Same as above, but a plain tuple
    return (math.cos(angle), math.sin(angle))

def radians_to_degrees(angle):
    return angle * (180.0 / math.pi)

def degrees_to_radians(angle):
    return angle / (180.0 / math.pi)

def radians_to_screen_angle(angle):
    """
    Converts radians to a screen angle in degrees, where 0 points up
    and angles grow clockwise.
    """
    return radians_to_degrees(angle) + 90

def screen_angle_to_radians(angle):
    return degrees_to_radians(angle - 90)

def distance_to(dx, dy):
    return math.sqrt(dx ** 2 + dy ** 2)

def to_vec2(text):
    """
    Parses a space separated "x y" string into a Vector2.
    Extra components are ignored.
    """
    parts = text.split()
    if len(parts) < 2:
        raise ValueError(f"Expected 'x y', got {text!r}")
    return pygame.Vector2(float(parts[0]), float(parts[1]))

def underscore(name):
    """Makes an underscored, lowercase form from a CamelCase name."""
    name = str(name).replace("::", "/")
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", name)
    return name.replace("-", "_").lower()

def create(item, *args):
    """
    Instantiates the class `item` from the module of the same name
    (underscored) in this package, eg. create("VectorMap") builds a
    mapeditor.vector_map.VectorMap.
    """
    module = importlib.import_module(f"{__package__}.{underscore(item)}")
    return getattr(module, str(item))(*args)
