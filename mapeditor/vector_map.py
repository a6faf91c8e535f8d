import json
import os
from config import *
from mapeditor.helpers import create
from mapeditor.poly import Poly, parse_vertices


class MapFormatError(ValueError):
    """Raised when a map file can't be turned into polys, or a map can't be saved."""


class VectorMap:
    """A named collection of polys, stored as JSON in the map directory."""

    def __init__(self, editable=True, map_dir=MAP_DIR):
        self.editable = editable
        self.map_dir = map_dir
        self.name = ""
        self.polys = []

    def new_poly(self):
        poly = Poly()
        self.polys.append(poly)
        return poly

    def path_for(self, name):
        # Maps live directly in the map directory
        if (not name or name in ('.', '..') or os.sep in name
                or (os.altsep and os.altsep in name)):
            raise MapFormatError(f"Invalid map name {name!r}")
        if not name.endswith(MAP_EXT):
            name += MAP_EXT
        return os.path.join(self.map_dir, name)

    def open(self, name):
        """
        Opens the map called `name`, replacing the current polys.
        A map that doesn't exist yet starts out empty, so it can be
        created by saving. On any error the current map is left as it was.
        """
        filepath = self.path_for(name)
        if not os.path.exists(filepath):
            polys = []
            print(f"New map '{name}'")
        else:
            with open(filepath, 'r') as f:
                try:
                    map_data = json.load(f)
                except json.JSONDecodeError as e:
                    raise MapFormatError(f"Could not decode JSON from '{filepath}': {e}") from e
            polys = self.polys_from_data(map_data)
            print(f"Map loaded from {filepath}")

        self.name = name
        self.polys = polys
        return self.polys

    def polys_from_data(self, map_data):
        if not isinstance(map_data, dict) or not isinstance(map_data.get("polys"), list):
            raise MapFormatError("Invalid map format: expected a 'polys' list")

        polys = []
        for i, entry in enumerate(map_data["polys"]):
            try:
                poly = create(entry.get("type", "Poly"), parse_vertices(entry["vertices"]))
            except (ImportError, AttributeError, KeyError, TypeError, ValueError) as e:
                raise MapFormatError(f"Invalid poly {i}: {e}") from e
            if not isinstance(poly, Poly):
                raise MapFormatError(f"Invalid poly {i}: {entry.get('type')} is not a poly type")
            polys.append(poly)
        return polys

    def to_data(self):
        return {"name": self.name,
                "polys": [poly.to_data() for poly in self.polys]}

    def save(self):
        if not self.editable:
            raise MapFormatError(f"Map '{self.name}' is read only")
        if not self.name:
            raise MapFormatError("Map has no name, can't save")

        os.makedirs(self.map_dir, exist_ok=True)
        filepath = self.path_for(self.name)
        with open(filepath, 'w') as f:
            json.dump(self.to_data(), f, indent=4)
        print(f"Map saved to {filepath}")
        return filepath

    def draw(self, screen, camera, open_poly=None):
        view = camera.view_rect(screen.get_size())
        for poly in self.polys:
            bounds = poly.bounds()
            # Empty polys and polys out of view are skipped
            if bounds is None or not view.colliderect(bounds):
                continue
            poly.draw(screen, camera, open_poly)
