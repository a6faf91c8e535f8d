from .app import MapEditorApp
from .camera import Camera
from .editor import MapEditor
from .poly import Poly
from .text_field import TextField
from .vector_map import VectorMap, MapFormatError

__all__ = ['MapEditorApp', 'Camera', 'MapEditor', 'Poly', 'TextField', 'VectorMap', 'MapFormatError']
