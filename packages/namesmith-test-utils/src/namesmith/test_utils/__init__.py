__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .bus import SpyBus
from .needle import MockNeedle
from .workspace import ProjectFactory
from .helpers import make_function

__all__ = ["SpyBus", "MockNeedle", "ProjectFactory", "make_function"]
