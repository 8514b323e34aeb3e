__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .memory import MemoryFunction, MemorySymbol
from .document import FunctionDocumentAdapter

__all__ = ["MemoryFunction", "MemorySymbol", "FunctionDocumentAdapter"]
