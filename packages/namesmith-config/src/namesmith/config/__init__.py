__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .loader import NamesmithConfig, load_config_from_path

__all__ = ["NamesmithConfig", "load_config_from_path"]
