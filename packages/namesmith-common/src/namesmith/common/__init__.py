__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from pathlib import Path

from namesmith.needle import needle
from .messaging.bus import MessageBus
from .adapters.yaml_adapter import YamlAdapter

# --- Composition root for shared services ---

# Packaged message templates have the lowest precedence; the project root
# (and its .namesmith/needle overrides) is searched after them.
needle.add_root(Path(__file__).parent / "assets")

bus = MessageBus(needle_instance=needle)

__all__ = ["bus", "needle", "MessageBus", "YamlAdapter"]
