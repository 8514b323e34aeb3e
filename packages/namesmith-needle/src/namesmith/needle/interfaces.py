from typing import Any, Dict, Protocol
from pathlib import Path


class FileHandler(Protocol):
    """
    Protocol for asset file handlers.
    """

    def match(self, path: Path) -> bool:
        """Returns True if this handler can read the given file."""
        ...

    def load(self, path: Path) -> Dict[str, Any]:
        """Reads the file and returns a flat mapping of message keys."""
        ...
