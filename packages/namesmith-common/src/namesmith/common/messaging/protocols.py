from typing import Protocol


class Renderer(Protocol):
    """
    A renderer presents an already formatted message to the user.
    """

    def render(self, message: str, level: str) -> None:
        """
        Args:
            message: The fully resolved string to display.
            level: One of "debug", "info", "success", "warning", "error".
        """
        ...
