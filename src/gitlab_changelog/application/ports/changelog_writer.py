from abc import ABC, abstractmethod


class ChangelogWriter(ABC):
    """Destination for the rendered changelog block."""

    @abstractmethod
    def write(self, content: str) -> None:
        pass
