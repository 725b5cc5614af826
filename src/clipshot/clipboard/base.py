from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ClipboardContent:
    """What the host clipboard currently holds, as far as we care."""
    file: Optional[str] = None
    text: Optional[str] = None


class ClipboardReader(ABC):

    @abstractmethod
    def read(self) -> ClipboardContent:
        pass
