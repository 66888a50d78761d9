from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class MediaFile:
    """
    Entity representing a media file on the filesystem.
    Encapsulates path validation.
    """
    path: Path

    def __post_init__(self):
        if str(self.path).strip() == "." or str(self.path).strip() == "":
             raise ValueError("File path cannot be empty.")

    def exists(self) -> bool:
        return self.path.exists()
