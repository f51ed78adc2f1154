"""
Plain-text parameter files, one per network id.

Each file holds one decimal scalar per line, in Network.parameters() order.
"""

from pathlib import Path
from typing import List, Optional, Sequence

from . import config as cfg


class ParameterStore:
    """
    Directory of saved networks keyed by id.

    Args:
        directory: Where parameter files live (created on first write)
        pattern: File name with an {id} placeholder
    """

    def __init__(self, directory=cfg.STORE_DIR, pattern: str = cfg.PARAMETER_FILE):
        self.directory = Path(directory)
        self.pattern = pattern

    def __repr__(self) -> str:
        return f"ParameterStore({str(self.directory)!r})"

    def path_for(self, network_id: int) -> Path:
        return self.directory / self.pattern.format(id=network_id)

    def exists(self, network_id: int) -> bool:
        return self.path_for(network_id).exists()

    def write(self, network_id: int, values: Sequence[float]) -> Path:
        """Overwrite the slot for network_id."""
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(network_id)
        with open(path, 'w') as f:
            for value in values:
                f.write(f"{float(value)!r}\n")
        return path

    def read(self, network_id: int) -> Optional[List[float]]:
        """Values saved for network_id, or None if nothing was saved."""
        path = self.path_for(network_id)
        if not path.exists():
            return None
        with open(path) as f:
            return [float(line) for line in f if line.strip()]

    def remove(self, network_id: int) -> None:
        path = self.path_for(network_id)
        if path.exists():
            path.unlink()
