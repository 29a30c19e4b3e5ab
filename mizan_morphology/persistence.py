"""
Flat-file definition storage.

Reads the root, scheme and transformation files as UTF-8 lines and rewrites
the scheme and transformation files when definitions change. The engine
itself never opens files; it only hands line lists to this class.
"""

import logging
from pathlib import Path
from typing import Iterable, List

from .errors import PersistenceError

logger = logging.getLogger(__name__)


class DefinitionFiles:
    """
    Definition files inside one data directory.

    Usage:
        files = DefinitionFiles(Path("data"))
        lines = files.read_schemes()
        files.write_schemes(["فاعل={1}ا{2}{3}"])
    """

    def __init__(self, data_dir: Path, roots_file: str = "racines.txt",
                 schemes_file: str = "schemes.txt",
                 transformations_file: str = "transformations.txt"):
        self.data_dir = Path(data_dir)
        self.roots_path = self.data_dir / roots_file
        self.schemes_path = self.data_dir / schemes_file
        self.transformations_path = self.data_dir / transformations_file

    @classmethod
    def from_config(cls, cfg) -> 'DefinitionFiles':
        return cls(cfg.data_dir, cfg.roots_file, cfg.schemes_file, cfg.transformations_file)

    # =========================================================================
    # READING
    # =========================================================================

    def read_roots(self) -> List[str]:
        return self._read(self.roots_path)

    def read_schemes(self) -> List[str]:
        return self._read(self.schemes_path)

    def read_transformations(self) -> List[str]:
        return self._read(self.transformations_path)

    def _read(self, path: Path) -> List[str]:
        if not path.exists():
            logger.warning(f"Definition file not found: {path}")
            return []
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read().splitlines()
        except OSError as e:
            raise PersistenceError(f"Cannot read {path}: {e}", path=str(path)) from e

    # =========================================================================
    # WRITING
    # =========================================================================

    def write_roots(self, lines: Iterable[str]) -> None:
        self._write(self.roots_path, lines)

    def write_schemes(self, lines: Iterable[str]) -> None:
        self._write(self.schemes_path, lines)

    def write_transformations(self, lines: Iterable[str]) -> None:
        self._write(self.transformations_path, lines)

    def _write(self, path: Path, lines: Iterable[str]) -> None:
        lines = list(lines)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8', newline='\n') as f:
                for line in lines:
                    f.write(line + '\n')
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise PersistenceError(f"Cannot write {path}: {e}", path=str(path)) from e
        logger.info(f"Wrote {len(lines)} lines to {path}")
