"""Per-run registry of claimed destinations and collision resolution."""

import threading
from pathlib import Path, PurePosixPath
from typing import Iterable, Set

from loguru import logger

from id3mover.config.settings import COLLISION_FIRST_COUNTER, COLLISION_SUFFIX_FORMAT
from id3mover.models.track import DestinationPath


class ClaimedPathSet:
    """
    Destinations already assigned during this run.

    All reads and writes go through one lock, so concurrent callers
    of resolve() never receive the same destination.
    """

    def __init__(
        self,
        initial: Iterable[DestinationPath] = (),
        case_insensitive: bool = False,
        suffix_format: str = COLLISION_SUFFIX_FORMAT,
        first_counter: int = COLLISION_FIRST_COUNTER,
    ) -> None:
        self.case_insensitive = case_insensitive
        self.suffix_format = suffix_format
        self.first_counter = first_counter
        self._lock = threading.Lock()
        self._claimed: Set[str] = set()
        for path in initial:
            self._claimed.add(self._key(path))

    @classmethod
    def from_directory(cls, output_root: Path, **kwargs) -> "ClaimedPathSet":
        """
        Seed a set with every file already present under output_root.

        Args:
            output_root: Output tree to scan; may not exist yet.
            **kwargs: Passed to the constructor.

        Returns:
            ClaimedPathSet containing the existing files.
        """
        existing = []
        if output_root.is_dir():
            for entry in sorted(output_root.rglob("*")):
                if entry.is_dir():
                    continue
                relative = PurePosixPath(entry.relative_to(output_root).as_posix())
                existing.append(DestinationPath.from_relative(relative))
        logger.debug(f"{len(existing)} existing files claimed under {output_root}")
        return cls(existing, **kwargs)

    def _key(self, path: DestinationPath) -> str:
        key = str(path)
        return key.casefold() if self.case_insensitive else key

    def __contains__(self, path: DestinationPath) -> bool:
        with self._lock:
            return self._key(path) in self._claimed

    def __len__(self) -> int:
        with self._lock:
            return len(self._claimed)

    def claim(self, path: DestinationPath) -> bool:
        """
        Claim path if it is free.

        Returns:
            True if the path was claimed, False if it was already taken.
        """
        key = self._key(path)
        with self._lock:
            if key in self._claimed:
                return False
            self._claimed.add(key)
            return True

    def resolve(self, path: DestinationPath) -> DestinationPath:
        """
        Reserve a unique destination derived from path.

        The first caller for a given path gets it unchanged; later
        callers get "name (2).ext", "name (3).ext" and so on.

        Args:
            path: Proposed destination.

        Returns:
            The destination now reserved for the caller.
        """
        with self._lock:
            key = self._key(path)
            if key not in self._claimed:
                self._claimed.add(key)
                return path

            counter = self.first_counter
            while True:
                candidate = path.with_counter(counter, self.suffix_format)
                key = self._key(candidate)
                if key not in self._claimed:
                    self._claimed.add(key)
                    logger.debug(f"Collision on {path}, using {candidate}")
                    return candidate
                counter += 1
