"""
Device-local key/value preference store.

Holds the session and locale strings of one user in a single namespace
file. Every mutation rewrites the file atomically before returning. All
operations on a namespace, from any number of store instances, are
serialized by one lock per file so concurrent writers never lose updates.
"""

import json
import os
import tempfile
import threading
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

import structlog

from .config import settings

logger = structlog.get_logger(__name__)


class PreferenceKey(str, Enum):
    """Keys allowed in the preference namespace."""

    ID = "ID"
    NAME = "NAME"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    CURRENCY = "CURRENCY"
    IS_LOGGED_IN = "IS_LOGGED_IN"
    FAV_LIST_ID = "FavListID"
    CART_LIST_ID = "CartListID"
    LANGUAGE = "Language"
    LANGUAGE_CODE = "LanguageCode"
    ONBOARDING_SHOWN = "ONBOARDING_SHOWN"


# One lock per namespace file, shared by every store opened on it
_path_locks: Dict[Path, "threading.RLock"] = {}
_path_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    key = path.resolve()
    with _path_locks_guard:
        lock = _path_locks.get(key)
        if lock is None:
            lock = _path_locks[key] = threading.RLock()
        return lock


class PreferenceStore:
    """
    String preferences persisted as one JSON object per namespace.

    The file is the only state: every operation re-reads it under the
    namespace lock, so several stores opened on one namespace never
    overwrite each other's keys.

    Attributes:
        path: File backing the namespace
    """

    def __init__(
        self,
        directory: Optional[Union[str, Path]] = None,
        namespace: Optional[str] = None,
    ) -> None:
        """
        Open (or lazily create) a preference namespace.

        Args:
            directory: Directory for the namespace file (defaults to settings)
            namespace: Namespace name (defaults to settings)
        """
        directory = Path(directory or settings.PREFERENCES_DIR)
        namespace = namespace or settings.PREFERENCES_NAMESPACE
        self.path = directory / f"{namespace}.json"
        self._lock = _lock_for(self.path)

    def _load(self) -> Dict[str, str]:
        """Read the namespace file; a missing or corrupt file reads as empty."""
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError) as error:
            logger.warning(
                "preferences_unreadable",
                path=str(self.path),
                error=str(error),
            )
            return {}
        if not isinstance(data, dict):
            logger.warning("preferences_malformed", path=str(self.path))
            return {}
        return {str(key): str(value) for key, value in data.items()}

    def _persist(self, values: Dict[str, str]) -> None:
        """Atomically replace the namespace file with ``values``."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.stem}-", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(values, handle, ensure_ascii=False, sort_keys=True)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(temp_path, self.path)
        except BaseException:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def save(self, key: Union[PreferenceKey, str], value: str) -> None:
        """
        Store a value, overwriting any previous one.

        Args:
            key: Preference key, or its stored name
            value: String value

        Raises:
            ValueError: If the key is not a known preference key
            TypeError: If the value is not a string
        """
        self.save_many({key: value})

    def save_many(self, values: Mapping[Union[PreferenceKey, str], str]) -> None:
        """
        Store several values in one atomic write.

        Either every value is stored or, if validation fails, none is.

        Raises:
            ValueError: If a key is not a known preference key
            TypeError: If a value is not a string
        """
        updates: Dict[str, str] = {}
        for key, value in values.items():
            key = PreferenceKey(key)
            if not isinstance(value, str):
                raise TypeError(
                    f"Preference values must be strings, got {type(value).__name__}"
                )
            updates[key.value] = value

        with self._lock:
            self._persist({**self._load(), **updates})
        logger.debug("preferences_saved", keys=sorted(updates))

    def retrieve(self, key: Union[PreferenceKey, str], default: str) -> str:
        """
        Read a value.

        Args:
            key: Preference key, or its stored name
            default: Returned when the key has no stored value

        Raises:
            ValueError: If the key is not a known preference key
        """
        key = PreferenceKey(key)
        with self._lock:
            return self._load().get(key.value, default)

    def clear(self) -> None:
        """Remove every key in the namespace."""
        with self._lock:
            self._persist({})
        logger.info("preferences_cleared", path=str(self.path))
