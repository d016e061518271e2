"""
Session state: the buffer and dialect, persisted across restarts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pyplayground._types import Dialect
from pyplayground.session.examples import EXAMPLES
from pyplayground.session.storage import KeyValueStorage

logger = logging.getLogger(__name__)

CODE_KEY = "playground-code"
LANGUAGE_KEY = "playground-language"


@dataclass(frozen=True)
class SavedSession:
    """What ``load`` hands back to the host."""

    source_text: str
    dialect: Dialect


class SessionStore:
    """
    Mirrors the live buffer and dialect into a key-value storage.

    Args:
        storage: Backend holding the two session keys.
        default_dialect: Dialect assumed when nothing (or garbage) was saved.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        default_dialect: Dialect = Dialect.TYPED,
    ) -> None:
        self._storage = storage
        self._default_dialect = default_dialect

    def save(self, source_text: str, dialect: Dialect) -> None:
        """Persist the session. Storage failures are logged, never raised."""
        try:
            self._storage.set(CODE_KEY, source_text)
            self._storage.set(LANGUAGE_KEY, dialect.value)
        except OSError:
            logger.warning("Could not persist session", exc_info=True)

    def load(self) -> SavedSession:
        """Return the saved session, or the canned example when none exists."""
        dialect = self._default_dialect
        saved_language = self._storage.get(LANGUAGE_KEY)
        if saved_language is not None:
            try:
                dialect = Dialect(saved_language)
            except ValueError:
                logger.warning("Unknown saved dialect %r, using %s", saved_language, dialect.value)

        saved_code = self._storage.get(CODE_KEY)
        if saved_code is None:
            return SavedSession(source_text=EXAMPLES[dialect], dialect=dialect)
        return SavedSession(source_text=saved_code, dialect=dialect)
