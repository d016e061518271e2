"""Session persistence for pyplayground."""

from pyplayground.session.examples import EXAMPLES, is_example_code
from pyplayground.session.storage import FileStorage, KeyValueStorage, MemoryStorage
from pyplayground.session.store import SavedSession, SessionStore

__all__ = [
    "EXAMPLES",
    "FileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "SavedSession",
    "SessionStore",
    "is_example_code",
]
