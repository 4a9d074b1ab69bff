"""
TapCount Persistence Layer - JSON File Backend

Stores the counter as a pretty-printed JSON object ``{"count": N}`` in a
single file. Writes go to a temporary file in the same directory which then
replaces the target, so readers never see a partial document. Last write
wins; there is no file locking.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from ..core.counter import Counter
from .base import CounterStore, StoreWriteError

logger = logging.getLogger(__name__)


class JsonFileStore(CounterStore):
    """
    File-backed counter store.

    ``read`` never raises: a missing file, unreadable file, malformed JSON or
    missing ``count`` field all read as 0. ``write`` replaces the whole file.
    """

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def read(self) -> int:
        try:
            raw = self.path.read_text(encoding=self.encoding)
        except FileNotFoundError:
            return 0
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read counter file {self.path}: {e}")
            return 0

        # ValueError covers JSONDecodeError and integers past the digit limit
        try:
            payload = json.loads(raw or "{}")
        except (ValueError, RecursionError) as e:
            logger.warning(f"Ignoring malformed counter file {self.path}: {type(e).__name__}")
            return 0

        return Counter.from_payload(payload).count

    def write(self, count: int) -> None:
        counter = Counter(count=self._validate(count))
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding=self.encoding,
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(counter.to_json())
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None:
                self._discard(tmp_name)
            logger.error(f"Failed to write counter file {self.path}: {e}")
            raise StoreWriteError(f"could not write {self.path}") from e

    def exists(self) -> bool:
        return self.path.is_file()

    @staticmethod
    def _discard(tmp_name: str) -> None:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove temporary file {tmp_name}: {e}")

    def __repr__(self) -> str:
        return f"JsonFileStore({str(self.path)!r})"
