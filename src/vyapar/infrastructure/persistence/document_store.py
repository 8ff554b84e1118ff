"""JSON-file-backed document store.

Stands in for the managed document database the mobile app and admin
dashboard share.  Documents are plain dicts grouped into named
collections and addressed by string id; the whole store lives in one
JSON file so that a multi-collection batch can be replaced atomically.

Every read and write runs inside ``transaction()``.  The outermost
transaction holds a re-entrant lock, reloads the file, snapshots the
collections, and on exit either writes the file once (temp file +
``os.replace``) or restores the snapshot if the block raised.
"""

from __future__ import annotations

import copy
import json
import os
import threading
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from vyapar.domain.exceptions import StoreUnavailable

Document = dict
Collections = dict[str, dict[str, Document]]

PRODUCTS = "products"
OFFERS = "wholesalerProducts"
CART = "cart"
ORDERS = "orders"
NOTIFICATIONS = "notifications"
WHOLESALERS = "wholesaler"


class JsonDocumentStore:
    """Document store persisted to *file_path*, or kept in memory if None."""

    def __init__(self, file_path: Path | None = None) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._depth = 0
        self._dirty = False
        self._collections: Collections = {}
        self._ensure_file()

    # --- Transactions ---------------------------------------------------------

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            if self._depth:
                # nested: joins the outer transaction's commit / rollback
                self._depth += 1
                try:
                    yield
                finally:
                    self._depth -= 1
                return

            self._collections = self._read_file()
            snapshot = copy.deepcopy(self._collections)
            self._depth, self._dirty = 1, False
            try:
                yield
                if self._dirty:
                    self._write_file()
            except BaseException:
                self._collections = snapshot
                raise
            finally:
                self._depth, self._dirty = 0, False

    # --- Document access ------------------------------------------------------

    def get(self, collection: str, doc_id: str) -> Document | None:
        with self.transaction():
            doc = self._collections.get(collection, {}).get(doc_id)
            return copy.deepcopy(doc) if doc is not None else None

    def query(self, collection: str, **equals: object) -> list[tuple[str, Document]]:
        """Return ``(id, document)`` pairs whose fields equal *equals*, in insertion order."""
        with self.transaction():
            return [
                (doc_id, copy.deepcopy(doc))
                for doc_id, doc in self._collections.get(collection, {}).items()
                if all(doc.get(key) == value for key, value in equals.items())
            ]

    def put(self, collection: str, doc_id: str, doc: Document) -> None:
        with self.transaction():
            self._collections.setdefault(collection, {})[doc_id] = copy.deepcopy(doc)
            self._dirty = True

    def delete(self, collection: str, doc_id: str) -> None:
        with self.transaction():
            if self._collections.get(collection, {}).pop(doc_id, None) is not None:
                self._dirty = True

    @staticmethod
    def new_id() -> str:
        return uuid.uuid4().hex[:20]

    # --- File helpers ---------------------------------------------------------

    def _read_file(self) -> Collections:
        if self._file_path is None:
            return self._collections
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreUnavailable(f"Could not read {self._file_path}: {exc}") from exc

    def _write_file(self) -> None:
        if self._file_path is None:
            return
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            tmp_path.write_text(
                json.dumps(self._collections, indent=2) + "\n", encoding="utf-8"
            )
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            raise StoreUnavailable(f"Could not write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path is None or self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
        except OSError as exc:
            raise StoreUnavailable(f"Could not create {self._file_path}: {exc}") from exc
