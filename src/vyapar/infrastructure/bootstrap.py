"""Composition root: the one module that picks concrete adapters."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from vyapar.infrastructure.persistence.document_store import JsonDocumentStore
from vyapar.infrastructure.persistence.document_unit_of_work import DocumentUnitOfWork

DATA_DIR_ENV = "VYAPAR_DATA_DIR"
STORE_FILE_NAME = "vyapar.json"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(override: str | Path | None = None) -> Path:
    if override:
        return Path(override)
    from_env = os.environ.get(DATA_DIR_ENV)
    return Path(from_env) if from_env else _DATA_DIR


def document_store(directory: str | Path | None = None) -> JsonDocumentStore:
    return JsonDocumentStore(data_dir(directory) / STORE_FILE_NAME)


def unit_of_work(directory: str | Path | None = None) -> DocumentUnitOfWork:
    return DocumentUnitOfWork(document_store(directory))


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
