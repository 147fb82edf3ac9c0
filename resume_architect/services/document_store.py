"""Service for persisting the generated document history."""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Tuple
from pydantic import TypeAdapter, ValidationError
from pydantic_settings import BaseSettings
from resume_architect.models.resume_models import GeneratedDocument

logger = logging.getLogger(__name__)

DEFAULT_SLOT = "ai-resume-docs"

_history_adapter = TypeAdapter(List[GeneratedDocument])


class StorageSettings(BaseSettings):
    """Local storage configuration settings."""

    resume_architect_data_dir: Path = Path(
        os.getenv("RESUME_ARCHITECT_DATA_DIR", str(Path.home() / ".resume_architect"))
    )

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


class DocumentStore:
    """Append-only, newest-first history of generated documents."""

    def __init__(self, storage_dir: Optional[Path] = None, slot: str = DEFAULT_SLOT):
        """
        Initialize the document store and load any persisted history.

        Args:
            storage_dir: Directory holding the history file. Defaults to the
                configured data directory.
            slot: Name of the storage slot (file stem)
        """
        if storage_dir is None:
            storage_dir = StorageSettings().resume_architect_data_dir
        self.storage_dir = Path(storage_dir)
        self.path = self.storage_dir / f"{slot}.json"
        self._lock = asyncio.Lock()
        self._history: List[GeneratedDocument] = self._read_persisted()

    @property
    def history(self) -> Tuple[GeneratedDocument, ...]:
        """Current history, newest first."""
        return tuple(self._history)

    def load_all(self) -> List[GeneratedDocument]:
        """
        Reload the history from persisted state.

        Returns:
            List[GeneratedDocument]: Documents, newest first. Empty if nothing
                was persisted or the persisted state cannot be parsed.
        """
        self._history = self._read_persisted()
        return list(self._history)

    def select(self, document_id: str) -> Optional[GeneratedDocument]:
        """
        Look up a document by its resume id.

        Args:
            document_id: Resume id

        Returns:
            Optional[GeneratedDocument]: The document, or None if not found
        """
        for document in self._history:
            if document.document_id == document_id:
                return document
        return None

    async def append(self, document: GeneratedDocument) -> List[GeneratedDocument]:
        """
        Insert a document at the head of the history and persist it.

        Appends are serialized so each write reflects every completed append.

        Args:
            document: Newly generated document

        Returns:
            List[GeneratedDocument]: Updated history, newest first
        """
        async with self._lock:
            history = await asyncio.to_thread(self._prepend_persisted, document)
            self._history = history
        logger.info("Stored document %s (%d in history)", document.document_id, len(history))
        return list(history)

    def _prepend_persisted(self, document: GeneratedDocument) -> List[GeneratedDocument]:
        history = [document, *self._read_persisted()]
        self._write_persisted(history)
        return history

    def _read_persisted(self) -> List[GeneratedDocument]:
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
            return _history_adapter.validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning("Ignoring unreadable document history at %s: %s", self.path, e)
            return []

    def _write_persisted(self, history: List[GeneratedDocument]) -> None:
        payload = _history_adapter.dump_python(history, mode="json", by_alias=True)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self.storage_dir, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
