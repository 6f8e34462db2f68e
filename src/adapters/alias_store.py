"""Saved game aliases, persisted as one JSON object.

File format: ``{"<alias name>": "<game identifier>", ...}``, pretty-printed,
no schema version. Every read re-parses the whole file and every save
rewrites it.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from core.domain.errors import AliasStoreError
from core.interfaces.alias_store import AliasStore

logger = logging.getLogger(__name__)


class JsonAliasStore(AliasStore):
    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, str]:
        """Return every saved alias.

        A missing, empty, unreadable or malformed file is an empty store; the
        problem is logged, never raised.
        """

        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.warning("Could not read alias file %s: %s", self._path, exc)
            return {}

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error("Error parsing saved games in %s, treating as empty: %s", self._path, exc)
            return {}

        if not isinstance(data, dict):
            logger.error("Alias file %s does not hold a JSON object, treating as empty", self._path)
            return {}

        return {
            str(name): str(identifier)
            for name, identifier in data.items()
            if isinstance(identifier, (str, int)) and not isinstance(identifier, bool)
        }

    def save(self, name: str, identifier: str) -> None:
        aliases = self.load()
        aliases[name] = identifier
        self._write(aliases)
        logger.info("Saved alias %r -> %s", name, identifier)

    def resolve(self, token: str) -> str:
        return self.load().get(token) or token

    def _write(self, aliases: dict[str, str]) -> None:
        # Temp file + rename: readers see the old or the new file, never half.
        tmp = self._path.with_name(f"{self._path.name}.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(
                json.dumps(aliases, ensure_ascii=False, indent=2) + "\n",
                encoding="utf-8",
            )
            os.replace(tmp, self._path)
        except OSError as exc:
            raise AliasStoreError(f"could not write {self._path}: {exc}") from exc
