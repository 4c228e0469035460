"""Collects the named documents that make up a personal-data export."""
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


class PersonalDataSelection:
    """Named documents gathered for one user's export.

    Packaging the documents into an archive is the exporter's job; this
    class only holds what was selected.
    """

    def __init__(self) -> None:
        self._files: dict[str, Any] = {}

    @property
    def files(self) -> dict[str, Any]:
        return dict(self._files)

    def add(self, name: str, content: Any) -> "PersonalDataSelection":
        if name in self._files:
            raise ValueError(f"Personal data document '{name}' was already added")
        self._files[name] = content
        logger.debug("Selected personal data document %s", name)
        return self

    def to_json(self, name: str) -> str:
        """Render a selected document as indented JSON."""
        return json.dumps(self._files[name], indent=2, sort_keys=True)
