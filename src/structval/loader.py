"""YAML/JSON document loader with position tracking, for values to validate."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from structval.exceptions import DocumentSafetyError
from structval.models.errors import SourceSpan
from structval.settings import get_settings

logger = logging.getLogger("structval.loader")

# YAML anchor definitions (&name): & at line start or after whitespace, "-",
# ":" or a flow indicator, followed by a name. Quoted scalars and comments are
# not skipped, so "# &x" or "a: ' &x'" is rejected as well.
_ANCHOR_RE = re.compile(r"(?:^|[\s\-:\[{,])&(\w+)", re.MULTILINE)


@dataclass
class SourceMap:
    """Maps document paths (``users[0].name``) to their source positions."""

    _positions: dict[str, SourceSpan] = field(default_factory=dict)

    def add(self, path: str, span: SourceSpan) -> None:
        self._positions[path] = span

    def get(self, path: str) -> SourceSpan | None:
        return self._positions.get(path)

    @property
    def paths(self) -> list[str]:
        return list(self._positions.keys())


class DocumentLoader:
    """Loads candidate values from YAML (or JSON) text.

    Uses ruamel.yaml, which preserves line/column info on every parsed
    container, and returns plain ``dict``/``list``/scalar values together
    with a ``SourceMap`` so violations can point back into the document.
    """

    def __init__(
        self,
        max_document_size: int | None = None,
        max_node_count: int | None = None,
    ) -> None:
        settings = get_settings()
        self.max_document_size = (
            max_document_size if max_document_size is not None else settings.max_document_size
        )
        self.max_node_count = (
            max_node_count if max_node_count is not None else settings.max_node_count
        )
        self._yaml = YAML()

    # -- safety checks -------------------------------------------------------

    def _check_safety(self, content: str) -> None:
        """Pre-parse checks on raw text: document size and anchors/aliases."""
        if len(content) > self.max_document_size:
            raise DocumentSafetyError(
                f"Document exceeds maximum size "
                f"({len(content):,} chars > {self.max_document_size:,} limit)"
            )
        if _ANCHOR_RE.search(content):
            raise DocumentSafetyError("YAML anchors/aliases are not supported")

    def _check_node_count(self, data: Any) -> None:
        """Post-parse check: reject documents with too many nodes."""
        count = 0
        stack: list[Any] = [data]
        while stack:
            node = stack.pop()
            count += 1
            if count > self.max_node_count:
                raise DocumentSafetyError(
                    f"Document exceeds maximum node count ({self.max_node_count:,})"
                )
            if isinstance(node, dict):
                stack.extend(node.values())
            elif isinstance(node, list):
                stack.extend(node)

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> tuple[Any, SourceMap]:
        """Load a YAML/JSON file and return the plain value + source position map."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> tuple[Any, SourceMap]:
        """Load a value from a string. An empty document loads as ``None``."""
        try:
            self._check_safety(content)
            data = self._yaml.load(content)
            if data is None:
                return None, SourceMap()
            self._check_node_count(data)
        except DocumentSafetyError as exc:
            logger.warning("Rejected document %s: %s", filename, exc)
            raise
        source_map = SourceMap()
        self._extract_positions(data, filename, "", source_map)
        logger.debug("Loaded %s (%d positioned paths)", filename, len(source_map.paths))
        return self._to_plain_value(data), source_map

    def _extract_positions(
        self,
        data: Any,
        filename: str,
        prefix: str,
        source_map: SourceMap,
    ) -> None:
        """Recursively extract source positions from ruamel.yaml nodes."""
        if isinstance(data, CommentedMap):
            for key in data:
                key_path = f"{prefix}.{key}" if prefix else str(key)
                try:
                    position = data.lc.key(key)
                except (AttributeError, KeyError, TypeError):
                    position = None
                if position:
                    line, col = position
                    source_map.add(
                        key_path, SourceSpan(file=filename, line=line + 1, column=col + 1)
                    )
                self._extract_positions(data[key], filename, key_path, source_map)
        elif isinstance(data, CommentedSeq):
            for i, item in enumerate(data):
                item_path = f"{prefix}[{i}]"
                try:
                    position = data.lc.item(i)
                except (AttributeError, KeyError, TypeError):
                    position = None
                if position:
                    line, col = position
                    source_map.add(
                        item_path, SourceSpan(file=filename, line=line + 1, column=col + 1)
                    )
                self._extract_positions(item, filename, item_path, source_map)

    def _to_plain_value(self, data: Any) -> Any:
        """Convert ruamel.yaml containers and scalar subclasses to builtin types."""
        if isinstance(data, dict):
            return {str(k): self._to_plain_value(v) for k, v in data.items()}
        if isinstance(data, list):
            return [self._to_plain_value(item) for item in data]
        if isinstance(data, bool) or data is None:
            return data
        if isinstance(data, str):
            return str(data)
        if isinstance(data, int):
            return int(data)
        if isinstance(data, float):
            return float(data)
        return data
