"""
Load and save graphs in the {"nodes": [...], "edges": [...]} shape.

JSON for hand-edited files, msgpack for compact ones. The payload is
exactly Graph.to_dict(); nothing is added on top of it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import msgpack

from pathfinder.config import DATA_DIR
from pathfinder.graph.model import Graph

logger = logging.getLogger(__name__)

JSON_SUFFIXES = {".json"}
MSGPACK_SUFFIXES = {".msgpack", ".mpk"}


def _format_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return "json"
    if suffix in MSGPACK_SUFFIXES:
        return "msgpack"
    supported = ", ".join(sorted(JSON_SUFFIXES | MSGPACK_SUFFIXES))
    raise ValueError(f"Unsupported graph file '{path.name}'. Supported: {supported}")


def resolve_graph_path(path: str | Path) -> Path:
    """
    Locate a graph file.

    Relative paths that do not exist from the working directory are
    looked up in DATA_DIR, so saved graphs can be referred to by name.
    """
    path = Path(path)
    if path.exists() or path.is_absolute():
        return path
    candidate = DATA_DIR / path
    return candidate if candidate.exists() else path


def load_graph(path: str | Path) -> Graph:
    """
    Load a graph file (see resolve_graph_path for lookup rules).

    Raises:
        ValueError: If the suffix is not a supported format
        FileNotFoundError: If the file does not exist
    """
    path = resolve_graph_path(path)
    fmt = _format_for(path)

    logger.info(f"Loading graph from {path}...")
    if fmt == "json":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    else:
        with open(path, "rb") as f:
            data = msgpack.load(f, raw=False, strict_map_key=False)

    graph = Graph.from_dict(data)
    logger.info(f"Loaded {len(graph.nodes)} nodes, {len(graph.edges)} edges")
    return graph


def save_graph(graph: Graph, path: str | Path) -> Path:
    """Write a graph file, creating parent directories. Returns the path."""
    path = Path(path)
    fmt = _format_for(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(graph.to_dict(), f, indent=2)
    else:
        with open(path, "wb") as f:
            msgpack.pack(graph.to_dict(), f)

    logger.info(f"Saved graph to {path}")
    return path
