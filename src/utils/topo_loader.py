"""
Topo repository reading per-crag JSON records

Records live at ``<entries_dir>/<crag path>/<last segment>-topo.json``, e.g.
``europe/austria/wachau/nasenwand/nasenwand-topo.json``. A crag path may end
in a route id, which selects that route of the parent topo.
"""

import json
import logging
import os
from typing import List, Optional

from pydantic import ValidationError

from models.topo import Topo, TopoMeta, TopoPage

logger = logging.getLogger(__name__)

TOPO_SUFFIX = "-topo.json"


class TopoNotFoundError(LookupError):
    """Raised when a crag path resolves to no topo or route"""


class TopoRepository:
    """Loads topos and route pages by hierarchical crag path"""

    def __init__(self, entries_dir: str):
        self.entries_dir = entries_dir

    def _topo_file(self, crag_path: str) -> Optional[str]:
        segments = [part for part in crag_path.strip("/").split("/") if part]
        if not segments or any(part in (".", "..") for part in segments):
            return None
        file_path = os.path.join(
            self.entries_dir, *segments, f"{segments[-1]}{TOPO_SUFFIX}"
        )

        # symlinks and separators inside a segment must not leave entries_dir
        root = os.path.realpath(self.entries_dir)
        if os.path.commonpath([root, os.path.realpath(file_path)]) != root:
            logger.warning(f"Rejected crag path outside entries: {crag_path}")
            return None
        return file_path if os.path.isfile(file_path) else None

    def read_topo(self, file_path: str) -> Topo:
        """Parse one topo record"""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Topo.model_validate(data)
        except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Error reading topo {file_path}: {e}")
            raise

    @staticmethod
    def _meta(topo: Topo) -> TopoMeta:
        return TopoMeta(
            title=f"{topo.name} - Felsverzeichnis",
            description=topo.description,
            author=topo.author,
        )

    def load(self, crag_path: str) -> TopoPage:
        """Resolve a crag path to a topo page or a route page"""
        crag_path = crag_path.strip("/")

        topo_file = self._topo_file(crag_path)
        if topo_file:
            topo = self.read_topo(topo_file)
            logger.info(f"Loaded topo '{topo.name}' for {crag_path}")
            return TopoPage(path=crag_path, topo=topo, meta=self._meta(topo))

        parent_path, _, route_id = crag_path.rpartition("/")
        parent_file = self._topo_file(parent_path) if parent_path else None
        if parent_file:
            topo = self.read_topo(parent_file)
            route = topo.find_route(route_id)
            if route is None:
                raise TopoNotFoundError(f"Route '{route_id}' not found in {parent_path}")
            logger.info(f"Loaded route '{route_id}' of topo '{topo.name}'")
            return TopoPage(
                path=parent_path, topo=topo, route=route, meta=self._meta(topo)
            )

        raise TopoNotFoundError(f"No topo found for {crag_path}")

    def entries(self) -> List[str]:
        """All crag paths: one per topo plus one per route"""
        entries = []
        for dirpath, _, filenames in os.walk(self.entries_dir):
            for filename in sorted(filenames):
                if not filename.endswith(TOPO_SUFFIX):
                    continue
                crag_path = os.path.relpath(dirpath, self.entries_dir).replace(
                    os.sep, "/"
                )
                entries.append(crag_path)

                try:
                    topo = self.read_topo(os.path.join(dirpath, filename))
                except (
                    OSError,
                    UnicodeDecodeError,
                    json.JSONDecodeError,
                    ValidationError,
                ) as e:
                    logger.warning(f"Skipping routes of {crag_path}: {e}")
                    continue
                entries.extend(f"{crag_path}/{route.id}" for route in topo.routes)

        return sorted(entries)
