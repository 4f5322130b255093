from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Union

from futures_core.loaders.remote import MANIFEST_NAME
from futures_core.pipeline.model import Record

logger = logging.getLogger(__name__)


def partition_records(records: Sequence[Record]) -> Dict[Tuple[str, str], List[list]]:
    """
    Group records by (scenario, region) in first-seen order.
    Each group holds [variable, year, value] rows.
    """
    out: Dict[Tuple[str, str], List[list]] = {}
    for r in records:
        out.setdefault((r.scenario, r.region), []).append([r.variable, r.year, r.value])
    return out


def dimensions_manifest(records: Sequence[Record]) -> Dict[str, List[str]]:
    return {
        "Scenarios": sorted({r.scenario for r in records}),
        "Regions": sorted({r.region for r in records}),
    }


def _path_part(name: str) -> str:
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise ValueError(f"{name!r} cannot be used as a file or directory name")
    return name


def write_partitions(records: Sequence[Record], out_dir: Union[str, Path]) -> List[Path]:
    """
    Write out_dir/<Scenario>/<Region>.json for every group plus
    out_dir/dimensions.json. Returns the written paths (manifest last).
    """
    root = Path(out_dir)
    written: List[Path] = []

    for (scenario, region), rows in partition_records(records).items():
        folder = root / _path_part(scenario)
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / f"{_path_part(region)}.json"
        path.write_text(json.dumps(rows), encoding="utf-8")
        written.append(path)

    root.mkdir(parents=True, exist_ok=True)
    manifest = root / MANIFEST_NAME
    manifest.write_text(json.dumps(dimensions_manifest(records)), encoding="utf-8")
    written.append(manifest)

    logger.info("wrote %d partition files to %s", len(written) - 1, root)
    return written
