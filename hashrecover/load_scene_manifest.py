"""Logic for reading entity instances from a YAML scene manifest.

A manifest describes what a scene reader extracted from a game's data files:
the object names the game config lists, and for every scene the objects it
places together with their editable variables. Each name is either given as
text or as the 32-character hex digest stored in the scene.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from hashrecover.errors import MalformedSymbolError, ManifestError
from hashrecover.models import EntityInstance
from hashrecover.symbol import DIGEST_SIZE, Symbol
from hashrecover.variable_type import VariableType

if TYPE_CHECKING:
    from hashrecover.digest_oracle import DigestOracle

logger = logging.getLogger(__name__)


@dataclass
class SceneManifest:
    """Known names plus the entity instances of every present scene."""

    known_names: list[str] = field(default_factory=list)
    instances: list[EntityInstance] = field(default_factory=list)
    scenes: list[str] = field(default_factory=list)


def load_scene_manifest(path: str | Path, oracle: DigestOracle) -> SceneManifest:
    """Load a manifest file. Raises ManifestError on malformed content."""
    doc = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    return parse_scene_manifest(doc, oracle)


def parse_scene_manifest(doc: Any, oracle: DigestOracle) -> SceneManifest:
    """Build a SceneManifest from an already parsed document."""
    if not isinstance(doc, dict):
        msg = "Manifest root must be a mapping"
        raise ManifestError(msg)

    manifest = SceneManifest()
    known = doc.get("known_names") or []
    if not isinstance(known, list):
        msg = "'known_names' must be a list"
        raise ManifestError(msg)
    for k, name in enumerate(known):
        if not isinstance(name, str):
            # YAML reads bare on/off/yes/no and numbers as non-strings.
            msg = f"known_names #{k}: name must be a quoted string, got {name!r}"
            raise ManifestError(msg)
        manifest.known_names.append(name)

    for i, scene in enumerate(doc.get("scenes") or []):
        if not isinstance(scene, dict):
            msg = f"Scene #{i} must be a mapping"
            raise ManifestError(msg)
        scene_name = str(scene.get("name", f"#{i}"))
        # The game config can list scenes that were never shipped.
        if scene.get("missing"):
            logger.info("Skipping missing scene %s", scene_name)
            continue

        logger.info("Loading scene %s", scene_name)
        manifest.scenes.append(scene_name)
        for j, obj in enumerate(scene.get("objects") or []):
            where = f"scene {scene_name}, object #{j}"
            manifest.instances.append(_parse_object(obj, where, scene_name, oracle))

    return manifest


def _parse_object(
    obj: Any, where: str, scene_name: str, oracle: DigestOracle
) -> EntityInstance:
    if not isinstance(obj, dict):
        msg = f"{where}: object must be a mapping"
        raise ManifestError(msg)

    instance = EntityInstance(_parse_symbol(obj, where, oracle), scene=scene_name)
    for k, var in enumerate(obj.get("variables") or []):
        var_where = f"{where}, variable #{k}"
        if not isinstance(var, dict):
            msg = f"{var_where}: variable must be a mapping"
            raise ManifestError(msg)
        try:
            type_tag = VariableType.parse(var.get("type"))
        except ValueError as e:
            msg = f"{var_where}: {e}"
            raise ManifestError(msg) from e
        instance.fields.append((_parse_symbol(var, var_where, oracle), type_tag))
    return instance


def _parse_symbol(entry: dict[str, Any], where: str, oracle: DigestOracle) -> Symbol:
    if "name" in entry:
        name = entry["name"]
        if not isinstance(name, str):
            msg = f"{where}: name must be a quoted string, got {name!r}"
            raise ManifestError(msg)
        return Symbol(oracle.digest_of_string(name), name)

    hex_digest = entry.get("hash")
    if hex_digest is None:
        msg = f"{where}: needs either 'name' or 'hash'"
        raise ManifestError(msg)
    if not isinstance(hex_digest, str):
        # YAML turns unquoted all-digit hashes into numbers.
        msg = f"{where}: hash must be a quoted string"
        raise ManifestError(msg)
    hex_digest = hex_digest.strip()
    if len(hex_digest) != DIGEST_SIZE * 2:
        msg = f"{where}: hash must be {DIGEST_SIZE * 2} hex characters"
        raise ManifestError(msg)
    try:
        return Symbol.from_hex(hex_digest)
    except MalformedSymbolError as e:
        msg = f"{where}: {e}"
        raise ManifestError(msg) from e
