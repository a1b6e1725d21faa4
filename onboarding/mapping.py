from collections.abc import Mapping
import json
from pathlib import Path


# ASCII control characters and the space; other Unicode whitespace is kept.
TRIM_CHARACTERS = "".join(map(chr, range(33)))


class MappingConfigError(RuntimeError):
    pass


def load_field_mapping(path: Path) -> dict[str, str]:
    """Load the source -> target column mapping from a JSON object file.

    Key order in the file is kept; it decides the column order of every
    standardized record.
    """
    if not path.exists():
        raise MappingConfigError(f"field mapping not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as infile:
            payload = json.load(infile)
    except (OSError, json.JSONDecodeError) as exc:
        raise MappingConfigError(f"field mapping could not be read: {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise MappingConfigError(f"field mapping must be a JSON object: {path}")

    for source, target in payload.items():
        if not isinstance(target, str):
            raise MappingConfigError(f"field mapping target for '{source}' must be a string: {path}")
    return payload


def apply_mapping(raw: Mapping[str, str], mapping: Mapping[str, str]) -> dict[str, str]:
    standardized: dict[str, str] = {}
    for source, target in mapping.items():
        # A later source wins when two map to the same target.
        standardized[target] = (raw.get(source) or "").strip(TRIM_CHARACTERS)
    return standardized
