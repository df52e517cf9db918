"""Resource document parsers.

Turns the text of a resource file into a nested string-keyed mapping.
The parser is chosen from the file extension.
"""

import json
from pathlib import PurePath
from typing import Any, Callable, Dict, FrozenSet, Optional, Tuple

import yaml

from locale_engine.logging import get_module_logger

logger = get_module_logger()

Parser = Callable[[str], Any]


def parse_json(text: str) -> Any:
    """Parse a JSON resource document.

    Raises:
        ValueError: If the text is not valid JSON or nests too deeply.
    """
    try:
        return json.loads(text)
    except RecursionError as e:
        raise ValueError("Invalid JSON: document nests too deeply") from e


def parse_yaml(text: str) -> Any:
    """Parse a YAML resource document.

    Raises:
        ValueError: If the text is not valid YAML or nests too deeply.
    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e
    except RecursionError as e:
        raise ValueError("Invalid YAML: document nests too deeply") from e


PARSERS: Dict[str, Parser] = {
    ".json": parse_json,
    ".yml": parse_yaml,
    ".yaml": parse_yaml,
}


def split_entry(entry: str) -> Tuple[str, str]:
    """Split a resource entry name into (language code, extension).

    Example: "en.json" -> ("en", ".json"), "pt-BR.yml" -> ("pt-BR", ".yml")
    """
    path = PurePath(entry)
    return path.stem, path.suffix.lower()


def get_parser(entry: str) -> Optional[Parser]:
    """Get the parser for a resource entry, or None if unsupported."""
    _, extension = split_entry(entry)
    return PARSERS.get(extension)


def build_tree(
    data: Any, path: str = "", _ancestors: FrozenSet[int] = frozenset()
) -> Dict[str, Any]:
    """Validate a parsed document and build a resource tree from it.

    Keys are converted to strings, nested mappings are kept, string leaves
    are kept. Any other leaf (numbers, lists, nulls) is dropped.

    Args:
        data: Parsed document.
        path: Dotted path of data inside the document (for logging).

    Returns:
        Resource tree as nested dicts. An empty document gives an empty tree.

    Raises:
        ValueError: If the top level of the document is not a mapping, or a
            mapping contains itself (YAML aliases can build such cycles).
    """
    if data is None and not path:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a mapping at the top level, got {type(data).__name__}"
        )
    if id(data) in _ancestors:
        raise ValueError(f"Cyclic reference at '{path}'")
    ancestors = _ancestors | {id(data)}

    tree: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = str(raw_key)
        key_path = f"{path}.{key}" if path else key
        if isinstance(value, str):
            tree[key] = value
        elif isinstance(value, dict):
            tree[key] = build_tree(value, key_path, ancestors)
        else:
            logger.warning(
                "invalid_resource_value",
                key=key_path,
                value_type=type(value).__name__,
                expected="str or mapping",
            )
    return tree
