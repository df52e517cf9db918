"""Translation models for the i18n system.

Defines the core data structures: language codes, resource trees, the
resource store snapshot and dotted key paths.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Optional, Tuple, Union

LanguageCode = str
"""Opaque language identifier (e.g. "en", "fr"), the base name of a resource file."""

ResourceTree = Mapping[str, Union[str, "ResourceTree"]]
"""Nested mapping whose leaves are strings."""

ParamsMap = Mapping[str, Any]
"""Placeholder name -> value, supplied per translate call."""

KEY_SEPARATOR = "."


def freeze_tree(tree: Mapping[str, Any]) -> ResourceTree:
    """Return a read-only copy of a resource tree.

    Args:
        tree: Nested mapping with string leaves.

    Returns:
        MappingProxyType view over a private copy, nested mappings frozen too.
    """
    frozen: Dict[str, Any] = {}
    for key, value in tree.items():
        if isinstance(value, Mapping):
            frozen[key] = freeze_tree(value)
        else:
            frozen[key] = value
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class KeyPath:
    """Dot-delimited path to a leaf inside a resource tree.

    Frozen to ensure immutability and hashability.

    Attributes:
        segments: Path segments (e.g. ("errors", "notFound")).
    """

    segments: Tuple[str, ...]

    def __str__(self) -> str:
        """Return full dot-separated key path.

        Returns:
            Full key (e.g., "errors.notFound").
        """
        return KEY_SEPARATOR.join(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    @classmethod
    def from_string(cls, key: str) -> "KeyPath":
        """Create KeyPath from a dot-separated string.

        Args:
            key: Dot-separated key (e.g., "errors.notFound").

        Returns:
            KeyPath instance. Every dot starts a new segment, so empty
            segments are kept and simply never resolve.
        """
        return cls(segments=tuple(str(key).split(KEY_SEPARATOR)))


class ResourceStore:
    """Immutable snapshot of every loaded language's resource tree.

    A store is populated once and never updated in place; reloading or
    adding a language produces a new store.
    """

    __slots__ = ("_trees",)

    def __init__(self, trees: Optional[Mapping[LanguageCode, Mapping[str, Any]]] = None):
        """Initialize the store.

        Args:
            trees: Mapping of language code to its resource tree.
        """
        frozen = {
            language: freeze_tree(tree) for language, tree in (trees or {}).items()
        }
        self._trees: Mapping[LanguageCode, ResourceTree] = MappingProxyType(frozen)

    @classmethod
    def empty(cls) -> "ResourceStore":
        """Create a store holding no languages."""
        return cls()

    @property
    def languages(self) -> FrozenSet[LanguageCode]:
        """Language codes present in the store."""
        return frozenset(self._trees)

    def get_tree(self, language: LanguageCode) -> Optional[ResourceTree]:
        """Get the resource tree for a language.

        Args:
            language: Language code.

        Returns:
            ResourceTree, or None if the language is not loaded.
        """
        return self._trees.get(language)

    def with_tree(
        self, language: LanguageCode, tree: Mapping[str, Any]
    ) -> "ResourceStore":
        """Return a new store with one language added or replaced.

        Args:
            language: Language code.
            tree: Resource tree for the language.

        Returns:
            New ResourceStore; this store is left untouched.
        """
        trees = dict(self._trees)
        trees[language] = tree
        return ResourceStore(trees)

    def __contains__(self, language: object) -> bool:
        return language in self._trees

    def __iter__(self) -> Iterator[LanguageCode]:
        return iter(self._trees)

    def __len__(self) -> int:
        return len(self._trees)

    def __repr__(self) -> str:
        return f"ResourceStore(languages={sorted(self._trees)!r})"
