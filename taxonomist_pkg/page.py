"""
Minimal page shape consumed by the taxonomy builder.

Pages are produced upstream (front matter parsing is not done here); this
module only gives them a read-only structure that templates can walk.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Page:
    """A content page as seen by the taxonomy engine."""

    title: str = ''
    permalink: str = ''
    category: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = None
    summary: str = ''
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)

    # Front matter keys mapped to dedicated fields; anything else goes to extra
    KNOWN_KEYS = ('title', 'permalink', 'category', 'tags', 'summary')

    @classmethod
    def from_metadata(cls, metadata: Dict[str, Any]) -> 'Page':
        """
        Create a page from a front matter style mapping.

        YAML reads ``category: 2024`` or ``tags: [2024]`` as numbers; scalar
        values are converted to strings so every name can be slugified.

        Args:
            metadata: Page metadata, e.g. ``{'title': ..., 'tags': [...]}``

        Returns:
            Page instance

        Raises:
            ValueError: If a category or tag is a list or mapping
        """
        title = metadata.get('title') or ''

        category = metadata.get('category')
        if category is not None:
            category = _label(category, 'category', title)

        tags = normalize_tags(metadata.get('tags'))
        if tags is not None:
            tags = tuple(_label(tag, 'tag', title) for tag in tags)

        return cls(
            title=title,
            permalink=metadata.get('permalink') or '',
            category=category,
            tags=tags,
            summary=metadata.get('summary') or '',
            extra={k: v for k, v in metadata.items() if k not in cls.KNOWN_KEYS},
        )


def normalize_tags(tags: Any) -> Optional[Tuple[Any, ...]]:
    """Turn a tags value into a tuple; a single scalar such as a string is one tag."""
    if tags is None:
        return None
    if isinstance(tags, (list, tuple, set)):
        return tuple(tags)
    return (tags,)


def _label(value: Any, field_name: str, title: str) -> str:
    if isinstance(value, (list, tuple, set, dict)):
        raise ValueError(f"Invalid {field_name} {value!r} in page '{title}': expected a name")
    return str(value)
