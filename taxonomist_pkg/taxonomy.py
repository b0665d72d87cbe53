"""
Tags and categories derived from a set of pages.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from slugify import slugify

from .page import normalize_tags

logger = logging.getLogger('Taxonomist')


class TaxonomyKind(Enum):
    TAGS = 'tags'
    CATEGORIES = 'categories'

    @property
    def single_item_name(self) -> str:
        """Label used for detail templates and context keys."""
        if self is TaxonomyKind.TAGS:
            return 'tag'
        return 'category'

    @property
    def list_name(self) -> str:
        """Label used for list templates and context keys."""
        if self is TaxonomyKind.TAGS:
            return 'tags'
        return 'categories'


def make_slug(name: str) -> str:
    """Convert a tag or category name into a URL-safe slug."""
    return slugify(name)


@dataclass(frozen=True)
class TaxonomyItem:
    """A single tag or category together with the pages carrying it."""

    kind: TaxonomyKind
    name: str
    slug: str
    # Pages may be plain dicts, so they stay out of the hash
    pages: Tuple[Any, ...] = field(hash=False)

    @classmethod
    def create(cls, kind: TaxonomyKind, name: str, pages: Sequence[Any]) -> 'TaxonomyItem':
        return cls(kind=kind, name=name, slug=make_slug(name), pages=tuple(pages))

    def count(self) -> int:
        return len(self.pages)


class Taxonomy:
    """
    All the tags or all the categories of a site.

    Items are sorted by number of pages, most used first. Items with the same
    number of pages keep the order in which their name was first seen.
    """

    def __init__(self, kind: TaxonomyKind, buckets: Dict[str, List[Any]]):
        self.kind = kind
        items = [TaxonomyItem.create(kind, name, pages) for name, pages in buckets.items()]
        self.items = tuple(sorted(items, key=lambda item: len(item.pages), reverse=True))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[TaxonomyItem]:
        return iter(self.items)

    def __eq__(self, other):
        if not isinstance(other, Taxonomy):
            return NotImplemented
        return self.kind == other.kind and self.items == other.items

    def __repr__(self):
        return f"Taxonomy(kind={self.kind.name}, items={len(self.items)})"

    def count(self) -> int:
        return len(self.items)

    def single_item_name(self) -> str:
        return self.kind.single_item_name

    def list_name(self) -> str:
        return self.kind.list_name

    def names(self) -> List[str]:
        return [item.name for item in self.items]

    def find(self, slug: str) -> List[TaxonomyItem]:
        """
        Look up items by slug.

        Two different names can produce the same slug ("Go" and "GO"), so every
        matching item is returned, in taxonomy order.
        """
        return [item for item in self.items if item.slug == slug]


def _page_field(page, name: str) -> Optional[Any]:
    """Read a classification field from a Page or a plain metadata dict."""
    if isinstance(page, dict):
        return page.get(name)
    return getattr(page, name, None)


def find_tags_and_categories(all_pages: Iterable[Any]) -> Tuple[Taxonomy, Taxonomy]:
    """
    Group pages by tag and by category.

    A page with several tags is recorded once under each of them. Names are
    grouped by exact string value, so "Rust" and "rust" are different items.

    Args:
        all_pages: Every page of the site, in any order

    Returns:
        Tuple of (tags taxonomy, categories taxonomy)
    """
    tags = {}
    categories = {}
    scanned = 0

    for page in all_pages:
        scanned += 1
        category = _page_field(page, 'category')
        if category is not None:
            categories.setdefault(category, []).append(page)

        page_tags = normalize_tags(_page_field(page, 'tags'))
        if page_tags:
            for tag in page_tags:
                tags.setdefault(tag, []).append(page)

    tags_taxonomy = Taxonomy(TaxonomyKind.TAGS, tags)
    categories_taxonomy = Taxonomy(TaxonomyKind.CATEGORIES, categories)

    logger.debug(
        f"Scanned {scanned} pages: {len(tags_taxonomy)} tags, "
        f"{len(categories_taxonomy)} categories"
    )
    return tags_taxonomy, categories_taxonomy


build = find_tags_and_categories
