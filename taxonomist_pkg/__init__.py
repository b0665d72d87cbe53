"""
Taxonomist - tags and categories for static sites.

Taxonomist groups content pages by tag and by category, ranks the groups by
popularity and renders the list and detail pages with Jinja2 templates.
"""

__version__ = "1.0.0"
__author__ = "Robert DeVore"
__email__ = "me@robertdevore.com"

from .page import Page
from .taxonomy import Taxonomy, TaxonomyItem, TaxonomyKind, build, find_tags_and_categories, make_slug
from .render import JinjaRenderer, RenderError, render_list, render_single_item, render_taxonomy
from .settings import SiteConfig, TaxonomistSettings

__all__ = [
    'Page', 'Taxonomy', 'TaxonomyItem', 'TaxonomyKind', 'build', 'find_tags_and_categories',
    'make_slug', 'JinjaRenderer', 'RenderError', 'render_list', 'render_single_item',
    'render_taxonomy', 'SiteConfig', 'TaxonomistSettings',
]
