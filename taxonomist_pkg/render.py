"""
Rendering of taxonomy list and detail pages.

The bridge functions only build the template context and pick the template
name; producing HTML is delegated to a renderer object exposing
``render(template_name, context) -> str``. ``JinjaRenderer`` is the default
renderer, backed by a Jinja2 environment.
"""

import os
import logging
from typing import Any, Dict, List, Optional, Tuple

import mistune
from jinja2 import Environment, FileSystemLoader

from .taxonomy import Taxonomy, TaxonomyItem

logger = logging.getLogger('Taxonomist')

PACKAGE_TEMPLATES = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')


class RenderError(Exception):
    """Raised when a taxonomy page could not be rendered."""

    def __init__(self, page_name: str, message: Optional[str] = None):
        self.page_name = page_name
        super().__init__(message or f"Failed to render {page_name} page.")


class JinjaRenderer:
    """Render templates from a directory with Jinja2."""

    def __init__(self, templates_dir='templates'):
        # Fall back to the bundled templates when the site has none
        if not os.path.isabs(templates_dir) and not os.path.exists(templates_dir):
            logger.debug(f"Templates directory {templates_dir} not found, using bundled templates")
            templates_dir = PACKAGE_TEMPLATES

        self.templates_dir = templates_dir
        self.env = Environment(loader=FileSystemLoader(templates_dir))
        self.markdown_parser = self.create_markdown_parser()
        self.env.filters['markdown'] = self.markdown_filter

    def create_markdown_parser(self):
        """Create a Mistune markdown parser with a custom renderer."""
        class CustomRenderer(mistune.HTMLRenderer):
            def __init__(self):
                super().__init__(escape=False)
            def block_code(self, code, info=None):
                escaped_code = mistune.escape(code)
                return '<pre style="white-space: pre-wrap;"><code>{}</code></pre>'.format(escaped_code)
        return mistune.create_markdown(
            renderer=CustomRenderer(),
            plugins=['table', 'strikethrough']
        )

    def markdown_filter(self, text):
        """Convert markdown text to HTML."""
        return self.markdown_parser(text or '')

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        template = self.env.get_template(template_name)
        return template.render(**context)


def _render(renderer, page_name: str, context: Dict[str, Any]) -> str:
    template_name = f"{page_name}.html"
    try:
        return renderer.render(template_name, context)
    except Exception as e:
        logger.error(f"Template error for {template_name}: {e}")
        raise RenderError(page_name) from e


def render_single_item(item: TaxonomyItem, renderer, config) -> str:
    """
    Render the detail page of one tag or category.

    Args:
        item: Taxonomy item to render
        renderer: Object with a ``render(template_name, context)`` method
        config: Site configuration providing ``make_permalink``

    Returns:
        Rendered HTML

    Raises:
        RenderError: If the template is missing or fails to render
    """
    name = item.kind.single_item_name
    path = f"{item.kind.list_name}/{item.slug}"
    context = {
        'config': config,
        name: item,
        'current_url': config.make_permalink(path),
        'current_path': f"/{path}",
    }
    return _render(renderer, name, context)


def render_list(taxonomy: Taxonomy, renderer, config) -> str:
    """
    Render the page listing every item of a taxonomy.

    Args:
        taxonomy: Tags or categories taxonomy
        renderer: Object with a ``render(template_name, context)`` method
        config: Site configuration providing ``make_permalink``

    Returns:
        Rendered HTML

    Raises:
        RenderError: If the template is missing or fails to render
    """
    name = taxonomy.list_name()
    context = {
        'config': config,
        name: list(taxonomy.items),
        'current_url': config.make_permalink(name),
        'current_path': f"/{name}",
    }
    return _render(renderer, name, context)


def render_taxonomy(taxonomy: Taxonomy, renderer, config) -> List[Tuple[str, str]]:
    """Render the list page followed by every item page as (path, html) pairs."""
    name = taxonomy.list_name()
    rendered = [(f"/{name}", render_list(taxonomy, renderer, config))]

    for item in taxonomy.items:
        rendered.append((f"/{name}/{item.slug}", render_single_item(item, renderer, config)))

    logger.info(f"Rendered {name} list and {len(taxonomy)} {taxonomy.single_item_name()} pages")
    return rendered
