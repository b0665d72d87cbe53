#!/usr/bin/env python3
"""
Command-line interface for Taxonomist.
"""

import os
import sys
import json
import logging
import argparse
import yaml
from typing import List, Optional

from . import __version__
from .page import Page
from .render import JinjaRenderer, render_list, render_single_item, RenderError
from .settings import SiteConfig, TaxonomistSettings
from .taxonomy import Taxonomy, find_tags_and_categories


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Set up console logging for the Taxonomist logger."""
    logger = logging.getLogger('Taxonomist')
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('%(message)s'))
        logger.addHandler(console_handler)

    return logger


def load_pages(pages_path: str) -> List[Page]:
    """
    Load page metadata from a YAML or JSON manifest.

    Args:
        pages_path: Path to a file holding a list of page metadata mappings

    Returns:
        List of pages
    """
    file_ext = os.path.splitext(pages_path)[1].lower()
    try:
        with open(pages_path, 'r', encoding='utf-8') as f:
            if file_ext == '.json':
                entries = json.load(f)
            else:
                entries = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Pages file not found: {pages_path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in pages file {pages_path}: {e}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in pages file {pages_path}: {e}")

    if entries is None:
        return []
    if not isinstance(entries, list) or not all(isinstance(entry, dict) for entry in entries):
        raise ValueError(f"Pages file {pages_path} must contain a list of mappings")

    return [Page.from_metadata(entry) for entry in entries]


def format_summary(taxonomies: List[Taxonomy]) -> str:
    """Format a plain text overview of every taxonomy."""
    lines = []
    for taxonomy in taxonomies:
        lines.append(f"{taxonomy.list_name()} ({taxonomy.count()})")
        for item in taxonomy.items:
            lines.append(f"  {item.name} [{item.slug}]: {item.count()}")
    return "\n".join(lines)


def render_target(target: str, tags: Taxonomy, categories: Taxonomy, renderer, config) -> str:
    """
    Render the page selected on the command line.

    Args:
        target: 'tags', 'categories', 'tag:<slug>' or 'category:<slug>'

    Returns:
        Rendered HTML
    """
    by_name = {
        'tags': tags, 'tag': tags,
        'categories': categories, 'category': categories,
    }
    kind, _, slug = target.partition(':')
    taxonomy = by_name.get(kind)
    if taxonomy is None:
        raise ValueError(f"Unknown render target: {target}")

    if not slug:
        return render_list(taxonomy, renderer, config)

    items = taxonomy.find(slug)
    if not items:
        raise ValueError(f"No {taxonomy.single_item_name()} with slug '{slug}'")
    return render_single_item(items[0], renderer, config)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description='Taxonomist - tags and categories for static sites')
    parser.add_argument('--config-dir', type=str,
                        help='Directory containing taxonomist.yml/.yaml/.json')
    parser.add_argument('--pages', type=str,
                        help='YAML or JSON file listing page metadata')
    parser.add_argument('--templates', type=str,
                        help='Templates directory')
    parser.add_argument('--site-url', type=str,
                        help='Site URL used for permalinks')
    parser.add_argument('--site-title', type=str, help='Site title for templates')
    parser.add_argument('--render', type=str, metavar='TARGET',
                        help="Render 'tags', 'categories', 'tag:<slug>' or 'category:<slug>' to stdout")
    parser.add_argument('--init', type=str, choices=['yml', 'yaml', 'json'],
                        help='Create a sample configuration file')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)
    logger = setup_logging(args.verbose)

    settings_loader = TaxonomistSettings(args.config_dir)

    if args.init:
        config_path = settings_loader.create_sample_config(args.init)
        print(f"Created sample configuration file: {config_path}")
        return

    settings_loader.load_settings()
    args_dict = {
        'pages': args.pages,
        'templates': args.templates,
        'site_url': args.site_url,
        'site_title': args.site_title,
    }
    final_settings = settings_loader.merge_with_args(args_dict)

    try:
        pages = load_pages(final_settings['pages'])
        tags, categories = find_tags_and_categories(pages)
        logger.debug(f"Loaded {len(pages)} pages from {final_settings['pages']}")

        if args.render:
            renderer = JinjaRenderer(final_settings['templates'])
            config = SiteConfig.from_settings(final_settings)
            print(render_target(args.render, tags, categories, renderer, config))
        else:
            print(format_summary([tags, categories]))

    except (RenderError, ValueError, OSError) as e:
        message = f"{e} ({e.__cause__})" if e.__cause__ else str(e)
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
