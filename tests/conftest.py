"""Test configuration and fixtures for Taxonomist tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
import yaml
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from taxonomist_pkg import Page, SiteConfig

@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)

@pytest.fixture
def sample_pages():
    """Pages with overlapping tags and categories."""
    return [
        Page(title='First', permalink='/blog/first/', category='News', tags=('python', 'web')),
        Page(title='Second', permalink='/blog/second/', category='News', tags=('python',)),
        Page(title='Third', permalink='/blog/third/', category='Guides', tags=('Web Dev', 'python')),
        Page(title='About', permalink='/about/'),
    ]

@pytest.fixture
def site_config():
    """Site configuration with an absolute base URL."""
    return SiteConfig(base_url='https://example.com', title='Example')

@pytest.fixture
def mock_templates_dir(temp_dir):
    """Create a templates directory with minimal taxonomy templates."""
    templates_dir = Path(temp_dir) / 'templates'
    templates_dir.mkdir()

    (templates_dir / 'tags.html').write_text(
        "{% for tag in tags %}{{ tag.name }}={{ tag.pages|length }};{% endfor %}|{{ current_path }}|{{ current_url }}"
    )
    (templates_dir / 'categories.html').write_text(
        "{% for category in categories %}{{ category.name }}={{ category.pages|length }};{% endfor %}|{{ current_path }}"
    )
    (templates_dir / 'tag.html').write_text(
        "{{ tag.name }}:{% for page in tag.pages %}{{ page.title }},{% endfor %}|{{ current_path }}|{{ current_url }}"
    )
    (templates_dir / 'category.html').write_text(
        "{{ config.title }}/{{ category.slug }}:{% for page in category.pages %}{{ page.title }},{% endfor %}"
    )

    return str(templates_dir)

@pytest.fixture
def pages_file(temp_dir):
    """Write a YAML pages manifest."""
    pages_path = Path(temp_dir) / 'pages.yml'
    pages_path.write_text(yaml.dump([
        {'title': 'First', 'category': 'News', 'tags': ['a', 'b']},
        {'title': 'Second', 'category': 'News', 'tags': ['a']},
        {'title': 'Loose'},
    ]))
    return str(pages_path)

@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Drop console handlers added by the CLI so each test gets fresh streams."""
    yield
    logger = logging.getLogger('Taxonomist')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
