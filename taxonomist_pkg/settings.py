#!/usr/bin/env python3
"""
Settings loader for Taxonomist.
Supports configuration from taxonomist.yml, taxonomist.yaml, or taxonomist.json files.
"""

import os
import json
import logging
import yaml
from typing import Dict, Any, Optional

logger = logging.getLogger('Taxonomist')


class SiteConfig:
    """Site-wide values exposed to templates as ``config``."""

    def __init__(self, base_url: Optional[str] = None, title: Optional[str] = None,
                 tagline: Optional[str] = None, extra: Optional[Dict[str, Any]] = None):
        self.base_url = base_url or ''
        self.title = title
        self.tagline = tagline
        self.extra = extra or {}

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> 'SiteConfig':
        """Build a site config from a merged settings dictionary."""
        known = ('site_url', 'site_title', 'site_tagline')
        return cls(
            base_url=settings.get('site_url'),
            title=settings.get('site_title'),
            tagline=settings.get('site_tagline'),
            extra={k: v for k, v in settings.items() if k not in known},
        )

    def make_permalink(self, path: str) -> str:
        """
        Build an absolute URL for a site path.

        Args:
            path: Site path such as ``tags/python``

        Returns:
            URL ending with a slash, e.g. ``https://example.com/tags/python/``
        """
        base = self.base_url.rstrip('/')
        if path == '/':
            return f"{base}/"

        path = path.lstrip('/')
        trailing = '' if path.endswith('/') else '/'
        return f"{base}/{path}{trailing}"


class TaxonomistSettings:
    """Load and manage Taxonomist configuration settings."""

    # Default configuration
    DEFAULT_SETTINGS = {
        'site_url': None,
        'site_title': None,
        'site_tagline': None,
        'templates': 'templates',
        'pages': 'pages.yml',
    }

    # Config file names to look for (in order of preference)
    CONFIG_FILES = ['taxonomist.yml', 'taxonomist.yaml', 'taxonomist.json']

    def __init__(self, config_dir: str = None):
        """
        Initialize settings loader.

        Args:
            config_dir: Directory to look for config files. Defaults to current directory.
        """
        self.config_dir = config_dir or os.getcwd()
        self.settings = self.DEFAULT_SETTINGS.copy()
        self.config_file_path = None

    def load_settings(self) -> Dict[str, Any]:
        """
        Load settings from configuration file if it exists.

        Returns:
            Dictionary of configuration settings
        """
        config_file = self._find_config_file()

        if config_file:
            self.config_file_path = config_file
            try:
                loaded_settings = self._load_config_file(config_file)
                if loaded_settings:
                    # Merge with defaults, giving preference to loaded settings
                    self.settings.update(loaded_settings)
                    logger.info(f"Loaded configuration from: {os.path.relpath(config_file)}")
            except (ValueError, OSError) as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")

        return self.settings.copy()

    def _find_config_file(self) -> Optional[str]:
        for filename in self.CONFIG_FILES:
            config_path = os.path.join(self.config_dir, filename)
            if os.path.exists(config_path):
                return config_path
        return None

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from a file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Dictionary of configuration settings
        """
        file_ext = os.path.splitext(config_path)[1].lower()
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if file_ext in ['.yml', '.yaml']:
                    loaded = yaml.safe_load(f) or {}
                elif file_ext == '.json':
                    loaded = json.load(f) or {}
                else:
                    raise ValueError(f"Unsupported config file format: {file_ext}")
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        except PermissionError:
            raise PermissionError(f"Permission denied reading configuration file: {config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file {config_path} must contain a mapping")
        return loaded

    def create_sample_config(self, file_format: str = 'yml') -> str:
        """
        Create a sample configuration file.

        Args:
            file_format: Format for config file ('yml', 'yaml', or 'json')

        Returns:
            Path to created sample config file
        """
        sample_config = {
            'site_url': 'https://example.com',
            'site_title': 'My Static Site',
            'site_tagline': 'Built with Taxonomist',
            'templates': 'templates',
            'pages': 'pages.yml',
        }

        if file_format not in ['yml', 'yaml', 'json']:
            raise ValueError(f"Unsupported config file format: {file_format}")

        filename = f'taxonomist.{file_format}'
        config_path = os.path.join(self.config_dir, filename)

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                if file_format in ['yml', 'yaml']:
                    f.write("# Taxonomist Configuration File\n\n")
                    f.write("# Site information\n")
                    f.write("site_url: https://example.com\n")
                    f.write("site_title: My Static Site\n")
                    f.write("site_tagline: Built with Taxonomist\n\n")
                    f.write("# Inputs\n")
                    f.write("templates: templates\n")
                    f.write("pages: pages.yml  # list of page metadata (title, category, tags, ...)\n")
                elif file_format == 'json':
                    json.dump(sample_config, f, indent=2)
        except PermissionError:
            raise PermissionError(f"Permission denied creating configuration file: {config_path}")

        return config_path

    def merge_with_args(self, args_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge configuration settings with command-line arguments.
        Command-line arguments take precedence over config file settings.

        Args:
            args_dict: Dictionary of command-line arguments

        Returns:
            Merged configuration dictionary
        """
        merged = self.settings.copy()

        for key, value in args_dict.items():
            if value is not None:
                merged[key] = value

        return merged
