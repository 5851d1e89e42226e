"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from xmldoc2md.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "members": {
        "include_private": False,
        "exclude_internals": False,
        "only_internal": False,
    },
    "navigation": {
        "back_button": False,
        "back_button_label": "Back",
        "back_button_target": "./index.md",
    },
    "links": {
        "platform": "default",
        "no_extension": False,
        "no_prefix": False,
    },
    "examples_directory": None,
    "code_language": "csharp",
    "search_directories": [],
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
