"""
config_manager.py
-----------------
JSON tuning files merged over in-code defaults.

- Files are looked up by name in the package's config/ directory
  (indexed on first use), or opened directly when given an absolute path
- File values override defaults key by key, recursively
- '_notes' keys are documentation only and never reach the result
- A missing or malformed file falls back to the defaults with a warning
"""

import json
import os

from dungeon_core.core.debug.debug_logger import DebugLogger


CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

_index = None


def load_config(filename, default_dict=None, strict=False):
    """
    Args:
        filename: Name inside the config directory, or an absolute path
        default_dict: Values used for every key the file does not set
        strict: Raise FileNotFoundError instead of falling back

    Returns:
        dict: Fresh merged configuration (defaults are never mutated)
    """
    defaults = default_dict or {}
    path = find_config(filename)

    try:
        overrides = _read_object(path)
    except (OSError, ValueError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or invalid: {filename}") from e
        DebugLogger.warn(f"{filename}: {e}; using defaults", category="loading")
        overrides = {}

    return merge_config(defaults, overrides)


def merge_config(default, override):
    """Deep-copy default, then lay override on top. Nested dicts merge."""
    merged = {key: merge_config(value, {}) if isinstance(value, dict) else value
              for key, value in default.items()}

    for key, value in override.items():
        if key == "_notes":
            continue
        base = merged.get(key)
        if isinstance(value, dict) and isinstance(base, dict):
            merged[key] = merge_config(base, value)
        else:
            merged[key] = value
    return merged


def find_config(filename):
    """Resolve a config name to a path. Unknown names are returned unchanged."""
    if os.path.isabs(filename):
        return filename

    if _index is None:
        rebuild_index()

    name = filename.replace("\\", "/").lstrip("/")
    return _index.get(name) or _index.get(name + ".json") or filename


def rebuild_index():
    """Rescan CONFIG_DIR for *.json files."""
    global _index
    _index = {}
    if os.path.isdir(CONFIG_DIR):
        for root, _, files in os.walk(CONFIG_DIR):
            for name in files:
                if name.endswith(".json"):
                    _index.setdefault(name, os.path.join(root, name))
    DebugLogger.init(f"Indexed {len(_index)} config file(s)", category="loading")


def _read_object(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("top-level JSON value must be an object")
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data
