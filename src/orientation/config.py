"""
Configuration for the orientation command-line front end.

Settings come from ``DEFAULT_CONFIG`` merged with an optional YAML file:

    output:
      precision: 8        # digits printed after the decimal point
    random:
      seed: null          # integer seed for reproducible sampling
      count: 1            # quaternions drawn per 'random' call
    logging:
      level: INFO

Only the sections and keys present in ``DEFAULT_CONFIG`` are accepted, with
the same value types (``seed`` may also be null). An empty section keeps its
defaults.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    'output': {
        'precision': 8,
    },
    'random': {
        'seed': None,
        'count': 1,
    },
    'logging': {
        'level': 'INFO',
    },
}


# Accepted value types per key; None only where NoneType is listed
_VALUE_TYPES: Dict[str, Dict[str, Tuple[type, ...]]] = {
    'output': {'precision': (int,)},
    'random': {'seed': (int, type(None)), 'count': (int,)},
    'logging': {'level': (str,)},
}


def _merge_section(name: str, base: Dict[str, Any], override: Any) -> Dict[str, Any]:
    """Validate one section of the YAML file and merge it over ``base``."""
    if override is None:
        override = {}
    if not isinstance(override, dict):
        raise ValueError(
            f"Section '{name}' must be a mapping, got {type(override).__name__}"
        )

    unknown = sorted(set(override) - set(base))
    if unknown:
        raise ValueError(f"Unknown keys in section '{name}': {', '.join(unknown)}")

    merged = copy.deepcopy(base)
    for key, value in override.items():
        allowed = _VALUE_TYPES[name][key]
        # bool is an int subclass but never a valid precision, count or seed
        if isinstance(value, bool) or not isinstance(value, allowed):
            expected = ' or '.join('null' if t is type(None) else t.__name__
                                   for t in allowed)
            raise ValueError(
                f"'{name}.{key}' must be {expected}, got {type(value).__name__}"
            )
        merged[key] = value
    return merged


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file on top of the defaults.

    Args:
        config_path: Path to a YAML file. ``None`` returns the defaults.

    Returns:
        Dictionary with the ``output``, ``random`` and ``logging`` sections

    Raises:
        FileNotFoundError: If ``config_path`` does not exist
        ValueError: If the file is malformed, not a mapping, or has unknown
            sections, unknown keys or wrongly typed values
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    logger.info("Loading configuration from: %s", config_path)
    with open(config_path, 'r') as f:
        try:
            user_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Malformed YAML in {config_path}: {exc}") from exc

    if not isinstance(user_config, dict):
        raise ValueError(
            f"Configuration must be a mapping, got {type(user_config).__name__}"
        )

    unknown = sorted(set(user_config) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown configuration sections: {', '.join(unknown)}")

    return {
        name: _merge_section(name, section, user_config.get(name))
        for name, section in DEFAULT_CONFIG.items()
    }
