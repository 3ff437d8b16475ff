"""
Tokenizer configuration and its resolution into analyzer settings.

A ``TokenizerConfig`` is what callers hand to ``Tokenizer``: the path of a
compiled system dictionary plus optional paths to a ``sudachi.json``
settings file, a resource directory and a user dictionary. Before a
dictionary is loaded the configuration is resolved into an
``AnalyzerConfig`` that SudachiPy can consume directly.

Resolution rules:
    1. The settings file, when given, is parsed as a JSON object. Any read
       or parse failure raises ``ConfigError``.
    2. The explicit system dictionary path always overrides ``systemDict``
       from the settings file.
    3. The resource directory (``char.def``, ``unk.def``) is, in order of
       priority, the explicit ``resource_path``, the directory holding the
       settings file, or the directory holding the system dictionary.
    4. The user dictionary, when given, is appended to ``userDict``.

Example:
    >>> config = TokenizerConfig(dictionary_path="/opt/sudachi/system_core.dic")
    >>> resolve_config(config).resource_path
    '/opt/sudachi'
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from .exceptions import ConfigError, InvalidArgument

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Environment variables read by TokenizerConfig.from_env()
ENV_DICTIONARY_PATH = "SUDACHI_DICT_PATH"
ENV_CONFIG_PATH = "SUDACHI_CONFIG_PATH"
ENV_RESOURCE_PATH = "SUDACHI_RESOURCE_PATH"
ENV_USER_DICTIONARY_PATH = "SUDACHI_USER_DICT_PATH"

# Files SudachiPy needs from the resource directory
REQUIRED_RESOURCE_FILES = ("char.def", "unk.def")


def _optional_path(value: Optional[PathLike]) -> Optional[str]:
    if value is None:
        return None
    value = os.fspath(value)
    return value or None


def _user_dict_list(value, config_path: Optional[str]) -> List[str]:
    """Normalize a userDict setting into a list of paths."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ConfigError(f"{config_path}: userDict must be a list of paths")


def _parent_dir(path: Optional[str]) -> Optional[str]:
    """Return the directory part of ``path``, or None for a bare file name."""
    if not path:
        return None
    return os.path.dirname(path) or None


@dataclass
class TokenizerConfig:
    """
    Caller-facing configuration for creating a Tokenizer.

    Attributes:
        dictionary_path: Path to the system dictionary file (.dic).
        config_path: Optional path to a sudachi.json settings file.
        resource_path: Optional directory holding char.def and unk.def.
            If not provided, the directory of config_path or, failing that,
            of dictionary_path is used.
        user_dictionary_path: Optional path to a user dictionary file.
    """

    dictionary_path: PathLike
    config_path: Optional[PathLike] = None
    resource_path: Optional[PathLike] = None
    user_dictionary_path: Optional[PathLike] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TokenizerConfig":
        """
        Build a configuration from ``SUDACHI_*`` environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            TokenizerConfig: Configuration with every variable that is set.

        Raises:
            InvalidArgument: If SUDACHI_DICT_PATH is not set.
        """
        if environ is None:
            environ = os.environ

        dictionary_path = environ.get(ENV_DICTIONARY_PATH)
        if not dictionary_path:
            raise InvalidArgument(
                f"{ENV_DICTIONARY_PATH} is not set. "
                "Point it at a system dictionary (.dic) file."
            )

        return cls(
            dictionary_path=dictionary_path,
            config_path=environ.get(ENV_CONFIG_PATH) or None,
            resource_path=environ.get(ENV_RESOURCE_PATH) or None,
            user_dictionary_path=environ.get(ENV_USER_DICTIONARY_PATH) or None,
        )


@dataclass
class AnalyzerConfig:
    """
    Fully resolved settings ready for the dictionary loader.

    Attributes:
        dictionary_path: Concrete path of the system dictionary.
        resource_path: Resource directory, or None to let SudachiPy use
            its bundled default.
        settings: sudachi.json content with the explicit overrides applied.
    """

    dictionary_path: str
    resource_path: Optional[str] = None
    settings: Dict = field(default_factory=dict)

    @property
    def user_dictionary_paths(self) -> List[str]:
        user_dicts = self.settings.get("userDict") or []
        if isinstance(user_dicts, str):
            return [user_dicts]
        return list(user_dicts)

    def as_json(self) -> str:
        """Serialize the settings the way SudachiPy reads sudachi.json."""
        return json.dumps(self.settings, ensure_ascii=False)


def load_settings(config_path: PathLike) -> Dict:
    """
    Read a sudachi.json settings file.

    Args:
        config_path: Path of the JSON settings file.

    Returns:
        Dict: The parsed settings object.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or its
            top level is not a JSON object.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            settings = json.load(fh)
    except (OSError, ValueError) as e:
        logger.warning("Failed to load config %s: %s", os.fspath(config_path), e)
        raise ConfigError(str(e)) from e

    if not isinstance(settings, dict):
        raise ConfigError(
            f"{os.fspath(config_path)}: expected a JSON object, "
            f"got {type(settings).__name__}"
        )
    return settings


def resolve_resource_path(
    dictionary_path: str,
    config_path: Optional[str] = None,
    resource_path: Optional[str] = None,
) -> Optional[str]:
    """
    Pick the resource directory for a configuration.

    Resource files are usually shipped next to sudachi.json, so the
    settings file's directory wins over the dictionary's directory.

    Returns:
        Optional[str]: The resource directory, or None when no candidate
        yields a directory.
    """
    if resource_path:
        return resource_path
    if config_path:
        parent = _parent_dir(config_path)
        if parent is not None:
            return parent
    return _parent_dir(dictionary_path)


def resolve_config(config: TokenizerConfig) -> AnalyzerConfig:
    """
    Resolve a TokenizerConfig into an AnalyzerConfig.

    Only the settings file is read; no dictionary is touched.

    Args:
        config: Caller-supplied configuration.

    Returns:
        AnalyzerConfig: Settings with the system dictionary, resource
        directory and user dictionary applied.

    Raises:
        InvalidArgument: If dictionary_path is missing or empty.
        ConfigError: If the settings file cannot be read or parsed, or its
            userDict is not a list of paths.
    """
    dictionary_path = _optional_path(config.dictionary_path)
    if dictionary_path is None:
        raise InvalidArgument("dictionary_path is required")

    config_path = _optional_path(config.config_path)
    resource_path = _optional_path(config.resource_path)
    user_dictionary_path = _optional_path(config.user_dictionary_path)

    settings = load_settings(config_path) if config_path else {}

    # Explicit dictionary path always wins over the settings file
    settings["systemDict"] = dictionary_path

    resolved_resource_path = resolve_resource_path(
        dictionary_path, config_path, resource_path
    )

    if "userDict" in settings:
        settings["userDict"] = _user_dict_list(settings["userDict"], config_path)

    if user_dictionary_path is not None:
        settings["userDict"] = settings.get("userDict", []) + [user_dictionary_path]

    logger.debug(
        "Resolved analyzer config: dictionary=%s resources=%s user=%s",
        dictionary_path,
        resolved_resource_path,
        settings.get("userDict"),
    )

    return AnalyzerConfig(
        dictionary_path=dictionary_path,
        resource_path=resolved_resource_path,
        settings=settings,
    )


def has_required_resources(resource_dir: Optional[PathLike]) -> bool:
    """
    Check whether a directory holds the resource files SudachiPy needs.

    Args:
        resource_dir: Directory to inspect.

    Returns:
        bool: True if char.def and unk.def are both present.
    """
    if not resource_dir:
        return False
    directory = Path(resource_dir)
    return all((directory / name).is_file() for name in REQUIRED_RESOURCE_FILES)


__all__ = [
    "TokenizerConfig",
    "AnalyzerConfig",
    "load_settings",
    "resolve_resource_path",
    "resolve_config",
    "has_required_resources",
    "ENV_DICTIONARY_PATH",
    "ENV_CONFIG_PATH",
    "ENV_RESOURCE_PATH",
    "ENV_USER_DICTIONARY_PATH",
]
