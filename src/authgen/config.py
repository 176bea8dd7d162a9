"""Where authgen keeps its settings, and how a secret is looked up.

Two kinds of file live under the config directory:

``config.json``
    The :class:`~authgen.models.GlobalConfig`: default profile, output
    format, and the algorithm/length/prefix defaults of the generate
    commands.
``profiles/<name>.json``
    One :class:`~authgen.models.CredentialProfile` per reusable
    credential. Profiles name their secrets by *source* (``env:VAR``,
    ``file:/path``, ``prompt``); the secret itself is never written.

The config directory follows XDG on Linux and BSD and is ``~/.authgen``
elsewhere. Every write replaces the file atomically.
"""

from __future__ import annotations

import getpass
import json
import logging
import os
import platform
import sys
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from authgen.exceptions import ConfigurationError, InvalidUsageError
from authgen.models import CredentialProfile, GlobalConfig

logger = logging.getLogger(__name__)

_APP_NAME = "authgen"
_CONFIG_FILENAME = "config.json"
_PROFILE_ENV_VAR = "AUTHGEN_PROFILE"


# --- Directories ---


def _is_xdg_platform() -> bool:
    system = platform.system()
    return system == "Linux" or system.endswith("BSD")


def _app_dir(xdg_var: str, xdg_default: str, fallback: str = "") -> Path:
    """Return (and create) an application directory.

    On XDG platforms this is ``$<xdg_var>/authgen``, with *xdg_default*
    (relative to the home directory) used when the variable is unset or
    empty. Elsewhere it is ``~/.authgen/<fallback>``.
    """
    if _is_xdg_platform():
        base = os.environ.get(xdg_var) or str(Path.home() / xdg_default)
        path = Path(base) / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}"
        if fallback:
            path = path / fallback
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_config_dir() -> Path:
    """``$XDG_CONFIG_HOME/authgen`` (``~/.config/authgen``), or ``~/.authgen``."""
    return _app_dir("XDG_CONFIG_HOME", ".config")


def get_data_dir() -> Path:
    """Directory for crash logs.

    ``$XDG_DATA_HOME/authgen`` (``~/.local/share/authgen``), or
    ``~/.authgen/logs`` on macOS and Windows.
    """
    return _app_dir("XDG_DATA_HOME", os.path.join(".local", "share"), fallback="logs")


def get_profiles_dir() -> Path:
    path = get_config_dir() / "profiles"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Reading and writing JSON documents ---


def _atomic_write(path: Path, data: str) -> None:
    """Replace *path* with *data* so readers see either the old or the new file.

    The content goes to a temporary file in the same directory, is
    fsynced, and is then renamed over *path*. If anything fails the
    temporary file is removed and the error propagates.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise


def _write_model(path: Path, model: BaseModel) -> None:
    _atomic_write(path, json.dumps(model.model_dump(mode="json"), indent=2) + "\n")


def _read_document(path: Path, label: str) -> Any:
    """Parse the JSON document at *path*; *label* names it in errors."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid {label} at {path}: {exc}") from exc


# --- Global config ---


def _global_config_path() -> Path:
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load ``config.json``, or return the defaults when there is none.

    Raises:
        ConfigurationError: If the file is not JSON or does not validate.
    """
    path = _global_config_path()
    if not path.is_file():
        return GlobalConfig()
    data = _read_document(path, "global config")
    try:
        return GlobalConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    _write_model(_global_config_path(), config)


def update_global_config(key: str, value: str) -> GlobalConfig:
    """Set one dotted *key* of the global config to *value* and save it.

    *value* arrives as text and is converted by the model's own field
    types, so ``"64"`` becomes an int and ``"false"`` a bool.

    Raises:
        InvalidUsageError: If *key* names no setting or *value* does not
            validate. Nothing is written in that case.
    """
    data = load_global_config().model_dump(mode="json")
    *sections, field = key.split(".")
    target = data
    for section in sections:
        target = target.get(section)
        if not isinstance(target, dict):
            raise InvalidUsageError(f"Invalid config key: {key}")
    if field not in target or isinstance(target[field], dict):
        raise InvalidUsageError(f"Unknown config key: {key}")
    target[field] = value
    try:
        config = GlobalConfig.model_validate(data)
    except ValidationError as exc:
        raise InvalidUsageError(f"Invalid value for {key}: {value!r}") from exc
    save_global_config(config)
    return config


# --- Profiles ---


def _profile_path(name: str) -> Path:
    return get_profiles_dir() / f"{name}.json"


def list_profiles() -> list[str]:
    """Names of all stored profiles, sorted."""
    return sorted(p.stem for p in get_profiles_dir().glob("*.json") if p.is_file())


def profile_exists(name: str) -> bool:
    return _profile_path(name).is_file()


def load_profile(name: str) -> CredentialProfile:
    """Load the profile stored as ``profiles/<name>.json``.

    Raises:
        ConfigurationError: If the profile is missing, is not JSON, or does
            not validate.
    """
    path = _profile_path(name)
    if not path.is_file():
        raise ConfigurationError(f"Profile '{name}' not found at {path}")
    data = _read_document(path, f"profile '{name}'")
    try:
        return CredentialProfile.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid profile '{name}' at {path}: {exc}") from exc


def save_profile(profile: CredentialProfile) -> None:
    _write_model(_profile_path(profile.name), profile)
    logger.debug("Saved profile %s", profile.name)


def delete_profile(name: str) -> None:
    """Remove a stored profile.

    Raises:
        ConfigurationError: If the profile does not exist.
    """
    path = _profile_path(name)
    if not path.is_file():
        raise ConfigurationError(f"Profile '{name}' not found at {path}")
    path.unlink()


# --- Active profile ---


def resolve_config(
    cli_profile: Optional[str] = None,
    cli_format: Optional[str] = None,
) -> tuple[GlobalConfig, Optional[CredentialProfile]]:
    """Return the global config and the profile a command should use.

    The profile is the first of: *cli_profile*, ``$AUTHGEN_PROFILE``, the
    configured ``default_profile``, and finally the only stored profile
    when ``auto_select_single_profile`` is on. *cli_format* overrides
    ``output.format`` in the returned config.

    Raises:
        ConfigurationError: If the selected profile cannot be loaded.
    """
    global_cfg = load_global_config()

    name = cli_profile or os.environ.get(_PROFILE_ENV_VAR) or global_cfg.default_profile
    if name is None and global_cfg.auto_select_single_profile:
        stored = list_profiles()
        if len(stored) == 1:
            name = stored[0]
    if cli_format is not None:
        global_cfg.output.format = cli_format

    return global_cfg, load_profile(name) if name is not None else None


# --- Secrets ---


def resolve_credential(source: str) -> str:
    """Look up the secret named by a credential source.

    ``env:VAR``
        The value of ``$VAR``, unchanged.
    ``file:PATH``
        The file's text with surrounding whitespace stripped; ``~`` is
        expanded. A PEM key keeps its inner line breaks.
    ``prompt``
        Typed at an interactive prompt. Refused when stdin is not a TTY.

    Raises:
        ConfigurationError: If the secret cannot be obtained.
    """
    kind, _, ref = source.partition(":")

    if kind == "env":
        value = os.environ.get(ref)
        if value is None:
            raise ConfigurationError(
                f"Environment variable '{ref}' is not set (source: {source})"
            )
        return value

    if kind == "file":
        path = Path(ref).expanduser()
        if not path.is_file():
            raise ConfigurationError(f"Credential file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigurationError(f"Cannot read credential file {path}: {exc}") from exc

    if source == "prompt":
        if not sys.stdin.isatty():
            raise ConfigurationError(
                "Cannot prompt for credentials: stdin is not a TTY (source: prompt)"
            )
        return getpass.getpass("Enter credential: ")

    raise ConfigurationError(f"Unknown credential source format: {source}")
