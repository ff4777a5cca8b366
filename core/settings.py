"""Per-project settings for the term dictionary."""

import json
import os
from dataclasses import asdict, dataclass, fields


SETTINGS_DIR = ".termwell"
SETTINGS_FILE = "settings.json"


@dataclass
class TermSettings:
    """Term dictionary configuration.

    Attributes:
        dictionary_name: Folder inside the project holding term records
        record_extension: Extension of term records
        definition_marker: Delimiter of inline term definitions
        lookup_limit: Rows shown for term lookups
        definition_limit: Rows shown for term definitions
        regex_queries: Treat the typed word as a regular expression
        suggestion_delay_ms: Debounce between typing and suggesting
        enabled: Whether autocomplete runs at all
    """
    dictionary_name: str = "Dictionary"
    record_extension: str = ".md"
    definition_marker: str = "!!!"
    lookup_limit: int = 4
    definition_limit: int = 5
    regex_queries: bool = False
    suggestion_delay_ms: int = 150
    enabled: bool = True


def settings_path(project_root: str) -> str:
    return os.path.join(project_root, SETTINGS_DIR, SETTINGS_FILE)


def load_settings(project_root: str | None) -> TermSettings:
    """Load settings for a project, falling back to defaults.

    Stored values override defaults; unknown keys and values of the wrong
    type are ignored.

    Args:
        project_root: Project folder, or None for defaults

    Returns:
        TermSettings instance
    """
    settings = TermSettings()
    if not project_root:
        return settings

    path = settings_path(project_root)
    if not os.path.exists(path):
        return settings

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except Exception as e:
        print(f"WARN: Failed to load settings {path}: {e}")
        return settings

    if not isinstance(data, dict):
        print(f"WARN: Ignoring settings {path}: expected an object")
        return settings

    for field_info in fields(TermSettings):
        if field_info.name not in data:
            continue
        value = data[field_info.name]
        default = getattr(settings, field_info.name)
        # bool is a subclass of int, keep them apart
        if type(value) is not type(default):
            print(f"WARN: Ignoring setting {field_info.name}={value!r}")
            continue
        setattr(settings, field_info.name, value)

    return settings


def save_settings(project_root: str, settings: TermSettings) -> bool:
    """Persist settings for a project.

    Returns:
        True on success
    """
    path = settings_path(project_root)
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(settings), f, indent=2)
        return True
    except Exception as e:
        print(f"Error saving settings {path}: {e}")
        return False
