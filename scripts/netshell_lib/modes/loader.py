"""
Profile loader for netshell.

Functions for loading and validating mode profiles from YAML files.
"""

from pathlib import Path
from typing import List, Tuple

import yaml

from ..config.constants import PROFILE_DEFINITIONS_DIR
from ..errors import ProfileValidationError
from .dataclasses import ModeSpec, Profile


def validate_profile_definition(data: dict) -> List[str]:
    """
    Validate a profile YAML structure.
    Returns list of error messages (empty if valid).
    """
    errors = []

    required = ['name', 'root_mode', 'modes']
    for field_name in required:
        if field_name not in data:
            errors.append(f"Missing required field: {field_name}")

    if errors:
        return errors

    modes = data.get('modes')
    if not isinstance(modes, dict) or not modes:
        return ["'modes' must be a non-empty mapping"]

    root = data['root_mode']
    if root not in modes:
        errors.append(f"root_mode '{root}' is not a defined mode")

    interrupt = data.get('interrupt_mode', root)
    if interrupt not in modes:
        errors.append(f"interrupt_mode '{interrupt}' is not a defined mode")

    entries = {}
    for name, mode in modes.items():
        if not isinstance(mode, dict):
            errors.append(f"Mode '{name}' must be a mapping")
            continue

        if 'prompt_suffix' not in mode:
            errors.append(f"Mode '{name}' missing prompt_suffix")

        parent = mode.get('parent')
        if name == root:
            if parent is not None:
                errors.append(f"Root mode '{name}' cannot have a parent")
        elif parent is None:
            errors.append(f"Mode '{name}' has no parent (only the root may)")
        elif parent not in modes:
            errors.append(f"Mode '{name}' has unknown parent '{parent}'")

        entry = mode.get('entry')
        if entry is not None:
            if 'command' not in entry:
                errors.append(f"Mode '{name}' entry missing command")
            else:
                key = (entry['command'], entry.get('token'))
                if key in entries:
                    errors.append(
                        f"Modes '{entries[key]}' and '{name}' share entry {' '.join(str(k) for k in key if k)}"
                    )
                entries[key] = name

        commands = mode.get('commands', [])
        if not isinstance(commands, list):
            errors.append(f"Mode '{name}' commands must be a list")
        else:
            # Unquoted yes/no/on/off load as booleans
            bad = [c for c in commands if not isinstance(c, str)]
            if bad:
                errors.append(
                    f"Mode '{name}' command entries must be strings: {', '.join(map(str, bad))}"
                )

        for command, values in mode.get('hints', {}).items():
            if not isinstance(values, list):
                errors.append(f"Mode '{name}' hints for '{command}' must be a list")
            elif not all(isinstance(v, str) for v in values):
                errors.append(f"Mode '{name}' hints for '{command}' must be strings")

    if errors:
        return errors

    # Every parent chain must reach the root
    for name in modes:
        seen = set()
        current = name
        while current is not None:
            if current in seen:
                errors.append(f"Mode '{name}' is part of a parent cycle")
                break
            seen.add(current)
            current = modes[current].get('parent')

    return errors


def parse_profile_definition(data: dict) -> Profile:
    """Parse a profile from YAML data dict."""
    modes = {}
    for name, mode in data['modes'].items():
        entry = mode.get('entry') or {}
        modes[name] = ModeSpec(
            name=name,
            prompt_suffix=mode['prompt_suffix'],
            parent=mode.get('parent'),
            description=mode.get('description', ''),
            entry_command=entry.get('command'),
            entry_token=entry.get('token'),
            enter_message=mode.get('enter_message', ''),
            exit_message=mode.get('exit_message', ''),
            commands=frozenset(mode.get('commands', [])),
            hints={
                command: tuple(values)
                for command, values in mode.get('hints', {}).items()
            },
        )

    return Profile(
        name=data['name'],
        display_name=data.get('display_name', data['name']),
        description=data.get('description', ''),
        default_hostname=data.get('default_hostname', 'Network'),
        root_mode=data['root_mode'],
        interrupt_mode=data.get('interrupt_mode', data['root_mode']),
        modes=modes,
    )


def load_profile(name: str, definitions_dir: Path = PROFILE_DEFINITIONS_DIR) -> Profile:
    """
    Load and validate a profile definition by name.

    Raises:
        FileNotFoundError: If the profile file doesn't exist
        ProfileValidationError: If the definition is invalid
    """
    path = definitions_dir / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Profile definition not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ProfileValidationError(f"Profile '{name}' is not a YAML mapping")

    errors = validate_profile_definition(data)
    if errors:
        raise ProfileValidationError(
            f"Invalid profile '{name}':\n" + "\n".join(f"  - {e}" for e in errors)
        )

    return parse_profile_definition(data)


def list_profiles(definitions_dir: Path = PROFILE_DEFINITIONS_DIR) -> List[Tuple[str, str, str]]:
    """
    List available profiles.

    Returns:
        List of (name, display_name, description) tuples
    """
    profiles = []
    if not definitions_dir.exists():
        return profiles

    for yaml_file in sorted(definitions_dir.glob("*.yaml")):
        with open(yaml_file) as f:
            data = yaml.safe_load(f) or {}
        profiles.append((
            data.get('name', yaml_file.stem),
            data.get('display_name', yaml_file.stem),
            data.get('description', ''),
        ))
    return profiles
