import os

from .rules import PathRules, get_rules
from .runtime import read_bool_env


def get_config_path(custom_path=None):
    if custom_path:
        return custom_path
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return os.path.join(xdg_config_home, "sysloc", "config.yaml")


def read_config(custom_path=None):
    import yaml

    config_path = get_config_path(custom_path)
    try:
        with open(config_path, "r", encoding="utf-8") as file:
            config = yaml.safe_load(file)
    except FileNotFoundError:
        return {}
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"{config_path}: expected a mapping at the top level")
    return config


def library_search_paths(config: dict | None = None) -> list[str]:
    """
    Candidate library directories: SYSLOC_LIBRARY_PATH entries first,
    then ``library_paths`` from the config file.
    """
    paths: list[str] = []
    env_value = os.environ.get("SYSLOC_LIBRARY_PATH") or ""
    paths.extend(p for p in env_value.split(os.pathsep) if p)

    configured = (config or {}).get("library_paths") or []
    if isinstance(configured, str):
        configured = [configured]
    paths.extend(str(p) for p in configured if p)
    return paths


def resolve_rules(config: dict | None = None, override: str | None = None) -> PathRules:
    name = override or os.environ.get("SYSLOC_RULES") or (config or {}).get("rules")
    return get_rules(name or "win32")


def resolve_verbose(config: dict | None = None, override: bool = False) -> bool:
    if override:
        return True
    env_value = read_bool_env("SYSLOC_VERBOSE")
    if env_value is not None:
        return env_value
    return bool((config or {}).get("verbose", False))
