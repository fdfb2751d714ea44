import os
from pathlib import Path
from typing import Any, Mapping
from urllib.parse import urlencode

from hydra import compose, initialize, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import DictConfig

CONFIGS_DIR = str(Path(__file__).resolve().parent / 'configs')


def is_absent(value: Any) -> bool:
    return value is None


def drop_absent(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``data`` without keys whose value is absent."""
    return {k: v for k, v in data.items() if not is_absent(v)}


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return value


def build_query(url: str, params: Mapping[str, Any] | None) -> str:
    """
    Append ``params`` to ``url`` as a query string.
    Absent values are skipped and booleans are rendered the way the API expects (``true``/``false``).
    """
    query = {k: _query_value(v) for k, v in drop_absent(params or {}).items()}
    if not query:
        return url
    return f"{url}?{urlencode(query)}"


def load_config(config_name: str, config_path: str = CONFIGS_DIR) -> DictConfig:
    GlobalHydra.instance().clear()
    if os.path.isabs(config_path):
        initialize_config_dir(config_dir=config_path, version_base=None)
    else:
        initialize(config_path=config_path, version_base=None)
    config: DictConfig = compose(config_name=config_name)
    return config
