from __future__ import annotations

from pathlib import Path
import yaml

from framework.errors import ConfigError


PROJECT_ROOT = Path(__file__).resolve().parents[2]

REQUIRED_KEYS = (
    ("project", "base_url"),
    ("project", "routes", "login"),
    ("project", "routes", "forgotten_marker"),
    ("credentials", "valid", "email"),
    ("credentials", "valid", "password"),
    ("paths", "locator"),
)


def load_config(path: str | Path = "config.yaml") -> dict:
    """Author: taobo.zhou
    中文：加载 YAML 配置文件并返回字典。
    参数:
        path: 配置文件路径，支持相对路径。
    """

    p = Path(path)
    if not p.is_absolute():
        p = (PROJECT_ROOT / p).resolve()

    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")

    with p.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config root must be a dict: {p}")

    for keys in REQUIRED_KEYS:
        if cfg_get(cfg, keys) is None:
            raise ConfigError(f"Missing config key: {'.'.join(keys)}")

    cfg["_project_root"] = str(PROJECT_ROOT)
    return cfg


def cfg_get(cfg: dict, keys, default=None):
    """按键路径安全读取嵌套配置。"""
    cur = cfg
    for k in keys:
        if not isinstance(cur, dict):
            return default
        cur = cur.get(k)
        if cur is None:
            return default
    return cur


def resolve_paths(cfg: dict) -> dict:
    """Author: taobo.zhou
    中文：将 paths 下的相对路径转换为基于项目根目录的绝对路径。
    参数:
        cfg: 配置字典。
    """

    project_root = Path(cfg.get("_project_root", "."))
    paths = cfg.get("paths")
    if isinstance(paths, dict):
        for k, v in list(paths.items()):
            if isinstance(v, str) and v and not Path(v).is_absolute():
                paths[k] = str((project_root / v).resolve())
    return cfg


def build_url(cfg: dict, route_key: str) -> str:
    """拼接 base_url 与路由，例如 login -> ...?route=account/login。"""
    base_url = cfg["project"]["base_url"]
    route = cfg["project"]["routes"][route_key]
    return f"{base_url}{route}"
