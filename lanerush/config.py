# lanerush/config.py
from __future__ import annotations
import json, os
from typing import Dict, Any

from pathlib import Path
PKG_DIR = Path(__file__).resolve().parent

def _abs(path: str) -> str:
    # absolute paths are kept as given
    p = Path(path)
    return str(p) if p.is_absolute() else str((PKG_DIR / p).resolve())

PACKAGE_DIR = os.path.dirname(__file__)
CONFIG_PATH = os.path.join(PACKAGE_DIR, "config.json")

DEFAULT_CFG: Dict[str, Any] = {
    "display": {"fullscreen": False, "fps": 60, "size": [400, 600]},
    "audio": {
        "music": "assets/music.ogg",
        "crash": "assets/crash.wav",
        "music_volume": 0.5,
        "sfx_volume": 0.8,
    },
    "logging": {"level": "INFO"},
}

# two side panels plus four 80 px lanes
MIN_WIDTH = 360

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def _deepcopy(obj):
    return json.loads(json.dumps(obj))

def _merge(dst: dict, src: dict) -> dict:
    for k, v in src.items():
        if isinstance(v, dict) and isinstance(dst.get(k), dict):
            _merge(dst[k], v)
        else:
            dst[k] = v
    return dst

def _sanitize_cfg(cfg: dict) -> dict:
    for section in ("display", "audio", "logging"):
        if not isinstance(cfg.get(section), dict):
            cfg[section] = _deepcopy(DEFAULT_CFG[section])

    d = cfg["display"]
    d["fullscreen"] = bool(d.get("fullscreen", False))
    try:
        d["fps"] = int(max(30, min(240, d.get("fps", 60))))
    except (TypeError, ValueError):
        d["fps"] = 60
    size = d.get("size", [400, 600])
    if isinstance(size, (list, tuple)) and len(size) == 2 and all(isinstance(x, (int, float)) for x in size):
        w, h = max(MIN_WIDTH, min(4000, int(size[0]))), max(200, min(4000, int(size[1])))
        d["size"] = [w, h]
    else:
        d["size"] = [400, 600]

    a = cfg["audio"]
    try:
        a["music_volume"] = float(max(0.0, min(1.0, a.get("music_volume", 0.5))))
        a["sfx_volume"]   = float(max(0.0, min(1.0, a.get("sfx_volume",   0.8))))
    except (TypeError, ValueError):
        a["music_volume"], a["sfx_volume"] = 0.5, 0.8
    for k in ("music", "crash"):
        if isinstance(a.get(k), str) and a[k]:
            a[k] = _abs(a[k])
        else:
            a[k] = ""

    lg = cfg["logging"]
    level = str(lg.get("level", "INFO")).upper()
    lg["level"] = level if level in _LOG_LEVELS else "INFO"

    cfg["config_path"] = str(Path(CONFIG_PATH).resolve())
    return cfg

def save_config(partial_cfg: dict, path: str = CONFIG_PATH) -> None:
    try:
        with open(path, "r", encoding="utf-8") as f:
            base = json.load(f)
        if not isinstance(base, dict): base = {}
    except (OSError, ValueError):
        base = {}
    merged = _merge(base, partial_cfg)
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(merged, f, ensure_ascii=False, indent=2)
    except OSError:
        pass

def load_config(path: str = CONFIG_PATH) -> dict:
    cfg = _deepcopy(DEFAULT_CFG)
    try:
        with open(path, "r", encoding="utf-8") as f:
            user = json.load(f)
        if isinstance(user, dict):
            _merge(cfg, user)
    except FileNotFoundError:
        save_config(cfg, path)
    except (OSError, ValueError):
        pass
    return _sanitize_cfg(cfg)

CFG = load_config()
