import json
import os
from pathlib import Path

from core.timeline import DEFAULT_SPEED_WPS, clamp_speed

SETTINGS_PATH = Path("wordbyword_settings.json")

DEFAULTS = {
    "WORDBYWORD_QT_API": "auto",
    "WORDBYWORD_STYLE_PROFILE": "wordbyword",
    "WORDBYWORD_DEFAULT_WPS": str(DEFAULT_SPEED_WPS),
    "WORDBYWORD_TICK_MS": "16",
    "WORDBYWORD_URL_TIMEOUT_S": "15",
    "WORDBYWORD_ENCODING": "utf-8",
    "WORDBYWORD_FONT_SIZE": "28",
}


def load_settings(path=SETTINGS_PATH):
    settings = dict(DEFAULTS)
    if not path.exists():
        return settings

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return settings

    if not isinstance(raw, dict):
        return settings

    for key in DEFAULTS:
        if key in raw and raw[key] is not None:
            settings[key] = str(raw[key]).strip()
    return settings


def save_settings(settings, path=SETTINGS_PATH):
    payload = {}
    for key, default in DEFAULTS.items():
        payload[key] = str(settings.get(key, default)).strip()
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def apply_settings_to_environ(settings, override=True):
    for key, value in settings.items():
        if override or key not in os.environ:
            os.environ[key] = str(value)


def _env_float(key):
    raw = os.getenv(key, "").strip()
    try:
        return float(raw)
    except ValueError:
        return float(DEFAULTS[key])


def get_default_speed_wps():
    return clamp_speed(_env_float("WORDBYWORD_DEFAULT_WPS"))


def get_tick_interval_ms():
    return max(1, int(_env_float("WORDBYWORD_TICK_MS")))


def get_url_timeout_s():
    value = _env_float("WORDBYWORD_URL_TIMEOUT_S")
    if value <= 0:
        return float(DEFAULTS["WORDBYWORD_URL_TIMEOUT_S"])
    return value


def get_font_size():
    return max(8, int(_env_float("WORDBYWORD_FONT_SIZE")))


def get_encoding():
    value = os.getenv("WORDBYWORD_ENCODING", "").strip()
    return value or DEFAULTS["WORDBYWORD_ENCODING"]


def get_style_profile():
    return os.getenv("WORDBYWORD_STYLE_PROFILE", "").strip().lower() or DEFAULTS["WORDBYWORD_STYLE_PROFILE"]
