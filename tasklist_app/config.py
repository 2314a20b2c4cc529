"""Settings read from environment variables (and a local .env file)."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"

PERMISSION_MODES = ("prompt", "grant", "deny")
DEFAULT_IMAGE_TYPES = ("png", "jpg", "jpeg", "gif", "webp")


def _k(suffix):
    return f"{ENV_PREFIX}_{suffix}"


def _env(name, default=""):
    value = os.getenv(name)
    return default if value is None or value.strip() == "" else value.strip()


def _env_int(name, default):
    try:
        return int(_env(name, str(default)))
    except ValueError:
        return default


def _env_bool(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_list(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return tuple(default)
    parts = [p.strip().lstrip(".").lower() for p in raw.replace(",", " ").split()]
    # Nothing usable left (e.g. ",") means the default, never "any file type"
    return tuple(p for p in parts if p) or tuple(default)


@dataclass(frozen=True)
class Settings:
    page_title: str = "Task List"
    # Android API level of the host, decides which permission is requested
    sdk_version: int = 34
    permission_mode: str = "prompt"
    picker_requires_permission: bool = False
    image_types: tuple = DEFAULT_IMAGE_TYPES
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, dotenv=True):
        if dotenv:
            load_dotenv(override=False)

        mode = _env(_k("PERMISSION_MODE"), "prompt").lower()
        if mode not in PERMISSION_MODES:
            mode = "prompt"

        level = logging.getLevelName(_env(_k("LOG_LEVEL"), "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO

        return cls(
            page_title=_env(_k("PAGE_TITLE"), "Task List"),
            sdk_version=_env_int(_k("SDK_VERSION"), 34),
            permission_mode=mode,
            picker_requires_permission=_env_bool(_k("PICKER_REQUIRES_PERMISSION"), False),
            image_types=_env_list(_k("IMAGE_TYPES"), DEFAULT_IMAGE_TYPES),
            log_level=level,
        )
