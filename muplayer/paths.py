"""Locations of the player's data files, and escaping for tab-separated records."""

from __future__ import annotations

import functools
import os
from pathlib import Path


def escape(text: str) -> str:
    """Drop newlines and turn tabs into four spaces."""
    if "\n" in text or "\t" in text:
        return text.replace("\n", "").replace("\t", "    ")
    return text


def user_profile_directory() -> str | None:
    return os.environ.get("USERPROFILE")


def _env(name: str) -> str:
    try:
        return os.environ[name]
    except KeyError:
        raise RuntimeError(f"environment variable {name} is not set") from None


@functools.cache
def mu_path() -> Path:
    """The data directory, created on first use."""
    if os.name == "nt":
        base = Path(_env("APPDATA"))
    else:
        base = Path(_env("HOME")) / ".config"
    directory = base / "mu"
    directory.mkdir(parents=True, exist_ok=True)

    # Databases written by older versions used a different name.
    old_db = directory / "mu_new.db"
    if old_db.exists():
        old_db.replace(directory / "mu.db")

    return directory


def settings_path() -> Path:
    return mu_path() / "settings.db"


def database_path() -> Path:
    return mu_path() / "mu.db"