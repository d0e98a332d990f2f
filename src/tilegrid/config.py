"""Dynaconf settings for tilegrid.

Files are read from /etc/tilegrid/, ~/.config/tilegrid/, the current
directory and TILEGRID_SETTINGS_FILE_FOR_DYNACONF, in increasing priority.
Keys can be overridden with TILEGRID_ environment variables, e.g.
TILEGRID_DEFAULT_MAX_ZOOM=20.
"""
import os
import pathlib

from dynaconf import Dynaconf

USER_DIR = pathlib.Path("~/.config/tilegrid").expanduser()
GLOB_DIR = pathlib.Path("/etc/tilegrid/")
CURR_DIR = pathlib.Path("./").absolute()
settings_files = [
    GLOB_DIR / "settings.toml",
    GLOB_DIR / ".secrets.toml",
    USER_DIR / "settings.toml",
    USER_DIR / ".secrets.toml",
    CURR_DIR / "settings.toml",
    CURR_DIR / ".secrets.toml"
    ]
extra_file = os.getenv("TILEGRID_SETTINGS_FILE_FOR_DYNACONF")
if extra_file:
    settings_files.append(pathlib.Path(extra_file).absolute())

settings = Dynaconf(
    merge_enabled=True,
    envvar_prefix="TILEGRID",
    settings_files=settings_files,
    environments=True,
    load_dotenv=True,
)


def change_env(new_env):
    """Switch the active Dynaconf environment and reload the settings."""
    settings.setenv(new_env)
    settings.reload()
