"""Shared constants for the dotgirl storage layout."""

STORAGE_DIR = "dotgirl"  # storage root name under the user's home directory

BUNDLE_DIR = "bundle"  # per-bundle subdirectories live here

CONFIG_FILE = "config.json"
LOCK_FILE = "lock.json"
BUNDLE_FILE = "bundle.json"
LOG_FILE = "dotgirl.log"

HOME_ENV_VAR = "DOTGIRL_HOME"  # overrides the storage root entirely
