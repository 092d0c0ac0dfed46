from pathlib import Path

# ==============================================================
# CONSTANTS
# ==============================================================
MANIFEST_YAML = "pkg.yaml"
MANIFEST_JSON = "pkg.json"
MANIFEST_FILES = (MANIFEST_YAML, MANIFEST_JSON)
LOCK_FILE = Path("pkg.lock")
PACKAGES_DIR = Path("packages")
CONFIG_FILE = Path(".pathsource/config.yaml")
PACKAGES_DIR_ENV = "PATHSOURCE_PACKAGES_DIR"
