"""
Generator configuration

Locations of the icon source tree and of the two generated Elm files.
Every value can be overridden from the environment.
"""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent

# Icon sources (git submodule checkout of phosphor-icons/core)
ASSETS_PATH = Path(os.getenv("PHOSPHOR_ASSETS_PATH", ROOT_DIR / "core" / "assets"))
CATALOG_PATH = Path(os.getenv("PHOSPHOR_CATALOG_PATH", ROOT_DIR / "core" / "icons.json"))

# Generated outputs
INDEX_PATH = Path(os.getenv("PHOSPHOR_INDEX_PATH", ROOT_DIR / "src" / "Phosphor.elm"))
TEST_PATH = Path(os.getenv("PHOSPHOR_TEST_PATH", ROOT_DIR / "example" / "src" / "Test.elm"))

MODULE_NAME = os.getenv("PHOSPHOR_MODULE_NAME", "Phosphor")
ICON_PREVIEW_URL = os.getenv(
    "PHOSPHOR_PREVIEW_URL",
    "https://raw.githubusercontent.com/phosphor-icons/core/main/assets/regular"
)

SUBMODULE_UPDATE_COMMAND = ["git", "submodule", "update", "--remote", "--init", "--force", "--recursive"]

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
