"""
Icon Catalog

The authoritative list of icons (and their aliases) the generator emits.
Loaded from the JSON manifest shipped with phosphor-icons/core, or derived from
a directory listing when no manifest is available.
"""

import json
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError


class CatalogError(Exception):
    """Raised when the catalog manifest cannot be read or validated"""


def pascal_to_camel(name: str) -> str:
    """ArrowUp -> arrowUp"""
    return re.sub(r"^.", lambda m: m.group(0).lower(), name)


def kebab_to_pascal(name: str) -> str:
    """arrow-up -> ArrowUp"""
    return "".join(part[:1].upper() + part[1:] for part in re.split(r"[-_\s]+", name) if part)


class IconAlias(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    pascal_name: str

    @property
    def camel_name(self) -> str:
        return pascal_to_camel(self.pascal_name)


class IconCatalogEntry(BaseModel):
    """One icon of the catalog. Unknown manifest keys (tags, categories...) are ignored."""
    model_config = ConfigDict(frozen=True)

    name: str
    pascal_name: str
    alias: Optional[IconAlias] = None

    @property
    def camel_name(self) -> str:
        """Exported Elm function name"""
        return pascal_to_camel(self.pascal_name)

    @property
    def exported_names(self) -> List[str]:
        names = [self.camel_name]
        if self.alias:
            names.append(self.alias.camel_name)
        return names


def load_catalog(path: Union[str, Path]) -> List[IconCatalogEntry]:
    """
    Load the icon catalog from a JSON manifest.

    The manifest is either a list of entries or an object with an "icons" list.
    Each entry needs "name" and "pascal_name", and may carry an "alias" object
    with the same two keys.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Could not read catalog {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("icons", [])

    try:
        return [IconCatalogEntry.model_validate(item) for item in data]
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog {path}: {e}") from e


def catalog_from_names(names: Iterable[str]) -> List[IconCatalogEntry]:
    """Build alias-free catalog entries from kebab-case icon names"""
    return [IconCatalogEntry(name=name, pascal_name=kebab_to_pascal(name)) for name in names]
