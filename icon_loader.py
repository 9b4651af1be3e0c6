"""
Icon Asset Loading

Walks the icon source tree and groups raw SVG text by icon name and weight.

Two on-disk layouts are supported:
    weight layout:  assets/<weight>/<icon>[-<weight>].svg
    icon layout:    assets/<icon>/<icon>[-<weight>].svg  (no suffix = regular)
"""

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Union

from catalog import IconCatalogEntry
from weights import Weight, split_weight_suffix

logger = logging.getLogger(__name__)

IconRecord = Dict[Weight, str]
IconTable = Dict[str, IconRecord]

LAYOUTS = ("auto", "weight", "icon")


class BadWeightFolderError(Exception):
    """A folder of the weight layout is not named after one of the six weights"""

    def __init__(self, folder: str):
        super().__init__(f"Bad folder name {folder}")
        self.folder = folder


def read_svg_file(file_path: Union[str, Path]) -> str:
    """
    Read SVG file content as UTF-8.

    Undecodable bytes are replaced with U+FFFD and a warning is logged; any
    parse failure that follows is reported for that icon alone.
    """
    with open(file_path, 'rb') as f:
        data = f.read()
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        logger.warning(f"{file_path} is not valid UTF-8 ({e.reason} at byte {e.start}), decoding with replacement")
        return data.decode('utf-8', errors='replace')


def _subfolders(assets_path: Path) -> List[Path]:
    return sorted(
        p for p in assets_path.iterdir()
        if p.is_dir() and not p.name.startswith(".")
    )


def detect_layout(assets_path: Union[str, Path]) -> str:
    """Weight layout if any folder is named after a weight, icon layout otherwise"""
    for folder in _subfolders(Path(assets_path)):
        if Weight.from_name(folder.name) is not None:
            return "weight"
    return "icon"


def load_weight_folders(
    assets_path: Union[str, Path],
    catalog: Optional[Sequence[IconCatalogEntry]] = None
) -> IconTable:
    """
    Load the weight layout.

    With a catalog, exactly the cataloged files are looked up and missing files
    leave the weight absent. Without one, every .svg file found is loaded.

    Raises:
        BadWeightFolderError: a folder is not named after a weight
    """
    assets_path = Path(assets_path)
    icons: IconTable = {}
    if catalog is not None:
        for entry in catalog:
            icons[entry.name] = {}

    for folder in _subfolders(assets_path):
        weight = Weight.from_name(folder.name)
        if weight is None:
            raise BadWeightFolderError(folder.name)

        if catalog is not None:
            for entry in catalog:
                for filename in (f"{entry.name}{weight.file_suffix}.svg", f"{entry.name}.svg"):
                    file_path = folder / filename
                    if file_path.is_file():
                        icons[entry.name][weight] = read_svg_file(file_path)
                        break
                else:
                    logger.debug(f"No {weight.value} file for {entry.name} in {folder}")
            continue

        for file_path in sorted(folder.glob("*.svg")):
            name = weight.strip_suffix(file_path.stem)
            icons.setdefault(name, {})[weight] = read_svg_file(file_path)

    if catalog is None:
        icons = dict(sorted(icons.items()))
    return icons


def load_icon_folders(assets_path: Union[str, Path]) -> IconTable:
    """Load the icon layout: one folder per icon, one weight-suffixed file per weight"""
    icons: IconTable = {}

    for folder in _subfolders(Path(assets_path)):
        record: IconRecord = {}
        for file_path in sorted(folder.glob("*.svg")):
            _, weight = split_weight_suffix(file_path.stem)
            weight = weight or Weight.REGULAR
            if weight in record:
                logger.warning(f"Duplicate {weight.value} file for {folder.name}: {file_path.name}")
            record[weight] = read_svg_file(file_path)
        icons[folder.name] = record

    return icons


def load_icons(
    assets_path: Union[str, Path],
    catalog: Optional[Sequence[IconCatalogEntry]] = None,
    layout: str = "auto"
) -> IconTable:
    """
    Load every icon below assets_path into {icon name: {weight: raw svg}}.

    Args:
        assets_path: Root of the icon source tree
        catalog: Optional catalog restricting and ordering the icons
        layout: "weight", "icon" or "auto" (detected from folder names)
    """
    if layout not in LAYOUTS:
        raise ValueError(f"Unknown layout {layout!r}, expected one of {', '.join(LAYOUTS)}")

    if layout == "auto":
        layout = detect_layout(assets_path)
    logger.info(f"Loading icons from {assets_path} ({layout} layout)")

    if layout == "weight":
        return load_weight_folders(assets_path, catalog)
    return load_icon_folders(assets_path)


def check_weights(record: Mapping[Union[Weight, str], str]) -> bool:
    """True if the record holds exactly the six weights, each once"""
    seen = set()
    for key in record:
        weight = key if isinstance(key, Weight) else Weight.from_name(key)
        if weight is None or weight in seen:
            return False
        seen.add(weight)
    return len(seen) == len(Weight)


def missing_weights(record: Mapping[Union[Weight, str], str]) -> List[Weight]:
    """Weights absent from the record, in canonical order"""
    present = {
        key if isinstance(key, Weight) else Weight.from_name(key)
        for key in record
    }
    return [weight for weight in Weight if weight not in present]
