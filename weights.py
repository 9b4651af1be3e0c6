"""
Icon weights

The six visual variants every Phosphor icon ships in.
"""

from enum import Enum
from typing import Optional, Tuple


class Weight(Enum):
    """Visual weight of an icon, in the order the generated code lists them"""

    THIN = "thin"
    LIGHT = "light"
    REGULAR = "regular"
    BOLD = "bold"
    FILL = "fill"
    DUOTONE = "duotone"

    @property
    def label(self) -> str:
        """Elm constructor name (e.g. "Thin")"""
        return self.value.capitalize()

    @property
    def file_suffix(self) -> str:
        """Filename suffix used by the icon sources; Regular files carry none"""
        if self is Weight.REGULAR:
            return ""
        return f"-{self.value}"

    def strip_suffix(self, stem: str) -> str:
        """Remove this weight's own filename suffix from a stem, if present"""
        suffix = self.file_suffix
        if suffix and stem.endswith(suffix) and len(stem) > len(suffix):
            return stem[:-len(suffix)]
        return stem

    @classmethod
    def from_name(cls, name: str) -> Optional["Weight"]:
        """Look up a weight by folder name or label, ignoring case"""
        folded = name.strip().casefold()
        for weight in cls:
            if weight.value == folded:
                return weight
        return None


def split_weight_suffix(stem: str) -> Tuple[str, Optional[Weight]]:
    """
    Split a trailing weight token off a filename stem.

    "arrow-up-bold" -> ("arrow-up", Weight.BOLD)
    "arrow-up"      -> ("arrow-up", None)
    """
    if "-" in stem:
        base, token = stem.rsplit("-", 1)
        weight = Weight.from_name(token)
        if weight is not None and base:
            return base, weight
    return stem, None
