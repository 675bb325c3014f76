import json
import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Optional

from wordpdf.docs.model import FontSet, PageGeometry
from wordpdf.errors import InvalidInputError

logger = logging.getLogger(__name__)

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config", "wordpdf.json")

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


@dataclass(frozen=True)
class ConverterSettings:
    """Page geometry and layout policy for one conversion run.

    Defaults reproduce A4 with 20mm margins, 12pt Helvetica on a 12mm line
    pitch and wrapping at 80 characters.
    """

    page_width_mm: float = 210.0
    page_height_mm: float = 297.0
    margin_mm: float = 20.0
    line_height_mm: float = 12.0
    font_size_pt: float = 12.0
    wrap_width: int = 80
    image_gap_mm: float = 10.0
    fit_image_height: bool = False
    title: str = "Word to PDF"
    font_regular: str = "Helvetica"
    font_bold: Optional[str] = "Helvetica-Bold"
    font_italic: Optional[str] = "Helvetica-Oblique"
    font_bold_italic: Optional[str] = "Helvetica-BoldOblique"

    def geometry(self) -> PageGeometry:
        return PageGeometry(self.page_width_mm, self.page_height_mm, self.margin_mm)

    def fonts(self) -> FontSet:
        return FontSet(
            regular=self.font_regular,
            bold=self.font_bold,
            italic=self.font_italic,
            bold_italic=self.font_bold_italic,
        )


def _valid_value(expected, value) -> bool:
    # bool is an int subclass; keep flags and numbers apart
    if expected is bool:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if expected is float:
        return isinstance(value, (int, float))
    if expected is int:
        return isinstance(value, int)
    if expected is str:
        return isinstance(value, str)
    # Optional[str] font names
    return value is None or isinstance(value, str)


def load_settings(path: Optional[str] = None) -> ConverterSettings:
    """Load settings from a JSON file, falling back to defaults.

    An explicitly given ``path`` must exist and hold a JSON object; the
    default ``config/wordpdf.json`` is optional.
    """
    settings = ConverterSettings()
    cfg_path = path or DEFAULT_CONFIG_PATH

    if not os.path.exists(cfg_path):
        if path:
            raise InvalidInputError(f"Config file not found: {cfg_path}")
        logger.warning("No config at %s, using defaults", cfg_path)
        return settings

    try:
        with open(cfg_path, "r", encoding="utf-8") as cfg_file:
            data = json.load(cfg_file) or {}
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidInputError(f"Could not load config {cfg_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidInputError(f"Config {cfg_path} must contain a JSON object")

    known = {f.name: f.type for f in fields(ConverterSettings)}
    for key in sorted(set(data) - set(known)):
        logger.warning("Ignoring unknown config key %r in %s", key, cfg_path)
    for key in sorted(set(data) & set(known)):
        if not _valid_value(known[key], data[key]):
            raise InvalidInputError(f"Config key {key!r} in {cfg_path} has invalid value {data[key]!r}")
    settings = replace(settings, **{k: v for k, v in data.items() if k in known})

    try:
        settings.geometry()
    except (ValueError, TypeError) as exc:
        raise InvalidInputError(f"Invalid page geometry in {cfg_path}: {exc}") from exc
    if settings.wrap_width < 1 or settings.line_height_mm <= 0:
        raise InvalidInputError(f"wrap_width and line_height_mm must be positive in {cfg_path}")
    return settings


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or os.getenv("WORDPDF_LOG_LEVEL", "info")).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
