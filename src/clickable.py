import csv
import io
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from config import (
    BUTTON_COLOR_DEFAULT,
    BUTTON_COLOR_HOVER,
    BUTTON_FONT_SIZE,
    BUTTON_TEXT_COLOR,
)
from src.app_state import ButtonAction
from src.serial import from_dict_generic

RGBA = Tuple[int, int, int, int]


@dataclass
class ButtonSpec:
    """One row of the clickable layout file."""

    id: int
    name: str
    x: float
    y: float
    width: float
    height: float
    text: str = ""
    color: str = ""
    text_color: str = ""
    text_size: int = BUTTON_FONT_SIZE


def hex_to_rgba(value: str, default: RGBA) -> RGBA:
    """Parses '#RRGGBB' or '#RRGGBBAA'. Empty strings return `default`."""
    value = (value or "").strip().lstrip("#")
    if not value:
        return default
    if len(value) not in (6, 8):
        raise ValueError(f"Invalid hex color: #{value}")
    channels = [int(value[i : i + 2], 16) for i in range(0, len(value), 2)]
    if len(channels) == 3:
        channels.append(255)
    return tuple(channels)


def parse_layout(rows: Iterable[Dict[str, str]]) -> List[ButtonSpec]:
    specs = []
    for line_no, row in enumerate(rows, start=2):  # header is line 1
        try:
            spec = from_dict_generic(row, ButtonSpec)
            # Colors are checked here so bad hex digits report their row
            hex_to_rgba(spec.color, BUTTON_COLOR_DEFAULT)
            hex_to_rgba(spec.text_color, BUTTON_TEXT_COLOR)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Invalid layout row {line_no}: {e}") from e
        specs.append(spec)
    return specs


def load_layout(path: str) -> List[ButtonSpec]:
    """Reads the CSV layout file and checks every button action is present."""
    with open(path, newline="", encoding="utf-8") as f:
        specs = parse_layout(csv.DictReader(f))
    validate_layout(specs)
    logging.info(f"Loaded {len(specs)} clickables from {path}")
    return specs


def load_layout_text(text: str) -> List[ButtonSpec]:
    specs = parse_layout(csv.DictReader(io.StringIO(text)))
    validate_layout(specs)
    return specs


def validate_layout(specs: List[ButtonSpec]):
    ids = [spec.id for spec in specs]
    if len(ids) != len(set(ids)):
        raise ValueError(f"Duplicate clickable ids in layout: {sorted(ids)}")
    missing = {action.value for action in ButtonAction} - set(ids)
    if missing:
        raise ValueError(f"Layout is missing clickables for ids: {sorted(missing)}")


class Clickable:
    """
    A rectangular button. Visual state (color, tint) is changed by its
    callbacks; the manager decides which callback fires each frame.
    """

    def __init__(self, spec: ButtonSpec):
        self.id = spec.id
        self.name = spec.name
        self.x = spec.x
        self.y = spec.y
        self.width = spec.width
        self.height = spec.height
        self.text = spec.text
        self.text_size = spec.text_size
        self.color: RGBA = hex_to_rgba(spec.color, BUTTON_COLOR_DEFAULT)
        self.text_color: RGBA = hex_to_rgba(spec.text_color, BUTTON_TEXT_COLOR)
        self.tint: RGBA = BUTTON_COLOR_HOVER
        self.no_tint = True
        self.hovered = False

        self.on_press: Optional[Callable[["Clickable"], None]] = None
        self.on_hover: Optional[Callable[["Clickable"], None]] = None
        self.on_outside: Optional[Callable[["Clickable"], None]] = None

    @property
    def action(self) -> Optional[ButtonAction]:
        try:
            return ButtonAction(self.id)
        except ValueError:
            return None

    def contains(self, px: float, py: float) -> bool:
        return (
            self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height
        )


# --- Default callbacks ---


def recolor_on_hover(clickable: Clickable):
    clickable.color = BUTTON_COLOR_HOVER
    clickable.no_tint = False
    clickable.tint = BUTTON_COLOR_HOVER
    clickable.text_color = BUTTON_TEXT_COLOR


def recolor_on_outside(clickable: Clickable):
    clickable.color = BUTTON_COLOR_DEFAULT
    clickable.text_color = BUTTON_TEXT_COLOR
    clickable.no_tint = True


class ClickableManager:
    """Owns the layout's buttons and routes mouse input to their callbacks."""

    def __init__(self, specs: List[ButtonSpec]):
        self.clickables: List[Clickable] = [Clickable(spec) for spec in specs]

    @classmethod
    def from_csv(cls, path: str) -> "ClickableManager":
        return cls(load_layout(path))

    def setup(
        self,
        on_press: Callable[[Clickable], None],
        on_hover: Callable[[Clickable], None] = recolor_on_hover,
        on_outside: Callable[[Clickable], None] = recolor_on_outside,
    ):
        """Assigns the same callbacks to every clickable."""
        for clickable in self.clickables:
            clickable.on_press = on_press
            clickable.on_hover = on_hover
            clickable.on_outside = on_outside

    def get(self, clickable_id: int) -> Optional[Clickable]:
        for clickable in self.clickables:
            if clickable.id == clickable_id:
                return clickable
        return None

    def update(self, mouse_x: float, mouse_y: float, mouse_pressed: bool):
        """Hit-tests every clickable against this frame's mouse state."""
        for clickable in self.clickables:
            inside = clickable.contains(mouse_x, mouse_y)
            clickable.hovered = inside
            if inside:
                if clickable.on_hover:
                    clickable.on_hover(clickable)
                if mouse_pressed and clickable.on_press:
                    clickable.on_press(clickable)
            elif clickable.on_outside:
                clickable.on_outside(clickable)
