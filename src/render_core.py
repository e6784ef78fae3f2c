from typing import List, Optional

import pyray as pr

from config import (
    BACKGROUND_COLOR,
    BUTTON_STROKE_COLOR,
    DESCRIPTION_BORDER_COLOR,
    DESCRIPTION_FONT_SIZE,
    DESCRIPTION_PANEL_COLOR,
    DESCRIPTION_PANEL_HEIGHT,
    DESCRIPTION_PANEL_WIDTH,
    DESCRIPTION_SIDE_OFFSET,
    DESCRIPTION_TEXT_COLOR,
    DESCRIPTION_TEXT_HEIGHT,
    DESCRIPTION_TEXT_WIDTH,
    DESCRIPTION_Y_OFFSET,
    SWARM_SPRITE_WIDTH,
)
from src.app_state import AppState, DescriptionKind, description_text
from src.clickable import Clickable


def wrap_text(text: str, font_size: int, max_width: int) -> List[str]:
    """Greedy word wrap using raylib's default font metrics."""
    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and pr.measure_text(candidate, font_size) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


class RenderCore:
    def __init__(self, client):
        self.client = client

    def draw_image_centered(
        self,
        texture: Optional[pr.Texture],
        x: float,
        y: float,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ):
        """Draws `texture` centered on (x, y), or a placeholder if it failed to load."""
        if texture is None:
            w = width or SWARM_SPRITE_WIDTH
            h = height or SWARM_SPRITE_WIDTH
            pr.draw_rectangle_lines(
                int(x - w / 2), int(y - h / 2), int(w), int(h), pr.LIGHTGRAY
            )
            return

        w = width if width is not None else texture.width
        h = height if height is not None else texture.height
        pr.draw_texture_pro(
            texture,
            pr.Rectangle(0, 0, texture.width, texture.height),
            pr.Rectangle(x - w / 2, y - h / 2, w, h),
            pr.Vector2(0, 0),
            0.0,
            pr.WHITE,
        )

    def draw_swarm(self, state: AppState, texture: Optional[pr.Texture]):
        height = state.sprite_height
        for member in state.swarm.members:
            self.draw_image_centered(
                texture, member.x, member.y, SWARM_SPRITE_WIDTH, height
            )

    def draw_description(self, state: AppState):
        if not state.panel.visible:
            return

        screen_width = self.client.screen_width
        if state.panel.kind is DescriptionKind.SEARCH:
            center_x = DESCRIPTION_SIDE_OFFSET
        else:
            center_x = screen_width - DESCRIPTION_SIDE_OFFSET
        center_y = self.client.screen_height / 2 + DESCRIPTION_Y_OFFSET

        panel = pr.Rectangle(
            center_x - DESCRIPTION_PANEL_WIDTH / 2,
            center_y - DESCRIPTION_PANEL_HEIGHT / 2,
            DESCRIPTION_PANEL_WIDTH,
            DESCRIPTION_PANEL_HEIGHT,
        )
        pr.draw_rectangle_rec(panel, pr.Color(*DESCRIPTION_PANEL_COLOR))
        pr.draw_rectangle_lines_ex(panel, 2, pr.Color(*DESCRIPTION_BORDER_COLOR))

        lines = wrap_text(
            description_text(state.panel.kind),
            DESCRIPTION_FONT_SIZE,
            DESCRIPTION_TEXT_WIDTH,
        )
        line_height = DESCRIPTION_FONT_SIZE + 4
        # Text block is vertically centered and clipped to the text area
        max_lines = DESCRIPTION_TEXT_HEIGHT // line_height
        lines = lines[:max_lines]
        y = center_y - len(lines) * line_height / 2
        color = pr.Color(*DESCRIPTION_TEXT_COLOR)
        for line in lines:
            line_w = pr.measure_text(line, DESCRIPTION_FONT_SIZE)
            pr.draw_text(
                line, int(center_x - line_w / 2), int(y), DESCRIPTION_FONT_SIZE, color
            )
            y += line_height

    def draw_main_nanobot(self, texture: Optional[pr.Texture], y: float):
        self.draw_image_centered(texture, self.client.screen_width / 2, y)

    def draw_clickable(self, clickable: Clickable):
        rect = pr.Rectangle(clickable.x, clickable.y, clickable.width, clickable.height)
        pr.draw_rectangle_rec(rect, pr.Color(*clickable.color))
        outline = BUTTON_STROKE_COLOR if clickable.no_tint else clickable.tint
        pr.draw_rectangle_lines_ex(rect, 1, pr.Color(*outline))

        text_w = pr.measure_text(clickable.text, clickable.text_size)
        pr.draw_text(
            clickable.text,
            int(clickable.x + (clickable.width - text_w) / 2),
            int(clickable.y + (clickable.height - clickable.text_size) / 2),
            clickable.text_size,
            pr.Color(*clickable.text_color),
        )

    def draw_frame(self):
        state = self.client.state
        texture = self.client.current_texture()

        pr.begin_drawing()
        pr.clear_background(pr.Color(*BACKGROUND_COLOR))

        self.draw_swarm(state, texture)
        self.draw_description(state)
        self.draw_main_nanobot(texture, self.client.idle_bob.y)

        for clickable in self.client.clickables_manager.clickables:
            self.draw_clickable(clickable)

        pr.end_drawing()
