import argparse
import logging
import random

import pyray as pr

from config import (
    ASSETS_DIR,
    CLICKABLE_LAYOUT_CSV,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TARGET_FPS,
    WINDOW_TITLE,
)
from src.app_state import (
    AppState,
    ButtonAction,
    DisplayMode,
    advance,
    apply_action,
    mode_image,
)
from src.asset_paths import resolve_asset
from src.clickable import Clickable, ClickableManager
from src.idle_bob import IdleBob
from src.render_core import RenderCore
from src.swarm import SwarmSettings
from src.texture_manager import TextureManager


class NanobotClient:
    """
    Owns the sketch state and runs the frame loop: input callbacks first,
    then the swarm tick, then drawing.
    """

    def __init__(
        self,
        layout_path: str = CLICKABLE_LAYOUT_CSV,
        assets: str = ASSETS_DIR,
        target_fps: int = TARGET_FPS,
        seed=None,
    ):
        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT
        self.target_fps = target_fps
        self.assets = assets

        self.settings = SwarmSettings(width=self.screen_width, height=self.screen_height)
        self.rng = random.Random(seed)
        self.state = AppState()
        self.idle_bob = IdleBob(self.screen_height)

        self.clickables_manager = ClickableManager.from_csv(layout_path)
        self.texture_manager = TextureManager()
        self.render_core = RenderCore(self)

        # Mode textures are loaded once the window exists
        self.textures = {}

    def setup(self):
        pr.init_window(self.screen_width, self.screen_height, WINDOW_TITLE)
        pr.set_target_fps(self.target_fps)
        logging.info(
            f"Window initialized: {self.screen_width}x{self.screen_height} @ {self.target_fps} FPS"
        )

        for mode in DisplayMode:
            self.textures[mode] = self.texture_manager.load(
                resolve_asset(self.assets, mode_image(mode))
            )
            if self.textures[mode] is None:
                logging.warning(f"No texture for {mode.name} mode, using placeholder.")

        self.clickables_manager.setup(self.on_clickable_pressed)

    def current_texture(self):
        return self.textures.get(self.state.mode)

    def on_clickable_pressed(self, clickable: Clickable):
        action = clickable.action
        if action is None:
            logging.warning(f"Clickable {clickable.id} has no action bound.")
            return
        self.press(action)

    def press(self, action: ButtonAction):
        self.state = apply_action(self.state, action, self.settings, self.rng)

    def update(self):
        mouse = pr.get_mouse_position()
        self.clickables_manager.update(
            mouse.x,
            mouse.y,
            pr.is_mouse_button_pressed(pr.MouseButton.MOUSE_BUTTON_LEFT),
        )
        self.state = advance(self.state, self.settings)

    def run(self):
        self.setup()
        try:
            while not pr.window_should_close():
                self.update()
                self.render_core.draw_frame()
                self.idle_bob.update()
        finally:
            self.texture_manager.unload_all_textures()
            pr.close_window()
            logging.info("Window closed.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Clickable nanobot swarm sketch rendered with Raylib."
    )
    parser.add_argument(
        "--layout",
        type=str,
        default=CLICKABLE_LAYOUT_CSV,
        help=f"CSV file describing the clickables (default: {CLICKABLE_LAYOUT_CSV}).",
    )
    parser.add_argument(
        "--assets",
        type=str,
        default=ASSETS_DIR,
        help=f"Directory or base URL for mode images (default: {ASSETS_DIR}).",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=TARGET_FPS,
        help=f"Target frames per second (default: {TARGET_FPS}).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for nanobot spawn positions.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO).",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    client = NanobotClient(args.layout, args.assets, args.fps, args.seed)
    client.run()
