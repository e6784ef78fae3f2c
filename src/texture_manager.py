import logging
import os
from typing import Dict, Optional

import pyray as pr
import requests

from src.asset_paths import is_url


class TextureManager:
    """
    A manager for loading, caching, and unloading image textures using pyray.
    Textures are keyed by the file path or URL they were loaded from.
    """

    def __init__(self):
        self.texture_cache: Dict[str, pr.Texture] = {}
        logging.info("TextureManager initialized.")

    def load(self, identifier: str) -> Optional[pr.Texture]:
        """Loads from a URL or a file path depending on the identifier."""
        if is_url(identifier):
            return self.load_texture_from_url(identifier)
        return self.load_texture(identifier)

    def load_texture(self, path: str) -> Optional[pr.Texture]:
        """
        Loads a texture from a file path, returning the cached one if present.
        Returns None if loading fails.
        """
        if path in self.texture_cache:
            return self.texture_cache[path]

        if not os.path.isfile(path):
            logging.error(f"Texture file not found: {path}")
            return None

        texture = pr.load_texture(path)
        if texture.id > 0:  # A valid texture has a non-zero ID
            self.texture_cache[path] = texture
            logging.info(f"Loaded and cached texture from: {path}")
            return texture

        logging.error(f"Failed to load texture from: {path}")
        return None

    def load_texture_from_url(self, url: str) -> Optional[pr.Texture]:
        """
        Downloads an image and uploads it as a texture. Cached by URL.
        Returns None if loading fails.
        """
        if url in self.texture_cache:
            return self.texture_cache[url]

        try:
            logging.info(f"Downloading image from: {url}")
            response = requests.get(url, timeout=10)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logging.error(f"Failed to download image from {url}: {e}")
            return None

        image_data = response.content
        # load_image_from_memory needs the file extension
        file_ext = "." + url.split("?")[0].split(".")[-1].lower()

        image = pr.load_image_from_memory(file_ext, image_data, len(image_data))
        if image.width == 0 or image.height == 0:
            logging.error(f"Failed to decode image from URL: {url}")
            return None

        texture = pr.load_texture_from_image(image)
        pr.unload_image(image)  # CPU copy no longer needed once on the GPU

        if texture.id > 0:
            self.texture_cache[url] = texture
            logging.info(f"Loaded and cached texture from URL: {url}")
            return texture

        logging.error(f"Failed to create texture from image for URL: {url}")
        return None

    def unload_all_textures(self):
        """
        Unloads all cached textures from VRAM and clears the cache.
        Should be called before closing the window.
        """
        for texture in self.texture_cache.values():
            pr.unload_texture(texture)
        count = len(self.texture_cache)
        self.texture_cache.clear()
        logging.info(f"Unloaded {count} textures.")
