import numpy as np

# Constants
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
SCREEN_AREA = SCREEN_WIDTH * SCREEN_HEIGHT
SPRITE_WIDTH = 8


class Display:
    """
    The monochrome screen, stored row-major so that a pixel is addressed as [y, x].
    """
    def __init__(self):
        self.pixels = np.zeros((SCREEN_HEIGHT, SCREEN_WIDTH), np.bool_)

    def clear(self) -> None:
        """
        Turn off every pixel.
        """
        self.pixels.fill(False)

    def view(self) -> np.ndarray:
        """
        A read-only view of the pixels which follows later changes to the screen.
        :return: The view.
        """
        view = self.pixels.view()
        view.flags.writeable = False
        return view

    def draw_sprite(self, x: int, y: int, sprite: bytes) -> bool:
        """
        XOR the sprite onto the screen.  The starting coordinates wrap around the screen, but the sprite itself is
        clipped at the right and bottom edges.
        :param x: The x-coordinate of the top left corner of the sprite.
        :param y: The y-coordinate of the top left corner of the sprite.
        :param sprite: One byte per row of the sprite, most significant bit on the left.
        :return: True if any lit pixel was turned off, False otherwise.
        """
        x_origin = x % SCREEN_WIDTH
        y_origin = y % SCREEN_HEIGHT
        pixel_unset = False
        for row, byte in enumerate(sprite):
            y_coordinate = y_origin + row
            if y_coordinate >= SCREEN_HEIGHT:
                break
            for column in range(SPRITE_WIDTH):
                x_coordinate = x_origin + column
                if x_coordinate >= SCREEN_WIDTH:
                    break
                if not (byte >> (SPRITE_WIDTH - 1 - column)) & 1:
                    continue
                if self.pixels[y_coordinate, x_coordinate]:
                    pixel_unset = True
                self.pixels[y_coordinate, x_coordinate] ^= True
        return pixel_unset
