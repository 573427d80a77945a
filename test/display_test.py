import numpy as np
import pytest

from chipvm.display import Display, SCREEN_HEIGHT, SCREEN_WIDTH

# Two X shapes on top of each other, the tallest sprite possible.
LARGEST_SPRITE = bytes.fromhex("814224181824428142241818244281")


class TestDisplay:
    def setup_method(self):
        self.display = Display()

    def test_starts_blank(self):
        assert self.display.pixels.shape == (SCREEN_HEIGHT, SCREEN_WIDTH), "Screen has the wrong dimensions."
        assert not self.display.pixels.any(), "Screen starting out non-blank."

    def test_draw_largest_sprite(self):
        assert not self.display.draw_sprite(0, 0, LARGEST_SPRITE), "Collision reported on a blank screen."
        for row, byte in enumerate(LARGEST_SPRITE):
            expected = [bool((byte >> (7 - column)) & 1) for column in range(8)]
            assert list(self.display.pixels[row, :8]) == expected, f"Row {row} drawn incorrectly."
        assert not self.display.pixels[:, 8:].any(), "Pixels drawn to the right of the sprite."
        assert not self.display.pixels[len(LARGEST_SPRITE):, :].any(), "Pixels drawn below the sprite."

    @pytest.mark.parametrize("x, y", [(0, 0), (30, 10), (60, 30), (63, 31), (100, 200)])
    def test_draw_twice_restores(self, x, y):
        self.display.pixels[::3, ::5] = True
        before = self.display.pixels.copy()

        self.display.draw_sprite(x, y, LARGEST_SPRITE)
        lit_by_first_draw = self.display.pixels & ~before
        collision = self.display.draw_sprite(x, y, LARGEST_SPRITE)
        assert np.array_equal(self.display.pixels, before), "Drawing twice did not restore the screen."
        if lit_by_first_draw.any():
            assert collision, "Collision not reported when erasing pixels lit by the first draw."

    def test_collision_only_when_pixel_turned_off(self):
        self.display.draw_sprite(0, 0, bytes.fromhex("0f"))
        assert not self.display.draw_sprite(0, 0, bytes.fromhex("f0")), "Collision reported without overlapping pixels."
        assert self.display.draw_sprite(0, 0, bytes.fromhex("01")), "Collision not reported for an overlapping pixel."

    def test_origin_wraps_but_sprite_clips(self):
        self.display.draw_sprite(SCREEN_WIDTH * 2 + 62, SCREEN_HEIGHT + 31, bytes.fromhex("ffff"))
        assert self.display.pixels[31, 62] and self.display.pixels[31, 63], "Visible pixels were not drawn."
        assert self.display.pixels.sum() == 2, "Sprite wrapped instead of clipping."

    def test_clear(self):
        self.display.pixels.fill(True)
        self.display.clear()
        assert not self.display.pixels.any(), "Screen was not cleared."

    def test_view(self):
        view = self.display.view()
        assert not view.flags.writeable, "View can be written to."
        assert self.display.pixels.flags.writeable, "Making a view made the screen read-only."
        self.display.draw_sprite(0, 0, bytes.fromhex("80"))
        assert view[0, 0], "View does not follow changes to the screen."
