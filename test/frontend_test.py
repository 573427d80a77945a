import logging
import sys

import numpy as np
import pytest

from pathlib import Path
from unittest import mock

pygame = pytest.importorskip("pygame")
pytest.importorskip("easygui")

from chipvm import frontend  # noqa: E402
from chipvm.emulator import Emulator, GAME_START_ADDRESS  # noqa: E402


class TestKeyEvents:
    def setup_method(self):
        self.emulator = Emulator()

    def test_every_keypad_key_mapped_once(self):
        assert sorted(frontend.KEY_LOOKUP.values()) == list(range(16)), "Keypad keys are missing or mapped twice."

    def test_key_down_and_up(self):
        handled = frontend.apply_key_event(self.emulator, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
        assert handled, "Keypad key event was not handled."
        assert self.emulator.keys[5], "Key press was not forwarded."

        frontend.apply_key_event(self.emulator, pygame.event.Event(pygame.KEYUP, key=pygame.K_w))
        assert not self.emulator.keys[5], "Key release was not forwarded."

    def test_unmapped_key(self):
        handled = frontend.apply_key_event(self.emulator, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p))
        assert not handled, "Unmapped key event was handled."
        assert not any(self.emulator.keys), "Unmapped key changed the keypad."

    def test_other_event(self):
        handled = frontend.apply_key_event(self.emulator, pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
        assert not handled, "Non-keyboard event was handled."


class TestReadRom:
    @mock.patch.object(frontend, "easygui")
    def test_read_rom(self, mock_easygui, tmp_path: Path):
        path = tmp_path.joinpath("pong.ch8")
        path.write_bytes(bytes.fromhex("00e0"))
        assert frontend.read_rom(path) == bytes.fromhex("00e0"), "Game contents were not read."
        mock_easygui.msgbox.assert_not_called()

    @mock.patch.object(frontend, "easygui")
    def test_missing_rom(self, mock_easygui, tmp_path: Path):
        assert frontend.read_rom(tmp_path.joinpath("missing.ch8")) is None, "Missing game was read."
        mock_easygui.msgbox.assert_called_once()

    @mock.patch.object(frontend, "easygui")
    def test_wrong_extension(self, mock_easygui, tmp_path: Path):
        path = tmp_path.joinpath("notes.txt")
        path.write_bytes(b"hello")
        assert frontend.read_rom(path) is None, "File with the wrong extension was read."
        mock_easygui.msgbox.assert_called_once()


class TestHelpers:
    def test_screen_to_surface_array(self):
        emulator = Emulator()
        emulator.display.draw_sprite(3, 1, bytes.fromhex("80"))
        surface_array = frontend.screen_to_surface_array(emulator.screen)
        assert surface_array.shape == (64, 32), "Surface array is not indexed as [x, y]."
        assert surface_array.dtype == np.ubyte, "Surface array does not hold palette indices."
        assert surface_array[3, 1] == 1 and surface_array.sum() == 1, "Lit pixel not converted."

    def test_build_tone(self):
        tone = frontend.build_tone()
        assert tone.shape == (frontend.SOUND_FREQUENCY,), "Tone is not one second long."
        assert tone.dtype == np.int16, "Tone samples are not 16-bit."
        assert tone.max() <= frontend.SOUND_BUFFER and tone.min() >= -frontend.SOUND_BUFFER, "Tone amplitude is wrong."


class TestFrontendFrame:
    def setup_method(self):
        # The window is not needed to run frames.
        self.frontend = frontend.Frontend.__new__(frontend.Frontend)
        self.frontend.emulator = Emulator()

    def test_run_frame_skips_invalid_opcode(self):
        self.frontend.emulator.load_rom(bytes.fromhex("7001" "ffff" "7001") + bytes.fromhex("1206"))
        self.frontend.emulator.delay = 2
        self.frontend.run_frame()
        assert self.frontend.emulator.registers[0] == 2, "Execution did not continue past the invalid opcode."
        assert self.frontend.emulator.program_counter == GAME_START_ADDRESS + 6, "Program counter incorrect after the frame."
        assert self.frontend.emulator.delay == 1, "Timers not ticked at the end of the frame."

    def test_update_sound(self):
        self.frontend.sound_player = mock.Mock()
        self.frontend.sound_player.get_num_channels.return_value = 0
        self.frontend.emulator.sound = 3
        self.frontend.update_sound()
        self.frontend.sound_player.play.assert_called_once_with(-1)

        self.frontend.emulator.sound = 0
        self.frontend.update_sound()
        self.frontend.sound_player.stop.assert_called_once()


class TestMainLogging:
    def setup_method(self):
        self.logger = logging.getLogger("chipvm")
        self.level = self.logger.level

    def teardown_method(self):
        self.logger.setLevel(self.level)

    def run_main(self, modules: dict) -> None:
        with mock.patch.object(frontend, "Frontend") as mock_frontend, \
                mock.patch.object(frontend.logging, "basicConfig") as mock_basic_config, \
                mock.patch.dict(sys.modules, modules):
            sys.modules.pop("pydevd", None)
            sys.modules.update(modules)
            assert frontend.main([]) == 0, "Unexpected exit code."
        mock_basic_config.assert_called_once()
        mock_frontend.return_value.event_loop.assert_called_once_with(None)

    def test_opcodes_not_logged_without_debugger(self, caplog):
        self.run_main({})
        caplog.set_level(logging.DEBUG)

        host = frontend.Frontend.__new__(frontend.Frontend)
        host.emulator = Emulator()
        host.emulator.load_rom(bytes.fromhex("6005" "ffff") + bytes.fromhex("1204"))
        host.run_frame()
        assert host.emulator.registers[0] == 5, "Opcode was not run."
        assert "Execute Opcode" not in caplog.text, "Opcode was logged without a debugger attached."
        assert "Invalid instruction: FFFF" in caplog.text, "Invalid instruction was not reported."

    def test_opcodes_logged_with_debugger(self, caplog):
        self.run_main({"pydevd": mock.Mock()})
        caplog.set_level(logging.DEBUG)

        emulator = Emulator()
        emulator.load_rom(bytes.fromhex("6005"))
        emulator.step()
        assert "Execute Opcode 6005" in caplog.text, "Opcode was not logged with a debugger attached."
