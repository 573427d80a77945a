import logging
import sys
import pygame
import easygui

import numpy as np

from typing import List, Optional

from pathlib import Path

from chipvm.display import SCREEN_WIDTH, SCREEN_HEIGHT
from chipvm.emulator import Emulator, INSTRUCTIONS_PER_FRAME, TIMER_DELAY
from chipvm.errors import EmulatorError

logger = logging.getLogger(__name__)

# Constants
SCALED_SCREEN_WIDTH = 800
SCALED_SCREEN_HEIGHT = 400
FRAMES_PER_SECOND = round(1 / TIMER_DELAY)
SOUND_FREQUENCY = 44100
SOUND_BUFFER = 4096
TONE_HZ = 550
ROM_SUFFIXES = (".ch8", ".chip8")
GAMES_PATH = str(Path.cwd().joinpath("games", "*.ch8"))
WINDOW_TITLE = "chipvm"

COLOUR_PALETTE = [(0, 0, 0), (0, 255, 0)]

# The left four columns of the keyboard, laid out like the COSMAC VIP hex keypad.
KEY_LOOKUP = {
    pygame.K_1: 1,
    pygame.K_q: 4,
    pygame.K_a: 7,
    pygame.K_z: 10,
    pygame.K_2: 2,
    pygame.K_w: 5,
    pygame.K_s: 8,
    pygame.K_x: 0,
    pygame.K_3: 3,
    pygame.K_e: 6,
    pygame.K_d: 9,
    pygame.K_c: 11,
    pygame.K_4: 12,
    pygame.K_r: 13,
    pygame.K_f: 14,
    pygame.K_v: 15,
}


def apply_key_event(emulator: Emulator, event: pygame.event.Event) -> bool:
    """
    Forward a keyboard event to the emulator's keypad.
    :param emulator: The emulator whose keypad should be updated.
    :param event: The pygame event.
    :return: True if the event was for one of the keypad keys, False otherwise.
    """
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return False

    key = KEY_LOOKUP.get(event.key, None)
    if key is None:
        return False

    emulator.set_key(key, event.type == pygame.KEYDOWN)
    return True


def read_rom(path: Path) -> Optional[bytes]:
    """
    Read a game from disk, letting the user know if it can not be used.
    :param path: The path of the game.
    :return: The contents of the game, None if it could not be read.
    """
    if not path.exists():
        easygui.msgbox(f"Game could not be loaded as the path does not exist!  Path: {path}.", "Game Not Found")
        return None

    if path.suffix.lower() not in ROM_SUFFIXES:
        easygui.msgbox(f"Game does not appear to be a CHIP-8 game as the file type is not one of {', '.join(ROM_SUFFIXES)}.  Path: {path}.", "Wrong File Extension")
        return None

    logger.debug(f"Loading game at path {path}.")
    with path.open("rb") as file:
        return file.read()


def screen_to_surface_array(screen: np.ndarray) -> np.ndarray:
    """
    Convert the emulator's screen into the palette indices pygame expects, which are indexed as [x, y].
    :param screen: The screen, indexed as [y, x].
    :return: The palette indices.
    """
    return screen.T.astype(np.ubyte)


def build_tone() -> np.ndarray:
    """
    Build one second of a sine wave at the tone frequency.
    :return: The samples.
    """
    # Sound is weird; borrowing some of this chunk from here, I claim no credit for it: http://shallowsky.com/blog/programming/python-play-chords.html
    length = SOUND_FREQUENCY / TONE_HZ
    omega = np.pi * 2 / length
    x_values = np.arange(int(length)) * omega
    one_cycle = SOUND_BUFFER * np.sin(x_values)
    return np.resize(one_cycle, (SOUND_FREQUENCY,)).astype(np.int16)


class Frontend:
    """
    A pygame window which runs an emulator, plays its sound and feeds it keyboard input.
    """
    def __init__(self, emulator: Optional[Emulator] = None):
        """
        Constructor.
        :param emulator: The emulator to run, a new one if not provided.
        """
        self.emulator = emulator if emulator is not None else Emulator()
        self.game_loaded = False
        self.running = False

        pygame.mixer.init(SOUND_FREQUENCY, -16, 1, SOUND_BUFFER)
        pygame.init()
        pygame.display.init()

        self.sound_player = pygame.sndarray.make_sound(build_tone())
        self.clock = pygame.time.Clock()

        pygame.display.set_caption(WINDOW_TITLE)
        self.screen = pygame.display.set_mode((SCALED_SCREEN_WIDTH, SCALED_SCREEN_HEIGHT), 0, 8)
        self.screen.set_palette(COLOUR_PALETTE)
        self.inter_screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), 0, 8)

    def load_game(self, path: Optional[Path] = None) -> None:
        """
        Stop any currently running game and load the given game, asking the user to pick one if none was given.
        :param path: The path of the game.
        """
        if path is None:
            file_name = easygui.fileopenbox(title="Select a Game", default=GAMES_PATH, filetypes=[["*.ch8", "*.chip8", "CHIP-8"]])
            if not file_name:
                easygui.msgbox("Pick a game to play!  Press the L key to re-open the game picker.", "No Game Selected")
                return
            path = Path(file_name)

        rom = read_rom(path)
        if rom is None:
            return

        self.sound_player.stop()
        self.emulator.reset()
        self.emulator.load_digit_sprites()
        try:
            self.emulator.load_rom(rom)
        except EmulatorError as error:
            easygui.msgbox(str(error), "Game Too Large")
            self.game_loaded = False
            return

        pygame.display.set_caption(path.stem)
        self.game_loaded = True

    def draw_to_display(self) -> None:
        """
        Update the display.
        """
        pygame.surfarray.blit_array(self.inter_screen, screen_to_surface_array(self.emulator.screen))
        pygame.transform.scale(self.inter_screen, (SCALED_SCREEN_WIDTH, SCALED_SCREEN_HEIGHT), self.screen)
        pygame.display.flip()

    def update_sound(self) -> None:
        """
        Play the tone while the sound timer is running.
        """
        if self.emulator.sound_active:
            if not self.sound_player.get_num_channels():
                self.sound_player.play(-1)
        else:
            self.sound_player.stop()

    def handle_events(self) -> None:
        """
        Handle all pending window and keyboard events.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_l:
                self.emulator.clear_keys()
                self.load_game()
            else:
                apply_key_event(self.emulator, event)

    def run_frame(self) -> None:
        """
        Run one frame of the game, reporting and skipping past any invalid instruction.
        """
        for _ in range(INSTRUCTIONS_PER_FRAME):
            try:
                self.emulator.step()
            except EmulatorError as error:
                logger.error(f"{error}.  Continuing at {hex(self.emulator.program_counter)}.")
        self.emulator.decrement_timers()

    def event_loop(self, path: Optional[Path] = None) -> None:
        """
        Loop which handles all events, runs the game and redraws the screen at a fixed frame rate.
        :param path: The game to start with, the game picker is shown if not provided.
        """
        self.load_game(path)
        self.running = True

        while self.running:
            self.handle_events()
            if self.game_loaded:
                self.run_frame()
                self.update_sound()
                self.draw_to_display()
            self.clock.tick(FRAMES_PER_SECOND)

        self.sound_player.stop()
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Start the emulator, optionally with the game given on the command line.
    :param argv: The command line arguments, without the program name.
    :return: The exit code.
    """
    # Set up the logging
    logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s]:  %(message)s", stream=sys.stdout)
    # Per-opcode debug logging is only kept when a debugger is attached.
    logging.getLogger("chipvm").setLevel(logging.DEBUG if "pydevd" in sys.modules else logging.INFO)

    argv = sys.argv[1:] if argv is None else argv
    path = Path(argv[0]) if argv else None

    frontend = Frontend()
    frontend.event_loop(path)
    return 0
