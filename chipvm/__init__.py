from chipvm.display import Display, SCREEN_WIDTH, SCREEN_HEIGHT, SCREEN_AREA
from chipvm.emulator import (
    Emulator,
    WaitForKey,
    GAME_START_ADDRESS,
    FONT_START_ADDRESS,
    INSTRUCTIONS_PER_FRAME,
    OPCODE_DELAY,
    TIMER_DELAY,
)
from chipvm.errors import (
    EmulatorError,
    InvalidInstructionError,
    RomTooLargeError,
    EmulatorFault,
    StackOverflowError,
    StackUnderflowError,
    KeyIndexError,
    MemoryAccessError,
)
from chipvm.opcode import Opcode
from chipvm.random_source import RandomSource, SystemRandomSource, SequenceRandomSource
from chipvm.stack import CallStack
