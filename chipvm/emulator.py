import logging

import numpy as np

from typing import List, Optional, Tuple

from chipvm.display import Display, SCREEN_HEIGHT
from chipvm.errors import InvalidInstructionError, KeyIndexError, MemoryAccessError, RomTooLargeError
from chipvm.opcode import Opcode
from chipvm.random_source import RandomSource, SystemRandomSource
from chipvm.stack import CallStack

logger = logging.getLogger(__name__)

# Constants
BYTE_MASK = 255
WORD_MASK = 65535
RAM_SIZE = 4096
REGISTER_COUNT = 16
KEY_COUNT = 16
FLAG_REGISTER = 15
GAME_START_ADDRESS = 512
FONT_START_ADDRESS = 80
FONT_SPRITE_HEIGHT = 5
MAX_ROM_SIZE = RAM_SIZE - GAME_START_ADDRESS
INSTRUCTIONS_PER_FRAME = 10

# Suggested pacing for hosts, the emulator itself never waits.
OPCODE_DELAY = 1 / 700
TIMER_DELAY = 1 / 60

DIGIT_SPRITES = bytes.fromhex(
    "f0909090f0"  # 0
    "2060202070"  # 1
    "f010f080f0"  # 2
    "f010f010f0"  # 3
    "9090f01010"  # 4
    "f080f010f0"  # 5
    "f080f090f0"  # 6
    "f010204040"  # 7
    "f090f090f0"  # 8
    "f090f010f0"  # 9
    "f090f09090"  # A
    "e090e090e0"  # B
    "f0808080f0"  # C
    "e0909090e0"  # D
    "f080f080f0"  # E
    "f080f08080"  # F
)


class WaitForKey:
    """
    A class which handles the blocking-for-key-press state.
    While no key is captured the wait is idle; once a key press is seen it is captured until that key is released.
    """
    def __init__(self):
        self.captured_key: Optional[int] = None

    @property
    def is_waiting_for_release(self) -> bool:
        return self.captured_key is not None


class Emulator:
    """
    The class which hold all the state of the virtual machine and executes its instructions.
    Nothing happens on its own; the host decides how often to step the emulator and tick its timers.
    """
    def __init__(self, random_source: Optional[RandomSource] = None):
        """
        Constructor.
        :param random_source: Where the random number opcode gets its bytes, random by default.
        """
        self.random_source = random_source if random_source is not None else SystemRandomSource()
        self.display = Display()
        self.reset()

    def reset(self) -> None:
        """
        Reset the state of the emulator.  The digit sprites are not reloaded.
        """
        self.ram = bytearray(RAM_SIZE)
        self.registers = bytearray(REGISTER_COUNT)
        self.register_i = 0
        self.delay = 0
        self.sound = 0
        self.program_counter = GAME_START_ADDRESS
        self.stack = CallStack()
        self.keys: List[bool] = [False] * KEY_COUNT
        self.display.clear()
        self.waiting_for_key = WaitForKey()

    def load_rom(self, rom: bytes) -> None:
        """
        Load the game into memory, starting at the game start address.  The contents are not validated.
        :param rom: The raw bytes of the game.
        """
        if len(rom) > MAX_ROM_SIZE:
            raise RomTooLargeError(len(rom), MAX_ROM_SIZE)

        self.ram[GAME_START_ADDRESS:GAME_START_ADDRESS + len(rom)] = rom
        logger.debug(f"Loaded a game of {len(rom)} bytes.")

    def load_digit_sprites(self) -> None:
        """
        Load the sprites for the hexadecimal digits 0-f into memory.
        """
        self.ram[FONT_START_ADDRESS:FONT_START_ADDRESS + len(DIGIT_SPRITES)] = DIGIT_SPRITES

    @property
    def screen(self) -> np.ndarray:
        """
        A read-only view of the screen, indexed as [y, x].
        """
        return self.display.view()

    @property
    def sound_active(self) -> bool:
        """
        Whether a sound should currently be playing.
        """
        return self.sound != 0

    # region Keys
    def set_key(self, key: int, pressed: bool) -> None:
        """
        Update the state of a key on the keypad.
        :param key: The key, 0-15.
        :param pressed: True if the key is held down, False otherwise.
        """
        self.keys[self.check_key(key)] = pressed
        logger.debug(f"Key State Changed.  Key: {key}, Pressed: {pressed}.")

    def clear_keys(self) -> None:
        """
        Release every key.
        """
        self.keys = [False] * KEY_COUNT

    @staticmethod
    def check_key(key: int) -> int:
        """
        Make sure the key is one which exists on the keypad.
        :param key: The key to check.
        :return: The key.
        """
        if not 0 <= key < KEY_COUNT:
            raise KeyIndexError(key)
        return key
    # endregion

    # region Timers
    def decrement_timers(self) -> None:
        """
        Decrement the delay and sound timers by one, stopping at 0.
        """
        if self.delay > 0:
            self.delay -= 1
        if self.sound > 0:
            self.sound -= 1
    # endregion

    # region Helpers
    @staticmethod
    def check_address(address: int, length: int = 1) -> int:
        """
        Make sure the memory range lies within the ram.
        :param address: The first address of the range.
        :param length: The number of bytes in the range.
        :return: The address.
        """
        if address < 0 or address + length > RAM_SIZE:
            raise MemoryAccessError(address, length)
        return address

    @staticmethod
    def bounded_subtract(minuend: int, subtrahend: int) -> Tuple[int, int]:
        """
        Subtract the subtrahend from the minuend, bounded by the confines of a byte.
        :param minuend: The integer from which to subtract.
        :param subtrahend: The integer to subtract.
        :return: The result of the subtraction and the not borrow (1 if there was no borrow, 0 otherwise).
        """
        difference_of_registers = minuend - subtrahend
        result = difference_of_registers % 256
        not_borrow = 1 if difference_of_registers >= 0 else 0
        return result, not_borrow
    # endregion

    # region Opcodes
    def run_frame(self) -> None:
        """
        Run one frame's worth of instructions, then tick the timers once.
        """
        for _ in range(INSTRUCTIONS_PER_FRAME):
            self.step()
        self.decrement_timers()

    def step(self) -> None:
        """
        Fetches the current instruction and executes it.
        """
        address = self.check_address(self.program_counter, 2)
        opcode = Opcode.from_bytes(self.ram[address], self.ram[address + 1])
        self.run_opcode(opcode)

    def run_opcode(self, opcode: Opcode) -> None:
        """
        Route the provided opcode to the correct method to execute it.  Increment the program counter to the next instruction.
        :param opcode: The opcode to execute.
        """
        address = self.program_counter
        self.program_counter += 2
        first_char = opcode.first
        last_char = opcode.nibble

        if first_char == 0 and opcode.byte == 224:
            self.opcode_clear_screen(opcode)
        elif first_char == 0 and opcode.byte == 238:
            self.opcode_return_from_subroutine(opcode)
        elif first_char == 1:
            self.opcode_goto(opcode)
        elif first_char == 2:
            self.opcode_call_subroutine(opcode)
        elif first_char == 3:
            self.opcode_if_equal(opcode)
        elif first_char == 4:
            self.opcode_if_not_equal(opcode)
        elif first_char == 5:
            self.opcode_if_register_equal(opcode)
        elif first_char == 6:
            self.opcode_set_register_value(opcode)
        elif first_char == 7:
            self.opcode_add_value(opcode)
        elif first_char == 8 and last_char == 0:
            self.opcode_set_register_value_other_register(opcode)
        elif first_char == 8 and last_char == 1:
            self.opcode_set_register_bitwise_or(opcode)
        elif first_char == 8 and last_char == 2:
            self.opcode_set_register_bitwise_and(opcode)
        elif first_char == 8 and last_char == 3:
            self.opcode_set_register_bitwise_xor(opcode)
        elif first_char == 8 and last_char == 4:
            self.opcode_add_other_register(opcode)
        elif first_char == 8 and last_char == 5:
            self.opcode_subtract_from_first_register(opcode)
        elif first_char == 8 and last_char == 6:
            self.opcode_bit_shift_right(opcode)
        elif first_char == 8 and last_char == 7:
            self.opcode_subtract_from_second_register(opcode)
        elif first_char == 8 and last_char == 14:
            self.opcode_bit_shift_left(opcode)
        elif first_char == 9:
            self.opcode_if_register_not_equal(opcode)
        elif first_char == 10:
            self.opcode_set_register_i(opcode)
        elif first_char == 11:
            self.opcode_goto_addition(opcode)
        elif first_char == 12:
            self.opcode_random_bitwise_and(opcode)
        elif first_char == 13:
            self.opcode_draw_sprite(opcode)
        elif first_char == 14 and opcode.byte == 158:
            self.opcode_if_key_pressed(opcode)
        elif first_char == 14 and opcode.byte == 161:
            self.opcode_if_key_not_pressed(opcode)
        elif first_char == 15 and opcode.byte == 7:
            self.opcode_get_delay_timer(opcode)
        elif first_char == 15 and opcode.byte == 10:
            self.opcode_wait_for_key_press(opcode)
        elif first_char == 15 and opcode.byte == 21:
            self.opcode_set_delay_timer(opcode)
        elif first_char == 15 and opcode.byte == 24:
            self.opcode_set_sound_timer(opcode)
        elif first_char == 15 and opcode.byte == 30:
            self.opcode_register_i_addition(opcode)
        elif first_char == 15 and opcode.byte == 41:
            self.opcode_set_register_i_to_hex_sprite_address(opcode)
        elif first_char == 15 and opcode.byte == 51:
            self.opcode_binary_coded_decimal(opcode)
        elif first_char == 15 and opcode.byte == 85:
            self.opcode_register_dump(opcode)
        elif first_char == 15 and opcode.byte == 101:
            self.opcode_register_load(opcode)
        else:
            raise InvalidInstructionError(opcode.full, address)

    def opcode_clear_screen(self, opcode: Opcode) -> None:
        """
        Clear the screen.
        :param opcode: The opcode to execute.
        """
        self.display.clear()
        logger.debug(f"Execute Opcode {opcode}: Clearing the screen.")

    def opcode_return_from_subroutine(self, opcode: Opcode) -> None:
        """
        Return from the current subroutine.
        :param opcode: The opcode to execute.
        """
        self.program_counter = self.stack.pop()
        logger.debug(f"Execute Opcode {opcode}: Return from subroutine, continue at {hex(self.program_counter)}.")

    def opcode_goto(self, opcode: Opcode) -> None:
        """
        Jump to the provided address.
        :param opcode: The opcode to execute.
        """
        self.program_counter = opcode.address
        logger.debug(f"Execute Opcode {opcode}: Jump to address {hex(opcode.address)}.")

    def opcode_call_subroutine(self, opcode: Opcode) -> None:
        """
        Call the subroutine at the given address.
        :param opcode: The opcode to execute.
        """
        self.stack.push(self.program_counter)
        self.program_counter = opcode.address
        logger.debug(f"Execute Opcode {opcode}: Call subroutine at address {hex(opcode.address)}.")

    def opcode_if_equal(self, opcode: Opcode) -> None:
        """
        Skip the next instruction if the value of the provided register is equal to the provided value.
        :param opcode: The opcode to execute.
        """
        register_value = self.registers[opcode.x]
        logger.debug(f"Execute Opcode {opcode}: Skip next instruction if register {opcode.x}'s value ({register_value}) is {opcode.byte}.")
        if register_value == opcode.byte:
            self.program_counter += 2
            logger.debug("Instruction skipped.")
        else:
            logger.debug("Instruction not skipped.")

    def opcode_if_not_equal(self, opcode: Opcode) -> None:
        """
        Skip the next instruction if the value of the provided register is not equal to the provided value.
        :param opcode: The opcode to execute.
        """
        register_value = self.registers[opcode.x]
        logger.debug(f"Execute Opcode {opcode}: Skip next instruction if register {opcode.x}'s value ({register_value}) is not {opcode.byte}.")
        if register_value != opcode.byte:
            self.program_counter += 2
            logger.debug("Instruction skipped.")
        else:
            logger.debug("Instruction not skipped.")

    def opcode_if_register_equal(self, opcode: Opcode) -> None:
        """
        Skip the next instruction if the value of the first provided register is equal to the value of the second provided register.
        :param opcode: The opcode to execute.
        """
        first_register_value = self.registers[opcode.x]
        second_register_value = self.registers[opcode.y]
        logger.debug(f"Execute Opcode {opcode}: Skip next instruction if register {opcode.x}'s value ({first_register_value}) is equal to register {opcode.y}'s value ({second_register_value}).")
        if first_register_value == second_register_value:
            self.program_counter += 2
            logger.debug("Instruction skipped.")
        else:
            logger.debug("Instruction not skipped.")

    def opcode_set_register_value(self, opcode: Opcode) -> None:
        """
        Set the value of the provided register to the provided value.
        :param opcode: The opcode to execute.
        """
        self.registers[opcode.x] = opcode.byte
        logger.debug(f"Execute Opcode {opcode}: Set the value of register {opcode.x} to {opcode.byte}.")

    def opcode_add_value(self, opcode: Opcode) -> None:
        """
        Adds the provided value to the value of the provided register.  The carry flag (register 15) is not set.
        :param opcode: The opcode to execute.
        """
        self.registers[opcode.x] = (self.registers[opcode.x] + opcode.byte) & BYTE_MASK
        logger.debug(f"Execute Opcode {opcode}: Add {opcode.byte} to the value of register {opcode.x}.")

    def opcode_set_register_value_other_register(self, opcode: Opcode) -> None:
        """
        Set the value of the first provided register to the value of the second provided register.
        :param opcode: The opcode to execute.
        """
        second_register_value = self.registers[opcode.y]
        self.registers[opcode.x] = second_register_value
        logger.debug(f"Execute Opcode {opcode}: Set the value of register {opcode.x} to the value of register {opcode.y}'s value ({second_register_value}).")

    def opcode_set_register_bitwise_or(self, opcode: Opcode) -> None:
        """
        Sets the value of the first provided register to the bitwise or of itself and the value of the second provided register.
        :param opcode: The opcode to execute.
        """
        first_register_value = self.registers[opcode.x]
        second_register_value = self.registers[opcode.y]
        result = first_register_value | second_register_value
        self.registers[opcode.x] = result
        logger.debug(f"Execute Opcode {opcode}: Set the value of register {opcode.x} to the bitwise or of itself and the value of register {opcode.y} ({first_register_value} | {second_register_value} = {result}).")

    def opcode_set_register_bitwise_and(self, opcode: Opcode) -> None:
        """
        Sets the value of the first provided register to the bitwise and of itself and the value of the second provided register.
        :param opcode: The opcode to execute.
        """
        first_register_value = self.registers[opcode.x]
        second_register_value = self.registers[opcode.y]
        result = first_register_value & second_register_value
        self.registers[opcode.x] = result
        logger.debug(f"Execute Opcode {opcode}: Set the value of register {opcode.x} to the bitwise and of itself and the value of register {opcode.y} ({first_register_value} & {second_register_value} = {result}).")

    def opcode_set_register_bitwise_xor(self, opcode: Opcode) -> None:
        """
        Sets the value of the first provided register to the bitwise xor of itself and the value of the second provided register.
        :param opcode: The opcode to execute.
        """
        first_register_value = self.registers[opcode.x]
        second_register_value = self.registers[opcode.y]
        result = first_register_value ^ second_register_value
        self.registers[opcode.x] = result
        logger.debug(f"Execute Opcode {opcode}: Set the value of register {opcode.x} to the bitwise xor of itself and the value of register {opcode.y} ({first_register_value} ^ {second_register_value} = {result}).")

    def opcode_add_other_register(self, opcode: Opcode) -> None:
        """
        Sets the value of the first provided register to the sum of itself and the value of the second provided register.  The carry flag (register 15) is set.
        :param opcode: The opcode to execute.
        """
        first_register_value = self.registers[opcode.x]
        second_register_value = self.registers[opcode.y]
        sum_of_registers = first_register_value + second_register_value
        result = sum_of_registers & BYTE_MASK
        carry = 1 if sum_of_registers > BYTE_MASK else 0
        self.registers[opcode.x] = result
        self.registers[FLAG_REGISTER] = carry
        logger.debug(f"Execute Opcode {opcode}: Set the value of register {opcode.x} to the sum of itself and the value of register {opcode.y} ({first_register_value} + {second_register_value} = {result}, carry = {carry}).")

    def opcode_subtract_from_first_register(self, opcode: Opcode) -> None:
        """
        Sets the value of the first provided register to the difference of itself and the value of the second provided register.  The not borrow flag (register 15) is set.
        :param opcode: The opcode to execute.
        """
        first_register_value = self.registers[opcode.x]
        second_register_value = self.registers[opcode.y]
        result, not_borrow = self.bounded_subtract(first_register_value, second_register_value)
        self.registers[opcode.x] = result
        self.registers[FLAG_REGISTER] = not_borrow
        logger.debug(f"Execute Opcode {opcode}: Set the value of register {opcode.x} to the difference of itself and the value of register {opcode.y} ({first_register_value} - {second_register_value} = {result}, not borrow = {not_borrow}).")

    def opcode_bit_shift_right(self, opcode: Opcode) -> None:
        """
        Shift the value of the first provided register to the right by 1.  Set register 15 to the value of the least significant bit before the operation.
        :param opcode: The opcode to execute.
        """
        first_register_value = self.registers[opcode.x]
        bit_shift = first_register_value >> 1
        least_significant_bit = first_register_value & 1
        self.registers[opcode.x] = bit_shift
        self.registers[FLAG_REGISTER] = least_significant_bit
        logger.debug(f"Execute Opcode {opcode}: Shift the value of register {opcode.x} to the right by 1 ({first_register_value} >> 1 = {bit_shift}, previous least significant bit = {least_significant_bit}).")

    def opcode_subtract_from_second_register(self, opcode: Opcode) -> None:
        """
        Sets the value of the first provided register to the difference of the value of the second provided register and itself.  The not borrow flag (register 15) is set.
        :param opcode: The opcode to execute.
        """
        first_register_value = self.registers[opcode.x]
        second_register_value = self.registers[opcode.y]
        result, not_borrow = self.bounded_subtract(second_register_value, first_register_value)
        self.registers[opcode.x] = result
        self.registers[FLAG_REGISTER] = not_borrow
        logger.debug(f"Execute Opcode {opcode}: Set the value of register {opcode.x} to the difference of the value of register {opcode.y} and itself ({second_register_value} - {first_register_value} = {result}, not borrow = {not_borrow}).")

    def opcode_bit_shift_left(self, opcode: Opcode) -> None:
        """
        Shift the value of the first provided register to the left by 1.  Set register 15 to the value of the most significant bit before the operation.
        :param opcode: The opcode to execute.
        """
        first_register_value = self.registers[opcode.x]
        bit_shift = (first_register_value << 1) & BYTE_MASK
        most_significant_bit = (first_register_value >> 7) & 1
        self.registers[opcode.x] = bit_shift
        self.registers[FLAG_REGISTER] = most_significant_bit
        logger.debug(f"Execute Opcode {opcode}: Shift the value of register {opcode.x} to the left by 1 ({first_register_value} << 1 = {bit_shift}, previous most significant bit = {most_significant_bit}).")

    def opcode_if_register_not_equal(self, opcode: Opcode) -> None:
        """
        Skip the next instruction if the value of the first provided register is not equal to the value of the second provided register.
        :param opcode: The opcode to execute.
        """
        first_register_value = self.registers[opcode.x]
        second_register_value = self.registers[opcode.y]
        logger.debug(f"Execute Opcode {opcode}: Skip next instruction if register {opcode.x}'s value ({first_register_value}) is not equal to register {opcode.y}'s value ({second_register_value}).")
        if first_register_value != second_register_value:
            self.program_counter += 2
            logger.debug("Instruction skipped.")
        else:
            logger.debug("Instruction not skipped.")

    def opcode_set_register_i(self, opcode: Opcode) -> None:
        """
        Sets the value of register I to the provided value.
        :param opcode: The opcode to execute.
        """
        self.register_i = opcode.address
        logger.debug(f"Execute Opcode {opcode}: Set register I to {hex(opcode.address)}.")

    def opcode_goto_addition(self, opcode: Opcode) -> None:
        """
        Jump to the provided address plus the value of register 0.
        :param opcode: The opcode to execute.
        """
        register_value = self.registers[0]
        self.program_counter = opcode.address + register_value
        logger.debug(f"Execute Opcode {opcode}: Jump to the provided address plus the value of register 0 ({hex(opcode.address)} + {hex(register_value)} = {hex(self.program_counter)}).")

    def opcode_random_bitwise_and(self, opcode: Opcode) -> None:
        """
        Set the value of the provided register to the bitwise and of the provided value and a random number [0, 255].
        :param opcode: The opcode to execute.
        """
        random_value = self.random_source.next_byte()
        result = opcode.byte & random_value
        self.registers[opcode.x] = result
        logger.debug(f"Execute Opcode {opcode}: Set the value of register {opcode.x} to the bitwise and of the provided value and a random number [0, 255] ({opcode.byte} & {random_value} = {result}).")

    def opcode_draw_sprite(self, opcode: Opcode) -> None:
        """
        Draws the sprite with the provided height found at the address denoted by the value of register I to the provided x and y coordinates.  The collision flag (register 15) is set to 1 if a pixel was unset, 0 otherwise.
        :param opcode: The opcode to execute.
        """
        register_x_value = self.registers[opcode.x]
        register_y_value = self.registers[opcode.y]
        self.registers[FLAG_REGISTER] = 0
        # Rows below the bottom of the screen are clipped, so they are never read.
        visible_rows = min(opcode.nibble, SCREEN_HEIGHT - register_y_value % SCREEN_HEIGHT)
        sprite = b""
        if visible_rows:
            address = self.check_address(self.register_i, visible_rows)
            sprite = bytes(self.ram[address:address + visible_rows])
        if self.display.draw_sprite(register_x_value, register_y_value, sprite):
            self.registers[FLAG_REGISTER] = 1
        logger.debug(f"Execute Opcode {opcode}: Drawing the sprite with a height of {opcode.nibble} and found at address {hex(self.register_i)} to the screen at the x-coordinate from the value of register {opcode.x} and y-coordinate from the value of register {opcode.y} ({register_x_value, register_y_value}), collision = {self.registers[FLAG_REGISTER]}.")

    def opcode_if_key_pressed(self, opcode: Opcode) -> None:
        """
        Skip the next instruction if the key represented by the value of the provided register is pressed.
        :param opcode: The opcode to execute.
        """
        key = self.check_key(self.registers[opcode.x])
        pressed = self.keys[key]
        logger.debug(f"Execute Opcode {opcode}: Skip next instruction if the key represented by the value of register {opcode.x} ({key}) is pressed ({pressed}).")
        if pressed:
            self.program_counter += 2
            logger.debug("Instruction skipped.")
        else:
            logger.debug("Instruction not skipped.")

    def opcode_if_key_not_pressed(self, opcode: Opcode) -> None:
        """
        Skip the next instruction if the key represented by the value of the provided register is not pressed.
        :param opcode: The opcode to execute.
        """
        key = self.check_key(self.registers[opcode.x])
        pressed = self.keys[key]
        logger.debug(f"Execute Opcode {opcode}: Skip next instruction if the key represented by the value of register {opcode.x} ({key}) is not pressed ({pressed}).")
        if not pressed:
            self.program_counter += 2
            logger.debug("Instruction skipped.")
        else:
            logger.debug("Instruction not skipped.")

    def opcode_get_delay_timer(self, opcode: Opcode) -> None:
        """
        Sets the value of the provided register to the value of the delay timer.
        :param opcode: The opcode to execute.
        """
        self.registers[opcode.x] = self.delay
        logger.debug(f"Execute Opcode {opcode}: Set the value of register {opcode.x} to the value of the delay timer ({self.delay}).")

    def opcode_wait_for_key_press(self, opcode: Opcode) -> None:
        """
        Block execution until a key is pressed and then released, at which point it is stored in the provided register.
        Blocking is done by rewinding the program counter so that this opcode runs again on the next step.
        :param opcode: The opcode to execute.
        """
        captured_key = self.waiting_for_key.captured_key
        if not self.waiting_for_key.is_waiting_for_release:
            for key, pressed in enumerate(self.keys):
                if pressed:
                    self.waiting_for_key.captured_key = key
                    logger.debug(f"Execute Opcode {opcode}: Key {key} pressed, waiting for it to be released.")
                    break
        elif not self.keys[captured_key]:
            self.waiting_for_key.captured_key = None
            self.registers[opcode.x] = captured_key
            logger.debug(f"Execute Opcode {opcode}: Key {captured_key} released, storing it in register {opcode.x} and un-blocking execution.")
            return

        self.program_counter -= 2

    def opcode_set_delay_timer(self, opcode: Opcode) -> None:
        """
        Sets the delay timer to the value of the provided register.
        :param opcode: The opcode to execute.
        """
        register_value = self.registers[opcode.x]
        self.delay = register_value
        logger.debug(f"Execute Opcode {opcode}: Set the value of the delay timer to value of register {opcode.x} ({register_value}).")

    def opcode_set_sound_timer(self, opcode: Opcode) -> None:
        """
        Sets the sound timer to the value of the provided register.  A sound plays while the value is greater than 0.
        :param opcode: The opcode to execute.
        """
        register_value = self.registers[opcode.x]
        self.sound = register_value
        logger.debug(f"Execute Opcode {opcode}: Set the value of the sound timer to value of register {opcode.x} ({register_value}).")

    def opcode_register_i_addition(self, opcode: Opcode) -> None:
        """
        Add the value of the provided register to register I.  Register 15 is left untouched.
        :param opcode: The opcode to execute.
        """
        register_value = self.registers[opcode.x]
        register_i_value = self.register_i
        self.register_i = (register_i_value + register_value) & WORD_MASK
        logger.debug(f"Execute Opcode {opcode}: Adds the value of register {opcode.x} to the value of register I ({register_i_value} + {register_value} = {self.register_i}).")

    def opcode_set_register_i_to_hex_sprite_address(self, opcode: Opcode) -> None:
        """
        Sets the value of register I to the address of the hexadecimal sprite represented by the value in the provided register.
        :param opcode: The opcode to execute.
        """
        register_value = self.registers[opcode.x]
        self.register_i = FONT_START_ADDRESS + register_value * FONT_SPRITE_HEIGHT
        logger.debug(f"Execute Opcode {opcode}: Set the value of register I to the address ({hex(self.register_i)}) of the hexadecimal sprite represented by the value of register {opcode.x} ({register_value}).")

    def opcode_binary_coded_decimal(self, opcode: Opcode) -> None:
        """
        Store the Binary Coded Decimal representation of the value of the provided register in memory, starting at the value of register I.
        Hundreds digit stored in memory at the location of the value of register I.
        Tens digit stored in memory at the location of the value of register I + 1.
        Units digit stored in memory at the location of the value of register I + 2.
        :param opcode: The opcode to execute.
        """
        address = self.check_address(self.register_i, 3)
        register_value = self.registers[opcode.x]
        hundreds = register_value // 100 % 10
        tens = register_value // 10 % 10
        units = register_value % 10
        self.ram[address:address + 3] = bytes((hundreds, tens, units))
        logger.debug(f"Execute Opcode {opcode}: Store the Binary Coded Decimal representation of the value of register {opcode.x} ({register_value}), starting at the value of register I ({hex(address)}), ({hundreds} at {hex(address)}, {tens} at {hex(address + 1)}, {units} at {hex(address + 2)}).")

    def opcode_register_dump(self, opcode: Opcode) -> None:
        """
        Store the values of all registers from register 0 to the provided register in memory, starting at the value of register I.
        :param opcode: The opcode to execute.
        """
        last_register = opcode.x
        address = self.check_address(self.register_i, last_register + 1)
        self.ram[address:address + last_register + 1] = self.registers[:last_register + 1]
        logger.debug(f"Execute Opcode {opcode}: Dumping the values of all registers from register 0 to register {last_register} into memory, starting at the value of register I ({hex(address)}).")

    def opcode_register_load(self, opcode: Opcode) -> None:
        """
        Load the values of all registers from register 0 to the provided register from memory, starting at the value of register I.
        :param opcode: The opcode to execute.
        """
        last_register = opcode.x
        address = self.check_address(self.register_i, last_register + 1)
        self.registers[:last_register + 1] = self.ram[address:address + last_register + 1]
        logger.debug(f"Execute Opcode {opcode}: Loading the values of all registers from register 0 to register {last_register} from memory, starting at the value of register I ({hex(address)}).")
    # endregion
