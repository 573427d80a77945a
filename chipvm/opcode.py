from typing import NamedTuple

# Constants
UPPER_CHAR_MASK = 240
LOWER_CHAR_MASK = 15


def get_upper_char(byte: int) -> int:
    """
    Get the upper character (first 4 bits) of the given byte.
    :param byte: The byte from which to extract the character.
    :return: The upper character.
    """
    return (byte & UPPER_CHAR_MASK) >> 4


def get_lower_char(byte: int) -> int:
    """
    Get the lower character (last 4 bits) of the given byte.
    :param byte: The byte from which to extract the character.
    :return: The lower character.
    """
    return byte & LOWER_CHAR_MASK


class Opcode(NamedTuple):
    """
    A decoded instruction, split into its four characters (nibbles) from most to least significant.
    Every 16-bit value decodes to some opcode; whether it is a valid instruction is decided when it is run.
    """
    first: int
    second: int
    third: int
    fourth: int

    @classmethod
    def from_bytes(cls, high: int, low: int) -> "Opcode":
        """
        Decode the two bytes of an instruction, as stored in memory.
        :param high: The byte at the program counter.
        :param low: The byte following it.
        :return: The decoded opcode.
        """
        return cls(get_upper_char(high), get_lower_char(high), get_upper_char(low), get_lower_char(low))

    @classmethod
    def from_int(cls, value: int) -> "Opcode":
        return cls.from_bytes((value >> 8) & 0xFF, value & 0xFF)

    @property
    def full(self) -> int:
        """
        The whole 16-bit instruction.
        """
        return self.first << 12 | self.second << 8 | self.third << 4 | self.fourth

    @property
    def address(self) -> int:
        """
        The lowest 12 bits (nnn), used as a jump target or memory address.
        """
        return self.second << 8 | self.third << 4 | self.fourth

    @property
    def byte(self) -> int:
        """
        The lowest 8 bits (kk), an immediate value.
        """
        return self.third << 4 | self.fourth

    @property
    def nibble(self) -> int:
        """
        The lowest 4 bits (n), used as the sprite height.
        """
        return self.fourth

    @property
    def x(self) -> int:
        return self.second

    @property
    def y(self) -> int:
        return self.third

    def __str__(self) -> str:
        return f"{self.full:04X}"
