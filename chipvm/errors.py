class EmulatorError(Exception):
    """
    A problem with the guest program which the host may report and choose to continue past.
    """


class InvalidInstructionError(EmulatorError):
    """
    The fetched opcode does not match any known instruction.
    """
    def __init__(self, opcode: int, address: int):
        self.opcode = opcode
        self.address = address
        super().__init__(f"Invalid instruction: {opcode:04X} at {hex(address)}")


class RomTooLargeError(EmulatorError):
    """
    The ROM does not fit into the program area of memory.
    """
    def __init__(self, size: int, capacity: int):
        self.size = size
        self.capacity = capacity
        super().__init__(f"ROM too large: {size} bytes, only {capacity} bytes available.")


class EmulatorFault(Exception):
    """
    A violation of the machine's structural invariants.  The emulator state can not be trusted afterwards.
    """


class StackOverflowError(EmulatorFault):
    pass


class StackUnderflowError(EmulatorFault):
    pass


class KeyIndexError(EmulatorFault):
    def __init__(self, key: int):
        self.key = key
        super().__init__(f"Key index out of range: {key}.  Expected 0-15.")


class MemoryAccessError(EmulatorFault):
    def __init__(self, address: int, length: int = 1):
        self.address = address
        self.length = length
        super().__init__(f"Memory access out of range: {length} byte(s) at {hex(address)}.")
