from typing import List

from chipvm.errors import StackOverflowError, StackUnderflowError

STACK_SIZE = 16


class CallStack:
    """
    The fixed size stack of return addresses used by subroutine calls.
    """
    def __init__(self):
        self.slots: List[int] = [0] * STACK_SIZE
        self.pointer = 0

    def __len__(self) -> int:
        return self.pointer

    def push(self, address: int) -> None:
        """
        Push a return address onto the stack.
        :param address: The address to push.
        """
        if self.pointer >= STACK_SIZE:
            raise StackOverflowError(f"Stack overflow: more than {STACK_SIZE} nested subroutine calls.")

        self.slots[self.pointer] = address
        self.pointer += 1

    def pop(self) -> int:
        """
        Pop the most recent return address off the stack.
        :return: The popped address.
        """
        if self.pointer == 0:
            raise StackUnderflowError("Stack underflow: returned from a subroutine when not in one.")

        self.pointer -= 1
        return self.slots[self.pointer]

    def peek(self) -> List[int]:
        """
        The occupied part of the stack, oldest entry first.
        """
        return self.slots[:self.pointer]
