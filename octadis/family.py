"""CHIP-8 instruction families."""

from enum import IntEnum


class Family(IntEnum):
    """Instruction kind assigned to every 16-bit opcode."""
    CLEAR_SCREEN = 0               # 00E0
    RETURN = 1                     # 00EE
    CALL_MACHINE_ROUTINE = 2       # 0NNN
    JUMP = 3                       # 1NNN
    CALL_SUBROUTINE = 4            # 2NNN
    SKIP_EQUAL_IMMEDIATE = 5       # 3XNN
    SKIP_NOT_EQUAL_IMMEDIATE = 6   # 4XNN
    SKIP_EQUAL_REGISTER = 7        # 5XY0
    SET_IMMEDIATE = 8              # 6XNN
    ADD_IMMEDIATE = 9              # 7XNN
    ASSIGN = 10                    # 8XY0
    OR = 11                        # 8XY1
    AND = 12                       # 8XY2
    XOR = 13                       # 8XY3
    ADD_REGISTER = 14              # 8XY4
    SUB_REGISTER = 15              # 8XY5
    SHIFT_RIGHT = 16               # 8XY6
    SUB_REVERSE = 17               # 8XY7
    SHIFT_LEFT = 18                # 8XYE
    SKIP_NOT_EQUAL_REGISTER = 19   # 9XY0
    SET_INDEX = 20                 # ANNN
    JUMP_ADD_OFFSET = 21           # BNNN
    RANDOM = 22                    # CXNN
    DRAW = 23                      # DXYN
    SKIP_IF_KEY_PRESSED = 24       # EX9E
    SKIP_IF_KEY_NOT_PRESSED = 25   # EXA1
    GET_DELAY_TIMER = 26           # FX07
    WAIT_KEY = 27                  # FX0A
    SET_DELAY_TIMER = 28           # FX15
    SET_SOUND_TIMER = 29           # FX18
    ADD_INDEX = 30                 # FX1E
    SET_INDEX_TO_SPRITE_ADDR = 31  # FX29
    STORE_BCD = 32                 # FX33
    DUMP_REGISTERS = 33            # FX55
    LOAD_REGISTERS = 34            # FX65
    UNKNOWN = 35


# Operand fields populated for each family
OPERAND_FIELDS = {
    Family.CLEAR_SCREEN: (),
    Family.RETURN: (),
    Family.CALL_MACHINE_ROUTINE: ("nnn",),
    Family.JUMP: ("nnn",),
    Family.CALL_SUBROUTINE: ("nnn",),
    Family.SKIP_EQUAL_IMMEDIATE: ("x", "nn"),
    Family.SKIP_NOT_EQUAL_IMMEDIATE: ("x", "nn"),
    Family.SKIP_EQUAL_REGISTER: ("x", "y"),
    Family.SET_IMMEDIATE: ("x", "nn"),
    Family.ADD_IMMEDIATE: ("x", "nn"),
    Family.ASSIGN: ("x", "y"),
    Family.OR: ("x", "y"),
    Family.AND: ("x", "y"),
    Family.XOR: ("x", "y"),
    Family.ADD_REGISTER: ("x", "y"),
    Family.SUB_REGISTER: ("x", "y"),
    Family.SHIFT_RIGHT: ("x", "y"),
    Family.SUB_REVERSE: ("x", "y"),
    Family.SHIFT_LEFT: ("x", "y"),
    Family.SKIP_NOT_EQUAL_REGISTER: ("x", "y"),
    Family.SET_INDEX: ("nnn",),
    Family.JUMP_ADD_OFFSET: ("nnn",),
    Family.RANDOM: ("x", "nn"),
    Family.DRAW: ("x", "y", "n"),
    Family.SKIP_IF_KEY_PRESSED: ("x",),
    Family.SKIP_IF_KEY_NOT_PRESSED: ("x",),
    Family.GET_DELAY_TIMER: ("x",),
    Family.WAIT_KEY: ("x",),
    Family.SET_DELAY_TIMER: ("x",),
    Family.SET_SOUND_TIMER: ("x",),
    Family.ADD_INDEX: ("x",),
    Family.SET_INDEX_TO_SPRITE_ADDR: ("x",),
    Family.STORE_BCD: ("x",),
    Family.DUMP_REGISTERS: ("x",),
    Family.LOAD_REGISTERS: ("x",),
    Family.UNKNOWN: (),
}
