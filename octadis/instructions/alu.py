"""CHIP-8 ALU operations (8xxx)."""

from octadis.constants import N_MASK
from octadis.family import Family


# Low nibble -> family; 8, 9, A, B, C, D and F are unassigned
ALU_OPERATIONS = {
    0x0: Family.ASSIGN,        # VX = VY
    0x1: Family.OR,            # VX |= VY
    0x2: Family.AND,           # VX &= VY
    0x3: Family.XOR,           # VX ^= VY
    0x4: Family.ADD_REGISTER,  # VX += VY, carry
    0x5: Family.SUB_REGISTER,  # VX -= VY, borrow
    0x6: Family.SHIFT_RIGHT,   # VX >>= 1
    0x7: Family.SUB_REVERSE,   # VX = VY - VX, borrow
    0xE: Family.SHIFT_LEFT,    # VX <<= 1
}


def decode_alu_operation(opcode: int) -> Family:
    """8XYN - ALU operations selected by the low nibble."""
    return ALU_OPERATIONS.get(opcode & N_MASK, Family.UNKNOWN)
