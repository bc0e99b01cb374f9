"""CHIP-8 system instructions (0x0xxx)."""

from octadis.constants import CLEAR_SCREEN_CODE, RETURN_CODE, NNN_MASK
from octadis.family import Family


SYSTEM_OPERATIONS = {
    CLEAR_SCREEN_CODE: Family.CLEAR_SCREEN,
    RETURN_CODE: Family.RETURN,
}


def decode_system_instruction(opcode: int) -> Family:
    """00E0, 00EE, or 0NNN (machine routine) for every other low 12 bits."""
    return SYSTEM_OPERATIONS.get(opcode & NNN_MASK, Family.CALL_MACHINE_ROUTINE)
