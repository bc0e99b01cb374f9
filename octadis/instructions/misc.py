"""CHIP-8 miscellaneous instructions (Fxxx)."""

from octadis.constants import NN_MASK
from octadis.family import Family


MISC_OPERATIONS = {
    0x07: Family.GET_DELAY_TIMER,           # FX07 - VX = delay timer
    0x0A: Family.WAIT_KEY,                  # FX0A - wait for key press
    0x15: Family.SET_DELAY_TIMER,           # FX15 - delay timer = VX
    0x18: Family.SET_SOUND_TIMER,           # FX18 - sound timer = VX
    0x1E: Family.ADD_INDEX,                 # FX1E - I += VX
    0x29: Family.SET_INDEX_TO_SPRITE_ADDR,  # FX29 - I = font sprite for VX
    0x33: Family.STORE_BCD,                 # FX33 - BCD of VX at I..I+2
    0x55: Family.DUMP_REGISTERS,            # FX55 - store V0..VX at I
    0x65: Family.LOAD_REGISTERS,            # FX65 - load V0..VX from I
}


def decode_misc_instruction(opcode: int) -> Family:
    """Dispatch misc instructions on the low byte."""
    return MISC_OPERATIONS.get(opcode & NN_MASK, Family.UNKNOWN)
