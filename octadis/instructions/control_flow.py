"""CHIP-8 conditional skip instructions sharing a top nibble with invalid forms."""

from octadis.constants import N_MASK, NN_MASK
from octadis.family import Family


KEY_OPERATIONS = {
    0x9E: Family.SKIP_IF_KEY_PRESSED,
    0xA1: Family.SKIP_IF_KEY_NOT_PRESSED,
}


def make_register_skip_decoder(family: Family):
    """Factory for 5XY0/9XY0 decoders: only a zero low nibble is encoded."""
    def decode_register_skip(opcode: int) -> Family:
        return family if opcode & N_MASK == 0 else Family.UNKNOWN
    return decode_register_skip


decode_skip_if_equal_register = make_register_skip_decoder(Family.SKIP_EQUAL_REGISTER)

decode_skip_if_not_equal_register = make_register_skip_decoder(Family.SKIP_NOT_EQUAL_REGISTER)


def decode_skip_if_key(opcode: int) -> Family:
    """EX9E/EXA1 - Skip if key pressed/not pressed."""
    return KEY_OPERATIONS.get(opcode & NN_MASK, Family.UNKNOWN)
