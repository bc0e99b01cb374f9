"""Mnemonic rendering for decoded CHIP-8 instructions."""

from octadis.decode import DecodedInstruction
from octadis.family import Family


# Registers and immediates in decimal, addresses as 3 hex digits
MNEMONICS = {
    Family.CLEAR_SCREEN: "disp_clear()",
    Family.RETURN: "return",
    Family.CALL_MACHINE_ROUTINE: "call_rca(0x{nnn:03x})",
    Family.JUMP: "goto 0x{nnn:03x}",
    Family.CALL_SUBROUTINE: "*(0x{nnn:03x})()",
    Family.SKIP_EQUAL_IMMEDIATE: "if (V{x} == {nn}) skip",
    Family.SKIP_NOT_EQUAL_IMMEDIATE: "if (V{x} != {nn}) skip",
    Family.SKIP_EQUAL_REGISTER: "if (V{x} == V{y}) skip",
    Family.SET_IMMEDIATE: "V{x} = {nn}",
    Family.ADD_IMMEDIATE: "V{x} += {nn}",
    Family.ASSIGN: "V{x} = V{y}",
    Family.OR: "V{x} |= V{y}",
    Family.AND: "V{x} &= V{y}",
    Family.XOR: "V{x} ^= V{y}",
    Family.ADD_REGISTER: "V{x} += V{y}",
    Family.SUB_REGISTER: "V{x} -= V{y}",
    Family.SHIFT_RIGHT: "V{x} >>= 1 (V{y})",
    Family.SUB_REVERSE: "V{x} = V{y} - V{x}",
    Family.SHIFT_LEFT: "V{x} <<= 1 (V{y})",
    Family.SKIP_NOT_EQUAL_REGISTER: "if (V{x} != V{y}) skip",
    Family.SET_INDEX: "I = 0x{nnn:03x}",
    Family.JUMP_ADD_OFFSET: "goto V0 + 0x{nnn:03x}",
    Family.RANDOM: "V{x} = rand() & {nn}",
    Family.DRAW: "draw(V{x}, V{y}, {n})",
    Family.SKIP_IF_KEY_PRESSED: "if (key() == V{x}) skip",
    Family.SKIP_IF_KEY_NOT_PRESSED: "if (key() != V{x}) skip",
    Family.GET_DELAY_TIMER: "V{x} = get_delay()",
    Family.WAIT_KEY: "V{x} = get_key()",
    Family.SET_DELAY_TIMER: "delay_timer(V{x})",
    Family.SET_SOUND_TIMER: "sound_timer(V{x})",
    Family.ADD_INDEX: "I += V{x}",
    Family.SET_INDEX_TO_SPRITE_ADDR: "I = sprite_addr[V{x}]",
    Family.STORE_BCD: "set_bcd(V{x})",
    Family.DUMP_REGISTERS: "reg_dump(V{x}, &I)",
    Family.LOAD_REGISTERS: "reg_load(V{x}, &I)",
    Family.UNKNOWN: "unknown(0x{raw:04x})",
}


def render(instruction: DecodedInstruction) -> str:
    """Format a decoded instruction as its canonical mnemonic.

    Args:
        instruction: Output of ``decode``

    Returns:
        Mnemonic string without terminal escape codes
    """
    operands = instruction.operands
    return MNEMONICS[instruction.family].format(
        x=operands.x,
        y=operands.y,
        n=operands.n,
        nn=operands.nn,
        nnn=operands.nnn,
        raw=instruction.raw,
    )


def is_unknown(instruction: DecodedInstruction) -> bool:
    """True if the opcode matched no defined encoding."""
    return instruction.family == Family.UNKNOWN
