"""ROM disassembly listings."""

from typing import Dict, Iterable, List

import jax.numpy as jnp
from chex import dataclass

from octadis.decode import DecodedInstruction, decode, decode_families
from octadis.family import Family
from octadis.logging import COLORS
from octadis.render import render, is_unknown
from octadis.rom import RomImage


@dataclass(frozen=True)
class ListingLine:
    """One decoded opcode at its memory address."""
    address: int
    instruction: DecodedInstruction

    @property
    def opcode(self) -> int:
        return self.instruction.raw

    @property
    def mnemonic(self) -> str:
        return render(self.instruction)


def disassemble(rom: RomImage) -> List[ListingLine]:
    """Decode every opcode of the ROM in address order."""
    opcodes = rom.opcodes().tolist()
    addresses = rom.addresses().tolist()
    return [
        ListingLine(address=address, instruction=decode(opcode))
        for address, opcode in zip(addresses, opcodes)
    ]


def format_line(line: ListingLine, show_address: bool = False, use_colors: bool = False) -> str:
    """Format a listing line as ``"{opcode:04x} {mnemonic}"``.

    Args:
        line: Line to format
        show_address: Prefix the line with ``"{address:04x}: "``
        use_colors: Wrap unknown mnemonics in red ANSI escapes

    Returns:
        Formatted line without trailing newline
    """
    mnemonic = line.mnemonic
    if use_colors and is_unknown(line.instruction):
        mnemonic = f"{COLORS['ERROR']}{mnemonic}{COLORS['RESET']}"

    text = f"{line.opcode:04x} {mnemonic}"
    if show_address:
        text = f"{line.address:04x}: {text}"
    return text


def format_listing(lines: Iterable[ListingLine], **kwargs) -> str:
    """Format lines joined by newlines. Keyword arguments go to format_line."""
    return "\n".join(format_line(line, **kwargs) for line in lines)


def family_counts(rom: RomImage) -> Dict[Family, int]:
    """Count opcodes per family using the batch decoder.

    Families that do not occur are left out.
    """
    opcodes = rom.opcodes()
    if opcodes.shape[0] == 0:
        return {}

    counts = jnp.bincount(decode_families(opcodes), length=len(Family))
    return {
        family: int(count)
        for family, count in zip(Family, counts.tolist())
        if count
    }
