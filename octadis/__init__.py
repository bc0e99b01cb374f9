"""CHIP-8 ROM disassembler package."""

__version__ = "0.1.0"

from octadis.constants import *
from octadis.family import Family
from octadis.decode import Operands, DecodedInstruction, decode, decode_families
from octadis.render import render, is_unknown
from octadis.rom import RomImage, RomError, TruncatedRomError, load_rom, rom_from_bytes
from octadis.disassembler import ListingLine, disassemble, format_line, format_listing, family_counts

__all__ = [
    "Family",
    "Operands",
    "DecodedInstruction",
    "decode",
    "decode_families",
    "render",
    "is_unknown",
    "RomImage",
    "RomError",
    "TruncatedRomError",
    "load_rom",
    "rom_from_bytes",
    "ListingLine",
    "disassemble",
    "format_line",
    "format_listing",
    "family_counts",
    "PROGRAM_START",
    "MEMORY_SIZE",
]
