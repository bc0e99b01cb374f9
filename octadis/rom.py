"""CHIP-8 ROM loading and opcode assembly."""

from pathlib import Path
from typing import Optional, Union

import jax.numpy as jnp
from flax.struct import PyTreeNode, field

from octadis.constants import MEMORY_SIZE, PROGRAM_START, INSTRUCTION_SIZE


class RomError(Exception):
    """ROM could not be loaded."""


class TruncatedRomError(RomError):
    """ROM has an odd number of bytes, leaving a trailing half opcode."""


class RomImage(PyTreeNode):
    """ROM bytes and the address they are loaded at."""
    data: jnp.ndarray
    start: int = field(pytree_node=False, default=PROGRAM_START)
    name: str = field(pytree_node=False, default="")

    @property
    def size(self) -> int:
        return int(self.data.shape[0])

    @property
    def has_trailing_byte(self) -> bool:
        return self.size % INSTRUCTION_SIZE == 1

    @property
    def num_opcodes(self) -> int:
        return self.size // INSTRUCTION_SIZE

    def opcodes(self) -> jnp.ndarray:
        """Big-endian opcodes; a trailing odd byte is left out."""
        paired = self.data[:self.num_opcodes * INSTRUCTION_SIZE]
        return _pack_u16(paired[0::2], paired[1::2])

    def addresses(self) -> jnp.ndarray:
        """Memory address of each opcode."""
        return self.start + INSTRUCTION_SIZE * jnp.arange(self.num_opcodes, dtype=jnp.int32)


def _pack_u16(high: jnp.ndarray, low: jnp.ndarray) -> jnp.ndarray:
    """Pack byte arrays into uint16."""
    return (high.astype(jnp.uint16) << 8) | low.astype(jnp.uint16)


def rom_from_bytes(
    rom_data: bytes,
    start: int = PROGRAM_START,
    name: str = "",
    strict: bool = False,
) -> RomImage:
    """Validate raw ROM bytes and wrap them in a RomImage.

    Args:
        rom_data: Raw ROM contents
        start: Load address of the first byte
        name: Label used in error messages
        strict: Reject odd-length ROMs instead of dropping the trailing byte

    Raises:
        RomError: If the ROM is empty, does not fit in memory, or start is out of range
        TruncatedRomError: If strict and the ROM has an odd length
    """
    label = name or "<bytes>"
    if not 0 <= start < MEMORY_SIZE:
        raise RomError(f"Load address 0x{start:x} is outside CHIP-8 memory")
    if len(rom_data) == 0:
        raise RomError(f"ROM '{label}' is empty")

    capacity = MEMORY_SIZE - start
    if len(rom_data) > capacity:
        raise RomError(
            f"ROM '{label}' is {len(rom_data)} bytes; at most {capacity} fit from 0x{start:03x}"
        )
    if strict and len(rom_data) % INSTRUCTION_SIZE:
        raise TruncatedRomError(f"ROM '{label}' has an odd length ({len(rom_data)} bytes)")

    return RomImage(
        data=jnp.array(list(rom_data), dtype=jnp.uint8),
        start=start,
        name=name,
    )


def load_rom(
    filename: Union[str, Path],
    rom_dir: Optional[Union[str, Path]] = None,
    start: int = PROGRAM_START,
    strict: bool = False,
) -> RomImage:
    """Load ROM file, resolving filename against rom_dir when given."""
    path = Path(rom_dir) / filename if rom_dir else Path(filename)
    try:
        with open(path, 'rb') as f:
            rom_data = f.read()
    except OSError as e:
        raise RomError(f"Cannot read ROM '{path}': {e.strerror or e}") from e
    return rom_from_bytes(rom_data, start=start, name=str(path), strict=strict)
