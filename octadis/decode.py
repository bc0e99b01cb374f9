"""CHIP-8 instruction decoding."""

import operator
from typing import Optional

import jax
import jax.lax
import jax.numpy as jnp
from chex import dataclass

from octadis.constants import (
    CLEAR_SCREEN_CODE, RETURN_CODE, OPCODE_MASK,
    X_MASK, Y_MASK, N_MASK, NN_MASK, NNN_MASK,
)
from octadis.family import Family, OPERAND_FIELDS
from octadis.instructions.system import decode_system_instruction
from octadis.instructions.control_flow import (
    KEY_OPERATIONS, decode_skip_if_equal_register,
    decode_skip_if_not_equal_register, decode_skip_if_key,
)
from octadis.instructions.alu import ALU_OPERATIONS, decode_alu_operation
from octadis.instructions.misc import MISC_OPERATIONS, decode_misc_instruction


@dataclass(frozen=True)
class Operands:
    """Operand fields extracted from an opcode. Fields the family does not use are None."""
    x: Optional[int] = None    # Second nibble (VX register)
    y: Optional[int] = None    # Third nibble (VY register)
    n: Optional[int] = None    # Fourth nibble (4-bit immediate)
    nn: Optional[int] = None   # Last byte (8-bit immediate)
    nnn: Optional[int] = None  # Last 12 bits (12-bit address)


@dataclass(frozen=True)
class DecodedInstruction:
    """Decoded CHIP-8 instruction with extracted operands."""
    family: Family
    operands: Operands
    raw: int


# Top nibbles that map to exactly one family
SINGLE_FAMILY_NIBBLES = {
    0x1: Family.JUMP,
    0x2: Family.CALL_SUBROUTINE,
    0x3: Family.SKIP_EQUAL_IMMEDIATE,
    0x4: Family.SKIP_NOT_EQUAL_IMMEDIATE,
    0x6: Family.SET_IMMEDIATE,
    0x7: Family.ADD_IMMEDIATE,
    0xA: Family.SET_INDEX,
    0xB: Family.JUMP_ADD_OFFSET,
    0xC: Family.RANDOM,
    0xD: Family.DRAW,
}

_SHARED_NIBBLE_DECODERS = {
    0x0: decode_system_instruction,
    0x5: decode_skip_if_equal_register,
    0x8: decode_alu_operation,
    0x9: decode_skip_if_not_equal_register,
    0xE: decode_skip_if_key,
    0xF: decode_misc_instruction,
}

_FIELD_EXTRACTORS = {
    "x": lambda opcode: (opcode & X_MASK) >> 8,
    "y": lambda opcode: (opcode & Y_MASK) >> 4,
    "n": lambda opcode: opcode & N_MASK,
    "nn": lambda opcode: opcode & NN_MASK,
    "nnn": lambda opcode: opcode & NNN_MASK,
}


def _single_family(family: Family):
    return lambda opcode: family


# Indexed by top nibble
_TOP_LEVEL_DECODERS = tuple(
    _SHARED_NIBBLE_DECODERS.get(nibble) or _single_family(SINGLE_FAMILY_NIBBLES[nibble])
    for nibble in range(16)
)


def extract_operands(family: Family, opcode: int) -> Operands:
    """Extract the operand fields used by family from their fixed bit positions."""
    return Operands(**{name: _FIELD_EXTRACTORS[name](opcode) for name in OPERAND_FIELDS[family]})


def decode(instruction: int) -> DecodedInstruction:
    """Decode 16-bit instruction into its family and operands.

    Every 16-bit value decodes; opcodes matching no encoding come back as
    ``Family.UNKNOWN`` with ``raw`` preserved.

    Args:
        instruction: Opcode as a Python, NumPy or JAX integer

    Returns:
        Immutable DecodedInstruction

    Raises:
        TypeError: If instruction is not an integer (floats and strings are rejected)
        ValueError: If instruction does not fit in 16 bits
    """
    opcode = operator.index(instruction)
    if not 0 <= opcode <= OPCODE_MASK:
        raise ValueError(f"Opcode must be a 16-bit value, got {instruction!r}")

    family = _TOP_LEVEL_DECODERS[opcode >> 12](opcode)
    return DecodedInstruction(
        family=family,
        operands=extract_operands(family, opcode),
        raw=opcode,
    )


def _family_code(family: Family) -> jnp.ndarray:
    return jnp.asarray(int(family), dtype=jnp.int32)


def _dense_table(operations: dict, size: int) -> jnp.ndarray:
    """Expand a sparse sub-opcode mapping into a lookup array defaulting to UNKNOWN."""
    table = [int(Family.UNKNOWN)] * size
    for code, family in operations.items():
        table[code] = int(family)
    return jnp.array(table, dtype=jnp.int32)


_ALU_TABLE = _dense_table(ALU_OPERATIONS, 16)
_KEY_TABLE = _dense_table(KEY_OPERATIONS, 256)
_MISC_TABLE = _dense_table(MISC_OPERATIONS, 256)


def _batch_system(opcode: jnp.ndarray) -> jnp.ndarray:
    low = opcode & NNN_MASK
    return jnp.where(
        low == CLEAR_SCREEN_CODE,
        _family_code(Family.CLEAR_SCREEN),
        jnp.where(
            low == RETURN_CODE,
            _family_code(Family.RETURN),
            _family_code(Family.CALL_MACHINE_ROUTINE),
        ),
    )


def _batch_register_skip(family: Family):
    def branch(opcode: jnp.ndarray) -> jnp.ndarray:
        return jnp.where(opcode & N_MASK == 0, _family_code(family), _family_code(Family.UNKNOWN))
    return branch


def _batch_lookup(table: jnp.ndarray, mask: int):
    def branch(opcode: jnp.ndarray) -> jnp.ndarray:
        return table[opcode & mask]
    return branch


def _batch_single(family: Family):
    return lambda opcode: _family_code(family)


_BATCH_SHARED_BRANCHES = {
    0x0: _batch_system,
    0x5: _batch_register_skip(Family.SKIP_EQUAL_REGISTER),
    0x8: _batch_lookup(_ALU_TABLE, N_MASK),
    0x9: _batch_register_skip(Family.SKIP_NOT_EQUAL_REGISTER),
    0xE: _batch_lookup(_KEY_TABLE, NN_MASK),
    0xF: _batch_lookup(_MISC_TABLE, NN_MASK),
}

_BATCH_BRANCHES = [
    _BATCH_SHARED_BRANCHES.get(nibble) or _batch_single(SINGLE_FAMILY_NIBBLES[nibble])
    for nibble in range(16)
]


@jax.jit
def decode_families(opcodes: jnp.ndarray) -> jnp.ndarray:
    """Decode a batch of opcodes into Family codes.

    Same dispatch as ``decode``, expressed as a ``jax.lax.switch`` on the top
    nibble and vectorised with ``jax.vmap``. Values are taken modulo 2**16.

    Args:
        opcodes: 1-D integer array of opcodes

    Returns:
        int32 array of ``Family`` values, same shape as opcodes
    """
    opcodes = jnp.asarray(opcodes).astype(jnp.int32) & OPCODE_MASK

    def decode_one(opcode):
        return jax.lax.switch(opcode >> 12, _BATCH_BRANCHES, opcode)

    return jax.vmap(decode_one)(opcodes)
