"""Tests for the vectorised batch decoder."""

import jax.numpy as jnp
import numpy as np
from octadis import decode, decode_families, Family


class TestBatchDecoder:
    """Test decode_families against the scalar decoder."""

    def test_matches_scalar_decoder_everywhere(self):
        """All 65536 opcodes get the same family from both decoders."""
        families = np.asarray(decode_families(jnp.arange(0x10000, dtype=jnp.int32)))
        expected = np.array([int(decode(opcode).family) for opcode in range(0x10000)])
        np.testing.assert_array_equal(families, expected)

    def test_uint16_input(self):
        """ROM opcode arrays are uint16."""
        opcodes = jnp.array([0x00E0, 0x5121, 0xF265, 0xE0A1], dtype=jnp.uint16)
        families = decode_families(opcodes).tolist()
        assert families == [
            Family.CLEAR_SCREEN,
            Family.UNKNOWN,
            Family.LOAD_REGISTERS,
            Family.SKIP_IF_KEY_NOT_PRESSED,
        ]

    def test_output_dtype_and_shape(self):
        opcodes = jnp.array([0x1200, 0x1200, 0x00EE], dtype=jnp.uint16)
        families = decode_families(opcodes)
        assert families.dtype == jnp.int32
        assert families.shape == (3,)
