"""Test configuration and fixtures for CHIP-8 disassembler tests."""

import pytest
from octadis import rom_from_bytes


# 00E0, 6A3F, A22A, D015, 5121 (invalid), 00EE
SAMPLE_ROM_BYTES = bytes([
    0x00, 0xE0,
    0x6A, 0x3F,
    0xA2, 0x2A,
    0xD0, 0x15,
    0x51, 0x21,
    0x00, 0xEE,
])


@pytest.fixture
def sample_rom_bytes():
    """Raw bytes of a small ROM with one invalid opcode."""
    return SAMPLE_ROM_BYTES


@pytest.fixture
def sample_rom():
    """Sample ROM loaded at the default program start."""
    return rom_from_bytes(SAMPLE_ROM_BYTES, name="sample.ch8")


@pytest.fixture
def rom_file(tmp_path):
    """Sample ROM written to disk."""
    path = tmp_path / "sample.ch8"
    path.write_bytes(SAMPLE_ROM_BYTES)
    return path


@pytest.fixture
def odd_rom_file(tmp_path):
    """ROM with a trailing half opcode."""
    path = tmp_path / "odd.ch8"
    path.write_bytes(SAMPLE_ROM_BYTES + bytes([0x12]))
    return path
