"""CHIP-8 memory layout and opcode field masks."""

MEMORY_SIZE = 4096
PROGRAM_START = 0x200
OPCODE_MASK = 0xFFFF
INSTRUCTION_SIZE = 2

# Operand fields
X_MASK = 0x0F00
Y_MASK = 0x00F0
N_MASK = 0x000F
NN_MASK = 0x00FF
NNN_MASK = 0x0FFF

# System instructions, matched against the low 12 bits
CLEAR_SCREEN_CODE = 0x0E0
RETURN_CODE = 0x0EE
