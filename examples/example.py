import sys
import time

import jax
import jax.numpy as jnp

from octadis import load_rom, disassemble, format_listing, decode_families, Family


if __name__ == "__main__":
    rom = load_rom(sys.argv[1])

    print(format_listing(disassemble(rom), show_address=True))

    # Classify the full opcode space with the batch decoder
    all_opcodes = jnp.arange(0x10000, dtype=jnp.int32)

    start_compile = time.time()
    compiled = jax.block_until_ready(decode_families.lower(all_opcodes).compile())
    end_compile = time.time()
    print("Compilation time (s):", end_compile - start_compile)

    start_exec = time.time()
    families = jax.block_until_ready(compiled(all_opcodes))
    end_exec = time.time()
    print("Execution time (s):", end_exec - start_exec)

    unknown = int(jnp.sum(families == int(Family.UNKNOWN)))
    print(f"{unknown} of {families.shape[0]} opcodes are unassigned")
