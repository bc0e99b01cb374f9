"""Command-line CHIP-8 disassembler.

Usage: ``octadis rom=games/PONG show_address=true stats=true``
"""

import operator
import sys
from typing import List, TextIO, Union

import hydra
from omegaconf import DictConfig, OmegaConf

from octadis import __version__
from octadis.disassembler import ListingLine, disassemble, format_line, family_counts
from octadis.logging import ConsoleLogger, progress, stream_supports_color
from octadis.render import is_unknown
from octadis.rom import RomError, load_rom


def parse_address(value: Union[int, str]) -> int:
    """Accept 512, "512" or "0x200"; Hydra overrides do not parse hex literals.

    Raises:
        RomError: If value is not an integer literal
    """
    try:
        if isinstance(value, str):
            return int(value, 0)
        return operator.index(value)
    except (TypeError, ValueError) as e:
        raise RomError(f"Invalid load address {value!r}") from e


def resolve_color(setting: Union[bool, str], stream: TextIO) -> bool:
    if isinstance(setting, str):
        if setting.lower() != "auto":
            raise ValueError(f"Unknown color setting '{setting}'. Available: ['auto', True, False]")
        return stream_supports_color(stream)
    return bool(setting)


def write_listing(lines: List[ListingLine], stream: TextIO, cfg: DictConfig) -> None:
    use_colors = resolve_color(cfg.color, stream)
    for line in progress(lines, total=len(lines), enabled=cfg.progress):
        stream.write(format_line(line, show_address=cfg.show_address, use_colors=use_colors) + "\n")


def run(cfg: DictConfig) -> int:
    """Disassemble the configured ROM and return the process exit status."""
    logger = ConsoleLogger(
        name="Octadis",
        log_level=cfg.log_level,
        show_timestamps=cfg.log_timestamps,
    )
    logger.info(f"Octadis version {__version__}")
    logger.debug("Configuration:\n" + OmegaConf.to_yaml(cfg))

    try:
        rom = load_rom(
            str(cfg.rom),
            rom_dir=cfg.rom_dir,
            start=parse_address(cfg.start_address),
            strict=cfg.strict,
        )
    except RomError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Loaded {rom.name}: {rom.size} bytes, {rom.num_opcodes} opcodes at 0x{rom.start:03x}")
    if rom.has_trailing_byte:
        trailing_address = rom.start + rom.size - 1
        logger.warning(
            f"Odd ROM length: trailing byte 0x{int(rom.data[-1]):02x} "
            f"at 0x{trailing_address:03x} is not disassembled"
        )

    lines = disassemble(rom)
    if cfg.output is None:
        write_listing(lines, sys.stdout, cfg)
    else:
        try:
            with open(cfg.output, "w") as f:
                write_listing(lines, f, cfg)
        except OSError as e:
            logger.error(f"Cannot write listing to '{cfg.output}': {e.strerror or e}")
            return 1
        logger.info(f"Listing written to {cfg.output}")

    unknown = sum(is_unknown(line.instruction) for line in lines)
    if unknown:
        logger.warning(f"{unknown} of {len(lines)} opcodes match no CHIP-8 encoding")

    if cfg.stats:
        logger.info("Opcodes per family:")
        counts = family_counts(rom)
        for family, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
            logger.info(f"  {family.name:<26s} {count:5d}")

    return 0


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig) -> None:
    status = run(cfg)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
