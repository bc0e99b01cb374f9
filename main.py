"""
Disassemble a CHIP-8 ROM to stdout.

    python main.py rom=roms/pong.ch8 show_address=true stats=true
"""

from octadis.cli import main


if __name__ == "__main__":
    main()
