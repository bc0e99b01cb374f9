"""Sub-dispatch for top nibbles shared by several instruction families."""
