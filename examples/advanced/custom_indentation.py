"""Per-construct indentation: PrettyPrinter, config context and JSON round-trip."""

from mientras import (
    PrettyPrinter,
    PrintConfig,
    parse_program,
    pretty_print,
    print_config_context,
)
from mientras.serialization import from_json, to_json

SOURCE = """
read X
% Y := nil ;
  while X do
    Y := (cons (hd X) Y) ;
    for Y do if (hd Y) =? a then nop else Z := Y fi od ;
    X := (tl X)
  od
% write Y, Z
"""

# Program body by 2, loop bodies by 4, everything else by the default of 1
fmt = PrettyPrinter(indent_spec=[("PROGR", 2), ("WHILE", 4), ("FOR", 4)])
print(fmt(SOURCE))
print()

# The first matching entry wins, so with_indent shadows the earlier WHILE width
config = PrintConfig.from_dict({"indent_spec": {"WHILE": 4}}).with_indent("WHILE", 8)
program = parse_program(SOURCE)
with print_config_context(config):
    print(pretty_print(program))
print()

restored = from_json(to_json(program))
print("JSON round-trip preserved the tree:", restored == program)
