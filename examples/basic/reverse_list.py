"""Pretty-print the list-reversal program with the default indentation."""

from mientras import parse_program, pretty_print

SOURCE = "read X % Y := nil ; while X do Y := (cons (hd X) Y) ; X := (tl X) od % write Y"

program = parse_program(SOURCE)
print(pretty_print(program))
