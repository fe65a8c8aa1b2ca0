"""Thread safety tests for Mientras.

Rendering is documented as a pure function of the tree and the indent spec,
and PrettyPrinter instances carry their config through a ContextVar. These
tests run real threads to catch configs leaking between callers.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed

from mientras import PrettyPrinter, SourceRenderer, parse_program

SOURCE = "read X % Y := nil ; while X do Y := (cons (hd X) Y) ; X := (tl X) od % write Y"


class TestThreadSafety:
    def test_concurrent_printers_with_different_widths(self) -> None:
        printers = {width: PrettyPrinter(indent_spec=[("WHILE", width)]) for width in range(8)}
        expected = {width: fmt(SOURCE) for width, fmt in printers.items()}

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = {
                executor.submit(printers[i % 8], SOURCE): i % 8 for i in range(200)
            }
            for future in as_completed(futures):
                assert future.result() == expected[futures[future]]

    def test_shared_renderer(self) -> None:
        program = parse_program(SOURCE)
        renderer = SourceRenderer([("PROGR", 2)])
        expected = renderer.render(program)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: renderer.render(program), range(100)))

        assert results == [expected] * 100

    def test_concurrent_parsing(self) -> None:
        sources = [f"read X % Y{i} := X % write Y{i}" for i in range(50)]

        with ThreadPoolExecutor(max_workers=8) as executor:
            programs = list(executor.map(parse_program, sources))

        for i, program in enumerate(programs):
            assert program.outputs[0].name == f"Y{i}"
