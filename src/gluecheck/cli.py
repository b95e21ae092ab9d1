"""Command-line entry point: report sticky sentences read from standard input."""

import sys
from typing import IO, Optional, TextIO

from gluecheck.config.schema import AnalyzerConfig
from gluecheck.runtime.input import read_input, InputReadError
from gluecheck.runtime.report import StickyReporter


def main(stdin: Optional[IO] = None, stdout: Optional[TextIO] = None,
         config: Optional[AnalyzerConfig] = None) -> int:
    """Main CLI entry point."""
    # Raw bytes, so decoding does not depend on the locale's error handler
    stdin = stdin if stdin is not None else getattr(sys.stdin, "buffer", sys.stdin)
    stdout = stdout if stdout is not None else sys.stdout

    try:
        text = read_input(stdin)
    except InputReadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    reporter = StickyReporter(config=config)
    report = reporter.analyze(text)

    for line in reporter.render(report):
        print(line, file=stdout)

    return 0


if __name__ == "__main__":
    sys.exit(main())
