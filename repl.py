import argparse
import logging
import sys
from typing import Optional, TextIO

from rpncalc.runtime import CalcRuntimeError, calculate
from rpncalc.tokenizer import InvalidCharacter, TokenizerError

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "Enter the reversed polish notation: "
EXIT_COMMAND = "exit"


def report_line(line: str, stdout: TextIO, stderr: TextIO, verbose: bool = False) -> bool:
    """Evaluate one trimmed line and print the outcome. Returns False on error."""
    try:
        result = calculate(line)
    except TokenizerError as e:
        print(f"An error occurred while evaluating reversed polish notation. {e}", file=stderr)
        if verbose and isinstance(e, InvalidCharacter):
            print(e.excerpt(), file=stderr)
        return False
    except CalcRuntimeError as e:
        print(f"An error occurred while calculating reversed polish notation. {e}", file=stderr)
        return False
    print(f"Result: {result}", file=stdout)
    return True


def run_repl(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    prompt: str = DEFAULT_PROMPT,
    verbose: bool = False,
) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    while True:
        print(prompt, end="", file=stdout)
        stdout.flush()

        raw = stdin.readline()
        if not raw:
            # EOF
            print(file=stdout)
            break

        line = raw.strip()
        logger.debug("read line %r", line)
        if line == EXIT_COMMAND:
            break

        report_line(line, stdout=stdout, stderr=stderr, verbose=verbose)
        stderr.flush()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate single-digit reverse polish notation expressions")
    parser.add_argument("--prompt", default=DEFAULT_PROMPT, help="prompt shown before each line")
    parser.add_argument(
        "-e",
        "--expression",
        action="append",
        default=[],
        help="evaluate the expression and exit instead of starting the interactive loop (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log evaluation steps to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.expression:
        ok = True
        for expression in args.expression:
            ok = report_line(expression.strip(), stdout=sys.stdout, stderr=sys.stderr, verbose=args.verbose) and ok
        return 0 if ok else 1

    try:
        run_repl(prompt=args.prompt, verbose=args.verbose)
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
