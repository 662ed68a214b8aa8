#!/usr/bin/env python3
"""Command-line interface for travesty text generation."""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from travesty import __version__

DESCRIPTION = (
    "Analyzes input text and then randomly generates text output based on "
    "the pattern probability."
)


def build_config(args):
    """Merge the optional config file with command-line overrides."""
    from travesty.config import Config, load_config

    config = load_config(args.config) if args.config else Config()
    generation = config.generation

    if args.buffer_size is not None:
        generation.buffer_size = args.buffer_size
    if args.pattern_length is not None:
        generation.pattern_length = args.pattern_length
    if args.out_chars is not None:
        generation.out_chars = args.out_chars
    if args.line_width is not None:
        generation.line_width = args.line_width
    if args.verse:
        generation.verse = True
    if args.seed is not None:
        generation.seed = args.seed
    if args.debug:
        config.debug = True
    return config


def cmd_generate(args, stdout=None, stdin=None):
    """Generate travesty text from the input corpus."""
    from travesty.config import validate_generation_config
    from travesty.corpus import load_corpus
    from travesty.errors import TravestyError
    from travesty.generation import TravestyGenerator
    from travesty.utils.logging import setup_logging, set_run_id

    stdout = stdout or sys.stdout

    try:
        config = build_config(args)
        setup_logging("DEBUG" if config.debug else config.log_level, json_format=config.log_json)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    set_run_id()

    try:
        validate_generation_config(config.generation, config.limits)
        corpus_text = load_corpus(args.input, stdin=stdin)
        generator = TravestyGenerator(corpus_text, config.generation)

        def on_output(fragment):
            stdout.write(fragment)
            stdout.flush()

        result = generator.run(on_output)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except TravestyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted!", file=sys.stderr)
        return 130

    stdout.write("\n\n")
    stdout.write(f"Output: {result.char_count} characters.\n")
    stdout.flush()
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog="travesty", description=DESCRIPTION)
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Input file to analyze (reads stdin if omitted or '-')"
    )
    parser.add_argument(
        "--buffer-size", "-b",
        type=int,
        default=None,
        help="Size of the buffer to be analyzed; larger is slower (default: 3000)"
    )
    parser.add_argument(
        "--pattern-length", "-p",
        type=int,
        default=None,
        help="Pattern length, the order of the Markov context (default: 9)"
    )
    parser.add_argument(
        "--output-size", "-o",
        dest="out_chars",
        type=int,
        default=None,
        help="Number of characters to output (default: 2000)"
    )
    parser.add_argument(
        "--line-width", "-l",
        type=int,
        default=None,
        help="Approximate line length of the output (default: 50)"
    )
    parser.add_argument(
        "--verse",
        action="store_true",
        help="Verse mode: indent wrapped lines, defaults to prose"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output"
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="JSON configuration file (see config.json.sample)"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Print parameters and buffer sizes, log at DEBUG level"
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.set_defaults(func=cmd_generate)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
