"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""

import argparse
import sys

from charlm.char_source import read_chars
from charlm.language_model import LanguageModel, LanguageModelError

# seed used in fixed mode, so that runs can be replayed
DEFAULT_SEED = 20


def build_parser():
    parser = argparse.ArgumentParser(
        prog="charlm",
        description="Train a character-level Markov model on a text file and generate text from it",
    )
    parser.add_argument("window_length", type=int, help="Number of preceding characters used as context")
    parser.add_argument("initial_text", help="Text to start generating from")
    parser.add_argument("generated_text_length", type=int, help="Number of characters to generate")
    parser.add_argument("mode", choices=["random", "fixed"],
                        help="'random' seeds from system entropy, 'fixed' uses --seed")
    parser.add_argument("corpus", help="Training text file")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed used in fixed mode")
    parser.add_argument("--encoding", default="utf-8", help="Encoding of the corpus file")
    parser.add_argument("--show-model", action="store_true", help="Print the learned table")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.generated_text_length < 0:
        print("Error: generated_text_length must not be negative", file=sys.stderr)
        return 1

    print(args.initial_text)
    seed = None if args.mode == "random" else args.seed
    try:
        lm = LanguageModel(args.window_length, seed)
        lm.train(read_chars(args.corpus, encoding=args.encoding))
    except OSError as e:
        print(f"Error: cannot read corpus '{args.corpus}': {e}", file=sys.stderr)
        return 1
    except (UnicodeDecodeError, LookupError) as e:
        print(f"Error: corpus '{args.corpus}' cannot be decoded as {args.encoding}: {e}", file=sys.stderr)
        return 1
    except LanguageModelError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.show_model:
        print(lm, end="")
    print(lm.generate(args.initial_text, args.generated_text_length))
    return 0


if __name__ == "__main__":
    sys.exit(main())
