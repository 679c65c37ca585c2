import argparse
import sys


def build_parser():
    parser = argparse.ArgumentParser(
        description="Word-by-word reading trainer",
        add_help=False,
    )
    parser.add_argument(
        "--ui",
        choices=("qt", "tk"),
        default="qt",
        help="Front end to launch (default: qt).",
    )
    return parser


def main(argv=None):
    args, rest = build_parser().parse_known_args(argv)
    if args.ui == "tk":
        from ui.app import main as run_app
    else:
        from qt.app import main as run_app
    return run_app(rest)


if __name__ == "__main__":
    sys.exit(main())
