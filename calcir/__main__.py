import argparse
import sys

from calcir import build, errors
from calcir.logger import init_logging


def create_parser():
    ap = argparse.ArgumentParser(
        prog="calcir",
        description="Compiles a line-oriented arithmetic program to LLVM IR.",
    )

    ap.add_argument(
        "source_file",
        metavar="SRC",
        type=str,
        help="the file to compile",
    )

    ap.add_argument(
        "-o",
        dest="out_file",
        metavar="OUT",
        type=str,
        default=None,
        help="the .ll file to create (default: SRC with its extension replaced by .ll)",
    )

    ap.add_argument(
        "--module-id",
        dest="module_id",
        type=str,
        default=None,
        help="the name written in the module header (default: SRC's base name)",
    )

    ap.add_argument(
        "--debug",
        action="store_true",
        help="log every emitted instruction",
    )

    return ap


def main(argv=None) -> int:
    args = create_parser().parse_args(argv)
    init_logging(args.debug)

    try:
        build.compile_from_source_file(args.source_file, args.out_file, args.module_id)
    except errors.CompileError as err:
        print(err.msg)
        return err.exit_code

    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
