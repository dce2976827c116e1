import argparse
import sys

from scripts import COMMANDS, clean_project


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="python -m scripts", description="astwalk developer helpers")
    parser.add_argument("command", choices=[*COMMANDS, "clean"])
    args, pytest_args = parser.parse_known_args(argv)

    if args.command == "clean":
        return clean_project()
    return COMMANDS[args.command](pytest_args)


if __name__ == "__main__":
    sys.exit(main())
