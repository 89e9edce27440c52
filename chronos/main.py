# chronos/main.py
# Console entry point for the Chronos CLI

from .cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
