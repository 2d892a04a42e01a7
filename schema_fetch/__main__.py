"""Module entrypoint for `python -m schema_fetch`.

Delegates to the CLI implementation.
"""

from .cli.run_fetch import main


if __name__ == "__main__":
    main()
