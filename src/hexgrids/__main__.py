"""Module entrypoint for `python -m hexgrids`."""

from hexgrids.summary import main


if __name__ == "__main__":
    raise SystemExit(main())
