"""Allow ``python -m fuel_client`` as a shorthand for the CLI."""

from __future__ import annotations

from .cli import main


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
