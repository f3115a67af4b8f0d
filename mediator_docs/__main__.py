"""Entry point for `python -m mediator_docs`."""

import mediator_docs.sentry  # noqa: F401  (initialize before anything else)
from mediator_docs.cli import main

if __name__ == "__main__":
    main()
