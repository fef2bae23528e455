"""Allow ``python -m secexpr``."""

from secexpr.cli.main import main

raise SystemExit(main())
