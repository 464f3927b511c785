"""Allow ``python -m linecount``."""

from linecount.cli.main import main

raise SystemExit(main())
