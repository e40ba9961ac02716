"""Allow ``python -m autoupdate``."""

from autoupdate.runner import main

raise SystemExit(main())
