"""
Shared infrastructure for the TieChef back-office API.

STRUCTURE:
- shared.config: Configuration
  - settings.py: Environment config (pydantic-settings)
  - logging.py: Structured logging
  - constants.py: Staff/table view enums and field limits

- shared.infrastructure: Database, cache and request plumbing
  - db.py: SQLAlchemy engine, sessions, safe_commit()
  - correlation.py: X-Request-ID middleware and logging filter
  - redis/: Redis connection pool and key constants
  - cache/: Read-through cached listings

- shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging
  - validators.py: Declarative field rule engine

IMPORT EXAMPLES:
    from shared.infrastructure.db import get_db, safe_commit
    from shared.config.settings import settings
    from shared.utils.exceptions import NotFoundError, RequestValidationFailed
    from shared.utils.validators import Rule, RuleSet, required
"""
