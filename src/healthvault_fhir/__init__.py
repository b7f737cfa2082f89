"""Package initialization for healthvault-fhir.

Having this file allows relative imports (e.g. `from .models import ...`) to
resolve under tooling (mypy/ruff) and matches the CLI usage pattern
`python -m healthvault_fhir convert` documented in the README.
"""

__all__ = []
