"""Café weekly shift roster from staff availability registrations.

Modules:
- config: load and validate configuration (YAML or JSON)
- calendar: next-week dates and week keys
- directory: employee universe keyed by normalized name
- io: sheet fetch, CSV parsing, availability normalization, CSV export
- engine: greedy least-loaded assignment and the generate/lock flow
- services: continuity rules, fairness ranking, load accounting, registration stats
- domain: value types, history model and repository
- history: injected store of locked weekly rosters
- session: ingestion session holding the latest registrations
- cli: command-line interface entrypoints
"""

__all__ = [
    "config",
    "calendar",
    "directory",
    "io",
    "engine",
    "services",
    "domain",
    "history",
    "session",
    "cli",
]
