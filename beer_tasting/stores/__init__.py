"""Data stores for persistence.

Stores handle:
- PostgreSQL: DB session, engine lifecycle
- Beers, ratings and the tasting settings record: ORM operations and
  boundary validation (presence/range checks)

No aggregation or ranking logic in stores - that belongs in services.
"""
