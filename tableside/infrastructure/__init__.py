"""Infrastructure layer - adapters, seeding, logging and database engine."""
