"""
TieChef back-office REST API.

Structure:
    main.py           FastAPI app, health routes
    core/             lifespan, CORS, middlewares, exception handlers
    routers/          one router per resource
    services/         validation and business rules
    repositories/     unit-of-work data access (SQL and in-memory)
    models/           SQLAlchemy models and in-memory records
    schemas.py        camelCase DTOs
    validators.py     declarative rule sets
    seed.py           init-test-data records
"""
