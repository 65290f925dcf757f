# Database package: SQLAlchemy engine/session handling and ORM models
