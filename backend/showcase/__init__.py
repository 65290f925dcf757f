"""Architecture showcase: Clean Architecture, DDD, SOLID, design patterns
and a microservices example behind one Flask application and CLI."""

__version__ = "1.0.0"
