"""modmake -- scaffold controllers, models, migrations and routes for app modules."""

__version__ = "0.1.0"
