"""goto — jump between WordPress projects and their theme and plugin directories."""

__version__ = "1.1.0"
