"""Drive Cypress end-to-end runs as subprocesses and collect their results."""

__version__ = "1.0.0"
