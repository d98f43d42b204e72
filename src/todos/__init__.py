"""todos

A minimal to-do data-access layer used to demonstrate integration testing
against ephemeral, containerized services.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
