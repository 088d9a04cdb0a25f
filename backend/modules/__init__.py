"""
Feature modules for scoreboard panels.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's collaborators
- models.py: Pydantic models, enums and constants
- exceptions.py: Module-specific exceptions
- an implementation file (service.py, splitter.py, rotation.py)

Modules communicate through interfaces, not concrete implementations.
"""
