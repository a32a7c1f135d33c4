"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
- Controle de concorrência e Unit of Work em memória
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    ConflictError,
)
from .interfaces import UnitOfWork, Repository
from .concurrency import ReadWriteLock
from .unit_of_work import LockingUnitOfWork

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "UnitOfWork",
    "Repository",
    "ReadWriteLock",
    "LockingUnitOfWork",
]
