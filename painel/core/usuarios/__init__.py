"""
Domínio de Usuários.

- Entidades (UsuarioEntity, UsuarioSnapshot)
- DTOs de entrada e saída
- Ports (UsuarioRepository)
- Use Cases (Criar, Listar, Atualizar, Remover, VerificarToken)

Características do Domínio:
- CPF e email únicos entre usuários vivos
- Token de identidade emitido na criação e nunca regenerado
"""

from .entities import UsuarioEntity, UsuarioSnapshot
from .dtos import (
    CriarUsuarioInputDTO,
    AtualizarUsuarioInputDTO,
    UsuarioOutputDTO,
)
from .ports import UsuarioRepository, InMemoryUsuarioRepository
from .use_cases import (
    CriarUsuarioService,
    ListarUsuariosService,
    AtualizarUsuarioService,
    RemoverUsuarioService,
    VerificarTokenService,
)

__all__ = [
    # Entities
    "UsuarioEntity",
    "UsuarioSnapshot",
    # DTOs
    "CriarUsuarioInputDTO",
    "AtualizarUsuarioInputDTO",
    "UsuarioOutputDTO",
    # Ports
    "UsuarioRepository",
    "InMemoryUsuarioRepository",
    # Use Cases
    "CriarUsuarioService",
    "ListarUsuariosService",
    "AtualizarUsuarioService",
    "RemoverUsuarioService",
    "VerificarTokenService",
]
