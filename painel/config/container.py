"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositórios em memória)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Políticas vindas do Django settings
"""

from typing import Optional

from dependency_injector import containers, providers

from painel.core.shared.unit_of_work import LockingUnitOfWork
from painel.core.usuarios.ports import InMemoryUsuarioRepository
from painel.core.usuarios.use_cases import (
    CriarUsuarioService,
    ListarUsuariosService,
    AtualizarUsuarioService,
    RemoverUsuarioService,
    VerificarTokenService,
)
from painel.core.fornecedores.ports import InMemoryFornecedorRepository
from painel.core.fornecedores.use_cases import (
    CriarFornecedorService,
    ListarFornecedoresService,
    ObterFornecedorService,
    AtualizarFornecedorService,
    RemoverFornecedorService,
)
from painel.core.agendamentos.ports import InMemoryAgendamentoRepository
from painel.core.agendamentos.use_cases import (
    CriarAgendamentoService,
    ListarAgendamentosService,
    AtualizarAgendamentoService,
    RemoverAgendamentoService,
)


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Cada repositório é dono da sua coleção e do seu lock; as
    Units of Work de um domínio usam o lock do repositório
    correspondente.

    Example:
        container = Container()
        container.config.from_dict({'fornecedor_cnpj_unico': False})

        service = container.criar_usuario_service()
        output = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Repositories (Singleton - uma instância por processo)
    # =========================================================================

    usuario_repository = providers.Singleton(InMemoryUsuarioRepository)
    fornecedor_repository = providers.Singleton(InMemoryFornecedorRepository)
    agendamento_repository = providers.Singleton(InMemoryAgendamentoRepository)

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    usuario_uow = providers.Factory(
        LockingUnitOfWork,
        lock=usuario_repository.provided.lock,
    )
    fornecedor_uow = providers.Factory(
        LockingUnitOfWork,
        lock=fornecedor_repository.provided.lock,
    )
    agendamento_uow = providers.Factory(
        LockingUnitOfWork,
        lock=agendamento_repository.provided.lock,
    )

    # =========================================================================
    # Services - Usuários
    # =========================================================================

    criar_usuario_service = providers.Factory(
        CriarUsuarioService,
        usuario_repo=usuario_repository,
        uow=usuario_uow,
    )

    listar_usuarios_service = providers.Factory(
        ListarUsuariosService,
        usuario_repo=usuario_repository,
    )

    atualizar_usuario_service = providers.Factory(
        AtualizarUsuarioService,
        usuario_repo=usuario_repository,
        uow=usuario_uow,
    )

    remover_usuario_service = providers.Factory(
        RemoverUsuarioService,
        usuario_repo=usuario_repository,
        uow=usuario_uow,
    )

    verificar_token_service = providers.Factory(
        VerificarTokenService,
        usuario_repo=usuario_repository,
    )

    # =========================================================================
    # Services - Fornecedores
    # =========================================================================

    criar_fornecedor_service = providers.Factory(
        CriarFornecedorService,
        fornecedor_repo=fornecedor_repository,
        uow=fornecedor_uow,
        cnpj_unico=config.fornecedor_cnpj_unico.as_(bool),
    )

    listar_fornecedores_service = providers.Factory(
        ListarFornecedoresService,
        fornecedor_repo=fornecedor_repository,
    )

    obter_fornecedor_service = providers.Factory(
        ObterFornecedorService,
        fornecedor_repo=fornecedor_repository,
    )

    atualizar_fornecedor_service = providers.Factory(
        AtualizarFornecedorService,
        fornecedor_repo=fornecedor_repository,
        uow=fornecedor_uow,
        cnpj_unico=config.fornecedor_cnpj_unico.as_(bool),
    )

    remover_fornecedor_service = providers.Factory(
        RemoverFornecedorService,
        fornecedor_repo=fornecedor_repository,
        uow=fornecedor_uow,
    )

    # =========================================================================
    # Services - Agendamentos
    # =========================================================================

    criar_agendamento_service = providers.Factory(
        CriarAgendamentoService,
        agendamento_repo=agendamento_repository,
        uow=agendamento_uow,
    )

    listar_agendamentos_service = providers.Factory(
        ListarAgendamentosService,
        agendamento_repo=agendamento_repository,
    )

    atualizar_agendamento_service = providers.Factory(
        AtualizarAgendamentoService,
        agendamento_repo=agendamento_repository,
        uow=agendamento_uow,
    )

    remover_agendamento_service = providers.Factory(
        RemoverAgendamentoService,
        agendamento_repo=agendamento_repository,
        uow=agendamento_uow,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), lendo as políticas
    de domínio do Django settings.

    Returns:
        Container configurado
    """
    global _container

    if _container is None:
        from django.conf import settings

        _container = Container()
        _container.config.from_dict({
            'fornecedor_cnpj_unico': getattr(settings, 'FORNECEDOR_CNPJ_UNICO', False),
        })

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Descarta o container e, com ele, todos os dados em memória.
    """
    global _container
    _container = None
