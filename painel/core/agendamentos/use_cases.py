"""
Use Cases do Domínio de Agendamentos.

Use Cases implementados:
- CriarAgendamentoService: Cria agendamento com snapshots
- ListarAgendamentosService: Lista agendamentos
- AtualizarAgendamentoService: Atualização parcial
- RemoverAgendamentoService: Remove agendamento

Os snapshots de usuário e fornecedor são copiados como recebidos.
Nenhum lock dos repositórios de usuários ou fornecedores é tomado.
"""

from typing import List, Optional

from painel.core.shared.interfaces import UnitOfWork
from painel.core.shared.exceptions import EntityNotFoundError

from .ports import AgendamentoRepository
from .entities import AgendamentoEntity
from .dtos import (
    CriarAgendamentoInputDTO,
    AtualizarAgendamentoInputDTO,
    AgendamentoOutputDTO,
    AgendamentoListItemDTO,
)


def _nao_encontrado(agendamento_id: str) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"Agendamento {agendamento_id} não encontrado",
        entity_type="Agendamento",
        entity_id=agendamento_id,
    )


class CriarAgendamentoService:
    """
    Use Case: Criar agendamento.

    Fluxo:
    1. Criar entidade com snapshots do criador e do fornecedor
    2. Persistir via repositório
    3. Retornar registro completo

    Example:
        service = CriarAgendamentoService(agendamento_repo, uow)
        output = service.execute(input_dto)
        output.usuario_atualizador == output.usuario_criador  # True
    """

    def __init__(self, agendamento_repo: AgendamentoRepository, uow: UnitOfWork):
        self.agendamento_repo = agendamento_repo
        self.uow = uow

    def execute(self, input_dto: CriarAgendamentoInputDTO) -> AgendamentoOutputDTO:
        with self.uow:
            agendamento = AgendamentoEntity.criar(
                nome=input_dto.nome,
                preco=input_dto.preco,
                descricao=input_dto.descricao,
                quantidade=input_dto.quantidade,
                data_entrega=input_dto.data_entrega,
                xml=input_dto.xml,
                commits=input_dto.commits,
                status=input_dto.status,
                usuario_criador=input_dto.usuario_criador,
                fornecedor=input_dto.fornecedor,
            )
            self.agendamento_repo.save(agendamento)

        return AgendamentoOutputDTO.from_entity(agendamento)


class ListarAgendamentosService:
    """
    Use Case: Listar agendamentos.

    Não usa UoW pois é operação de leitura.
    """

    def __init__(self, agendamento_repo: AgendamentoRepository):
        self.agendamento_repo = agendamento_repo

    def execute(self, usuario_id: Optional[str] = None) -> List[AgendamentoListItemDTO]:
        """
        Lista agendamentos, opcionalmente filtrando pelo criador.

        Args:
            usuario_id: Filtrar por usuário criador
        """
        if usuario_id:
            agendamentos = self.agendamento_repo.list_by_usuario(usuario_id)
        else:
            agendamentos = self.agendamento_repo.list_all()

        return [AgendamentoListItemDTO.from_entity(a) for a in agendamentos]


class AtualizarAgendamentoService:
    """
    Use Case: Atualizar nome, preço, descrição e quantidade.

    Snapshots, status, xml, commits, data de entrega e criado_em
    permanecem intactos.
    """

    def __init__(self, agendamento_repo: AgendamentoRepository, uow: UnitOfWork):
        self.agendamento_repo = agendamento_repo
        self.uow = uow

    def execute(self, input_dto: AtualizarAgendamentoInputDTO) -> AgendamentoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se agendamento não existe
        """
        with self.uow:
            agendamento = self.agendamento_repo.get_by_id(input_dto.agendamento_id)

            if not agendamento:
                raise _nao_encontrado(input_dto.agendamento_id)

            agendamento.atualizar(
                nome=input_dto.nome,
                preco=input_dto.preco,
                descricao=input_dto.descricao,
                quantidade=input_dto.quantidade,
            )
            self.agendamento_repo.save(agendamento)

        return AgendamentoOutputDTO.from_entity(agendamento)


class RemoverAgendamentoService:
    """Use Case: Remover agendamento."""

    def __init__(self, agendamento_repo: AgendamentoRepository, uow: UnitOfWork):
        self.agendamento_repo = agendamento_repo
        self.uow = uow

    def execute(self, agendamento_id: str) -> None:
        """
        Raises:
            EntityNotFoundError: Se agendamento não existe
        """
        with self.uow:
            if not self.agendamento_repo.exists(agendamento_id):
                raise _nao_encontrado(agendamento_id)

            self.agendamento_repo.delete(agendamento_id)
