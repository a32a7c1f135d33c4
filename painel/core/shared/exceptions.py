"""
Exceções de Domínio do Painel de Agendamentos.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)
    ├── EntityNotFoundError (entidade não existe)
    └── ConflictError (unicidade violada)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.execute(input_dto)
        except DomainException as e:
            return error_response(e.message, 400)
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada pelo colaborador de validação (forms) quando os dados
    recebidos não atendem ao formato esperado. O Core não revalida.

    Example:
        if not form.is_valid():
            raise ValidationError("CPF deve conter 11 dígitos", field="cpf")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma operação aponta para um ID ausente.

    Example:
        usuario = repo.get_by_id(usuario_id)
        if not usuario:
            raise EntityNotFoundError(f"Usuário {usuario_id} não encontrado")
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")


class ConflictError(DomainException):
    """
    Violação de unicidade.

    Lançada quando uma criação ou atualização colidiria com
    um registro existente (CPF, email, nome, CNPJ).

    Example:
        if repo.get_by_cpf(cpf):
            raise ConflictError("CPF já cadastrado", field="cpf")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        super().__init__(message, "CONFLICT")
