"""
Django Forms para validação de entrada de Agendamentos.

O body de criação traz dois objetos aninhados (userCreated e
fornecedor) que são validados estruturalmente aqui; o Core os
recebe como snapshots e não consulta os respectivos cadastros.
"""

from django import forms
from django.core.exceptions import ValidationError


USUARIO_SNAPSHOT_CAMPOS = ('id', 'name', 'email')
FORNECEDOR_SNAPSHOT_CAMPOS = ('id', 'name', 'contact')


def _validar_objeto(valor, campos, rotulo: str) -> dict:
    if not isinstance(valor, dict):
        raise ValidationError(f'{rotulo} deve ser um objeto')

    for campo in campos:
        if not isinstance(valor.get(campo), str):
            raise ValidationError(f'{rotulo}.{campo} é obrigatório e deve ser texto')

    return {campo: valor[campo] for campo in campos}


def _numero_json(valor, rotulo: str):
    # bool é subclasse de int; texto numérico também não é aceito
    if isinstance(valor, bool) or not isinstance(valor, (int, float)):
        raise ValidationError(f'{rotulo} deve ser um número')
    return valor


class AgendamentoUpdateForm(forms.Form):
    """Valida os quatro campos atualizáveis."""

    name = forms.CharField(
        min_length=3,
        error_messages={
            'required': 'Nome é obrigatório',
            'min_length': 'Nome deve ter pelo menos 3 caracteres',
        },
    )

    price = forms.FloatField(
        min_value=0,
        error_messages={
            'required': 'Preço é obrigatório',
            'min_value': 'Preço não pode ser negativo',
        },
    )

    description = forms.CharField(
        min_length=3,
        error_messages={
            'required': 'Descrição é obrigatória',
            'min_length': 'Descrição deve ter pelo menos 3 caracteres',
        },
    )

    quantity = forms.IntegerField(
        min_value=0,
        error_messages={
            'required': 'Quantidade é obrigatória',
            'min_value': 'Quantidade não pode ser negativa',
        },
    )

    def clean_price(self):
        _numero_json(self.data.get('price'), 'Preço')
        return self.cleaned_data['price']

    def clean_quantity(self):
        _numero_json(self.data.get('quantity'), 'Quantidade')
        return self.cleaned_data['quantity']


class AgendamentoCreateForm(AgendamentoUpdateForm):
    """
    Valida o body de criação.

    Herda as regras de name/price/description/quantity e adiciona
    data de entrega, xml, commits, status e os snapshots.
    """

    dataEntrega = forms.DateTimeField(
        error_messages={
            'required': 'Data de entrega é obrigatória',
            'invalid': 'Data de entrega inválida',
        },
    )

    # Texto obrigatório, mas pode ser vazio
    xml = forms.CharField(required=False, strip=False)
    commits = forms.CharField(required=False, strip=False)
    status = forms.CharField(required=False, strip=False)

    userCreated = forms.JSONField(
        error_messages={'required': 'userCreated é obrigatório'},
    )

    fornecedor = forms.JSONField(
        error_messages={'required': 'fornecedor é obrigatório'},
    )

    def clean_xml(self):
        return self._texto_presente('xml')

    def clean_commits(self):
        return self._texto_presente('commits')

    def clean_status(self):
        return self._texto_presente('status')

    def clean_userCreated(self):
        return _validar_objeto(
            self.cleaned_data['userCreated'], USUARIO_SNAPSHOT_CAMPOS, 'userCreated'
        )

    def clean_fornecedor(self):
        return _validar_objeto(
            self.cleaned_data['fornecedor'], FORNECEDOR_SNAPSHOT_CAMPOS, 'fornecedor'
        )

    def _texto_presente(self, campo: str) -> str:
        valor = self.data.get(campo)
        if not isinstance(valor, str):
            raise ValidationError(f'{campo} é obrigatório e deve ser texto')
        return valor
