"""
Django Forms para validação de entrada de Fornecedores.
"""

from django import forms


class FornecedorCreateForm(forms.Form):
    """Valida o body de criação: CNPJ com 14 dígitos, contato com 9."""

    name = forms.CharField(
        error_messages={'required': 'Razão social é obrigatória'},
    )

    cnpj = forms.RegexField(
        regex=r'^[0-9]{14}$',
        error_messages={
            'required': 'CNPJ é obrigatório',
            'invalid': 'CNPJ deve conter exatamente 14 dígitos',
        },
    )

    contact = forms.RegexField(
        regex=r'^[0-9]{9}$',
        error_messages={
            'required': 'Contato é obrigatório',
            'invalid': 'Contato deve conter exatamente 9 dígitos',
        },
    )


class FornecedorUpdateForm(forms.Form):
    """Valida o body de atualização (todos os campos obrigatórios)."""

    name = forms.CharField(error_messages={'required': 'Nome é obrigatório'})
    cnpj = forms.CharField(error_messages={'required': 'CNPJ é obrigatório'})
    contact = forms.CharField(error_messages={'required': 'Contato é obrigatório'})
