"""
Django Forms para validação de entrada de Usuários.

Forms são DRIVING ADAPTERS que validam dados antes de
passar para os Use Cases. Não contêm lógica de negócio:
unicidade de CPF e email é verificada no Core.
"""

from django import forms
from django.core.exceptions import ValidationError


def _email_sem_separador(email: str) -> str:
    # ":" separa os campos do token de identidade
    if ":" in email:
        raise ValidationError("Email não pode conter o caractere ':'")
    return email


class UsuarioCreateForm(forms.Form):
    """Valida o body de criação de usuário."""

    name = forms.CharField(
        min_length=3,
        error_messages={
            'required': 'Nome é obrigatório',
            'min_length': 'Nome deve ter pelo menos 3 caracteres',
        },
    )

    email = forms.EmailField(
        error_messages={
            'required': 'Email é obrigatório',
            'invalid': 'Formato de email inválido',
        },
    )

    password = forms.CharField(
        min_length=6,
        strip=False,
        error_messages={
            'required': 'Senha é obrigatória',
            'min_length': 'Senha deve ter pelo menos 6 caracteres',
        },
    )

    cpf = forms.RegexField(
        regex=r'^[0-9]{11}$',
        error_messages={
            'required': 'CPF é obrigatório',
            'invalid': 'CPF deve conter exatamente 11 dígitos',
        },
    )

    def clean_email(self):
        return _email_sem_separador(self.cleaned_data['email'])


class UsuarioUpdateForm(forms.Form):
    """Valida o body de atualização de usuário."""

    name = forms.CharField(
        min_length=3,
        error_messages={
            'required': 'Nome é obrigatório',
            'min_length': 'Nome deve ter pelo menos 3 caracteres',
        },
    )

    email = forms.EmailField(
        error_messages={
            'required': 'Email é obrigatório',
            'invalid': 'Formato de email inválido',
        },
    )

    password = forms.CharField(
        min_length=6,
        strip=False,
        error_messages={
            'required': 'Senha é obrigatória',
            'min_length': 'Senha deve ter pelo menos 6 caracteres',
        },
    )

    updatedAt = forms.DateTimeField(required=False)

    def clean_email(self):
        return _email_sem_separador(self.cleaned_data['email'])


class TokenVerifyForm(forms.Form):
    """Valida o body de verificação de token."""

    token = forms.CharField(
        strip=False,
        error_messages={'required': 'Token é obrigatório'},
    )
