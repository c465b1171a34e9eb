"""
Input validation for StockWise operations.

Every operation validates its input here before touching the database.
Messages are the ones shown to the user.
"""

from django import forms

from stockwise.exceptions import StockwiseError
from stockwise.models.enums import Permission, Role


class ProductForm(forms.Form):
    id = forms.CharField(
        min_length=1,
        max_length=64,
        error_messages={'required': 'El ID es obligatorio.'},
    )
    name = forms.CharField(
        min_length=2,
        max_length=200,
        error_messages={'min_length': 'El nombre debe tener al menos 2 caracteres.',
                        'required': 'El nombre debe tener al menos 2 caracteres.'},
    )
    category = forms.CharField(
        min_length=2,
        max_length=100,
        error_messages={'min_length': 'La categoría debe tener al menos 2 caracteres.',
                        'required': 'La categoría debe tener al menos 2 caracteres.'},
    )
    location = forms.CharField(
        min_length=2,
        max_length=100,
        error_messages={'min_length': 'La ubicación debe tener al menos 2 caracteres.',
                        'required': 'La ubicación debe tener al menos 2 caracteres.'},
    )
    quantity = forms.IntegerField(
        min_value=0,
        error_messages={'min_value': 'La cantidad no puede ser negativa.',
                        'invalid': 'La cantidad debe ser un número entero.',
                        'required': 'La cantidad es obligatoria.'},
    )
    reorder_point = forms.IntegerField(
        min_value=0,
        error_messages={'min_value': 'El punto de reorden no puede ser negativo.',
                        'invalid': 'El punto de reorden debe ser un número entero.',
                        'required': 'El punto de reorden es obligatorio.'},
    )


class ProductUpdateForm(ProductForm):
    """
    Partial product update. The id is immutable and not accepted.

    Only the submitted fields are validated, with the full create rules:
    a blank value is rejected, never stored as empty or NULL.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        del self.fields['id']
        for name in list(self.fields):
            if name not in self.data:
                del self.fields[name]


class LoanForm(forms.Form):
    product_id = forms.CharField(error_messages={'required': 'Selecciona un producto.'})
    requester = forms.CharField(
        min_length=2,
        max_length=200,
        error_messages={'min_length': 'El solicitante debe tener al menos 2 caracteres.',
                        'required': 'El solicitante debe tener al menos 2 caracteres.'},
    )
    quantity = forms.IntegerField(
        min_value=1,
        error_messages={'min_value': 'La cantidad debe ser al menos 1.',
                        'invalid': 'La cantidad debe ser un número entero.',
                        'required': 'La cantidad debe ser al menos 1.'},
    )
    loan_date = forms.DateTimeField(required=False)


class StockAdjustmentForm(forms.Form):
    product_id = forms.CharField(error_messages={'required': 'Selecciona un producto.'})
    quantity = forms.IntegerField(
        min_value=1,
        error_messages={'min_value': 'La cantidad a descontar debe ser mayor que cero.',
                        'invalid': 'La cantidad debe ser un número entero.',
                        'required': 'La cantidad a descontar debe ser mayor que cero.'},
    )
    reason = forms.CharField(
        min_length=3,
        max_length=255,
        error_messages={'min_length': 'La razón debe tener al menos 3 caracteres.',
                        'required': 'La razón debe tener al menos 3 caracteres.'},
    )


class NewUserForm(forms.Form):
    username = forms.RegexField(
        regex=r'^[a-zA-Z0-9._-]+$',
        min_length=3,
        max_length=150,
        error_messages={'invalid': 'El usuario solo puede contener letras, números, puntos y guiones.',
                        'min_length': 'El usuario debe tener al menos 3 caracteres.',
                        'required': 'El usuario es obligatorio.'},
    )
    name = forms.CharField(
        min_length=2,
        max_length=200,
        error_messages={'min_length': 'El nombre debe tener al menos 2 caracteres.',
                        'required': 'El nombre debe tener al menos 2 caracteres.'},
    )
    password = forms.CharField(
        min_length=6,
        error_messages={'min_length': 'La contraseña debe tener al menos 6 caracteres.',
                        'required': 'La contraseña es obligatoria.'},
    )
    permissions = forms.MultipleChoiceField(choices=Permission.choices, required=False)


class UserUpdateForm(forms.Form):
    name = forms.CharField(min_length=2, max_length=200, required=False)
    role = forms.ChoiceField(choices=Role.choices, required=False)
    permissions = forms.MultipleChoiceField(choices=Permission.choices, required=False)


def validated(form_class, data: dict, **form_kwargs) -> dict:
    """
    Run a form over ``data`` and return its cleaned data.

    Raises:
        StockwiseError('VALIDATION_ERROR'): with the first field error as
            message and the offending field in ``data['field']``.
    """
    form = form_class(data=data, **form_kwargs)
    if not form.is_valid():
        field, errors = next(iter(form.errors.items()))
        raise StockwiseError('VALIDATION_ERROR', message=errors[0], field=field)
    return form.cleaned_data
