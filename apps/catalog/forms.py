from django import forms

from .models import Variant


class VariantAdminForm(forms.ModelForm):
    """
    Variant form for the admin.
    Rejects option values on the master variant as a form error.
    """

    class Meta:
        model = Variant
        fields = '__all__'

    def clean(self):
        cleaned_data = super().clean()
        is_master = cleaned_data.get('is_master', self.instance.is_master)
        if is_master and cleaned_data.get('option_values'):
            self.add_error(
                'option_values',
                'A variante principal não pode ter valores de opções.'
            )
        return cleaned_data
