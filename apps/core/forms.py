from django import forms

from .models import PlatformConfig, LLMConfig
from .security import encrypt_value

INPUT_CLASS = 'w-full px-3 py-2 border rounded-lg focus:outline-none focus:ring-2 focus:ring-blue-500'
CHECKBOX_CLASS = 'h-4 w-4 text-blue-600 focus:ring-blue-500 border-gray-300 rounded'


def style_fields(form):
    for field in form.fields.values():
        if isinstance(field.widget, forms.CheckboxInput):
            field.widget.attrs.update({'class': CHECKBOX_CLASS})
        else:
            field.widget.attrs.update({'class': INPUT_CLASS})


class LLMConfigForm(forms.ModelForm):
    active_model = forms.ChoiceField(required=False)
    api_key = forms.CharField(
        required=False,
        widget=forms.PasswordInput(render_value=False),
        help_text="OpenAI API key (stored encrypted). Leave blank to keep the existing key."
    )
    clear_api_key = forms.BooleanField(required=False, label="Remove stored key")

    class Meta:
        model = LLMConfig
        fields = [
            'active_model',
            'system_prompt',
            'temperature',
            'max_output_tokens',
            'monthly_token_cap',
            'generation_enabled',
            'auto_disable_on_cap',
        ]
        widgets = {
            'system_prompt': forms.Textarea(attrs={'rows': 4}),
        }

    def __init__(self, *args, model_choices=None, **kwargs):
        super().__init__(*args, **kwargs)
        if model_choices:
            self.fields['active_model'].choices = model_choices
        else:
            current = self.instance.active_model
            self.fields['active_model'].choices = [(current, current)]
        style_fields(self)

    def clean_temperature(self):
        temperature = self.cleaned_data['temperature']
        if temperature is not None and not (0 <= temperature <= 2):
            raise forms.ValidationError("Temperature must be between 0 and 2.")
        return temperature

    def save(self, commit=True):
        instance = super().save(commit=False)
        if not self.cleaned_data.get('active_model'):
            instance.active_model = self.instance.active_model
        api_key = self.cleaned_data.get('api_key')
        if self.cleaned_data.get('clear_api_key'):
            instance.encrypted_api_key = ''
        elif api_key:
            instance.encrypted_api_key = encrypt_value(api_key.strip())
        if commit:
            instance.save()
        return instance


class PlatformConfigForm(forms.ModelForm):
    class Meta:
        model = PlatformConfig
        fields = [
            'site_name', 'site_tagline', 'announcement',
            'contact_email', 'support_phone', 'address',
            'maintenance_mode', 'maintenance_message',
            'session_timeout_minutes', 'welcome_screen_refresh_seconds',
        ]
        widgets = {
            'address': forms.Textarea(attrs={'rows': 3}),
            'maintenance_message': forms.Textarea(attrs={'rows': 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_fields(self)

    def clean_session_timeout_minutes(self):
        minutes = self.cleaned_data['session_timeout_minutes']
        if minutes < 5:
            raise forms.ValidationError("Use at least 5 minutes.")
        return minutes
