from django import forms

from apps.core.conf import app_setting


class SupportMessageForm(forms.Form):
    # CharField obcina białe znaki, więc "   " traktujemy jak brak treści
    text = forms.CharField(error_messages={'required': 'Message text is required'})

    def clean_text(self):
        text = self.cleaned_data['text']
        max_length = app_setting('SUPPORT_MESSAGE_MAX_LENGTH')
        if len(text) > max_length:
            raise forms.ValidationError(f"Message too long (max {max_length} characters)")
        return text
