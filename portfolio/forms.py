from django import forms


class ContactForm(forms.Form):
    name = forms.CharField(
        min_length=2,
        error_messages={'min_length': "Name must be at least 2 characters"},
        widget=forms.TextInput(attrs={
            'placeholder': 'Your name',
            'class': 'form-control'
        })
    )
    email = forms.EmailField(
        error_messages={'invalid': "Please enter a valid email address"},
        widget=forms.EmailInput(attrs={
            'placeholder': 'Your email address',
            'class': 'form-control'
        })
    )
    subject = forms.CharField(
        min_length=5,
        error_messages={'min_length': "Subject must be at least 5 characters"},
        widget=forms.TextInput(attrs={
            'placeholder': 'Subject of your message',
            'class': 'form-control'
        })
    )
    message = forms.CharField(
        min_length=10,
        error_messages={'min_length': "Message must be at least 10 characters"},
        widget=forms.Textarea(attrs={
            'placeholder': 'Your message',
            'rows': 5,
            'class': 'form-control'
        })
    )
