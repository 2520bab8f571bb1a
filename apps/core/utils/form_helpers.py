from django import forms


class DateInput(forms.DateInput):
    """
    Custom DateInput widget with HTML5 date type.
    """
    input_type = 'date'

    def __init__(self, attrs=None):
        default_attrs = {'class': 'form-control'}
        if attrs:
            default_attrs.update(attrs)
        super().__init__(attrs=default_attrs)


class PhoneInput(forms.TextInput):
    """
    Custom TextInput widget for phone numbers.
    """
    input_type = 'tel'

    def __init__(self, attrs=None):
        default_attrs = {'class': 'form-control', 'pattern': '[0-9]*', 'inputmode': 'numeric'}
        if attrs:
            default_attrs.update(attrs)
        super().__init__(attrs=default_attrs)


class DigitsInput(forms.TextInput):
    """
    TextInput for fixed-length numeric identifiers (Aadhaar, roll numbers).
    """

    def __init__(self, length=None, attrs=None):
        default_attrs = {'class': 'form-control', 'inputmode': 'numeric'}
        if length:
            default_attrs['maxlength'] = str(length)
            default_attrs['pattern'] = r'\d{%d}' % length
        if attrs:
            default_attrs.update(attrs)
        super().__init__(attrs=default_attrs)
