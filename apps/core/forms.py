# apps/core/forms.py
from django import forms


class StyledFormMixin:
    """Adds the site's CSS classes and accessibility attributes to every widget"""

    checkbox_class = 'form-check-input'
    input_class = 'form-control'
    select_class = 'form-select'

    def apply_widget_styles(self):
        for field_name, field in self.fields.items():
            widget = field.widget

            if 'class' not in widget.attrs:
                if isinstance(widget, forms.CheckboxInput):
                    widget.attrs['class'] = self.checkbox_class
                elif isinstance(widget, forms.Select):
                    widget.attrs['class'] = self.select_class
                else:
                    widget.attrs['class'] = self.input_class

            # Add aria-label for accessibility
            if field.label:
                widget.attrs.setdefault('aria-label', str(field.label))


class BaseForm(StyledFormMixin, forms.ModelForm):
    """Base model form with consistent widget styling"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.apply_widget_styles()
