"""
Form Renderer - HTML page for the form and its validation state
"""
import jinja2

from .patterns import FIELDS
from .validator import FormSubmission, ValidationResult

FIELD_LABELS = {"title": "Title", "phone": "Telephone", "mail": "Mail"}
FIELD_TYPES = {"title": "text", "phone": "text", "mail": "email"}

FORM_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ page_title }}</title>
    <link rel="stylesheet" href="https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.5.1/css/all.min.css"
          crossorigin="anonymous" referrerpolicy="no-referrer"/>
    <style>
        .text-danger {
            color: red;
        }
    </style>
</head>
<body>
<h1>{{ heading }}</h1>
<form action="" method="POST">
    <div>
{%- for f in fields %}
        <div>
            <label for="{{ f.name }}">{{ f.label }}</label>
            <input type="{{ f.type }}" name="{{ f.name }}" id="{{ f.name }}" value="{{ f.value }}"/>
            <i style="color: {{ 'green' if f.result.is_valid else 'red' }}" class="fa-solid fa-circle-check"></i>
            <p class="text-danger">{% if f.result.error %}{{ f.result.error }}{% endif %}</p>
        </div>
{%- endfor %}
    </div>
    <div>
        <button type="submit" name="save">Save</button>
    </div>
</form>
</body>
</html>
"""

jinja_env = jinja2.Environment(autoescape=True, undefined=jinja2.StrictUndefined)
form_template = jinja_env.from_string(FORM_TEMPLATE)


def render_form(submission: FormSubmission, result: ValidationResult,
                title: str = "Simple Form", page_title: str = "REG-EX") -> str:
    fields = [
        {
            "name": name,
            "label": FIELD_LABELS[name],
            "type": FIELD_TYPES[name],
            "value": submission.value(name),
            "result": result[name],
        }
        for name in FIELDS
    ]
    return form_template.render(fields=fields, heading=title, page_title=page_title)
