"""
regexform - Server-rendered form with per-field regex validation
"""

from .core import regexform, RegexForm, RegexFormConfig
from .patterns import FormPattern, PatternConfigError, FIELDS
from .validator import FormSubmission, FieldResult, ValidationResult, validate
from .rendering import render_form
from .form_server import create_app, FormServer
from .port_manager import PortManager

__version__ = "0.1.0"
__description__ = "Server-rendered form with per-field regex validation"

__all__ = [
    # Main API
    "regexform",
    "RegexForm",
    "RegexFormConfig",
    "validate",
    "render_form",
    "create_app",

    # Data model
    "FormPattern",
    "PatternConfigError",
    "FIELDS",
    "FormSubmission",
    "FieldResult",
    "ValidationResult",

    # Components (for advanced usage)
    "FormServer",
    "PortManager",
]
