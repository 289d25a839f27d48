"""viewkeys: a reactive key/value store for driving view selection."""

from importlib.metadata import version as _version

__version__ = _version("viewkeys")

from viewkeys._tracking import set_scheduler
from viewkeys.dependency import Dependency
from viewkeys.computation import Computation, autorun
from viewkeys.values import ContentValue, InvalidValueError, TemplateValue, validate_value
from viewkeys.store import ViewStore
from viewkeys.templates import TemplateRegistry, template_name
from viewkeys.helpers import template_helper
# textual bridge NOT auto-imported — import viewkeys.textual explicitly

__all__ = [
    "ViewStore",
    "Dependency",
    "Computation",
    "autorun",
    "set_scheduler",
    "TemplateValue",
    "ContentValue",
    "InvalidValueError",
    "validate_value",
    "TemplateRegistry",
    "template_name",
    "template_helper",
]
