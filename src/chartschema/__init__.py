from .backend import TypeBackend, TypeKind, TypeProperty
from .schema import SimpleSchema
from .walker import summarize, walk

__version__ = "0.1.0"
