from .graph_backend import GraphBackend
from .typing_backend import TypingBackend
