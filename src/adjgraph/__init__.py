from . import exceptions, graph, logging_util, types, vertex
from .graph import Graph
from .vertex import Vertex

__version__ = "0.1.0"
