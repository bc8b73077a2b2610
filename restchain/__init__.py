from .client import Client
from .exceptions import RestChainException, InvalidArgument
from .methods import Method, HTTP_METHODS
from .node import Node, PathNode
from .transport import RequestsTransport

__all__ = (
    'Client',
    'Node',
    'PathNode',
    'Method',
    'HTTP_METHODS',
    'RestChainException',
    'InvalidArgument',
    'RequestsTransport',
    'signals',
    'contrib'
)
