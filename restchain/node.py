from collections.abc import Mapping

from .exceptions import InvalidArgument
from .methods import Method


class Node(object):
    """
    Anything a path can be built from: the :class:`restchain.Client` and every :class:`PathNode` below it.

    Child nodes are created on first access and memoized for the lifetime of their parent, so that the same path
    always resolves to the same object. There are three ways to reach a child:

    .. code-block:: python

        client.dns.managed           # attribute access
        client['dns']['managed']     # item access; works for any name, e.g. client.users[5]
        client.child('dns').child('managed')

    Attribute access is only available for names that are not already attributes of the node and do not start
    with an underscore; use item access for segments such as ``'call'`` or ``'name'``.

    .. attribute:: name

        The path segment contributed by this node; empty for the client.

    .. attribute:: parent

        The node this one was created from; ``None`` for the client.
    """
    name = ''
    parent = None

    def __init__(self):
        self._children = {}

    def child(self, name):
        """
        Return the :class:`PathNode` for ``name`` below this node, creating it on first access.

        :param name: segment name; converted using ``str()``
        """
        name = str(name)
        try:
            return self._children[name]
        except KeyError:
            node = self._children[name] = PathNode(self, name)
            return node

    def __getitem__(self, name):
        return self.child(name)

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        return self.child(name)

    def execute(self, uri, params, method):
        raise NotImplementedError()


class PathNode(Node):
    """
    One segment of a path. Executing a request on a path node prepends the name of each node up the chain to the
    URI and hands the request to the first ancestor that is not a path node, normally the :class:`restchain.Client`.

    :param Node parent: the node this segment belongs to
    :param str name: segment name
    """

    def __init__(self, parent, name):
        super(PathNode, self).__init__()
        self.parent = parent
        self.name = name

    @property
    def path(self):
        segments = []
        node = self
        while node.parent is not None:
            segments.append(node.name)
            node = node.parent
        return '/'.join(reversed(segments))

    def call(self, params=None, method='get'):
        """
        Perform a request against the path of this node.

        :param params: a mapping of request parameters; sent in the query string for ``GET`` and in the body otherwise
        :param method: one of ``'get'``, ``'post'``, ``'put'``, ``'delete'`` or a :class:`Method`
        :raises InvalidArgument: if ``params`` is not a mapping or ``method`` is not supported
        :return: the response returned by the transport
        """
        function = '{}.call'.format(type(self).__name__)

        if params is None:
            params = {}
        elif not isinstance(params, Mapping):
            raise InvalidArgument('Argument 1 (params)',
                                  'an instance of Mapping',
                                  type(params).__name__,
                                  function=function)
        else:
            params = dict(params)

        method = Method.resolve(method, function=function)
        return self.execute('', params, method)

    __call__ = call

    def execute(self, uri, params, method):
        node = self
        while isinstance(node, PathNode):
            if uri == '':
                uri = node.name
            else:
                uri = '{}/{}'.format(node.name, uri)
            node = node.parent
        return node.execute(uri, params, method)

    def __repr__(self):
        return '<PathNode {!r}>'.format(self.path)
