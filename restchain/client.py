import json
import logging

from .methods import Method
from .node import Node
from .signals import request_started, request_finished
from .utils import AttributeDict, json_dumps

log = logging.getLogger('restchain')


class ClientMeta(type):

    def __new__(mcs, name, bases, members):
        class_ = super(ClientMeta, mcs).__new__(mcs, name, bases, members)
        class_.meta = meta = AttributeDict(getattr(class_, 'meta', {}) or {})

        for base in bases:
            if hasattr(base, 'Meta'):
                meta.update({k: v for k, v in base.Meta.__dict__.items() if not k.startswith('__')})

        if 'Meta' in members:
            for k, v in members['Meta'].__dict__.items():
                if not k.startswith('__'):
                    meta[k] = v

        return class_


class Client(Node, metaclass=ClientMeta):
    """
    The root of every path. Turns a relative URI, a mapping of parameters and a :class:`Method` into exactly one
    request on the transport.

    Any transport object will do as long as it has a ``base_url`` attribute and a
    ``request(method, uri, options)`` method returning a response with ``status_code`` and ``reason``. The
    ``options`` mapping uses the keyword names of :meth:`requests.Session.request` (``headers``, ``params``,
    ``data``).

    :class:`Meta` class attributes:

    =====================  ==============================  ==============================================================================
    Attribute name         Default                         Description
    =====================  ==============================  ==============================================================================
    headers                ``{}``                          Headers sent with every request. See :meth:`basic_headers`.
    json_encoder           ``None``                        A :class:`json.JSONEncoder` subclass used by :meth:`encode_parameters`.
    =====================  ==============================  ==============================================================================

    Usage example:

    .. code-block:: python

        class DNSClient(Client):
            class Meta:
                headers = {'Accept': 'application/json'}

        client = DNSClient.from_url('https://api.example.com/V2.0')
        client.dns.managed[domain_id].records()                        # GET dns/managed/123/records
        client.dns.managed[domain_id].records({'name': 'www'}, 'post') # POST dns/managed/123/records

    :param transport: transport used to perform requests
    """
    meta = None

    _handlers = {
        Method.GET: 'get',
        Method.POST: 'post',
        Method.PUT: 'put',
        Method.DELETE: 'delete'
    }

    def __init__(self, transport):
        super(Client, self).__init__()
        self.transport = transport
        self.loggers = []

    @classmethod
    def from_url(cls, base_url, **kwargs):
        """
        Create a client using a :class:`restchain.transport.RequestsTransport`.

        :param str base_url: URL all paths are relative to
        :param kwargs: passed on to the transport
        """
        from .transport import RequestsTransport
        return cls(RequestsTransport(base_url, **kwargs))

    def __call__(self, params=None, method='get'):
        return self.child('').call(params, method)

    def get(self, path, params=None):
        options = {'headers': self.basic_headers(), 'params': dict(params or {})}
        return self._request(Method.GET, path, options)

    def post(self, path, params=None):
        options = {'headers': self.basic_headers(), 'data': self.encode_parameters(dict(params or {}))}
        return self._request(Method.POST, path, options)

    def put(self, path, params=None):
        options = {'headers': self.basic_headers(), 'data': self.encode_parameters(dict(params or {}))}
        return self._request(Method.PUT, path, options)

    def delete(self, path, params=None):
        options = {'headers': self.basic_headers()}
        if params:
            options['data'] = self.encode_parameters(dict(params))
        return self._request(Method.DELETE, path, options)

    def execute(self, uri, params=None, method=Method.GET):
        """
        Perform the request for a fully resolved ``uri``.

        ``method`` is expected to have been checked already; anything that is not a :class:`Method` or one of its
        values raises :class:`ValueError`.
        """
        method = Method(method)
        if params is None:
            params = {}
        self.log('%s.%s(%s, %s, %s)', [type(self).__name__, 'execute', uri, json_dumps(params), method.value], 'debug')
        return getattr(self, self._handlers[method])(uri, params)

    def attach_logger(self, logger):
        """
        Attach a logger. Every log event is passed to all attached loggers in the order they were attached.

        :param logger: a :class:`logging.Logger` or any object with ``debug``, ``info``, ``warning`` and ``error``
            methods
        """
        self.loggers.append(logger)

    def basic_headers(self):
        """
        Headers used in *all* requests, such as Content-Type, Accept or authentication headers. Override in a
        subclass or set ``Meta.headers``.

        :return: a new :class:`dict`
        """
        return dict(self.meta.get('headers') or {})

    def encode_parameters(self, params):
        """
        Encode request parameters for the request body. Defaults to JSON; override for other encodings.
        """
        return json.dumps(params, cls=self.meta.get('json_encoder'))

    def log(self, msg, args=None, level='info'):
        """
        Pass a message on to the attached loggers.

        :param str msg: message, in printf format when ``args`` are given
        :param args: arguments for the message
        :param str level: name of the logger method to call
        """
        if not self.loggers:
            return

        message = msg % tuple(args) if args is not None else msg
        for logger in self.loggers:
            try:
                getattr(logger, level)(message)
            except Exception:
                log.warning('Logger %r failed to handle a %s message', logger, level, exc_info=True)

    def _request(self, method, uri, options):
        self.log('Executing %s on URI [Base: "%s", Uri: "%s"] with params %s',
                 [method.value.upper(), self.transport.base_url, uri, json_dumps(options)], 'debug')
        request_started.send(self, method=method, uri=uri, options=options)

        response = self.transport.request(method.value, uri, options)

        self.log('API Response Status: %s %s', [response.status_code, response.reason], 'debug')
        request_finished.send(self, response=response)
        return response

    def __repr__(self):
        return '<{} {!r}>'.format(type(self).__name__, self.transport.base_url)

    class Meta:
        headers = {}
        json_encoder = None
