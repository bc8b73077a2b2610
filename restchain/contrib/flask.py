from flask.testing import FlaskClient
from werkzeug.wrappers import Response


class TransportResponse(Response):

    @property
    def reason(self):
        return self.status.partition(' ')[2]


class FlaskTransport(FlaskClient):
    """
    A transport that sends requests to a Flask application in the same process, through the application's test
    client. Useful for exercising a :class:`restchain.Client` against an API without a network:

    .. code-block:: python

        client = Client(FlaskTransport.for_app(app, base_url='/api'))
        client.users[1]()

    Responses have a ``reason`` attribute in addition to the usual Werkzeug response attributes.
    """
    base_url = '/'

    @classmethod
    def for_app(cls, app, base_url='/'):
        transport = cls(app, TransportResponse, use_cookies=True)
        transport.base_url = base_url
        return transport

    def url_for(self, uri):
        if not uri:
            return self.base_url
        return '{}/{}'.format(self.base_url.rstrip('/'), uri)

    def request(self, method, uri, options):
        return self.open(self.url_for(uri),
                         method=method.upper(),
                         headers=options.get('headers'),
                         query_string=options.get('params'),
                         data=options.get('data'))
