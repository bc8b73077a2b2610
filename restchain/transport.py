import requests


class RequestsTransport(object):
    """
    Performs requests for a :class:`restchain.Client` using a :class:`requests.Session`.

    Timeouts and connection errors are entirely the concern of the transport; any :class:`requests.RequestException`
    is passed through to the caller unchanged.

    :param str base_url: URL all request URIs are relative to
    :param requests.Session session: an optional session, e.g. with authentication or adapters configured
    :param timeout: an optional timeout passed to every request
    :param bool raise_for_status: whether responses with an error status should raise :class:`requests.HTTPError`
    """

    def __init__(self, base_url, session=None, timeout=None, raise_for_status=False):
        self._base_url = base_url
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.raise_for_status = raise_for_status

    @property
    def base_url(self):
        return self._base_url

    def url_for(self, uri):
        if not uri:
            return self._base_url
        return '{}/{}'.format(self._base_url.rstrip('/'), uri)

    def request(self, method, uri, options):
        response = self.session.request(method.upper(), self.url_for(uri), timeout=self.timeout, **options)
        if self.raise_for_status:
            response.raise_for_status()
        return response

    def close(self):
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()
