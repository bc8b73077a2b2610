import json
from unittest import TestCase

from flask import Flask

from restchain import Client


class MockResponse(object):

    def __init__(self, status_code=200, reason='OK'):
        self.status_code = status_code
        self.reason = reason


class RecordingTransport(object):
    """
    Records every request instead of sending it. ``responses`` are returned in order; once they run out, a
    ``200 OK`` response is returned. Exceptions in ``responses`` are raised.
    """
    base_url = 'http://example.com/api'

    def __init__(self, *responses):
        self.calls = []
        self.responses = list(responses)

    def request(self, method, uri, options):
        self.calls.append((method, uri, options))
        if not self.responses:
            return MockResponse()

        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class ListLogger(object):

    def __init__(self, events):
        self.events = events
        self.name = 'list'

    def __getattr__(self, level):
        return lambda message: self.events.append((self.name, level, message))


class BaseTestCase(TestCase):

    def setUp(self):
        super(BaseTestCase, self).setUp()
        self.transport = RecordingTransport()
        self.client = Client(self.transport)

    def assertRequest(self, method, uri, options=None, call=-1):
        called_method, called_uri, called_options = self.transport.calls[call]
        self.assertEqual((method, uri), (called_method, called_uri))
        if options is not None:
            self.assertEqual(options, called_options)

    def assertJSONEqual(self, first, second, msg=None):
        self.assertEqual(json.loads(first), second, msg)


class FlaskTestCase(TestCase):

    def create_app(self):
        app = Flask(__name__)
        app.secret_key = 'XXX'
        app.debug = True
        return app

    def setUp(self):
        super(FlaskTestCase, self).setUp()
        self.app = self.create_app()
