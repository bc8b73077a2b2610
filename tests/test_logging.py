import logging

from tests import BaseTestCase, ListLogger


class FailingLogger(object):

    def debug(self, message):
        raise RuntimeError('disk full')


class LoggingTestCase(BaseTestCase):

    def test_request_is_logged(self):
        events = []
        self.client.attach_logger(ListLogger(events))
        self.client.users[5]({'q': 1})

        self.assertEqual([
            ('list', 'debug', 'Client.execute(users/5, {"q": 1}, get)'),
            ('list', 'debug', 'Executing GET on URI [Base: "http://example.com/api", Uri: "users/5"] '
                              'with params {"headers": {}, "params": {"q": 1}}'),
            ('list', 'debug', 'API Response Status: 200 OK'),
        ], events)

    def test_loggers_receive_events_in_order(self):
        events = []
        first, second = ListLogger(events), ListLogger(events)
        first.name, second.name = 'first', 'second'

        self.client.attach_logger(first)
        self.client.attach_logger(second)
        self.client.users()

        self.assertEqual(6, len(events))
        self.assertEqual(['first', 'second'] * 3, [name for name, _, _ in events])

    def test_failing_logger_is_isolated(self):
        events = []
        self.client.attach_logger(FailingLogger())
        self.client.attach_logger(ListLogger(events))

        with self.assertLogs('restchain', level='WARNING') as cm:
            response = self.client.users()

        self.assertEqual(200, response.status_code)
        self.assertEqual(3, len(events))
        self.assertEqual(3, len(cm.records))
        self.assertIn('failed to handle a debug message', cm.output[0])

    def test_standard_logger(self):
        logger = logging.getLogger('tests.api')
        self.client.attach_logger(logger)

        with self.assertLogs('tests.api', level='DEBUG') as cm:
            self.client.users({'name': 'x'}, 'delete')

        self.assertEqual(['DEBUG:tests.api:Client.execute(users, {"name": "x"}, delete)',
                          'DEBUG:tests.api:Executing DELETE on URI [Base: "http://example.com/api", Uri: "users"] '
                          'with params {"headers": {}, "data": "{\\"name\\": \\"x\\"}"}',
                          'DEBUG:tests.api:API Response Status: 200 OK'], cm.output)

    def test_log(self):
        events = []
        self.client.attach_logger(ListLogger(events))
        self.client.log('plain %s message')
        self.client.log('hello %s', ['world'], 'warning')

        self.assertEqual([('list', 'info', 'plain %s message'),
                          ('list', 'warning', 'hello world')], events)

    def test_unserializable_params_are_logged(self):
        events = []
        self.client.attach_logger(ListLogger(events))
        self.client.users({'tag': {1}})

        self.assertEqual('Client.execute(users, {"tag": "{1}"}, get)', events[0][2])
        self.assertRequest('get', 'users', {'headers': {}, 'params': {'tag': {1}}})
