from blinker import Namespace

_restchain = Namespace()

request_started = _restchain.signal('request-started')

request_finished = _restchain.signal('request-finished')
