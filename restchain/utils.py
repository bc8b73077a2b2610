import json


class AttributeDict(dict):
    __getattr__ = dict.__getitem__
    __setattr__ = dict.__setitem__


def json_dumps(obj, **kwargs):
    """
    Encode ``obj`` for log messages. Values that JSON cannot represent are written using their ``str()`` form
    so that logging never fails because of unusual parameters.
    """
    kwargs.setdefault('default', str)
    return json.dumps(obj, **kwargs)
