from enum import Enum

from .exceptions import InvalidArgument


class Method(Enum):
    GET = 'get'
    POST = 'post'
    PUT = 'put'
    DELETE = 'delete'

    @classmethod
    def resolve(cls, value, function=None):
        """
        Return the :class:`Method` for ``value``, which must be a member or one of the lower-case verb names.

        :raises InvalidArgument: if ``value`` is anything else
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgument('Argument 2 (method)',
                                  'one of {}'.format(','.join(HTTP_METHODS)),
                                  value,
                                  function=function)


HTTP_METHODS = tuple(m.value for m in Method)
