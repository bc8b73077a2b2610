class RestChainException(Exception):
    pass


class InvalidArgument(RestChainException, ValueError):
    """
    Raised when the arguments of a terminal invocation are not acceptable.

    :param str argument: position and name of the argument, e.g. ``'Argument 1 (params)'``
    :param str expected: the constraint that was violated
    :param actual: the offending value or the name of its type
    :param str function: qualified name of the function that was called
    """

    def __init__(self, argument, expected, actual, function=None):
        self.argument = argument
        self.expected = expected
        self.actual = actual
        self.function = function
        super(InvalidArgument, self).__init__(self.message)

    @property
    def message(self):
        return '{} passed to {} must be {}, {} given'.format(self.argument,
                                                              self.function or 'call',
                                                              self.expected,
                                                              self.actual)
