class ParseError(Exception):

    def __init__(self, message, **debuginfo):
        Exception.__init__(self, message)
        self.message = str(message)
        self.debuginfo = debuginfo

    def __str__(self):
        header = ', '.join([type(self).__name__] + [
            '{} {}'.format(key, val)
            for key, val in sorted(self.debuginfo.items())
        ])
        return '{}: {}'.format(header, self.message)


class InvalidCharacter(ParseError):
    pass


class UnbalancedParentheses(ParseError):
    pass


class TooFewTerms(ParseError):
    pass


class TooManyTerms(ParseError):
    pass


class TrailingTerms(ParseError):
    pass


class IncompleteExpression(ParseError):

    @property
    def expected(self):
        return self.debuginfo['expected']
