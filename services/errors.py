"""
Typed failures raised by the board engine.

Each error carries an HTTP-style status and a translation key; the routes
layer renders the key through utils.i18n so no persistence detail ever
reaches the caller.
"""


class BoardError(Exception):
    status = 400
    default_key = 'error_generic'

    def __init__(self, key=None, **params):
        self.key = key or self.default_key
        self.params = params
        super().__init__(self.key)


class InvalidInput(BoardError):
    status = 400
    default_key = 'invalid_input'


class Unauthenticated(BoardError):
    status = 401
    default_key = 'not_authenticated'


class NotAMember(BoardError):
    """The caller has no membership row on the board."""
    status = 401
    default_key = 'not_a_member'


class Forbidden(BoardError):
    status = 403
    default_key = 'not_authorized'


class NotFound(BoardError):
    status = 404
    default_key = 'not_found'


class Conflict(BoardError):
    status = 409
    default_key = 'conflict'
