"""
Request handlers: decision logic kept apart from HTTP.

Handlers receive their repositories as arguments and return outcome values
from houses_api.domain.outcomes; routers translate those to HTTP responses.
"""
