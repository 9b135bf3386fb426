"""Internal constants shared across the library."""

DEFAULT_DOMAIN = "https://baas.heclouds.com/api"

#: Request header carrying the per-request signature.
AUTH_HEADER = "authCode"

#: Caller-facing parameter name and wire header for the login session token.
SESSION_TOKEN_PARAM = "sessionToken"
SESSION_TOKEN_HEADER = "session-token"

DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "*/*",
    "Content-Type": "application/json",
}

HTTP_METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"})

# Characters left unescaped by ECMAScript encodeURIComponent, beyond
# alphanumerics.  The server re-encodes parameters the same way.
URI_COMPONENT_SAFE = "-_.!~*'()"
