"""Wire constants shared with the remote service."""

# Spoofed client identity; unrecognised user agents are rejected.
DEFAULT_USER_AGENT = "Nest/3.0.15 (iOS) os=6.0 platform=iPad3,1"

# Layout of the cookie-style "expires_in" timestamp in the login response.
EXPIRES_FORMAT = "Mon, 02-Jan-2006 15:04:05 MST"

HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_ID = "X-nl-user-id"
HEADER_PROTOCOL_VERSION = "X-nl-protocol-version"
HEADER_AUTHORIZATION = "Authorization"
HEADER_ACCEPT_LANGUAGE = "Accept-Language"

PROTOCOL_VERSION = "1"
ACCEPT_LANGUAGE = "en"
AUTHORIZATION_PREFIX = "Basic "

CONTENT_TYPE_FORM = "application/x-www-form-urlencoded; charset=utf-8"
CONTENT_TYPE_JSON = "application/json"
