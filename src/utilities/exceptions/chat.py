"""Errors raised while decoding topic assistant requests."""


class ChatRequestError(Exception):
    """Base class for rejected chat requests."""


class InvalidChatPayload(ChatRequestError):
    """Throw an exception when the request body is neither JSON nor Base64-encoded JSON."""


class InvalidChatRequest(ChatRequestError):
    """Throw an exception when the decoded body has no usable messages."""
