"""Token lifecycle: sign, parse and expire subjects."""

from .codec import ALGORITHM, read, sign, verify
from .factory import TokenFactory, access_tokens, refresh_tokens, tokens
from .pair import TokenPair, issue_token_pair, renew_token_pair
from .subject import decode_subject, encode_subject
from .token import Token

__all__ = [
    "ALGORITHM",
    "Token",
    "TokenFactory",
    "TokenPair",
    "access_tokens",
    "decode_subject",
    "encode_subject",
    "issue_token_pair",
    "read",
    "refresh_tokens",
    "renew_token_pair",
    "sign",
    "tokens",
    "verify",
]
