"""HTTP Digest response generator (:rfc:`2617`, :rfc:`7616`).

Computes the challenge response for the ``MD5``, ``MD5-sess``,
``SHA-256`` and ``SHA-256-sess`` algorithms, with or without a quality of
protection (``auth`` / ``auth-int``), and assembles the comma separated
attribute list that follows ``Digest`` in the ``Authorization`` header.

The hash chain is::

    HA1      = H(username:realm:password)
    HA1      = H(HA1:nonce:cnonce)                      # -sess variants
    HA2      = H(method:uri)                            # qop absent or auth
    HA2      = H(method:uri:H(entity_body))             # qop=auth-int
    response = H(HA1:nonce:nc:cnonce:qop:HA2)           # qop present
    response = H(HA1:nonce:HA2)                         # otherwise

Everything here is a pure function of the :class:`~authgen.models.DigestChallenge`.
"""

from __future__ import annotations

import logging
import re

from authgen.exceptions import DomainError
from authgen.generators.base import Generator
from authgen.models import DigestChallenge

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s{2,}")


def _uses_qop(qop: str) -> bool:
    return qop != "" and qop != "0"


def compute_response(challenge: DigestChallenge) -> str:
    """Return the lowercase hex ``response`` value for *challenge*."""
    h = challenge.algorithm.hash

    ha1 = h(f"{challenge.username}:{challenge.realm}:{challenge.password}")
    if challenge.algorithm.is_session_variant:
        ha1 = h(f"{ha1}:{challenge.nonce}:{challenge.cnonce}")

    if challenge.qop == "auth-int":
        ha2 = h(f"{challenge.method}:{challenge.uri}:{h(challenge.entity_body)}")
    else:
        ha2 = h(f"{challenge.method}:{challenge.uri}")

    if _uses_qop(challenge.qop):
        return h(
            f"{ha1}:{challenge.nonce}:{challenge.nc}:{challenge.cnonce}:"
            f"{challenge.qop}:{ha2}"
        )
    return h(f"{ha1}:{challenge.nonce}:{ha2}")


def build_attributes(challenge: DigestChallenge) -> str:
    """Assemble the ``Digest`` attribute list for *challenge*.

    Attributes appear in a fixed order; ``qop``, ``nc`` and ``opaque`` only
    when non-empty, ``cnonce`` when the algorithm is a session variant or a
    qop is set. ``qop`` and ``nc`` are bare tokens, everything else is
    double-quoted.

    Raises:
        DomainError: If the username or realm is empty.
    """
    if challenge.username == "" or challenge.realm == "":
        raise DomainError("username and realm required")

    qop = f" qop={challenge.qop}" if challenge.qop != "" else ""
    nc = f" nc={challenge.nc}" if challenge.nc != "" else ""
    cnonce = (
        f' cnonce="{challenge.cnonce}"'
        if challenge.algorithm.is_session_variant or challenge.qop != ""
        else ""
    )
    opaque = f' opaque="{challenge.opaque}"' if challenge.opaque != "" else ""

    raw = (
        f'username="{challenge.username}" realm="{challenge.realm}" '
        f'nonce="{challenge.nonce}" uri="{challenge.uri}" '
        f'algorithm="{challenge.algorithm.value}" {qop} {nc} {cnonce} '
        f'response="{compute_response(challenge)}"{opaque}'
    )
    collapsed = _WHITESPACE_RUN.sub(" ", raw).strip()
    return collapsed.replace(" ", ", ")


class DigestAuthGenerator(Generator):
    """Generate the ``Digest`` credential for a server challenge."""

    scheme = "Digest"

    def __init__(self, data: DigestChallenge) -> None:
        self.data = data

    def generate(self) -> str:
        logger.debug(
            "Computing %s digest response (qop=%r)",
            self.data.algorithm.value,
            self.data.qop,
        )
        return build_attributes(self.data)
