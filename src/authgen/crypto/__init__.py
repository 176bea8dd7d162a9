"""Cryptographic core of the JWT signer.

- :mod:`~authgen.crypto.registry` -- closed mapping from algorithm id to
  family, digest and curve.
- :mod:`~authgen.crypto.der` -- DER reader that turns ECDSA signatures into
  fixed-width ``r || s``.
- :mod:`~authgen.crypto.signers` -- one signing strategy per family.

Typical usage::

    from authgen.crypto import resolve, signer_for

    signature = signer_for(resolve("ES256")).sign(message, pem_bytes)
"""

from authgen.crypto.der import parse, to_fixed_width
from authgen.crypto.registry import (
    AlgorithmFamily,
    AlgorithmSpec,
    parse_algorithm,
    resolve,
    supported_algorithms,
)
from authgen.crypto.signers import Signer, signer_for

__all__ = [
    "AlgorithmFamily",
    "AlgorithmSpec",
    "Signer",
    "parse",
    "parse_algorithm",
    "resolve",
    "signer_for",
    "supported_algorithms",
    "to_fixed_width",
]
