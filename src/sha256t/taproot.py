"""
Well-Known Tags (BIP-340 / BIP-341)

These names are PINNED - changing one changes every digest made with it.
"""

from .hash import TaggedHash
from .tags import NamedTag


class TapLeafTag(NamedTag):
    NAME = "TapLeaf"


class TapBranchTag(NamedTag):
    NAME = "TapBranch"


class TapTweakTag(NamedTag):
    NAME = "TapTweak"


class TapSighashTag(NamedTag):
    NAME = "TapSighash"


class ChallengeTag(NamedTag):
    NAME = "BIP0340/challenge"


class AuxTag(NamedTag):
    NAME = "BIP0340/aux"


class NonceTag(NamedTag):
    NAME = "BIP0340/nonce"


class TapLeafHash(TaggedHash[TapLeafTag]):
    """Taproot script leaf hash."""


class TapBranchHash(TaggedHash[TapBranchTag]):
    """Taproot script tree branch hash."""


class TapTweakHash(TaggedHash[TapTweakTag]):
    """Taproot output key tweak."""


class TapSighash(TaggedHash[TapSighashTag]):
    """Taproot signature hash."""


class ChallengeHash(TaggedHash[ChallengeTag]):
    """Schnorr signature challenge e = H(R || P || m)."""


class AuxHash(TaggedHash[AuxTag]):
    """Schnorr auxiliary randomness mask."""


class NonceHash(TaggedHash[NonceTag]):
    """Schnorr nonce derivation."""
