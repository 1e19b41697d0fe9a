"""Pydantic models: dh_params, public_key, exchange_result."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Literal

from keyexchange.crypto.modpow import U64_MAX

class DHParameters(BaseModel):
    """Shared modulus and generator both parties agree on."""
    model_config = ConfigDict(frozen=True)

    type: Literal["dh_params"] = "dh_params"
    p: int = Field(ge=2, le=U64_MAX)  # prime modulus
    g: int = Field(ge=0, le=U64_MAX)  # generator

class PublicKeyMessage(BaseModel):
    """Public key one party hands to the other."""
    model_config = ConfigDict(frozen=True)

    type: Literal["public_key"] = "public_key"
    party: str  # "alice" or "bob"
    public_key: int = Field(ge=0, le=U64_MAX)  # g^priv mod p

class ExchangeResult(BaseModel):
    """Outcome of one exchange, as seen from outside both parties."""
    type: Literal["exchange_result"] = "exchange_result"
    parameters: DHParameters
    alice_public: int
    bob_public: int
    alice_secret: int
    bob_secret: int
    key_fingerprint: str = ""  # hex(SHA256(aes key)) when the secrets agree

    @property
    def agreed(self) -> bool:
        return self.alice_secret == self.bob_secret
