"""Two-party DH session: Alice and Bob, public key exchange, key confirmation."""
import secrets

from keyexchange.common.protocol import DHParameters, ExchangeResult, PublicKeyMessage
from keyexchange.common.utils import sha256_hex
from keyexchange.crypto.aes import aes_decrypt, aes_encrypt
from keyexchange.crypto.dh import derive_aes_key, private_key, public_key, secret

class KeyAgreementError(Exception):
    """Raised when two parties did not end up with the same key."""
    pass

class Party:
    """One side of the exchange. Owns its private key; shares nothing else."""

    def __init__(self, name: str, parameters: DHParameters, rng=None):
        self.name = name
        self.parameters = parameters
        self.private_key = private_key(parameters.p, rng or secrets.SystemRandom())
        self.public_key = public_key(parameters.p, parameters.g, self.private_key)
        self.shared_secret = None

    def public_message(self) -> PublicKeyMessage:
        """What this party sends to its peer."""
        return PublicKeyMessage(party=self.name, public_key=self.public_key)

    def compute_secret(self, message: PublicKeyMessage) -> int:
        """Derive the shared secret from the peer's public key."""
        self.shared_secret = secret(self.parameters.p, message.public_key, self.private_key)
        return self.shared_secret

    def aes_key(self) -> bytes:
        if self.shared_secret is None:
            raise ValueError(f"{self.name} has not computed a shared secret yet")
        return derive_aes_key(self.shared_secret)

def exchange_between(alice: Party, bob: Party) -> ExchangeResult:
    """Swap public keys between two parties and collect both secrets.

    Args:
        alice: Party that picked the parameters
        bob: Peer party using the same parameters

    Returns:
        ExchangeResult; key_fingerprint is only filled in when both agree
    """
    if alice.parameters != bob.parameters:
        raise KeyAgreementError("parties are using different DH parameters")

    alice_msg = alice.public_message()
    bob_msg = bob.public_message()

    alice_secret = alice.compute_secret(bob_msg)
    bob_secret = bob.compute_secret(alice_msg)

    fingerprint = ""
    if alice_secret == bob_secret:
        fingerprint = sha256_hex(alice.aes_key())

    return ExchangeResult(
        parameters=alice.parameters,
        alice_public=alice_msg.public_key,
        bob_public=bob_msg.public_key,
        alice_secret=alice_secret,
        bob_secret=bob_secret,
        key_fingerprint=fingerprint,
    )

def run_exchange(parameters: DHParameters, rng=None) -> ExchangeResult:
    """Create Alice and Bob on the same parameters and run the exchange."""
    rng = rng or secrets.SystemRandom()
    alice = Party("alice", parameters, rng)
    bob = Party("bob", parameters, rng)
    return exchange_between(alice, bob)

def confirm_key(sender: Party, receiver: Party, plaintext: bytes) -> bytes:
    """Encrypt with the sender's derived key, decrypt with the receiver's.

    Returns:
        Plaintext as recovered by the receiver

    Raises:
        KeyAgreementError: If the receiver cannot recover the plaintext
    """
    ciphertext = aes_encrypt(sender.aes_key(), plaintext)
    try:
        recovered = aes_decrypt(receiver.aes_key(), ciphertext)
    except ValueError as e:
        raise KeyAgreementError(f"{receiver.name} could not decrypt: {e}") from e
    if recovered != plaintext:
        raise KeyAgreementError(f"{receiver.name} recovered a different message")
    return recovered
