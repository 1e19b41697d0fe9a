"""Console demo: pick p/g from a prime list, run Alice <-> Bob, print everything."""
import argparse
import sys

from keyexchange.common.config import get_rng, load_settings
from keyexchange.common.primes import generate_primes
from keyexchange.common.utils import b64e
from keyexchange.crypto.aes import aes_encrypt
from keyexchange.crypto.params import (
    EmptyPrimeListError,
    InvalidParametersError,
    select_parameters,
    validate_parameters,
)
from keyexchange.exchange import KeyAgreementError, Party, confirm_key, exchange_between
from keyexchange.storage.record import ExchangeRecord

def build_parser(settings: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-party Diffie-Hellman demo over a small prime field")
    parser.add_argument("--bound", type=int, default=settings['prime_bound'],
                        help="Largest value the prime supplier considers")
    parser.add_argument("--seed", type=int, default=settings['seed'],
                        help="Seed for reproducible runs (default: OS randomness)")
    parser.add_argument("--validate", action="store_true",
                        help="Reject a non-prime modulus or degenerate generator")
    parser.add_argument("--message", default=None,
                        help="Encrypt this message with Alice's key and decrypt it with Bob's")
    parser.add_argument("--record", default=settings['record_path'],
                        help="Append the exchange (public values only) to this file")
    parser.add_argument("--json", action="store_true",
                        help="Print the exchange result as JSON")
    return parser

def run(args) -> int:
    """Run one exchange. Returns the process exit code."""
    rng = get_rng(args.seed)

    primes = generate_primes(args.bound)
    print(f"[*] {len(primes)} primes up to {args.bound}")

    try:
        params = select_parameters(primes, rng)
        if args.validate:
            validate_parameters(params.p, params.g)
    except (EmptyPrimeListError, InvalidParametersError) as e:
        print(f"[!] {e}", file=sys.stderr)
        return 2

    print(f"Chosen prime numbers = {params.p}, {params.g}")

    alice = Party("alice", params, rng)
    bob = Party("bob", params, rng)
    print(f"private key from Alice = {alice.private_key} , private key from Bob = {bob.private_key}")
    print(f"public key from Alice = {alice.public_key} , public key from Bob = {bob.public_key}")

    result = exchange_between(alice, bob)
    print(f"secret of Alice = {result.alice_secret} , secret of Bob = {result.bob_secret}")

    if not result.agreed:
        print("[!] Shared secrets differ", file=sys.stderr)
        return 1
    print(f"[+] Shared secret agreed, key fingerprint {result.key_fingerprint}")

    if args.message is not None:
        plaintext = args.message.encode()
        print(f"[*] Alice -> Bob ciphertext: {b64e(aes_encrypt(alice.aes_key(), plaintext))}")
        try:
            recovered = confirm_key(alice, bob, plaintext)
        except KeyAgreementError as e:
            print(f"[!] Key confirmation failed: {e}", file=sys.stderr)
            return 1
        print(f"[+] Bob decrypted: {recovered.decode()}")

    if args.record:
        record = ExchangeRecord(args.record)
        record.append(result)
        print(f"[+] Exchange recorded to {record.filepath} ({record.count()} entries, sha256 {record.compute_hash()})")

    if args.json:
        print(result.model_dump_json(indent=2))

    return 0

def main(argv=None) -> int:
    args = build_parser(load_settings()).parse_args(argv)
    return run(args)

if __name__ == "__main__":
    sys.exit(main())
