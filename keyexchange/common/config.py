"""Environment configuration (.env aware) + randomness source factory."""
import os
import random
import secrets
from typing import Optional

from dotenv import load_dotenv

from keyexchange.common.primes import DEFAULT_BOUND

load_dotenv()

def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)

def load_settings() -> dict:
    """Read demo settings from the environment.

    Returns:
        Dict with keys: prime_bound, seed, record_path
    """
    return {
        'prime_bound': int(os.getenv('DH_PRIME_BOUND', DEFAULT_BOUND)),
        'seed': _optional_int('DH_SEED'),
        'record_path': os.getenv('DH_RECORD_PATH') or None,
    }

def get_rng(seed: Optional[int] = None):
    """Seeded random.Random for reproducible runs, else the OS CSPRNG."""
    if seed is not None:
        return random.Random(seed)
    return secrets.SystemRandom()
