import json

import pytest

from keyexchange.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DH_PRIME_BOUND", "DH_SEED", "DH_RECORD_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_demo_run(capsys):
    assert main(["--bound", "1000", "--seed", "7"]) == 0
    out = capsys.readouterr().out
    assert "[*] 168 primes up to 1000" in out
    assert "Chosen prime numbers = " in out
    assert "private key from Alice = " in out
    assert "public key from Alice = " in out
    assert "[+] Shared secret agreed" in out


def test_seeded_runs_repeat(capsys):
    main(["--bound", "1000", "--seed", "11"])
    first = capsys.readouterr().out
    main(["--bound", "1000", "--seed", "11"])
    assert capsys.readouterr().out == first


def test_message_and_record(tmp_path, capsys):
    record = tmp_path / "exchanges.log"
    code = main(["--bound", "50", "--seed", "3", "--message", "hi bob", "--record", str(record)])
    assert code == 0
    out = capsys.readouterr().out
    assert "[+] Bob decrypted: hi bob" in out
    assert "(1 entries" in out
    assert len(record.read_text().splitlines()) == 1


def test_json_output(capsys):
    assert main(["--bound", "100", "--seed", "5", "--json"]) == 0
    out = capsys.readouterr().out
    payload = json.loads(out[out.index("{"):])
    assert payload["type"] == "exchange_result"
    assert payload["alice_secret"] == payload["bob_secret"]


def test_empty_prime_list(capsys):
    assert main(["--bound", "1"]) == 2
    assert "[!] cannot select a prime from an empty list" in capsys.readouterr().err


def test_validate_rejects_degenerate_generator(capsys):
    # Only prime is 2, so g == p
    assert main(["--bound", "2", "--validate"]) == 2
    assert "degenerate" in capsys.readouterr().err


def test_bound_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("DH_PRIME_BOUND", "30")
    assert main(["--seed", "1"]) == 0
    assert "[*] 10 primes up to 30" in capsys.readouterr().out
