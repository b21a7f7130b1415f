from core.utils import token_crypto


def test_generate_and_parse_roundtrip():
    tid, secret, full = token_crypto.generate_token()
    assert full.startswith(token_crypto.TOKEN_PREFIX)
    parsed = token_crypto.parse_token(full)
    assert parsed is not None
    assert parsed.token_id == tid
    assert parsed.secret == secret


def test_parse_token_keeps_underscores_in_secret():
    parsed = token_crypto.parse_token("pf_sess_abc123_se_cr_et")
    assert parsed.token_id == "abc123"
    assert parsed.secret == "se_cr_et"


def test_parse_token_rejects_malformed():
    assert token_crypto.parse_token("") is None
    assert token_crypto.parse_token("hs_pat_abc_def") is None
    assert token_crypto.parse_token("pf_sess_") is None
    assert token_crypto.parse_token("pf_sess__secret") is None
    assert token_crypto.parse_token("pf_sess_abc_") is None


def test_hash_and_verify_secret():
    enc = token_crypto.hash_secret("s3cr3t-test-value")
    assert enc.startswith("$argon2id$")
    assert token_crypto.verify_secret("s3cr3t-test-value", enc)
    assert not token_crypto.verify_secret("wrong-secret", enc)


def test_verify_secret_handles_garbage_hash():
    assert token_crypto.verify_secret("anything", "not-a-hash") is False
    assert token_crypto.verify_secret("", "not-a-hash") is False


def test_password_helpers_share_argon2():
    enc = token_crypto.hash_password("hunter22")
    assert token_crypto.verify_password("hunter22", enc)
    assert token_crypto.password_needs_rehash(enc) is False
