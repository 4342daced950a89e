from app.utils.passwords import check_password, hash_password


def test_hash_is_salted_and_not_plaintext():
    first = hash_password("hunter22")
    second = hash_password("hunter22")
    assert first != "hunter22"
    assert first != second


def test_check_password():
    hashed = hash_password("hunter22")
    assert check_password("hunter22", hashed)
    assert not check_password("hunter23", hashed)


def test_password_longer_than_72_bytes():
    hashed = hash_password("é" * 50)
    assert check_password("é" * 50, hashed)
    assert check_password("é" * 36, hashed)
    assert not check_password("é" * 35, hashed)
