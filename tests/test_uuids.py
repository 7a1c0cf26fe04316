from maple.uuids import generate_uuid


def test_uuid_is_unsigned_64_bit():
    for _ in range(1000):
        value = generate_uuid()
        assert 0 <= value < 2**64


def test_uuids_are_distinct():
    values = {generate_uuid() for _ in range(1000)}
    assert len(values) == 1000