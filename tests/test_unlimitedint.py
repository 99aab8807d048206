import pytest

from dsakit.unlimitedint import UnlimitedInt

PAIRS = [
    (340, 400),
    (400, 340),
    (-340, 400),
    (340, -400),
    (-340, -400),
    (0, 7),
    (7, 0),
    (999, 1),
    (-1, 1),
    (123456789012345678901234567890, 987654321098765432109876543210),
    (-10**40 + 17, 3),
]

DIVISION_PAIRS = [
    (100, 10),
    (-100, 10),
    (100, -10),
    (-100, -10),
    (105, 10),
    (-105, 10),
    (3, 5),
    (-3, 5),
    (0, 5),
    (0, -5),
    (6, 3),
    (-6, 3),
    (10**30 + 7, 12345),
    (-(10**30) - 7, 12345),
    (10**30 + 7, -12345),
]


@pytest.mark.parametrize("text", ["0", "7", "-7", "340", "-123456789012345678901234567890"])
def test_string_round_trip(text):
    assert str(UnlimitedInt(text)) == text


def test_leading_zeros_are_dropped():
    assert str(UnlimitedInt("-0042")) == "-42"
    assert str(UnlimitedInt("000")) == "0"


def test_int_constructor_matches_string_constructor():
    assert UnlimitedInt(-9876) == UnlimitedInt("-9876")


def test_default_is_zero():
    assert UnlimitedInt().is_zero()


@pytest.mark.parametrize("bad", ["", "-", "12a", "1.5", "+-3", "--1"])
def test_rejects_malformed_strings(bad):
    with pytest.raises(ValueError):
        UnlimitedInt(bad)


def test_rejects_other_types():
    with pytest.raises(TypeError):
        UnlimitedInt(1.5)


@pytest.mark.parametrize("a,b", PAIRS)
def test_add(a, b):
    assert int(UnlimitedInt.add(UnlimitedInt(a), UnlimitedInt(b))) == a + b


@pytest.mark.parametrize("a,b", PAIRS)
def test_sub(a, b):
    assert int(UnlimitedInt.sub(UnlimitedInt(a), UnlimitedInt(b))) == a - b


@pytest.mark.parametrize("a,b", PAIRS)
def test_mul(a, b):
    assert int(UnlimitedInt.mul(UnlimitedInt(a), UnlimitedInt(b))) == a * b


def test_worked_example_from_source():
    assert str(UnlimitedInt.sub(UnlimitedInt("340"), UnlimitedInt("400"))) == "-60"


@pytest.mark.parametrize("a,b", DIVISION_PAIRS)
def test_division_identity(a, b):
    ua, ub = UnlimitedInt(a), UnlimitedInt(b)
    q = UnlimitedInt.div(ua, ub)
    r = UnlimitedInt.mod(ua, ub)
    assert UnlimitedInt.add(UnlimitedInt.mul(ub, q), r) == ua
    assert 0 <= abs(int(r)) < abs(b)
    assert r.is_zero() or r.sign == ub.sign


@pytest.mark.parametrize("a,b", DIVISION_PAIRS)
def test_division_floors(a, b):
    assert int(UnlimitedInt.div(UnlimitedInt(a), UnlimitedInt(b))) == a // b
    assert int(UnlimitedInt.mod(UnlimitedInt(a), UnlimitedInt(b))) == a % b


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        UnlimitedInt.div(UnlimitedInt(5), UnlimitedInt(0))
    with pytest.raises(ZeroDivisionError):
        UnlimitedInt.mod(UnlimitedInt(5), UnlimitedInt("0"))


def test_sign_and_zero():
    assert UnlimitedInt("-5").sign == -1
    assert UnlimitedInt("5").sign == 1
    assert UnlimitedInt("-0").sign == 1
    assert UnlimitedInt("-0").is_zero()
    assert not UnlimitedInt("-1").is_zero()


def test_len_counts_magnitude_digits():
    text = "123456789012345678901234567890"
    assert len(UnlimitedInt(text)) == len(text)
    assert len(UnlimitedInt("-" + text)) == len(text)
    assert len(UnlimitedInt(0)) == len("0")


def test_digits_rebuild_value():
    value = UnlimitedInt("-90817")
    assert "".join(map(str, value.digits)) == str(abs(value))


def test_operators_agree_with_static_methods():
    a, b = UnlimitedInt(-1234), UnlimitedInt(57)
    assert a + b == UnlimitedInt.add(a, b)
    assert a - b == UnlimitedInt.sub(a, b)
    assert a * b == UnlimitedInt.mul(a, b)
    assert a // b == UnlimitedInt.div(a, b)
    assert a % b == UnlimitedInt.mod(a, b)
    assert -a == UnlimitedInt.mul(a, UnlimitedInt(-1))


def test_ordering_and_hash():
    values = [UnlimitedInt(n) for n in (5, -3, 12, 0)]
    assert [int(v) for v in sorted(values)] == sorted([5, -3, 12, 0])
    assert hash(UnlimitedInt("42")) == hash(UnlimitedInt(42))
    assert len({UnlimitedInt("7"), UnlimitedInt(7)}) == 1