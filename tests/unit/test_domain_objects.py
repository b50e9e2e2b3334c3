"""
Unit tests for domain objects.

Tests for Email, Username, Text, Id, Money and Masked focusing on
validation, normalization, equality and arithmetic.
"""

import pickle
import uuid
from decimal import Decimal

import pytest

from valuekit.core.errors import CompositionUnsupported, Kind, NegativeAmount, ParseFailure
from valuekit.core.types import try_parse
from valuekit.domain import BTC, ETH, EUR, USD, Email, Id, Masked, Money, Text, Username, get_currency
from valuekit.domain.base import ValidatedString
from valuekit.testing import numeric


class User:
    pass


class Order:
    pass


class TestValidatedString:
    """Test cases for the validated string base."""

    def test_grammar_check_is_abstract(self):
        class Unvalidated(ValidatedString):
            kind = Kind.TEXT

        with pytest.raises(TypeError):
            Unvalidated("anything")
        with pytest.raises(TypeError):
            ValidatedString("anything")


class TestEmail:
    """Test cases for Email domain object."""

    def test_valid_email_creation(self):
        """Test creating valid emails."""
        valid_emails = [
            "user@example.com",
            "first.last+tag@sub.example.org",
            "o'brien@example.co",
            "x_1@a-b.example.net",
        ]
        for raw in valid_emails:
            email = Email(raw)
            assert str(email) == raw
            assert email.to_raw() == raw

    def test_invalid_email_creation(self):
        """Test invalid emails raise ParseFailure with the email kind."""
        invalid_emails = [
            "",
            "plainaddress",
            "@example.com",
            "user@",
            "user@example",
            "user@@example.com",
            "us er@example.com",
            "user.@example.com",
            ".user@example.com",
            "user..x@example.com",
            "user@-example.com",
            "user@example.c",
            "user@example.com\n",
            f"{'a' * 65}@example.com",
        ]
        for raw in invalid_emails:
            with pytest.raises(ParseFailure) as exc_info:
                Email(raw)
            assert exc_info.value.kind is Kind.EMAIL
            assert exc_info.value.raw_input == raw

    def test_non_string_rejected(self):
        with pytest.raises(ParseFailure):
            Email(None)

    def test_email_parts(self):
        email = Email.parse("jane.doe@example.org")
        assert email.local_part == "jane.doe"
        assert email.domain == "example.org"

    def test_email_repr(self):
        assert repr(Email("a@example.com")) == "Email('a@example.com')"

    def test_email_is_not_username(self):
        """Same text in different types never compares equal."""
        assert Email("a@example.com") != Username("a")
        assert Username("abc") != Text("abc")


class TestUsername:
    """Test cases for Username domain object."""

    def test_valid_usernames(self):
        for raw in ["a", "ada_lovelace", "A1", "9lives", "x" * 32]:
            assert Username(raw).value == raw

    def test_invalid_usernames(self):
        for raw in ["", "_ada", "ada-l", "ada l", "x" * 33, "ädä", "ada\n", "ada!"]:
            with pytest.raises(ParseFailure) as exc_info:
                Username(raw)
            assert exc_info.value == ParseFailure(Kind.USERNAME, raw)

    def test_username_ordering(self):
        assert Username("alice") < Username("bob")
        assert sorted([Username("b"), Username("a")]) == [Username("a"), Username("b")]

    def test_username_hash(self):
        assert hash(Username("ada")) == hash(Username("ada"))
        assert len({Username("ada"), Username("ada"), Username("bob")}) == 2

    def test_username_immutable(self):
        username = Username("ada")
        with pytest.raises(AttributeError):
            username.value = "bob"


class TestText:
    """Test cases for Text domain object."""

    def test_valid_text(self):
        for raw in ["", "hello", "tab\there\nnew line\r", "héllo 🌍", "x" * 4096]:
            assert Text(raw).to_raw() == raw

    def test_invalid_text(self):
        for raw in ["a\x00", "\x07", "\x7f", "\x85", "x" * 4097, "\ud800"]:
            with pytest.raises(ParseFailure) as exc_info:
                Text(raw)
            assert exc_info.value.kind is Kind.TEXT

    def test_text_length(self):
        assert len(Text("hello")) == 5


class TestId:
    """Test cases for Id domain object."""

    RAW = "12345678-1234-5678-1234-567812345678"

    def test_id_from_string(self):
        identifier = Id(self.RAW)
        assert isinstance(identifier.value, uuid.UUID)
        assert identifier.to_raw() == self.RAW
        assert str(identifier) == self.RAW

    def test_id_normalization(self):
        """Upper case and hyphen-less forms parse to the same id."""
        assert Id(self.RAW.upper()) == Id(self.RAW)
        assert Id(self.RAW.replace("-", "")) == Id(self.RAW)
        assert Id(uuid.UUID(self.RAW)) == Id(self.RAW)

    def test_invalid_ids(self):
        for raw in ["", "not-a-uuid", "1234", self.RAW[:-1] + "g", self.RAW + "0"]:
            with pytest.raises(ParseFailure) as exc_info:
                Id(raw)
            assert exc_info.value.kind is Kind.ID
        with pytest.raises(ParseFailure):
            Id(42)

    def test_branded_ids_are_cached_classes(self):
        assert Id[User] is Id[User]
        assert Id[User] is not Id[Order]
        assert issubclass(Id[User], Id)
        assert Id[User].tag is User

    def test_branded_ids_never_equal(self):
        """Two ids with the same bits but different tags are different values."""
        user_id = Id[User](self.RAW)
        order_id = Id[Order](self.RAW)
        assert user_id != order_id
        assert user_id != Id(self.RAW)
        with pytest.raises(TypeError):
            user_id < order_id  # noqa: B015

    def test_branded_id_repr(self):
        assert repr(Id[User](self.RAW)) == f"Id[User]('{self.RAW}')"

    def test_cannot_rebrand(self):
        with pytest.raises(TypeError):
            Id[User][Order]

    def test_new_ids_differ(self):
        assert Id.new() != Id.new()


class TestMoney:
    """Test cases for Money domain object."""

    def test_money_creation(self):
        assert Money[USD]("12.50").amount == Decimal("12.50")
        assert Money[USD](3).amount == Decimal(3)
        assert Money[USD](0.1).amount == Decimal("0.1")
        assert Money[USD].zero().is_zero()

    def test_invalid_amounts(self):
        for raw in ["-1", "-0.01", "NaN", "Infinity", "abc", "", "1,000", "$5", True, None]:
            with pytest.raises(ParseFailure) as exc_info:
                Money[USD](raw)
            assert exc_info.value.kind is Kind.MONEY

    def test_unbranded_money_rejected(self):
        with pytest.raises(TypeError):
            Money("1")
        with pytest.raises(TypeError):
            Money["USD"]

    def test_addition(self):
        assert Money[USD]("1.25") + Money[USD]("2.75") == Money[USD]("4")

    def test_subtraction(self):
        assert Money[USD]("5") - Money[USD]("2") == Money[USD]("3")
        assert (Money[USD]("5") - Money[USD]("5")).is_zero()

    def test_subtraction_below_zero(self):
        with pytest.raises(NegativeAmount):
            Money[USD]("2") - Money[USD]("5")

    def test_multiplication_and_division(self):
        assert Money[USD]("1.5") * 2 == Money[USD]("3.0")
        assert 2 * Money[USD]("1.5") == Money[USD]("3")
        assert Money[USD]("10") / 4 == Money[USD]("2.5")
        assert Money[USD]("3") * Money[USD]("2") == Money[USD]("6")
        with pytest.raises(NegativeAmount):
            Money[USD]("1") * -1

    def test_currencies_do_not_mix(self):
        with pytest.raises(TypeError):
            Money[USD]("1") + Money[EUR]("1")
        with pytest.raises(TypeError):
            Money[USD]("1") < Money[EUR]("2")  # noqa: B015
        assert Money[USD]("1") != Money[EUR]("1")

    def test_ordering(self):
        assert Money[USD]("1") < Money[USD]("1.01")
        assert max(Money[USD]("3"), Money[USD]("7")) == Money[USD]("7")

    def test_display(self):
        money = Money[USD]("12.5")
        assert money.format_display() == "12.50 USD"
        assert str(money) == "12.50 USD"
        assert money.to_raw() == "12.5"
        assert repr(money) == "Money[USD]('12.5')"

    def test_precision(self):
        assert Money[USD]("1.005").round_to_precision().amount == Decimal("1.01")
        assert Money[BTC].from_minor_units(1).amount == Decimal("0.00000001")
        assert Money[USD]("12.34").to_minor_units() == 1234
        assert Money[ETH].from_minor_units(10**18) == Money[ETH]("1")

    def test_sign_predicates(self):
        assert numeric.is_zero(Money[USD]("0"))
        assert numeric.is_positive(Money[USD]("0.01"))
        assert not numeric.is_negative(Money[USD]("0"))
        assert numeric.is_negative(Decimal("-1"))
        assert numeric.is_positive(3)
        with pytest.raises(TypeError):
            numeric.is_zero("0")

    def test_currency_lookup(self):
        assert get_currency("usd") is USD
        with pytest.raises(ValueError):
            get_currency("XYZ")


class TestMasked:
    """Test cases for the Masked wrapper."""

    def test_masked_rendering(self):
        masked = Masked(Email("secret@example.com"))
        assert str(masked) == "******"
        assert repr(masked) == "Masked('******')"
        assert f"{masked}" == "******"
        assert f"{masked:>8}" == "  ******"
        assert "secret" not in repr([masked])

    def test_masked_unwrap(self):
        email = Email("secret@example.com")
        masked = Masked(email)
        assert masked.get() is email
        assert masked.to_raw() == "secret@example.com"

    def test_masked_delegates_comparisons(self):
        low, high = Masked(Username("alice")), Masked(Username("bob"))
        assert low < high
        assert high >= low
        assert low == Masked(Username("alice"))
        assert hash(low) == hash(Username("alice"))
        assert low != Username("alice")

    def test_masked_parse(self):
        assert Masked[Email].parse("a@example.com") == Masked(Email("a@example.com"))
        with pytest.raises(ParseFailure):
            Masked[Email].parse("not an email")
        assert isinstance(try_parse(Masked[Email], "nope"), ParseFailure)

    def test_masked_kind_follows_inner(self):
        assert Masked[Email].kind is Kind.EMAIL

    def test_masked_requires_a_capability(self):
        with pytest.raises(CompositionUnsupported):
            Masked[object]

    def test_masked_never_logged(self, caplog):
        import logging

        logger = logging.getLogger("valuekit.tests")
        with caplog.at_level(logging.INFO):
            logger.info(f"Signing up {Masked(Email('secret@example.com'))}")
        assert "secret" not in caplog.text
        assert "******" in caplog.text


class TestParseFailure:
    """Test cases for the ParseFailure error value."""

    def test_equality(self):
        assert ParseFailure(Kind.EMAIL, "x") == ParseFailure(Kind.EMAIL, "x")
        assert ParseFailure(Kind.EMAIL, "x") != ParseFailure(Kind.USERNAME, "x")
        assert ParseFailure(Kind.EMAIL, "x") != ParseFailure(Kind.EMAIL, "y")

    def test_is_value_error(self):
        assert isinstance(ParseFailure(Kind.TEXT, "\x00"), ValueError)

    def test_pickle(self):
        failure = ParseFailure(Kind.MONEY, "-1")
        assert pickle.loads(pickle.dumps(failure)) == failure

    def test_try_parse(self):
        assert try_parse(Username, "ada") == Username("ada")
        assert try_parse(Username, "_ada") == ParseFailure(Kind.USERNAME, "_ada")
