"""Tests for Customer validation."""

import pytest

from tabledoc.core.exceptions import ValidationError
from tabledoc.models import MAX_NAME_LENGTH, Customer


class TestCustomerValidate:
    """Tests for Customer.validate."""

    def test_valid_name_passes(self):
        Customer(name="Alice").validate()

    def test_name_at_max_length_passes(self):
        Customer(name="a" * MAX_NAME_LENGTH).validate()

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name_fails(self, name):
        with pytest.raises(ValidationError, match="empty"):
            Customer(name=name).validate()

    def test_name_too_long_fails(self):
        with pytest.raises(ValidationError, match=str(MAX_NAME_LENGTH)):
            Customer(name="a" * (MAX_NAME_LENGTH + 1)).validate()

    def test_default_id_is_zero(self):
        assert Customer(name="Alice").id == 0
