"""Unit tests for base model functionality."""

import datetime as dt
from decimal import Decimal

import pytest
from pydantic import ValidationError

from pint_invoice.models.base import BaseDataModel


class SampleModel(BaseDataModel):
    name: str
    amount: Decimal


class TestBaseModelSerialization:
    """Test serialization/deserialization for models."""

    def test_model_to_dict(self):
        """Test model serialization to dictionary."""
        model = SampleModel(name="test", amount=Decimal("42.50"))

        assert model.model_dump() == {"name": "test", "amount": Decimal("42.50")}

    def test_model_from_dict(self):
        """Test model deserialization from dictionary."""
        model = SampleModel.model_validate({"name": "test", "amount": "42.50"})

        assert model.amount == Decimal("42.50")

    def test_model_handles_timedeltas(self):
        """Test that models accept timedelta fields."""

        class DurationModel(BaseDataModel):
            duration: dt.timedelta

        model = DurationModel(duration=dt.timedelta(hours=1))
        assert model.duration.total_seconds() == 3600


class TestBaseModelValidation:
    """Test validation behaviour shared by all models."""

    def test_extra_fields_are_rejected(self):
        """Test that unknown fields raise a validation error."""
        with pytest.raises(ValidationError):
            SampleModel(name="test", amount=Decimal("1"), unexpected=True)

    def test_assignment_is_validated(self):
        """Test that invalid assignments are rejected."""
        model = SampleModel(name="test", amount=Decimal("1"))

        with pytest.raises(ValidationError):
            model.amount = "not a number"
