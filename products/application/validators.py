"""
Product input validation.

Turns raw, loosely-typed form input into a product payload or a list of
field errors. No I/O: the serializers here are plain DRF serializers, not
model serializers, so they run without a database.

Both entry points are total: they never raise, whatever the input.
"""

import math
from collections.abc import Mapping
from typing import Any, Dict, List

from rest_framework import serializers

from core.domain.result import ErrorKind, FieldError, Failure, Result, Success
from products.application.queries.list_products import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT
from products.domain.product import (
    CATEGORY_VALUES,
    DESCRIPTION_MAX_LENGTH,
    MAX_IMAGES,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
)

VALIDATION_FAILED = "Validation failed"

# HTML checkboxes submit "on", hidden inputs and JS forms submit "true"
CHECKED_MARKERS = ("true", "on")

# Upper bound of a positive integer column
STOCK_MAX = 2147483647


class ProductInputSerializer(serializers.Serializer):
    """Field rules for product input, in declaration order."""

    name = serializers.CharField(
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        error_messages={
            "required": "Product name is required",
            "null": "Product name is required",
            "blank": "Product name is required",
            "invalid": "Product name must be text",
            "min_length": f"Product name must be at least {NAME_MIN_LENGTH} characters long",
            "max_length": f"Product name cannot exceed {NAME_MAX_LENGTH} characters",
        },
    )
    description = serializers.CharField(
        max_length=DESCRIPTION_MAX_LENGTH,
        error_messages={
            "required": "Product description is required",
            "null": "Product description is required",
            "blank": "Product description is required",
            "invalid": "Product description must be text",
            "max_length": f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
        },
    )
    price = serializers.FloatField(
        min_value=0,
        error_messages={
            "required": "Product price is required",
            "null": "Product price is required",
            "invalid": "Price must be a valid number",
            "max_string_length": "Price must be a valid number",
            "overflow": "Price must be a valid number",
            "min_value": "Price cannot be negative",
        },
    )
    stock = serializers.IntegerField(
        min_value=0,
        max_value=STOCK_MAX,
        default=0,
        error_messages={
            "null": "Stock must be a whole number",
            "invalid": "Stock must be a whole number",
            "max_string_length": "Stock must be a whole number",
            "min_value": "Stock cannot be negative",
            "max_value": f"Stock cannot exceed {STOCK_MAX}",
        },
    )
    category = serializers.ChoiceField(
        choices=CATEGORY_VALUES,
        error_messages={
            "required": "Product category is required",
            "null": "Product category is required",
            "invalid_choice": "{input} is not a valid category",
        },
    )
    images = serializers.ListField(
        child=serializers.CharField(trim_whitespace=False),
        max_length=MAX_IMAGES,
        default=list,
        error_messages={
            "not_a_list": "Images must be a list of strings",
            "max_length": f"Cannot upload more than {MAX_IMAGES} images per product",
        },
    )
    featured = serializers.BooleanField(default=False)

    def validate_price(self, value: float) -> float:
        """Reject NaN and infinities."""
        if not math.isfinite(value):
            raise serializers.ValidationError("Price must be a valid number")
        return value

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        """Drop an images update that filtered down to nothing."""
        if self.partial and "images" in attrs and not attrs["images"]:
            attrs.pop("images")
        return attrs


class ListProductsParamsSerializer(serializers.Serializer):
    """Listing parameters."""

    search = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    category = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    page = serializers.IntegerField(
        min_value=1,
        default=DEFAULT_PAGE,
        error_messages={
            "invalid": "Page must be a whole number",
            "null": "Page must be a whole number",
            "min_value": "Page must be at least 1",
        },
    )
    limit = serializers.IntegerField(
        min_value=1,
        max_value=MAX_LIMIT,
        default=DEFAULT_LIMIT,
        error_messages={
            "invalid": "Limit must be a whole number",
            "null": "Limit must be a whole number",
            "min_value": "Limit must be at least 1",
            "max_value": f"Limit cannot exceed {MAX_LIMIT}",
        },
    )


def _is_checked(value: Any) -> bool:
    """Read a form checkbox value."""
    if value is True:
        return True
    return isinstance(value, str) and value in CHECKED_MARKERS


def _image_values(raw: Mapping) -> List[Any]:
    """All submitted images, whether multi-valued form input, a list or a single value."""
    if hasattr(raw, "getlist"):
        return list(raw.getlist("images"))
    value = raw["images"]
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def normalize_form_input(raw: Mapping) -> Dict[str, Any]:
    """
    Coerce the form-specific fields of raw input.

    ``featured`` becomes a boolean, ``images`` a list without empty
    entries and ``category`` is trimmed; an unselected (blank) category
    is missing. A blank ``stock`` counts as not submitted. Every other field is passed through for the serializer to
    parse. Fields absent from the input stay absent.

    Args:
        raw: Raw field mapping (a dict or a Django QueryDict)

    Returns:
        A plain dict ready for ProductInputSerializer
    """
    data = {key: raw[key] for key in raw}
    if "featured" in raw:
        data["featured"] = _is_checked(raw["featured"])
    if "images" in raw:
        data["images"] = [image for image in _image_values(raw) if image != ""]
    if isinstance(data.get("category"), str):
        data["category"] = data["category"].strip() or None
    if isinstance(data.get("stock"), str) and not data["stock"].strip():
        del data["stock"]
    return data


def format_validation_errors(errors: Any, field: str = None) -> List[FieldError]:
    """
    Flatten DRF serializer errors into field errors.

    Nested errors (e.g. one image of the list) are reported against
    their top-level field.

    Args:
        errors: ``serializer.errors`` or a nested part of it
        field: Field the errors belong to

    Returns:
        Ordered list of FieldError
    """
    if isinstance(errors, Mapping):
        flattened = []
        for key, value in errors.items():
            flattened.extend(format_validation_errors(value, field or str(key)))
        return flattened
    if isinstance(errors, (list, tuple)):
        flattened = []
        for value in errors:
            flattened.extend(format_validation_errors(value, field))
        return flattened
    return [FieldError(field=field or "non_field_errors", message=str(errors))]


def _run(raw: Any, partial: bool) -> Result:
    data = normalize_form_input(raw) if isinstance(raw, Mapping) else raw
    serializer = ProductInputSerializer(data=data, partial=partial)
    if not serializer.is_valid():
        return Failure(
            kind=ErrorKind.VALIDATION,
            error=VALIDATION_FAILED,
            errors=format_validation_errors(serializer.errors),
        )
    return Success(dict(serializer.validated_data))


def validate_create(raw: Any) -> Result:
    """
    Validate raw input for a new product.

    Args:
        raw: Mapping of field name to raw value

    Returns:
        Success with every field populated (defaults applied), or a
        validation Failure listing every violated field
    """
    return _run(raw, partial=False)


def validate_update(raw_partial: Any) -> Result:
    """
    Validate the supplied fields of a product update.

    Fields absent from the input are absent from the payload; an
    ``images`` value that filters down to empty is dropped.

    Args:
        raw_partial: Mapping holding only the fields to change

    Returns:
        Success with the partial payload, or a validation Failure
    """
    return _run(raw_partial, partial=True)


def validate_list_params(params: Any) -> Result:
    """
    Validate listing parameters.

    Args:
        params: Mapping with optional search, category, page and limit

    Returns:
        Success with every parameter populated (defaults applied), or a
        validation Failure
    """
    data = {key: params[key] for key in params} if isinstance(params, Mapping) else params
    serializer = ListProductsParamsSerializer(data=data)
    if not serializer.is_valid():
        return Failure(
            kind=ErrorKind.VALIDATION,
            error=VALIDATION_FAILED,
            errors=format_validation_errors(serializer.errors),
        )
    return Success(dict(serializer.validated_data))
