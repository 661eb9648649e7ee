"""Turn submitted cart forms into validated cart lines."""

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from protean.exceptions import ValidationError

from commerce.cart.schemas import CartLineUpdateModel, CartUpdateModel
from commerce.catalog.port import ProductCatalog


def _messages(exc: PydanticValidationError, prefix: str | None = None) -> dict[str, list[str]]:
    messages: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [prefix] if prefix else []
        location += [str(part) for part in error["loc"]]
        messages.setdefault(".".join(location) or "_entity", []).append(error["msg"])
    return messages


def validated(model_cls: type[BaseModel], **data) -> BaseModel:
    """Build a pydantic model, re-raising its errors as a Protean ValidationError."""
    try:
        return model_cls(**data)
    except PydanticValidationError as exc:
        raise ValidationError(_messages(exc)) from None


def decoded(annotation, payload: str, field: str):
    """Parse a JSON command payload into ``annotation``.

    Malformed JSON and type mismatches are both reported under ``field``.
    """
    try:
        return TypeAdapter(annotation).validate_json(payload)
    except PydanticValidationError as exc:
        raise ValidationError(_messages(exc, prefix=field)) from None


def not_found_error(sku: str) -> ValidationError:
    return ValidationError({"sku": [f"Product with SKU {sku} not found."]})


def _to_line(model: CartLineUpdateModel) -> dict:
    return {"sku": model.sku, "quantity": model.quantity, "attributes": dict(model.attributes)}


def parse_cart_line(model: CartLineUpdateModel, catalog: ProductCatalog) -> dict | None:
    """Return the line as a dict, or None when the SKU is not in the catalogue."""
    if model.sku not in catalog.lookup_by_sku([model.sku]):
        return None
    return _to_line(model)


def parse_cart(model: CartUpdateModel, catalog: ProductCatalog) -> list[dict]:
    """Return the submitted lines, dropping zero quantities.

    Raises ValidationError for the first line whose SKU is unknown.
    """
    lines = [line for line in model.lines if line.quantity > 0]
    known = catalog.lookup_by_sku(line.sku for line in lines)
    for line in lines:
        if line.sku not in known:
            raise not_found_error(line.sku)
    return [_to_line(line) for line in lines]
