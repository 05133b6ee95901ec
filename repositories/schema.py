"""
Generic schema engine over the declarative Pydantic field tables.

One ResourceSchema wraps an entity model and provides the two validation
paths every resource needs: full validation on create and relaxed,
partial validation on update. Violations are always collected, never
reported one at a time.
"""

from typing import Annotated, Any, Dict, Iterable, List, Optional, Type

from pydantic import BaseModel, ValidationError, create_model

from core.errors import ValidationFailure

# Fields assigned once at creation; updates never touch them
IMMUTABLE_FIELDS = ("id", "createdAt")


def collect_violations(exc: ValidationError) -> List[str]:
    violations = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "entity"
        violations.append(f"{location}: {error['msg']}")
    return violations


def _build_partial_model(model: Type[BaseModel]) -> Type[BaseModel]:
    """
    Derive a model where every field is optional and defaults to unset.

    Field constraints and validators are inherited from `model`; defaults are
    never validated, so an absent field simply stays out of the dump.
    """
    overrides: Dict[str, Any] = {}
    for name, field in model.model_fields.items():
        annotation = field.annotation
        if field.metadata:
            annotation = Annotated[(annotation, *field.metadata)]
        overrides[name] = (annotation, None)
    return create_model(f"{model.__name__}Update", __base__=model, **overrides)


def validate_string_type(
    value: Any = None,
    values: Optional[Iterable[Any]] = None,
    error_message: Optional[str] = None,
) -> bool:
    """
    Check that every supplied value is a string.

    None means "not supplied" and is skipped; any other non-string, falsy
    ones such as 0 and False included, is rejected.

    Raises:
        ValidationFailure: if a value is not a string
    """
    message = error_message or "Value must be of type string"
    candidates = [value] + list(values or [])
    for candidate in candidates:
        if candidate is not None and not isinstance(candidate, str):
            raise ValidationFailure([message])
    return True


class ResourceSchema:
    """Create/update validation for one entity model."""

    def __init__(self, model: Type[BaseModel]):
        self.model = model
        self.partial_model = _build_partial_model(model)

    @property
    def fields(self) -> List[str]:
        return list(self.model.model_fields)

    def validate_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate a complete entity and populate defaults.

        Args:
            data: Candidate entity, unknown keys are dropped

        Returns:
            Fully populated, type-correct document

        Raises:
            ValidationFailure: with every violation found
        """
        try:
            return self.model.model_validate(data).model_dump()
        except ValidationError as e:
            raise ValidationFailure(collect_violations(e)) from e

    def validate_update(
        self, data: Dict[str, Any], updated_at: Any
    ) -> Dict[str, Any]:
        """
        Validate a partial entity.

        Only supplied fields are returned, plus `updatedAt` which is always
        set to `updated_at`. Immutable fields in `data` are ignored; unknown
        fields are violations.

        Raises:
            ValidationFailure: with every violation found
        """
        payload = {
            key: value
            for key, value in data.items()
            if key not in IMMUTABLE_FIELDS and key != "updatedAt"
        }

        known_fields = self.model.model_fields
        violations = [f"{key}: is not allowed" for key in payload if key not in known_fields]
        payload = {key: value for key, value in payload.items() if key in known_fields}

        validated = None
        try:
            validated = self.partial_model.model_validate(payload)
        except ValidationError as e:
            violations.extend(collect_violations(e))

        if violations:
            raise ValidationFailure(violations)

        changes = validated.model_dump(exclude_unset=True)
        changes["updatedAt"] = updated_at
        return changes
