from marshmallow import ValidationError


def norm_email(v):
    return v.strip().lower() if isinstance(v, str) else v


def validate_not_blank(value: str) -> None:
    if value is None or not value.strip():
        raise ValidationError("Must not be blank.")
