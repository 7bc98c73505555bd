from marshmallow import Schema, fields, pre_load, validates, ValidationError, EXCLUDE


def _norm_email(v):
    return v.strip().lower() if isinstance(v, str) else v


class _EmailNormalizingSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "email" in data:
            data = dict(data)
            data["email"] = _norm_email(data["email"])
        return data


class UserCreateSchema(_EmailNormalizingSchema):
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True)

    @validates("password")
    def validate_password(self, value, **kwargs):
        if len(value) < 8:
            raise ValidationError("Password must be at least 8 characters long.")


class UserLoginSchema(_EmailNormalizingSchema):
    email = fields.String(required=True)
    password = fields.String(required=True, load_only=True)
    # clamped by the session manager; anything outside (0, 3600] becomes 3600
    expires_in_seconds = fields.Integer(load_default=None, allow_none=True)


class UserOutSchema(Schema):
    id = fields.String(allow_none=False)
    email = fields.String()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
