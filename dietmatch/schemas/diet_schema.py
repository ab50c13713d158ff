from marshmallow import Schema, fields, validate, EXCLUDE
from dietmatch.utils.enums import PregnancyStage, ActivityLevel

class DietQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    age = fields.Float(required=True)
    height = fields.Float(required=True)  # metres
    weight = fields.Float(required=True)  # kg
    preg_stage = fields.Str(required=True, validate=validate.OneOf([e.value for e in PregnancyStage]))
    active = fields.Str(required=True, validate=validate.OneOf([e.value for e in ActivityLevel]))
