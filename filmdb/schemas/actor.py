from marshmallow import Schema, fields, validate

NAME_LENGTH = validate.Length(min=1, max=45)

class ActorSchema(Schema):
    actor_id = fields.Integer(dump_only=True)
    first_name = fields.String(required=True, validate=NAME_LENGTH)
    last_name = fields.String(required=True, validate=NAME_LENGTH)

# instantiate
actor_schema = ActorSchema()
actors_schema = ActorSchema(many=True)
