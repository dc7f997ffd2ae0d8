from marshmallow import Schema, fields, validate

# fields a PUT replaces; optional ones left out of the body are cleared
FILM_FIELDS = ("title", "description", "release_year")

class FilmSchema(Schema):
    film_id = fields.Integer(dump_only=True)
    title = fields.String(required=True, validate=validate.Length(min=1, max=255))
    description = fields.String(allow_none=True)
    release_year = fields.Integer(
        allow_none=True, strict=True, validate=validate.Range(min=0, max=9999)
    )


film_schema = FilmSchema()
films_schema = FilmSchema(many=True)
