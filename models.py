from flask_restx import fields

PET_STATUS = ['available', 'pending', 'sold']


class Models:
    def __init__(self, api):
        self.api = api

        self.category_model = api.model('Category', {
            'id': fields.Integer(description='The category ID'),
            'name': fields.String(description='The category name'),
        })

        self.tag_model = api.model('Tag', {
            'id': fields.Integer(description='The tag ID'),
            'name': fields.String(description='The tag name'),
        })

        self.pet_model = api.model('Pet', {
            'id': fields.Integer(description='The pet ID'),
            'category': fields.Nested(self.category_model, allow_null=True),
            'name': fields.String(required=True, description='The pet name'),
            'photoUrls': fields.List(fields.String, required=True, description='Photo URLs'),
            'tags': fields.List(fields.Nested(self.tag_model)),
            'status': fields.String(description='Pet status in the store', enum=PET_STATUS),
        })

        self.api_response_model = api.model('ApiResponse', {
            'code': fields.Integer(description='Result code'),
            'type': fields.String(description='Result type'),
            'message': fields.String(description='Result message'),
        })
