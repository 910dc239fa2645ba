"""
Local petstore stub mirroring the /v2/pet endpoints of the public demo API.

Tests mount it in-process through httpx.WSGITransport; running the module
serves it on port 5001.
"""

from flask import Flask
from flask_restx import Api, Namespace, Resource

from logging_helper import setup_logging
from models import Models

PET_NOT_FOUND = {"code": 1, "type": "error", "message": "Pet not found"}


def _api_response(code, message, type_="unknown"):
    return {"code": code, "type": type_, "message": message}


def _generate_next_id(existing_ids: set[int]) -> int:
    return next(i for i in range(1, len(existing_ids) + 2) if i not in existing_ids)


def create_app(pets=None):
    """
    Build an isolated app. `pets` (id -> pet dict) is the in-memory store;
    each call gets its own unless one is passed in.
    """
    pets = {} if pets is None else pets

    app = Flask(__name__)
    api = Api(app, version='1.0', title='Petstore API',
              description='A minimal Petstore stub', prefix='/v2', doc='/docs')
    models = Models(api)

    pet_ns = Namespace('pet', description='Everything about your Pets')
    api.add_namespace(pet_ns)

    def _store(payload):
        if not isinstance(payload, dict):
            return _api_response(400, "Invalid input"), 400

        pet_id = payload.get("id")
        if pet_id is None:
            pet_id = _generate_next_id(set(pets))
            payload["id"] = pet_id
        elif isinstance(pet_id, bool) or not isinstance(pet_id, int):
            return _api_response(400, "Pet 'id' must be an integer"), 400

        payload.setdefault("photoUrls", [])
        payload.setdefault("tags", [])
        pets[pet_id] = payload
        return payload, 200

    @pet_ns.route('')
    class PetCollection(Resource):
        @pet_ns.doc('add_pet')
        @pet_ns.expect(models.pet_model)
        @pet_ns.response(200, 'Successful operation', models.pet_model)
        @pet_ns.response(400, 'Invalid input', models.api_response_model)
        def post(self):
            return _store(api.payload)

        @pet_ns.doc('update_pet')
        @pet_ns.expect(models.pet_model)
        @pet_ns.response(404, 'Pet not found', models.api_response_model)
        def put(self):
            payload = api.payload
            if isinstance(payload, dict) and payload.get("id") is not None and payload["id"] not in pets:
                return PET_NOT_FOUND, 404
            return _store(payload)

    @pet_ns.route('/<int:pet_id>')
    @pet_ns.param('pet_id', 'ID of pet')
    @pet_ns.response(404, 'Pet not found', models.api_response_model)
    class PetItem(Resource):
        @pet_ns.doc('get_pet_by_id')
        @pet_ns.response(200, 'Successful operation', models.pet_model)
        def get(self, pet_id):
            pet = pets.get(pet_id)
            if pet is None:
                return PET_NOT_FOUND, 404
            return pet, 200

        @pet_ns.doc('delete_pet')
        @pet_ns.response(200, 'Pet deleted', models.api_response_model)
        def delete(self, pet_id):
            if pets.pop(pet_id, None) is None:
                return PET_NOT_FOUND, 404
            return _api_response(200, str(pet_id)), 200

    return app


app = create_app()

if __name__ == '__main__':
    setup_logging()
    app.run(debug=True, port=5001)
