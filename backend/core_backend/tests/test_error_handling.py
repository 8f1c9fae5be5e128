"""
Error handler tests: service errors map to `{"error", "kind"}` bodies.
"""
from types import SimpleNamespace

import pytest
from rest_framework.exceptions import ValidationError

from core_backend.exceptions import (
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    ServiceError,
    api_exception_handler,
)


def _context():
    return {'request': SimpleNamespace(path='/api/orders/', method='POST'), 'view': None}


class TestServiceErrors:

    @pytest.mark.parametrize('exc, status_code, kind', [
        (NotFoundError('Order not found'), 404, 'not_found'),
        (BadRequestError('Invalid status transition'), 400, 'bad_request'),
        (ForbiddenError(), 403, 'forbidden'),
    ])
    def test_mapped_to_status_and_body(self, exc, status_code, kind):
        response = api_exception_handler(exc, _context())

        assert response.status_code == status_code
        assert response.data == {'error': exc.message, 'kind': kind}

    def test_default_messages(self):
        assert NotFoundError().message == 'Not found'
        assert ServiceError().message == 'Request could not be processed'

    def test_drf_errors_keep_default_shape(self):
        response = api_exception_handler(ValidationError({'status': ['bad']}), _context())

        assert response.status_code == 400
        assert response.data == {'status': ['bad']}

    def test_unhandled_errors_propagate(self):
        assert api_exception_handler(RuntimeError('boom'), _context()) is None


@pytest.mark.django_db
def test_health_check(api_client):
    response = api_client.get('/api/health/')
    assert response.status_code == 200
    assert response.json()['status'] == 'ok'
