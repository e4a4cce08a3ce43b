"""
Tests for health, version, page and cross-origin handling
"""
import json


class TestHealthEndpoint:
    """Tests for /health endpoint"""

    def test_health_endpoint_returns_200(self, client):
        """Health endpoint should return 200 when the engine answers"""
        response = client.get('/health')
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['status'] == 'healthy'
        assert data['checks']['docker']['status'] == 'ok'

    def test_health_endpoint_unreachable_engine(self, client, engine):
        """Health endpoint should report 503 when the engine is down"""
        engine.reachable = False
        response = client.get('/health')
        assert response.status_code == 503
        data = json.loads(response.data)
        assert data['status'] == 'unhealthy'
        assert data['checks']['docker']['status'] == 'error'


class TestVersionEndpoint:
    """Tests for /api/version endpoint"""

    def test_version_endpoint(self, client):
        response = client.get('/api/version')
        assert response.status_code == 200
        data = json.loads(response.data)
        assert isinstance(data['version'], str)
        assert 'python_version' in data
        assert data['api_version'] == 'v1'


def test_index_page_renders(client):
    response = client.get('/')
    assert response.status_code == 200
    assert b'Docker Cleaner' in response.data
    assert b'data-api-base="/api"' in response.data


def test_cross_origin_allowed(client):
    response = client.get('/api/containers', headers={'Origin': 'http://example.com'})
    assert response.headers['Access-Control-Allow-Origin'] == '*'


def test_preflight_allows_delete(client):
    response = client.options('/api/images', headers={
        'Origin': 'http://example.com',
        'Access-Control-Request-Method': 'DELETE',
        'Access-Control-Request-Headers': 'Content-Type',
    })
    assert response.status_code == 200
    assert 'DELETE' in response.headers['Access-Control-Allow-Methods']
    assert response.headers['Access-Control-Allow-Headers'] == 'Content-Type'


def test_unknown_api_route_returns_json(client):
    response = client.get('/api/unknown')
    assert response.status_code == 404
    assert json.loads(response.data) == {'error': 'Not found'}


def test_security_headers(client):
    response = client.get('/api/version')
    assert response.headers['X-Content-Type-Options'] == 'nosniff'
