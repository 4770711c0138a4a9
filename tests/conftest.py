import pytest
from app import create_app
from extensions import db


@pytest.fixture
def app(tmp_path):
    app = create_app('testing', {'UPLOAD_FOLDER': str(tmp_path / 'uploads')})
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signup(app):
    """Sign up a user on a fresh test client; returns (client, user json)"""
    def _signup(email='a@x.com', password='secret1', name='Alice', **profile):
        user_client = app.test_client()
        response = user_client.post('/api/auth/signup', json={
            'email': email, 'password': password, 'name': name, **profile})
        assert response.status_code == 201, response.get_json()
        return user_client, response.get_json()
    return _signup


@pytest.fixture
def alice(signup):
    return signup('alice@example.com', 'secret1', 'Alice')


@pytest.fixture
def bob(signup):
    return signup('bob@example.com', 'secret2', 'Bob')
