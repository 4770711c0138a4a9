import pytest


def test_profile_is_empty_without_users(client):
    response = client.get('/api/profile')
    assert response.status_code == 200
    assert response.get_json() == {}


def test_profile_by_user_id_is_public(client, alice):
    _, user = alice
    response = client.get(f"/api/profile?userId={user['id']}")
    assert response.status_code == 200
    assert response.get_json() == user


def test_profile_defaults_to_first_registered_user(client, alice, bob):
    _, alice_user = alice
    bob_client, bob_user = bob
    assert client.get('/api/profile').get_json()['id'] == alice_user['id']
    assert bob_client.get('/api/profile').get_json()['id'] == bob_user['id']


def test_unknown_profile_is_not_found(client):
    response = client.get('/api/profile?userId=missing')
    assert response.status_code == 404
    assert response.get_json()['message']


def test_owner_updates_profile(alice):
    alice_client, user = alice
    response = alice_client.patch('/api/profile', json={
        'title': '  Web Developer ', 'summary': 'Hello', 'location': 'Karachi',
        'phone': '+92-300-0000000', 'linkedin': 'linkedin.com/in/alice'})
    assert response.status_code == 200
    body = response.get_json()
    assert body['title'] == 'Web Developer'
    assert body['location'] == 'Karachi'
    assert body['name'] == 'Alice'
    assert alice_client.get('/api/auth/me').get_json()['summary'] == 'Hello'


def test_profile_update_ignores_protected_fields(alice):
    alice_client, user = alice
    response = alice_client.patch('/api/profile', json={
        'name': 'Alicia', 'email': 'other@example.com', 'imageUrl': '/evil.png', 'id': 'x'})
    body = response.get_json()
    assert body['name'] == 'Alicia'
    assert body['email'] == user['email']
    assert body['imageUrl'] == ''
    assert body['id'] == user['id']


def test_profile_name_cannot_be_cleared(alice):
    alice_client, _ = alice
    response = alice_client.patch('/api/profile', json={'name': ' '})
    assert response.status_code == 400
    assert alice_client.get('/api/auth/me').get_json()['name'] == 'Alice'


def test_profile_update_requires_session(client, alice):
    response = client.patch('/api/profile', json={'title': 'Hacker'})
    assert response.status_code == 401


def test_single_letter_name_is_accepted(alice):
    alice_client, _ = alice
    response = alice_client.patch('/api/profile', json={'name': 'A'})
    assert response.status_code == 200
    assert response.get_json()['name'] == 'A'


@pytest.mark.parametrize('field, limit', [('phone', 50), ('name', 255), ('title', 255), ('linkedin', 500)])
def test_profile_field_longer_than_column_is_rejected(alice, field, limit):
    alice_client, _ = alice
    response = alice_client.patch('/api/profile', json={field: 'x' * (limit + 1)})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'ValidationError'
    assert alice_client.get('/api/auth/me').get_json()['phone'] == ''

    assert alice_client.patch('/api/profile', json={field: 'x' * limit}).status_code == 200


def test_signup_rejects_overlong_phone(client):
    response = client.post('/api/auth/signup', json={
        'email': 'a@x.com', 'password': 'secret1', 'name': 'Ann', 'phone': '1' * 51})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'ValidationError'
