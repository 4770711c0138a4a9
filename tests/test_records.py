import pytest
from models import Skill
from extensions import db

SAMPLES = {
    'education': ({'institution': 'City College', 'degree': 'BSc', 'year': '2024'}, {'degree': 'MSc'}),
    'experience': ({'company': 'Acme', 'role': 'Intern', 'duration': '6 months', 'description': 'Frontend'},
                   {'role': 'Engineer'}),
    'skills': ({'category': 'Technical', 'items': ['Go', 'Rust']}, {'category': 'Languages'}),
    'projects': ({'title': 'Site', 'description': 'A website', 'link': 'https://example.com'}, {'title': 'Shop'}),
    'certifications': ({'title': 'Cloud Basics', 'issuer': 'Vendor'}, {'issuer': 'Other Vendor'}),
    'languages': ({'language': 'English', 'proficiency': 'Fluent'}, {'proficiency': 'Native'}),
}


@pytest.mark.parametrize('section', sorted(SAMPLES))
def test_owner_can_create_update_delete(section, alice):
    alice_client, user = alice
    create_payload, update_payload = SAMPLES[section]

    response = alice_client.post(f'/api/{section}', json=create_payload)
    assert response.status_code == 201
    record = response.get_json()
    assert record['userId'] == user['id']
    for key, value in create_payload.items():
        assert record[key] == value

    response = alice_client.patch(f"/api/{section}/{record['id']}", json=update_payload)
    assert response.status_code == 200
    updated = response.get_json()
    for key, value in update_payload.items():
        assert updated[key] == value
    assert updated['id'] == record['id']

    response = alice_client.delete(f"/api/{section}/{record['id']}")
    assert response.status_code == 200
    assert alice_client.get(f"/api/{section}?userId={user['id']}").get_json() == []


@pytest.mark.parametrize('section', sorted(SAMPLES))
def test_other_user_cannot_modify_or_delete(section, alice, bob):
    alice_client, alice_user = alice
    bob_client, _ = bob
    create_payload, update_payload = SAMPLES[section]
    record = alice_client.post(f'/api/{section}', json=create_payload).get_json()

    response = bob_client.patch(f"/api/{section}/{record['id']}", json=update_payload)
    assert response.status_code == 403
    assert response.get_json()['error'] == 'Forbidden'

    response = bob_client.delete(f"/api/{section}/{record['id']}")
    assert response.status_code == 403

    listed = bob_client.get(f"/api/{section}?userId={alice_user['id']}").get_json()
    assert listed == [record]


@pytest.mark.parametrize('section', sorted(SAMPLES))
def test_mutations_require_session(section, client, alice):
    alice_client, _ = alice
    create_payload, update_payload = SAMPLES[section]
    record = alice_client.post(f'/api/{section}', json=create_payload).get_json()

    assert client.post(f'/api/{section}', json=create_payload).status_code == 401
    assert client.patch(f"/api/{section}/{record['id']}", json=update_payload).status_code == 401
    assert client.delete(f"/api/{section}/{record['id']}").status_code == 401


@pytest.mark.parametrize('section', sorted(SAMPLES))
def test_missing_record_is_not_found(section, alice):
    alice_client, _ = alice
    _, update_payload = SAMPLES[section]
    response = alice_client.patch(f'/api/{section}/does-not-exist', json=update_payload)
    assert response.status_code == 404
    assert response.get_json()['error'] == 'NotFound'
    assert alice_client.delete(f'/api/{section}/does-not-exist').status_code == 404


def test_list_never_includes_other_owners_records(signup):
    owners = [signup(f'user{i}@example.com', 'secret1', f'User {i}') for i in range(3)]
    for index, (owner_client, _) in enumerate(owners):
        for n in range(index + 1):
            owner_client.post('/api/projects', json={'title': f'Project {index}-{n}'})

    viewer_client = owners[0][0]
    for index, (_, user) in enumerate(owners):
        records = viewer_client.get(f"/api/projects?userId={user['id']}").get_json()
        assert len(records) == index + 1
        assert {r['userId'] for r in records} == {user['id']}
        assert {r['title'] for r in records} == {f'Project {index}-{n}' for n in range(index + 1)}


def test_list_is_public(client, alice):
    alice_client, user = alice
    alice_client.post('/api/languages', json={'language': 'Urdu'})
    records = client.get(f"/api/languages?userId={user['id']}").get_json()
    assert [r['language'] for r in records] == ['Urdu']
    assert records[0]['proficiency'] == 'Native/Fluent'


def test_list_defaults_to_session_user_then_site_owner(client, alice, bob):
    alice_client, _ = alice
    bob_client, _ = bob
    alice_client.post('/api/certifications', json={'title': 'Alice cert'})
    bob_client.post('/api/certifications', json={'title': 'Bob cert'})

    assert [r['title'] for r in bob_client.get('/api/certifications').get_json()] == ['Bob cert']
    # Anonymous visitors see the first registered user's portfolio
    assert [r['title'] for r in client.get('/api/certifications').get_json()] == ['Alice cert']


def test_list_for_unknown_owner_is_not_found(client):
    response = client.get('/api/education?userId=nobody')
    assert response.status_code == 404


def test_list_with_no_users_is_empty(client):
    assert client.get('/api/skills').get_json() == []


def test_create_ignores_caller_supplied_owner(alice, bob):
    alice_client, alice_user = alice
    _, bob_user = bob
    response = alice_client.post('/api/projects', json={
        'title': 'Mine', 'userId': bob_user['id'], 'id': 'chosen-id'})
    record = response.get_json()
    assert record['userId'] == alice_user['id']
    assert record['id'] != 'chosen-id'


def test_update_cannot_move_record_to_another_owner(alice, bob):
    alice_client, alice_user = alice
    _, bob_user = bob
    record = alice_client.post('/api/projects', json={'title': 'Mine'}).get_json()
    response = alice_client.patch(f"/api/projects/{record['id']}",
                                  json={'title': 'Still mine', 'userId': bob_user['id']})
    assert response.status_code == 200
    assert response.get_json()['userId'] == alice_user['id']


def test_required_fields_are_validated(alice):
    alice_client, _ = alice
    response = alice_client.post('/api/education', json={'institution': 'City College'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'ValidationError'

    response = alice_client.post('/api/experience', json={'company': '   ', 'role': 'Intern'})
    assert response.status_code == 400

    record = alice_client.post('/api/projects', json={'title': 'Site'}).get_json()
    response = alice_client.patch(f"/api/projects/{record['id']}", json={'title': ''})
    assert response.status_code == 400
    response = alice_client.patch(f"/api/projects/{record['id']}", json={'unknown': 'x'})
    assert response.status_code == 400


def test_project_link_is_optional(alice):
    alice_client, _ = alice
    record = alice_client.post('/api/projects', json={'title': 'Site', 'link': '  '}).get_json()
    assert record['link'] is None
    assert record['description'] == ''


def test_skill_items_from_comma_separated_string(alice, app):
    alice_client, _ = alice
    response = alice_client.post('/api/skills', json={
        'category': 'Technical', 'items': 'Go, Rust,, ,Python '})
    assert response.status_code == 201
    assert response.get_json()['items'] == ['Go', 'Rust', 'Python']

    with app.app_context():
        skill = db.session.get(Skill, response.get_json()['id'])
        assert skill.items == ['Go', 'Rust', 'Python']


def test_skill_items_list_drops_blank_entries(alice):
    alice_client, _ = alice
    response = alice_client.post('/api/skills', json={
        'category': 'Design', 'items': ['  Figma ', '', '   ', 'Canva']})
    assert response.get_json()['items'] == ['Figma', 'Canva']


@pytest.mark.parametrize('items', ['', ' , ,', [], ['  '], None, 42])
def test_skill_items_must_not_be_empty(alice, items):
    alice_client, _ = alice
    response = alice_client.post('/api/skills', json={'category': 'Technical', 'items': items})
    assert response.status_code == 400
    assert alice_client.get('/api/skills').get_json() == []


def test_forbidden_delete_leaves_skill_listed(alice, bob):
    alice_client, alice_user = alice
    bob_client, _ = bob
    skill = alice_client.post('/api/skills', json={'category': 'Technical', 'items': ['Go', 'Rust']}).get_json()

    response = bob_client.delete(f"/api/skills/{skill['id']}")
    assert response.status_code == 403

    skills = alice_client.get(f"/api/skills?userId={alice_user['id']}").get_json()
    assert skills == [skill]
    assert skills[0]['items'] == ['Go', 'Rust']


def test_non_object_body_is_rejected(alice):
    alice_client, _ = alice
    response = alice_client.post('/api/education', json=['institution'])
    assert response.status_code == 400
