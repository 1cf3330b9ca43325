# meowmatch/pages/test_pages.py
from meowmatch.conftest import make_cat_doc


def test_admin_page_redirects_anonymous_visitor(client, db):
    db.collection('cats').document('luna').set(make_cat_doc(name="Luna"))

    response = client.get('/admin')

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/auth')
    assert b'data-action="delete"' not in response.data


def test_admin_page_redirects_user_without_editor_role(client, db, sign_in_as):
    db.collection('cats').document('luna').set(make_cat_doc(name="Luna"))
    sign_in_as('visitor', 'user')

    response = client.get('/admin')

    assert response.status_code == 302
    assert b'data-action="delete"' not in response.data


def test_admin_page_shows_controls_for_staff(client, db, sign_in_as):
    db.collection('cats').document('luna').set(make_cat_doc(name="Luna", is_available=False))
    sign_in_as('staff-1', 'shelter_staff')

    response = client.get('/admin')

    assert response.status_code == 200
    assert b'data-action="create"' in response.data
    assert b'data-action="delete"' in response.data
    assert b'Adopted' in response.data


def test_catalog_page_lists_cats(client, db):
    db.collection('cats').document('luna').set(make_cat_doc(name="Luna", minutes_ago=1))
    db.collection('cats').document('tom').set(make_cat_doc(name="Tom", age="senior", minutes_ago=2))

    response = client.get('/?age=senior')

    assert response.status_code == 200
    assert b'Tom' in response.data
    assert b'<h3>Luna</h3>' not in response.data
    assert b'Showing 1 cat' in response.data


def test_catalog_page_empty_state(client):
    response = client.get('/')
    assert response.status_code == 200
    assert b'No Cats Found' in response.data
    assert b'Try adjusting your filters' in response.data


def test_catalog_page_empty_favorites_message(client, db):
    db.collection('cats').document('luna').set(make_cat_doc(name="Luna"))
    response = client.get('/?favorites_only=true')
    assert b"You haven't added any favorites yet" in response.data


def test_catalog_page_survives_backend_failure(client, db):
    db.fail_reads = True
    response = client.get('/')
    assert response.status_code == 200
    assert b'No Cats Found' in response.data


def test_auth_page(client, sign_in_as):
    sign_in_as('visitor', 'user')
    response = client.get('/auth')
    assert response.status_code == 200
    assert b'does not have access to the admin dashboard' in response.data


def test_catalog_controls_are_wired(client, db):
    db.collection('cats').document('luna').set(make_cat_doc(name="Luna"))
    response = client.get('/')

    assert b'/static/meowmatch.js' in response.data
    assert b'data-cat-name="Luna"' in response.data
    assert b'<form data-form="adopt">' in response.data
    assert client.get('/static/meowmatch.js').status_code == 200


def test_admin_edit_button_carries_form_values(client, db, sign_in_as):
    db.collection('cats').document('luna').set(make_cat_doc(name="Luna", personality=["calm"]))
    sign_in_as('admin-1', 'admin')

    html = client.get('/admin').get_data(as_text=True)

    assert '<form data-form="cat-editor">' in html
    assert '"personality": ["calm"]' in html
    assert 'created_at' not in html
    assert 'data-action="sign-out"' in html


def test_auth_page_sign_in_form(client, app):
    app.config['FIREBASE_WEB_API_KEY'] = None
    assert b'Sign-in is not configured' in client.get('/auth').data

    app.config['FIREBASE_WEB_API_KEY'] = "web-key"
    app.config['FIREBASE_AUTH_DOMAIN'] = "meowmatch.firebaseapp.com"
    html = client.get('/auth').get_data(as_text=True)

    assert '<form data-form="sign-in">' in html
    assert 'firebase-auth-compat.js' in html
    assert '"apiKey": "web-key"' in html
